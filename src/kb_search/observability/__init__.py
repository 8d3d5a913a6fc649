"""Observability module: structured logging and correlation context."""

from kb_search.observability.context import get_log_context, log_context, set_log_context
from kb_search.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_log_context",
    "log_context",
    "set_log_context",
]
