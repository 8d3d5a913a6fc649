"""Correlation ids for log records."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


# Per-context correlation data attached to every JSON log line
log_context: ContextVar[dict | None] = ContextVar("log_context", default=None)


def generate_correlation_id() -> str:
    """Generate a 32-char hex correlation ID."""
    return uuid4().hex


def get_log_context() -> dict:
    """Get the current context, creating a correlation id on first use."""
    ctx = log_context.get()
    if ctx is None or not ctx.get("correlation_id"):
        ctx = {"correlation_id": generate_correlation_id()}
        log_context.set(ctx)
    return ctx


def set_log_context(correlation_id: str, **extra: object) -> None:
    """Replace the context for the current execution context."""
    log_context.set({"correlation_id": correlation_id, **extra})
