"""Command line entry point for ad-hoc searches over a JSON document file.

Examples:
    kb-search search docs.json "reset password"
    kb-search similar docs.json 1 --limit 3
    kb-search notes docs.json "my laptop wifi keeps dropping"
    kb-search suggest pass password passport compass --full
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys
from typing import Any

import orjson
from pydantic import TypeAdapter, ValidationError

from kb_search.builder import new_knowledge_base_finder
from kb_search.config import Settings
from kb_search.domain.model import Document
from kb_search.exceptions import DocumentNotFoundError
from kb_search.observability import configure_logging
from kb_search.search.autocomplete import find_autocomplete_suggestions


logger = logging.getLogger(__name__)

_DOCUMENTS_ADAPTER = TypeAdapter(list[Document])


class DocumentLoadError(RuntimeError):
    """Raised when the documents file cannot be read or validated."""


def load_documents(path: Path) -> list[Document]:
    """Read a JSON array of documents from ``path``."""

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc
    try:
        return _DOCUMENTS_ADAPTER.validate_python(orjson.loads(raw))
    except orjson.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc
    except ValidationError as exc:
        raise DocumentLoadError(f"Invalid documents in {path}: {exc}") from exc


def build_argument_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kb-search",
        description="Search a JSON knowledge base with TF-IDF ranking",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Rank documents for a query")
    search.add_argument("documents", type=Path, help="JSON array of documents")
    search.add_argument("query", help="Search text")
    search.add_argument("--limit", type=int, default=settings.search_limit, help="Maximum results")
    search.add_argument("--min-score", type=float, default=settings.min_score, help="Minimum score")
    search.add_argument("--category", action="append", default=[], help="Preferred category (repeatable)")
    search.add_argument("--require-tag", action="append", default=[], help="Tag every result must carry")
    search.add_argument("--any-tag", action="append", default=[], help="Tag that boosts a result")

    similar = subparsers.add_parser("similar", help="Find documents similar to one document")
    similar.add_argument("documents", type=Path, help="JSON array of documents")
    similar.add_argument("doc_id", help="Source document id")
    similar.add_argument("--limit", type=int, default=settings.similar_limit, help="Maximum results")
    similar.add_argument("--min-score", type=float, default=settings.min_score, help="Minimum score")
    similar.add_argument("--include-self", action="store_true", help="Keep the source document in results")

    notes = subparsers.add_parser("notes", help="Match free-form notes against the knowledge base")
    notes.add_argument("documents", type=Path, help="JSON array of documents")
    notes.add_argument("notes", help="User notes")
    notes.add_argument("--limit", type=int, default=settings.search_limit, help="Maximum results")
    notes.add_argument("--min-score", type=float, default=settings.min_score, help="Minimum score")

    suggest = subparsers.add_parser("suggest", help="Autocomplete a partial string")
    suggest.add_argument("partial", help="Partial input")
    suggest.add_argument("candidates", nargs="+", help="Candidate completions")
    suggest.add_argument("--max", type=int, default=5, dest="max_suggestions", help="Maximum suggestions")
    suggest.add_argument("--min-score", type=float, default=0.1, help="Minimum score")
    suggest.add_argument("--full", action="store_true", help="Allow substring and token matches")

    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--json-logs", action="store_true", default=settings.log_json, help="Emit JSON logs")
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> Any:
    if args.command == "suggest":
        suggestions = find_autocomplete_suggestions(
            args.partial,
            args.candidates,
            max_suggestions=args.max_suggestions,
            min_score=args.min_score,
            prefix_only=not args.full,
        )
        return [item.model_dump() for item in suggestions]

    finder = new_knowledge_base_finder(load_documents(args.documents), settings=settings)
    logger.info("Loaded %d documents from %s", finder.get_document_count(), args.documents)

    if args.command == "search":
        results = finder.find_relevant_entries(
            args.query,
            limit=args.limit,
            min_score=args.min_score,
            categories=args.category,
            required_tags=args.require_tag,
            any_tags=args.any_tag,
        )
        return [result.model_dump() for result in results]
    if args.command == "similar":
        results = finder.search_index.find_similar_documents(
            args.doc_id,
            limit=args.limit,
            min_score=args.min_score,
            exclude_self=not args.include_self,
        )
        return [result.model_dump() for result in results]
    return finder.find_matches_for_user_notes(args.notes, limit=args.limit, min_score=args.min_score).model_dump()


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings()
    parser = build_argument_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.json_logs)

    try:
        payload = _run(args, settings)
    except DocumentLoadError as exc:
        logger.error("%s", exc)
        return 1
    except DocumentNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
