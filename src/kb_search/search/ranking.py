"""Ad-hoc ranking of caller records without building an index.

Useful for small in-memory lists (menu entries, settings, contacts) where a
:class:`~kb_search.search.search_index.SearchIndex` would be overkill.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from kb_search.domain.search import RankedRecord
from kb_search.search.analyzers import tokenize_text


def _default_fields(records: Sequence[Mapping[str, Any]]) -> list[str]:
    if not records:
        return []
    first = records[0]
    return [key for key, value in first.items() if isinstance(value, str)]


def _field_score(value: str, query: str, query_tokens: list[str], *, tokenize: bool) -> float:
    if tokenize:
        field_tokens = tokenize_text(value)
        matching = [token for token in query_tokens if any(token in field_token for field_token in field_tokens)]
        return len(matching) / len(query_tokens)
    if value and query in value:
        return len(query) / len(value)
    return 0.0


def filter_and_rank_documents(
    records: Sequence[Mapping[str, Any]],
    query: str,
    *,
    fields: Sequence[str] | None = None,
    weights: Mapping[str, float] | None = None,
    ignore_case: bool = True,
    tokenize: bool = True,
    limit: int = 10,
    min_score: float = 0.1,
) -> list[RankedRecord]:
    """Score arbitrary records against ``query`` by substring/token overlap.

    Args:
        records: Mappings to rank; values are stringified before matching.
        query: Search text.
        fields: Keys to inspect; defaults to the string-valued keys of the
            first record.
        weights: Per-field multipliers; missing or zero weights count as 1.
        ignore_case: Lowercase query and field values before matching.
        tokenize: Compare tokens (with stemming) instead of raw substrings.
        limit: Maximum number of results.
        min_score: Results scoring below this are dropped.

    Returns:
        Records with their normalised score (weighted sum divided by the
        number of fields), best first.
    """
    fields = list(fields) if fields is not None else _default_fields(records)
    weights = weights or {}
    processed_query = query.lower() if ignore_case else query
    query_tokens = tokenize_text(processed_query) if tokenize else [processed_query]
    if not fields or not query_tokens:
        return []

    ranked: list[RankedRecord] = []
    for record in records:
        total = 0.0
        for field_name in fields:
            raw = record.get(field_name)
            if raw is None:
                continue
            value = str(raw).lower() if ignore_case else str(raw)
            score = _field_score(value, processed_query, query_tokens, tokenize=tokenize)
            total += score * (weights.get(field_name) or 1)
        normalized = total / len(fields)
        if normalized >= min_score:
            ranked.append(RankedRecord(record=dict(record), score=normalized))

    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]
