"""Autocomplete suggestions over a caller-supplied candidate list."""

from __future__ import annotations

from collections.abc import Sequence

from kb_search.domain.model import TokenizeOptions
from kb_search.domain.search import Suggestion
from kb_search.search.analyzers import tokenize_text


# Match scores by strategy, best first
_EXACT_SCORE = 1.0
_PREFIX_FACTOR = 0.9
_SUBSTRING_FACTOR = 0.75
_TOKEN_FACTOR = 0.5

_TOKEN_OPTIONS = TokenizeOptions(stemming=False)


def _token_overlap(partial: str, candidate: str) -> float:
    partial_tokens = tokenize_text(partial, _TOKEN_OPTIONS)
    if not partial_tokens:
        return 0.0
    candidate_tokens = tokenize_text(candidate, _TOKEN_OPTIONS)
    matching = [token for token in partial_tokens if any(other.startswith(token) for other in candidate_tokens)]
    return _TOKEN_FACTOR * (len(matching) / len(partial_tokens))


def _score_candidate(partial: str, candidate: str, *, prefix_only: bool) -> float:
    ratio = len(partial) / len(candidate) if candidate else 0.0
    if prefix_only:
        return ratio if candidate.startswith(partial) else 0.0

    if candidate == partial:
        return _EXACT_SCORE
    if candidate.startswith(partial):
        return _PREFIX_FACTOR * ratio
    if partial in candidate:
        return _SUBSTRING_FACTOR * ratio
    return _token_overlap(partial, candidate)


def find_autocomplete_suggestions(
    partial: str,
    candidates: Sequence[str],
    *,
    max_suggestions: int = 5,
    min_score: float = 0.1,
    prefix_only: bool = True,
) -> list[Suggestion]:
    """Rank ``candidates`` as completions of ``partial``.

    Matching is case-insensitive. In prefix mode only prefix matches score;
    otherwise exact, prefix, substring and token-prefix overlap are tried in
    that order.
    """
    if not partial:
        return []

    partial_lower = partial.lower()
    scored = [
        Suggestion(
            suggestion=candidate,
            score=_score_candidate(partial_lower, candidate.lower(), prefix_only=prefix_only),
        )
        for candidate in candidates
    ]
    kept = [item for item in scored if item.score >= min_score]
    kept.sort(key=lambda item: item.score, reverse=True)
    return kept[:max_suggestions]
