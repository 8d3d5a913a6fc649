"""Fuzzy string matching.

Edit distance and a normalised similarity built on it. Both are used for
best-match lookups over candidate lists; autocomplete relies on the same
similarity scale.
"""

from __future__ import annotations

from collections.abc import Sequence

from kb_search.domain.search import BestMatch, Rating


DEFAULT_MIN_SIMILARITY = 0.4


def edit_distance(s1: str, s2: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Unit cost for insertions, deletions and substitutions. Comparison is
    case-sensitive.

    Examples:
        >>> edit_distance("kitten", "sitting")
        3
        >>> edit_distance("hello", "hallo")
        1
        >>> edit_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Use shorter string as columns for space efficiency
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)

    # Only need two rows at a time
    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def similarity(s1: str, s2: str) -> float:
    """Return similarity in ``[0, 1]``: 1 for identical, 0 if either is empty."""

    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0
    return 1.0 - edit_distance(s1, s2) / max(len(s1), len(s2))


def find_best_match(
    query: str,
    candidates: Sequence[str],
    *,
    min_similarity: float = DEFAULT_MIN_SIMILARITY,
    ignore_case: bool = True,
) -> BestMatch:
    """Rate every candidate against ``query`` and pick the closest one.

    Args:
        query: String to look up.
        candidates: Strings to compare against, in caller order.
        min_similarity: Threshold the top rating must reach to be reported
            as ``best_match``.
        ignore_case: Case-fold both sides before comparing.

    Returns:
        BestMatch with all ratings sorted best first (ties keep input order)
        and the best match, or ``None`` when nothing clears the threshold.
    """
    probe = query.lower() if ignore_case else query
    ratings = [
        Rating(target=candidate, similarity=similarity(probe, candidate.lower() if ignore_case else candidate))
        for candidate in candidates
    ]
    ratings.sort(key=lambda rating: rating.similarity, reverse=True)

    best = ratings[0] if ratings and ratings[0].similarity >= min_similarity else None
    return BestMatch(best_match=best, ratings=ratings)
