"""Term -> document id postings with incremental maintenance.

A term is a key only while at least one document references it; removing the
last document for a term drops the term. Posting sets are insertion-ordered
dicts so candidates come back in indexing order.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging


logger = logging.getLogger(__name__)


class InvertedIndex:
    """Maps each term to the set of document ids whose terms contain it."""

    def __init__(self) -> None:
        self._postings: dict[str, dict[str, None]] = {}

    def index(self, doc_id: str, terms: Iterable[str]) -> None:
        """Register ``doc_id`` under every unique term."""

        for term in dict.fromkeys(terms):
            self._postings.setdefault(term, {})[doc_id] = None

    def deindex(self, doc_id: str) -> int:
        """Remove ``doc_id`` from every posting set and prune empty terms.

        Scans all terms rather than the document's own term list, so stale
        ids are removed even if the caller no longer has the terms.

        Returns:
            Number of terms dropped because they became empty.
        """
        pruned = 0
        for term in list(self._postings):
            postings = self._postings[term]
            postings.pop(doc_id, None)
            if not postings:
                del self._postings[term]
                pruned += 1
        if pruned:
            logger.debug("Pruned %d empty terms after removing %s", pruned, doc_id)
        return pruned

    def clear(self) -> None:
        self._postings.clear()

    def postings(self, term: str) -> tuple[str, ...]:
        """Return the ids containing ``term`` in indexing order (empty when unknown)."""

        return tuple(self._postings.get(term, ()))

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(term, ()))

    def terms(self) -> list[str]:
        return list(self._postings)

    def snapshot(self) -> dict[str, frozenset[str]]:
        """Return an immutable copy of all postings, for comparisons."""

        return {term: frozenset(ids) for term, ids in self._postings.items()}

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)
