"""Knowledge base lookup on top of the search index.

Adds category and tag aware boosting around :meth:`SearchIndex.search` and a
notes-to-query helper for support style lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging

from kb_search.domain.model import Document, FieldWeights, TokenizeOptions
from kb_search.domain.search import NotesMatchResponse, ProcessedNotes, SearchResult
from kb_search.search.search_index import DEFAULT_LIMIT, DEFAULT_MIN_SCORE, SearchIndex
from kb_search.services.notes_service import NotesAnalysisService


logger = logging.getLogger(__name__)

# Soft category filter multipliers
CATEGORY_MATCH_BOOST = 1.5
CATEGORY_MISS_PENALTY = 0.5
# Applied when a document carries none of the required tags
REQUIRED_TAG_MISS_PENALTY = 0.1


def _overlap_boost(wanted: Sequence[str], tags: Sequence[str]) -> tuple[int, float]:
    match_count = sum(1 for tag in wanted if tag in tags)
    return match_count, 1 + match_count / len(wanted)


class KnowledgeBaseFinder:
    """Search index wrapper with category/tag weighting and filtering.

    Category and tag weights are multipliers applied at query time, so they
    can change without reindexing.
    """

    def __init__(
        self,
        documents: Iterable[Document] | None = None,
        field_weights: FieldWeights | None = None,
        tokenize_options: TokenizeOptions | None = None,
        category_weights: Mapping[str, float] | None = None,
        tag_weights: Mapping[str, float] | None = None,
        *,
        notes_service: NotesAnalysisService | None = None,
    ) -> None:
        self.search_index = SearchIndex(field_weights=field_weights, tokenize_options=tokenize_options)
        self._category_weights: dict[str, float] = dict(category_weights or {})
        self._tag_weights: dict[str, float] = dict(tag_weights or {})
        self._notes_service = notes_service or NotesAnalysisService()
        if documents:
            self.search_index.add_documents(documents)

    def add_documents(self, documents: Iterable[Document]) -> None:
        self.search_index.add_documents(documents)

    def remove_document(self, doc_id: str) -> None:
        self.search_index.remove_document(doc_id)

    def get_document_count(self) -> int:
        return self.search_index.get_document_count()

    def set_category_weights(self, weights: Mapping[str, float]) -> None:
        """Replace the category -> multiplier table."""
        self._category_weights = dict(weights)

    def set_tag_weights(self, weights: Mapping[str, float]) -> None:
        """Replace the tag -> multiplier table."""
        self._tag_weights = dict(weights)

    def document_boost(
        self,
        document: Document,
        *,
        categories: Sequence[str] = (),
        required_tags: Sequence[str] = (),
        any_tags: Sequence[str] = (),
    ) -> float:
        """Return the score multiplier for ``document`` under the given filters."""

        boost = 1.0
        if document.category:
            category_weight = self._category_weights.get(document.category)
            if category_weight:
                boost *= category_weight

        for tag in document.tags:
            tag_weight = self._tag_weights.get(tag)
            if tag_weight:
                boost *= tag_weight

        if categories:
            if document.category and document.category in categories:
                boost *= CATEGORY_MATCH_BOOST
            else:
                boost *= CATEGORY_MISS_PENALTY

        if required_tags:
            match_count, overlap = _overlap_boost(required_tags, document.tags)
            boost *= overlap if match_count else REQUIRED_TAG_MISS_PENALTY

        if any_tags:
            match_count, overlap = _overlap_boost(any_tags, document.tags)
            if match_count:
                boost *= overlap

        return boost

    def find_relevant_entries(
        self,
        query: str,
        *,
        limit: int = DEFAULT_LIMIT,
        min_score: float = DEFAULT_MIN_SCORE,
        categories: Sequence[str] | None = None,
        required_tags: Sequence[str] | None = None,
        any_tags: Sequence[str] | None = None,
    ) -> list[SearchResult]:
        """Search with category/tag boosting.

        Required tags are enforced twice: documents missing all of them are
        penalised before ranking, and results missing any of them are dropped
        afterwards. The post-filter runs on the already truncated result list,
        so fewer than ``limit`` results may come back.
        """
        categories = list(categories or [])
        required_tags = list(required_tags or [])
        any_tags = list(any_tags or [])

        boost = {
            document.id: self.document_boost(
                document,
                categories=categories,
                required_tags=required_tags,
                any_tags=any_tags,
            )
            for document in self.search_index.get_all_documents()
        }

        results = self.search_index.search(query, limit=limit, min_score=min_score, boost=boost)
        if not required_tags:
            return results

        filtered = [result for result in results if all(tag in result.document.tags for tag in required_tags)]
        if len(filtered) < len(results):
            logger.debug("Required tags %s removed %d results", required_tags, len(results) - len(filtered))
        return filtered

    def process_user_notes(self, notes: str) -> ProcessedNotes:
        """Derive a query, categories and tags from free-form notes."""
        return self._notes_service.process(notes)

    def find_matches_for_user_notes(
        self,
        notes: str,
        *,
        limit: int = DEFAULT_LIMIT,
        min_score: float = DEFAULT_MIN_SCORE,
    ) -> NotesMatchResponse:
        """Run :meth:`find_relevant_entries` with the query derived from ``notes``.

        Detected categories act as the soft category filter and detected tags
        as ``any_tags``.
        """
        processed = self.process_user_notes(notes)
        results = self.find_relevant_entries(
            processed.query,
            limit=limit,
            min_score=min_score,
            categories=processed.categories,
            any_tags=processed.tags,
        )
        return NotesMatchResponse(results=results, processed_info=processed)
