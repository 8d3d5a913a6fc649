"""In-memory search index - the composition root of the search stack.

Owns the document store, the inverted index and the tokenizer settings, and
hides them behind add/remove/search. All mutation goes through
``add_document`` and ``remove_document`` so the term cache and the postings
never drift apart.

Not thread-safe: callers sharing an index across threads must serialise
access to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging

from kb_search.domain.model import Document, FieldWeights, TokenizeOptions
from kb_search.domain.search import FieldMatch, SearchResult
from kb_search.exceptions import DocumentNotFoundError
from kb_search.search.analyzers import tokenize_text
from kb_search.search.document_store import DocumentStore
from kb_search.search.inverted_index import InvertedIndex
from kb_search.search.stats import calculate_idf, term_frequency
from kb_search.search.weighting import expand_weighted_text


logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_MIN_SCORE = 0.1
DEFAULT_SIMILAR_LIMIT = 5


def _match_fields(document: Document) -> list[tuple[str, str]]:
    """Raw field values checked for highlighting, in reporting order."""

    fields: list[tuple[str, str]] = []
    if document.title:
        fields.append(("title", document.title))
    if document.content:
        fields.append(("content", document.content))
    if document.tags:
        fields.append(("tags", document.joined_tags()))
    if document.category:
        fields.append(("category", document.category))
    for key, value in document.metadata.items():
        if isinstance(value, str) and value:
            fields.append((f"metadata.{key}", value))
    return fields


def _record_matches(document: Document, term: str, found: dict[str, list[str]]) -> None:
    for field_name, value in _match_fields(document):
        if term in value.lower():
            found.setdefault(field_name, []).append(term)


class SearchIndex:
    """TF-IDF search over weighted, tokenized documents.

    Args:
        field_weights: Per-field weights; defaults to title 3.0, content 1.0,
            tags 2.0, category 1.5 and no metadata.
        tokenize_options: Tokenizer switches applied to documents and queries
            alike.
    """

    def __init__(
        self,
        field_weights: FieldWeights | None = None,
        tokenize_options: TokenizeOptions | None = None,
    ) -> None:
        self._field_weights = field_weights or FieldWeights()
        self._tokenize_options = tokenize_options or TokenizeOptions()
        self._store = DocumentStore(self._analyze_document)
        self._index = InvertedIndex()

    @property
    def field_weights(self) -> FieldWeights:
        return self._field_weights

    @property
    def tokenize_options(self) -> TokenizeOptions:
        return self._tokenize_options

    @property
    def inverted_index(self) -> InvertedIndex:
        """Read access to the postings; mutate only through this class."""
        return self._index

    def _analyze_document(self, document: Document) -> list[str]:
        return tokenize_text(expand_weighted_text(document, self._field_weights), self._tokenize_options)

    def tokenize(self, text: str) -> list[str]:
        """Tokenize ``text`` with this index's options."""
        return tokenize_text(text, self._tokenize_options)

    def cached_terms(self, doc_id: str) -> list[str] | None:
        """Return the weighted term list cached for ``doc_id``."""
        terms = self._store.terms_for(doc_id)
        return list(terms) if terms is not None else None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_document(self, document: Document) -> None:
        """Index ``document``; an existing document with the same id is replaced."""

        if document.id in self._store:
            logger.debug("Replacing existing document %s", document.id)
            self.remove_document(document.id)
        terms = self._store.put(document)
        self._index.index(document.id, terms)
        logger.debug("Indexed document %s with %d terms", document.id, len(terms))

    def add_documents(self, documents: Iterable[Document]) -> None:
        for document in documents:
            self.add_document(document)

    def remove_document(self, doc_id: str) -> None:
        """Remove a document and its postings; unknown ids are ignored."""

        if self._store.discard(doc_id) is None:
            return
        self._index.deindex(doc_id)
        logger.debug("Removed document %s", doc_id)

    def rebuild_index(self) -> None:
        """Recompute every term cache entry and all postings from scratch."""

        self._index.clear()
        for doc_id, terms in self._store.refresh():
            self._index.index(doc_id, terms)
        logger.info(
            "Rebuilt search index: %d documents, %d terms",
            len(self._store),
            len(self._index),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(
        self,
        query: str,
        *,
        limit: int = DEFAULT_LIMIT,
        min_score: float = DEFAULT_MIN_SCORE,
        boost: Mapping[str, float] | None = None,
    ) -> list[SearchResult]:
        """Return documents ranked by TF-IDF relevance to ``query``.

        Args:
            query: Free text, tokenized like the documents.
            limit: Maximum number of results.
            min_score: Results scoring below this are dropped.
            boost: Optional per-document score multipliers (default 1.0).

        Returns:
            Results sorted by descending score; ties keep the order in which
            documents were first scored, query term by query term.
        """
        query_terms = self.tokenize(query)
        if not query_terms:
            return []

        boost = boost or {}
        total_docs = len(self._store)
        scores: dict[str, float] = {}
        matches: dict[str, dict[str, list[str]]] = {}

        for term in query_terms:
            doc_ids = self._index.postings(term)
            if not doc_ids:
                continue
            idf = calculate_idf(self._index.document_frequency(term), total_docs)
            for doc_id in doc_ids:
                doc_terms = self._store.terms_for(doc_id)
                document = self._store.get(doc_id)
                if doc_terms is None or document is None:
                    continue
                weight = term_frequency(term, doc_terms) * idf
                scores[doc_id] = scores.get(doc_id, 0.0) + weight * boost.get(doc_id, 1.0)
                _record_matches(document, term, matches.setdefault(doc_id, {}))

        results = [
            SearchResult(
                document=self._store.get(doc_id),
                score=score,
                matches=[
                    FieldMatch(field=field_name, matches=found)
                    for field_name, found in matches.get(doc_id, {}).items()
                ],
            )
            for doc_id, score in scores.items()
            if score >= min_score
        ]
        results.sort(key=lambda result: result.score, reverse=True)
        logger.debug(
            "Search for %d terms scored %d documents, %d above min_score",
            len(query_terms),
            len(scores),
            len(results),
        )
        return results[:limit]

    def find_similar_documents(
        self,
        doc_id: str,
        *,
        limit: int = DEFAULT_SIMILAR_LIMIT,
        min_score: float = DEFAULT_MIN_SCORE,
        exclude_self: bool = True,
    ) -> list[SearchResult]:
        """Rank other documents by similarity to ``doc_id``.

        The document's title, content and tags form the query.

        Raises:
            DocumentNotFoundError: ``doc_id`` is not indexed.
        """
        document = self._store.get(doc_id)
        if document is None:
            raise DocumentNotFoundError(doc_id)

        query = document.content
        if document.title:
            query = f"{document.title} {query}"
        if document.tags:
            query = f"{query} {document.joined_tags()}"

        results = self.search(query, limit=limit + (1 if exclude_self else 0), min_score=min_score)
        if exclude_self:
            results = [result for result in results if result.document.id != doc_id]
        return results[:limit]

    def get_all_documents(self) -> list[Document]:
        return self._store.documents()

    def get_document(self, doc_id: str) -> Document | None:
        return self._store.get(doc_id)

    def get_document_count(self) -> int:
        return len(self._store)
