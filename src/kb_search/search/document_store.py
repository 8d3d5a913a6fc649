"""Live documents and their tokenized term cache.

The store keeps documents in insertion order so ranking ties and
``get_all_documents`` are deterministic. Every stored document has exactly
one cache entry; both are written and removed together.
"""

from __future__ import annotations

from collections.abc import Callable

from kb_search.domain.model import Document


class DocumentStore:
    """Documents keyed by id plus their cached index terms."""

    def __init__(self, analyze: Callable[[Document], list[str]]) -> None:
        self._analyze = analyze
        self._documents: dict[str, Document] = {}
        self._terms: dict[str, list[str]] = {}

    def put(self, document: Document) -> list[str]:
        """Store ``document`` and return its freshly computed terms."""

        terms = self._analyze(document)
        self._documents[document.id] = document
        self._terms[document.id] = terms
        return terms

    def discard(self, doc_id: str) -> Document | None:
        """Drop a document and its cache entry; return it if it was present."""

        document = self._documents.pop(doc_id, None)
        if document is not None:
            del self._terms[doc_id]
        return document

    def refresh(self) -> list[tuple[str, list[str]]]:
        """Recompute every cache entry and return ``(doc_id, terms)`` pairs."""

        self._terms = {doc_id: self._analyze(document) for doc_id, document in self._documents.items()}
        return list(self._terms.items())

    def get(self, doc_id: str) -> Document | None:
        return self._documents.get(doc_id)

    def terms_for(self, doc_id: str) -> list[str] | None:
        return self._terms.get(doc_id)

    def all_terms(self) -> list[list[str]]:
        return list(self._terms.values())

    def documents(self) -> list[Document]:
        return list(self._documents.values())

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
