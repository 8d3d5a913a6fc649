"""Factories that wire indexes from :class:`~kb_search.config.Settings`."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from kb_search.config import Settings
from kb_search.domain.model import Document, FieldWeights, TokenizeOptions
from kb_search.search.search_index import SearchIndex
from kb_search.services.knowledge_base import KnowledgeBaseFinder


def new_search_index(
    field_weights: FieldWeights | None = None,
    tokenize_options: TokenizeOptions | None = None,
    *,
    settings: Settings | None = None,
) -> SearchIndex:
    """Create a search index, filling unset configuration from settings."""

    settings = settings or Settings()
    return SearchIndex(
        field_weights=field_weights or settings.field_weights(),
        tokenize_options=tokenize_options or settings.tokenize_options(),
    )


def new_knowledge_base_finder(
    documents: Iterable[Document] | None = None,
    field_weights: FieldWeights | None = None,
    tokenize_options: TokenizeOptions | None = None,
    category_weights: Mapping[str, float] | None = None,
    tag_weights: Mapping[str, float] | None = None,
    *,
    settings: Settings | None = None,
) -> KnowledgeBaseFinder:
    """Create a knowledge base finder, filling unset configuration from settings."""

    settings = settings or Settings()
    return KnowledgeBaseFinder(
        documents=documents,
        field_weights=field_weights or settings.field_weights(),
        tokenize_options=tokenize_options or settings.tokenize_options(),
        category_weights=category_weights,
        tag_weights=tag_weights,
    )
