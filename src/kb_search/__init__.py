"""kb-search - in-memory full-text search with TF-IDF ranking.

Public API:
- SearchIndex: add/remove/rebuild documents and run ranked queries
- KnowledgeBaseFinder: category/tag boosted retrieval and notes matching
- Free functions: tokenizing, fuzzy matching, autocomplete, record ranking
"""

from kb_search.builder import new_knowledge_base_finder, new_search_index
from kb_search.domain.model import Document, FieldWeights, TokenizeOptions
from kb_search.domain.search import (
    BestMatch,
    FieldMatch,
    NotesMatchResponse,
    ProcessedNotes,
    RankedRecord,
    Rating,
    SearchResult,
    Suggestion,
)
from kb_search.exceptions import DocumentNotFoundError, KbSearchError
from kb_search.search.analyzers import tokenize_text
from kb_search.search.autocomplete import find_autocomplete_suggestions
from kb_search.search.fuzzy import edit_distance, find_best_match, similarity
from kb_search.search.ranking import filter_and_rank_documents
from kb_search.search.search_index import SearchIndex
from kb_search.search.stats import inverse_document_frequency, term_frequency, tf_idf
from kb_search.services.knowledge_base import KnowledgeBaseFinder


__all__ = [
    "BestMatch",
    "Document",
    "DocumentNotFoundError",
    "FieldMatch",
    "FieldWeights",
    "KbSearchError",
    "KnowledgeBaseFinder",
    "NotesMatchResponse",
    "ProcessedNotes",
    "RankedRecord",
    "Rating",
    "SearchIndex",
    "SearchResult",
    "Suggestion",
    "TokenizeOptions",
    "edit_distance",
    "filter_and_rank_documents",
    "find_autocomplete_suggestions",
    "find_best_match",
    "inverse_document_frequency",
    "new_knowledge_base_finder",
    "new_search_index",
    "similarity",
    "term_frequency",
    "tf_idf",
    "tokenize_text",
]
