"""Domain layer - documents, configuration records and result value objects.

Nothing here depends on the index implementation; the search package
consumes these types and produces the result objects.
"""

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


__all__ = [
    "BestMatch",
    "Document",
    "FieldMatch",
    "FieldWeights",
    "NotesMatchResponse",
    "ProcessedNotes",
    "RankedRecord",
    "Rating",
    "SearchResult",
    "Suggestion",
    "TokenizeOptions",
]
