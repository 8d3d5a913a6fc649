"""Domain models for search results.

Value objects produced per call and never stored by the index.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kb_search.domain.model import Document


class FieldMatch(BaseModel):
    """Query terms found in one document field, for highlighting."""

    model_config = ConfigDict(frozen=True)

    field: str
    matches: list[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    """A scored document plus the evidence explaining the match."""

    model_config = ConfigDict(frozen=True)

    document: Document
    score: float
    matches: list[FieldMatch] = Field(default_factory=list)

    def matched_fields(self) -> list[str]:
        return [match.field for match in self.matches]


class Rating(BaseModel):
    """Similarity of one candidate string to a query."""

    model_config = ConfigDict(frozen=True)

    target: str
    similarity: float


class BestMatch(BaseModel):
    """Outcome of a fuzzy best-match lookup.

    ``ratings`` holds every candidate, best first. ``best_match`` is the head
    of that list when it clears the similarity threshold.
    """

    model_config = ConfigDict(frozen=True)

    best_match: Rating | None = None
    ratings: list[Rating] = Field(default_factory=list)


class Suggestion(BaseModel):
    """An autocomplete candidate with its score."""

    model_config = ConfigDict(frozen=True)

    suggestion: str
    score: float


class RankedRecord(BaseModel):
    """A caller record scored by ``filter_and_rank_documents``."""

    model_config = ConfigDict(frozen=True)

    record: dict[str, Any]
    score: float


class ProcessedNotes(BaseModel):
    """Information extracted from free-form user notes."""

    model_config = ConfigDict(frozen=True)

    query: str
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    key_terms: list[str] = Field(default_factory=list)


class NotesMatchResponse(BaseModel):
    """Knowledge base matches for user notes plus the derived query."""

    model_config = ConfigDict(frozen=True)

    results: list[SearchResult]
    processed_info: ProcessedNotes
