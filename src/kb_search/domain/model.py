"""Domain model - documents and indexing configuration.

Value objects are immutable pydantic models:
- Document: the unit of indexing, replaced rather than edited
- FieldWeights: per-field influence on term frequency
- TokenizeOptions: normalisation switches shared by documents and queries
"""

from collections.abc import Mapping
import copy
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(value)))


class Document(BaseModel):
    """A searchable document.

    Only ``id`` and ``content`` are required. Updates are modelled as
    remove-then-add on the owning index. ``tags`` is a tuple and ``metadata``
    a read-only copy of the input, so an indexed document cannot drift from
    its cached terms.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    title: str | None = None
    tags: tuple[str, ...] = ()
    category: str | None = None
    metadata: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze_mapping(value)

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def joined_tags(self) -> str:
        return " ".join(self.tags)


class FieldWeights(BaseModel):
    """Field weights used when expanding a document into index terms.

    Known fields are named explicitly; metadata keys carry their own weights
    and default to zero, which keeps them out of the index.
    """

    model_config = ConfigDict(frozen=True)

    title: float = Field(default=3.0, ge=0.0)
    content: float = Field(default=1.0, ge=0.0)
    tags: float = Field(default=2.0, ge=0.0)
    category: float = Field(default=1.5, ge=0.0)
    metadata: Mapping[str, float] = Field(default_factory=dict, validate_default=True)

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        return _freeze_mapping(value)

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, float]) -> dict[str, float]:
        return dict(value)

    def metadata_weight(self, key: str) -> float:
        return self.metadata.get(key, 0.0)


class TokenizeOptions(BaseModel):
    """Switches controlling the tokenizer pipeline."""

    model_config = ConfigDict(frozen=True)

    lowercase: bool = True
    remove_stop_words: bool = True
    stemming: bool = True
    remove_punctuation: bool = True
    min_token_length: int = Field(default=2, ge=1)
