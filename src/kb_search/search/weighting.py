"""Field weighting by text repetition.

A field with weight ``w`` contributes ``floor(w)`` full copies of its text
plus, for a fractional remainder ``r``, the first ``floor(len(text) * r)``
characters once more. Tokenizing the combined string then yields term counts
proportional to the configured weights.
"""

from __future__ import annotations

from collections.abc import Iterator
import math

from kb_search.domain.model import Document, FieldWeights


def repeat_weighted(text: str, weight: float) -> Iterator[str]:
    """Yield the weighted copies of ``text`` for ``weight``."""

    repetitions = math.floor(weight)
    for _ in range(repetitions):
        yield text
    remainder = weight - repetitions
    if remainder > 0:
        yield text[: math.floor(len(text) * remainder)]


def document_fields(document: Document) -> list[tuple[str, str]]:
    """Return ``(field, text)`` pairs for the known fields that are present."""

    fields = [("content", document.content)]
    if document.title:
        fields.append(("title", document.title))
    if document.tags:
        fields.append(("tags", document.joined_tags()))
    if document.category:
        fields.append(("category", document.category))
    return fields


def expand_weighted_text(document: Document, weights: FieldWeights) -> str:
    """Combine a document's fields into one weighted string for tokenizing."""

    pieces: list[str] = []
    for field_name, text in document_fields(document):
        pieces.extend(repeat_weighted(text, getattr(weights, field_name)))

    for key, value in document.metadata.items():
        weight = weights.metadata_weight(key)
        if weight > 0 and isinstance(value, str):
            pieces.extend(repeat_weighted(value, weight))

    return "".join(f" {piece}" for piece in pieces)
