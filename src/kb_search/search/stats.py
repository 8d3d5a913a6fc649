"""Statistical helpers for TF-IDF scoring.

The functions here take plain term lists so they stay independent of the
index structures and can be unit tested on their own.
"""

from __future__ import annotations

from collections.abc import Sequence
import math


def term_frequency(term: str, doc_terms: Sequence[str]) -> float:
    """Return the share of ``doc_terms`` equal to ``term``."""

    if not doc_terms:
        return 0.0
    return doc_terms.count(term) / len(doc_terms)


def document_frequency(term: str, all_doc_terms: Sequence[Sequence[str]]) -> int:
    """Return how many term lists contain ``term``."""

    return sum(1 for doc_terms in all_doc_terms if term in doc_terms)


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``ln(N / (1 + df))``.

    The ``+1`` keeps the denominator positive. A term present in every
    document gets a small negative IDF, which down-weights ubiquitous terms.
    An empty corpus has IDF 0.
    """

    if total_docs <= 0:
        return 0.0
    return math.log(total_docs / (1 + doc_freq))


def inverse_document_frequency(term: str, all_doc_terms: Sequence[Sequence[str]]) -> float:
    """Return the smoothed IDF of ``term`` across ``all_doc_terms``."""

    return calculate_idf(document_frequency(term, all_doc_terms), len(all_doc_terms))


def tf_idf(term: str, doc_terms: Sequence[str], all_doc_terms: Sequence[Sequence[str]]) -> float:
    """Return ``term_frequency * inverse_document_frequency``."""

    return term_frequency(term, doc_terms) * inverse_document_frequency(term, all_doc_terms)
