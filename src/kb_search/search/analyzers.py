"""Tokenizer pipeline shared by documents and queries.

The analyzer is composed the same way for every caller: text normalizers run
over the raw string, the result is split on whitespace, and token filters run
over the stream. Order matters and is fixed:

1. lowercase
2. punctuation -> space
3. whitespace split
4. minimum length
5. stop words
6. suffix stemming
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import lru_cache
import re
from typing import Protocol

from kb_search.domain.model import TokenizeOptions


DEFAULT_STOPWORDS = [
    "a",
    "an",
    "and",
    "are",
    "as",
    "at",
    "be",
    "but",
    "by",
    "for",
    "if",
    "in",
    "into",
    "is",
    "it",
    "no",
    "not",
    "of",
    "on",
    "or",
    "such",
    "that",
    "the",
    "their",
    "then",
    "there",
    "these",
    "they",
    "this",
    "to",
    "was",
    "will",
    "with",
]

STOP_WORDS: frozenset[str] = frozenset(DEFAULT_STOPWORDS)

# Applied in order, once each; every rule sees the previous rule's output.
_SUFFIX_RULES: tuple[tuple[str, str], ...] = (
    ("ies", "i"),
    ("es", "e"),
    ("s", ""),
    ("ing", ""),
    ("ed", ""),
)

_PUNCTUATION = re.compile(r"[^\w\s]")


class TextNormalizer(Protocol):
    """Protocol implemented by whole-text normalizers."""

    def __call__(self, text: str) -> str:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


def lowercase_text(text: str) -> str:
    return text.lower()


def strip_punctuation(text: str) -> str:
    return _PUNCTUATION.sub(" ", text)


class MinLengthFilter:
    """Drops tokens shorter than ``min_length`` characters."""

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            if len(token) >= self.min_length:
                yield token


class StopFilter:
    """Removes stopwords from the stream.

    Matching is exact, so a capitalised stop word survives when lowercasing
    is disabled.
    """

    def __init__(self, stopwords: Sequence[str] | None = None) -> None:
        self.stopwords = frozenset(stopwords) if stopwords is not None else STOP_WORDS

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            if token not in self.stopwords:
                yield token


def stem_word(word: str) -> str:
    """Strip common English suffixes with a fixed, single-pass rule chain.

    This is deliberately not a fixed point: ``"boxes"`` becomes ``"boxe"`` and
    ``"series"`` becomes ``"seri"``.

    >>> stem_word("boxes")
    'boxe'
    >>> stem_word("running")
    'runn'
    """
    for suffix, replacement in _SUFFIX_RULES:
        if word.endswith(suffix):
            word = word[: -len(suffix)] + replacement
    return word


class SuffixStemFilter:
    """Applies :func:`stem_word` to every token."""

    def __init__(self, stem: Callable[[str], str] = stem_word) -> None:
        self._stem = stem

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            yield self._stem(token)


class AnalyzerPipeline:
    """Composable analyzer (normalizers + whitespace split + filters)."""

    def __init__(
        self,
        normalizers: Sequence[TextNormalizer] | None = None,
        filters: Sequence[TokenFilter] | None = None,
    ) -> None:
        self.normalizers = list(normalizers or [])
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[str]:
        if not text:
            return []
        for normalize in self.normalizers:
            text = normalize(text)
        stream: Iterable[str] = text.split()
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)


def build_analyzer(options: TokenizeOptions) -> AnalyzerPipeline:
    """Assemble the pipeline described by ``options``."""

    normalizers: list[TextNormalizer] = []
    if options.lowercase:
        normalizers.append(lowercase_text)
    if options.remove_punctuation:
        normalizers.append(strip_punctuation)

    filters: list[TokenFilter] = [MinLengthFilter(options.min_token_length)]
    if options.remove_stop_words:
        filters.append(StopFilter())
    if options.stemming:
        filters.append(SuffixStemFilter())
    return AnalyzerPipeline(normalizers, filters)


@lru_cache(maxsize=32)
def get_analyzer(options: TokenizeOptions) -> AnalyzerPipeline:
    """Return a shared analyzer for ``options`` (options are immutable)."""

    return build_analyzer(options)


DEFAULT_TOKENIZE_OPTIONS = TokenizeOptions()


def tokenize_text(text: str, options: TokenizeOptions | None = None) -> list[str]:
    """Normalise ``text`` into index terms.

    Never fails; empty or whitespace-only text yields an empty list.

    >>> tokenize_text("The boxes are running!")
    ['boxe', 'runn']
    """
    return get_analyzer(options or DEFAULT_TOKENIZE_OPTIONS)(text)
