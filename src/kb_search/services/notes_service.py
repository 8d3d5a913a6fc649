"""Free-form notes analysis.

Pure functions with no index dependency: turns a user's support notes into a
search query plus category and tag hints for the knowledge base finder.
"""

from collections import Counter
from typing import ClassVar

from kb_search.domain.model import TokenizeOptions
from kb_search.domain.search import ProcessedNotes
from kb_search.search.analyzers import tokenize_text


class NotesAnalysisService:
    """Extract key terms, categories and tags from user notes.

    Categories and tags come from keyword tables matched as plain substrings
    of the lowercased notes, so "apple" also matches "pineapple". Key terms
    come from the stemmed token frequencies.
    """

    MAX_KEY_TERMS: ClassVar[int] = 10

    TOKENIZE_OPTIONS: ClassVar[TokenizeOptions] = TokenizeOptions()

    CATEGORY_KEYWORDS: ClassVar[dict[str, list[str]]] = {
        "hardware": [
            "computer",
            "device",
            "laptop",
            "macbook",
            "pc",
            "monitor",
            "keyboard",
            "mouse",
            "printer",
            "hardware",
        ],
        "software": ["software", "program", "app", "application", "install", "update", "version"],
        "network": ["network", "wifi", "internet", "connection", "router", "modem", "ethernet"],
        "account": ["account", "password", "login", "username", "email", "access"],
        "operating_system": ["windows", "macos", "linux", "os", "operating", "system"],
        "mobile": ["phone", "mobile", "tablet", "iphone", "android", "ipad"],
    }

    TAG_KEYWORDS: ClassVar[dict[str, list[str]]] = {
        "error": ["error", "issue", "problem", "crash", "bug", "failed"],
        "setup": ["setup", "install", "configuration", "configure"],
        "performance": ["slow", "performance", "speed", "lag", "freeze"],
        "update": ["update", "upgrade", "version", "patch"],
        "security": ["security", "virus", "malware", "protect", "breach", "hack"],
        "data": ["data", "file", "backup", "storage", "save", "lost", "recover"],
        "macbook": ["mac", "macbook", "macos", "apple"],
        "windows": ["windows", "pc", "microsoft"],
        "mobile": ["mobile", "phone", "iphone", "android", "tablet", "ipad"],
    }

    def key_terms(self, notes: str) -> list[str]:
        """Return the most frequent stemmed terms, ties in first-seen order."""
        counts = Counter(tokenize_text(notes, self.TOKENIZE_OPTIONS))
        # Counter keeps first-seen order and sorted() is stable
        ranked = sorted(counts, key=lambda term: counts[term], reverse=True)
        return ranked[: self.MAX_KEY_TERMS]

    def categories(self, notes: str) -> list[str]:
        return self._match_table(notes, self.CATEGORY_KEYWORDS)

    def tags(self, notes: str) -> list[str]:
        return self._match_table(notes, self.TAG_KEYWORDS)

    def process(self, notes: str) -> ProcessedNotes:
        key_terms = self.key_terms(notes)
        return ProcessedNotes(
            query=" ".join(key_terms),
            categories=self.categories(notes),
            tags=self.tags(notes),
            key_terms=key_terms,
        )

    @staticmethod
    def _match_table(notes: str, table: dict[str, list[str]]) -> list[str]:
        lowered = notes.lower()
        return [label for label, keywords in table.items() if any(keyword in lowered for keyword in keywords)]
