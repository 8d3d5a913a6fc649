"""Exceptions raised by the search engine."""


class KbSearchError(Exception):
    """Base class for kb-search errors."""


class DocumentNotFoundError(KbSearchError, KeyError):
    """Raised when an operation references a document id that is not indexed."""

    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        super().__init__(f'Document with ID "{doc_id}" not found')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
