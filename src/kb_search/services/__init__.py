"""Services built on top of the search index."""

from kb_search.services.knowledge_base import KnowledgeBaseFinder
from kb_search.services.notes_service import NotesAnalysisService


__all__ = ["KnowledgeBaseFinder", "NotesAnalysisService"]
