"""Unit tests for notes analysis."""

import pytest

from kb_search.services.notes_service import NotesAnalysisService


@pytest.mark.unit
class TestNotesAnalysisService:
    @pytest.fixture
    def service(self) -> NotesAnalysisService:
        return NotesAnalysisService()

    def test_tags_and_categories_follow_table_order(self, service):
        notes = "Outlook crashes after the update on my iPhone"

        assert service.tags(notes) == ["error", "update", "mobile"]
        assert service.categories(notes) == ["software", "mobile"]

    def test_keywords_match_as_substrings(self, service):
        # "apple" inside "pineapple" still counts
        assert "macbook" in service.tags("pineapple recipe")

    def test_key_terms_capped(self, service):
        notes = "alpha bravo charlie delta echo foxtrot golf hotel india juliet kilo lima"
        assert len(service.key_terms(notes)) == NotesAnalysisService.MAX_KEY_TERMS
        assert service.key_terms(notes)[0] == "alpha"

    def test_key_terms_by_frequency_then_first_seen(self, service):
        assert service.key_terms("zulu yankee yankee xray zulu yankee") == ["yankee", "zulu", "xray"]

    def test_empty_notes(self, service):
        processed = service.process("")
        assert processed.query == ""
        assert processed.key_terms == []
        assert processed.categories == []
        assert processed.tags == []
