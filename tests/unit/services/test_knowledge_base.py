"""Unit tests for the knowledge base finder."""

import pytest

from kb_search.domain.model import Document
from kb_search.domain.search import NotesMatchResponse
from kb_search.services.knowledge_base import KnowledgeBaseFinder


pytestmark = pytest.mark.unit

OPS_DOCUMENTS = [
    Document(
        id="outage",
        title="Server outage",
        content="Server outage response steps",
        tags=["urgent", "ops"],
    ),
    Document(
        id="maintenance",
        title="Server maintenance",
        content="Server maintenance schedule",
        tags=["ops"],
    ),
    Document(id="lunch", content="Lunch menu"),
    Document(id="holiday", content="Holiday calendar"),
]


@pytest.fixture
def finder() -> KnowledgeBaseFinder:
    return KnowledgeBaseFinder(documents=OPS_DOCUMENTS)


class TestDocumentBoost:
    def test_neutral_by_default(self, finder):
        assert finder.document_boost(OPS_DOCUMENTS[0]) == 1.0

    def test_category_weight(self, finder):
        finder.set_category_weights({"network": 2.0})
        document = Document(id="n", content="x", category="network")
        assert finder.document_boost(document) == 2.0

    def test_tag_weights_compound(self, finder):
        finder.set_tag_weights({"a": 2.0, "b": 3.0})
        document = Document(id="t", content="x", tags=["a", "b", "c"])
        assert finder.document_boost(document) == pytest.approx(6.0)

    def test_category_filter_is_soft(self, finder):
        inside = Document(id="i", content="x", category="network")
        outside = Document(id="o", content="x", category="hardware")
        assert finder.document_boost(inside, categories=["network"]) == 1.5
        assert finder.document_boost(outside, categories=["network"]) == 0.5

    def test_required_tags_penalty_and_bonus(self, finder):
        assert finder.document_boost(OPS_DOCUMENTS[1], required_tags=["urgent"]) == pytest.approx(0.1)
        assert finder.document_boost(OPS_DOCUMENTS[0], required_tags=["urgent"]) == pytest.approx(2.0)
        assert finder.document_boost(OPS_DOCUMENTS[0], required_tags=["urgent", "db"]) == pytest.approx(1.5)

    def test_any_tags_only_reward(self, finder):
        assert finder.document_boost(OPS_DOCUMENTS[0], any_tags=["ops", "db"]) == pytest.approx(1.5)
        assert finder.document_boost(OPS_DOCUMENTS[0], any_tags=["db"]) == 1.0


class TestFindRelevantEntries:
    def test_required_tags_hard_filter(self, finder):
        # The penalised maintenance document still scores above zero ...
        soft_only = finder.search_index.search(
            "server",
            min_score=0.0,
            boost={"maintenance": finder.document_boost(OPS_DOCUMENTS[1], required_tags=["urgent"])},
        )
        assert "maintenance" in [result.document.id for result in soft_only]

        # ... but the post-filter removes it
        results = finder.find_relevant_entries("server", min_score=0.0, required_tags=["urgent"])
        assert [result.document.id for result in results] == ["outage"]

    def test_without_filters(self, finder):
        results = finder.find_relevant_entries("server", min_score=0.0)
        assert {result.document.id for result in results} == {"outage", "maintenance"}

    def test_tag_weights_change_ranking(self, finder):
        baseline = finder.find_relevant_entries("server", min_score=0.0)
        assert baseline[0].document.id == "maintenance"

        finder.set_tag_weights({"urgent": 3.0})
        boosted = finder.find_relevant_entries("server", min_score=0.0)
        assert boosted[0].document.id == "outage"

    def test_add_and_remove_documents(self, finder):
        finder.add_documents([Document(id="db", title="Database failover", content="Promote the replica")])
        assert finder.get_document_count() == 5
        finder.remove_document("db")
        assert finder.get_document_count() == 4


class TestUserNotes:
    @pytest.fixture
    def helpdesk(self) -> KnowledgeBaseFinder:
        return KnowledgeBaseFinder(
            documents=[
                Document(
                    id="1",
                    title="Password Reset",
                    content="How to reset your account password",
                    tags=["account", "security"],
                    category="account",
                ),
                Document(
                    id="2",
                    title="WiFi Setup",
                    content="Configure your wireless network connection",
                    tags=["network"],
                    category="network",
                ),
                Document(
                    id="3",
                    title="Printer Jam",
                    content="Clear paper from the printer tray",
                    tags=["hardware"],
                    category="hardware",
                ),
            ]
        )

    def test_process_user_notes(self, helpdesk):
        processed = helpdesk.process_user_notes("My laptop wifi keeps dropping. The wifi connection drops every hour.")

        assert processed.key_terms[0] == "wifi"
        assert processed.key_terms == [
            "wifi",
            "my",
            "laptop",
            "keep",
            "dropp",
            "connection",
            "drop",
            "every",
            "hour",
        ]
        assert processed.query == " ".join(processed.key_terms)
        assert processed.categories == ["hardware", "network"]
        assert processed.tags == []

    def test_find_matches_for_user_notes(self, helpdesk):
        response = helpdesk.find_matches_for_user_notes("wifi connection keeps dropping")

        assert isinstance(response, NotesMatchResponse)
        assert response.processed_info.categories == ["network"]
        assert [result.document.id for result in response.results] == ["2"]
