"""Unit tests for domain value objects."""

from pydantic import ValidationError
import pytest

from kb_search.domain.model import Document, FieldWeights, TokenizeOptions
from kb_search.domain.search import FieldMatch, SearchResult


pytestmark = pytest.mark.unit


class TestDocument:
    def test_optional_fields_default(self):
        document = Document(id="1", content="text")
        assert document.title is None
        assert document.tags == ()
        assert document.category is None
        assert document.metadata == {}

    def test_content_required(self):
        with pytest.raises(ValidationError):
            Document(id="1")  # type: ignore[call-arg]

    def test_frozen(self):
        document = Document(id="1", content="text")
        with pytest.raises(ValidationError):
            document.content = "changed"  # type: ignore[misc]

    def test_joined_tags(self):
        assert Document(id="1", content="x", tags=["a", "b"]).joined_tags() == "a b"

    def test_tags_and_metadata_are_read_only(self):
        source = {"owner": "ops"}
        document = Document(id="1", content="x", tags=["a"], metadata=source)
        assert document.tags == ("a",)
        with pytest.raises(TypeError):
            document.metadata["owner"] = "changed"  # type: ignore[index]
        source["owner"] = "changed"
        assert document.metadata["owner"] == "ops"

    def test_dump_gives_plain_containers(self):
        dumped = Document(id="1", content="x", tags=["a"], metadata={"owner": "ops"}).model_dump()
        assert dumped["tags"] == ("a",)
        assert dumped["metadata"] == {"owner": "ops"}
        assert type(dumped["metadata"]) is dict


class TestFieldWeights:
    def test_defaults(self):
        weights = FieldWeights()
        assert (weights.title, weights.content, weights.tags, weights.category) == (3.0, 1.0, 2.0, 1.5)
        assert weights.metadata_weight("anything") == 0.0

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            FieldWeights(title=-1.0)

    def test_metadata_read_only(self):
        weights = FieldWeights(metadata={"owner": 2.0})
        with pytest.raises(TypeError):
            weights.metadata["owner"] = 5.0  # type: ignore[index]
        assert weights.metadata_weight("owner") == 2.0


class TestTokenizeOptions:
    def test_min_token_length_positive(self):
        with pytest.raises(ValidationError):
            TokenizeOptions(min_token_length=0)

    def test_hashable(self):
        assert hash(TokenizeOptions()) == hash(TokenizeOptions())


def test_search_result_matched_fields():
    result = SearchResult(
        document=Document(id="1", content="x"),
        score=1.0,
        matches=[FieldMatch(field="title", matches=["x"]), FieldMatch(field="content", matches=["x"])],
    )
    assert result.matched_fields() == ["title", "content"]
