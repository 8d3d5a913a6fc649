"""Unit tests for the command line interface."""

import logging

import orjson
import pytest

from kb_search import cli


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def documents_file(tmp_path, support_documents):
    path = tmp_path / "docs.json"
    path.write_bytes(orjson.dumps([document.model_dump() for document in support_documents]))
    return path


def _output(capsys):
    return orjson.loads(capsys.readouterr().out)


def test_search(documents_file, capsys):
    assert cli.main(["search", str(documents_file), "password"]) == 0

    payload = _output(capsys)
    assert [item["document"]["id"] for item in payload] == ["1"]
    assert payload[0]["score"] > 0


def test_similar(documents_file, capsys):
    assert cli.main(["similar", str(documents_file), "1", "--include-self"]) == 0
    assert [item["document"]["id"] for item in _output(capsys)] == ["1"]


def test_similar_unknown_document(documents_file):
    assert cli.main(["similar", str(documents_file), "missing"]) == 1


def test_notes(documents_file, capsys):
    assert cli.main(["notes", str(documents_file), "wifi connection keeps dropping"]) == 0
    payload = _output(capsys)
    assert payload["processed_info"]["categories"] == ["network"]


def test_suggest(capsys):
    assert cli.main(["suggest", "pa", "password", "compass"]) == 0
    assert _output(capsys) == [{"suggestion": "password", "score": 0.25}]


def test_missing_file(tmp_path):
    assert cli.main(["search", str(tmp_path / "missing.json"), "password"]) == 1


def test_invalid_documents(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text('[{"id": "1"}]')
    assert cli.main(["search", str(path), "password"]) == 1


def test_invalid_json(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text("not json")
    assert cli.main(["search", str(path), "password"]) == 1
