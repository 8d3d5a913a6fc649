"""Unit tests for edit distance, similarity and best-match lookup."""

import pytest

from kb_search.search.fuzzy import edit_distance, find_best_match, similarity


@pytest.mark.unit
class TestEditDistance:
    def test_identical_strings(self):
        assert edit_distance("hello", "hello") == 0
        assert edit_distance("", "") == 0

    def test_empty_strings(self):
        assert edit_distance("abc", "") == 3
        assert edit_distance("", "abc") == 3

    def test_kitten_sitting(self):
        assert edit_distance("kitten", "sitting") == 3

    @pytest.mark.parametrize(("a", "b"), [("kitten", "sitting"), ("flaw", "lawn"), ("abc", "x"), ("", "abc")])
    def test_symmetric(self, a, b):
        assert edit_distance(a, b) == edit_distance(b, a)

    def test_single_edits(self):
        assert edit_distance("cat", "cats") == 1
        assert edit_distance("cats", "cat") == 1
        assert edit_distance("cat", "bat") == 1

    def test_case_sensitive(self):
        assert edit_distance("Hello", "hello") == 1

    def test_transposition_costs_two(self):
        assert edit_distance("apple", "appel") == 2


@pytest.mark.unit
class TestSimilarity:
    def test_identical(self):
        assert similarity("abc", "abc") == 1.0
        assert similarity("", "") == 1.0

    def test_empty_side(self):
        assert similarity("", "x") == 0.0
        assert similarity("x", "") == 0.0

    def test_normalised_by_longest(self):
        assert similarity("abc", "abd") == pytest.approx(2 / 3)
        assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0


@pytest.mark.unit
class TestFindBestMatch:
    def test_best_match_with_stable_ties(self):
        result = find_best_match("appel", ["banana", "apple", "apply"])

        assert result.best_match is not None
        assert result.best_match.target == "apple"
        assert result.best_match.similarity == pytest.approx(0.6)
        assert [rating.target for rating in result.ratings] == ["apple", "apply", "banana"]

    def test_threshold_not_met(self):
        result = find_best_match("appel", ["banana", "apple"], min_similarity=0.9)

        assert result.best_match is None
        assert len(result.ratings) == 2

    def test_ignore_case_default(self):
        result = find_best_match("APPLE", ["apple"])
        assert result.best_match is not None
        assert result.best_match.similarity == 1.0

    def test_case_sensitive_mode(self):
        result = find_best_match("APPLE", ["apple"], ignore_case=False)
        assert result.best_match is None
        assert result.ratings[0].similarity == 0.0

    def test_keeps_original_candidate_text(self):
        result = find_best_match("wifi", ["WiFi Setup", "WIFI"])
        assert result.best_match is not None
        assert result.best_match.target == "WIFI"

    def test_no_candidates(self):
        result = find_best_match("anything", [])
        assert result.best_match is None
        assert result.ratings == []
