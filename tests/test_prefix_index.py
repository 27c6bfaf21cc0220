"""Tests for the keyword prefix index."""

import pytest

from prefix_index import PrefixIndex


@pytest.fixture
def index():
    return PrefixIndex()


class TestInsertAndQuery:
    def test_prefix_matches(self, index):
        for w in ("Artificial", "Algorithm", "Blockchain"):
            index.insert(w)
        assert index.find_suggestions("a") == ["artificial", "algorithm"]
        assert index.find_suggestions("al") == ["algorithm"]
        assert index.find_suggestions("z") == []

    def test_duplicate_insert_is_idempotent(self, index):
        index.insert("AI")
        index.insert("AI")
        assert index.find_suggestions("ai") == ["ai"]
        assert len(index) == 1

    def test_prefix_that_is_itself_a_word_comes_first(self, index):
        for w in ("Data", "Database", "Dataset"):
            index.insert(w)
        assert index.find_suggestions("data") == ["data", "database", "dataset"]

    @pytest.mark.parametrize("prefix", ["ai", "Ai", "AI", "aI"])
    def test_case_insensitive(self, index, prefix):
        index.insert("AI")
        assert index.find_suggestions(prefix) == ["ai"]

    def test_every_proper_prefix_finds_word(self, index):
        index.insert("Economy")
        for i in range(len("economy")):
            assert "economy" in index.find_suggestions("Economy"[:i])

    def test_no_false_positive(self, index):
        index.insert("market")
        assert index.find_suggestions("marketing") == []
        assert "mark" not in index.find_suggestions("mark")
        assert "mark" not in index


class TestOrdering:
    def test_children_follow_insertion_order(self, index):
        for w in ("zeta", "alpha", "zebra"):
            index.insert(w)
        # "ze" edge exists before "a", and "zet" before "zeb"
        assert index.find_suggestions("") == ["zeta", "zebra", "alpha"]

    def test_preorder_parent_before_children(self, index):
        for w in ("car", "cart", "ca", "cat"):
            index.insert(w)
        assert index.find_suggestions("c") == ["ca", "car", "cart", "cat"]


class TestClearAndEmpty:
    def test_clear_empties(self, index):
        index.insert("Economy")
        index.clear()
        assert index.find_suggestions("e") == []
        assert index.find_suggestions("") == []
        assert not index

    def test_empty_prefix_returns_all_distinct_words(self, index):
        index.insert("Economy")
        assert index.find_suggestions("") == ["economy"]
        for w in ("trade", "Trade", "tariff"):
            index.insert(w)
        assert sorted(index.find_suggestions("")) == ["economy", "tariff", "trade"]

    def test_fresh_index_is_empty(self, index):
        assert index.find_suggestions("") == []
        assert len(index) == 0

    def test_empty_string_marks_root(self, index):
        index.insert("")
        assert index.find_suggestions("") == [""]
        assert "" in index

    def test_repeated_characters_and_spaces(self, index):
        index.insert("aaa")
        index.insert("Climate Change")
        assert index.find_suggestions("aa") == ["aaa"]
        assert index.find_suggestions("climate c") == ["climate change"]

    def test_long_word_does_not_recurse(self, index):
        word = "x" * 5000
        index.insert(word)
        assert index.find_suggestions("x") == [word]
