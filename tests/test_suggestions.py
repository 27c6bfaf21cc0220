"""Tests for the suggestion dropdown contract."""

from prefix_index import PrefixIndex
from suggestions import SuggestionBox, suggest


def _index(*words):
    idx = PrefixIndex()
    for w in words:
        idx.insert(w)
    return idx


class TestSuggest:
    def test_truncates_to_five(self):
        idx = _index("a1", "a2", "a3", "a4", "a5", "a6", "a7")
        assert suggest(idx, "a") == ["a1", "a2", "a3", "a4", "a5"]

    def test_empty_text_shows_nothing(self):
        idx = _index("economy")
        assert suggest(idx, "") == []

    def test_custom_limit(self):
        idx = _index("art", "arc", "arm")
        assert suggest(idx, "ar", limit=2) == ["art", "arc"]
        assert suggest(idx, "ar", limit=0) == []

    def test_alpha_order_sorts_before_truncating(self):
        idx = _index("zz", "zc", "zb", "za")
        assert suggest(idx, "z", limit=2, order="alpha") == ["za", "zb"]
        assert suggest(idx, "z", limit=2, order="insertion") == ["zz", "zc"]


class TestSuggestionBox:
    def test_typing_updates_suggestions(self):
        box = SuggestionBox(_index("Algorithm", "Artificial", "Blockchain"))
        assert box.type("a") == ["algorithm", "artificial"]
        assert box.type("b") == ["blockchain"]
        assert box.type("") == []

    def test_pick_sets_text_and_closes(self):
        box = SuggestionBox(_index("Algorithm", "Artificial"))
        box.type("A")
        assert box.pick(2) == "artificial"
        assert box.text == "artificial"
        assert box.suggestions == []

    def test_pick_out_of_range(self):
        box = SuggestionBox(_index("Algorithm"))
        box.type("al")
        assert box.pick(0) is None
        assert box.pick(2) is None
        assert box.text == "al"

    def test_submit_returns_text_and_closes(self):
        box = SuggestionBox(_index("Algorithm"), text="ignored")
        box.type("alg")
        assert box.submit() == "alg"
        assert box.suggestions == []

    def test_follows_index_after_clear(self):
        idx = _index("economy")
        box = SuggestionBox(idx)
        assert box.type("e") == ["economy"]
        idx.clear()
        assert box.type("e") == []
