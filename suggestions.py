from typing import List, Optional

from config import MAX_SUGGESTIONS, SUGGESTION_ORDER
from prefix_index import PrefixIndex


def suggest(index: PrefixIndex, text: str, limit: int = MAX_SUGGESTIONS,
            order: str = SUGGESTION_ORDER) -> List[str]:
    """First `limit` stored keywords starting with `text`; empty text shows nothing."""
    if not text:
        return []
    found = index.find_suggestions(text)
    if order == "alpha":
        found = sorted(found)
    return found[:max(0, limit)]


class SuggestionBox:
    """Topic input plus the dropdown of suggestions under it."""

    def __init__(self, index: PrefixIndex, text: str = "", limit: int = MAX_SUGGESTIONS):
        self.index = index
        self.limit = limit
        self.text = text
        self.suggestions: List[str] = []

    def type(self, text: str) -> List[str]:
        self.text = text
        self.suggestions = suggest(self.index, text, limit=self.limit)
        return self.suggestions

    def pick(self, n: int) -> Optional[str]:
        """Select the n-th suggestion (1-based); None when out of range."""
        if not 1 <= n <= len(self.suggestions):
            return None
        self.text = self.suggestions[n - 1]
        self.suggestions = []
        return self.text

    def submit(self) -> str:
        self.suggestions = []
        return self.text
