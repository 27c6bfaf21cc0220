"""Prefix index over topic keywords, used for autocomplete."""

from __future__ import annotations

from typing import List


class IndexNode:
    """One character position along some inserted keyword."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        # dicts keep insertion order, which fixes suggestion order
        self.children: dict[str, IndexNode] = {}
        self.is_terminal: bool = False


class PrefixIndex:
    """
    Case-insensitive set of keywords with prefix lookup.

    Keywords are lowercased on insert and prefixes on lookup. Suggestions
    come back in pre-order depth-first order, children visited in the
    order their edges were first created.
    """

    def __init__(self):
        self.root = IndexNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = IndexNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def clear(self) -> None:
        self.root = IndexNode()
        self._size = 0

    def find_suggestions(self, prefix: str) -> List[str]:
        prefix = prefix.lower()
        node = self._walk(prefix)
        if node is None:
            return []

        out: List[str] = []
        # reversed pushes keep the first-inserted child on top of the stack
        stack = [(node, prefix)]
        while stack:
            cur, spelled = stack.pop()
            if cur.is_terminal:
                out.append(spelled)
            for ch, child in reversed(list(cur.children.items())):
                stack.append((child, spelled + ch))
        return out

    def _walk(self, s: str) -> IndexNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self._walk(word.lower())
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
