# node.py
# A single vertex of the lexicon trie.
# Children are kept in a plain list sorted by letter so that every
# traversal visits them alphabetically without sorting at query time.

from __future__ import annotations
from typing import Iterator, List, Optional

ROOT_LETTER = " "


class LexiconNode:
    """
    A single node in the LexiconTrie.
    letter: the character on the edge leading into this node
    children: child nodes, ascending by letter, no duplicate letters
    terminal: True if the path from the root to here spells a stored word
    """

    __slots__ = ("letter", "children", "terminal")

    def __init__(self, letter: str = ROOT_LETTER) -> None:
        self.letter = letter
        self.children: List[LexiconNode] = []
        self.terminal = False

    # children ---------------------------------------------------------
    def _index(self, letter: str) -> int:
        # children are sorted, so a binary search finds the slot
        lo, hi = 0, len(self.children)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.children[mid].letter < letter:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def add_child(self, letter: str) -> LexiconNode:
        """
        Add a child for `letter`, keeping the children sorted.
        Idempotent: returns the existing child if the letter is already there.
        """
        i = self._index(letter)
        if i < len(self.children) and self.children[i].letter == letter:
            return self.children[i]
        child = LexiconNode(letter)
        self.children.insert(i, child)
        return child

    def get_child(self, letter: str) -> Optional[LexiconNode]:
        """Return the child for `letter`, or None if there is none."""
        i = self._index(letter)
        if i < len(self.children) and self.children[i].letter == letter:
            return self.children[i]
        return None

    def remove_child(self, letter: str) -> bool:
        """Detach the child for `letter` (and its subtree). False if absent."""
        i = self._index(letter)
        if i < len(self.children) and self.children[i].letter == letter:
            del self.children[i]
            return True
        return False

    # terminal flag -----------------------------------------------------
    def is_terminal(self) -> bool:
        return self.terminal

    def set_terminal(self, value: bool) -> None:
        self.terminal = value

    # iteration/debugging -----------------------------------------------
    def __iter__(self) -> Iterator[LexiconNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        letters = "".join(c.letter for c in self.children)
        mark = "*" if self.terminal else ""
        return f"LexiconNode({self.letter!r}{mark}, children={letters!r})"
