# trie.py
# Ordered Trie (prefix tree) over lowercase words.
# Supports membership/prefix checks, alphabetical listing, substitution-only
# correction suggestions and wildcard matching (? _ *).
# Reads never mutate the tree; callers serialize writes themselves.

from __future__ import annotations
from typing import Iterable, Iterator, Optional, Set

from lexicon_trie.core.node import LexiconNode
from lexicon_trie.core.pattern import AnyMany, AnyOne, Literal, parse_pattern

Word = str


class LexiconTrie:
    """
    Trie storing a lexicon of lowercase words.

    The word counter follows the reference behaviour by default: every
    successful insert bumps it, even for a word that is already present, so
    inserting "cat" twice gives word_count() == 2 while all_words() lists
    "cat" once. Pass count_duplicates=False to count distinct words only.
    """

    def __init__(self, count_duplicates: bool = True) -> None:
        self._root = LexiconNode()
        self._count = 0
        self.count_duplicates = count_duplicates

    @property
    def root(self) -> LexiconNode:
        return self._root

    # insertion/removal -------------------------------------------------
    def insert(self, word: Word) -> bool:
        """
        Add a word (lowercased). Empty input is rejected with False.
        Returns True whenever the word was walked to its terminal node.
        """
        if not word:
            return False

        node = self._root
        for ch in word.lower():
            node = node.add_child(ch)

        if node.is_terminal() and not self.count_duplicates:
            return True
        node.set_terminal(True)
        self._count += 1
        return True

    def insert_many(self, words: Iterable[Word]) -> int:
        """Bulk insert; returns how many inserts returned True."""
        return sum(1 for w in words if self.insert(w))

    def remove(self, word: Word, prune: bool = False) -> bool:
        """
        Unmark a word. False (and no change) if the word is not stored.
        Nodes are kept by default; prune=True also drops branches that no
        longer lead to any word.
        """
        if not word:
            return False

        # (parent, child) edges along the word, used for pruning
        path = []
        node = self._root
        for ch in word.lower():
            child = node.get_child(ch)
            if child is None:
                return False
            path.append((node, child))
            node = child

        if not node.is_terminal():
            return False
        node.set_terminal(False)
        self._count -= 1

        if prune:
            for parent, child in reversed(path):
                if child.is_terminal() or len(child):
                    break
                parent.remove_child(child.letter)
        return True

    # lookups ---------------------------------------------------------------
    def _walk(self, s: str) -> Optional[LexiconNode]:
        node = self._root
        for ch in s.lower():
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    def contains_word(self, word: Word) -> bool:
        """The empty string counts as contained."""
        if not word:
            return True
        node = self._walk(word)
        return node is not None and node.is_terminal()

    def contains_prefix(self, prefix: str) -> bool:
        """The empty string is a prefix of everything."""
        if not prefix:
            return True
        return self._walk(prefix) is not None

    def word_count(self) -> int:
        return self._count

    # enumeration -----------------------------------------------------------
    def all_words(self) -> Iterator[Word]:
        """Every stored word in alphabetical order (new generator per call)."""
        return self._iter_words(self._root, "")

    def words_with_prefix(self, prefix: str) -> Iterator[Word]:
        """Stored words starting with `prefix`, alphabetical."""
        node = self._walk(prefix)
        if node is None:
            return iter(())
        return self._iter_words(node, prefix.lower())

    @staticmethod
    def _iter_words(start: LexiconNode, prefix: str) -> Iterator[Word]:
        # explicit stack, pushed in reverse so the smallest letter pops first
        stack = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal():
                yield word
            for child in reversed(node.children):
                stack.append((child, word + child.letter))

    # suggestions -----------------------------------------------------------
    def suggest_corrections(self, target: Word, max_distance: int) -> Set[Word]:
        """
        All stored words of the same length as `target` that differ from it
        in at most `max_distance` positions (Hamming distance).
        """
        out: Set[Word] = set()
        if not target or max_distance < 0:
            return out

        target = target.lower()
        end = len(target)
        # work-list of (node, index, word, remaining budget)
        stack = [(self._root, 0, "", max_distance)]
        while stack:
            node, index, word, budget = stack.pop()
            if index == end:
                if node.is_terminal():
                    out.add(word)
                continue
            want = target[index]
            for child in node:
                left = budget if child.letter == want else budget - 1
                # budget only shrinks, a negative branch can never recover
                if left < 0:
                    continue
                stack.append((child, index + 1, word + child.letter, left))
        return out

    # wildcard matching -------------------------------------------------------
    def match_pattern(self, pattern: str) -> Set[Word]:
        """
        Stored words matching a wildcard pattern.
        '?' and '_' match exactly one letter, '*' matches zero or more.
        """
        out: Set[Word] = set()
        tokens = parse_pattern(pattern)
        end = len(tokens)
        # a node spells exactly one word, so (node, index) identifies a state
        seen = set()
        stack = [(self._root, 0, "")]
        while stack:
            node, index, word = stack.pop()
            key = (id(node), index)
            if key in seen:
                continue
            seen.add(key)

            if index == end:
                if node.is_terminal():
                    out.add(word)
                continue

            tok = tokens[index]
            if isinstance(tok, Literal):
                child = node.get_child(tok.char)
                if child is not None:
                    stack.append((child, index + 1, word + child.letter))
            elif isinstance(tok, AnyOne):
                for child in node:
                    stack.append((child, index + 1, word + child.letter))
            elif isinstance(tok, AnyMany):
                # '*' matches nothing here ...
                stack.append((node, index + 1, word))
                # ... or swallows one more letter and stays pending
                for child in node:
                    stack.append((child, index, word + child.letter))
        return out

    # convenience ---------------------------------------------------------------
    def __contains__(self, word: Word) -> bool:
        return self.contains_word(word)

    def __iter__(self) -> Iterator[Word]:
        return self.all_words()

    def __len__(self) -> int:
        return self._count
