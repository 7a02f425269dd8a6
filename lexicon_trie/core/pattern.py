# pattern.py
# Wildcard pattern parsing for LexiconTrie.match_pattern.
# Supported tokens:
#   a-z   literal letter
#   ? _   exactly one letter
#   *     zero or more letters
# Anything else parses as a literal that never matches a stored letter.

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

ANY_ONE_CHARS = frozenset("?_")
ANY_MANY_CHAR = "*"


@dataclass(frozen=True)
class Literal:
    char: str


@dataclass(frozen=True)
class AnyOne:
    pass


@dataclass(frozen=True)
class AnyMany:
    pass


Token = Union[Literal, AnyOne, AnyMany]
Pattern = Tuple[Token, ...]

# singletons, tokens carry no state
ANY_ONE = AnyOne()
ANY_MANY = AnyMany()


def parse_pattern(pattern: str) -> Pattern:
    """
    Turn a raw pattern string into a tuple of tokens.
    Letters are lowercased. Consecutive '*' collapse into one AnyMany,
    which matches the same words and avoids re-exploring the same subtrees.
    """
    tokens = []
    for ch in pattern.lower():
        if ch == ANY_MANY_CHAR:
            if tokens and tokens[-1] is ANY_MANY:
                continue
            tokens.append(ANY_MANY)
        elif ch in ANY_ONE_CHARS:
            tokens.append(ANY_ONE)
        else:
            tokens.append(Literal(ch))
    return tuple(tokens)


def has_wildcard(text: str) -> bool:
    """True if `text` contains any wildcard token."""
    return any(ch == ANY_MANY_CHAR or ch in ANY_ONE_CHARS for ch in text)
