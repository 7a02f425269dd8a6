"""
lexicon_trie.core

The in-memory lexicon:
 - LexiconNode: one trie vertex with alphabetically ordered children
 - LexiconTrie: insert/remove, membership, prefix checks, alphabetical
   listing, correction suggestions and wildcard matching
 - parse_pattern: wildcard pattern tokenizer used by match_pattern
"""

from .node import LexiconNode
from .pattern import AnyMany, AnyOne, Literal, parse_pattern, has_wildcard
from .trie import LexiconTrie

__all__ = [
    "LexiconNode",
    "LexiconTrie",
    "Literal",
    "AnyOne",
    "AnyMany",
    "parse_pattern",
    "has_wildcard",
]
