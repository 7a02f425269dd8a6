"""
lexicon_trie

An ordered in-memory trie for word lists: membership and prefix checks,
alphabetical listing, substitution-only spelling suggestions and
wildcard matching, plus a word-list loader, a rich CLI and a textual browser.
"""

from .core import LexiconNode, LexiconTrie, parse_pattern
from .loader import load_words, resolve_path

__all__ = [
    "LexiconNode",
    "LexiconTrie",
    "parse_pattern",
    "load_words",
    "resolve_path",
]

__version__ = "0.1.0"
