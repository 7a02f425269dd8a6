# loader.py - read word lists (one word per line) into a LexiconTrie

import os

from lexicon_trie.core.trie import LexiconTrie
from lexicon_trie.utils.logger_utils import log


def resolve_path(name: str, words_dir: str = "words") -> str:
    """
    A path that exists (or is absolute) is used as given; a bare file name
    is looked up inside `words_dir`.
    """
    if os.path.isabs(name) or os.path.exists(name):
        return name
    return os.path.join(words_dir, name)


def load_words(trie: LexiconTrie, path: str) -> int:
    """
    Insert every line of `path` into the trie (trimmed, lowercased).
    Returns the number of lines processed, blanks and duplicates included,
    or -1 if the file could not be read.
    """
    processed = 0
    try:
        with log.time_block(f"load {path}"):
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    trie.insert(line.strip().lower())
                    processed += 1
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"failed to read word list {path}: {e}")
        return -1

    log.info(f"processed {processed} lines from {path} ({trie.word_count()} counted)")
    return processed
