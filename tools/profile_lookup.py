# tools/profile_lookup.py
"""
Small profiling harness for LexiconTrie lookups.
Usage:
  python tools/profile_lookup.py --words words/english.txt --iters 500

Without --words a synthetic lexicon is generated. Prints median/p90/max
latency for prefix listing, suggestions and wildcard matching.
"""
import argparse
import random
import string
import time
from statistics import median

from lexicon_trie.core.trie import LexiconTrie
from lexicon_trie.loader import load_words


def synthetic_words(n: int, seed: int = 7):
    rng = random.Random(seed)
    return ["".join(rng.choice(string.ascii_lowercase[:10]) for _ in range(rng.randint(3, 9)))
            for _ in range(n)]


def benchmark(fn, queries, iterations=200):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "median_ms": round(median(times_sorted), 4),
        "p90_ms": round(times_sorted[int(0.9 * len(times_sorted)) - 1], 4),
        "max_ms": round(max(times_sorted), 4),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=str, default=None, help="word list, one per line")
    parser.add_argument("--size", type=int, default=50_000, help="synthetic lexicon size")
    parser.add_argument("--iters", type=int, default=300, help="measured iterations per query kind")
    args = parser.parse_args()

    trie = LexiconTrie(count_duplicates=False)
    if args.words:
        if load_words(trie, args.words) < 0:
            raise SystemExit(f"cannot read {args.words}")
    else:
        trie.insert_many(synthetic_words(args.size))
    if trie.word_count() == 0:
        raise SystemExit("lexicon is empty, nothing to profile")
    sample = list(trie.all_words())[:: max(1, trie.word_count() // 200)]
    print(f"lexicon: {trie.word_count()} words")

    runs = {
        "prefix": lambda w: list(trie.words_with_prefix(w[:2])),
        "suggest": lambda w: trie.suggest_corrections(w, 1),
        "match": lambda w: trie.match_pattern(w[0] + "?" + w[2:-1] + "*"),
    }
    for name, fn in runs.items():
        print(f"{name:8}", summarize(benchmark(fn, sample, args.iters)))


if __name__ == "__main__":
    main()
