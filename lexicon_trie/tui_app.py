# tui_app.py — Lexicon browser TUI
# -------------------------------------------------------
# Text based terminal UI over a loaded LexiconTrie.
# Features:
#  - Live lookups as you type
#  - Plain text lists words starting with it
#  - Text with ? _ or * is matched as a wildcard pattern
#  - Latency readout for the last lookup
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Tuple

from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, Input, Static
from textual.containers import Horizontal
from textual.reactive import reactive

from lexicon_trie.core.pattern import has_wildcard
from lexicon_trie.core.trie import LexiconTrie


def lookup(trie: LexiconTrie, text: str, limit: int) -> Tuple[str, List[str]]:
    """
    Resolve one line of browser input.
    Returns (mode, words) where mode is "pattern", "prefix" or "" (empty input).
    """
    text = text.strip().lower()
    if not text:
        return "", []
    if has_wildcard(text):
        return "pattern", sorted(trie.match_pattern(text))[:limit]
    words = []
    for w in trie.words_with_prefix(text):
        if len(words) >= limit:
            break
        words.append(w)
    return "prefix", words


class ResultsPanel(Static):
    """Lists the words found for the current input."""
    def show(self, mode: str, words):
        if not mode:
            self.update("[dim]Type a prefix or a pattern (? _ *)[/dim]")
            return
        if not words:
            self.update(f"[dim]No {mode} matches[/dim]")
            return
        lines = [f"[b]{i}[/b] • {w}" for i, w in enumerate(words, 1)]
        self.update("\n".join(lines))


class LatencyView(Static):
    """Bottom readout showing how long the last lookup took."""
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class LexiconBrowser(App):
    """
    Browse a LexiconTrie interactively.
    Input changes run a lookup, the reactive results refresh the panels.
    """
    DEFAULT_CSS = """
    #results { height: 1fr; padding: 0 1; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        ("ctrl+l", "clear_input", "Clear"),
    ]

    results = reactive((), init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, trie: LexiconTrie, max_results: int = 20):
        super().__init__()
        self.trie = trie
        self.max_results = max_results
        self.mode = ""

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="prefix or pattern…", id="query")
        yield ResultsPanel(id="results")
        with Horizontal(id="bottom"):
            yield LatencyView(id="latency")
            yield Static(f"{self.trie.word_count()} words", id="status")
        yield Footer()

    def on_mount(self):
        self.query_one(ResultsPanel).show("", [])
        self.query_one(Input).focus()

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the lookup every time the input changes."""
        start = time.perf_counter()
        mode, words = lookup(self.trie, event.value, self.max_results)
        self.latency = time.perf_counter() - start
        self.mode = mode
        self.results = tuple(words)
        # empty -> empty does not trigger the watcher
        if not words:
            self.query_one(ResultsPanel).show(mode, words)

    # Reactive state (watcher functions) ---------------------------------------
    def watch_results(self, results):
        self.query_one(ResultsPanel).show(self.mode, results)

    def watch_latency(self, latency):
        self.query_one(LatencyView).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_clear_input(self):
        self.query_one(Input).value = ""
