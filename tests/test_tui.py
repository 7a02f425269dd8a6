# tests/test_tui.py - lookup helper and a headless run of the textual browser
import pytest

from lexicon_trie.core.trie import LexiconTrie
from lexicon_trie.tui_app import LexiconBrowser, lookup


@pytest.fixture
def trie():
    t = LexiconTrie()
    for w in ["cat", "cats", "car", "dog"]:
        t.insert(w)
    return t


def test_lookup_modes(trie):
    assert lookup(trie, "", 10) == ("", [])
    assert lookup(trie, "  ", 10) == ("", [])
    assert lookup(trie, "ca", 10) == ("prefix", ["car", "cat", "cats"])
    assert lookup(trie, "CA", 2) == ("prefix", ["car", "cat"])
    assert lookup(trie, "c_t", 10) == ("pattern", ["cat"])
    assert lookup(trie, "*s", 10) == ("pattern", ["cats"])
    assert lookup(trie, "x", 10) == ("prefix", [])


@pytest.mark.asyncio
async def test_browser_updates_results(trie):
    app = LexiconBrowser(trie, max_results=5)
    async with app.run_test() as pilot:
        await pilot.press("c", "a")
        await pilot.pause()
        assert app.mode == "prefix"
        assert app.results == ("car", "cat", "cats")

        await pilot.press("ctrl+l")
        await pilot.pause()
        assert app.results == ()

        await pilot.press("d", "*")
        await pilot.pause()
        assert app.mode == "pattern"
        assert app.results == ("dog",)
