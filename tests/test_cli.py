# tests/test_cli.py - CLI command handling with a captured rich console
import io

import pytest
from rich.console import Console

from lexicon_trie.cli.cli import CLI, build_parser, main
from lexicon_trie.utils.config_manager import Config


@pytest.fixture
def cli(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    console = Console(file=io.StringIO(), width=100, no_color=True)
    c = CLI(cfg, console=console)
    c.handle("/add cat cats car dog")
    return c


def output(cli):
    return cli.console.file.getvalue()


def test_add_and_count(cli):
    assert cli.trie.word_count() == 4
    cli.handle("/count")
    assert output(cli).rstrip().endswith("4")


def test_has_and_prefix(cli):
    cli.handle("/has ca")
    cli.handle("/prefix ca")
    lines = output(cli).splitlines()
    assert lines[-2:] == ["no", "yes"]


def test_list_and_match(cli):
    cli.handle("/list ca")
    out = output(cli)
    assert "car" in out and "cats" in out and "dog" not in out
    cli.handle("/match c_t")
    assert "cat" in output(cli)


def test_suggest_with_bad_distance(cli):
    cli.handle("/suggest cat x")
    assert "distance must be an integer" in output(cli)
    cli.handle("/suggest cat 1")
    out = output(cli)
    assert "car" in out


def test_plain_word_offers_corrections(cli):
    cli.handle("cot")
    out = output(cli)
    assert "not in the lexicon" in out
    assert "Did you mean" in out
    assert "cat" in out


def test_remove_and_unknown_command(cli):
    cli.handle("/remove cat bird")
    out = output(cli)
    assert "removed cat" in out
    assert "bird not found" in out
    cli.handle("/frobnicate")
    assert "Unknown command" in output(cli)
    assert cli.trie.word_count() == 3


def test_config_changes_apply(cli):
    cli.handle("/config prune_on_remove true")
    cli.handle("/remove dog")
    assert not cli.trie.contains_prefix("d")
    cli.handle("/config bogus 1")
    assert "cannot set bogus" in output(cli)


def test_list_truncates_to_max_results(cli):
    cli.cfg.set("max_results", 2)
    cli.handle("/list")
    assert "and 2 more" in output(cli)


def test_load_command(cli, tmp_path):
    p = tmp_path / "more.txt"
    p.write_text("emu\nyak\n", encoding="utf-8")
    cli.handle(f"/load {p}")
    assert "loaded 2 lines" in output(cli)
    assert cli.trie.contains_word("yak")
    cli.handle(f"/load {tmp_path / 'missing.txt'}")
    assert "Failed to read file" in output(cli)


def test_stats_and_quit(cli):
    cli.handle("/stats")
    assert "/add" in output(cli)
    cli.handle("/quit")
    assert not cli.running


def test_parser_defaults():
    args = build_parser().parse_args(["--load", "a.txt", "--load", "b.txt"])
    assert args.load == ["a.txt", "b.txt"]
    assert not args.no_color


def test_main_runs_until_quit(tmp_path, monkeypatch):
    words = tmp_path / "w.txt"
    words.write_text("alpha\nbeta\n", encoding="utf-8")
    answers = iter(["/count", "/quit"])
    monkeypatch.setattr("lexicon_trie.cli.cli.Prompt.ask", lambda *a, **k: next(answers))
    assert main(["--config", str(tmp_path / "cfg.json"), "--load", str(words), "--no-color"]) == 0


def test_cli_keeps_an_empty_trie_it_was_given(tmp_path):
    from lexicon_trie.core.trie import LexiconTrie
    t = LexiconTrie()
    c = CLI(Config(str(tmp_path / "cfg.json")), console=Console(file=io.StringIO()), trie=t)
    c.handle("/add owl")
    assert c.trie is t
    assert t.contains_word("owl")


def test_plain_word_check_is_timed(cli):
    cli.handle("cat")
    cli.handle("cot")
    assert cli.metrics.count("check") == 2


def test_no_color_flag_is_not_saved_to_config(tmp_path, monkeypatch):
    import json
    cfg_path = tmp_path / "cfg.json"
    answers = iter(["/config max_results 5", "/quit"])
    monkeypatch.setattr("lexicon_trie.cli.cli.Prompt.ask", lambda *a, **k: next(answers))
    assert main(["--config", str(cfg_path), "--no-color"]) == 0
    saved = json.loads(cfg_path.read_text(encoding="utf8"))
    assert saved["max_results"] == 5
    assert saved["color"] is True
