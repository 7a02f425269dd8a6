"""
cli.py - command line interface for the lexicon trie
Features:
- Load word lists at startup (--load) or interactively (/load)
- Membership, prefix, listing, suggestion and wildcard commands
- Typing a bare word checks it and offers corrections when it is missing
- Per-command timings collected in Metrics (/stats)
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import time
from typing import Callable, Dict, Iterable, List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from lexicon_trie.core.trie import LexiconTrie
from lexicon_trie.loader import load_words, resolve_path
from lexicon_trie.utils.config_manager import Config
from lexicon_trie.utils.logger_utils import log
from lexicon_trie.utils.metrics_tracker import Metrics

HELP_ROWS = [
    ("/add <word>...", "insert words"),
    ("/remove <word>...", "remove words"),
    ("/has <word>", "is the word stored?"),
    ("/prefix <prefix>", "does any word start with prefix?"),
    ("/list [prefix]", "words in alphabetical order"),
    ("/count", "word counter"),
    ("/suggest <word> [dist]", "same-length words within dist substitutions"),
    ("/match <pattern>", "wildcards: ? and _ one letter, * any run"),
    ("/load <file>", "insert every line of a word list"),
    ("/config [key val]", "show or change settings"),
    ("/stats", "average command timings"),
    ("/quit", "exit"),
]


class CLI:
    """Interactive shell around a single LexiconTrie."""

    def __init__(self, cfg: Optional[Config] = None, console: Optional[Console] = None,
                 trie: Optional[LexiconTrie] = None):
        self.cfg = cfg or Config()
        self.console = console or Console(no_color=not self.cfg["color"])
        if trie is None:
            trie = LexiconTrie(count_duplicates=self.cfg["count_duplicates"])
        self.trie = trie
        self.metrics = Metrics()
        self.running = True
        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "/add": self._cmd_add,
            "/remove": self._cmd_remove,
            "/has": self._cmd_has,
            "/prefix": self._cmd_prefix,
            "/list": self._cmd_list,
            "/count": self._cmd_count,
            "/suggest": self._cmd_suggest,
            "/match": self._cmd_match,
            "/load": self._cmd_load,
            "/config": self._cmd_config,
            "/stats": self._cmd_stats,
            "/help": self._cmd_help,
            "/q": self._cmd_quit,
            "/quit": self._cmd_quit,
            "/exit": self._cmd_quit,
        }

    def run(self):
        """Main prompt loop, ends on /quit, EOF or Ctrl+C."""
        self.console.rule("[bold magenta]Lexicon Trie[/bold magenta]")
        self.console.print("[cyan]Type a word to check it, or /help for commands.[/cyan]")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    def handle(self, line: str):
        """Dispatch one line of input."""
        line = line.strip()
        if not line:
            return
        if not line.startswith("/"):
            t0 = time.perf_counter()
            self._check_word(line)
            self.metrics.record("check", time.perf_counter() - t0)
            return

        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]
        handler = self.commands.get(cmd)
        if handler is None:
            self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")
            return
        t0 = time.perf_counter()
        handler(args)
        self.metrics.record(cmd, time.perf_counter() - t0)

    # COMMANDS -----------------------------------------------------------------
    def _check_word(self, word: str):
        if self.trie.contains_word(word):
            self.console.print(f"[green]{escape(word)}[/green] is in the lexicon")
            return
        self.console.print(f"[yellow]{escape(word)}[/yellow] is not in the lexicon")
        found = self.trie.suggest_corrections(word, self.cfg["max_distance"])
        if found:
            self._print_words("Did you mean", sorted(found))

    def _cmd_add(self, args):
        if not args:
            self.console.print("usage: /add <word>...")
            return
        added = sum(1 for w in args if self.trie.insert(w))
        self.console.print(f"added {added} word(s), count={self.trie.word_count()}")

    def _cmd_remove(self, args):
        if not args:
            self.console.print("usage: /remove <word>...")
            return
        prune = self.cfg["prune_on_remove"]
        for w in args:
            if self.trie.remove(w, prune=prune):
                self.console.print(f"removed [bold]{escape(w)}[/bold]")
            else:
                self.console.print(f"[dim]{escape(w)} not found[/dim]")

    def _cmd_has(self, args):
        if len(args) != 1:
            self.console.print("usage: /has <word>")
            return
        self.console.print("yes" if self.trie.contains_word(args[0]) else "no")

    def _cmd_prefix(self, args):
        if len(args) != 1:
            self.console.print("usage: /prefix <prefix>")
            return
        self.console.print("yes" if self.trie.contains_prefix(args[0]) else "no")

    def _cmd_list(self, args):
        prefix = args[0] if args else ""
        self._print_words("Words", self.trie.words_with_prefix(prefix))

    def _cmd_count(self, args):
        self.console.print(str(self.trie.word_count()))

    def _cmd_suggest(self, args):
        if not args or len(args) > 2:
            self.console.print("usage: /suggest <word> [dist]")
            return
        try:
            dist = int(args[1]) if len(args) == 2 else self.cfg["max_distance"]
        except ValueError:
            self.console.print(f"[red]distance must be an integer:[/red] {escape(args[1])}")
            return
        self._print_words("Suggestions", sorted(self.trie.suggest_corrections(args[0], dist)))

    def _cmd_match(self, args):
        if len(args) != 1:
            self.console.print("usage: /match <pattern>")
            return
        self._print_words("Matches", sorted(self.trie.match_pattern(args[0])))

    def _cmd_load(self, args):
        if len(args) != 1:
            self.console.print("usage: /load <file>")
            return
        self.load(args[0])

    def _cmd_config(self, args):
        if not args:
            table = Table(title="Config", box=box.SIMPLE)
            table.add_column("Key", style="cyan")
            table.add_column("Value")
            for k, v in self.cfg.show():
                table.add_row(k, str(v))
            self.console.print(table)
        elif len(args) == 2:
            if self.cfg.set(args[0], args[1]):
                self.console.print(f"{args[0]} = {self.cfg[args[0]]}")
                if args[0] == "count_duplicates":
                    self.trie.count_duplicates = self.cfg["count_duplicates"]
            else:
                self.console.print(f"[red]cannot set {escape(args[0])} to {escape(repr(args[1]))}[/red]")
        else:
            self.console.print("usage: /config [key val]")

    def _cmd_stats(self, args):
        table = Table(title="Timings", box=box.MINIMAL)
        table.add_column("Command", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg ms", justify="right", style="magenta")
        for k in self.metrics.keys():
            table.add_row(k, str(self.metrics.count(k)), f"{self.metrics.avg(k) * 1000:.3f}")
        self.console.print(table)

    def _cmd_help(self, args):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for row in HELP_ROWS:
            table.add_row(*row)
        self.console.print(table)

    def _cmd_quit(self, args):
        self.console.print("bye.")
        self.running = False

    # HELPERS -------------------------------------------------------------------
    def load(self, name: str) -> int:
        """Load a word list; prints the number of lines processed."""
        path = resolve_path(name, self.cfg["words_dir"])
        n = load_words(self.trie, path)
        if n < 0:
            self.console.print(f"[red]Failed to read file:[/red] {escape(path)}")
        else:
            self.console.print(f"loaded {n} lines from {escape(path)}")
        return n

    def _print_words(self, title: str, words: Iterable[str]):
        """Print up to max_results words in a table, with a count of the rest."""
        limit = self.cfg["max_results"]
        table = Table(box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        shown = extra = 0
        for w in words:
            if shown < limit:
                shown += 1
                table.add_row(str(shown), Text(w))
            else:
                extra += 1
        if not shown:
            self.console.print("[dim](none)[/dim]")
            return
        self.console.print(f"[bold]{title}[/bold]")
        self.console.print(table)
        if extra:
            self.console.print(f"[dim]... and {extra} more[/dim]")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lexicon-trie", description="Interactive lexicon trie shell")
    p.add_argument("--config", default="lexicon_config.json", help="path of the JSON config file")
    p.add_argument("--load", action="append", default=[], metavar="FILE",
                   help="word list to load before the prompt (repeatable)")
    p.add_argument("--no-color", action="store_true", help="disable colored output")
    p.add_argument("--tui", action="store_true", help="open the textual browser instead of the prompt")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    # --no-color only affects this run, it is not written to the config
    cli = CLI(cfg, console=Console(no_color=args.no_color or not cfg["color"]))
    for name in args.load:
        cli.load(name)
    log.info(f"cli start, {cli.trie.word_count()} words counted")

    if args.tui:
        from lexicon_trie.tui_app import LexiconBrowser
        LexiconBrowser(cli.trie, max_results=cfg["max_results"]).run()
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
