"""
cli.py - command line front end for the co-occurrence index
Features:
- Builds the word / co-occurrence Trie from a corpus file
- Answers a query file: "!" lists every word, any other token lists its partners
- Optional interactive prompt with /stats and /quit
- Uses Rich for console output and tables

Usage:
  cooccur-trie corpus.txt queries.txt
  cooccur-trie corpus.txt queries.txt -o printTrie.txt
  cooccur-trie corpus.txt --interactive
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from cooccur_trie.context.tokenizer import read_corpus, read_queries
from cooccur_trie.core.indexer import CorpusIndexer
from cooccur_trie.core.report import Reporter
from cooccur_trie.utils.config_manager import Config, ConfigError
from cooccur_trie.utils.logger_utils import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cooccur-trie",
        description="Index word frequencies and sentence co-occurrences of a corpus.",
    )
    parser.add_argument("corpus", help="corpus file, sentences end with a '.' token")
    parser.add_argument("queries", nargs="?", help="query file, one word or '!' per token")
    parser.add_argument("-o", "--output", help="write the report here instead of stdout")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument(
        "--set", action="append", default=[], metavar="KEY=VALUE",
        help="override a config option (repeatable)",
    )
    parser.add_argument("-i", "--interactive", action="store_true", help="start a query prompt")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return parser


class CLI:
    """Wires corpus reading, indexing and reporting to the console."""

    def __init__(self, cfg: Config, console: Optional[Console] = None):
        self.cfg = cfg
        self.console = console or Console()
        self.indexer = CorpusIndexer()
        self.reporter: Optional[Reporter] = None
        self.running = True

    # INDEXING -----------------------------------------------------------------
    def load(self, corpus_path: str) -> None:
        sentences = read_corpus(corpus_path, self.cfg["sentence_end"])
        trie = self.indexer.index(sentences)
        self.reporter = Reporter(trie, self.cfg["list_all_token"], self.cfg["subtrie_prefix"])

    # REPORTING ----------------------------------------------------------------
    def report(self, queries: Iterable[str], out_path: Optional[str] = None) -> None:
        lines = self.reporter.answer_all(queries)
        if out_path:
            with open(out_path, "w", encoding="utf8") as f:
                for line in lines:
                    f.write(line + "\n")
            logger.info("report written to %s", out_path)
            return
        self._emit(lines)

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    # INTERACTIVE --------------------------------------------------------------
    def run(self) -> None:
        """
        Prompt loop:
        - a word prints its partners
        - the list-all token prints the whole index
        - /stats shows indexing counters, /quit leaves
        """
        self.console.rule("[bold magenta]Co-occurrence Index[/bold magenta]")
        self.console.print(
            f"[cyan]Type a word, or {self.cfg['list_all_token']} to list everything.[/cyan]",
        )
        self.console.print("Commands: /stats /config /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Query[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            for token in line.split():
                if token.startswith("/"):
                    self._handle_command(token)
                    if not self.running:
                        break
                    continue
                self._emit(self.reporter.answer(token))

    def _handle_command(self, cmd: str) -> None:
        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            return
        if cmd == "/stats":
            self.console.print(self._stats_table())
            return
        if cmd == "/config":
            self.cfg.show(self.console)
            return
        self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    def _stats_table(self) -> Table:
        s = self.indexer.stats
        t = Table(title="Index Summary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Sentences", str(s.sentences))
        t.add_row("Tokens", str(s.tokens))
        t.add_row("Skipped tokens", str(s.skipped_tokens))
        t.add_row("Distinct words", str(s.distinct_words))
        t.add_row("Words with partners", str(s.words_with_partners))
        t.add_row("Trie nodes", str(self.indexer.trie.node_count()))
        return t


def _apply_overrides(cfg: Config, pairs: List[str]) -> None:
    for pair in pairs:
        key, sep, val = pair.partition("=")
        if not sep:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        cfg.set(key.strip(), val)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    try:
        cfg = Config(args.config)
        _apply_overrides(cfg, args.set)
    except (ConfigError, KeyError, ValueError) as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return 2

    level = cfg["log_level"]
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    configure_logging(level, cfg["log_file"])

    if not args.queries and not args.interactive:
        parser.error("a query file is required unless --interactive is given")

    cli = CLI(cfg, console)
    try:
        cli.load(args.corpus)
        if args.queries:
            cli.report(read_queries(args.queries), args.output)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if args.interactive:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
