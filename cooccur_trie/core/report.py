# report.py
"""
Query answering and line formatting over an indexed Trie.

Two report modes:
 - full listing: every word with its frequency, alphabetically
 - subtrie listing: a word followed by its co-occurrence partners, or a
   marker line when the word is unknown or never co-occurred

Query outcomes are plain values (QueryOutcome), never exceptions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

from cooccur_trie.core.trie import Trie

INVALID_MARKER = "(INVALID STRING)"
EMPTY_MARKER = "(EMPTY)"
SUBTRIE_PREFIX = "- "


class QueryOutcome(Enum):
    FOUND = "found"
    EMPTY = "empty"
    NOT_FOUND = "not-found"


@dataclass
class QueryResult:
    word: str
    outcome: QueryOutcome
    count: int = 0
    partners: List[Tuple[str, int]] = field(default_factory=list)


def query(trie: Trie, word: str) -> QueryResult:
    """Look `word` up and collect its partners (alphabetical) if it has any."""
    node = trie.lookup(word)
    if node is None:
        return QueryResult(word, QueryOutcome.NOT_FOUND)
    if node.subtrie is None:
        return QueryResult(word, QueryOutcome.EMPTY, node.count)
    return QueryResult(word, QueryOutcome.FOUND, node.count, list(node.subtrie.traverse()))


def format_entry(word: str, count: int, prefix: str = "") -> str:
    return f"{prefix}{word} ({count})"


def full_listing(trie: Trie) -> Iterator[str]:
    for word, count in trie.traverse():
        yield format_entry(word, count)


def subtrie_listing(trie: Trie, word: str, prefix: str = SUBTRIE_PREFIX) -> Iterator[str]:
    """
    Lines for a single-word query. The query word is echoed as typed,
    then either a marker line or one line per partner.
    """
    result = query(trie, word)
    yield result.word
    if result.outcome is QueryOutcome.NOT_FOUND:
        yield INVALID_MARKER
    elif result.outcome is QueryOutcome.EMPTY:
        yield EMPTY_MARKER
    else:
        for partner, count in result.partners:
            yield format_entry(partner, count, prefix)


class Reporter:
    """Answers query tokens against one Trie; `list_all` is the full-listing directive."""

    def __init__(self, trie: Trie, list_all: str = "!", prefix: str = SUBTRIE_PREFIX) -> None:
        self.trie = trie
        self.list_all = list_all
        self.prefix = prefix

    def answer(self, token: str) -> Iterator[str]:
        if token == self.list_all:
            return full_listing(self.trie)
        return subtrie_listing(self.trie, token, self.prefix)

    def answer_all(self, tokens) -> Iterator[str]:
        for tok in tokens:
            yield from self.answer(tok)
