# trie.py
# 26-way Trie (prefix tree) over the English alphabet.
# Each terminal node keeps a frequency count and, once the word has
# co-occurred with something, a nested Trie of partner counts.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

Word = str
Count = int
Entry = Tuple[Word, Count]

ALPHABET_SIZE = 26
_LETTERS = "abcdefghijklmnopqrstuvwxyz"


class InvalidTokenError(ValueError):
    """Raised when a token holds anything other than A-Z / a-z letters."""

    def __init__(self, token: str) -> None:
        super().__init__(f"not an alphabetic token: {token!r}")
        self.token = token


def letter_index(ch: str) -> int:
    """Map a letter to its slot, folding case. Returns -1 for anything else."""
    o = ord(ch)
    if 97 <= o <= 122:  # a-z
        return o - 97
    if 65 <= o <= 90:  # A-Z
        return o - 65
    return -1


class TrieNode:
    """
    A single node in the Trie.
    children: 26 slots, one per letter, None when absent
    count: how many times the word ending here was inserted (0 = not a word)
    subtrie: co-occurrence Trie, None until the first partner is recorded
    """

    __slots__ = ("children", "count", "subtrie")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.count: Count = 0
        self.subtrie: Optional[Trie] = None

    @property
    def is_word(self) -> bool:
        return self.count > 0


class Trie:
    """
    Case-insensitive Trie of word frequencies, used by the CorpusIndexer for:
     - the main word-frequency index
     - each word's co-occurrence subtrie
    Walks are iterative; traversal is a recursive generator bounded by
    the longest word.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = TrieNode()

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> TrieNode:
        """
        Insert a word and bump its count by one.
        The word is validated before any node is created, so a bad token
        never leaves a half-built path behind.
        Returns the terminal node.
        """
        if not word:
            raise InvalidTokenError(word)
        slots = [letter_index(ch) for ch in word]
        if -1 in slots:
            raise InvalidTokenError(word)

        node = self._root
        for i in slots:
            nxt = node.children[i]
            if nxt is None:
                nxt = TrieNode()
                node.children[i] = nxt
            node = nxt
        node.count += 1
        return node

    # search ---------------------------------------------------------
    def _walk(self, word: str) -> Optional[TrieNode]:
        node = self._root
        for ch in word:
            i = letter_index(ch)
            if i < 0:
                return None
            node = node.children[i]
            if node is None:
                return None
        return node

    def lookup(self, word: str) -> Optional[TrieNode]:
        """Return the terminal node for `word`, or None if it was never inserted."""
        node = self._walk(word)
        if node is None or not node.is_word:
            return None
        return node

    def count(self, word: str) -> Count:
        node = self.lookup(word)
        return node.count if node is not None else 0

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) is not None

    # traversal -----------------------------------------------------
    def traverse(self) -> Iterator[Entry]:
        """
        Yield (word, count) for every inserted word in alphabetical order.
        Children are visited a->z so the order falls out of the tree shape.
        Words come back lowercase.
        """
        return self._collect(self._root, [])

    def _collect(self, node: TrieNode, buf: List[str]) -> Iterator[Entry]:
        if node.is_word:
            yield "".join(buf), node.count
        for i, child in enumerate(node.children):
            if child is None:
                continue
            buf.append(_LETTERS[i])
            yield from self._collect(child, buf)
            buf.pop()

    def __iter__(self) -> Iterator[Entry]:
        return self.traverse()

    # convenience/debugging -----------------------------------------
    def __len__(self) -> int:
        """Number of distinct words (O(N) walk)."""
        return sum(1 for _ in self.traverse())

    def node_count(self) -> int:
        total = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(c for c in node.children if c is not None)
        return total
