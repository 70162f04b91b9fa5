# cooccur_trie/context/tokenizer.py
# splits corpus text into sentences of word tokens, reads query files.

from __future__ import annotations
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def is_valid_token(token: str) -> bool:
    """True for a non-empty string made only of A-Z / a-z."""
    return bool(token) and all(ch in _ASCII_LETTERS for ch in token)


def split_sentences(text: str, sentence_end: str = ".") -> List[List[str]]:
    """
    Return list of sentences (lists of tokens).
    Text is split on whitespace. A token starting with `sentence_end`
    closes the current sentence; a word with the marker glued on
    ("sat.") keeps the word and then closes. Tokens are not validated
    here, the indexer decides what to drop.
    """
    if not text:
        return []
    sentences: List[List[str]] = []
    current: List[str] = []
    for tok in text.split():
        if tok.startswith(sentence_end):
            if current:
                sentences.append(current)
            current = []
            continue
        if tok.endswith(sentence_end):
            current.append(tok[: -len(sentence_end)])
            sentences.append(current)
            current = []
            continue
        current.append(tok)
    # trailing words with no closing marker still form a sentence
    if current:
        sentences.append(current)
    return sentences


def read_corpus(path: PathLike, sentence_end: str = ".") -> List[List[str]]:
    with open(path, "r", encoding="utf8", errors="replace") as f:
        return split_sentences(f.read(), sentence_end)


def read_queries(path: PathLike) -> List[str]:
    """One query per whitespace-separated token."""
    with open(path, "r", encoding="utf8", errors="replace") as f:
        return f.read().split()
