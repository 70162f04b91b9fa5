# indexer.py
# builds the word-frequency Trie and every word's co-occurrence subtrie.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence
import logging

from cooccur_trie.context.tokenizer import is_valid_token
from cooccur_trie.core.trie import Trie
from cooccur_trie.utils.logger_utils import Log

logger = logging.getLogger(__name__)

Sentence = List[str]


@dataclass
class IndexStats:
    """Counters collected while indexing, shown by the CLI /stats command."""
    sentences: int = 0
    tokens: int = 0
    skipped_tokens: int = 0
    distinct_words: int = 0
    words_with_partners: int = 0


class CorpusIndexer:
    """
    Two-pass corpus indexer:
      - phase 1 inserts every token into the main Trie (frequencies)
      - phase 2 walks each sentence again and fills subtries (co-occurrence)

    Phase 1 always finishes over the whole corpus before phase 2 starts,
    so every lookup in phase 2 hits a terminal node.
    """

    def __init__(self, trie: Trie | None = None) -> None:
        self.trie = trie if trie is not None else Trie()
        self.stats = IndexStats()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _clean(self, sentence: Sequence[str]) -> Sentence:
        """Drop malformed tokens so neither phase ever sees them."""
        out = []
        for tok in sentence:
            if is_valid_token(tok):
                out.append(tok)
            else:
                self.stats.skipped_tokens += 1
                logger.warning("skipping malformed token %r", tok)
        return out

    # ------------------------------------------------------------------
    # Phase 1
    # ------------------------------------------------------------------
    def count_words(self, sentences: Iterable[Sentence]) -> None:
        for sentence in sentences:
            for tok in sentence:
                self.trie.insert(tok)
                self.stats.tokens += 1

    # ------------------------------------------------------------------
    # Phase 2
    # ------------------------------------------------------------------
    def process_sentence(self, sentence: Sentence) -> None:
        """
        Record co-occurrences for one sentence.
        Each distinct word (case-insensitive) is handled once, at its first
        position; its partners are *not* deduplicated, so a partner that
        shows up twice in the sentence adds two.
        """
        folded = [tok.lower() for tok in sentence]
        seen = set()
        for i, word in enumerate(folded):
            if word in seen:
                continue
            seen.add(word)

            node = self.trie.lookup(word)
            if node is None:
                # only possible if phase 1 was skipped for this sentence
                raise LookupError(f"{sentence[i]!r} missing from the main trie")

            for j, other in enumerate(folded):
                if other == word:
                    continue
                if node.subtrie is None:
                    node.subtrie = Trie()
                node.subtrie.insert(sentence[j])

    def build_subtries(self, sentences: Iterable[Sentence]) -> None:
        for sentence in sentences:
            self.process_sentence(sentence)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def index(self, sentences: Iterable[Sequence[str]]) -> Trie:
        """
        Index a whole corpus and return the main Trie.
        The input is materialised once so both passes read the same
        sentences even when a generator is passed in.
        """
        cleaned = [self._clean(s) for s in sentences]
        cleaned = [s for s in cleaned if s]
        self.stats.sentences += len(cleaned)

        with Log.time_block("frequency pass", logger):
            self.count_words(cleaned)
        with Log.time_block("co-occurrence pass", logger):
            self.build_subtries(cleaned)

        self._refresh_stats()
        logger.info(
            "indexed %d sentences, %d tokens, %d distinct words",
            self.stats.sentences, self.stats.tokens, self.stats.distinct_words,
        )
        return self.trie

    def _refresh_stats(self) -> None:
        distinct = 0
        with_partners = 0
        for word, _ in self.trie.traverse():
            distinct += 1
            if self.trie.lookup(word).subtrie is not None:
                with_partners += 1
        self.stats.distinct_words = distinct
        self.stats.words_with_partners = with_partners


def build_index(sentences: Iterable[Sequence[str]]) -> Trie:
    """Shortcut: index `sentences` with a fresh CorpusIndexer."""
    return CorpusIndexer().index(sentences)
