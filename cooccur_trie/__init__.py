"""
cooccur_trie

Word-frequency index over a sentence corpus, with a per-word index of the
words that share a sentence with it. Both levels are 26-way tries.
"""

from .core import CorpusIndexer, Trie, TrieNode, build_index, query

__all__ = ["CorpusIndexer", "Trie", "TrieNode", "build_index", "query"]

__version__ = "0.1.0"
