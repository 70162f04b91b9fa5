"""
cooccur_trie.core

Contains:
 - the 26-way Trie and its nodes (Trie, TrieNode)
 - the two-pass corpus indexer (CorpusIndexer)
 - query answering and report lines (Reporter, query)
"""

from .trie import InvalidTokenError, Trie, TrieNode
from .indexer import CorpusIndexer, IndexStats, build_index
from .report import QueryOutcome, QueryResult, Reporter, query

__all__ = [
    "InvalidTokenError",
    "Trie",
    "TrieNode",
    "CorpusIndexer",
    "IndexStats",
    "build_index",
    "QueryOutcome",
    "QueryResult",
    "Reporter",
    "query",
]
