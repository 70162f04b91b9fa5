# cooccur_trie/context/__init__.py
# corpus and query reading

from .tokenizer import is_valid_token, read_corpus, read_queries, split_sentences

__all__ = ["is_valid_token", "read_corpus", "read_queries", "split_sentences"]
