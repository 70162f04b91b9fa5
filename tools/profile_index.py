# tools/profile_index.py
"""
Small profiling harness for CorpusIndexer.
Usage:
  python tools/profile_index.py --sentences 5000 --words 12 --vocab 2000 --seed 7

Builds a synthetic corpus, times both indexing passes and a batch of
lookups, and prints mean/median/max latency.
"""
import argparse
import random
import statistics
import string
import time

from cooccur_trie.core.indexer import CorpusIndexer


def make_vocab(size, rng, min_len=2, max_len=9):
    vocab = set()
    while len(vocab) < size:
        n = rng.randint(min_len, max_len)
        vocab.add("".join(rng.choice(string.ascii_lowercase) for _ in range(n)))
    return sorted(vocab)


def make_corpus(vocab, sentences, words, rng):
    # Zipf-ish weights so some words repeat inside a sentence
    weights = [1.0 / (i + 1) for i in range(len(vocab))]
    return [rng.choices(vocab, weights=weights, k=rng.randint(1, words)) for _ in range(sentences)]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--sentences", type=int, default=2000, help="number of sentences")
    parser.add_argument("--words", type=int, default=12, help="max words per sentence")
    parser.add_argument("--vocab", type=int, default=1000, help="distinct words to draw from")
    parser.add_argument("--lookups", type=int, default=2000, help="measured lookups")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    vocab = make_vocab(args.vocab, rng)
    corpus = make_corpus(vocab, args.sentences, args.words, rng)

    indexer = CorpusIndexer()
    t0 = time.perf_counter()
    indexer.count_words(corpus)
    t1 = time.perf_counter()
    indexer.build_subtries(corpus)
    t2 = time.perf_counter()

    print("frequency pass: %.3fs" % (t1 - t0))
    print("co-occurrence pass: %.3fs" % (t2 - t1))
    print("trie nodes: %d" % indexer.trie.node_count())

    latencies = []
    for _ in range(args.lookups):
        w = rng.choice(vocab)
        t0 = time.perf_counter()
        _ = indexer.trie.lookup(w)
        latencies.append((time.perf_counter() - t0) * 1e6)  # us

    print("lookup (us): mean=%.3f median=%.3f max=%.3f" % (
        statistics.mean(latencies),
        statistics.median(latencies),
        max(latencies),
    ))


if __name__ == "__main__":
    main()
