# tests/test_report.py
# report lines and query outcomes

import pytest
from cooccur_trie.core.indexer import build_index
from cooccur_trie.core.report import (
    EMPTY_MARKER,
    INVALID_MARKER,
    QueryOutcome,
    Reporter,
    full_listing,
    query,
    subtrie_listing,
)


@pytest.fixture
def trie():
    return build_index([["the", "cat", "sat"], ["the", "dog", "ran"], ["hello"]])


def test_full_listing(trie):
    assert list(full_listing(trie)) == [
        "cat (1)",
        "dog (1)",
        "hello (1)",
        "ran (1)",
        "sat (1)",
        "the (2)",
    ]


def test_subtrie_listing_found(trie):
    assert list(subtrie_listing(trie, "the")) == [
        "the",
        "- cat (1)",
        "- dog (1)",
        "- ran (1)",
        "- sat (1)",
    ]
    assert list(subtrie_listing(trie, "cat")) == ["cat", "- sat (1)", "- the (1)"]


def test_subtrie_listing_markers(trie):
    assert list(subtrie_listing(trie, "zzz")) == ["zzz", INVALID_MARKER]
    assert list(subtrie_listing(trie, "hello")) == ["hello", EMPTY_MARKER]
    assert INVALID_MARKER == "(INVALID STRING)"
    assert EMPTY_MARKER == "(EMPTY)"


def test_query_word_echoed_as_typed(trie):
    assert list(subtrie_listing(trie, "CaT")) == ["CaT", "- sat (1)", "- the (1)"]


def test_query_outcomes(trie):
    found = query(trie, "the")
    assert found.outcome is QueryOutcome.FOUND
    assert found.count == 2
    assert found.partners == [("cat", 1), ("dog", 1), ("ran", 1), ("sat", 1)]

    empty = query(trie, "hello")
    assert empty.outcome is QueryOutcome.EMPTY
    assert empty.count == 1
    assert empty.partners == []

    missing = query(trie, "zzz")
    assert missing.outcome is QueryOutcome.NOT_FOUND
    assert missing.count == 0


def test_reporter_list_all_and_prefix(trie):
    rep = Reporter(trie, list_all="*", prefix="* ")
    assert list(rep.answer("*"))[-1] == "the (2)"
    assert list(rep.answer("dog")) == ["dog", "* ran (1)", "* the (1)"]
    # "!" is just an unknown word once the directive is remapped
    assert list(rep.answer("!")) == ["!", INVALID_MARKER]


def test_reporter_answer_all(trie):
    lines = list(Reporter(trie).answer_all(["zzz", "hello"]))
    assert lines == ["zzz", INVALID_MARKER, "hello", EMPTY_MARKER]


@pytest.mark.parametrize("word", ["the", "hello", "zzz"])
def test_subtrie_listing_follows_query_outcome(trie, word):
    result = query(trie, word)
    lines = list(subtrie_listing(trie, word))
    assert lines[0] == result.word
    if result.outcome is QueryOutcome.NOT_FOUND:
        assert lines[1:] == [INVALID_MARKER]
    elif result.outcome is QueryOutcome.EMPTY:
        assert lines[1:] == [EMPTY_MARKER]
    else:
        assert lines[1:] == [f"- {w} ({c})" for w, c in result.partners]
