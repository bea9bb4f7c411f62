"""Tests for meanalyzer.search."""

from __future__ import annotations

import pytest

from meanalyzer.corpus import parse_corpus
from meanalyzer.models import Record
from meanalyzer.search import SearchField, search, search_by_gloss, search_by_morpheme


def test_search_by_gloss_scenario() -> None:
    first = Record(identifier="a", morpheme_line="n-say", gloss_line="1SG say")
    second = Record(identifier="b", morpheme_line="a-eat", gloss_line="3SG eat")

    assert search_by_gloss([first, second], "3SG") == [second]


def test_search_by_gloss_is_exact_and_case_sensitive() -> None:
    record = Record(identifier="a", gloss_line="EAT-3SG")

    assert search_by_gloss([record], "3SG") == [record]
    assert search_by_gloss([record], "3sg") == []
    assert search_by_gloss([record], "3S") == []
    assert search_by_gloss([record], "EAT-3SG") == []


def test_search_by_morpheme_preserves_order(sample_text: str) -> None:
    corpus = parse_corpus(sample_text)

    assert [r.identifier for r in search_by_morpheme(corpus, "n")] == ["ex1", "ex2", "ex4"]
    assert [r.identifier for r in search_by_morpheme(corpus, "say")] == [
        "ex1",
        "ex2",
        "ex3",
        "ex4",
    ]


def test_missing_line_never_matches() -> None:
    record = Record(identifier="a")

    assert search_by_gloss([record], "X") == []
    assert search_by_morpheme([record], "X") == []


def test_no_match_is_empty_list() -> None:
    assert search_by_gloss([Record(gloss_line="A")], "B") == []
    assert search_by_gloss([], "B") == []


def test_empty_target_never_matches() -> None:
    assert search_by_gloss([Record(gloss_line="A - B")], "") == []


def test_search_dispatch(sample_text: str) -> None:
    corpus = parse_corpus(sample_text)

    assert [r.identifier for r in search(corpus, "3SG", SearchField.GLOSS)] == ["ex3"]
    assert [r.identifier for r in search(corpus, "a", "morpheme")] == ["ex3"]


def test_search_dispatch_rejects_unknown_field() -> None:
    with pytest.raises(ValueError):
        search([], "x", "translation")
