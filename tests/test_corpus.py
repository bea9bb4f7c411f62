"""Tests for meanalyzer.corpus."""

from __future__ import annotations

import pytest

from meanalyzer.corpus import parse_corpus
from meanalyzer.diagnostics import DiagnosticType, MalformedBlockError


def test_parse_corpus_records_in_source_order(sample_text: str) -> None:
    corpus = parse_corpus(sample_text)

    assert len(corpus) == 4
    assert corpus.identifiers() == ["ex1", "ex2", "ex3", "ex4"]
    assert corpus[2].identifier == "ex3"
    assert [r.line for r in corpus] == [1, 11, 18, 26]


def test_parse_corpus_is_idempotent(sample_text: str) -> None:
    assert parse_corpus(sample_text).records == parse_corpus(sample_text).records


def test_parse_corpus_complete_sample_has_no_diagnostics(sample_text: str) -> None:
    assert parse_corpus(sample_text).diagnostics == ()


def test_missing_required_fields_reported_once_per_record() -> None:
    text = "^data\n^tr Only a translation. _tr\n_data\n^data\n^id ok _id\n^gl X _gl\n_data\n"

    corpus = parse_corpus(text)

    assert len(corpus) == 2
    assert [d.type for d in corpus.diagnostics] == [
        DiagnosticType.MISSING_REQUIRED_FIELD,
        DiagnosticType.MISSING_REQUIRED_FIELD,
    ]
    first, second = corpus.diagnostics
    assert first.context == {"missing": ["morpheme_line", "gloss_line", "identifier"]}
    assert first.line == 1
    assert second.identifier == "ok"
    assert second.context == {"missing": ["morpheme_line"]}
    assert corpus.incomplete_records() == list(corpus.records)


def test_open_without_close_yields_no_records_and_one_diagnostic() -> None:
    corpus = parse_corpus("^data\n^id x _id\n^mb x _mb\n^gl X _gl\n")

    assert len(corpus) == 0
    assert len(corpus.diagnostics) == 1
    assert corpus.diagnostics[0].type == DiagnosticType.UNTERMINATED_BLOCK


def test_empty_text_yields_empty_corpus() -> None:
    corpus = parse_corpus("")

    assert len(corpus) == 0
    assert corpus.diagnostics == ()


def test_strict_policy_propagates() -> None:
    with pytest.raises(MalformedBlockError):
        parse_corpus("^data\n^data\n_data\n", strict=True)


def test_duplicate_identifiers_are_kept() -> None:
    text = "^data\n^id a _id\n^mb x _mb\n^gl X _gl\n_data\n^data\n^id a _id\n^mb y _mb\n^gl Y _gl\n_data\n"

    corpus = parse_corpus(text)

    assert corpus.identifiers() == ["a", "a"]
