"""Tests for meanalyzer.models."""

from __future__ import annotations

from meanalyzer.models import Record, RecordGroup


def test_record_derived_tokens() -> None:
    record = Record(identifier="a", morpheme_line="n-say", gloss_line="1SG  say")

    assert record.gloss_tokens == ["1SG", "say"]
    assert record.morpheme_tokens == ["n", "say"]
    assert record.gloss_token_set == frozenset({"1SG", "say"})
    assert record.gloss_key == "1SG say"


def test_record_missing_fields_counts_empty_as_missing() -> None:
    record = Record(identifier="", morpheme_line="x", gloss_line="")

    assert record.missing_fields() == ["gloss_line", "identifier"]
    assert not record.is_complete


def test_record_complete() -> None:
    assert Record(identifier="a", morpheme_line="x", gloss_line="X").is_complete


def test_record_absent_gloss_key_is_empty() -> None:
    assert Record().gloss_key == ""
    assert Record().gloss_tokens == []


def test_record_dict_roundtrip() -> None:
    record = Record(
        identifier="a",
        context="c",
        context_type="bridging",
        gloss_line="X",
        raw_lines=("^data", "^gl X _gl", "_data"),
        line=3,
    )

    d = record.to_dict()
    assert d["raw_lines"] == ["^data", "^gl X _gl", "_data"]
    assert d["context_type"] == "bridging"
    assert Record.from_dict(d) == record


def test_record_group_accessors() -> None:
    a = Record(identifier="a")
    b = Record(identifier="b")
    group = RecordGroup(key="a", records=(a, b))

    assert group.seed is a
    assert group.identifiers() == ["a", "b"]
    assert len(group) == 2
    assert list(group) == [a, b]
