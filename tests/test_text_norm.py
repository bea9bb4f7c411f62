"""Tests for meanalyzer.text_norm."""

from __future__ import annotations

import pytest

from meanalyzer.text_norm import squish, token_set, tokenize


def test_squish_collapses_and_trims() -> None:
    assert squish("  1SG   say\t PST ") == "1SG say PST"


def test_squish_empty_and_none() -> None:
    assert squish("") == ""
    assert squish(None) == ""


def test_tokenize_splits_on_whitespace_and_punctuation() -> None:
    assert tokenize("JOHN EAT-3SG ART APPLE") == ["JOHN", "EAT", "3SG", "ART", "APPLE"]


def test_tokenize_drops_empty_tokens() -> None:
    assert tokenize("  -a.b,,c. ") == ["a", "b", "c"]


def test_tokenize_none_and_empty() -> None:
    assert tokenize(None) == []
    assert tokenize("") == []
    assert tokenize(" .-, ") == []


def test_tokenize_is_case_sensitive() -> None:
    assert tokenize("sg SG Sg") == ["sg", "SG", "Sg"]


@pytest.mark.parametrize(
    "line,expected",
    [
        ("dog=ACC", ["dog", "ACC"]),
        ("a—b", ["a", "b"]),
        ("«quote»", ["quote"]),
        ("x~y+z", ["x", "y", "z"]),
    ],
)
def test_tokenize_punctuation_variants(line: str, expected: list[str]) -> None:
    assert tokenize(line) == expected


def test_tokenize_keeps_combining_diacritics_inside_tokens() -> None:
    assert tokenize("é ɔ̃") == ["é", "ɔ̃"]


def test_tokenize_preserves_order_and_repeats() -> None:
    assert tokenize("A B A") == ["A", "B", "A"]


def test_token_set_collapses_repeats() -> None:
    assert token_set("A B A") == frozenset({"A", "B"})
    assert token_set(None) == frozenset()
