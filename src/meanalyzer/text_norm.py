"""Whitespace normalization and tokenization of gloss and morpheme lines.

Pure, deterministic, case-sensitive. Tokens are the runs of characters left
after splitting on whitespace and punctuation; nothing else is normalized.
"""

from __future__ import annotations

import string
import unicodedata
from itertools import groupby

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def squish(text: str | None) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    if not text:
        return ""
    return " ".join(text.split())


def _is_separator(ch: str) -> bool:
    # ASCII punctuation includes symbols such as "=", "+" and "~" (category S)
    if ch.isspace() or ch in _ASCII_PUNCTUATION:
        return True
    return unicodedata.category(ch).startswith("P")


def tokenize(text: str | None) -> list[str]:
    """Split a line into tokens on runs of whitespace and punctuation.

    Args:
        text: Gloss or morpheme line; None is treated as empty.

    Returns:
        Tokens in line order. Empty tokens never appear, so leading or
        trailing punctuation does not produce "" entries.

    Examples:
        >>> tokenize("JOHN EAT-3SG ART APPLE")
        ['JOHN', 'EAT', '3SG', 'ART', 'APPLE']
    """
    if not text:
        return []
    return ["".join(chars) for is_sep, chars in groupby(text, key=_is_separator) if not is_sep]


def token_set(text: str | None) -> frozenset[str]:
    """Set of tokens of a line (repeated tokens collapse)."""
    return frozenset(tokenize(text))
