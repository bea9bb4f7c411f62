"""Search engine: retrieve records containing a gloss or morpheme token."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .models import Record


class SearchField(str, Enum):
    GLOSS = "gloss"
    MORPHEME = "morpheme"


def search_by_gloss(records: Iterable[Record], target: str) -> list[Record]:
    """Records whose gloss tokens contain target (exact, case-sensitive)."""
    return [record for record in records if target in record.gloss_tokens]


def search_by_morpheme(records: Iterable[Record], target: str) -> list[Record]:
    """Records whose morpheme tokens contain target (exact, case-sensitive)."""
    return [record for record in records if target in record.morpheme_tokens]


def search(records: Iterable[Record], target: str, field: SearchField | str) -> list[Record]:
    """Dispatch to the gloss or morpheme search.

    Raises:
        ValueError: If field is not a SearchField value.
    """
    field = SearchField(field)
    if field is SearchField.GLOSS:
        return search_by_gloss(records, target)
    return search_by_morpheme(records, target)
