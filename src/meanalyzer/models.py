"""Data models for parsed WRIML examples.

This module defines frozen dataclasses for:
- Record: one parsed data block (an example with its tiers)
- RecordGroup: an ordered cluster of records produced by the grouping engine
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .text_norm import squish, token_set, tokenize

# Fields a record needs to take part in search and grouping
REQUIRED_FIELDS = ("morpheme_line", "gloss_line", "identifier")


@dataclass(frozen=True)
class Record:
    """One parsed example.

    Tag-derived fields are None when the tag is absent and "" when the tag is
    present with an empty payload. An empty acceptability judgment means the
    example is acceptable in its context.

    Attributes:
        identifier: Value of the first ^id or ^rf tag in the block.
        context: Context prompt (^ct).
        context_type: The ct tag's type attribute; None when absent.
        acceptability_judgment: Consultant judgment note (^aj).
        unsegmented_text: Unsegmented utterance (^tx).
        morpheme_line: Segmented morpheme line (^mb).
        gloss_line: Gloss line aligned with the morpheme line (^gl).
        free_translation: Free translation (^tr).
        literal_translation: Literal translation (^lt).
        raw_lines: Verbatim block lines, markers included.
        line: 1-based line number of the block's open marker.
    """

    identifier: str | None = None
    context: str | None = None
    context_type: str | None = None
    acceptability_judgment: str | None = None
    unsegmented_text: str | None = None
    morpheme_line: str | None = None
    gloss_line: str | None = None
    free_translation: str | None = None
    literal_translation: str | None = None
    raw_lines: tuple[str, ...] = field(default_factory=tuple)
    line: int | None = None

    @property
    def gloss_tokens(self) -> list[str]:
        return tokenize(self.gloss_line)

    @property
    def morpheme_tokens(self) -> list[str]:
        return tokenize(self.morpheme_line)

    @property
    def gloss_token_set(self) -> frozenset[str]:
        return token_set(self.gloss_line)

    @property
    def gloss_key(self) -> str:
        """Whitespace-normalized gloss line; "" when the gloss is absent."""
        return squish(self.gloss_line)

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "identifier": self.identifier,
            "context": self.context,
            "context_type": self.context_type,
            "acceptability_judgment": self.acceptability_judgment,
            "unsegmented_text": self.unsegmented_text,
            "morpheme_line": self.morpheme_line,
            "gloss_line": self.gloss_line,
            "free_translation": self.free_translation,
            "literal_translation": self.literal_translation,
            "raw_lines": list(self.raw_lines),
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Record":
        """Deserialize from dictionary."""
        return cls(
            identifier=d.get("identifier"),
            context=d.get("context"),
            context_type=d.get("context_type"),
            acceptability_judgment=d.get("acceptability_judgment"),
            unsegmented_text=d.get("unsegmented_text"),
            morpheme_line=d.get("morpheme_line"),
            gloss_line=d.get("gloss_line"),
            free_translation=d.get("free_translation"),
            literal_translation=d.get("literal_translation"),
            raw_lines=tuple(d.get("raw_lines", ())),
            line=d.get("line"),
        )


@dataclass(frozen=True)
class RecordGroup:
    """Ordered group of records.

    Attributes:
        key: Seed identifier for minimal-pair groups, normalized gloss for
            context-variant classes.
        records: Members in discovery order; the first one is the seed.
    """

    key: str
    records: tuple[Record, ...]

    @property
    def seed(self) -> Record:
        return self.records[0]

    def identifiers(self) -> list[str | None]:
        return [record.identifier for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
