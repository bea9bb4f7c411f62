"""Corpus: the ordered collection of records parsed from one WRIML text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List

from .blocks import extract_blocks, split_lines
from .diagnostics import Diagnostic, DiagnosticType, Severity, emit
from .models import Record
from .parser import parse_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corpus:
    """Records in order of appearance plus the diagnostics raised while parsing."""

    records: tuple[Record, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    def identifiers(self) -> list[str | None]:
        return [record.identifier for record in self.records]

    def incomplete_records(self) -> list[Record]:
        return [record for record in self.records if not record.is_complete]


def _missing_field_diagnostic(record: Record) -> Diagnostic:
    missing = record.missing_fields()
    label = record.identifier or "<no id>"
    return Diagnostic(
        type=DiagnosticType.MISSING_REQUIRED_FIELD,
        severity=Severity.WARNING,
        message=f"Record {label} is missing {', '.join(missing)}; it will not match searches",
        line=record.line,
        identifier=record.identifier,
        context={"missing": missing},
    )


def parse_corpus(text: str, *, strict: bool = False) -> Corpus:
    """Parse a whole WRIML text into a Corpus.

    The whole text is parsed before anything is returned. Malformed blocks
    are dropped with a diagnostic; records missing a morpheme line, gloss
    line or identifier are kept, with one diagnostic each.

    Args:
        text: Corpus text.
        strict: Raise MalformedBlockError on an open marker inside an open block.

    Returns:
        Corpus with records in source order.
    """
    scan = extract_blocks(split_lines(text), strict=strict)
    diagnostics: List[Diagnostic] = list(scan.diagnostics)
    records: List[Record] = []

    for block in scan.blocks:
        record = parse_block(block)
        if not record.is_complete:
            diagnostics.append(emit(_missing_field_diagnostic(record)))
        records.append(record)

    logger.info("Parsed %d records (%d diagnostics)", len(records), len(diagnostics))
    return Corpus(records=tuple(records), diagnostics=tuple(diagnostics))
