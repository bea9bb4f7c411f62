"""Tabular view of parsed records and its CSV export."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from .constants import (
    CONTEXT,
    CONTEXT_TYPE,
    GLOSS,
    GLOSS_TOKEN_COUNT,
    GROUP,
    IDENTIFIER,
    JUDGMENT,
    LINE,
    LITERAL,
    MORPHEMES,
    RECORD_COLUMNS,
    TRANSLATION,
    UNSEGMENTED,
)
from .models import Record, RecordGroup


def _validate_columns(df: pd.DataFrame, required: Iterable[str], name: str) -> None:
    if df is None:
        raise ValueError(f"{name} must be provided")
    missing = set(required) - set(df.columns)
    if missing:
        raise ValueError(f"{name} is missing required columns: {missing}")


def _record_row(record: Record) -> dict:
    return {
        IDENTIFIER: record.identifier,
        CONTEXT_TYPE: record.context_type,
        CONTEXT: record.context,
        JUDGMENT: record.acceptability_judgment,
        UNSEGMENTED: record.unsegmented_text,
        MORPHEMES: record.morpheme_line,
        GLOSS: record.gloss_line,
        TRANSLATION: record.free_translation,
        LITERAL: record.literal_translation,
        GLOSS_TOKEN_COUNT: len(record.gloss_tokens),
        LINE: record.line,
    }


def prepare_records_table(
    records: Iterable[Record], groups: Sequence[RecordGroup] | None = None
) -> pd.DataFrame:
    """Build one row per record, in order.

    When groups are given, rows follow group order and a GROUP column holds
    the 0-based group index.
    """
    columns = list(RECORD_COLUMNS)
    if groups is not None:
        columns.append(GROUP)
        rows = [
            {**_record_row(record), GROUP: index}
            for index, group in enumerate(groups)
            for record in group.records
        ]
    else:
        rows = [_record_row(record) for record in records]

    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def export_records_csv(df: pd.DataFrame, output_path: Path) -> None:
    """Export a records table to CSV."""

    _validate_columns(df, RECORD_COLUMNS, "df")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
