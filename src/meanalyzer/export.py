"""Render records and record groups into the supported export encodings.

Formats form a closed set:

- ``wriml``: pass-through markup. In full mode a record is re-emitted from its
  verbatim block lines, so exporting a freshly parsed corpus reproduces it.
- ``txt``: plain-text block, one ``key: value`` line per tier.
- ``rmd``: tabular-metadata block, YAML-like rows usable as R Markdown params.
- ``tex``: document-preparation block for the LaTeX ``interlinear`` package.

Document headers and footers are left to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from .constants import (
    EXT_RMD,
    EXT_TEX,
    EXT_TXT,
    EXT_WRIML,
    MSG_MISSING_CONTEXT,
    MSG_MISSING_GLOSS,
    MSG_MISSING_ID,
    MSG_MISSING_MORPHEMES,
    MSG_NO_CONTEXT,
    MSG_NO_ID,
    REPORT_SEPARATOR,
    UNSPECIFIED_CONTEXT_TYPE,
)
from .diagnostics import UnsupportedExportFormatError
from .models import Record, RecordGroup


class ExportFormat(str, Enum):
    WRIML = "wriml"
    TEXT = "txt"
    TABULAR = "rmd"
    DOCUMENT = "tex"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def parse(cls, name: str | ExportFormat) -> ExportFormat:
        """Resolve a format from its value, a dotted extension or an alias.

        Raises:
            UnsupportedExportFormatError: If the name is not recognized.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().lstrip(".")
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            supported = ", ".join(f.value for f in cls)
            raise UnsupportedExportFormatError(
                f"Unsupported export format: {name!r} (expected one of: {supported})"
            ) from None


_EXTENSIONS = {
    ExportFormat.WRIML: EXT_WRIML,
    ExportFormat.TEXT: EXT_TXT,
    ExportFormat.TABULAR: EXT_RMD,
    ExportFormat.DOCUMENT: EXT_TEX,
}

_ALIASES = {
    "pass-through": ExportFormat.WRIML,
    "passthrough": ExportFormat.WRIML,
    "plain": ExportFormat.TEXT,
    "text": ExportFormat.TEXT,
    "tabular": ExportFormat.TABULAR,
    "document": ExportFormat.DOCUMENT,
    "latex": ExportFormat.DOCUMENT,
}


class ReportMode(str, Enum):
    """Full records, or only identifier + context."""

    FULL = "full"
    CONTEXTS = "contexts"


def _or(value: str | None, fallback: str) -> str:
    return value if value else fallback


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _context_type(record: Record) -> str:
    return _or(record.context_type, UNSPECIFIED_CONTEXT_TYPE)


def _render_tex(record: Record) -> str:
    fields = [
        ("ct", _or(record.context, MSG_MISSING_CONTEXT)),
        ("aj", record.acceptability_judgment or ""),
        ("tx", record.unsegmented_text or ""),
        ("mb", _or(record.morpheme_line, MSG_MISSING_MORPHEMES)),
        ("gl", _or(record.gloss_line, MSG_MISSING_GLOSS)),
        ("tr", record.free_translation or ""),
        ("lt", record.literal_translation or ""),
        ("id", _or(record.identifier, MSG_MISSING_ID)),
    ]
    body = [f"\\{name} {value}\\\\" for name, value in fields]
    return "\n".join(["\\begin{interlinear}", *body, "\\end{interlinear}"])


def _render_txt(record: Record) -> str:
    return "\n".join(
        [
            f"ID: {_or(record.identifier, MSG_MISSING_ID)}",
            f"Context ({_context_type(record)}): {_or(record.context, MSG_MISSING_CONTEXT)}",
            f"tx: {record.unsegmented_text or ''}",
            f"mb: {_or(record.morpheme_line, MSG_MISSING_MORPHEMES)}",
            f"gl: {_or(record.gloss_line, MSG_MISSING_GLOSS)}",
            f"tr: {record.free_translation or ''}",
            f"lt: {record.literal_translation or ''}",
        ]
    )


def _render_rmd(record: Record) -> str:
    rows = [
        ("ct-type", _context_type(record)),
        ("ct", _or(record.context, MSG_MISSING_CONTEXT)),
        ("tx", record.unsegmented_text or ""),
        ("mb", _or(record.morpheme_line, MSG_MISSING_MORPHEMES)),
        ("gl", _or(record.gloss_line, MSG_MISSING_GLOSS)),
        ("tr", record.free_translation or ""),
        ("lt", record.literal_translation or ""),
    ]
    lines = [f"- id: {_quote(_or(record.identifier, MSG_MISSING_ID))}"]
    lines += [f"  {key}: {_quote(value)}" for key, value in rows]
    return "\n".join(lines)


def _render_context(record: Record, fmt: ExportFormat) -> str:
    identifier = _or(record.identifier, MSG_MISSING_ID)
    context = _or(record.context, MSG_MISSING_CONTEXT)
    context_type = _context_type(record)
    if fmt is ExportFormat.WRIML:
        return "\n".join(
            [
                f' ^context_id="{identifier}"_type="{context_type}" ',
                f"   {context}",
                " _context ",
            ]
        )
    if fmt is ExportFormat.TEXT:
        return f"ID: {identifier}\nContext ({context_type}): {context}"
    if fmt is ExportFormat.TABULAR:
        return "\n".join(
            [
                f"- id: {_quote(identifier)}",
                f"  type: {_quote(context_type)}",
                f"  ct: {_quote(context)}",
            ]
        )
    raise UnsupportedExportFormatError(
        f"Export format {fmt.value!r} is not available in {ReportMode.CONTEXTS.value!r} mode"
    )


def render_record(
    record: Record, fmt: ExportFormat | str, mode: ReportMode | str = ReportMode.FULL
) -> str:
    """Render one record (no trailing newline).

    Raises:
        UnsupportedExportFormatError: For an unknown format, or ``tex`` in
            contexts mode.
    """
    fmt = ExportFormat.parse(fmt)
    mode = ReportMode(mode)
    if mode is ReportMode.CONTEXTS:
        return _render_context(record, fmt)
    if fmt is ExportFormat.WRIML:
        return "\n".join(record.raw_lines)
    if fmt is ExportFormat.TEXT:
        return _render_txt(record)
    if fmt is ExportFormat.TABULAR:
        return _render_rmd(record)
    return _render_tex(record)


def _separator(fmt: ExportFormat, mode: ReportMode) -> str:
    # Pass-through blocks are re-emitted back to back
    if fmt is ExportFormat.WRIML and mode is ReportMode.FULL:
        return "\n"
    return "\n\n"


def render_records(
    records: Iterable[Record],
    fmt: ExportFormat | str,
    mode: ReportMode | str = ReportMode.FULL,
) -> str:
    """Render records in order, joined by the format's separator.

    An empty input renders "". The format is validated before any record
    is rendered, so a bad format fails without side effects.
    """
    fmt = ExportFormat.parse(fmt)
    mode = ReportMode(mode)
    if mode is ReportMode.CONTEXTS and fmt is ExportFormat.DOCUMENT:
        raise UnsupportedExportFormatError(
            f"Export format {fmt.value!r} is not available in {mode.value!r} mode"
        )
    return _separator(fmt, mode).join(render_record(record, fmt, mode) for record in records)


def render_groups(groups: Sequence[RecordGroup], fmt: ExportFormat | str) -> str:
    """Render groups in order, members in order."""
    return render_records((record for group in groups for record in group.records), fmt)


def describe_contexts(records: Iterable[Record]) -> str:
    """Console listing of identifiers and contexts."""
    entries = []
    for record in records:
        identifier = _or(record.identifier, MSG_NO_ID)
        context = record.context if record.context is not None else MSG_NO_CONTEXT
        entries.append(f"ID: {identifier}\nContext (type: {_context_type(record)}): {context}\n")
    return "\n".join(entries)


def describe_full(records: Iterable[Record]) -> str:
    """Console listing of the verbatim blocks, separated by a rule."""
    return "\n".join(f"{REPORT_SEPARATOR}\n" + "\n".join(record.raw_lines) for record in records)


def describe(records: Iterable[Record], mode: ReportMode | str = ReportMode.FULL) -> str:
    mode = ReportMode(mode)
    if mode is ReportMode.CONTEXTS:
        return describe_contexts(records)
    return describe_full(records)
