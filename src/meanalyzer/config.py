"""Run configuration.

Whether to export, and in which format, is an explicit value here rather
than an interactive prompt. Defaults can come from the
environment; the CLI loads a ``.env`` file first.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from .constants import (
    ENCODING_UTF8,
    ENV_ENCODING,
    ENV_EXPORT_FORMAT,
    ENV_REPORT_DIR,
    ENV_STRICT_BLOCKS,
    EXPORT_FORMAT_NONE,
    REPORT_DIR,
    TRUTHY_VALUES,
)
from .export import ExportFormat


def parse_export_format(value: str | ExportFormat | None) -> ExportFormat | None:
    """Parse a format option; None, "" and "none" mean no export.

    Raises:
        UnsupportedExportFormatError: For an unknown format name.
    """
    if value is None:
        return None
    if isinstance(value, ExportFormat):
        return value
    if not value.strip() or value.strip().lower() == EXPORT_FORMAT_NONE:
        return None
    return ExportFormat.parse(value)


def _parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


@dataclass
class AnalyzerConfig:
    """Options for one invocation.

    Attributes:
        export_format: Output encoding, or None to skip writing a report.
        strict_blocks: Fail on an open marker inside an open block instead
            of dropping the unterminated block.
        encoding: Encoding of corpus files.
        report_dir: Directory for search reports.
    """

    export_format: ExportFormat | None = None
    strict_blocks: bool = False
    encoding: str = ENCODING_UTF8
    report_dir: Path = field(default_factory=lambda: REPORT_DIR)

    @classmethod
    def from_env(cls) -> AnalyzerConfig:
        """Build a config from MEANALYZER_* environment variables."""
        report_dir = os.getenv(ENV_REPORT_DIR)
        return cls(
            export_format=parse_export_format(os.getenv(ENV_EXPORT_FORMAT)),
            strict_blocks=_parse_bool(os.getenv(ENV_STRICT_BLOCKS)),
            encoding=os.getenv(ENV_ENCODING) or ENCODING_UTF8,
            report_dir=Path(report_dir) if report_dir else REPORT_DIR,
        )

    def with_overrides(self, **overrides) -> AnalyzerConfig:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
