"""Tests for meanalyzer.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from meanalyzer.config import AnalyzerConfig, parse_export_format
from meanalyzer.diagnostics import UnsupportedExportFormatError
from meanalyzer.export import ExportFormat

ENV_VARS = (
    "MEANALYZER_EXPORT_FORMAT",
    "MEANALYZER_STRICT_BLOCKS",
    "MEANALYZER_ENCODING",
    "MEANALYZER_REPORT_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AnalyzerConfig()

    assert config.export_format is None
    assert config.strict_blocks is False
    assert config.encoding == "utf-8"
    assert config.report_dir == Path("export")


def test_from_env_defaults() -> None:
    assert AnalyzerConfig.from_env() == AnalyzerConfig()


def test_from_env_reads_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEANALYZER_EXPORT_FORMAT", ".tex")
    monkeypatch.setenv("MEANALYZER_STRICT_BLOCKS", "yes")
    monkeypatch.setenv("MEANALYZER_ENCODING", "latin-1")
    monkeypatch.setenv("MEANALYZER_REPORT_DIR", "reports")

    config = AnalyzerConfig.from_env()

    assert config.export_format is ExportFormat.DOCUMENT
    assert config.strict_blocks is True
    assert config.encoding == "latin-1"
    assert config.report_dir == Path("reports")


def test_from_env_rejects_unknown_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEANALYZER_EXPORT_FORMAT", "docx")

    with pytest.raises(UnsupportedExportFormatError):
        AnalyzerConfig.from_env()


@pytest.mark.parametrize("value", [None, "", "  ", "none", "NONE"])
def test_parse_export_format_none(value: str | None) -> None:
    assert parse_export_format(value) is None


def test_parse_export_format_value() -> None:
    assert parse_export_format("tabular") is ExportFormat.TABULAR
    assert parse_export_format(ExportFormat.TEXT) is ExportFormat.TEXT


def test_with_overrides_skips_none() -> None:
    config = AnalyzerConfig(strict_blocks=True)

    updated = config.with_overrides(strict_blocks=None, report_dir=Path("out"))

    assert updated.strict_blocks is True
    assert updated.report_dir == Path("out")
    assert config.report_dir == Path("export")
