"""Operation orchestration: load a corpus, group or search it, write results."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

from .config import AnalyzerConfig
from .constants import (
    SUFFIX_CONTEXT_VARIANTS,
    SUFFIX_MINIMAL_PAIRS,
    TEMPLATE_GLOSS_REPORT,
    TEMPLATE_MORPHEME_REPORT,
)
from .corpus import Corpus
from .corpus_io import derive_output_path, load_corpus, write_export
from .diagnostics import Diagnostic
from .export import ExportFormat, ReportMode, render_groups, render_records
from .grouping import CancelCheck, check_cancelled, group_context_variants, group_minimal_pairs
from .models import Record, RecordGroup
from .search import SearchField, search

logger = logging.getLogger(__name__)


@dataclass
class GroupingResult:
    """Groups computed for a corpus and the file they were written to."""

    output_path: Path
    groups: List[RecordGroup]
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class SearchResult:
    """Records matching a target, plus the rendered report if one was written."""

    target: str
    field: SearchField
    records: List[Record]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    report: str | None = None
    output_path: Path | None = None

    @property
    def found(self) -> bool:
        return bool(self.records)


def _load(input_path: Path, config: AnalyzerConfig) -> Corpus:
    return load_corpus(Path(input_path), encoding=config.encoding, strict=config.strict_blocks)


def _sort_corpus(
    input_path: Path,
    config: AnalyzerConfig | None,
    suffix: str,
    grouper: Callable[..., list[RecordGroup]],
    cancel: CancelCheck | None,
) -> GroupingResult:
    config = config or AnalyzerConfig()
    corpus = _load(input_path, config)
    check_cancelled(cancel, "parsing")
    groups = grouper(corpus.records, cancel=cancel)
    output_path = write_export(
        render_groups(groups, ExportFormat.WRIML),
        derive_output_path(Path(input_path), suffix),
        encoding=config.encoding,
    )
    return GroupingResult(
        output_path=output_path, groups=groups, diagnostics=list(corpus.diagnostics)
    )


def sort_by_minimal_pairs(
    input_path: Path,
    config: AnalyzerConfig | None = None,
    *,
    cancel: CancelCheck | None = None,
) -> GroupingResult:
    """Reorder a WRIML file so minimal pairs sit together.

    Writes the verbatim blocks, group by group, to ``<stem>-sorted<ext>``
    next to the input.

    Raises:
        FileNotFoundError: If the input file does not exist.
        OperationCancelledError: If cancel fires between or during phases.
    """
    return _sort_corpus(input_path, config, SUFFIX_MINIMAL_PAIRS, group_minimal_pairs, cancel)


def sort_by_context_variants(
    input_path: Path,
    config: AnalyzerConfig | None = None,
    *,
    cancel: CancelCheck | None = None,
) -> GroupingResult:
    """Reorder a WRIML file so examples with the same gloss sit together.

    Writes to ``<stem>-ctvariants<ext>`` next to the input.
    """
    return _sort_corpus(
        input_path, config, SUFFIX_CONTEXT_VARIANTS, group_context_variants, cancel
    )


def find_contexts(
    target: str,
    input_path: Path,
    field: SearchField | str,
    config: AnalyzerConfig | None = None,
    *,
    mode: ReportMode | str = ReportMode.FULL,
) -> SearchResult:
    """Search a corpus and optionally write a report.

    A report is written only when ``config.export_format`` is set and at
    least one record matches. The format is checked against the mode before
    the corpus is read, so an unusable format fails fast.

    Raises:
        FileNotFoundError: If the input file does not exist.
        UnsupportedExportFormatError: If the format is unavailable in mode.
    """
    config = config or AnalyzerConfig()
    field = SearchField(field)
    mode = ReportMode(mode)
    if config.export_format is not None:
        render_records([], config.export_format, mode)

    corpus = _load(input_path, config)
    matches = search(corpus.records, target, field)
    result = SearchResult(
        target=target, field=field, records=matches, diagnostics=list(corpus.diagnostics)
    )

    if not matches:
        logger.info("No data found for the %s: %s", field.value, target)
        return result
    if config.export_format is None:
        return result

    template = TEMPLATE_MORPHEME_REPORT if field is SearchField.MORPHEME else TEMPLATE_GLOSS_REPORT
    result.report = render_records(matches, config.export_format, mode)
    result.output_path = write_export(
        result.report,
        derive_output_path(
            Path(input_path),
            template.format(target=target),
            ext=config.export_format.extension,
            directory=config.report_dir,
        ),
        encoding=config.encoding,
    )
    return result


def find_morpheme_contexts(
    target: str,
    input_path: Path,
    config: AnalyzerConfig | None = None,
    *,
    mode: ReportMode | str = ReportMode.FULL,
) -> SearchResult:
    """Records whose morpheme line contains target; see find_contexts."""
    return find_contexts(target, input_path, SearchField.MORPHEME, config, mode=mode)


def find_gloss_contexts(
    target: str,
    input_path: Path,
    config: AnalyzerConfig | None = None,
    *,
    mode: ReportMode | str = ReportMode.FULL,
) -> SearchResult:
    """Records whose gloss line contains target; see find_contexts."""
    return find_contexts(target, input_path, SearchField.GLOSS, config, mode=mode)
