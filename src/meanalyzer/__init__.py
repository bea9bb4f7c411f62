"""Parse, sort and search WRIML-annotated linguistic examples."""

from .corpus import Corpus, parse_corpus
from .corpus_io import load_corpus
from .diagnostics import (
    CorpusLoadError,
    Diagnostic,
    DiagnosticType,
    MalformedBlockError,
    MeanalyzerError,
    OperationCancelledError,
    UnsupportedExportFormatError,
)
from .export import ExportFormat, ReportMode, render_groups, render_records
from .grouping import group_context_variants, group_minimal_pairs, is_minimal_pair
from .models import Record, RecordGroup
from .search import search_by_gloss, search_by_morpheme

__all__ = [
    "Corpus",
    "CorpusLoadError",
    "Diagnostic",
    "DiagnosticType",
    "ExportFormat",
    "MalformedBlockError",
    "MeanalyzerError",
    "OperationCancelledError",
    "Record",
    "RecordGroup",
    "ReportMode",
    "UnsupportedExportFormatError",
    "group_context_variants",
    "group_minimal_pairs",
    "is_minimal_pair",
    "load_corpus",
    "parse_corpus",
    "render_groups",
    "render_records",
    "search_by_gloss",
    "search_by_morpheme",
]
