"""Command-line interface.

Usage:
    meanalyzer minimal-pairs data/corpus.wriml
    meanalyzer context-variants data/corpus.wriml
    meanalyzer morpheme eat data/corpus.wriml --format tex
    meanalyzer gloss 3SG data/corpus.wriml --mode contexts --format txt
    meanalyzer table data/corpus.wriml --output corpus.csv --group minimal-pairs
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv

from .config import AnalyzerConfig, parse_export_format
from .corpus_io import load_corpus
from .diagnostics import MeanalyzerError
from .export import ReportMode, describe
from .grouping import group_context_variants, group_minimal_pairs
from .pipeline import (
    GroupingResult,
    SearchResult,
    find_gloss_contexts,
    find_morpheme_contexts,
    sort_by_context_variants,
    sort_by_minimal_pairs,
)
from .tables import export_records_csv, prepare_records_table

logger = logging.getLogger(__name__)

app = typer.Typer(help="Sort and search WRIML-annotated linguistic data")

GROUPINGS = {
    "minimal-pairs": group_minimal_pairs,
    "context-variants": group_context_variants,
}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    """Load .env defaults and configure logging."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def _config(
    strict: bool, export_format: str | None = None, report_dir: Path | None = None
) -> AnalyzerConfig:
    try:
        config = AnalyzerConfig.from_env().with_overrides(
            strict_blocks=True if strict else None,
            report_dir=report_dir,
        )
        # "--format none" must be able to switch off an export set in .env
        if export_format is not None:
            config.export_format = parse_export_format(export_format)
        return config
    except MeanalyzerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1) from exc


def _report_grouping(result: GroupingResult, label: str) -> None:
    typer.echo(f"{len(result.groups)} {label} written to: {result.output_path}")
    if result.diagnostics:
        typer.echo(f"{len(result.diagnostics)} diagnostics (see log)", err=True)


@app.command("minimal-pairs")
def minimal_pairs(
    input_path: Path = typer.Argument(..., help="WRIML file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed blocks"),
) -> None:
    """Group minimal pairs and write <stem>-sorted.<ext>."""
    config = _config(strict)
    try:
        result = sort_by_minimal_pairs(input_path, config)
    except (FileNotFoundError, MeanalyzerError) as exc:
        _fail(exc)
    _report_grouping(result, "minimal-pair groups")


@app.command("context-variants")
def context_variants(
    input_path: Path = typer.Argument(..., help="WRIML file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed blocks"),
) -> None:
    """Group identical glosses and write <stem>-ctvariants.<ext>."""
    config = _config(strict)
    try:
        result = sort_by_context_variants(input_path, config)
    except (FileNotFoundError, MeanalyzerError) as exc:
        _fail(exc)
    _report_grouping(result, "context-variant classes")


def _report_search(result: SearchResult, mode: ReportMode) -> None:
    if not result.found:
        typer.echo(f"No data found for the {result.field.value}: {result.target}")
        return
    typer.echo(describe(result.records, mode))
    if result.output_path is not None:
        typer.echo(f"Results exported to: {result.output_path}")


def _search_command(finder, target, input_path, mode, export_format, report_dir, strict) -> None:
    config = _config(strict, export_format, report_dir)
    try:
        mode = ReportMode(mode)
        result = finder(target, input_path, config, mode=mode)
    except (ValueError, FileNotFoundError, MeanalyzerError) as exc:
        _fail(exc)
    _report_search(result, mode)


@app.command()
def morpheme(
    target: str = typer.Argument(..., help="Morpheme to search for (case-sensitive)"),
    input_path: Path = typer.Argument(..., help="WRIML file"),
    mode: str = typer.Option("full", "--mode", help="full | contexts"),
    export_format: Optional[str] = typer.Option(
        None, "--format", help="wriml | txt | rmd | tex | none (default: MEANALYZER_EXPORT_FORMAT)"
    ),
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", help="Report directory"),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed blocks"),
) -> None:
    """List the examples whose morpheme line contains TARGET."""
    _search_command(
        find_morpheme_contexts, target, input_path, mode, export_format, report_dir, strict
    )


@app.command()
def gloss(
    target: str = typer.Argument(..., help="Gloss to search for (case-sensitive)"),
    input_path: Path = typer.Argument(..., help="WRIML file"),
    mode: str = typer.Option("full", "--mode", help="full | contexts"),
    export_format: Optional[str] = typer.Option(
        None, "--format", help="wriml | txt | rmd | tex | none (default: MEANALYZER_EXPORT_FORMAT)"
    ),
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", help="Report directory"),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed blocks"),
) -> None:
    """List the examples whose gloss line contains TARGET."""
    _search_command(
        find_gloss_contexts, target, input_path, mode, export_format, report_dir, strict
    )


@app.command()
def table(
    input_path: Path = typer.Argument(..., help="WRIML file"),
    output: Path = typer.Option(..., "--output", "-o", help="CSV output path"),
    group: Optional[str] = typer.Option(
        None, "--group", help="Add a group column: minimal-pairs | context-variants"
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed blocks"),
) -> None:
    """Write one CSV row per parsed example."""
    config = _config(strict)
    if group is not None and group not in GROUPINGS:
        _fail(ValueError(f"Unknown grouping: {group!r}"))
    try:
        corpus = load_corpus(input_path, encoding=config.encoding, strict=config.strict_blocks)
    except (FileNotFoundError, MeanalyzerError) as exc:
        _fail(exc)
    groups = GROUPINGS[group](corpus.records) if group else None
    df = prepare_records_table(corpus.records, groups)
    export_records_csv(df, output)
    typer.echo(f"{len(df)} rows written to: {output}")


if __name__ == "__main__":
    app()
