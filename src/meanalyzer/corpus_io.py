"""Corpus input and export output on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import ENCODING_UTF8
from .corpus import Corpus, parse_corpus
from .diagnostics import CorpusLoadError

logger = logging.getLogger(__name__)


def load_corpus_text(file_path: Path, encoding: str = ENCODING_UTF8) -> str:
    """Load raw corpus text from a file.

    Args:
        file_path: Path to the WRIML file.
        encoding: File encoding (default UTF-8).

    Returns:
        The file contents with a leading BOM removed.

    Raises:
        FileNotFoundError: If the file does not exist.
        CorpusLoadError: For decoding errors.
    """

    if not file_path.exists():
        raise FileNotFoundError(file_path)

    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise CorpusLoadError(f"Failed to decode file {file_path} with encoding {encoding}") from exc

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    if not text:
        logger.warning("File %s is empty", file_path)

    return text


def load_corpus(
    file_path: Path, *, encoding: str = ENCODING_UTF8, strict: bool = False
) -> Corpus:
    """Load and parse a WRIML file."""
    logger.info("Loading corpus from %s", file_path)
    return parse_corpus(load_corpus_text(Path(file_path), encoding=encoding), strict=strict)


def derive_output_path(
    input_path: Path,
    suffix: str,
    *,
    ext: str | None = None,
    directory: Path | None = None,
) -> Path:
    """Name an output after its input: ``<stem><suffix><ext>``.

    Args:
        input_path: Corpus file the output is derived from.
        suffix: Operation-specific suffix, e.g. "-sorted".
        ext: Extension with leading dot; defaults to the input's extension.
        directory: Output directory; defaults to the input's directory.
    """
    input_path = Path(input_path)
    extension = input_path.suffix if ext is None else ext
    parent = input_path.parent if directory is None else Path(directory)
    return parent / f"{input_path.stem}{suffix}{extension}"


def write_export(text: str, output_path: Path, encoding: str = ENCODING_UTF8) -> Path:
    """Write rendered output, creating parent directories. Returns the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if text and not text.endswith("\n"):
        text += "\n"
    output_path.write_text(text, encoding=encoding)
    logger.info("Results exported to: %s", output_path)
    return output_path
