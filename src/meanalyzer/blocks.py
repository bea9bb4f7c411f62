"""Block extraction: delimit corpus lines into ^data ... _data blocks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .constants import BLOCK_CLOSE, BLOCK_OPEN
from .diagnostics import (
    Diagnostic,
    DiagnosticType,
    MalformedBlockError,
    Severity,
    emit,
)

logger = logging.getLogger(__name__)

# CR, LF and CRLF only; form feed, NEL and U+2028 stay inside a line
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Block:
    """One data block: verbatim lines from the open marker to the close marker.

    Attributes:
        start: 0-based index of the open marker line in the corpus.
        end: 0-based index of the close marker line in the corpus.
        lines: Verbatim lines, both markers included.
    """

    start: int
    end: int
    lines: tuple[str, ...]

    @property
    def line_number(self) -> int:
        """1-based line number of the open marker."""
        return self.start + 1

    @property
    def line_range(self) -> range:
        return range(self.start, self.end + 1)


@dataclass
class BlockScan:
    """Blocks found in a corpus plus diagnostics for the ones dropped."""

    blocks: List[Block] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


def split_lines(text: str) -> list[str]:
    """Split corpus text into lines without their terminators."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def is_open_marker(line: str) -> bool:
    return line.strip() == BLOCK_OPEN


def is_close_marker(line: str) -> bool:
    return line.strip() == BLOCK_CLOSE


def extract_blocks(lines: Sequence[str] | Iterable[str], *, strict: bool = False) -> BlockScan:
    """Delimit lines into non-overlapping blocks.

    Blocks cannot nest. A close marker outside a block is ignored. An open
    marker inside a block restarts accumulation at the new marker and the
    unterminated block is dropped with a malformed_block diagnostic; with
    ``strict=True`` it raises MalformedBlockError instead. A trailing block
    with no close marker is dropped with an unterminated_block diagnostic.

    Args:
        lines: Corpus lines in order.
        strict: Fail on an open marker inside an open block.

    Returns:
        BlockScan with blocks in corpus order.

    Raises:
        MalformedBlockError: Under the strict policy only.
    """
    scan = BlockScan()
    start: int | None = None
    current: list[str] = []

    for index, line in enumerate(lines):
        if is_open_marker(line):
            if start is not None:
                message = (
                    f"Block opened at line {start + 1} is not closed before "
                    f"the next open marker at line {index + 1}; block dropped"
                )
                if strict:
                    raise MalformedBlockError(message, line=start + 1)
                scan.diagnostics.append(
                    emit(
                        Diagnostic(
                            type=DiagnosticType.MALFORMED_BLOCK,
                            severity=Severity.WARNING,
                            message=message,
                            line=start + 1,
                            context={"restarted_at": index + 1},
                        )
                    )
                )
            start = index
            current = [line]
        elif start is None:
            if is_close_marker(line):
                logger.debug("Ignoring close marker outside a block at line %d", index + 1)
        elif is_close_marker(line):
            current.append(line)
            scan.blocks.append(Block(start=start, end=index, lines=tuple(current)))
            start = None
            current = []
        else:
            current.append(line)

    if start is not None:
        scan.diagnostics.append(
            emit(
                Diagnostic(
                    type=DiagnosticType.UNTERMINATED_BLOCK,
                    severity=Severity.WARNING,
                    message=f"Block opened at line {start + 1} is never closed; block dropped",
                    line=start + 1,
                )
            )
        )

    logger.debug("Extracted %d blocks", len(scan.blocks))
    return scan
