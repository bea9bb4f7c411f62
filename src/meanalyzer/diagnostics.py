"""Diagnostics for tolerated input problems and the package's exception types.

Tolerated problems (malformed blocks, records missing required fields) never
abort a parse: they are collected as Diagnostic objects, logged at WARNING,
and returned next to the parsed data. Fatal problems raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class DiagnosticType(str, Enum):
    """Kinds of tolerated input problems."""

    UNTERMINATED_BLOCK = "unterminated_block"
    MALFORMED_BLOCK = "malformed_block"
    MISSING_REQUIRED_FIELD = "missing_required_field"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Single diagnostic: type, severity, message, and where it was found."""

    type: DiagnosticType
    severity: Severity
    message: str
    line: int | None = None
    identifier: str | None = None
    context: dict[str, Any] | None = field(default=None, hash=False)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.line is not None:
            d["line"] = self.line
        if self.identifier is not None:
            d["identifier"] = self.identifier
        if self.context:
            d["context"] = dict(self.context)
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Diagnostic:
        return cls(
            type=DiagnosticType(data["type"]),
            severity=Severity(data["severity"]),
            message=str(data["message"]),
            line=data.get("line"),
            identifier=data.get("identifier"),
            context=data.get("context"),
        )

    def __str__(self) -> str:
        where = f" (line {self.line})" if self.line is not None else ""
        return f"{self.type.value}{where}: {self.message}"


def emit(diagnostic: Diagnostic) -> Diagnostic:
    """Log a diagnostic at WARNING level and return it."""
    logger.warning("%s", diagnostic)
    return diagnostic


class MeanalyzerError(Exception):
    """Base class for errors raised by this package."""


class CorpusLoadError(MeanalyzerError):
    """Raised when corpus text cannot be loaded from a file."""


class MalformedBlockError(MeanalyzerError):
    """Raised under the strict block policy when a block is opened twice."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class UnsupportedExportFormatError(MeanalyzerError):
    """Raised when an export format is outside the supported set."""


class OperationCancelledError(MeanalyzerError):
    """Raised when a caller-supplied cancellation check fires."""
