"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from cscriptpy.text import TextRange

Severity = Literal["error", "warning", "information"]

DIAGNOSTIC_SOURCE = "cscript"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured finding emitted by a lint rule; `code` tags the rule that produced it."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    source: str = DIAGNOSTIC_SOURCE

    @property
    def start_line(self) -> int:
        return self.range.start_line

    @property
    def start_column(self) -> int:
        return self.range.start_column

    @property
    def end_line(self) -> int:
        return self.range.end_line

    @property
    def end_column(self) -> int:
        return self.range.end_column
