"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from cscriptpy.diagnostics import Diagnostic
from cscriptpy.text import SourceDocument


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one document version."""

    document: SourceDocument
    diagnostics: list[Diagnostic]
    has_errors: bool
    skipped: bool = False
