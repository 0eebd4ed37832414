"""Result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from cscriptpy.pipeline.results import LintRunResult

if TYPE_CHECKING:
    from cscriptpy.diagnostics import Diagnostic
    from cscriptpy.lint.options import ScanOptions
    from cscriptpy.lint.rules import DocumentRule, LineRule


def run_lint(
    text: str,
    options: ScanOptions | None = None,
    *,
    line_rules: Sequence[LineRule] | None = None,
    document_rules: Sequence[DocumentRule] | None = None,
) -> LintRunResult:
    from cscriptpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, options, line_rules=line_rules, document_rules=document_rules)


def scan(text: str, options: ScanOptions | None = None) -> list[Diagnostic]:
    from cscriptpy.pipeline.entrypoints import scan as _scan

    return _scan(text, options)


__all__ = [
    "LintRunResult",
    "run_lint",
    "scan",
]
