"""Entrypoints that callers use to scan document text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from cscriptpy.diagnostics import Diagnostic
from cscriptpy.lint import run_lint as _run_lint
from cscriptpy.lint.options import ScanOptions
from cscriptpy.pipeline.results import LintRunResult

if TYPE_CHECKING:
    from cscriptpy.lint.rules import DocumentRule, LineRule


def run_lint(
    text: str,
    options: ScanOptions | None = None,
    *,
    line_rules: Sequence[LineRule] | None = None,
    document_rules: Sequence[DocumentRule] | None = None,
) -> LintRunResult:
    """Run every lint rule over one document text."""
    return _run_lint(text, options, line_rules=line_rules, document_rules=document_rules)


def scan(text: str, options: ScanOptions | None = None) -> list[Diagnostic]:
    """Scan document text and return its full diagnostic list.

    The list is empty when `options.diagnostics_enabled` is false.
    """
    return _run_lint(text, options).diagnostics
