"""Heuristic syntax diagnostics for CScript source files."""

from cscriptpy.diagnostics import Diagnostic, Severity
from cscriptpy.lint import ScanOptions, ScanSession
from cscriptpy.pipeline import LintRunResult, run_lint, scan

__all__ = [
    "Diagnostic",
    "LintRunResult",
    "ScanOptions",
    "ScanSession",
    "Severity",
    "run_lint",
    "scan",
]
