"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from cscriptpy.diagnostics.codes import DiagnosticSpec
from cscriptpy.diagnostics.diagnostic import Diagnostic, Severity
from cscriptpy.text import TextRange


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts: dict[Severity, int] = {"error": 0, "warning": 0, "information": 0}
    for diagnostic in diagnostics:
        counts[diagnostic.severity] += 1
    return counts


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    range: TextRange,
    *,
    message: str | None = None,
    hint: str | None = None,
) -> Diagnostic:
    """Build a diagnostic from a spec, optionally overriding its message or hint."""
    return Diagnostic(
        code=spec.code,
        message=spec.message if message is None else message,
        range=range,
        severity=spec.severity,
        hint=spec.hint if hint is None else hint,
        category=spec.category,
    )


def format_diagnostic(diagnostic: Diagnostic, *, path: str | None = None) -> str:
    """Render a diagnostic as `path:line:col: severity CODE message` with 1-based positions."""
    location = f"{diagnostic.start_line + 1}:{diagnostic.start_column + 1}"
    if path is not None:
        location = f"{path}:{location}"
    return f"{location}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start,
            diagnostic.range.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )
