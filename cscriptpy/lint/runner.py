"""Scan session that runs line and document rules over one document version."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
import logging

from cscriptpy.diagnostics import Diagnostic, has_errors, sort_diagnostics
from cscriptpy.lint.document_rules import default_document_rules
from cscriptpy.lint.options import ScanOptions
from cscriptpy.lint.rules import (
    DocumentRule,
    LineRule,
    default_line_rules,
    validate_lint_rules,
)
from cscriptpy.pipeline.results import LintRunResult
from cscriptpy.text import SourceDocument

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanSession:
    """Transient state for one (document identity, version) scan.

    Sessions never outlive the version they were created for; a new version
    gets a new session and recomputes everything.
    """

    document: SourceDocument
    options: ScanOptions
    line_rules: tuple[LineRule, ...]
    document_rules: tuple[DocumentRule, ...]
    identity: Hashable | None = None
    version: int | None = None
    _result: LintRunResult | None = field(default=None, init=False, repr=False)

    @staticmethod
    def create(
        text: str,
        options: ScanOptions | None = None,
        *,
        identity: Hashable | None = None,
        version: int | None = None,
        line_rules: Sequence[LineRule] | None = None,
        document_rules: Sequence[DocumentRule] | None = None,
    ) -> "ScanSession":
        resolved_options = _resolve_options(options)
        resolved_line_rules = tuple(line_rules) if line_rules is not None else default_line_rules()
        resolved_document_rules = (
            tuple(document_rules) if document_rules is not None else default_document_rules()
        )
        validate_lint_rules(resolved_line_rules, scope="line")
        validate_lint_rules(resolved_document_rules, scope="document")
        return ScanSession(
            document=SourceDocument.from_text(text),
            options=resolved_options,
            line_rules=resolved_line_rules,
            document_rules=resolved_document_rules,
            identity=identity,
            version=version,
        )

    @property
    def is_complete(self) -> bool:
        return self._result is not None

    def run(self) -> LintRunResult:
        """Run every rule once; repeated calls return the same result."""
        if self._result is None:
            self._result = self._scan()
        return self._result

    def _scan(self) -> LintRunResult:
        if not self.options.diagnostics_enabled:
            logger.debug("Diagnostics disabled; skipping scan of %s", self.identity)
            return LintRunResult(document=self.document, diagnostics=[], has_errors=False, skipped=True)

        diagnostics: list[Diagnostic] = []
        for line_index, line in enumerate(self.document):
            for rule in self.line_rules:
                diagnostics.extend(rule.run(line, line_index, self.document))
        for rule in self.document_rules:
            diagnostics.extend(rule.run(self.document))

        sorted_diagnostics = sort_diagnostics(diagnostics)
        logger.debug(
            "Scanned %s (version %s): %d lines, %d diagnostics",
            self.identity,
            self.version,
            self.document.line_count,
            len(sorted_diagnostics),
        )
        return LintRunResult(
            document=self.document,
            diagnostics=sorted_diagnostics,
            has_errors=has_errors(sorted_diagnostics),
        )


def run_lint(
    text: str,
    options: ScanOptions | None = None,
    *,
    line_rules: Sequence[LineRule] | None = None,
    document_rules: Sequence[DocumentRule] | None = None,
) -> LintRunResult:
    """Run line-local and document-global lint rules over one document text."""
    session = ScanSession.create(
        text,
        options,
        line_rules=line_rules,
        document_rules=document_rules,
    )
    return session.run()


def _resolve_options(options: ScanOptions | None) -> ScanOptions:
    if options is None:
        return ScanOptions()
    if not isinstance(options, ScanOptions):
        raise TypeError(f"Expected ScanOptions, got {type(options).__name__}")
    return options
