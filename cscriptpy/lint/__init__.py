"""Line-local and document-global lint rules plus the scan session."""

from cscriptpy.lint.document_rules import (
    BraceBalanceRule,
    BracketBalanceRule,
    ParenBalanceRule,
    default_document_rules,
)
from cscriptpy.lint.options import ScanOptions
from cscriptpy.lint.rules import (
    DocumentRule,
    LineRule,
    LintRule,
    default_line_rules,
    validate_lint_rules,
)
from cscriptpy.lint.runner import ScanSession, run_lint

__all__ = [
    "BraceBalanceRule",
    "BracketBalanceRule",
    "DocumentRule",
    "LineRule",
    "LintRule",
    "ParenBalanceRule",
    "ScanOptions",
    "ScanSession",
    "default_document_rules",
    "default_line_rules",
    "run_lint",
    "validate_lint_rules",
]
