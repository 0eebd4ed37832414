"""Diagnostics."""

from cscriptpy.diagnostics.codes import (
    LINT_BALANCE_EXTRA_BRACE,
    LINT_BALANCE_UNCLOSED_BRACE,
    LINT_BALANCE_UNCLOSED_BRACKET,
    LINT_BALANCE_UNCLOSED_PAREN,
    LINT_FUNCTION_INVALID_NAME,
    LINT_FUNCTION_MISSING_ARROW_BODY,
    LINT_LINQ_INVALID_VARIABLE,
    LINT_LINQ_MISSING_SELECT,
    LINT_MATCH_ARM_MISSING_PATTERN,
    LINT_MATCH_UNCLOSED,
    LINT_OPERATOR_INVALID_OVERLOAD,
    LINT_PIPELINE_INVALID_OPERATOR,
    LINT_PIPELINE_MISSING_CONTINUATION,
    LINT_STYLE_MIXED_INDENTATION,
    LINT_STYLE_REDUNDANT_SEMICOLON,
    LINT_STYLE_STRUCT_NAME,
    LINT_SYNTAX_EMPTY_AUTO_PROPERTY,
    LINT_SYNTAX_INVALID_RANGE,
    LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER,
    LINT_SYNTAX_UNCLOSED_STRING,
    LINT_SYNTAX_WITH_CONTEXT,
    DiagnosticSpec,
)
from cscriptpy.diagnostics.diagnostic import DIAGNOSTIC_SOURCE, Diagnostic, Severity
from cscriptpy.diagnostics.report import (
    collect_diagnostics,
    count_by_severity,
    diagnostic_from_spec,
    format_diagnostic,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "LINT_BALANCE_EXTRA_BRACE",
    "LINT_BALANCE_UNCLOSED_BRACE",
    "LINT_BALANCE_UNCLOSED_BRACKET",
    "LINT_BALANCE_UNCLOSED_PAREN",
    "LINT_FUNCTION_INVALID_NAME",
    "LINT_FUNCTION_MISSING_ARROW_BODY",
    "LINT_LINQ_INVALID_VARIABLE",
    "LINT_LINQ_MISSING_SELECT",
    "LINT_MATCH_ARM_MISSING_PATTERN",
    "LINT_MATCH_UNCLOSED",
    "LINT_OPERATOR_INVALID_OVERLOAD",
    "LINT_PIPELINE_INVALID_OPERATOR",
    "LINT_PIPELINE_MISSING_CONTINUATION",
    "LINT_STYLE_MIXED_INDENTATION",
    "LINT_STYLE_REDUNDANT_SEMICOLON",
    "LINT_STYLE_STRUCT_NAME",
    "LINT_SYNTAX_EMPTY_AUTO_PROPERTY",
    "LINT_SYNTAX_INVALID_RANGE",
    "LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER",
    "LINT_SYNTAX_UNCLOSED_STRING",
    "LINT_SYNTAX_WITH_CONTEXT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "count_by_severity",
    "diagnostic_from_spec",
    "format_diagnostic",
    "has_errors",
    "sort_diagnostics",
]
