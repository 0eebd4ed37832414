"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from cscriptpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LINT_PIPELINE_INVALID_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PIPELINE_INVALID_OPERATOR",
    message='Invalid pipeline operator. Use "|>" for pipeline operations.',
    hint="A lone `|` is not a pipeline; write `value |> transform`.",
    severity="error",
    category="lint/pipeline",
)

LINT_PIPELINE_MISSING_CONTINUATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PIPELINE_MISSING_CONTINUATION",
    message="Pipeline operator at end of line requires a continuation on the next line.",
    severity="warning",
    category="lint/pipeline",
)

LINT_MATCH_UNCLOSED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_MATCH_UNCLOSED",
    message="Match expression is not properly closed with }",
    hint="Add the closing `}` of the match block.",
    severity="error",
    category="lint/match",
)

LINT_MATCH_ARM_MISSING_PATTERN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_MATCH_ARM_MISSING_PATTERN",
    message='Match arm must have a pattern before "=>"',
    hint="Use `_ => ...` for a catch-all arm.",
    severity="error",
    category="lint/match",
)

LINT_LINQ_INVALID_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_LINQ_INVALID_VARIABLE",
    message="Invalid variable name in LINQ query. Must be a valid identifier.",
    severity="error",
    category="lint/linq",
)

LINT_LINQ_MISSING_SELECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_LINQ_MISSING_SELECT",
    message="LINQ query should end with a select clause.",
    severity="information",
    category="lint/linq",
)

LINT_OPERATOR_INVALID_OVERLOAD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_OPERATOR_INVALID_OVERLOAD",
    message="Invalid operator for overloading.",
    severity="error",
    category="lint/operator",
)

LINT_FUNCTION_INVALID_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FUNCTION_INVALID_NAME",
    message="Invalid function name. Must be a valid identifier.",
    severity="error",
    category="lint/function",
)

LINT_FUNCTION_MISSING_ARROW_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FUNCTION_MISSING_ARROW_BODY",
    message="Arrow function body is missing.",
    hint="Write the body after `=>` on the same line.",
    severity="warning",
    category="lint/function",
)

LINT_STYLE_MIXED_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_MIXED_INDENTATION",
    message="Mixed tabs and spaces for indentation. Choose either tabs or spaces consistently.",
    severity="warning",
    category="lint/style",
)

LINT_SYNTAX_UNCLOSED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_UNCLOSED_STRING",
    message="Unclosed string.",
    severity="error",
    category="lint/syntax",
)

LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER",
    message="Identifiers cannot start with a number.",
    severity="error",
    category="lint/syntax",
)

LINT_STYLE_REDUNDANT_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_REDUNDANT_SEMICOLON",
    message="Semicolon not needed when using Python-style syntax with colons.",
    severity="information",
    category="lint/style",
)

LINT_STYLE_STRUCT_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_STRUCT_NAME",
    message="Struct names should start with an uppercase letter and follow PascalCase convention.",
    severity="warning",
    category="lint/style",
)

LINT_SYNTAX_EMPTY_AUTO_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_EMPTY_AUTO_PROPERTY",
    message='Auto-property must include at least one of "get" or "set".',
    hint="Use `{ get; set; }` or `{ get; }`.",
    severity="error",
    category="lint/syntax",
)

LINT_SYNTAX_INVALID_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_INVALID_RANGE",
    message="Range start must be less than range end.",
    hint="Use `_` as the upper bound for an open-ended range.",
    severity="error",
    category="lint/syntax",
)

LINT_SYNTAX_WITH_CONTEXT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_WITH_CONTEXT",
    message='"with" expression must be used with an assignment or return statement.',
    severity="warning",
    category="lint/syntax",
)

LINT_BALANCE_UNCLOSED_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_BALANCE_UNCLOSED_BRACE",
    message="unclosed brace(s). Missing closing brace '}'.",
    severity="error",
    category="lint/balance",
)

LINT_BALANCE_EXTRA_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_BALANCE_EXTRA_BRACE",
    message="extra closing brace(s).",
    severity="error",
    category="lint/balance",
)

LINT_BALANCE_UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_BALANCE_UNCLOSED_BRACKET",
    message="unclosed bracket(s). Missing closing bracket ']'.",
    severity="error",
    category="lint/balance",
)

LINT_BALANCE_UNCLOSED_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_BALANCE_UNCLOSED_PAREN",
    message="unclosed parenthesis(es). Missing closing parenthesis ')'.",
    severity="error",
    category="lint/balance",
)
