"""Document-wide rules that aggregate state across every line."""

from __future__ import annotations

from dataclasses import dataclass

from cscriptpy.diagnostics import (
    LINT_BALANCE_EXTRA_BRACE,
    LINT_BALANCE_UNCLOSED_BRACE,
    LINT_BALANCE_UNCLOSED_BRACKET,
    LINT_BALANCE_UNCLOSED_PAREN,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from cscriptpy.lint.balance import BRACES, BRACKETS, PARENS, DelimiterPair, net_document_count
from cscriptpy.lint.rules import DocumentRule, LintConfidence, LintDomain, LintScope
from cscriptpy.text import SourceDocument


@dataclass(frozen=True, slots=True)
class BraceBalanceRule:
    """Net `{`/`}` count over the whole document, reported on the last line.

    Only the total is known, so the unmatched brace itself is never located.
    """

    code: str = LINT_BALANCE_UNCLOSED_BRACE.code
    name: str = "balanceBraces"
    category: str = "balance"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "document"

    def run(self, document: SourceDocument) -> list[Diagnostic]:
        net = net_document_count(document, BRACES)
        if net > 0:
            return [_balance_diagnostic(document, LINT_BALANCE_UNCLOSED_BRACE, net)]
        if net < 0:
            return [_balance_diagnostic(document, LINT_BALANCE_EXTRA_BRACE, -net)]
        return []


@dataclass(frozen=True, slots=True)
class BracketBalanceRule:
    code: str = LINT_BALANCE_UNCLOSED_BRACKET.code
    name: str = "balanceBrackets"
    category: str = "balance"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "document"

    def run(self, document: SourceDocument) -> list[Diagnostic]:
        return _unclosed_only(document, BRACKETS, LINT_BALANCE_UNCLOSED_BRACKET)


@dataclass(frozen=True, slots=True)
class ParenBalanceRule:
    code: str = LINT_BALANCE_UNCLOSED_PAREN.code
    name: str = "balanceParens"
    category: str = "balance"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "document"

    def run(self, document: SourceDocument) -> list[Diagnostic]:
        return _unclosed_only(document, PARENS, LINT_BALANCE_UNCLOSED_PAREN)


def default_document_rules() -> tuple[DocumentRule, ...]:
    rules: list[DocumentRule] = [
        BraceBalanceRule(),
        BracketBalanceRule(),
        ParenBalanceRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def _unclosed_only(document: SourceDocument, pair: DelimiterPair, spec: DiagnosticSpec) -> list[Diagnostic]:
    # Surplus closers are not reported for brackets and parentheses.
    net = net_document_count(document, pair)
    if net <= 0:
        return []
    return [_balance_diagnostic(document, spec, net)]


def _balance_diagnostic(document: SourceDocument, spec: DiagnosticSpec, count: int) -> Diagnostic:
    return diagnostic_from_spec(
        spec,
        document.whole_line_range(document.last_line_index),
        message=f"{count} {spec.message}",
    )
