"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final, Literal, Protocol, TypeAlias

from cscriptpy.diagnostics import (
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
    Diagnostic,
    diagnostic_from_spec,
)
from cscriptpy.lint.balance import find_block_close
from cscriptpy.text import SourceDocument, TextRange

LintDomain: TypeAlias = Literal["correctness", "suspicious", "style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]
LintScope: TypeAlias = Literal["line", "document"]

IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*", re.ASCII)

OVERLOADABLE_OPERATORS: Final[tuple[str, ...]] = (
    "+", "-", "*", "/", "%",
    "==", "!=", "<", ">", "<=", ">=",
    "&&", "||", "&", "|", "^", "~", "<<", ">>",
    "+=", "-=", "*=", "/=", "%=",
)


class LintRule(Protocol):
    """Metadata shared by every rule, whatever its scope."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    @property
    def scope(self) -> LintScope: ...


class LineRule(LintRule, Protocol):
    """Rule evaluated once per line; `document` is available for lookahead only."""

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]: ...


class DocumentRule(LintRule, Protocol):
    """Rule evaluated once over the whole document."""

    def run(self, document: SourceDocument) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class PipelineInvalidOperatorRule:
    """Flags `|` not followed by `>`.

    The scan is character based, so boolean `||` is reported as well.
    """

    code: str = LINT_PIPELINE_INVALID_OPERATOR.code
    name: str = "pipelineInvalidOperator"
    category: str = "pipeline"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\|[^>]")

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        return [
            diagnostic_from_spec(
                LINT_PIPELINE_INVALID_OPERATOR,
                TextRange.at(line_index, match.start(), 2),
            )
            for match in self._pattern.finditer(line)
        ]


@dataclass(frozen=True, slots=True)
class PipelineMissingContinuationRule:
    code: str = LINT_PIPELINE_MISSING_CONTINUATION.code
    name: str = "pipelineMissingContinuation"
    category: str = "pipeline"
    domain: LintDomain = "suspicious"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        if not line.strip().endswith("|>"):
            return []
        start = line.rfind("|>")
        return [
            diagnostic_from_spec(
                LINT_PIPELINE_MISSING_CONTINUATION,
                TextRange.on_line(line_index, start, len(line)),
            )
        ]


@dataclass(frozen=True, slots=True)
class MatchUnclosedRule:
    """Searches forward from `match ... {` for the line that closes the block.

    Method and function calls such as `s.match(re)` are not match expressions.
    """

    code: str = LINT_MATCH_UNCLOSED.code
    name: str = "matchUnclosed"
    category: str = "match"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"(?<![.\w$])match\b(?!\s*\()[^{};]*\{", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None:
            return []
        if find_block_close(document, line_index) is not None:
            return []
        return [
            diagnostic_from_spec(
                LINT_MATCH_UNCLOSED,
                TextRange.at(line_index, match.start(), len("match")),
            )
        ]


@dataclass(frozen=True, slots=True)
class MatchArmMissingPatternRule:
    """Flags `=> expr` with nothing before the arrow, inside a match block or not."""

    code: str = LINT_MATCH_ARM_MISSING_PATTERN.code
    name: str = "matchArmMissingPattern"
    category: str = "match"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        arrow = line.find("=>")
        if arrow < 0 or line[:arrow].strip():
            return []
        return [
            diagnostic_from_spec(
                LINT_MATCH_ARM_MISSING_PATTERN,
                TextRange.whole_line(line_index, len(line)),
            )
        ]


@dataclass(frozen=True, slots=True)
class LinqInvalidVariableRule:
    code: str = LINT_LINQ_INVALID_VARIABLE.code
    name: str = "linqInvalidVariable"
    category: str = "linq"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\bfrom\s+(\w+)\s+in\s", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None or IDENTIFIER.fullmatch(match.group(1)):
            return []
        return [
            diagnostic_from_spec(
                LINT_LINQ_INVALID_VARIABLE,
                TextRange.on_line(line_index, match.start(1), match.end(1)),
            )
        ]


@dataclass(frozen=True, slots=True)
class LinqMissingSelectRule:
    """Suggests `select` on any line with `from` but no `select`.

    Single-line only: a query finishing with `select` on a later line is still
    reported on its `from` line.
    """

    code: str = LINT_LINQ_MISSING_SELECT.code
    name: str = "linqMissingSelect"
    category: str = "linq"
    domain: LintDomain = "suspicious"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _from: re.Pattern[str] = re.compile(r"\bfrom\b", re.ASCII)
    _select: re.Pattern[str] = re.compile(r"\bselect\b", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._from.search(line)
        if match is None or self._select.search(line):
            return []
        return [
            diagnostic_from_spec(
                LINT_LINQ_MISSING_SELECT,
                TextRange.on_line(line_index, match.start(), match.end()),
            )
        ]


@dataclass(frozen=True, slots=True)
class OperatorInvalidOverloadRule:
    code: str = LINT_OPERATOR_INVALID_OVERLOAD.code
    name: str = "operatorInvalidOverload"
    category: str = "operator"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\boperator\s+([+\-*/%=<>!&|^~]+)\s*\(", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None:
            return []
        token = match.group(1)
        if token in OVERLOADABLE_OPERATORS:
            return []
        return [
            diagnostic_from_spec(
                LINT_OPERATOR_INVALID_OVERLOAD,
                TextRange.on_line(line_index, match.start(1), match.end(1)),
                message=(
                    f'Invalid operator "{token}" for overloading. '
                    f"Valid operators: {', '.join(OVERLOADABLE_OPERATORS)}"
                ),
            )
        ]


@dataclass(frozen=True, slots=True)
class FunctionInvalidNameRule:
    code: str = LINT_FUNCTION_INVALID_NAME.code
    name: str = "functionInvalidName"
    category: str = "function"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\bfunction\s+(\w+)\s*\(", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None or IDENTIFIER.fullmatch(match.group(1)):
            return []
        return [
            diagnostic_from_spec(
                LINT_FUNCTION_INVALID_NAME,
                TextRange.on_line(line_index, match.start(1), match.end(1)),
            )
        ]


@dataclass(frozen=True, slots=True)
class FunctionMissingArrowBodyRule:
    """Flags lines ending in `=>` (optionally `=> ;`).

    No lookahead: a body written on the following line is still reported.
    """

    code: str = LINT_FUNCTION_MISSING_ARROW_BODY.code
    name: str = "functionMissingArrowBody"
    category: str = "function"
    domain: LintDomain = "suspicious"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        head = line.rstrip()
        if head.endswith(";"):
            head = head[:-1].rstrip()
        if not head.endswith("=>"):
            return []
        return [
            diagnostic_from_spec(
                LINT_FUNCTION_MISSING_ARROW_BODY,
                TextRange.on_line(line_index, len(head) - 2, len(line)),
            )
        ]


@dataclass(frozen=True, slots=True)
class MixedIndentationRule:
    code: str = LINT_STYLE_MIXED_INDENTATION.code
    name: str = "styleMixedIndentation"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\t+ | +\t")

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        if self._pattern.match(line) is None:
            return []
        indent_end = len(line) - len(line.lstrip())
        return [
            diagnostic_from_spec(
                LINT_STYLE_MIXED_INDENTATION,
                TextRange.on_line(line_index, 0, indent_end),
            )
        ]


@dataclass(frozen=True, slots=True)
class UnclosedStringRule:
    """Reports a line that ends inside a `'`, `"` or backtick literal.

    Each line is scanned on its own, so literals spanning lines are always reported.
    """

    code: str = LINT_SYNTAX_UNCLOSED_STRING.code
    name: str = "syntaxUnclosedString"
    category: str = "syntax"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        open_quote = _unclosed_quote(line)
        if open_quote is None:
            return []
        message = "Unclosed template literal." if open_quote == "`" else LINT_SYNTAX_UNCLOSED_STRING.message
        return [
            diagnostic_from_spec(
                LINT_SYNTAX_UNCLOSED_STRING,
                TextRange.whole_line(line_index, len(line)),
                message=message,
            )
        ]


@dataclass(frozen=True, slots=True)
class LeadingDigitIdentifierRule:
    """Flags word tokens that start with digits, such as `2fast`.

    Multi-digit numbers like `10` have the same shape and are reported too.
    """

    code: str = LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER.code
    name: str = "syntaxLeadingDigitIdentifier"
    category: str = "syntax"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\b\d+\w+\b", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        return [
            diagnostic_from_spec(
                LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER,
                TextRange.on_line(line_index, match.start(), match.end()),
            )
            for match in self._pattern.finditer(line)
        ]


@dataclass(frozen=True, slots=True)
class RedundantSemicolonRule:
    code: str = LINT_STYLE_REDUNDANT_SEMICOLON.code
    name: str = "styleRedundantSemicolon"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        if ":" not in line or not line.strip().endswith(";"):
            return []
        return [
            diagnostic_from_spec(
                LINT_STYLE_REDUNDANT_SEMICOLON,
                TextRange.on_line(line_index, line.rfind(";"), len(line)),
            )
        ]


@dataclass(frozen=True, slots=True)
class StructNameRule:
    code: str = LINT_STYLE_STRUCT_NAME.code
    name: str = "styleStructName"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\bstruct\s+(\w+)", re.ASCII)
    _pascal_case: re.Pattern[str] = re.compile(r"[A-Z][A-Za-z0-9_]*", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None or self._pascal_case.fullmatch(match.group(1)):
            return []
        return [
            diagnostic_from_spec(
                LINT_STYLE_STRUCT_NAME,
                TextRange.on_line(line_index, match.start(1), match.end(1)),
            )
        ]


@dataclass(frozen=True, slots=True)
class EmptyAutoPropertyRule:
    """Checks accessor blocks of `name: Type { ...; }` declarations.

    A block counts as an accessor list when it holds only words, semicolons and
    whitespace with at least one semicolon; it must name `get` or `set`.
    """

    code: str = LINT_SYNTAX_EMPTY_AUTO_PROPERTY.code
    name: str = "syntaxEmptyAutoProperty"
    category: str = "syntax"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _block: re.Pattern[str] = re.compile(r"\{([\w\s;]*)\}", re.ASCII)
    _type_name: re.Pattern[str] = re.compile(r"[\w$.<>\[\]?]+", re.ASCII)
    _word: re.Pattern[str] = re.compile(r"\w+", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for match in self._block.finditer(line):
            body = match.group(1)
            if ";" not in body or not self._is_property_declaration(line[: match.start()]):
                continue
            accessors = set(self._word.findall(body))
            if "get" in accessors or "set" in accessors:
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_SYNTAX_EMPTY_AUTO_PROPERTY,
                    TextRange.on_line(line_index, match.start(), match.end()),
                )
            )
        return diagnostics

    def _is_property_declaration(self, prefix: str) -> bool:
        name, colon, type_name = prefix.rstrip().rpartition(":")
        if not colon or self._type_name.fullmatch(type_name.strip()) is None:
            return False
        name = name.rstrip()
        return bool(name) and (name[-1].isalnum() or name[-1] in "_$")


@dataclass(frozen=True, slots=True)
class InvalidRangeRule:
    """`N..M` must have N < M; `N.._` is open-ended and always accepted."""

    code: str = LINT_SYNTAX_INVALID_RANGE.code
    name: str = "syntaxInvalidRange"
    category: str = "syntax"
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"(\d+)\.\.(\d+|_)", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for match in self._pattern.finditer(line):
            upper = match.group(2)
            if upper == "_" or int(match.group(1)) < int(upper):
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_SYNTAX_INVALID_RANGE,
                    TextRange.on_line(line_index, match.start(), match.end()),
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class WithContextRule:
    code: str = LINT_SYNTAX_WITH_CONTEXT.code
    name: str = "syntaxWithContext"
    category: str = "syntax"
    domain: LintDomain = "suspicious"
    confidence: LintConfidence = "heuristic"
    scope: LintScope = "line"

    _pattern: re.Pattern[str] = re.compile(r"\bwith\s*\{", re.ASCII)
    _return: re.Pattern[str] = re.compile(r"\breturn\b", re.ASCII)

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None:
            return []
        in_context = "=" in line or self._return.search(line) is not None
        if in_context and not line.strip().startswith("with"):
            return []
        return [
            diagnostic_from_spec(
                LINT_SYNTAX_WITH_CONTEXT,
                TextRange.at(line_index, match.start(), len("with")),
            )
        ]


def default_line_rules() -> tuple[LineRule, ...]:
    rules: list[LineRule] = [
        PipelineInvalidOperatorRule(),
        PipelineMissingContinuationRule(),
        MatchUnclosedRule(),
        MatchArmMissingPatternRule(),
        LinqInvalidVariableRule(),
        LinqMissingSelectRule(),
        OperatorInvalidOverloadRule(),
        FunctionInvalidNameRule(),
        FunctionMissingArrowBodyRule(),
        MixedIndentationRule(),
        UnclosedStringRule(),
        LeadingDigitIdentifierRule(),
        RedundantSemicolonRule(),
        StructNameRule(),
        EmptyAutoPropertyRule(),
        InvalidRangeRule(),
        WithContextRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...], *, scope: LintScope) -> None:
    allowed_domains = {"correctness", "suspicious", "style"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected correctness/suspicious/style."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if rule.scope != scope:
            raise ValueError(f"Lint rule `{rule.name}` has invalid scope `{rule.scope}`; expected `{scope}`.")
        if not rule.code.startswith("LINT_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix.")


def _unclosed_quote(line: str) -> str | None:
    quote: str | None = None
    escaped = False
    for char in line:
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if quote is None:
            if char in "\"'`":
                quote = char
        elif char == quote:
            quote = None
    return quote
