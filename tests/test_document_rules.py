import pytest

from cscriptpy.lint.balance import BRACKETS, find_block_close
from cscriptpy.lint.document_rules import (
    BraceBalanceRule,
    BracketBalanceRule,
    ParenBalanceRule,
    default_document_rules,
)
from cscriptpy.text import SourceDocument, TextRange


def run_document_rules(text: str):
    document = SourceDocument.from_text(text)
    diagnostics = []
    for rule in default_document_rules():
        diagnostics.extend(rule.run(document))
    return diagnostics


def test_unclosed_braces_are_reported_once_on_last_line() -> None:
    text = "a {\nb {\nc {\nend"

    diagnostics = BraceBalanceRule().run(SourceDocument.from_text(text))

    assert len(diagnostics) == 1
    assert diagnostics[0].code == "LINT_BALANCE_UNCLOSED_BRACE"
    assert diagnostics[0].severity == "error"
    assert diagnostics[0].message == "3 unclosed brace(s). Missing closing brace '}'."
    assert diagnostics[0].range == TextRange.whole_line(3, len("end"))


def test_extra_closing_braces() -> None:
    diagnostics = BraceBalanceRule().run(SourceDocument.from_text("}\n}"))

    assert [(d.code, d.message) for d in diagnostics] == [
        ("LINT_BALANCE_EXTRA_BRACE", "2 extra closing brace(s)."),
    ]


def test_unclosed_brackets_and_parens() -> None:
    document = SourceDocument.from_text("[[\n]\n((")

    brackets = BracketBalanceRule().run(document)
    parens = ParenBalanceRule().run(document)

    assert [d.message for d in brackets] == ["1 unclosed bracket(s). Missing closing bracket ']'."]
    assert [d.message for d in parens] == ["2 unclosed parenthesis(es). Missing closing parenthesis ')'."]
    assert parens[0].range == TextRange.whole_line(2, 2)


@pytest.mark.parametrize("text", ["]]", "))", "a]\nb)"])
def test_extra_closing_brackets_and_parens_are_not_reported(text: str) -> None:
    assert run_document_rules(text) == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{}[]()",
        "}{ ][ )(",
        "function f(a) {\n    let xs = [1, (2)]\n}\n",
        'let s = "{"\nlet t = "}"',
    ],
)
def test_balanced_counts_produce_no_diagnostics(text: str) -> None:
    assert run_document_rules(text) == []


def test_balance_ignores_string_context() -> None:
    diagnostics = run_document_rules('let s = "{"\n')

    assert [d.code for d in diagnostics] == ["LINT_BALANCE_UNCLOSED_BRACE"]
    assert diagnostics[0].range == TextRange.whole_line(1, 0)


def test_find_block_close_returns_closing_line() -> None:
    document = SourceDocument.from_text("match v {\n  a => {\n  }\n}\nafter")

    assert find_block_close(document, 0) == 3
    assert find_block_close(document, 1) == 2


def test_find_block_close_skips_the_opening_line() -> None:
    document = SourceDocument.from_text("match v { _ => 0 }\nafter")

    assert find_block_close(document, 0) == 1


@pytest.mark.parametrize("text", ["match {\n}}", "match v { _ => 0 }"])
def test_find_block_close_requires_count_of_exactly_zero(text: str) -> None:
    assert find_block_close(SourceDocument.from_text(text), 0) is None


def test_find_block_close_with_other_delimiters() -> None:
    document = SourceDocument.from_text("let xs = [\n  1,\n]")

    assert find_block_close(document, 0, BRACKETS) == 2


def test_find_block_close_returns_none_at_end_of_document() -> None:
    document = SourceDocument.from_text("match v {\n  a => 1\n")

    assert find_block_close(document, 0) is None
