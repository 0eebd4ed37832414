from typing import cast

import pytest

from cscriptpy import ScanOptions, ScanSession, run_lint, scan
from cscriptpy.diagnostics import Diagnostic
from cscriptpy.lint.rules import DocumentRule, InvalidRangeRule, LineRule
from cscriptpy.text import SourceDocument, TextRange
from tests._shared_cases import SCAN_CASES, CScriptCase, case_id


@pytest.mark.parametrize("case", SCAN_CASES, ids=case_id)
def test_scan_is_idempotent(case: CScriptCase) -> None:
    assert scan(case.source) == scan(case.source)


@pytest.mark.parametrize("case", SCAN_CASES, ids=case_id)
def test_scan_cleanliness_matches_case(case: CScriptCase) -> None:
    diagnostics = scan(case.source)

    assert (diagnostics == []) is case.should_scan_cleanly


@pytest.mark.parametrize("case", SCAN_CASES, ids=case_id)
def test_disabled_diagnostics_return_nothing(case: CScriptCase) -> None:
    result = run_lint(case.source, ScanOptions(diagnostics_enabled=False))

    assert result.diagnostics == []
    assert result.skipped is True
    assert result.has_errors is False


@pytest.mark.parametrize("case", SCAN_CASES, ids=case_id)
def test_every_diagnostic_lies_within_document(case: CScriptCase) -> None:
    document = SourceDocument.from_text(case.source)

    for diagnostic in scan(case.source):
        assert 0 <= diagnostic.start_line <= diagnostic.end_line < document.line_count
        assert document.contains_range(diagnostic.range), diagnostic
        assert diagnostic.source == "cscript"


def test_bad_pipeline_scenario() -> None:
    line = "let badPipeline = data | filter;"

    diagnostics = scan(line)

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == "error"
    assert "Invalid pipeline operator" in diagnostics[0].message
    assert diagnostics[0].start_column == line.index("|")


def test_good_pipeline_scenario() -> None:
    assert scan("let goodPipeline = data |> filter |> map;") == []


def test_lowercase_struct_scenario() -> None:
    diagnostics = scan("struct lowercase_struct { value: number; }")

    assert [(d.severity, d.code) for d in diagnostics] == [("warning", "LINT_STYLE_STRUCT_NAME")]
    assert "PascalCase" in diagnostics[0].message


def test_three_unclosed_braces_scenario() -> None:
    text = "function a() {\n  if (x) {\n    while (y) {\n"

    diagnostics = scan(text)

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == "error"
    assert diagnostics[0].start_line == 3
    assert diagnostics[0].message.startswith("3 unclosed brace(s)")


def test_unclosed_string_scenario() -> None:
    diagnostics = scan('let unclosedString = "this string is not closed;')

    assert [(d.severity, d.message) for d in diagnostics] == [("error", "Unclosed string.")]


def test_incomplete_arrow_scenario() -> None:
    diagnostics = scan("let incomplete = () => ;")

    assert [(d.severity, d.message) for d in diagnostics] == [("warning", "Arrow function body is missing.")]


def test_every_line_rule_case_reports_each_line() -> None:
    case = next(case for case in SCAN_CASES if case.name == "every_line_rule")

    diagnostics = scan(case.source)

    lines_with_findings = {d.start_line for d in diagnostics}
    assert lines_with_findings == set(range(case.source.count("\n") + 1))


def test_diagnostics_are_sorted_by_position() -> None:
    diagnostics = scan("let 2x = a | b")

    assert [d.code for d in diagnostics] == [
        "LINT_SYNTAX_LEADING_DIGIT_IDENTIFIER",
        "LINT_PIPELINE_INVALID_OPERATOR",
    ]


def test_crlf_and_lf_documents_scan_identically() -> None:
    assert scan("let x = 1\r\nlet t = `oops\r\n") == scan("let x = 1\nlet t = `oops\n")


@pytest.mark.parametrize(("start", "end"), [(0, 1), (1, 10), (9, 100), (41, 42)])
def test_increasing_range_has_no_range_diagnostic(start: int, end: int) -> None:
    codes = [d.code for d in scan(f"    {start}..{end} => x")]

    assert "LINT_SYNTAX_INVALID_RANGE" not in codes


@pytest.mark.parametrize(("start", "end"), [(1, 0), (5, 5), (100, 9)])
def test_non_increasing_range_has_one_error_at_token(start: int, end: int) -> None:
    token = f"{start}..{end}"

    diagnostics = [d for d in scan(f"    {token} => x") if d.code == "LINT_SYNTAX_INVALID_RANGE"]

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == "error"
    assert diagnostics[0].range == TextRange.at(0, 4, len(token))


def test_custom_rule_set_only_runs_given_rules() -> None:
    result = run_lint("let r = 5..3 | x", line_rules=(InvalidRangeRule(),), document_rules=())

    assert [d.code for d in result.diagnostics] == ["LINT_SYNTAX_INVALID_RANGE"]
    assert result.has_errors is True


def test_session_caches_result() -> None:
    session = ScanSession.create("let x = 1", identity="file:///a.csc", version=3)

    assert session.is_complete is False
    first = session.run()
    second = session.run()

    assert first is second
    assert session.is_complete is True
    assert first.document.lines == ("let x = 1",)


@pytest.mark.parametrize("text", [None, b"let x = 1", 42])
def test_non_text_input_fails_fast(text: object) -> None:
    with pytest.raises(TypeError, match="Expected document text"):
        scan(cast(str, text))


def test_invalid_options_fail_fast() -> None:
    with pytest.raises(TypeError, match="Expected ScanOptions"):
        scan("let x = 1", cast(ScanOptions, {"diagnosticsEnabled": False}))


class BadDomainRule:
    code: str = "LINT_BAD_DOMAIN"
    name: str = "badDomain"
    category: str = "syntax"
    domain = "semantic"
    confidence = "policy"
    scope = "line"

    def run(self, line: str, line_index: int, document: SourceDocument) -> list[Diagnostic]:
        return []


class BadCodeRule(BadDomainRule):
    code: str = "BAD_CODE"
    domain = "correctness"


def test_run_lint_rejects_invalid_rule_domain() -> None:
    with pytest.raises(ValueError, match="invalid domain"):
        run_lint("a", line_rules=(cast(LineRule, BadDomainRule()),))


def test_run_lint_rejects_rule_without_lint_prefix() -> None:
    with pytest.raises(ValueError, match="invalid code"):
        run_lint("a", line_rules=(cast(LineRule, BadCodeRule()),))


def test_run_lint_rejects_line_rule_in_document_rules() -> None:
    with pytest.raises(ValueError, match="invalid scope"):
        run_lint("a", document_rules=(cast(DocumentRule, InvalidRangeRule()),))
