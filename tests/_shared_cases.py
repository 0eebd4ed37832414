"""Centralized CScript source cases used across rule/session/workspace tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from cscriptpy.diagnostics import Diagnostic
from cscriptpy.lint.rules import LineRule
from cscriptpy.text import SourceDocument


@dataclass(frozen=True, slots=True)
class CScriptCase:
    name: str
    source: str
    should_scan_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CLEAN_PROGRAM = _dedent(
    """
    struct Vector {
        x: number { get; set; }
        y: number { get; }
        operator +(other) {
            return other
        }
    }

    function distance(a, b) {
        let dx = a.x - b.x
        return dx
    }

    let values = data |> filter |> map
    let adults = from p in people where p.active select p.name
    let label = match value {
        0 => "zero"
        1..5 => "small"
        6.._ => "large"
        _ => "other"
    }
    let moved = point with { x: 1 }
    """
)

SCAN_CASES: tuple[CScriptCase, ...] = (
    CScriptCase(name="clean_program", source=CLEAN_PROGRAM),
    CScriptCase(name="empty_document", source=""),
    CScriptCase(
        name="multi_line_pipeline",
        source=_dedent(
            """
            let result = orders
                |> filter(isPaid)
                |> map(total)
            """
        ),
    ),
    CScriptCase(
        name="known_heuristic_limitations",
        source=_dedent(
            """
            if (a || b) {
                let q = from x in xs
                    select x
                let s = "line one
                line two"
                let id = item.2nd
                let year = 2024
            }
            """
        ),
        should_scan_cleanly=False,
    ),
    CScriptCase(
        name="unbalanced_blocks",
        source=_dedent(
            """
            function broken(a, b {
                let grid = [[1, 2], [3, 4]
                let label = match a {
                    => 0
            """
        ),
        should_scan_cleanly=False,
    ),
    CScriptCase(
        name="every_line_rule",
        source="\n".join(
            (
                "let badPipeline = data | filter;",
                "let tail = data |>",
                "let q = from 1item in items",
                "operator <>(other) {}",
                "function 2fast() {}",
                "let incomplete = () => ;",
                "\t  let mixed = 1",
                "let t = `template",
                "let x: number = 5;",
                "struct lowercase_struct { value: number; }",
                "    name: string { ; }",
                "let r = 5..3",
                "with { x: 1 }",
            )
        ),
        should_scan_cleanly=False,
    ),
    CScriptCase(
        name="crlf_line_endings",
        source="let x = 1\r\nlet t = `oops\r\n",
        should_scan_cleanly=False,
    ),
    CScriptCase(
        name="long_pathological_line",
        source=("|" * 2000) + ("=" * 2000) + (" " * 2000) + "\n" + ("(" * 500) + ("{" * 500),
        should_scan_cleanly=False,
    ),
)


def case_id(case: CScriptCase) -> str:
    return case.name


def run_line_rule(rule: LineRule, line: str, line_index: int = 0) -> list[Diagnostic]:
    """Run a line rule against a single-line document."""
    return rule.run(line, line_index, SourceDocument.from_text(line))


def run_line_rule_on_text(rule: LineRule, text: str) -> list[Diagnostic]:
    """Run a line rule over every line of `text`, collecting its diagnostics in line order."""
    document = SourceDocument.from_text(text)
    diagnostics: list[Diagnostic] = []
    for index, line in enumerate(document):
        diagnostics.extend(rule.run(line, index, document))
    return diagnostics
