#!/usr/bin/env python3
"""Scan CScript files on disk and print their diagnostics."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from cscriptpy.diagnostics import count_by_severity, format_diagnostic
from cscriptpy.lint import ScanOptions
from cscriptpy.pipeline import run_lint


def _collect_source_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    return sorted(path for path in root.rglob("*.csc") if path.is_file())


def main() -> int:
    parser = argparse.ArgumentParser(description="Report heuristic syntax diagnostics for .csc files")
    parser.add_argument("path", type=Path, help="A .csc file or a directory to search recursively")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument(
        "--errors-only",
        action="store_true",
        help="Only print error diagnostics",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    root: Path = args.path
    if not root.exists():
        raise SystemExit(f"Invalid path: {root}")

    files = _collect_source_files(root)
    if not files:
        raise SystemExit(f"No .csc files found under {root}")

    options = ScanOptions()
    lines: list[str] = []
    totals = {"error": 0, "warning": 0, "information": 0}
    iterator = tqdm(files, desc="scan", unit="file") if not args.no_progress else files
    for path in iterator:
        result = run_lint(path.read_text(encoding="utf-8"), options)
        for severity, count in count_by_severity(result.diagnostics).items():
            totals[severity] += count
        for diagnostic in result.diagnostics:
            if args.errors_only and diagnostic.severity != "error":
                continue
            lines.append(format_diagnostic(diagnostic, path=str(path)))

    for line in lines:
        print(line)
    print(
        f"Files: {len(files)}  Errors: {totals['error']}  "
        f"Warnings: {totals['warning']}  Information: {totals['information']}"
    )
    return 1 if totals["error"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
