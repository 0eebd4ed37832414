"""Delimiter counting shared by the match-closure and bracket-balance rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from cscriptpy.text import SourceDocument


@dataclass(frozen=True, slots=True)
class DelimiterPair:
    opener: str
    closer: str

    def net(self, text: str) -> int:
        """Openers minus closers in `text`; no nesting or string awareness."""
        return text.count(self.opener) - text.count(self.closer)


BRACES: Final[DelimiterPair] = DelimiterPair(opener="{", closer="}")
BRACKETS: Final[DelimiterPair] = DelimiterPair(opener="[", closer="]")
PARENS: Final[DelimiterPair] = DelimiterPair(opener="(", closer=")")


def net_document_count(document: SourceDocument, pair: DelimiterPair) -> int:
    total = 0
    for line in document:
        total += pair.net(line)
    return total


def find_block_close(
    document: SourceDocument,
    line_index: int,
    pair: DelimiterPair = BRACES,
) -> int | None:
    """Return the line after `line_index` on which the running count is exactly zero.

    The whole opening line is counted, and a block never closes on its own line.
    An over-closed block (count jumping past zero) is not closed. Returns None
    when the document ends first. Linear in the number of remaining lines.
    """
    depth = pair.net(document.line(line_index))
    for index in range(line_index + 1, document.line_count):
        depth += pair.net(document.lines[index])
        if depth == 0:
            return index
    return None
