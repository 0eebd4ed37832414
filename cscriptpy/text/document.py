"""Line-oriented view of a source document."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from cscriptpy.text.text import TextRange


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """Immutable, 0-indexed sequence of the lines of one document version.

    Lines never contain the `\\n` separator nor a trailing `\\r`, so CRLF and LF
    input produce the same columns. An empty text is a single empty line.
    """

    lines: tuple[str, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("SourceDocument requires at least one line")

    @staticmethod
    def from_text(text: str) -> "SourceDocument":
        if not isinstance(text, str):
            raise TypeError(f"Expected document text as str, got {type(text).__name__}")
        return SourceDocument(tuple(_strip_carriage_return(line) for line in text.split("\n")))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def last_line_index(self) -> int:
        return len(self.lines) - 1

    def line(self, index: int) -> str:
        if index < 0 or index >= len(self.lines):
            raise IndexError(f"Line {index} is outside document of {len(self.lines)} lines")
        return self.lines[index]

    def whole_line_range(self, index: int) -> TextRange:
        return TextRange.whole_line(index, len(self.line(index)))

    def contains_range(self, range: TextRange) -> bool:
        """Check that a range lies within the document bounds."""
        if range.end_line >= len(self.lines):
            return False
        if range.start_column > len(self.lines[range.start_line]):
            return False
        return range.end_column <= len(self.lines[range.end_line])

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def _strip_carriage_return(line: str) -> str:
    if line.endswith("\r"):
        return line[:-1]
    return line
