from dataclasses import dataclass
from typing import Final, Literal


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """Zero-based (line, column) location in a document."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("TextPosition cannot be negative")

    @staticmethod
    def at(line: int, column: int) -> "TextPosition":
        """Create a TextPosition from a line and a column."""
        return TextPosition(line, column)

    def shift(self, columns: int) -> "TextPosition":
        """Move the position along its line by the given number of columns."""
        return TextPosition(self.line, self.column + columns)

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"


ORIGIN: Final[TextPosition] = TextPosition(0, 0)
"""Constant representing the first column of the first line."""


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) between two TextPositions.

    Invariant:
    - start <= end
    """

    start: TextPosition
    end: TextPosition

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextPosition, end: TextPosition) -> "TextRange":
        """Create a TextRange from start and end positions."""
        return TextRange(start, end)

    @staticmethod
    def on_line(line: int, start_column: int, end_column: int) -> "TextRange":
        """Create a TextRange covering columns [start_column, end_column) of one line."""
        return TextRange(TextPosition(line, start_column), TextPosition(line, end_column))

    @staticmethod
    def at(line: int, column: int, length: int) -> "TextRange":
        """Create a TextRange on one line at column with given length."""
        return TextRange.on_line(line, column, column + length)

    @staticmethod
    def whole_line(line: int, length: int) -> "TextRange":
        """Create a TextRange spanning an entire line of the given length."""
        return TextRange.on_line(line, 0, length)

    @staticmethod
    def empty(position: TextPosition) -> "TextRange":
        """Create an empty TextRange at the given position."""
        return TextRange(position, position)

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_column(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_column(self) -> int:
        return self.end.column

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self.start == self.end

    def is_single_line(self) -> bool:
        """Check if the range starts and ends on the same line."""
        return self.start.line == self.end.line

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get the range as (start_line, start_column, end_line, end_column)."""
        return (self.start.line, self.start.column, self.end.line, self.end.column)

    def contains(self, position: TextPosition) -> bool:
        """Check if the range contains the given position."""
        return self.start <= position < self.end

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self.start <= other.start and other.end <= self.end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def ordering(self, other: "TextRange") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range is before the other range
        - 0 if the ranges overlap
        - 1 if this range is after the other range
        """
        if self.end <= other.start:
            return -1
        elif other.end <= self.start:
            return 1
        else:
            return 0

    def __repr__(self) -> str:
        return f"TextRange({self.start.line}:{self.start.column}, {self.end.line}:{self.end.column})"


def slice_line_range(line: str, range: TextRange) -> str:
    """Get the substring of a single line covered by the given TextRange.

    Only meaningful for single-line ranges; columns match python string indices.
    """
    if not range.is_single_line():
        raise ValueError("slice_line_range expects a single-line range")
    return line[range.start.column : range.end.column]
