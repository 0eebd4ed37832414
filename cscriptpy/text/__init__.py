"""Text positions, ranges and documents."""

from cscriptpy.text.document import SourceDocument
from cscriptpy.text.text import ORIGIN, TextPosition, TextRange, slice_line_range

__all__ = [
    "ORIGIN",
    "SourceDocument",
    "TextPosition",
    "TextRange",
    "slice_line_range",
]
