"""Source text coordinates."""

from wentpy.text.text import START, Position, TextRange, slice_text_range

__all__ = [
    "START",
    "Position",
    "TextRange",
    "slice_text_range",
]
