from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of offsets into the source text.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange offsets cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """1-based line and column of a character in the source text."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("Position line and column are 1-based")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


START: Final[Position] = Position(1, 1)
"""Position of the first character of any input."""


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Offsets are python string indices, so this is a plain slice.
    """
    return source[range.start : range.end]
