"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """What a whole input is parsed as."""

    PROGRAM = "program"
    EXPRESSION = "expression"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling what the top-level grammar accepts.

    `allow_trailing_semicolon` only applies in expression mode, where it allows
    an explicit `;` after the expression. Newline-inserted semicolons are always
    accepted.
    """

    mode: ParseMode = ParseMode.PROGRAM
    allow_trailing_semicolon: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode, allow_trailing_semicolon=True)
