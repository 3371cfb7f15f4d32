"""Diagnostics core types."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from wentpy.text import Position

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    """Error taxonomy shared by the lexer, parser and interpreter."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    RUNTIME = "runtime"
    TYPE = "type"
    ZERO_DIVISION = "zero_division"
    NAME = "name"

    @property
    def display_name(self) -> str:
        match self:
            case ErrorKind.LEXICAL:
                return "LexicalError"
            case ErrorKind.SYNTAX:
                return "SyntaxError"
            case ErrorKind.TYPE:
                return "TypeError"
            case ErrorKind.ZERO_DIVISION:
                return "ZeroDivisionError"
            case ErrorKind.NAME:
                return "NameError"
            case _:
                return "RuntimeError"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser or interpreter."""

    code: str
    message: str
    position: Position | None
    input_name: str = ""
    severity: Severity = "error"
    hint: str | None = None
    category: ErrorKind | None = None

    @property
    def location(self) -> str:
        """`<name>:<line>:<col>`, with unknown segments left out."""
        location = self.input_name
        if self.position is not None:
            if location:
                location += ":"
            location += str(self.position)
        return location

    def format(self, *, with_kind: bool = False) -> str:
        location = self.location
        kind = self.category.display_name if with_kind and self.category is not None else ""
        if not location and not kind:
            return self.message
        if not location:
            return f"[{kind}]: {self.message}"
        if not kind:
            return f"{location}: {self.message}"
        return f"[{kind}]:{location}: {self.message}"

    def __str__(self) -> str:
        return self.format()
