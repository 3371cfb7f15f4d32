"""Exceptions raised by `raise_for_error()` on the result carriers."""

from wentpy.diagnostics import Diagnostic, ErrorKind
from wentpy.text import Position


class WentError(Exception):
    """Base error carrying the diagnostic that describes it."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.format())
        self.diagnostic = diagnostic

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.category or ErrorKind.RUNTIME

    @property
    def position(self) -> Position | None:
        return self.diagnostic.position

    @property
    def input_name(self) -> str:
        return self.diagnostic.input_name

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return self.diagnostic.format()


class LexicalError(WentError):
    pass


class WentSyntaxError(WentError):
    pass


class WentRuntimeError(WentError):
    pass


class WentTypeError(WentRuntimeError):
    pass


class WentZeroDivisionError(WentRuntimeError):
    pass


class WentNameError(WentRuntimeError):
    pass


_ERROR_TYPES: dict[ErrorKind, type[WentError]] = {
    ErrorKind.LEXICAL: LexicalError,
    ErrorKind.SYNTAX: WentSyntaxError,
    ErrorKind.RUNTIME: WentRuntimeError,
    ErrorKind.TYPE: WentTypeError,
    ErrorKind.ZERO_DIVISION: WentZeroDivisionError,
    ErrorKind.NAME: WentNameError,
}


def error_from_diagnostic(diagnostic: Diagnostic) -> WentError:
    """Wrap a diagnostic in the exception class matching its category."""
    error_type = _ERROR_TYPES.get(diagnostic.category or ErrorKind.RUNTIME, WentError)
    return error_type(diagnostic)


__all__ = [
    "ErrorKind",
    "LexicalError",
    "WentError",
    "WentNameError",
    "WentRuntimeError",
    "WentSyntaxError",
    "WentTypeError",
    "WentZeroDivisionError",
    "error_from_diagnostic",
]
