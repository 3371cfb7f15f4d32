import pytest

from wentpy.diagnostics import (
    LEXER_ILLEGAL_CHARACTER,
    RUNTIME_ZERO_DIVISION,
    Diagnostic,
    ErrorKind,
    collect_diagnostics,
    has_errors,
    remove_multiples,
    sort_diagnostics,
)
from wentpy.errors import (
    LexicalError,
    WentError,
    WentRuntimeError,
    WentSyntaxError,
    WentTypeError,
    WentZeroDivisionError,
    error_from_diagnostic,
)
from wentpy.text import Position


def make(message: str, line: int, column: int, name: str = "a.went", **kwargs) -> Diagnostic:
    return Diagnostic(code="TEST", message=message, position=Position(line, column), input_name=name, **kwargs)


def test_format_with_and_without_location() -> None:
    assert make("boom", 2, 3).format() == "a.went:2:3: boom"
    assert make("boom", 2, 3, name="").format() == "2:3: boom"
    assert Diagnostic(code="TEST", message="boom", position=None, input_name="a.went").format() == "a.went: boom"
    assert Diagnostic(code="TEST", message="boom", position=None).format() == "boom"


def test_format_with_kind() -> None:
    diagnostic = make("bad", 1, 4, category=ErrorKind.SYNTAX)
    assert diagnostic.format(with_kind=True) == "[SyntaxError]:a.went:1:4: bad"
    assert str(diagnostic) == "a.went:1:4: bad"

    unplaced = Diagnostic(code="TEST", message="bad", position=None, category=ErrorKind.RUNTIME)
    assert unplaced.format(with_kind=True) == "[RuntimeError]: bad"

    uncategorized = make("bad", 1, 4)
    assert uncategorized.format(with_kind=True) == "a.went:1:4: bad"


def test_spec_fills_message_template() -> None:
    diagnostic = LEXER_ILLEGAL_CHARACTER.to_diagnostic(Position(3, 1), input_name="x.went", char="$")
    assert diagnostic.code == "LEXER_ILLEGAL_CHARACTER"
    assert diagnostic.message == "illegal character: '$'"
    assert diagnostic.category == ErrorKind.LEXICAL
    assert diagnostic.severity == "error"
    assert diagnostic.location == "x.went:3:1"


def test_sort_orders_by_name_then_position_then_message() -> None:
    diagnostics = [
        make("z", 2, 1),
        make("b", 1, 5),
        make("a", 1, 5),
        make("first", 9, 9, name="0.went"),
    ]
    assert [d.message for d in sort_diagnostics(diagnostics)] == ["first", "a", "b", "z"]


def test_remove_multiples_keeps_first_per_line() -> None:
    diagnostics = [make("late", 1, 9), make("early", 1, 2), make("next", 2, 1), make("other", 1, 1, name="b.went")]
    kept = remove_multiples(diagnostics)
    assert [d.message for d in kept] == ["early", "next", "other"]


def test_collect_and_has_errors() -> None:
    warning = make("careful", 1, 1, severity="warning")
    error = make("broken", 1, 1)
    assert collect_diagnostics([warning], [], [error]) == [warning, error]
    assert not has_errors([warning])
    assert has_errors([warning, error])


@pytest.mark.parametrize(
    ("category", "error_type"),
    [
        (ErrorKind.LEXICAL, LexicalError),
        (ErrorKind.SYNTAX, WentSyntaxError),
        (ErrorKind.RUNTIME, WentRuntimeError),
        (ErrorKind.TYPE, WentTypeError),
        (ErrorKind.ZERO_DIVISION, WentZeroDivisionError),
        (None, WentRuntimeError),
    ],
)
def test_error_from_diagnostic_picks_the_matching_class(category: ErrorKind | None, error_type: type) -> None:
    error = error_from_diagnostic(make("x", 1, 1, category=category))
    assert type(error) is error_type
    assert isinstance(error, WentError)


def test_runtime_error_hierarchy() -> None:
    diagnostic = RUNTIME_ZERO_DIVISION.to_diagnostic(Position(1, 3), number_kind="int")
    error = error_from_diagnostic(diagnostic)
    assert isinstance(error, WentRuntimeError)
    assert error.kind == ErrorKind.ZERO_DIVISION
    assert error.position == Position(1, 3)
    assert error.message == "int division by zero"
    assert str(error) == "1:3: int division by zero"
