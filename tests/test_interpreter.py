import pytest

from tests._debug import debug_dump_diagnostics
from tests._shared_cases import ERROR_CASES, EVAL_CASES, ErrorCase, EvalCase, case_id
from wentpy.ast import AddExpr, Ident, NumberLiteral
from wentpy.errors import WentError, WentNameError, WentTypeError, WentZeroDivisionError
from wentpy.parser import parse_expression
from wentpy.pipeline import run
from wentpy.runtime import (
    NULL,
    TRUE,
    Interpreter,
    MapScope,
    Value,
    WNumber,
    WString,
    evaluate,
    to_python,
)
from wentpy.text import Position


def eval_ok(source: str, scope: MapScope | None = None) -> Value:
    result = run(source, scope=scope)
    debug_dump_diagnostics("eval_ok", result.diagnostics, source)
    return result.raise_for_error()


@pytest.mark.parametrize("case", EVAL_CASES, ids=case_id)
def test_evaluates(case: EvalCase) -> None:
    value = eval_ok(case.source)
    assert to_python(value) == case.expected
    if case.expected_type is not None:
        assert value.type_name == case.expected_type


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_reports_errors(case: ErrorCase) -> None:
    result = run(case.source)
    debug_dump_diagnostics(case.name, result.diagnostics, case.source)

    assert result.value is None
    assert result.has_errors
    assert result.error is not None
    assert result.error.kind == case.kind
    assert result.error.message == case.message
    assert result.error.position == Position(case.line, case.column)
    assert result.diagnostics == [result.error.diagnostic]

    with pytest.raises(WentError) as excinfo:
        result.raise_for_error()
    assert excinfo.value is result.error


def test_runtime_errors_use_specific_exception_types() -> None:
    with pytest.raises(WentTypeError):
        run("1 + 'x'").raise_for_error()
    with pytest.raises(WentZeroDivisionError, match="int division by zero"):
        run("5 / 0").raise_for_error()
    with pytest.raises(WentNameError, match="name 'nope' is not defined"):
        run("nope").raise_for_error()


def test_error_kind_display_names() -> None:
    assert run("5 / 0").error.kind.display_name == "ZeroDivisionError"
    assert run("1 + 'x'").error.kind.display_name == "TypeError"
    assert run("y").error.kind.display_name == "NameError"


def test_names_resolve_through_scope() -> None:
    scope = MapScope(values={"x": 21, "words": ["a", "b"], "config": {"debug": True}})

    assert eval_ok("x * 2", scope) == WNumber(42)
    assert eval_ok("'b' in words", scope) == TRUE
    assert eval_ok("'debug' in config", scope) == TRUE
    assert eval_ok("'release' !in config", scope) == TRUE


def test_map_membership_requires_a_string_key() -> None:
    scope = MapScope(values={"config": {"debug": True}})
    result = run("1 in config", scope=scope)
    assert isinstance(result.error, WentTypeError)
    assert result.error.message == "unsupported operand type(s) for in: 'int' and 'map'"


def test_errors_carry_the_input_name() -> None:
    result = run("x", name="script.went")
    assert result.error.input_name == "script.went"
    assert str(result.error) == "script.went:1:1: name 'x' is not defined"
    assert result.error.diagnostic.format(with_kind=True) == "[NameError]:script.went:1:1: name 'x' is not defined"


def test_first_error_aborts_evaluation() -> None:
    result = run("1\n2 / 0\nmissing")
    assert isinstance(result.error, WentZeroDivisionError)
    assert result.error.position == Position(2, 3)


def test_operands_are_evaluated_before_type_checks() -> None:
    result = run("'a' - missing")
    assert isinstance(result.error, WentNameError)


def test_int_arithmetic_wraps_around() -> None:
    assert eval_ok("-9223372036854775807 - 2") == WNumber(9223372036854775807)
    assert eval_ok("4611686018427387904 * 4") == WNumber(0)


def test_evaluate_accepts_a_bare_expression() -> None:
    root = parse_expression("1 + 2").raise_for_error()
    result = evaluate(root)
    assert result.value == WNumber(3)
    assert result.error is None
    assert result.diagnostics == []
    assert not result.has_errors


def test_interpreter_evaluates_hand_built_trees() -> None:
    p = Position(1, 1)
    one = NumberLiteral(p, p, "1", 1, 1.0, True, False)
    tree = AddExpr(Ident(p, p, "n"), one, p)

    interpreter = Interpreter(scope=MapScope(values={"n": 41}))
    assert interpreter.evaluate(tree) == WNumber(42)
    assert interpreter.scope.resolve("n") == WNumber(41)


def test_empty_program_evaluates_to_null() -> None:
    assert eval_ok("") is NULL
    assert eval_ok("// only a comment\n") is NULL


def test_string_escapes_are_resolved_at_evaluation() -> None:
    assert eval_ok("'it\\'s'") == WString("it's")
