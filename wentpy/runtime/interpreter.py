"""Tree-walking evaluator over the went AST."""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn

from wentpy.ast import (
    AddExpr,
    AndExpr,
    BinaryExpr,
    BoolLiteral,
    DivExpr,
    EqExpr,
    ExprStmt,
    GreaterExpr,
    Ident,
    InExpr,
    ListLiteral,
    MinusExpr,
    ModExpr,
    MulExpr,
    Node,
    NodeVisitor,
    NotExpr,
    NullLiteral,
    NumberLiteral,
    OrExpr,
    PlusExpr,
    Program,
    SmallerExpr,
    StringLiteral,
    SubExpr,
    UnaryExpr,
)
from wentpy.diagnostics import DiagnosticSpec
from wentpy.diagnostics.codes import (
    RUNTIME_BAD_UNARY_OPERAND,
    RUNTIME_UNDEFINED_NAME,
    RUNTIME_UNORDERED_OPERANDS,
    RUNTIME_UNSUPPORTED_OPERANDS,
    RUNTIME_ZERO_DIVISION,
)
from wentpy.errors import WentError, error_from_diagnostic
from wentpy.runtime.scope import MapScope, Scope
from wentpy.runtime.values import (
    NULL,
    OrderingError,
    Value,
    WList,
    WMap,
    WNumber,
    WString,
    w_bool,
    wrap_int64,
)
from wentpy.text import Position

if TYPE_CHECKING:
    from wentpy.pipeline import EvaluationResult

logger = logging.getLogger(__name__)

type NumberOp = Callable[[int | float, int | float], int | float]


def _int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _int_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _int_div(a, b)


class Interpreter(NodeVisitor[Value]):
    """Evaluates nodes post-order; the first error aborts the whole evaluation."""

    def __init__(self, name: str = "", scope: Scope | None = None) -> None:
        self._name = name
        self._scope: Scope = scope if scope is not None else MapScope()

    @property
    def scope(self) -> Scope:
        return self._scope

    def evaluate(self, node: Node) -> Value:
        return node.accept(self)

    def _error(self, spec: DiagnosticSpec, position: Position, **message_args: object) -> NoReturn:
        diagnostic = spec.to_diagnostic(position, input_name=self._name, **message_args)
        raise error_from_diagnostic(diagnostic)

    def _unsupported(self, node: BinaryExpr, left: Value, right: Value) -> NoReturn:
        self._error(
            RUNTIME_UNSUPPORTED_OPERANDS,
            node.operator_position,
            operator=node.symbol,
            left=left.type_name,
            right=right.type_name,
        )

    # -------------------------
    # Arithmetic
    # -------------------------

    def _arithmetic(self, node: BinaryExpr, left: Value, right: Value, op: NumberOp) -> Value:
        if not isinstance(left, WNumber) or not isinstance(right, WNumber):
            self._unsupported(node, left, right)
        if left.is_int and right.is_int:
            return WNumber(wrap_int64(int(op(left.value, right.value))))
        return WNumber(float(op(float(left.value), float(right.value))))

    def _divisive(
        self,
        node: BinaryExpr,
        left: Value,
        right: Value,
        int_op: Callable[[int, int], int],
        float_op: Callable[[float, float], float],
    ) -> Value:
        if not isinstance(left, WNumber) or not isinstance(right, WNumber):
            self._unsupported(node, left, right)
        both_int = left.is_int and right.is_int
        if right.is_zero_value():
            self._error(
                RUNTIME_ZERO_DIVISION,
                node.operator_position,
                number_kind="int" if both_int else "float",
            )
        if both_int:
            return WNumber(wrap_int64(int_op(int(left.value), int(right.value))))
        return WNumber(float_op(float(left.value), float(right.value)))

    def visit_add_expr(self, node: AddExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        if isinstance(left, WString) and isinstance(right, WString):
            return WString(left.value + right.value)
        return self._arithmetic(node, left, right, operator.add)

    def visit_sub_expr(self, node: SubExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return self._arithmetic(node, left, right, operator.sub)

    def visit_mul_expr(self, node: MulExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return self._arithmetic(node, left, right, operator.mul)

    def visit_div_expr(self, node: DivExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return self._divisive(node, left, right, _int_div, operator.truediv)

    def visit_mod_expr(self, node: ModExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return self._divisive(node, left, right, _int_mod, math.fmod)

    # -------------------------
    # Comparison and membership
    # -------------------------

    def visit_eq_expr(self, node: EqExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return w_bool(left.equals(right) != node.is_not)

    def visit_smaller_expr(self, node: SmallerExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        try:
            return w_bool(left.smaller(right, node.or_equal))
        except OrderingError as exc:
            self._unordered(node, exc)

    def visit_greater_expr(self, node: GreaterExpr) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)
        try:
            return w_bool(left.greater(right, node.or_equal))
        except OrderingError as exc:
            self._unordered(node, exc)

    def _unordered(self, node: BinaryExpr, exc: OrderingError) -> NoReturn:
        self._error(
            RUNTIME_UNORDERED_OPERANDS,
            node.operator_position,
            operator=exc.operator,
            left=exc.left.type_name,
            right=exc.right.type_name,
        )

    def visit_in_expr(self, node: InExpr) -> Value:
        needle = node.left.accept(self)
        container = node.right.accept(self)
        match container:
            case WList():
                found = container.contains(needle)
            case WMap() if isinstance(needle, WString):
                found = needle.value in container.entries
            case WString() if isinstance(needle, WString):
                found = needle.value in container.value
            case _:
                self._unsupported(node, needle, container)
        return w_bool(found != node.is_not)

    # -------------------------
    # Logical
    # -------------------------

    def visit_and_expr(self, node: AndExpr) -> Value:
        left = node.left.accept(self)
        if left.is_zero_value():
            return left
        return node.right.accept(self)

    def visit_or_expr(self, node: OrExpr) -> Value:
        left = node.left.accept(self)
        if not left.is_zero_value():
            return left
        return node.right.accept(self)

    # -------------------------
    # Unary
    # -------------------------

    def _number_operand(self, node: UnaryExpr) -> WNumber:
        operand = node.operand.accept(self)
        if not isinstance(operand, WNumber):
            self._error(
                RUNTIME_BAD_UNARY_OPERAND,
                node.operator_position,
                operator=node.symbol,
                operand=operand.type_name,
            )
        return operand

    def visit_plus_expr(self, node: PlusExpr) -> Value:
        return self._number_operand(node)

    def visit_minus_expr(self, node: MinusExpr) -> Value:
        operand = self._number_operand(node)
        if operand.is_int:
            return WNumber(wrap_int64(-int(operand.value)))
        return WNumber(-operand.value)

    def visit_not_expr(self, node: NotExpr) -> Value:
        return w_bool(node.operand.accept(self).is_zero_value())

    # -------------------------
    # Leaves
    # -------------------------

    def visit_number_literal(self, node: NumberLiteral) -> Value:
        if node.is_int and not node.is_float_literal:
            return WNumber(node.int_value)
        return WNumber(node.float_value)

    def visit_string_literal(self, node: StringLiteral) -> Value:
        return WString(node.value)

    def visit_null_literal(self, node: NullLiteral) -> Value:
        return NULL

    def visit_bool_literal(self, node: BoolLiteral) -> Value:
        return w_bool(node.value)

    def visit_list_literal(self, node: ListLiteral) -> Value:
        return WList(tuple(element.accept(self) for element in node.elements))

    def visit_ident(self, node: Ident) -> Value:
        value = self._scope.resolve(node.name)
        if value is None:
            self._error(RUNTIME_UNDEFINED_NAME, node.position, name=node.name)
        return value

    # -------------------------
    # Statements
    # -------------------------

    def visit_expr_stmt(self, node: ExprStmt) -> Value:
        return node.expr.accept(self)

    def visit_program(self, node: Program) -> Value:
        result: Value = NULL
        for statement in node.statements:
            result = statement.accept(self)
        return result


def evaluate(root: Node, name: str = "", scope: Scope | None = None) -> EvaluationResult:
    """Evaluate a tree; runtime errors are returned in the result, not raised."""
    from wentpy.pipeline import EvaluationResult

    interpreter = Interpreter(name, scope)
    logger.debug("evaluating %s from %r", type(root).__name__, name or "<input>")
    try:
        value = interpreter.evaluate(root)
    except WentError as exc:
        logger.debug("evaluation aborted: %s", exc.diagnostic)
        return EvaluationResult(value=None, diagnostics=[exc.diagnostic], error=exc)
    logger.debug("evaluated to %s", value.type_name)
    return EvaluationResult(value=value, diagnostics=[], error=None)
