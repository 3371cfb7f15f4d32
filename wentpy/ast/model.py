"""AST data model for went source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from wentpy.lexer.tokens import Token, TokenKind
from wentpy.text import START, Position

if TYPE_CHECKING:
    from wentpy.ast.visitor import NodeVisitor

INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


class Node(ABC):
    """Immutable AST node; children are owned by exactly one parent."""

    __slots__ = ()

    @abstractmethod
    def accept[T](self, visitor: NodeVisitor[T]) -> T: ...

    @abstractmethod
    def start_position(self) -> Position: ...

    @abstractmethod
    def end_position(self) -> Position: ...


class Expr(Node):
    __slots__ = ()


class Stmt(Node):
    __slots__ = ()


# -------------------------
# Binary expressions
# -------------------------


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Two owned operands and the position of the operator between them."""

    SYMBOL: ClassVar[str] = ""

    left: Expr
    right: Expr
    operator_position: Position

    @property
    def symbol(self) -> str:
        return self.SYMBOL

    def start_position(self) -> Position:
        return self.left.start_position()

    def end_position(self) -> Position:
        return self.right.end_position()


@dataclass(frozen=True, slots=True)
class AddExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "+"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_add_expr(self)


@dataclass(frozen=True, slots=True)
class SubExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "-"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_sub_expr(self)


@dataclass(frozen=True, slots=True)
class MulExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "*"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_mul_expr(self)


@dataclass(frozen=True, slots=True)
class DivExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "/"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_div_expr(self)


@dataclass(frozen=True, slots=True)
class ModExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "%"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_mod_expr(self)


@dataclass(frozen=True, slots=True)
class EqExpr(BinaryExpr):
    """`==`, or `!=` when `is_not` is set."""

    is_not: bool = False

    @property
    def symbol(self) -> str:
        return "!=" if self.is_not else "=="

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_eq_expr(self)


@dataclass(frozen=True, slots=True)
class SmallerExpr(BinaryExpr):
    """`<`, or `<=` when `or_equal` is set."""

    or_equal: bool = False

    @property
    def symbol(self) -> str:
        return "<=" if self.or_equal else "<"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_smaller_expr(self)


@dataclass(frozen=True, slots=True)
class GreaterExpr(BinaryExpr):
    """`>`, or `>=` when `or_equal` is set."""

    or_equal: bool = False

    @property
    def symbol(self) -> str:
        return ">=" if self.or_equal else ">"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_greater_expr(self)


@dataclass(frozen=True, slots=True)
class InExpr(BinaryExpr):
    """Membership test `left in right`, or `left !in right` when `is_not` is set."""

    is_not: bool = False

    @property
    def symbol(self) -> str:
        return "!in" if self.is_not else "in"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_in_expr(self)


@dataclass(frozen=True, slots=True)
class AndExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "&&"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_and_expr(self)


@dataclass(frozen=True, slots=True)
class OrExpr(BinaryExpr):
    SYMBOL: ClassVar[str] = "||"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_or_expr(self)


# -------------------------
# Unary expressions
# -------------------------


@dataclass(frozen=True, slots=True)
class UnaryExpr(Expr):
    SYMBOL: ClassVar[str] = ""

    operand: Expr
    operator_position: Position

    @property
    def symbol(self) -> str:
        return self.SYMBOL

    def start_position(self) -> Position:
        return self.operator_position

    def end_position(self) -> Position:
        return self.operand.end_position()


@dataclass(frozen=True, slots=True)
class PlusExpr(UnaryExpr):
    SYMBOL: ClassVar[str] = "+"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_plus_expr(self)


@dataclass(frozen=True, slots=True)
class MinusExpr(UnaryExpr):
    SYMBOL: ClassVar[str] = "-"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_minus_expr(self)


@dataclass(frozen=True, slots=True)
class NotExpr(UnaryExpr):
    SYMBOL: ClassVar[str] = "!"

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_not_expr(self)


# -------------------------
# Leaves
# -------------------------


@dataclass(frozen=True, slots=True)
class LeafExpr(Expr):
    """Expression built from a single token."""

    position: Position
    end: Position

    def start_position(self) -> Position:
        return self.position

    def end_position(self) -> Position:
        return self.end


class NumberLiteralError(ValueError):
    """Raised when a numeric token cannot be turned into a number."""

    def __init__(self, reason: str, text: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.reason = reason
        self.text = text


@dataclass(frozen=True, slots=True)
class NumberLiteral(LeafExpr):
    """Numeric literal with both an integer and a floating point reading.

    `int_value` is meaningful only when `is_int` is set. `is_float_literal`
    records whether the source spelled a float (`1.0`, `1e3`), as opposed to an
    integer that happens to have a float reading.
    """

    text: str
    int_value: int
    float_value: float
    is_int: bool
    is_float_literal: bool

    @staticmethod
    def from_token(token: Token) -> NumberLiteral:
        int_value, float_value, is_int = parse_number_text(token.text)
        return NumberLiteral(
            position=token.position,
            end=token.end,
            text=token.text,
            int_value=int_value,
            float_value=float_value,
            is_int=is_int,
            is_float_literal=token.kind == TokenKind.FLOAT,
        )

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_number_literal(self)


def parse_number_text(text: str) -> tuple[int, float, bool]:
    """Return `(int_value, float_value, is_int)` for a numeric lexeme.

    Raises `NumberLiteralError` for integer overflow or unparseable text.
    """
    is_hex = text[:2] in ("0x", "0X")
    if is_hex or not any(marker in text for marker in ".eE"):
        try:
            if is_hex:
                value = int(text[2:], 16)
            elif len(text) > 1 and text.startswith("0"):
                value = int(text, 8)
            else:
                value = int(text, 10)
        except ValueError:
            raise NumberLiteralError("illegal number syntax", text) from None
        if not INT64_MIN <= value <= INT64_MAX:
            raise NumberLiteralError("integer overflow", text)
        return value, float(value), True

    try:
        float_value = float(text)
    except ValueError:
        raise NumberLiteralError("illegal number syntax", text) from None
    if float_value in (float("inf"), float("-inf")):
        raise NumberLiteralError("illegal number syntax", text)
    if float_value.is_integer() and INT64_MIN <= float_value <= INT64_MAX:
        return int(float_value), float_value, True
    return 0, float_value, False


def unescape(text: str) -> str:
    """Resolve backslash escapes in a quoted string body.

    Unknown escapes resolve to the escaped character itself.
    """
    if "\\" not in text:
        return text
    parts: list[str] = []
    index = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\" and index + 1 < len(text):
            escaped = text[index + 1]
            parts.append(_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        parts.append(ch)
        index += 1
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class StringLiteral(LeafExpr):
    """Quoted or raw string; `text` is the source between the delimiters."""

    text: str
    raw: bool = False

    @property
    def value(self) -> str:
        if self.raw:
            return self.text
        return unescape(self.text)

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_string_literal(self)


@dataclass(frozen=True, slots=True)
class NullLiteral(LeafExpr):
    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_null_literal(self)


@dataclass(frozen=True, slots=True)
class BoolLiteral(LeafExpr):
    value: bool

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_bool_literal(self)


@dataclass(frozen=True, slots=True)
class Ident(LeafExpr):
    name: str

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_ident(self)


@dataclass(frozen=True, slots=True)
class ListLiteral(LeafExpr):
    """`[a, b, ...]`; `position` and `end` span the brackets."""

    elements: tuple[Expr, ...]

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_list_literal(self)


# -------------------------
# Statements
# -------------------------


@dataclass(frozen=True, slots=True)
class ExprStmt(Stmt):
    expr: Expr

    def start_position(self) -> Position:
        return self.expr.start_position()

    def end_position(self) -> Position:
        return self.expr.end_position()

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_expr_stmt(self)


@dataclass(frozen=True, slots=True)
class Program(Node):
    """Root of a parsed input: statements in source order."""

    statements: tuple[Stmt, ...]

    def start_position(self) -> Position:
        if not self.statements:
            return START
        return self.statements[0].start_position()

    def end_position(self) -> Position:
        if not self.statements:
            return START
        return self.statements[-1].end_position()

    def accept[T](self, visitor: NodeVisitor[T]) -> T:
        return visitor.visit_program(self)


type Root = Program | Expr
