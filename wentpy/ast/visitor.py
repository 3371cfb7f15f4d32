"""Visitor protocol for AST double dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wentpy.ast.model import (
    AddExpr,
    AndExpr,
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
    NotExpr,
    NullLiteral,
    NumberLiteral,
    OrExpr,
    PlusExpr,
    Program,
    SmallerExpr,
    StringLiteral,
    SubExpr,
)


class NodeVisitor[T](ABC):
    """One `visit_*` method per node variant; `node.accept(visitor)` picks it."""

    @abstractmethod
    def visit_add_expr(self, node: AddExpr) -> T: ...

    @abstractmethod
    def visit_sub_expr(self, node: SubExpr) -> T: ...

    @abstractmethod
    def visit_mul_expr(self, node: MulExpr) -> T: ...

    @abstractmethod
    def visit_div_expr(self, node: DivExpr) -> T: ...

    @abstractmethod
    def visit_mod_expr(self, node: ModExpr) -> T: ...

    @abstractmethod
    def visit_eq_expr(self, node: EqExpr) -> T: ...

    @abstractmethod
    def visit_smaller_expr(self, node: SmallerExpr) -> T: ...

    @abstractmethod
    def visit_greater_expr(self, node: GreaterExpr) -> T: ...

    @abstractmethod
    def visit_in_expr(self, node: InExpr) -> T: ...

    @abstractmethod
    def visit_and_expr(self, node: AndExpr) -> T: ...

    @abstractmethod
    def visit_or_expr(self, node: OrExpr) -> T: ...

    @abstractmethod
    def visit_plus_expr(self, node: PlusExpr) -> T: ...

    @abstractmethod
    def visit_minus_expr(self, node: MinusExpr) -> T: ...

    @abstractmethod
    def visit_not_expr(self, node: NotExpr) -> T: ...

    @abstractmethod
    def visit_number_literal(self, node: NumberLiteral) -> T: ...

    @abstractmethod
    def visit_string_literal(self, node: StringLiteral) -> T: ...

    @abstractmethod
    def visit_null_literal(self, node: NullLiteral) -> T: ...

    @abstractmethod
    def visit_bool_literal(self, node: BoolLiteral) -> T: ...

    @abstractmethod
    def visit_list_literal(self, node: ListLiteral) -> T: ...

    @abstractmethod
    def visit_ident(self, node: Ident) -> T: ...

    @abstractmethod
    def visit_expr_stmt(self, node: ExprStmt) -> T: ...

    @abstractmethod
    def visit_program(self, node: Program) -> T: ...
