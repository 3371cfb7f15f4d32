"""S-expression rendering of AST nodes."""

from wentpy.ast.model import (
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
from wentpy.ast.visitor import NodeVisitor


class AstPrinter(NodeVisitor[str]):
    """Render a tree as nested s-expressions, e.g. `(+ 1 (* 2 3))`.

    Program output has one statement per line.
    """

    def print(self, node: Node) -> str:
        return node.accept(self)

    def _binary(self, node: BinaryExpr) -> str:
        return f"({node.symbol} {node.left.accept(self)} {node.right.accept(self)})"

    def _unary(self, node: UnaryExpr) -> str:
        return f"({node.symbol} {node.operand.accept(self)})"

    def visit_add_expr(self, node: AddExpr) -> str:
        return self._binary(node)

    def visit_sub_expr(self, node: SubExpr) -> str:
        return self._binary(node)

    def visit_mul_expr(self, node: MulExpr) -> str:
        return self._binary(node)

    def visit_div_expr(self, node: DivExpr) -> str:
        return self._binary(node)

    def visit_mod_expr(self, node: ModExpr) -> str:
        return self._binary(node)

    def visit_eq_expr(self, node: EqExpr) -> str:
        return self._binary(node)

    def visit_smaller_expr(self, node: SmallerExpr) -> str:
        return self._binary(node)

    def visit_greater_expr(self, node: GreaterExpr) -> str:
        return self._binary(node)

    def visit_in_expr(self, node: InExpr) -> str:
        return self._binary(node)

    def visit_and_expr(self, node: AndExpr) -> str:
        return self._binary(node)

    def visit_or_expr(self, node: OrExpr) -> str:
        return self._binary(node)

    def visit_plus_expr(self, node: PlusExpr) -> str:
        return self._unary(node)

    def visit_minus_expr(self, node: MinusExpr) -> str:
        return self._unary(node)

    def visit_not_expr(self, node: NotExpr) -> str:
        return self._unary(node)

    def visit_number_literal(self, node: NumberLiteral) -> str:
        return node.text

    def visit_string_literal(self, node: StringLiteral) -> str:
        if node.raw:
            return f"`{node.text}`"
        return f"'{node.text}'"

    def visit_null_literal(self, node: NullLiteral) -> str:
        return "null"

    def visit_bool_literal(self, node: BoolLiteral) -> str:
        return "true" if node.value else "false"

    def visit_list_literal(self, node: ListLiteral) -> str:
        if not node.elements:
            return "(list)"
        return "(list " + " ".join(element.accept(self) for element in node.elements) + ")"

    def visit_ident(self, node: Ident) -> str:
        return node.name

    def visit_expr_stmt(self, node: ExprStmt) -> str:
        return node.expr.accept(self)

    def visit_program(self, node: Program) -> str:
        return "\n".join(statement.accept(self) for statement in node.statements)


def format_ast(node: Node) -> str:
    return AstPrinter().print(node)
