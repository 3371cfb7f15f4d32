"""Typed AST for went source."""

from wentpy.ast.model import (
    INT64_MAX,
    INT64_MIN,
    AddExpr,
    AndExpr,
    BinaryExpr,
    BoolLiteral,
    DivExpr,
    EqExpr,
    Expr,
    ExprStmt,
    GreaterExpr,
    Ident,
    InExpr,
    LeafExpr,
    ListLiteral,
    MinusExpr,
    ModExpr,
    MulExpr,
    Node,
    NotExpr,
    NullLiteral,
    NumberLiteral,
    NumberLiteralError,
    OrExpr,
    PlusExpr,
    Program,
    Root,
    SmallerExpr,
    Stmt,
    StringLiteral,
    SubExpr,
    UnaryExpr,
    parse_number_text,
    unescape,
)
from wentpy.ast.printer import AstPrinter, format_ast
from wentpy.ast.visitor import NodeVisitor

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "AddExpr",
    "AndExpr",
    "AstPrinter",
    "BinaryExpr",
    "BoolLiteral",
    "DivExpr",
    "EqExpr",
    "Expr",
    "ExprStmt",
    "GreaterExpr",
    "Ident",
    "InExpr",
    "LeafExpr",
    "ListLiteral",
    "MinusExpr",
    "ModExpr",
    "MulExpr",
    "Node",
    "NodeVisitor",
    "NotExpr",
    "NullLiteral",
    "NumberLiteral",
    "NumberLiteralError",
    "OrExpr",
    "PlusExpr",
    "Program",
    "Root",
    "SmallerExpr",
    "Stmt",
    "StringLiteral",
    "SubExpr",
    "UnaryExpr",
    "format_ast",
    "parse_number_text",
    "unescape",
]
