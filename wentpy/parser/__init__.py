"""Parser infrastructure (token source + recursive-descent grammar)."""

from wentpy.parser.grammar import (
    parse_add_expr,
    parse_and_expr,
    parse_atom,
    parse_comparison,
    parse_list_literal,
    parse_mul_expr,
    parse_not_expr,
    parse_or_expr,
    parse_program,
    parse_single_expression,
    parse_unary,
)
from wentpy.parser.options import ParseMode, ParserOptions
from wentpy.parser.parser import ParseAbort, Parser
from wentpy.parser.token_source import TokenSource
from wentpy.parser.went import parse, parse_expression

__all__ = [
    "ParseAbort",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_add_expr",
    "parse_and_expr",
    "parse_atom",
    "parse_comparison",
    "parse_expression",
    "parse_list_literal",
    "parse_mul_expr",
    "parse_not_expr",
    "parse_or_expr",
    "parse_program",
    "parse_single_expression",
    "parse_unary",
]
