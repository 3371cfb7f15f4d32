"""wentpy: lexer, parser and tree-walking interpreter for the went language."""

import logging

from wentpy.ast import AstPrinter, Program, format_ast
from wentpy.diagnostics import Diagnostic, ErrorKind
from wentpy.errors import (
    LexicalError,
    WentError,
    WentNameError,
    WentRuntimeError,
    WentSyntaxError,
    WentTypeError,
    WentZeroDivisionError,
)
from wentpy.lexer import Lexer, Token, TokenKind, tokenize
from wentpy.parser import ParseMode, ParserOptions, parse, parse_expression
from wentpy.pipeline import EvaluationResult, WentParseResult, run
from wentpy.runtime import Interpreter, MapScope, Scope, Value, evaluate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AstPrinter",
    "Diagnostic",
    "ErrorKind",
    "EvaluationResult",
    "Interpreter",
    "Lexer",
    "LexicalError",
    "MapScope",
    "ParseMode",
    "ParserOptions",
    "Program",
    "Scope",
    "Token",
    "TokenKind",
    "Value",
    "WentError",
    "WentNameError",
    "WentParseResult",
    "WentRuntimeError",
    "WentSyntaxError",
    "WentTypeError",
    "WentZeroDivisionError",
    "evaluate",
    "format_ast",
    "parse",
    "parse_expression",
    "run",
    "tokenize",
]
