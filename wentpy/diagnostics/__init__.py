"""Diagnostics."""

from wentpy.diagnostics.codes import (
    LEXER_ILLEGAL_CHARACTER,
    LEXER_ILLEGAL_EXPONENT,
    LEXER_ILLEGAL_HEXADECIMAL_NUMBER,
    LEXER_ILLEGAL_OCTAL_NUMBER,
    LEXER_TRAILING_DECIMAL_POINT,
    LEXER_UNCLOSED_LEFT_BRACKET,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNEXPECTED_RIGHT_BRACKET,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_RAW_STRING,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_ILLEGAL_NUMBER,
    PARSER_MISSING_COMMA,
    PARSER_UNEXPECTED_TOKEN,
    RUNTIME_BAD_UNARY_OPERAND,
    RUNTIME_UNDEFINED_NAME,
    RUNTIME_UNORDERED_OPERANDS,
    RUNTIME_UNSUPPORTED_OPERANDS,
    RUNTIME_ZERO_DIVISION,
    DiagnosticSpec,
)
from wentpy.diagnostics.diagnostic import Diagnostic, ErrorKind, Severity
from wentpy.diagnostics.report import (
    collect_diagnostics,
    has_errors,
    remove_multiples,
    sort_diagnostics,
)

__all__ = [
    "LEXER_ILLEGAL_CHARACTER",
    "LEXER_ILLEGAL_EXPONENT",
    "LEXER_ILLEGAL_HEXADECIMAL_NUMBER",
    "LEXER_ILLEGAL_OCTAL_NUMBER",
    "LEXER_TRAILING_DECIMAL_POINT",
    "LEXER_UNCLOSED_LEFT_BRACKET",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNEXPECTED_RIGHT_BRACKET",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_RAW_STRING",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_ILLEGAL_NUMBER",
    "PARSER_MISSING_COMMA",
    "PARSER_UNEXPECTED_TOKEN",
    "RUNTIME_BAD_UNARY_OPERAND",
    "RUNTIME_UNDEFINED_NAME",
    "RUNTIME_UNORDERED_OPERANDS",
    "RUNTIME_UNSUPPORTED_OPERANDS",
    "RUNTIME_ZERO_DIVISION",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "remove_multiples",
    "sort_diagnostics",
]
