"""Lexer."""

from wentpy.lexer.lexer import ErrorHandler, Lexer, dump_tokens, tokenize
from wentpy.lexer.tokens import (
    KEYWORDS,
    SPELLINGS,
    Token,
    TokenFlags,
    TokenKind,
    describe_kind,
)

__all__ = [
    "KEYWORDS",
    "SPELLINGS",
    "ErrorHandler",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "describe_kind",
    "dump_tokens",
    "tokenize",
]
