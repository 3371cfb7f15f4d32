"""Parser core: token access, expectations and error abort."""

import logging
from collections.abc import Iterable
from typing import NoReturn

from wentpy.diagnostics import Diagnostic, DiagnosticSpec
from wentpy.diagnostics.codes import PARSER_EXPECTED_TOKEN, PARSER_UNEXPECTED_TOKEN
from wentpy.lexer import Token, TokenKind, describe_kind
from wentpy.parser.options import ParserOptions
from wentpy.parser.token_source import TokenSource
from wentpy.text import Position

logger = logging.getLogger(__name__)


class ParseAbort(Exception):
    """Unwinds the grammar routines on the first error; caught by the entry points."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.format())
        self.diagnostic = diagnostic


class Parser:
    """Recursive-descent parser state.

    Any lexical diagnostic produced while pulling tokens, and any syntax error,
    aborts the parse with `ParseAbort`.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def name(self) -> str:
        return self._source.name

    def peek(self) -> Token:
        token = self._source.peek()
        self._check_lexical_errors()
        return token

    def next(self) -> Token:
        token = self._source.next()
        self._check_lexical_errors()
        return token

    def backup(self, *tokens: Token) -> None:
        self._source.backup(*tokens)

    def at(self, kind: TokenKind) -> bool:
        return self.peek().kind == kind

    def eat(self, kind: TokenKind) -> Token | None:
        if self.at(kind):
            return self.next()
        return None

    def expect(self, kind: TokenKind, context: str) -> Token:
        return self.expect_one_of((kind,), context)

    def expect_one_of(self, kinds: Iterable[TokenKind], context: str) -> Token:
        kinds = tuple(kinds)
        token = self.next()
        if token.kind in kinds:
            return token
        self.error(
            PARSER_EXPECTED_TOKEN,
            token.position,
            expected=" or ".join(describe_kind(kind) for kind in kinds),
            context=context,
            found=token,
        )

    def unexpected(self, token: Token, context: str) -> NoReturn:
        self.error(PARSER_UNEXPECTED_TOKEN, token.position, found=token, context=context)

    def error(self, spec: DiagnosticSpec, position: Position | None, **message_args: object) -> NoReturn:
        diagnostic = spec.to_diagnostic(position, input_name=self.name, **message_args)
        logger.debug("syntax error: %s", diagnostic)
        raise ParseAbort(diagnostic)

    def _check_lexical_errors(self) -> None:
        diagnostics = self._source.diagnostics
        if diagnostics:
            raise ParseAbort(diagnostics[0])
