"""Token source with pushback between the lexer and the parser."""

from collections import deque

from wentpy.diagnostics import Diagnostic
from wentpy.lexer import Lexer, Token, TokenKind


class TokenSource:
    """FIFO lookahead over a pull-based `Lexer`.

    Tokens are pulled from the lexer only when the queue is empty, so the lexer
    never runs ahead of what the parser has asked for.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._queue: deque[Token] = deque()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def name(self) -> str:
        return self._lexer.name

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Lexical diagnostics reported for the tokens pulled so far."""
        return self._lexer.diagnostics

    def peek(self) -> Token:
        if not self._queue:
            self._queue.append(self._lexer.scan())
        return self._queue[0]

    def next(self) -> Token:
        if self._queue:
            return self._queue.popleft()
        return self._lexer.scan()

    def backup(self, *tokens: Token) -> None:
        """Push tokens back so that `next()` returns them in the given order."""
        self._queue.extendleft(reversed(tokens))

    def at(self, kind: TokenKind) -> bool:
        return self.peek().kind == kind
