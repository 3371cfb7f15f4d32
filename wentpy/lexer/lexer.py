"""Lexer."""

import logging
from collections.abc import Callable, Iterator

from wentpy.diagnostics import Diagnostic, DiagnosticSpec
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
)
from wentpy.lexer.tokens import KEYWORDS, MATCHING_BRACKET, Token, TokenFlags, TokenKind
from wentpy.text import Position, TextRange, slice_text_range

logger = logging.getLogger(__name__)

type ErrorHandler = Callable[[str, Position, str], None]
"""Called with `(input_name, position, message)` for every lexical error."""

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS = frozenset("01234567")
_DECIMAL_DIGITS = frozenset("0123456789")

_SINGLE_OR_ASSIGN: dict[str, tuple[TokenKind, TokenKind]] = {
    "+": (TokenKind.ADD, TokenKind.ADD_ASSIGN),
    "-": (TokenKind.SUB, TokenKind.SUB_ASSIGN),
    "*": (TokenKind.MUL, TokenKind.MUL_ASSIGN),
    "/": (TokenKind.DIV, TokenKind.DIV_ASSIGN),
    "%": (TokenKind.MOD, TokenKind.MOD_ASSIGN),
    "=": (TokenKind.ASSIGN, TokenKind.EQ),
    "!": (TokenKind.NOT, TokenKind.NEQ),
    "<": (TokenKind.SM, TokenKind.SMEQ),
    ">": (TokenKind.GR, TokenKind.GREQ),
}

_PUNCTUATION: dict[str, TokenKind] = {
    ".": TokenKind.DOT,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

_BRACKETS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


def _is_letter(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch in _DECIMAL_DIGITS


class Lexer:
    """Pull-based lexer with automatic semicolon insertion and bracket tracking.

    Every call to `scan()` advances exactly far enough to produce one token.
    Once EOF has been produced, further calls return the same EOF token.
    """

    def __init__(self, source: str, name: str = "", error_handler: ErrorHandler | None = None) -> None:
        self._source = source
        self._name = name
        self._error_handler = error_handler
        self._offset = 0
        self._line = 1
        self._column = 1
        self._start = 0
        self._start_position = Position(1, 1)
        self._brackets: list[tuple[str, Position]] = []
        self._previous_kind: TokenKind | None = None
        self._eof_token: Token | None = None
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Source text being scanned."""
        return self._source

    @property
    def name(self) -> str:
        return self._name

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def error_count(self) -> int:
        return len(self._diagnostics)

    @property
    def position(self) -> Position:
        """Position of the next unread character."""
        return Position(self._line, self._column)

    @property
    def is_eof(self) -> bool:
        return self._offset >= len(self._source)

    def scan(self) -> Token:
        if self._eof_token is not None:
            return self._eof_token

        while True:
            self._skip_whitespace()
            self._mark()

            if self.is_eof:
                return self._lex_eof()

            ch = self._current_char()

            if ch == "\n":
                self._skip_newlines()
                if self._previous_kind is not None and self._previous_kind.inserts_semicolon:
                    return self._synthetic_semicolon(at_newline=True)
                continue

            if ch == "/" and self._peek_char() == "/":
                self._skip_line_comment()
                continue

            if ch == "/" and self._peek_char() == "*":
                crossed_newline = self._skip_block_comment()
                if (
                    crossed_newline
                    and self._previous_kind is not None
                    and self._previous_kind.inserts_semicolon
                ):
                    return self._synthetic_semicolon(at_newline=True)
                continue

            return self._lex_token(ch)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens up to and including EOF."""
        while True:
            token = self.scan()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def _lex_token(self, ch: str) -> Token:
        if _is_letter(ch):
            return self._lex_identifier()

        if _is_digit(ch) or (ch == "." and _is_digit(self._peek_char())):
            return self._lex_number()

        if ch == "'":
            return self._lex_quoted_string()

        if ch == "`":
            return self._lex_raw_string()

        if ch in _BRACKETS:
            return self._lex_bracket(ch)

        if ch in _SINGLE_OR_ASSIGN:
            single, with_assign = _SINGLE_OR_ASSIGN[ch]
            self._advance()
            if self._current_char() == "=":
                self._advance()
                return self._emit(with_assign)
            return self._emit(single)

        if ch == "&" or ch == "|":
            kind = TokenKind.AND if ch == "&" else TokenKind.OR
            self._advance()
            if self._current_char() != ch:
                self._error(LEXER_UNEXPECTED_CHARACTER, self._start_position, char=ch)
                return self._emit(TokenKind.ERROR)
            self._advance()
            return self._emit(kind)

        if ch in _PUNCTUATION:
            self._advance()
            return self._emit(_PUNCTUATION[ch])

        self._error(LEXER_ILLEGAL_CHARACTER, self._start_position, char=ch)
        self._advance()
        return self._emit(TokenKind.ERROR)

    def _lex_eof(self) -> Token:
        if self._brackets:
            # Only the innermost opener is reported.
            opener, opened_at = self._brackets[-1]
            self._brackets.clear()
            self._error(LEXER_UNCLOSED_LEFT_BRACKET, opened_at, char=opener)
        token = self._emit(TokenKind.EOF, "")
        self._eof_token = token
        return token

    def _lex_bracket(self, ch: str) -> Token:
        kind = _BRACKETS[ch]
        if kind.is_left_bracket:
            self._brackets.append((ch, self._start_position))
            self._advance()
            return self._emit(kind)

        top = self._brackets[-1][0] if self._brackets else None
        if top is not None and MATCHING_BRACKET[top] == ch:
            if ch == "}" and self._previous_kind != TokenKind.SEMICOLON:
                # The brace itself is left unread and emitted on the next call.
                return self._synthetic_semicolon(at_newline=False)
            self._brackets.pop()
        else:
            if self._brackets:
                self._brackets.pop()
            self._error(LEXER_UNEXPECTED_RIGHT_BRACKET, self._start_position, char=ch)
        self._advance()
        return self._emit(kind)

    def _lex_identifier(self) -> Token:
        self._advance()
        while not self.is_eof:
            ch = self._current_char()
            if _is_letter(ch) or ch.isdigit():
                self._advance()
                continue
            break
        word = self._source[self._start : self._offset]
        return self._emit(KEYWORDS.get(word, TokenKind.NAME))

    def _lex_number(self) -> Token:
        kind = TokenKind.INT

        if self._current_char() == "0" and self._peek_char() in ("x", "X"):
            self._advance(2)
            if self._scan_digits(_HEX_DIGITS) == 0:
                self._error(LEXER_ILLEGAL_HEXADECIMAL_NUMBER, self.position, text=self._lexeme())
            return self._emit(kind)

        if self._current_char() == "0":
            self._advance()
            self._scan_digits(_OCTAL_DIGITS)
            illegal_at = self.position if self._current_char() in ("8", "9") else None
            self._scan_digits(_DECIMAL_DIGITS)
            if self._current_char() not in (".", "e", "E"):
                if illegal_at is not None:
                    self._error(LEXER_ILLEGAL_OCTAL_NUMBER, illegal_at, text=self._lexeme())
                return self._emit(kind)
        else:
            self._scan_digits(_DECIMAL_DIGITS)

        if self._current_char() == ".":
            kind = TokenKind.FLOAT
            dot_at = self.position
            self._advance()
            if self._scan_digits(_DECIMAL_DIGITS) == 0:
                self._error(LEXER_TRAILING_DECIMAL_POINT, dot_at)

        if self._current_char() in ("e", "E"):
            kind = TokenKind.FLOAT
            self._advance()
            if self._current_char() in ("+", "-"):
                self._advance()
            if self._scan_digits(_DECIMAL_DIGITS) == 0:
                self._error(LEXER_ILLEGAL_EXPONENT, self.position, text=self._lexeme())

        return self._emit(kind)

    def _lex_quoted_string(self) -> Token:
        opened_at = self._start_position
        self._advance()
        content_start = self._offset

        while True:
            if self.is_eof or self._current_char() == "\n":
                self._error(LEXER_UNTERMINATED_STRING, opened_at)
                return self._emit(TokenKind.STRING, self._source[content_start : self._offset])
            ch = self._current_char()
            if ch == "\\":
                if self._offset + 1 >= len(self._source) or self._peek_char() == "\n":
                    self._advance()
                    self._error(LEXER_UNTERMINATED_STRING, opened_at)
                    return self._emit(TokenKind.STRING, self._source[content_start : self._offset])
                self._advance(2)
                continue
            if ch == "'":
                content = self._source[content_start : self._offset]
                self._advance()
                return self._emit(TokenKind.STRING, content)
            self._advance()

    def _lex_raw_string(self) -> Token:
        opened_at = self._start_position
        self._advance()
        content_start = self._offset

        while not self.is_eof:
            if self._current_char() == "`":
                content = self._source[content_start : self._offset]
                self._advance()
                return self._emit(TokenKind.RAWSTRING, content)
            self._advance()

        self._error(LEXER_UNTERMINATED_RAW_STRING, opened_at)
        return self._emit(TokenKind.RAWSTRING, self._source[content_start : self._offset])

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._current_char() in (" ", "\t", "\r"):
            self._advance()

    def _skip_newlines(self) -> None:
        while not self.is_eof and self._current_char() == "\n":
            self._advance()

    def _skip_line_comment(self) -> None:
        # The newline is left for ASI.
        while not self.is_eof and self._current_char() != "\n":
            self._advance()

    def _skip_block_comment(self) -> bool:
        opened_at = self._start_position
        self._advance(2)
        crossed_newline = False
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return crossed_newline
            if self._current_char() == "\n":
                crossed_newline = True
            self._advance()
        self._error(LEXER_UNTERMINATED_COMMENT, opened_at)
        return crossed_newline

    def _scan_digits(self, digits: frozenset[str]) -> int:
        count = 0
        while not self.is_eof and self._current_char() in digits:
            self._advance()
            count += 1
        return count

    def _synthetic_semicolon(self, *, at_newline: bool) -> Token:
        flags = TokenFlags.INSERTED
        if at_newline:
            flags |= TokenFlags.PRECEDING_LINE_BREAK
        self._previous_kind = TokenKind.SEMICOLON
        return Token(
            kind=TokenKind.SEMICOLON,
            text="",
            range=TextRange.empty(self._start),
            position=self._start_position,
            end=self._start_position,
            flags=flags,
        )

    def _emit(self, kind: TokenKind, text: str | None = None) -> Token:
        token = Token(
            kind=kind,
            text=self._lexeme() if text is None else text,
            range=TextRange(self._start, self._offset),
            position=self._start_position,
            end=self.position,
        )
        self._previous_kind = kind
        return token

    def _error(self, spec: DiagnosticSpec, position: Position, **message_args: object) -> None:
        diagnostic = spec.to_diagnostic(position, input_name=self._name, **message_args)
        self._diagnostics.append(diagnostic)
        logger.debug("lexical error: %s", diagnostic)
        if self._error_handler is not None:
            self._error_handler(self._name, position, diagnostic.message)

    def _lexeme(self) -> str:
        return slice_text_range(self._source, TextRange(self._start, self._offset))

    def _mark(self) -> None:
        self._start = self._offset
        self._start_position = Position(self._line, self._column)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._offset]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._offset + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int = 1) -> None:
        for _ in range(steps):
            if self.is_eof:
                return
            if self._source[self._offset] == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
            self._offset += 1


def tokenize(source: str, name: str = "") -> tuple[list[Token], list[Diagnostic]]:
    """Scan the whole input, returning every token up to EOF and all lexical diagnostics."""
    lexer = Lexer(source, name)
    tokens = list(lexer)
    return tokens, lexer.diagnostics


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, position, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} {str(tok.position):>8} flags={tok.flags!r} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} {d.format()}")
