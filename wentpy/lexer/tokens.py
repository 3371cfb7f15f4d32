"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from wentpy.text import Position, TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    ERROR = 2

    # -------------------------
    # Identifiers / literals
    # -------------------------
    NAME = 20
    INT = 21
    FLOAT = 22
    STRING = 23  # 'quoted'
    RAWSTRING = 24  # `raw`

    # -------------------------
    # Operators
    # -------------------------
    ADD = 30  # +
    SUB = 31  # -
    MUL = 32  # *
    DIV = 33  # /
    MOD = 34  # %
    ASSIGN = 35  # =
    ADD_ASSIGN = 36  # +=
    SUB_ASSIGN = 37  # -=
    MUL_ASSIGN = 38  # *=
    DIV_ASSIGN = 39  # /=
    MOD_ASSIGN = 40  # %=
    EQ = 41  # ==
    NEQ = 42  # !=
    SM = 43  # <
    SMEQ = 44  # <=
    GR = 45  # >
    GREQ = 46  # >=
    NOT = 47  # !
    AND = 48  # &&
    OR = 49  # ||

    # -------------------------
    # Punctuation / separators
    # -------------------------
    DOT = 60  # .
    COLON = 61  # :
    SEMICOLON = 62  # ;
    COMMA = 63  # ,

    LPAREN = 70  # (
    RPAREN = 71  # )
    LBRACKET = 72  # [
    RBRACKET = 73  # ]
    LBRACE = 74  # {
    RBRACE = 75  # }

    # -------------------------
    # Keywords
    # -------------------------
    FUNC = 80
    IF = 81
    ELSE = 82
    ELIF = 83
    FOR = 84
    NULL = 85
    FALSE = 86
    TRUE = 87
    WHILE = 88
    RETURN = 89
    IN = 90
    BREAK = 91
    CONTINUE = 92
    VAR = 93

    @property
    def is_keyword(self) -> bool:
        return TokenKind.FUNC <= self <= TokenKind.VAR

    @property
    def is_literal(self) -> bool:
        return TokenKind.NAME <= self <= TokenKind.RAWSTRING

    @property
    def is_left_bracket(self) -> bool:
        return self in (TokenKind.LPAREN, TokenKind.LBRACKET, TokenKind.LBRACE)

    @property
    def is_right_bracket(self) -> bool:
        return self in (TokenKind.RPAREN, TokenKind.RBRACKET, TokenKind.RBRACE)

    @property
    def inserts_semicolon(self) -> bool:
        """Whether a newline after a token of this kind ends the statement."""
        return self in _ASI_KINDS


_ASI_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.NAME,
        TokenKind.STRING,
        TokenKind.RAWSTRING,
        TokenKind.INT,
        TokenKind.FLOAT,
        TokenKind.BREAK,
        TokenKind.CONTINUE,
        TokenKind.RETURN,
        TokenKind.RPAREN,
        TokenKind.RBRACKET,
        TokenKind.RBRACE,
    }
)

KEYWORDS: Final[dict[str, TokenKind]] = {
    "func": TokenKind.FUNC,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "elif": TokenKind.ELIF,
    "for": TokenKind.FOR,
    "null": TokenKind.NULL,
    "false": TokenKind.FALSE,
    "true": TokenKind.TRUE,
    "while": TokenKind.WHILE,
    "return": TokenKind.RETURN,
    "in": TokenKind.IN,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "var": TokenKind.VAR,
}

SPELLINGS: Final[dict[TokenKind, str]] = {
    TokenKind.ADD: "+",
    TokenKind.SUB: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
    TokenKind.MOD: "%",
    TokenKind.ASSIGN: "=",
    TokenKind.ADD_ASSIGN: "+=",
    TokenKind.SUB_ASSIGN: "-=",
    TokenKind.MUL_ASSIGN: "*=",
    TokenKind.DIV_ASSIGN: "/=",
    TokenKind.MOD_ASSIGN: "%=",
    TokenKind.EQ: "==",
    TokenKind.NEQ: "!=",
    TokenKind.SM: "<",
    TokenKind.SMEQ: "<=",
    TokenKind.GR: ">",
    TokenKind.GREQ: ">=",
    TokenKind.NOT: "!",
    TokenKind.AND: "&&",
    TokenKind.OR: "||",
    TokenKind.DOT: ".",
    TokenKind.COLON: ":",
    TokenKind.SEMICOLON: ";",
    TokenKind.COMMA: ",",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    **{kind: word for word, kind in KEYWORDS.items()},
}
"""Fixed source spelling of every operator, punctuation and keyword kind."""

MATCHING_BRACKET: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}


def describe_kind(kind: TokenKind) -> str:
    """Human-readable name of a token kind, as used in parser messages."""
    match kind:
        case TokenKind.EOF:
            return "EOF"
        case TokenKind.ERROR:
            return "error"
        case TokenKind.NAME:
            return "name"
        case TokenKind.INT | TokenKind.FLOAT:
            return "number"
        case TokenKind.STRING | TokenKind.RAWSTRING:
            return "string"
        case _:
            return repr(SPELLINGS[kind])


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # semicolon inserted at a newline
    INSERTED = 1 << 1  # synthetic, not present in the source


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` is the exact source lexeme, except for quoted and raw strings where it
    is the content between the delimiters, and synthetic semicolons where it is
    empty. `range` always covers the full lexeme in the source.
    """

    kind: TokenKind
    text: str
    range: TextRange
    position: Position
    end: Position
    flags: TokenFlags = TokenFlags.NONE

    def is_inserted(self) -> bool:
        return bool(self.flags & TokenFlags.INSERTED)

    def is_newline(self) -> bool:
        """Whether this is a semicolon inserted in place of a line break."""
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def __str__(self) -> str:
        match self.kind:
            case TokenKind.EOF:
                return "EOF"
            case TokenKind.ERROR:
                return f"<err: {self.text}>"
            case TokenKind.SEMICOLON if self.is_newline():
                return "newline"
            case TokenKind.SEMICOLON:
                return ";"
            case TokenKind.NAME:
                return f'<NAME:"{self.text}">'
            case kind if kind.is_keyword:
                return f"<{self.text}>"
            case _:
                return repr(self.text)
