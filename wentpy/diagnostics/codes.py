"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from wentpy.diagnostics.diagnostic import Diagnostic, ErrorKind, Severity
from wentpy.text import Position


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: ErrorKind | None = None

    def to_diagnostic(
        self,
        position: Position | None,
        *,
        input_name: str = "",
        **message_args: object,
    ) -> Diagnostic:
        """Build a diagnostic, filling `{placeholders}` in the message template."""
        return Diagnostic(
            code=self.code,
            message=self.message.format(**message_args) if message_args else self.message,
            position=position,
            input_name=input_name,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_ILLEGAL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_CHARACTER",
    message="illegal character: {char!r}",
    category=ErrorKind.LEXICAL,
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="unexpected token: {char!r}",
    hint="Logical operators are written `&&` and `||`.",
    category=ErrorKind.LEXICAL,
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="unterminated quoted string",
    hint="Close the string with a single quote on the same line.",
    category=ErrorKind.LEXICAL,
)

LEXER_UNTERMINATED_RAW_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_RAW_STRING",
    message="unterminated raw string",
    hint="Close the raw string with a backtick.",
    category=ErrorKind.LEXICAL,
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="multiline comment is not closed",
    hint="Close the comment with `*/`.",
    category=ErrorKind.LEXICAL,
)

LEXER_UNEXPECTED_RIGHT_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_RIGHT_BRACKET",
    message="unexpected right bracket {char!r}",
    category=ErrorKind.LEXICAL,
)

LEXER_UNCLOSED_LEFT_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNCLOSED_LEFT_BRACKET",
    message="unclosed left bracket: {char!r}",
    category=ErrorKind.LEXICAL,
)

LEXER_ILLEGAL_HEXADECIMAL_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_HEXADECIMAL_NUMBER",
    message="illegal hexadecimal number: {text!r}",
    category=ErrorKind.LEXICAL,
)

LEXER_ILLEGAL_OCTAL_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_OCTAL_NUMBER",
    message="illegal octal number: {text!r}",
    hint="Numbers with a leading zero are octal; drop the zero for a decimal number.",
    category=ErrorKind.LEXICAL,
)

LEXER_TRAILING_DECIMAL_POINT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_TRAILING_DECIMAL_POINT",
    message="illegal trailing decimal point after number",
    category=ErrorKind.LEXICAL,
)

LEXER_ILLEGAL_EXPONENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_EXPONENT",
    message="illegal floating-point exponent: {text!r}",
    category=ErrorKind.LEXICAL,
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="expected {expected} in {context}, found {found}",
    category=ErrorKind.SYNTAX,
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="unexpected {found} in {context}",
    category=ErrorKind.SYNTAX,
)

PARSER_MISSING_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_COMMA",
    message="missing ','{suffix} in {context}",
    category=ErrorKind.SYNTAX,
)

PARSER_ILLEGAL_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ILLEGAL_NUMBER",
    message="{reason}: {text!r}",
    category=ErrorKind.SYNTAX,
)

RUNTIME_UNSUPPORTED_OPERANDS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNSUPPORTED_OPERANDS",
    message="unsupported operand type(s) for {operator}: {left!r} and {right!r}",
    category=ErrorKind.TYPE,
)

RUNTIME_BAD_UNARY_OPERAND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_BAD_UNARY_OPERAND",
    message="bad operand type for unary {operator}: {operand!r}",
    category=ErrorKind.TYPE,
)

RUNTIME_UNORDERED_OPERANDS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNORDERED_OPERANDS",
    message="{operator!r} not supported between types {left!r} and {right!r}",
    category=ErrorKind.TYPE,
)

RUNTIME_ZERO_DIVISION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_ZERO_DIVISION",
    message="{number_kind} division by zero",
    category=ErrorKind.ZERO_DIVISION,
)

RUNTIME_UNDEFINED_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RUNTIME_UNDEFINED_NAME",
    message="name {name!r} is not defined",
    category=ErrorKind.NAME,
)
