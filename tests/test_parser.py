import textwrap

import pytest

from tests._debug import debug_dump_ast, debug_dump_diagnostics
from tests._shared_cases import TREE_CASES, TreeCase, case_id
from wentpy.ast import (
    AddExpr,
    ExprStmt,
    InExpr,
    ListLiteral,
    NumberLiteral,
    Program,
    format_ast,
)
from wentpy.errors import LexicalError, WentSyntaxError
from wentpy.lexer import Lexer, TokenKind
from wentpy.parser import (
    ParseAbort,
    ParseMode,
    Parser,
    ParserOptions,
    TokenSource,
    parse,
    parse_expression,
)
from wentpy.pipeline import WentParseResult
from wentpy.text import Position


def parse_ok(source: str, *, mode: ParseMode = ParseMode.EXPRESSION) -> WentParseResult:
    result = parse(source, mode=mode)
    debug_dump_ast("parse_ok", result.root, source)
    debug_dump_diagnostics("parse_ok", result.diagnostics, source)
    assert result.root is not None
    assert result.diagnostics == []
    return result


def parse_fail(source: str, *, mode: ParseMode = ParseMode.PROGRAM) -> WentParseResult:
    result = parse(source, mode=mode)
    debug_dump_diagnostics("parse_fail", result.diagnostics, source)
    assert result.root is None
    assert result.has_errors
    assert len(result.diagnostics) == 1
    return result


@pytest.mark.parametrize("case", TREE_CASES, ids=case_id)
def test_expression_shapes(case: TreeCase) -> None:
    result = parse_ok(case.source)
    assert format_ast(result.root) == case.sexpr


def test_program_splits_statements_on_newlines_and_semicolons() -> None:
    source = textwrap.dedent(
        """\
        1 + 2
        x; y
        [1,
         2]
        """
    )
    result = parse_ok(source, mode=ParseMode.PROGRAM)

    program = result.root
    assert isinstance(program, Program)
    assert len(program.statements) == 4
    assert all(isinstance(statement, ExprStmt) for statement in program.statements)
    assert format_ast(program) == "(+ 1 2)\nx\ny\n(list 1 2)"


def test_operator_at_line_end_continues_the_statement() -> None:
    result = parse_ok("1 +\n2", mode=ParseMode.PROGRAM)
    assert format_ast(result.root) == "(+ 1 2)"


def test_empty_program() -> None:
    result = parse_ok("", mode=ParseMode.PROGRAM)
    assert result.root == Program(())
    assert result.root.start_position() == Position(1, 1)


def test_comment_only_program() -> None:
    result = parse_ok("// nothing\n/* here */\n", mode=ParseMode.PROGRAM)
    assert result.root == Program(())


def test_binary_node_records_operands_and_operator_position() -> None:
    result = parse_expression("1 + 23")
    root = result.raise_for_error()

    assert isinstance(root, AddExpr)
    assert isinstance(root.left, NumberLiteral)
    assert root.operator_position == Position(1, 3)
    assert root.start_position() == Position(1, 1)
    assert root.end_position() == Position(1, 7)


def test_list_literal_spans_its_brackets() -> None:
    root = parse_expression(" [1, 2] ").raise_for_error()
    assert isinstance(root, ListLiteral)
    assert root.start_position() == Position(1, 2)
    assert root.end_position() == Position(1, 8)


def test_negated_membership_uses_the_not_position() -> None:
    root = parse_expression("a !in b").raise_for_error()
    assert isinstance(root, InExpr)
    assert root.is_not
    assert root.symbol == "!in"
    assert root.operator_position == Position(1, 3)


def test_unexpected_eof() -> None:
    result = parse_fail("1 +")
    diagnostic = result.diagnostics[0]
    assert diagnostic.code == "PARSER_UNEXPECTED_TOKEN"
    assert diagnostic.message == "unexpected EOF in expression"
    assert diagnostic.position == Position(1, 4)


def test_missing_closing_paren_is_a_lexical_error() -> None:
    result = parse_fail("(1 + 2")
    diagnostic = result.diagnostics[0]
    assert diagnostic.code == "LEXER_UNCLOSED_LEFT_BRACKET"
    assert diagnostic.message == "unclosed left bracket: '('"
    assert diagnostic.position == Position(1, 1)
    assert isinstance(result.error, LexicalError)


def test_expected_token_message() -> None:
    result = parse_fail("(1 2)")
    diagnostic = result.diagnostics[0]
    assert diagnostic.code == "PARSER_EXPECTED_TOKEN"
    assert diagnostic.message == "expected ')' in parenthesized expression, found '2'"
    assert diagnostic.position == Position(1, 4)


def test_list_missing_comma() -> None:
    result = parse_fail("[1 2]")
    assert result.diagnostics[0].message == "missing ',' in list literal"
    assert result.diagnostics[0].position == Position(1, 4)


def test_list_missing_comma_before_newline() -> None:
    result = parse_fail("[1\n2]")
    assert result.diagnostics[0].message == "missing ',' before newline in list literal"
    assert result.diagnostics[0].position == Position(1, 3)


def test_two_expressions_on_one_line() -> None:
    result = parse_fail("1 2")
    assert result.diagnostics[0].message == "unexpected '2' in statement"
    assert result.diagnostics[0].position == Position(1, 3)


def test_first_lexical_error_aborts_the_parse() -> None:
    result = parse_fail("1 + @ + #")
    assert result.diagnostics[0].message == "illegal character: '@'"
    with pytest.raises(LexicalError, match="illegal character"):
        result.raise_for_error()


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("99999999999999999999", "integer overflow: '99999999999999999999'"),
        ("1e999", "illegal number syntax: '1e999'"),
    ],
)
def test_illegal_numbers_are_syntax_errors(source: str, message: str) -> None:
    result = parse_fail(source)
    assert result.diagnostics[0].code == "PARSER_ILLEGAL_NUMBER"
    assert result.diagnostics[0].message == message
    with pytest.raises(WentSyntaxError):
        result.raise_for_error()


def test_expression_mode_rejects_a_second_expression() -> None:
    result = parse_expression("1; 2")
    assert result.root is None
    assert result.diagnostics[0].message == "unexpected '2' in expression"


def test_expression_mode_rejects_dangling_not() -> None:
    result = parse_expression("a !")
    assert result.diagnostics[0].message == "unexpected '!' in expression"


def test_expression_mode_trailing_semicolon_option() -> None:
    strict = ParserOptions(mode=ParseMode.EXPRESSION, allow_trailing_semicolon=False)

    assert parse("1;", mode=ParseMode.EXPRESSION).root is not None
    assert parse("1\n", options=strict).root is not None

    rejected = parse("1;", options=strict)
    assert rejected.root is None
    assert rejected.diagnostics[0].message == "unexpected ';' in expression"


def test_parse_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="Pass either options or mode, not both"):
        parse("1", options=ParserOptions(), mode=ParseMode.PROGRAM)


def test_parse_result_keeps_source_name_and_options() -> None:
    result = parse("x", name="demo.went")
    assert result.source_text == "x"
    assert result.name == "demo.went"
    assert result.options == ParserOptions()
    assert result.error is None

    failed = parse("(", name="demo.went")
    assert failed.diagnostics[0].input_name == "demo.went"
    assert str(failed.error).startswith("demo.went:1:")


def test_token_source_backup_restores_order() -> None:
    source = TokenSource(Lexer("a b c"))
    first = source.next()
    second = source.next()

    source.backup(first, second)

    assert source.next() is first
    assert source.next() is second
    assert source.next().text == "c"
    assert source.at(TokenKind.EOF)


def test_parser_expect_one_of_message() -> None:
    parser = Parser(TokenSource(Lexer("x")))

    with pytest.raises(ParseAbort) as excinfo:
        parser.expect_one_of((TokenKind.INT, TokenKind.STRING), "demo")
    assert excinfo.value.diagnostic.message == 'expected number or string in demo, found <NAME:"x">'
