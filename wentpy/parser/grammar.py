"""went grammar routines.

Precedence, loosest first::

    program     := (orExpr (';' | EOF))* EOF
    orExpr      := andExpr ('||' andExpr)*
    andExpr     := notExpr ('&&' notExpr)*
    notExpr     := '!' notExpr | comparison
    comparison  := addExpr (('==' | '!=' | '<' | '<=' | '>' | '>=' | 'in' | '!' 'in') addExpr)*
    addExpr     := mulExpr (('+' | '-') mulExpr)*
    mulExpr     := unary (('*' | '/' | '%') unary)*
    unary       := ('+' | '-') unary | atom
    atom        := NAME | INT | FLOAT | STRING | RAWSTRING | 'null' | 'false' | 'true'
                 | '(' orExpr ')' | '[' [orExpr (',' orExpr)* [',']] ']'

Every binary level is left-associative, so `a < b < c` is `(a < b) < c`.
"""

from wentpy.ast import (
    AddExpr,
    AndExpr,
    BoolLiteral,
    DivExpr,
    EqExpr,
    Expr,
    ExprStmt,
    GreaterExpr,
    Ident,
    InExpr,
    ListLiteral,
    MinusExpr,
    ModExpr,
    MulExpr,
    NotExpr,
    NullLiteral,
    NumberLiteral,
    NumberLiteralError,
    OrExpr,
    PlusExpr,
    Program,
    SmallerExpr,
    Stmt,
    StringLiteral,
    SubExpr,
)
from wentpy.diagnostics.codes import PARSER_ILLEGAL_NUMBER, PARSER_MISSING_COMMA
from wentpy.lexer import TokenKind
from wentpy.parser.parser import Parser

_ADDITIVE: dict[TokenKind, type[AddExpr | SubExpr]] = {
    TokenKind.ADD: AddExpr,
    TokenKind.SUB: SubExpr,
}

_MULTIPLICATIVE: dict[TokenKind, type[MulExpr | DivExpr | ModExpr]] = {
    TokenKind.MUL: MulExpr,
    TokenKind.DIV: DivExpr,
    TokenKind.MOD: ModExpr,
}


def parse_program(parser: Parser) -> Program:
    statements: list[Stmt] = []
    while not parser.at(TokenKind.EOF):
        expr = parse_or_expr(parser)
        statements.append(ExprStmt(expr))
        terminator = parser.next()
        match terminator.kind:
            case TokenKind.SEMICOLON:
                continue
            case TokenKind.EOF:
                parser.backup(terminator)
            case _:
                parser.unexpected(terminator, "statement")
    return Program(tuple(statements))


def parse_single_expression(parser: Parser) -> Expr:
    expr = parse_or_expr(parser)
    terminator = parser.next()
    if terminator.kind == TokenKind.SEMICOLON:
        if not terminator.is_inserted() and not parser.options.allow_trailing_semicolon:
            parser.unexpected(terminator, "expression")
        terminator = parser.next()
    if terminator.kind != TokenKind.EOF:
        parser.unexpected(terminator, "expression")
    return expr


def parse_or_expr(parser: Parser) -> Expr:
    left = parse_and_expr(parser)
    while (operator := parser.eat(TokenKind.OR)) is not None:
        left = OrExpr(left, parse_and_expr(parser), operator.position)
    return left


def parse_and_expr(parser: Parser) -> Expr:
    left = parse_not_expr(parser)
    while (operator := parser.eat(TokenKind.AND)) is not None:
        left = AndExpr(left, parse_not_expr(parser), operator.position)
    return left


def parse_not_expr(parser: Parser) -> Expr:
    operator = parser.eat(TokenKind.NOT)
    if operator is not None:
        return NotExpr(parse_not_expr(parser), operator.position)
    return parse_comparison(parser)


def parse_comparison(parser: Parser) -> Expr:
    left = parse_add_expr(parser)
    while True:
        operator = parser.next()
        position = operator.position
        match operator.kind:
            case TokenKind.EQ:
                left = EqExpr(left, parse_add_expr(parser), position)
            case TokenKind.NEQ:
                left = EqExpr(left, parse_add_expr(parser), position, is_not=True)
            case TokenKind.SM:
                left = SmallerExpr(left, parse_add_expr(parser), position)
            case TokenKind.SMEQ:
                left = SmallerExpr(left, parse_add_expr(parser), position, or_equal=True)
            case TokenKind.GR:
                left = GreaterExpr(left, parse_add_expr(parser), position)
            case TokenKind.GREQ:
                left = GreaterExpr(left, parse_add_expr(parser), position, or_equal=True)
            case TokenKind.IN:
                left = InExpr(left, parse_add_expr(parser), position)
            case TokenKind.NOT:
                following = parser.next()
                if following.kind != TokenKind.IN:
                    parser.backup(operator, following)
                    return left
                left = InExpr(left, parse_add_expr(parser), position, is_not=True)
            case _:
                parser.backup(operator)
                return left


def parse_add_expr(parser: Parser) -> Expr:
    left = parse_mul_expr(parser)
    while parser.peek().kind in _ADDITIVE:
        operator = parser.next()
        left = _ADDITIVE[operator.kind](left, parse_mul_expr(parser), operator.position)
    return left


def parse_mul_expr(parser: Parser) -> Expr:
    left = parse_unary(parser)
    while parser.peek().kind in _MULTIPLICATIVE:
        operator = parser.next()
        left = _MULTIPLICATIVE[operator.kind](left, parse_unary(parser), operator.position)
    return left


def parse_unary(parser: Parser) -> Expr:
    operator = parser.next()
    match operator.kind:
        case TokenKind.ADD:
            return PlusExpr(parse_unary(parser), operator.position)
        case TokenKind.SUB:
            return MinusExpr(parse_unary(parser), operator.position)
        case _:
            parser.backup(operator)
            return parse_atom(parser)


def parse_atom(parser: Parser) -> Expr:
    token = parser.next()
    match token.kind:
        case TokenKind.NAME:
            return Ident(token.position, token.end, token.text)
        case TokenKind.INT | TokenKind.FLOAT:
            try:
                return NumberLiteral.from_token(token)
            except NumberLiteralError as exc:
                parser.error(PARSER_ILLEGAL_NUMBER, token.position, reason=exc.reason, text=exc.text)
        case TokenKind.STRING:
            return StringLiteral(token.position, token.end, token.text)
        case TokenKind.RAWSTRING:
            return StringLiteral(token.position, token.end, token.text, raw=True)
        case TokenKind.NULL:
            return NullLiteral(token.position, token.end)
        case TokenKind.TRUE | TokenKind.FALSE:
            return BoolLiteral(token.position, token.end, token.kind == TokenKind.TRUE)
        case TokenKind.LPAREN:
            expr = parse_or_expr(parser)
            parser.expect(TokenKind.RPAREN, "parenthesized expression")
            return expr
        case TokenKind.LBRACKET:
            parser.backup(token)
            return parse_list_literal(parser)
        case _:
            parser.unexpected(token, "expression")


def parse_list_literal(parser: Parser) -> ListLiteral:
    opener = parser.expect(TokenKind.LBRACKET, "list literal")
    elements: list[Expr] = []
    while True:
        closer = parser.eat(TokenKind.RBRACKET)
        if closer is not None:
            break
        elements.append(parse_or_expr(parser))
        separator = parser.next()
        if separator.kind == TokenKind.COMMA:
            continue
        if separator.kind == TokenKind.RBRACKET:
            closer = separator
            break
        suffix = " before newline" if separator.is_newline() else ""
        parser.error(PARSER_MISSING_COMMA, separator.position, suffix=suffix, context="list literal")
    return ListLiteral(opener.position, closer.end, tuple(elements))
