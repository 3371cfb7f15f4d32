"""High-level parse entrypoints for went source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wentpy.lexer import Lexer
from wentpy.parser.grammar import parse_program, parse_single_expression
from wentpy.parser.options import ParseMode, ParserOptions
from wentpy.parser.parser import ParseAbort, Parser
from wentpy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from wentpy.pipeline import WentParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    name: str = "",
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> WentParseResult:
    """Parse a whole input; on the first lexical or syntax error the root is `None`."""
    from wentpy.pipeline import WentParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    lexer = Lexer(text, name)
    parser = Parser(TokenSource(lexer), options=resolved_options)

    logger.debug("parsing %r as %s", name or "<input>", resolved_options.mode)
    try:
        if resolved_options.mode == ParseMode.EXPRESSION:
            root = parse_single_expression(parser)
        else:
            root = parse_program(parser)
    except ParseAbort as abort:
        logger.debug("parse aborted: %s", abort.diagnostic)
        return WentParseResult(
            source_text=text,
            name=name,
            root=None,
            diagnostics=[abort.diagnostic],
            options=resolved_options,
        )

    return WentParseResult(
        source_text=text,
        name=name,
        root=root,
        diagnostics=list(lexer.diagnostics),
        options=resolved_options,
    )


def parse_expression(text: str, name: str = "") -> WentParseResult:
    """Parse exactly one expression, optionally followed by `;`."""
    return parse(text, name, mode=ParseMode.EXPRESSION)
