"""Entrypoints that run parse and evaluation over one input."""

from __future__ import annotations

import logging

from wentpy.parser import ParseMode, ParserOptions, parse
from wentpy.pipeline.result import EvaluationResult, WentParseResult
from wentpy.runtime import Scope, evaluate

logger = logging.getLogger(__name__)


def run(
    text: str,
    name: str = "",
    *,
    scope: Scope | None = None,
    options: ParserOptions | None = None,
    mode: ParseMode | None = None,
    parse_result: WentParseResult | None = None,
) -> EvaluationResult:
    """Parse then evaluate `text`; the first error from either stage is returned."""
    resolved_parse = _resolve_parse(text, name, options=options, mode=mode, parse_result=parse_result)
    if resolved_parse.root is None:
        return EvaluationResult(
            value=None,
            diagnostics=list(resolved_parse.diagnostics),
            error=resolved_parse.error,
            parse=resolved_parse,
        )

    result = evaluate(resolved_parse.root, name=resolved_parse.name, scope=scope)
    result.diagnostics = [*resolved_parse.diagnostics, *result.diagnostics]
    result.parse = resolved_parse
    return result


def _resolve_parse(
    text: str,
    name: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse_result: WentParseResult | None,
) -> WentParseResult:
    if parse_result is None:
        return parse(text, name, options=options, mode=mode)
    if options is not None or mode is not None:
        raise ValueError("Pass either parse_result or options/mode, not both")
    if parse_result.source_text != text:
        raise ValueError("Provided parse_result must be built from the same text")
    logger.debug("reusing parse of %r", parse_result.name or "<input>")
    return parse_result
