"""Command line entry point: run a file, an expression, or an interactive prompt."""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

from wentpy.ast import format_ast
from wentpy.diagnostics import Diagnostic
from wentpy.lexer import tokenize
from wentpy.parser import parse
from wentpy.pipeline import run
from wentpy.runtime import MapScope, Scope

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_DATA_ERROR = 65

PROMPT = "went> "
CONTINUATION_PROMPT = "..... "

_CLOSERS = {"(": ")", "[": "]", "{": "}"}


class LineStatus(Enum):
    COMPLETE = "complete"
    OPEN = "open"
    MISMATCHED = "mismatched"


class BracketTracker:
    """Tracks brackets across prompt lines to decide when an input is complete."""

    def __init__(self) -> None:
        self._stack: list[str] = []

    def feed(self, line: str) -> LineStatus:
        for ch in line:
            if ch in _CLOSERS:
                self._stack.append(ch)
            elif ch in (")", "]", "}"):
                if not self._stack or _CLOSERS[self._stack.pop()] != ch:
                    self._stack.clear()
                    return LineStatus.MISMATCHED
        return LineStatus.OPEN if self._stack else LineStatus.COMPLETE

    def reset(self) -> None:
        self._stack.clear()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="went",
        description="Evaluate went source. Without a file or -e, start an interactive prompt.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", type=Path, help="Script file to evaluate")
    source.add_argument("-e", "--expr", help="Evaluate the given source text")
    parser.add_argument("--tokens", action="store_true", help="Print the token stream instead of evaluating")
    parser.add_argument("--ast", action="store_true", help="Print the parsed tree instead of evaluating")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _report(diagnostics: list[Diagnostic], stderr: TextIO) -> None:
    for diagnostic in diagnostics:
        print(diagnostic.format(with_kind=True), file=stderr)


def run_source(
    text: str,
    name: str = "",
    *,
    show_tokens: bool = False,
    show_ast: bool = False,
    scope: Scope | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one input and print its result; returns a process exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if show_tokens or show_ast:
        status = EXIT_OK
        if show_tokens:
            tokens, diagnostics = tokenize(text, name)
            for token in tokens:
                print(f"{token.position}\t{token.kind.name}\t{token}", file=stdout)
            if diagnostics:
                _report(diagnostics, stderr)
                status = EXIT_DATA_ERROR
        if show_ast:
            parsed = parse(text, name)
            if parsed.root is None:
                _report(parsed.diagnostics, stderr)
                status = EXIT_DATA_ERROR
            else:
                print(format_ast(parsed.root), file=stdout)
        return status

    result = run(text, name, scope=scope)
    if result.error is not None:
        _report(result.diagnostics, stderr)
        return EXIT_DATA_ERROR
    print(result.value, file=stdout)
    return EXIT_OK


def run_prompt(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    scope: Scope | None = None,
) -> int:
    """Read-eval-print loop; lines are buffered while brackets are left open."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    scope = scope if scope is not None else MapScope()

    tracker = BracketTracker()
    buffer: list[str] = []
    prompt = PROMPT
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return EXIT_OK

        line = line.rstrip("\n")
        buffer.append(line)
        if tracker.feed(line) is LineStatus.OPEN:
            prompt = CONTINUATION_PROMPT
            continue

        # Complete or mismatched input is run as is; mismatches are reported by the lexer.
        query = "\n".join(buffer)
        buffer.clear()
        tracker.reset()
        prompt = PROMPT
        if query.strip():
            run_source(query, scope=scope, stdout=stdout, stderr=stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.expr is not None:
        logger.debug("evaluating expression argument")
        return run_source(args.expr, show_tokens=args.tokens, show_ast=args.ast)

    if args.file is not None:
        path: Path = args.file
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Encountered error with opening/reading the file input: {path}: {exc}", file=sys.stderr)
            return EXIT_READ_ERROR
        logger.debug("evaluating file %s", path)
        return run_source(text, path.name, show_tokens=args.tokens, show_ast=args.ast)

    logger.debug("starting interactive prompt")
    return run_prompt()


if __name__ == "__main__":
    raise SystemExit(main())
