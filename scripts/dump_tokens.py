#!/usr/bin/env python
"""Write the token stream of a went file, one token per line."""

from __future__ import annotations

import argparse
from pathlib import Path

from wentpy.lexer import Token, tokenize


def format_token(idx: int, token: Token) -> str:
    return (
        f"[{idx}] kind={token.kind.name} "
        f"text={token.text!r} "
        f"span=({token.range.start},{token.range.end}) "
        f"at={token.position}-{token.end} "
        f"flags={token.flags!r}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump went tokens to a text file")
    parser.add_argument("input", type=Path, help="went source file")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (default: out/<input stem>_tokens.txt)",
    )
    args = parser.parse_args()

    input_path: Path = args.input
    output_path: Path = args.output or Path("out") / f"{input_path.stem}_tokens.txt"

    text = input_path.read_text(encoding="utf-8")
    tokens, diagnostics = tokenize(text, input_path.name)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token) + "\n")
        for diagnostic in diagnostics:
            f.write(f"! {diagnostic.code} {diagnostic.format()}\n")

    print(f"Wrote {len(tokens)} tokens ({len(diagnostics)} diagnostics) to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
