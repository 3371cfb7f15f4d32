"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from wentpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def _sort_key(diagnostic: Diagnostic) -> tuple[str, int, int, str]:
    position = diagnostic.position
    line = position.line if position is not None else 0
    column = position.column if position is not None else 0
    return (diagnostic.input_name, line, column, diagnostic.message)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order by input name, then line, column and message."""
    return sorted(diagnostics, key=_sort_key)


def remove_multiples(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Sort, then keep only the first diagnostic reported on each line."""
    kept: list[Diagnostic] = []
    seen: set[tuple[str, int]] = set()
    for diagnostic in sort_diagnostics(diagnostics):
        line = diagnostic.position.line if diagnostic.position is not None else 0
        key = (diagnostic.input_name, line)
        if key in seen:
            continue
        seen.add(key)
        kept.append(diagnostic)
    return kept
