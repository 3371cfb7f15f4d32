"""Parse/evaluate carriers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wentpy.diagnostics import has_errors
from wentpy.errors import WentError, error_from_diagnostic
from wentpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from wentpy.ast import Root
    from wentpy.diagnostics import Diagnostic
    from wentpy.runtime import Value


@dataclass(slots=True)
class WentParseResult:
    """Outcome of parsing one input; `root` is `None` when parsing failed."""

    source_text: str
    name: str
    root: Root | None
    diagnostics: list[Diagnostic]
    options: ParserOptions = field(default_factory=ParserOptions)

    @property
    def has_errors(self) -> bool:
        return self.root is None or has_errors(self.diagnostics)

    @property
    def error(self) -> WentError | None:
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                return error_from_diagnostic(diagnostic)
        return None

    def raise_for_error(self) -> Root:
        """Return the root, or raise the first error as a `WentError`."""
        error = self.error
        if error is not None:
            raise error
        if self.root is None:
            raise ValueError("parse produced no root and no diagnostics")
        return self.root


@dataclass(slots=True)
class EvaluationResult:
    """Outcome of evaluating a tree; `value` is `None` when evaluation failed.

    `parse` is set when the result came from `run`, and carries the parse that
    produced the evaluated tree (or the failed parse).
    """

    value: Value | None
    diagnostics: list[Diagnostic]
    error: WentError | None = None
    parse: WentParseResult | None = None

    @property
    def has_errors(self) -> bool:
        return self.error is not None or has_errors(self.diagnostics)

    def raise_for_error(self) -> Value:
        """Return the value, or raise the error that aborted parsing or evaluation."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("evaluation produced no value and no error")
        return self.value
