"""Pipeline entrypoints and result carriers."""

from wentpy.pipeline.result import EvaluationResult, WentParseResult
from wentpy.pipeline.entrypoints import run

__all__ = [
    "EvaluationResult",
    "WentParseResult",
    "run",
]
