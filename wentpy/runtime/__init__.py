"""Runtime values, scopes and the evaluator."""

from wentpy.runtime.interpreter import Interpreter, evaluate
from wentpy.runtime.scope import MapScope, Scope
from wentpy.runtime.values import (
    FALSE,
    NULL,
    TRUE,
    OrderingError,
    Value,
    WBool,
    WList,
    WMap,
    WNull,
    WNumber,
    WString,
    from_python,
    to_python,
    w_bool,
    wrap_int64,
)

__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "Interpreter",
    "MapScope",
    "OrderingError",
    "Scope",
    "Value",
    "WBool",
    "WList",
    "WMap",
    "WNull",
    "WNumber",
    "WString",
    "evaluate",
    "from_python",
    "to_python",
    "w_bool",
    "wrap_int64",
]
