"""Runtime values produced by the interpreter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from wentpy.ast.model import INT64_MAX, INT64_MIN


class OrderingError(TypeError):
    """Raised when two values have no order relation."""

    def __init__(self, operator: str, left: Value, right: Value) -> None:
        super().__init__(f"{operator!r} not supported between types {left.type_name!r} and {right.type_name!r}")
        self.operator = operator
        self.left = left
        self.right = right


def wrap_int64(value: int) -> int:
    """Wrap an integer into the signed 64-bit range, two's complement style."""
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return (value - INT64_MIN) % (1 << 64) + INT64_MIN


class Value(ABC):
    """Common contract of every runtime value.

    `greater` is derived from `smaller`: `a > b` is `!(a <= b)` and `a >= b` is
    `!(a < b)`.
    """

    __slots__ = ()

    type_name: str = "value"

    @abstractmethod
    def is_zero_value(self) -> bool:
        """Whether the value is falsy."""

    @abstractmethod
    def equals(self, other: Value) -> bool: ...

    def smaller(self, other: Value, or_equal: bool = False) -> bool:
        raise OrderingError("<=" if or_equal else "<", self, other)

    def greater(self, other: Value, or_equal: bool = False) -> bool:
        try:
            return not self.smaller(other, not or_equal)
        except OrderingError:
            raise OrderingError(">=" if or_equal else ">", self, other) from None

    def is_truthy(self) -> bool:
        return not self.is_zero_value()


@dataclass(frozen=True, slots=True)
class WNull(Value):
    type_name = "null"

    def is_zero_value(self) -> bool:
        return True

    def equals(self, other: Value) -> bool:
        return isinstance(other, WNull)

    def __str__(self) -> str:
        return "null"


NULL: Final[WNull] = WNull()


@dataclass(frozen=True, slots=True)
class WNumber(Value):
    """A number; `int` payloads are the integer type, `float` payloads the float type."""

    value: int | float

    @property
    def type_name(self) -> str:  # type: ignore[override]
        return "int" if self.is_int else "float"

    @property
    def is_int(self) -> bool:
        return isinstance(self.value, int)

    def is_zero_value(self) -> bool:
        return self.value == 0

    def equals(self, other: Value) -> bool:
        return isinstance(other, WNumber) and self.value == other.value

    def smaller(self, other: Value, or_equal: bool = False) -> bool:
        if not isinstance(other, WNumber):
            return Value.smaller(self, other, or_equal)
        if or_equal:
            return self.value <= other.value
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class WString(Value):
    type_name = "string"

    value: str

    def is_zero_value(self) -> bool:
        return self.value == ""

    def equals(self, other: Value) -> bool:
        return isinstance(other, WString) and self.value == other.value

    def smaller(self, other: Value, or_equal: bool = False) -> bool:
        if not isinstance(other, WString):
            return Value.smaller(self, other, or_equal)
        if or_equal:
            return self.value <= other.value
        return self.value < other.value

    def __str__(self) -> str:
        return f"'{self.value}'"


@dataclass(frozen=True, slots=True)
class WBool(Value):
    type_name = "bool"

    value: bool

    def is_zero_value(self) -> bool:
        return not self.value

    def equals(self, other: Value) -> bool:
        return isinstance(other, WBool) and self.value == other.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE: Final[WBool] = WBool(True)
FALSE: Final[WBool] = WBool(False)


def w_bool(value: bool) -> WBool:
    return TRUE if value else FALSE


@dataclass(frozen=True, slots=True)
class WList(Value):
    type_name = "list"

    elements: tuple[Value, ...] = ()

    def is_zero_value(self) -> bool:
        return not self.elements

    def equals(self, other: Value) -> bool:
        if not isinstance(other, WList) or len(self.elements) != len(other.elements):
            return False
        return all(a.equals(b) for a, b in zip(self.elements, other.elements))

    def smaller(self, other: Value, or_equal: bool = False) -> bool:
        if not isinstance(other, WList):
            return Value.smaller(self, other, or_equal)
        # Decided by the first unequal pair, then by length.
        for a, b in zip(self.elements, other.elements):
            if not a.equals(b):
                return a.smaller(b, or_equal)
        if or_equal:
            return len(self.elements) <= len(other.elements)
        return len(self.elements) < len(other.elements)

    def contains(self, item: Value) -> bool:
        return any(element.equals(item) for element in self.elements)

    def __str__(self) -> str:
        return "[" + ", ".join(str(element) for element in self.elements) + "]"


@dataclass(frozen=True, slots=True)
class WMap(Value):
    """String-keyed map; key order does not affect equality."""

    type_name = "map"

    entries: Mapping[str, Value] = field(default_factory=dict)

    def is_zero_value(self) -> bool:
        return not self.entries

    def equals(self, other: Value) -> bool:
        if not isinstance(other, WMap) or len(self.entries) != len(other.entries):
            return False
        for key, value in self.entries.items():
            other_value = other.entries.get(key)
            if other_value is None or not value.equals(other_value):
                return False
        return True

    def __str__(self) -> str:
        return "{" + ", ".join(f"{key}: {value}" for key, value in self.entries.items()) + "}"


def from_python(value: object) -> Value:
    """Convert plain Python data into runtime values (used to seed scopes)."""
    match value:
        case Value():
            return value
        case None:
            return NULL
        case bool():
            return w_bool(value)
        case int():
            return WNumber(wrap_int64(value))
        case float():
            return WNumber(value)
        case str():
            return WString(value)
        case list() | tuple():
            return WList(tuple(from_python(item) for item in value))
        case dict():
            return WMap({str(key): from_python(item) for key, item in value.items()})
        case _:
            raise TypeError(f"cannot convert {type(value).__name__} to a went value")


def to_python(value: Value) -> object:
    """Convert a runtime value back into plain Python data."""
    match value:
        case WNull():
            return None
        case WNumber(number) | WString(number) | WBool(number):
            return number
        case WList(elements):
            return [to_python(element) for element in elements]
        case WMap(entries):
            return {key: to_python(item) for key, item in entries.items()}
        case _:
            raise TypeError(f"unknown value type {type(value).__name__}")
