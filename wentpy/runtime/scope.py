"""Symbol tables used to resolve identifiers during evaluation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from wentpy.runtime.values import Value, from_python


@runtime_checkable
class Scope(Protocol):
    def resolve(self, name: str) -> Value | None:
        """Value bound to `name`, or `None` when it is not defined."""
        ...

    def define(self, name: str, value: Value) -> None: ...


class MapScope:
    """Dict-backed scope whose lookups fall back to an optional parent."""

    def __init__(
        self,
        parent: Scope | None = None,
        values: Mapping[str, object] | None = None,
    ) -> None:
        self._parent = parent
        self._values: dict[str, Value] = {}
        if values is not None:
            for name, value in values.items():
                self.define(name, from_python(value))

    @property
    def parent(self) -> Scope | None:
        return self._parent

    def resolve(self, name: str) -> Value | None:
        value = self._values.get(name)
        if value is None and self._parent is not None:
            return self._parent.resolve(name)
        return value

    def define(self, name: str, value: Value) -> None:
        self._values[name] = value

    def child(self) -> MapScope:
        return MapScope(parent=self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None

    def __repr__(self) -> str:
        return f"MapScope({sorted(self._values)!r}, parent={self._parent!r})"
