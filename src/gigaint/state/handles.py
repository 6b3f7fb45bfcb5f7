"""
Explicitly owned BigInt handles.

``BigInt`` values are immutable and garbage collected, so nothing has to be
released for correctness. A ``Handle`` is for callers that want the
free-then-null discipline anyway: once ``free()`` runs, every later read (and a
second ``free()``) raises ``UseAfterFreeError`` instead of silently working.
"""

from __future__ import annotations

from typing import Optional

from ..core.bigint import BigInt, copy
from ..errors import UseAfterFreeError


class Handle:
    __slots__ = ("_value",)

    def __init__(self, value: BigInt) -> None:
        if not isinstance(value, BigInt):
            raise TypeError(f"Handle owns a BigInt, got {type(value).__name__}")
        self._value: Optional[BigInt] = value

    @property
    def value(self) -> BigInt:
        if self._value is None:
            raise UseAfterFreeError("handle used after free")
        return self._value

    @property
    def released(self) -> bool:
        return self._value is None

    def free(self) -> None:
        if self._value is None:
            raise UseAfterFreeError("handle freed twice")
        self._value = None

    def copy(self) -> Handle:
        """New, independently owned handle on a copy of the value."""
        return Handle(copy(self.value))

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._value is not None:
            self.free()

    def __repr__(self) -> str:
        if self._value is None:
            return "Handle(<freed>)"
        return f"Handle({self._value!r})"


def free(handle: Handle) -> None:
    handle.free()
