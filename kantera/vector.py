"""Two- and three-component vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Iterator


def _rem(a: Any, b: Any) -> Any:
    if isinstance(a, int) and isinstance(b, int):
        magnitude = abs(a) % abs(b)
        return magnitude if a >= 0 else -magnitude
    return math.fmod(a, b)


def lerp(a: Any, b: Any, v: float) -> Any:
    """Linearly interpolate between ``a`` and ``b`` by factor ``v``."""
    return a * (1.0 - v) + b * v


class _Vector:
    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def _combine(self, other: Any, op) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self, other)))

    def __add__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a - b)

    def __truediv__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a / b)

    def __mod__(self, other: Any) -> Any:
        return self._combine(other, _rem)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, (int, float)):
            return type(self)(*(a * other for a in self))
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, (int, float)):
            return type(self)(*(other * a for a in self))
        return NotImplemented

    def __neg__(self) -> Any:
        return type(self)(*(-a for a in self))

    def is_zero(self) -> bool:
        """True when every component is zero."""
        return all(a == 0 for a in self)

    def is_one(self) -> bool:
        """True when every component is one."""
        return all(a == 1 for a in self)


@dataclass(frozen=True)
class Vec2(_Vector):
    """A two-component vector."""

    x: Any
    y: Any

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec2":
        return cls(1.0, 1.0)

    def is_zero(self) -> bool:
        return super().is_zero()

    def is_one(self) -> bool:
        return super().is_one()


@dataclass(frozen=True)
class Vec3(_Vector):
    """A three-component vector."""

    x: Any
    y: Any
    z: Any

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec3":
        return cls(1.0, 1.0, 1.0)

    def is_zero(self) -> bool:
        return super().is_zero()

    def is_one(self) -> bool:
        return super().is_one()