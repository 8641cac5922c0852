"""Keyframed paths that interpolate values over time."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Union

from kantera.timed import Timed
from kantera.vector import lerp


@dataclass(frozen=True)
class Constant:
    """Hold the previous value until this point is reached."""


@dataclass(frozen=True)
class Linear:
    """Interpolate linearly from the previous point."""


@dataclass(frozen=True)
class Bezier2:
    """Quadratic Bézier segment with one control value."""

    handle: Any


@dataclass(frozen=True)
class Bezier3:
    """Cubic Bézier segment with two control values."""

    handle_1: Any
    handle_2: Any


Point = Union[Constant, Linear, Bezier2, Bezier3]


class Path(Timed):
    """A sequence of timed keyframes; each point says how it is reached."""

    def __init__(self, first_value: Any) -> None:
        self.points: list[tuple[float, Any, Point]] = [(0.0, first_value, Constant())]

    def __repr__(self) -> str:
        return f"Path(points={self.points!r})"

    def append(self, d_time: float, value: Any, point_type: Point) -> "Path":
        """Add a keyframe ``d_time`` seconds after the last one; returns the path."""
        if not 0.0 <= d_time:
            raise ValueError(f"d_time must be non-negative, got {d_time}")
        self.points.append((self.points[-1][0] + d_time, value, point_type))
        return self

    def get_value(self, time: float) -> Any:
        first_time, first_value, _ = self.points[0]
        if time < first_time:
            return first_value
        for (l_time, l_value, _), (r_time, r_value, point) in pairwise(self.points):
            if not l_time <= time < r_time:
                continue
            v = (time - l_time) / (r_time - l_time)
            iv = 1.0 - v
            match point:
                case Constant():
                    return l_value
                case Linear():
                    return lerp(l_value, r_value, v)
                case Bezier2(handle):
                    return l_value * iv**2 + handle * (v * iv * 2.0) + r_value * v**2
                case Bezier3(handle_1, handle_2):
                    return (
                        l_value * iv**3
                        + handle_1 * (3.0 * v * iv**2)
                        + handle_2 * (3.0 * v**2 * iv)
                        + r_value * v**3
                    )
        return self.points[-1][1]