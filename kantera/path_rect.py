"""Bounding rectangles of closed two-dimensional paths."""

from __future__ import annotations

import math
from itertools import pairwise

from kantera.path import Bezier2, Bezier3, Constant, Linear, Path

Rect = tuple[int, int, int, int]


def closed_path_rect(path: Path) -> Rect:
    """Integer bounding box (left, top, right, bottom) of a path of ``Vec2`` points."""
    first = path.points[0][1]
    xs = [first.x]
    ys = [first.y]
    for (_, prev, _), (_, value, point) in pairwise(path.points):
        match point:
            case Constant() | Linear():
                xs.append(value.x)
                ys.append(value.y)
            case Bezier2():
                raise ValueError("closed paths do not support Bezier2 points")
            case Bezier3(h1, h2):
                xs.extend((prev.x, h1.x, h2.x, value.x))
                ys.extend((prev.y, h1.y, h2.y, value.y))
    return (
        math.floor(min(xs)),
        math.floor(min(ys)),
        math.ceil(max(xs)),
        math.ceil(max(ys)),
    )


def expand_rect(rect: Rect, size: int) -> Rect:
    """Grow ``rect`` by ``size`` on every side."""
    left, top, right, bottom = rect
    return (left - size, top - size, right + size, bottom + size)