"""Coordinate transforms applied before sampling another render."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from kantera.render import Render, Res
from kantera.timed import value_at
from kantera.util import noise

TransformFn = Callable[[float, float, float, Res], tuple[float, float, float]]


@dataclass
class Transform(Render):
    """Samples ``source`` at coordinates mapped through ``transformer``."""

    source: Render
    transformer: TransformFn

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        u, v, time = self.transformer(u, v, time, res)
        return self.source.sample(u, v, time, res)

    def duration(self) -> float:
        return math.inf


def camera_shake(size: float) -> TransformFn:
    """A smooth, deterministic hand-held camera wobble."""

    def shake(u: float, v: float, time: float, res: Res) -> tuple[float, float, float]:
        r = time
        return (
            u + math.sin(r * 0.523 + math.sin(r * 2.0) * 3.0) * math.cos(r) * size,
            v + math.sin(r * 0.525 + math.sin(r * 2.1) * 3.0) * math.cos(r * 1.001) * size,
            time,
        )

    return shake


def camera_shake2(size: float, time_scale: float) -> TransformFn:
    """A noise-driven camera wobble measured in pixels."""

    def shake(u: float, v: float, time: float, res: Res) -> tuple[float, float, float]:
        return (
            u + noise(0.0, 0.0, time * time_scale) / res[0] * size,
            v + noise(0.5, 2.0, time * time_scale) / res[1] * size,
            time,
        )

    return shake


@dataclass(frozen=True)
class Mat:
    """A 2x3 affine matrix mapping output pixels back to source pixels."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    def translate(self, x: float, y: float) -> "Mat":
        return Mat(
            self.a, self.b, -x * self.a - y * self.b + self.c,
            self.d, self.e, -x * self.d - y * self.e + self.f,
        )

    def scale(self, x: float, y: float) -> "Mat":
        return Mat(self.a / x, self.b / x, self.c, self.d / y, self.e / y, self.f)

    def rotate(self, rad: float) -> "Mat":
        sin, cos = math.sin(rad), math.cos(rad)
        return Mat(
            self.a * cos + self.b * sin, self.a * -sin + self.b * cos,
            self.c,
            self.d * cos + self.e * sin, self.d * -sin + self.e * cos,
            self.f,
        )

    def get_transformer(self) -> TransformFn:
        """A transformer applying this matrix in pixel space."""

        def transformer(u: float, v: float, time: float, res: Res) -> tuple[float, float, float]:
            x, y = self.apply(u * res[0], v * res[1])
            return (x / res[0], y / res[1], time)

        return transformer

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.a + y * self.b + self.c, x * self.d + y * self.e + self.f)


def timed_to_transformer(translation_path: Any, scale_path: Any, rotation_path: Any) -> TransformFn:
    """Transformer from timed translation, scale and rotation about the centre."""

    def transformer(u: float, v: float, time: float, res: Res) -> tuple[float, float, float]:
        t = value_at(translation_path, time)
        u, v = u - t.x, v - t.y
        x = (u - 0.5) * res[0]
        y = (v - 0.5) * res[1]
        angle = -value_at(rotation_path, time)
        sin, cos = math.sin(angle), math.cos(angle)
        x, y = x * cos - y * sin, x * sin + y * cos
        s = value_at(scale_path, time)
        x, y = x / s.x, y / s.y
        return (x / res[0] + 0.5, y / res[1] + 0.5, time)

    return transformer


def path_to_transformer(translation_path: Any, scale_path: Any, rotation_path: Any) -> TransformFn:
    """Transformer from keyframed translation, scale and rotation paths."""
    return timed_to_transformer(translation_path, scale_path, rotation_path)