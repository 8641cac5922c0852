"""Pixel colour types."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rgba:
    """A floating-point colour with alpha; the default is opaque black."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))

    def __add__(self, other: object) -> "Rgba":
        if not isinstance(other, Rgba):
            return NotImplemented
        return Rgba(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __mul__(self, other: object) -> "Rgba":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Rgba(self.r * other, self.g * other, self.b * other, self.a * other)

    __rmul__ = __mul__

    def normal_blend(self, rhs: "Rgba", alpha: float) -> "Rgba":
        """Blend ``rhs`` over this colour, weighted by its alpha times ``alpha``."""
        alpha = rhs.a * alpha
        keep = 1.0 - alpha
        return Rgba(
            self.r * keep + rhs.r * alpha,
            self.g * keep + rhs.g * alpha,
            self.b * keep + rhs.b * alpha,
            1.0 - (1.0 - self.a) * keep,
        )


def _to_u8(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


@dataclass(frozen=True)
class RgbU8:
    """An 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def normal_blend(self, rhs: "RgbU8", alpha: float) -> "RgbU8":
        """Blend ``rhs`` over this colour by ``alpha``, truncating to 8 bits."""
        keep = 1.0 - alpha
        return RgbU8(
            _to_u8(self.r * keep + rhs.r * alpha),
            _to_u8(self.g * keep + rhs.g * alpha),
            _to_u8(self.b * keep + rhs.b * alpha),
        )

    def to_rgba(self) -> Rgba:
        """Convert to an opaque floating-point colour."""
        return Rgba(self.r / 255.0, self.g / 255.0, self.b / 255.0, 1.0)