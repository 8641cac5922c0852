"""Renders that decide what lies outside another render's space or time."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from kantera.pixel import Rgba
from kantera.render import Render, Res

_EXTEND_LIMIT = 0.9999999
_TIME_EPSILON = 0.00001

Uvt = tuple[float, float, float]


class FrameType(Enum):
    """How to fill positions outside the unit square."""

    CONSTANT = "constant"
    EXTEND = "extend"
    REPEAT = "repeat"
    REFLECT = "reflect"


def _reflect(value: float) -> float:
    floor = math.floor(value)
    if int(floor) % 2 == 0:
        return value - floor
    return 1.0 - value + floor


@dataclass
class Frame(Render):
    """Samples ``source`` inside the unit square and fills the rest per ``frame_type``."""

    source: Render
    frame_type: FrameType
    constant: Any = None

    def __post_init__(self) -> None:
        if self.frame_type is FrameType.CONSTANT and self.constant is None:
            raise ValueError("a constant frame needs a constant value")

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        if 0.0 <= u <= 1.0 and 0.0 <= v <= 1.0:
            return self.source.sample(u, v, time, res)
        match self.frame_type:
            case FrameType.CONSTANT:
                return self.constant
            case FrameType.EXTEND:
                return self.source.sample(
                    min(max(u, 0.0), _EXTEND_LIMIT),
                    min(max(v, 0.0), _EXTEND_LIMIT),
                    time,
                    res,
                )
            case FrameType.REPEAT:
                return self.source.sample(u - math.floor(u), v - math.floor(v), time, res)
            case FrameType.REFLECT:
                return self.source.sample(_reflect(u), _reflect(v), time, res)
        raise ValueError(f"unknown frame type {self.frame_type!r}")

    def duration(self) -> float:
        return self.source.duration()


class ExtrapolationType(Enum):
    """How to treat times outside ``[0, length)``."""

    NONE = "none"
    CONSTANT = "constant"
    EXTEND = "extend"
    REPEAT = "repeat"
    REFLECT = "reflect"


@dataclass
class TimeExtrapolate(Render):
    """Extends ``source``, valid for ``length`` seconds, to all times."""

    source: Render
    length: float
    extrapolation_type: ExtrapolationType
    constant: Any = None

    def __post_init__(self) -> None:
        if self.extrapolation_type is ExtrapolationType.CONSTANT and self.constant is None:
            raise ValueError("constant extrapolation needs a constant value")

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        length = self.length
        match self.extrapolation_type:
            case ExtrapolationType.NONE:
                return self.source.sample(u, v, time, res)
            case ExtrapolationType.CONSTANT:
                if 0.0 <= time < length:
                    return self.source.sample(u, v, time, res)
                return self.constant
            case ExtrapolationType.EXTEND:
                clamped = min(max(time, 0.0), length - _TIME_EPSILON)
                return self.source.sample(u, v, clamped, res)
            case ExtrapolationType.REPEAT:
                return self.source.sample(u, v, math.fmod(time, length), res)
            case ExtrapolationType.REFLECT:
                cycles = math.floor(time / length)
                if int(cycles) % 2 == 0:
                    reflected = time - cycles * length
                else:
                    reflected = length - time + cycles * length
                return self.source.sample(u, v, reflected, res)
        raise ValueError(f"unknown extrapolation type {self.extrapolation_type!r}")


@dataclass
class RgbTransform(Render):
    """Samples each colour channel of ``source`` at its own transformed position."""

    source: Render
    transformer: Callable[[float, float, float, Res], tuple[Uvt, Uvt, Uvt]]

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        red_at, green_at, blue_at = self.transformer(u, v, time, res)
        r = self.source.sample(*red_at, res).r
        g = self.source.sample(*green_at, res).g
        b = self.source.sample(*blue_at, res).b
        return Rgba(r, g, b, 1.0)

    def duration(self) -> float:
        return self.source.duration()