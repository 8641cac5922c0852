"""Simple renders: clips, constants, callables and per-frame mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Callable

from kantera.render import Render, RenderOpt, Res
from kantera.timed import value_at


@dataclass
class Clip(Render):
    """The part of ``source`` between ``start`` and ``end`` seconds."""

    source: Render
    start: float
    end: float

    def __post_init__(self) -> None:
        if not self.start <= self.end:
            raise ValueError(f"clip start {self.start} is after end {self.end}")

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        return self.source.sample(u, v, time + self.start, res)

    def render(self, ro: RenderOpt) -> list[Any]:
        dframe = int(ro.framerate * self.start)
        shifted = range(ro.frame_range.start + dframe, ro.frame_range.stop + dframe)
        return self.source.render(replace(ro, frame_range=shifted))

    def duration(self) -> float:
        return self.end - self.start


@dataclass
class Plain(Render):
    """Every pixel takes the value of ``timed`` at the current time."""

    timed: Any

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        return value_at(self.timed, time)

    def render(self, ro: RenderOpt) -> list[Any]:
        pixels: list[Any] = []
        for f in ro.frame_range:
            pixels.extend([value_at(self.timed, f / ro.framerate)] * ro.frame_size)
        return pixels


@dataclass
class Sample(Render):
    """A render defined by a function of ``(u, v, time, res)``."""

    f: Callable[[float, float, float, Res], Any]

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        return self.f(u, v, time, res)


def _full_frames(pixels: list[Any], ro: RenderOpt) -> tuple[list[list[Any]], list[Any]]:
    frame_size = ro.res_x * ro.res_y
    count = len(ro.frame_range)
    if count * frame_size > len(pixels):
        raise ValueError("render region is smaller than the full resolution")
    frames = [pixels[i * frame_size:(i + 1) * frame_size] for i in range(count)]
    return frames, pixels[count * frame_size:]


@dataclass
class MapRender(Render):
    """Post-processes whole frames of ``source`` with ``map(res_x, res_y, pixels)``."""

    source: Render
    map: Callable[[int, int, list[Any]], list[Any]]

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        raise TypeError("MapRender works on whole frames and cannot sample")

    def render(self, ro: RenderOpt) -> list[Any]:
        frames, rest = _full_frames(self.source.render(ro), ro)
        pixels: list[Any] = []
        for frame in frames:
            pixels.extend(self.map(ro.res_x, ro.res_y, frame))
        return pixels + rest

    def duration(self) -> float:
        return self.source.duration()


@dataclass
class FunctionalRender(Render):
    """Frames produced by ``f(ro, time)``, each a full-resolution pixel list."""

    f: Callable[[RenderOpt, float], list[Any]]

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        raise TypeError("FunctionalRender produces whole frames and cannot sample")

    def render(self, ro: RenderOpt) -> list[Any]:
        pixels: list[Any] = []
        for f in ro.frame_range:
            pixels.extend(self.f(ro, f / ro.framerate))
        return pixels


@dataclass
class PixelInto(Render):
    """Converts every pixel of ``source`` with ``convert``."""

    source: Render
    convert: Callable[[Any], Any]

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        return self.convert(self.source.sample(u, v, time, res))

    def render(self, ro: RenderOpt) -> list[Any]:
        return [self.convert(pixel) for pixel in self.source.render(ro)]

    def duration(self) -> float:
        return self.source.duration()


__all__ = ["Clip", "Plain", "Sample", "MapRender", "FunctionalRender", "PixelInto", "math"]