"""The rendering interface shared by every video source."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from kantera.pixel import Rgba
from kantera.util import hsl_to_rgb

Res = tuple[int, int]


@dataclass(frozen=True)
class RenderOpt:
    """Which pixels and frames to render, and at what full resolution."""

    x_range: range
    y_range: range
    res_x: int
    res_y: int
    frame_range: range
    framerate: int

    @property
    def res(self) -> Res:
        """The full resolution as ``(res_x, res_y)``."""
        return (self.res_x, self.res_y)

    @property
    def frame_size(self) -> int:
        """Number of pixels rendered per frame."""
        return len(self.x_range) * len(self.y_range)


class Render(ABC):
    """A source of pixels over space and time."""

    @abstractmethod
    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        """Return the pixel at normalised position ``(u, v)`` at ``time``."""

    def render(self, ro: RenderOpt) -> list[Any]:
        """Render the requested region, frame by frame, row by row."""
        res = ro.res
        return [
            self.sample(x / ro.res_x, y / ro.res_y, f / ro.framerate, res)
            for f in ro.frame_range
            for y in ro.y_range
            for x in ro.x_range
        ]

    def duration(self) -> float:
        """Length in seconds; unbounded unless a source says otherwise."""
        return math.inf


class Dummy(Render):
    """A test pattern whose hue cycles over time."""

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        r, g, b = hsl_to_rgb(time * 0.3, u, v)
        return Rgba(r, g, b, 1.0)

    def render(self, ro: RenderOpt) -> list[Rgba]:
        return [
            Rgba(*hsl_to_rgb(f * 0.3 / ro.framerate, x / ro.res_x, y / ro.res_y), 1.0)
            for f in ro.frame_range
            for y in ro.y_range
            for x in ro.x_range
        ]