"""Box blur and convolution filters."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from kantera.pixel import Rgba
from kantera.render import Render, RenderOpt, Res
from kantera.timed import value_at

_Channels = tuple[float, ...]


def _box_blur(line: list[_Channels], margin: int, radius: int, count: int) -> list[_Channels]:
    """Replace the first ``count`` places with the mean of a window centred ``margin`` places on."""
    n = 2 * radius + 1
    acc = [sum(channel) for channel in zip(*line[margin - radius:margin + radius + 1])]
    result = list(line)
    for x in range(margin, margin + count):
        left = line[x - radius]
        result[x - margin] = tuple(a / n for a in acc)
        if x + radius + 1 < len(line):
            right = line[x + radius + 1]
            acc = [a + (r - l) for a, r, l in zip(acc, right, left)]
    return result


def _radius(size: float, limit: int) -> int:
    amount = abs(size)
    if math.isnan(amount):
        return 0
    if amount >= limit:
        return limit
    return min(math.floor(amount + 0.5), limit)


def _expanded(ro: RenderOpt, dx: int, dy: int, frame: int) -> RenderOpt:
    return replace(
        ro,
        x_range=range(ro.x_range.start - dx, ro.x_range.stop + dx),
        y_range=range(ro.y_range.start - dy, ro.y_range.stop + dy),
        frame_range=range(frame, frame + 1),
    )


@dataclass
class Bokeh(Render):
    """Box-blurs ``source`` with a timed radius in pixels, at most ``max_size``."""

    source: Render
    max_size: int
    size: Any

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        raise TypeError("Bokeh works on whole frames and cannot sample")

    def render(self, ro: RenderOpt) -> list[Rgba]:
        margin = self.max_size
        x_size, y_size = len(ro.x_range), len(ro.y_range)
        width = x_size + 2 * margin
        pixels: list[Rgba] = []
        for f in ro.frame_range:
            flat = [tuple(p) for p in self.source.render(_expanded(ro, margin, margin, f))]
            rows = [flat[y * width:(y + 1) * width] for y in range(y_size + 2 * margin)]
            radius = _radius(value_at(self.size, f / ro.framerate), margin)
            rows = [_box_blur(row, margin, radius, x_size) for row in rows]
            columns = [
                _box_blur([row[x] for row in rows], margin, radius, y_size)
                for x in range(x_size)
            ]
            pixels.extend(Rgba(*columns[x][y]) for y in range(y_size) for x in range(x_size))
        return pixels

    def duration(self) -> float:
        return self.source.duration()


@dataclass
class Kernel:
    """A convolution kernel of per-channel weights, stored row by row."""

    width: int
    height: int
    pixels: list[Rgba]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"kernel of {self.width}x{self.height} needs {self.width * self.height} "
                f"weights, got {len(self.pixels)}"
            )


@dataclass
class Filter(Render):
    """Convolves ``source`` with an odd-sized ``kernel``."""

    source: Render
    kernel: Kernel

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        raise TypeError("Filter works on whole frames and cannot sample")

    def render(self, ro: RenderOpt) -> list[Rgba]:
        kernel = self.kernel
        if kernel.width % 2 != 1 or kernel.height % 2 != 1:
            raise ValueError("filter kernel must have odd width and height")
        x_size, y_size = len(ro.x_range), len(ro.y_range)
        stride = x_size + kernel.width - 1
        weights = [
            [tuple(p) for p in kernel.pixels[y * kernel.width:(y + 1) * kernel.width]]
            for y in range(kernel.height)
        ]
        pixels: list[Rgba] = []
        for f in ro.frame_range:
            inner = _expanded(ro, kernel.width // 2, kernel.height // 2, f)
            flat = [tuple(p) for p in self.source.render(inner)]
            rows = [flat[y * stride:(y + 1) * stride] for y in range(y_size + kernel.height - 1)]
            for y in range(y_size):
                for x in range(x_size):
                    acc = [0.0, 0.0, 0.0, 0.0]
                    for weight_row, row in zip(weights, rows[y:y + kernel.height]):
                        for weight, pixel in zip(weight_row, row[x:x + kernel.width]):
                            acc = [a + p * w for a, p, w in zip(acc, pixel, weight)]
                    pixels.append(Rgba(*acc))
        return pixels

    def duration(self) -> float:
        return self.source.duration()


def make_gaussian_filter(w: int, h: int, d: float) -> Kernel:
    """A Gaussian kernel of ``(2w+1) x (2h+1)`` with standard deviation ``d``."""
    width, height = 2 * w + 1, 2 * h + 1
    dd = 2.0 * d ** 2
    ddpi = math.pi * dd
    pixels = []
    for y in range(height):
        fy = float(y - h)
        for x in range(width):
            fx = float(x - w)
            value = math.exp(-(fx ** 2 + fy ** 2) / dd) / ddpi
            pixels.append(Rgba(value, value, value, value))
    return Kernel(width, height, pixels)