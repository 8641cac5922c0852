"""Layer stacking with replace or alpha-blend modes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from kantera.pixel import Rgba
from kantera.render import Render, RenderOpt, Res
from kantera.timed import value_at


@dataclass(frozen=True)
class CompositeMode:
    """How a layer meets the layers below it.

    With ``blend`` false the layer replaces what is below; otherwise it is
    blended over it with ``alpha``, a plain or timed value.
    """

    blend: bool = False
    alpha: Any = 1.0


def _composite(base: list[Rgba], values: list[Rgba], time: float, mode: CompositeMode) -> list[Rgba]:
    if not mode.blend:
        return list(values)
    alpha = value_at(mode.alpha, time)
    return [below.normal_blend(above, alpha) for below, above in zip(base, values)]


@dataclass
class Composite(Render):
    """Stacks ``layers`` of ``(render, mode)`` from bottom to top over opaque black."""

    layers: list[tuple[Render, CompositeMode]] = field(default_factory=list)

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        values = [Rgba()]
        for source, mode in self.layers:
            values = _composite(values, [source.sample(u, v, time, res)], time, mode)
        return values[0]

    def render(self, ro: RenderOpt) -> list[Rgba]:
        size = ro.frame_size
        pixels = [Rgba()] * (len(ro.frame_range) * size)
        for source, mode in self.layers:
            layer = source.render(ro)
            stacked: list[Rgba] = []
            for i, f in enumerate(ro.frame_range):
                chunk = slice(i * size, (i + 1) * size)
                stacked.extend(_composite(pixels[chunk], layer[chunk], f / ro.framerate, mode))
            pixels = stacked
        return pixels

    def duration(self) -> float:
        return min((source.duration() for source, _ in self.layers), default=math.inf)