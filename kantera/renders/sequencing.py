"""Renders that place other renders one after another in time."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from kantera.pixel import Rgba
from kantera.render import Render, RenderOpt, Res

_LARGE_TIME = 100000.0


@dataclass
class Sequence(Render):
    """Pages shown back to back; each runs until the next one starts.

    A page that restarts sees time counted from its own start; otherwise
    time continues from the last restarting page.
    """

    default: Any = field(default_factory=Rgba)
    pages: list[tuple[float, bool, Render]] = field(default_factory=list)

    def append(self, time: float, restart: bool, render: Render) -> "Sequence":
        """Add a page starting at ``time`` seconds; returns the sequence."""
        self.pages.append((time, restart, render))
        return self

    def _spans(self) -> Iterator[tuple[tuple[float, bool, Render], float]]:
        ends = [page[0] for page in self.pages[1:]] + [_LARGE_TIME]
        return zip(self.pages, ends)

    def sample(self, u: float, v: float, time: float, res: Res) -> Any:
        offset = 0.0
        for (start, restart, source), end in self._spans():
            if restart:
                offset = start
            if start <= time < end:
                return source.sample(u, v, time - offset, res)
        return self.default

    def render(self, ro: RenderOpt) -> list[Any]:
        size = ro.frame_size
        first = ro.frame_range.start
        pixels = [self.default] * (len(ro.frame_range) * size)
        offset = 0
        for (start, restart, source), end in self._spans():
            if restart:
                offset = int(start * ro.framerate)
            left = max(first, math.floor(start * ro.framerate))
            right = min(ro.frame_range.stop, math.floor(end * ro.framerate))
            if left >= right:
                continue
            frames = source.render(replace(ro, frame_range=range(left - offset, right - offset)))
            pixels[(left - first) * size:(right - first) * size] = frames
        return pixels


@dataclass
class Sequencer(Render):
    """Clips placed at start times and layers, blended over ``default``.

    Clips are drawn in order of layer ``z``, then start time.
    """

    default: Rgba
    clips: list[tuple[float, int, Render]] = field(default_factory=list)

    def append(self, time: float, z: int, render: Render) -> "Sequencer":
        """Add a clip starting at ``time`` on layer ``z``; returns the sequencer."""
        self.clips.append((time, z, render))
        self.clips.sort(key=lambda clip: (clip[1], clip[0]))
        return self

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        raise TypeError("Sequencer works on whole frames and cannot sample")

    def render(self, ro: RenderOpt) -> list[Rgba]:
        size = ro.frame_size
        pixels = [self.default] * (len(ro.frame_range) * size)
        for start, _, source in self.clips:
            shift = int(start * ro.framerate)
            start_frame = ro.frame_range.start - shift
            stop = ro.frame_range.stop - shift
            length = source.duration()
            if not math.isinf(length):
                stop = min(stop, int(length * ro.framerate))
            frames = range(max(start_frame, 0), stop)
            if not frames:
                continue
            layer = source.render(replace(ro, frame_range=frames))[:len(frames) * size]
            offset = (frames.start - start_frame) * size
            span = slice(offset, offset + len(layer))
            pixels[span] = [below.normal_blend(above, 1.0) for below, above in zip(pixels[span], layer)]
        return pixels

    def duration(self) -> float:
        return max([0.0, *(start + source.duration() for start, _, source in self.clips)])