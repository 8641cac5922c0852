"""Chroma subsampling simulation in YPbPr space."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kantera.pixel import Rgba
from kantera.render import Render, RenderOpt, Res


class ColorSamplingType(Enum):
    """Chroma subsampling schemes."""

    T444 = "t444"  # 1x1
    T422 = "t422"  # 2x1
    T420 = "t420"  # 2x2
    T411 = "t411"  # 4x1


def rgb_to_ypbpr(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB to luma and the two colour-difference components."""
    y = 0.299 * r + 0.587 * g + 0.114 * b
    pb = 0.5 * (b - y) / (1.0 - 0.114)
    pr = 0.5 * (r - y) / (1.0 - 0.299)
    return (y, pb, pr)


def ypbpr_to_rgb(y: float, pb: float, pr: float) -> tuple[float, float, float]:
    """Convert luma and colour differences back to RGB."""
    r = pr * (1.0 - 0.299) * 2.0 + y
    b = pb * (1.0 - 0.114) * 2.0 + y
    g = (y - 0.299 * r - 0.114 * b) / 0.587
    return (r, g, b)


def _ypbpr(pixel: Rgba) -> tuple[float, float, float]:
    return rgb_to_ypbpr(pixel.r, pixel.g, pixel.b)


def _rgba(y: float, pb: float, pr: float) -> Rgba:
    return Rgba(*ypbpr_to_rgb(y, pb, pr), 1.0)


def _share_in_row(row: list[Rgba], group: int) -> None:
    for start in range(0, group * (len(row) // group), group):
        _, pb, pr = _ypbpr(row[start])
        lumas = [_ypbpr(p)[0] for p in row[start:start + group]]
        row[start:start + group] = [_rgba(y, pb, pr) for y in lumas]


def _share_in_blocks(rows: list[list[Rgba]]) -> None:
    for top, bottom in zip(rows[0::2], rows[1::2]):
        for x in range(0, 2 * (len(top) // 2), 2):
            q1, q2 = _ypbpr(top[x]), _ypbpr(top[x + 1])
            q3, q4 = _ypbpr(bottom[x]), _ypbpr(bottom[x + 1])
            pb, pr = q1[1], q3[2]
            top[x] = _rgba(q1[0], pb, pr)
            top[x + 1] = _rgba(q2[0], pb, pr)
            # The lower-left pixel keeps its source value.
            bottom[x + 1] = _rgba(q4[0], pb, pr)


@dataclass
class ColorSampling(Render):
    """Re-encodes ``source`` with the chroma resolution of ``sampling_type``."""

    source: Render
    sampling_type: ColorSamplingType

    def sample(self, u: float, v: float, time: float, res: Res) -> Rgba:
        raise TypeError("ColorSampling works on whole frames and cannot sample")

    def _resample(self, rows: list[list[Rgba]]) -> None:
        match self.sampling_type:
            case ColorSamplingType.T444:
                for row in rows:
                    _share_in_row(row, 1)
            case ColorSamplingType.T422:
                for row in rows:
                    _share_in_row(row, 2)
            case ColorSamplingType.T411:
                for row in rows:
                    _share_in_row(row, 4)
            case ColorSamplingType.T420:
                _share_in_blocks(rows)

    def render(self, ro: RenderOpt) -> list[Rgba]:
        pixels = self.source.render(ro)
        x_size = len(ro.x_range)
        frame_size = ro.frame_size
        if frame_size == 0:
            return list(pixels)
        out: list[Rgba] = []
        for start in range(0, len(ro.frame_range) * frame_size, frame_size):
            rows = [list(pixels[i:i + x_size]) for i in range(start, start + frame_size, x_size)]
            self._resample(rows)
            for row in rows:
                out.extend(row)
        return out

    def duration(self) -> float:
        return self.source.duration()