import math

import pytest

from kantera.pixel import Rgba
from kantera.render import Dummy, Render, RenderOpt


class Probe(Render):
    def sample(self, u, v, time, res):
        return (u, v, time, res)


def _opt(frames=range(0, 3)):
    return RenderOpt(
        x_range=range(0, 2),
        y_range=range(0, 2),
        res_x=2,
        res_y=2,
        frame_range=frames,
        framerate=10,
    )


def test_render_covers_every_pixel_of_every_frame():
    ro = _opt()
    pixels = Probe().render(ro)
    assert len(pixels) == len(ro.frame_range) * ro.frame_size


def test_render_orders_x_fastest_then_y_then_frame():
    ro = _opt()
    pixels = Probe().render(ro)
    assert pixels[0] == (0.0, 0.0, 0.0, (2, 2))
    assert pixels[1][0] > pixels[0][0]
    assert pixels[1][1] == pixels[0][1]
    assert pixels[2][1] > pixels[0][1]
    assert pixels[4][2] > pixels[0][2]
    assert pixels[4][:2] == pixels[0][:2]


def test_render_with_empty_frame_range_is_empty():
    assert Probe().render(_opt(range(0, 0))) == []


def test_default_duration_is_unbounded():
    assert Probe().duration() == math.inf
    assert Dummy().duration() == math.inf


def test_dummy_sample_with_zero_saturation_is_grey():
    pixel = Dummy().sample(0.0, 0.3, 0.0, (4, 4))
    assert pixel == Rgba(0.3, 0.3, 0.3, 1.0)


def test_dummy_render_matches_sample():
    ro = RenderOpt(range(1, 4), range(0, 3), 4, 4, range(2, 4), 5)
    dummy = Dummy()
    pixels = dummy.render(ro)
    expected = [
        dummy.sample(x / ro.res_x, y / ro.res_y, f / ro.framerate, ro.res)
        for f in ro.frame_range
        for y in ro.y_range
        for x in ro.x_range
    ]
    assert len(pixels) == len(expected)
    for got, want in zip(pixels, expected):
        assert tuple(got) == pytest.approx(tuple(want))


def test_dummy_pixels_are_opaque():
    ro = _opt()
    assert all(pixel.a == 1.0 for pixel in Dummy().render(ro))