from dataclasses import replace

import pytest

from kantera.pixel import Rgba
from kantera.render import RenderOpt
from kantera.renders.basic import Clip, Plain, Sample
from kantera.renders.blur import Bokeh, Filter, Kernel, make_gaussian_filter

SOURCE = Sample(lambda u, v, t, res: Rgba(u, v, 0.3 + u * v, 1.0))
COLOUR = Rgba(0.2, 0.4, 0.6, 1.0)
RO = RenderOpt(range(4), range(3), 4, 3, range(2), 1)


def test_gaussian_dimensions():
    kernel = make_gaussian_filter(1, 2, 1.0)
    assert (kernel.width, kernel.height) == (3, 5)
    assert len(kernel.pixels) == 15


def test_gaussian_symmetric_and_peaked():
    kernel = make_gaussian_filter(2, 2, 1.0)
    values = [p.r for p in kernel.pixels]
    assert values == values[::-1]
    assert max(values) == values[12]


def test_gaussian_sums_to_about_one():
    kernel = make_gaussian_filter(6, 6, 1.0)
    assert sum(p.a for p in kernel.pixels) == pytest.approx(1.0, abs=1e-4)


def test_kernel_size_mismatch():
    with pytest.raises(ValueError):
        Kernel(3, 3, [COLOUR])


def test_identity_filter_returns_source():
    kernel = Kernel(1, 1, [Rgba(1.0, 1.0, 1.0, 1.0)])
    assert Filter(SOURCE, kernel).render(RO) == SOURCE.render(RO)


def test_offset_kernel_shifts_image():
    zero = Rgba(0.0, 0.0, 0.0, 0.0)
    one = Rgba(1.0, 1.0, 1.0, 1.0)
    kernel = Kernel(3, 3, [zero, zero, zero, zero, zero, one, zero, zero, zero])
    shifted = replace(RO, x_range=range(1, 5))
    assert Filter(SOURCE, kernel).render(RO) == SOURCE.render(shifted)


def test_box_filter_keeps_uniform_colour():
    ninth = 1.0 / 9.0
    kernel = Kernel(3, 3, [Rgba(ninth, ninth, ninth, ninth)] * 9)
    out = Filter(Plain(COLOUR), kernel).render(RO)
    assert len(out) == 24
    for pixel in out:
        assert tuple(pixel) == pytest.approx(tuple(COLOUR))


def test_even_kernel_rejected():
    kernel = Kernel(2, 1, [COLOUR, COLOUR])
    with pytest.raises(ValueError):
        Filter(SOURCE, kernel).render(RO)


def test_bokeh_zero_size_returns_source():
    assert Bokeh(SOURCE, 2, 0.0).render(RO) == SOURCE.render(RO)


def test_bokeh_keeps_uniform_colour():
    out = Bokeh(Plain(COLOUR), 2, 2.0).render(RO)
    assert len(out) == 24
    for pixel in out:
        assert tuple(pixel) == pytest.approx(tuple(COLOUR))


def test_bokeh_size_clamped_to_max():
    assert Bokeh(SOURCE, 2, 10.0).render(RO) == Bokeh(SOURCE, 2, 2.0).render(RO)


def test_bokeh_negative_size_rounds_magnitude():
    assert Bokeh(SOURCE, 3, -1.6).render(RO) == Bokeh(SOURCE, 3, 2.0).render(RO)


def test_blur_cannot_sample():
    with pytest.raises(TypeError):
        Bokeh(SOURCE, 1, 1.0).sample(0.0, 0.0, 0.0, (4, 3))
    with pytest.raises(TypeError):
        Filter(SOURCE, make_gaussian_filter(1, 1, 1.0)).sample(0.0, 0.0, 0.0, (4, 3))


def test_durations_pass_through():
    clip = Clip(SOURCE, 0.0, 3.0)
    assert Bokeh(clip, 1, 1.0).duration() == 3.0
    assert Filter(clip, make_gaussian_filter(1, 1, 1.0)).duration() == 3.0