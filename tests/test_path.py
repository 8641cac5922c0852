import pytest

from kantera.path import Bezier2, Bezier3, Constant, Linear, Path
from kantera.vector import Vec2


def test_source_scalar_path():
    path = Path(0.0).append(1.0, 1.0, Constant()).append(1.0, 2.0, Linear())
    assert path.get_value(-0.5) == 0.0
    assert path.get_value(0.5) == 0.0
    assert path.get_value(1.5) == 1.5
    assert path.get_value(2.5) == 2.0


def test_source_vector_path():
    path = (
        Path(Vec2(0.0, 2.0))
        .append(1.0, Vec2(1.0, 0.0), Constant())
        .append(1.0, Vec2(1.0, 2.0), Linear())
    )
    assert path.get_value(1.5) == Vec2(1.0, 1.0)


def test_negative_delta_rejected():
    with pytest.raises(ValueError):
        Path(0.0).append(-1.0, 1.0, Linear())


def test_times_accumulate():
    path = Path(0.0).append(1.0, 1.0, Linear()).append(2.5, 3.0, Linear())
    assert [p[0] for p in path.points] == [0.0, 1.0, 3.5]


def test_bezier2_with_midpoint_handle_is_linear():
    path = Path(0.0).append(1.0, 2.0, Bezier2(1.0))
    for t in (0.1, 0.4, 0.9):
        assert path.get_value(t) == pytest.approx(2.0 * t)


def test_bezier3_with_third_handles_is_linear():
    path = Path(0.0).append(1.0, 3.0, Bezier3(1.0, 2.0))
    for t in (0.2, 0.5, 0.8):
        assert path.get_value(t) == pytest.approx(3.0 * t)


def test_bezier_starts_at_left_value():
    path = Path(Vec2(1.0, 1.0)).append(1.0, Vec2(5.0, 5.0), Bezier3(Vec2(9.0, 0.0), Vec2(0.0, 9.0)))
    assert path.get_value(0.0) == Vec2(1.0, 1.0)
    assert path.get_value(1.0) == Vec2(5.0, 5.0)