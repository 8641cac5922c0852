import math

import pytest

from kantera.pixel import Rgba
from kantera.render import RenderOpt
from kantera.renders.basic import Clip, Plain, Sample
from kantera.renders.sequencing import Sequence, Sequencer

RES = (1, 1)
A = Rgba(0.2, 0.4, 0.6, 1.0)
B = Rgba(0.7, 0.1, 0.3, 1.0)
C = Rgba(0.5, 0.5, 0.9, 1.0)
CLEAR = Rgba(0.0, 0.0, 0.0, 0.0)


def clock():
    return Sample(lambda u, v, t, res: t)


def test_sequence_picks_page_by_time():
    seq = Sequence().append(0.0, False, Plain(A)).append(1.0, False, Plain(B))
    assert seq.sample(0.0, 0.0, 0.5, RES) == A
    assert seq.sample(0.0, 0.0, 1.5, RES) == B


def test_sequence_before_first_page_is_default():
    seq = Sequence(default=CLEAR).append(1.0, False, Plain(A))
    assert seq.sample(0.0, 0.0, 0.5, RES) == CLEAR


def test_sequence_restart_resets_time():
    restarted = Sequence(default=-1.0).append(0.0, False, clock()).append(1.0, True, clock())
    continued = Sequence(default=-1.0).append(0.0, False, clock()).append(1.0, False, clock())
    assert restarted.sample(0.0, 0.0, 1.5, RES) == pytest.approx(0.5)
    assert continued.sample(0.0, 0.0, 1.5, RES) == pytest.approx(1.5)


@pytest.mark.parametrize("frames", [range(12), range(3, 9), range(10, 14)])
def test_sequence_render_matches_samples(frames):
    seq = (
        Sequence(default=CLEAR)
        .append(0.5, False, Plain(A))
        .append(1.0, True, Plain(B))
        .append(2.5, False, Plain(C))
    )
    ro = RenderOpt(range(2), range(1), 2, 1, frames, 4)
    expected = [seq.sample(x / 2, 0.0, f / 4, (2, 1)) for f in frames for x in range(2)]
    assert seq.render(ro) == expected


def test_sequence_render_restart_times():
    seq = Sequence(default=-1.0).append(0.0, False, clock()).append(1.0, True, clock())
    ro = RenderOpt(range(1), range(1), 1, 1, range(8), 4)
    expected = [seq.sample(0.0, 0.0, f / 4, RES) for f in range(8)]
    assert seq.render(ro) == pytest.approx(expected)


def test_sequencer_places_clip_at_start_time():
    seq = Sequencer(CLEAR).append(1.0, 0, Plain(A))
    ro = RenderOpt(range(1), range(1), 1, 1, range(4), 2)
    assert seq.render(ro) == [CLEAR, CLEAR, A, A]


def test_sequencer_finite_clip_ends():
    seq = Sequencer(CLEAR).append(0.0, 0, Clip(Plain(A), 0.0, 1.0))
    ro = RenderOpt(range(1), range(1), 1, 1, range(4), 2)
    assert seq.render(ro) == [A, A, CLEAR, CLEAR]


def test_sequencer_higher_layer_drawn_last():
    seq = Sequencer(CLEAR).append(0.0, 1, Plain(A)).append(0.0, 0, Plain(B))
    assert [clip[1] for clip in seq.clips] == [0, 1]
    ro = RenderOpt(range(2), range(1), 2, 1, range(2), 1)
    assert seq.render(ro) == [A] * 4


def test_sequencer_orders_same_layer_by_time():
    seq = Sequencer(CLEAR).append(2.0, 0, Plain(A)).append(1.0, 0, Plain(B))
    assert [clip[0] for clip in seq.clips] == [1.0, 2.0]


def test_sequencer_cannot_sample():
    with pytest.raises(TypeError):
        Sequencer(CLEAR).sample(0.0, 0.0, 0.0, RES)


def test_sequencer_duration():
    assert Sequencer(CLEAR).duration() == 0.0
    finite = Sequencer(CLEAR).append(1.0, 0, Clip(Plain(A), 0.0, 2.0))
    assert finite.duration() == 3.0
    assert math.isinf(finite.append(0.0, 0, Plain(B)).duration())