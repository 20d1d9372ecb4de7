import numpy as np
import pytest

from minkowskiplot.model.curves import (
    CurveGenerator, contiguous_runs, sample_axis, spacelike_branches, timelike_branches,
)
from minkowskiplot.model.geometry_primitives import Branch
from minkowskiplot.model.mapping import Viewport


def branches_of(polylines, branch, magnitude=None):
    return [
        p for p in polylines
        if p.branch is branch and (magnitude is None or p.magnitude == magnitude)
    ]


def test_sample_axis_covers_both_ends():
    xs = sample_axis(400)
    assert xs[0] == -400
    assert xs[-1] == 400
    assert len(xs) == 801
    assert np.all(np.diff(xs) == 1.0)


def test_sample_axis_never_overshoots_fractional_extent():
    xs = sample_axis(2.25)
    assert xs[0] == -2.25
    assert xs[-1] <= 2.25
    assert len(xs) == 5


def test_sample_axis_rejects_bad_step():
    with pytest.raises(ValueError):
        sample_axis(10, step=0)


def test_contiguous_runs():
    mask = np.array([False, True, True, False, True])
    assert contiguous_runs(mask) == [(1, 3), (4, 5)]
    assert contiguous_runs(np.array([False, False])) == []
    assert contiguous_runs(np.array([True, True])) == [(0, 2)]


def test_timelike_scenario():
    future, past = timelike_branches(40, cx=400)
    assert future.branch is Branch.TIMELIKE_FUTURE
    assert past.branch is Branch.TIMELIKE_PAST

    at_zero = future.ts[future.xs == 0]
    assert at_zero.tolist() == [40.0]
    at_300 = future.ts[future.xs == 300]
    assert at_300[0] == pytest.approx(302.655, abs=1e-3)
    assert np.array_equal(past.ts, -future.ts)


def test_spacelike_branches_split_at_the_gap():
    polylines = spacelike_branches(40, cy=300)
    right = [p for p in polylines if p.branch is Branch.SPACELIKE_RIGHT]
    left = [p for p in polylines if p.branch is Branch.SPACELIKE_LEFT]
    assert len(right) == 2
    assert len(left) == 2

    for p in polylines:
        assert np.all(np.abs(p.ts) >= 40)
        # consecutive samples are one step apart: no segment spans the gap
        assert np.all(np.diff(p.ts) == -1.0)
        np.testing.assert_allclose(p.ts ** 2 - p.xs ** 2, 40 ** 2, rtol=1e-9, atol=1e-6)
    assert all(np.all(p.xs >= 0) for p in right)
    assert all(np.all(p.xs <= 0) for p in left)


def test_spacelike_includes_vertex_on_the_t_axis():
    polylines = spacelike_branches(40, cy=300)
    vertices = sorted(t for p in polylines for x, t in p.points if x == 0)
    assert vertices == [-40, -40, 40, 40]


def test_spacelike_outside_viewport_emits_nothing():
    assert spacelike_branches(220, cy=200) == []


def test_spacelike_samples_start_at_the_top_for_fractional_heights():
    polylines = spacelike_branches(40, cy=100.25)
    ts = np.concatenate([p.ts for p in polylines])
    assert ts.max() == 100.25
    assert ts.min() == -99.75
    assert polylines[0].ts[0] == 100.25


def test_generator_counts_branches():
    gen = CurveGenerator(magnitudes=(40, 80, 140, 220))
    polylines = gen.generate(Viewport(800, 600))
    # 2 timelike + 2 * 2 spacelike runs per magnitude
    assert len(polylines) == 24
    assert len(branches_of(polylines, Branch.TIMELIKE_FUTURE)) == 4
    assert len(branches_of(polylines, Branch.SPACELIKE_LEFT, magnitude=220)) == 2


def test_generator_is_independent_of_anything_but_size():
    a = CurveGenerator().generate(Viewport(640, 480))
    b = CurveGenerator().generate(Viewport(640, 480))
    assert len(a) == len(b)
    for pa, pb in zip(a, b):
        assert pa.branch is pb.branch
        assert np.array_equal(pa.points, pb.points)


def test_generator_caches_per_size():
    gen = CurveGenerator()
    first = gen.generate(Viewport(800, 600))
    assert gen.is_cached
    again = gen.generate(Viewport(800, 600))
    assert all(p is q for p, q in zip(first, again))

    resized = gen.generate(Viewport(400, 300))
    assert resized[0] is not first[0]
    assert resized[0].xs[-1] == 200


def test_generator_invalidate():
    gen = CurveGenerator()
    gen.generate(Viewport(800, 600))
    gen.invalidate()
    assert not gen.is_cached
