import numpy as np
import pytest

from minkowskiplot.model.geometry_primitives import Point
from minkowskiplot.model.geometry_utils import (
    circle_to_polyline, ellipse_to_polyline, grid_positions, light_cone_lines,
)
from minkowskiplot.model.mapping import Viewport


def test_circle_is_closed_ring():
    ring = circle_to_polyline(Point(10, 20), 5, 36)
    assert ring.shape == (37, 2)
    np.testing.assert_allclose(ring[0], ring[-1])
    np.testing.assert_allclose(np.hypot(ring[:, 0] - 10, ring[:, 1] - 20), 5)


def test_ellipse_semi_axes():
    ring = ellipse_to_polyline(Point(0, 0), 4, 2, 4)
    np.testing.assert_allclose(ring[:4], [[4, 0], [0, 2], [-4, 0], [0, -2]], atol=1e-12)


def test_ellipse_rejects_too_few_segments():
    with pytest.raises(ValueError):
        ellipse_to_polyline(Point(0, 0), 1, 1, 2)


def test_light_cone_is_clipped_to_the_shorter_half_extent():
    first, second = light_cone_lines(Viewport(800, 600))
    np.testing.assert_array_equal(first, [[-300, -300], [300, 300]])
    np.testing.assert_array_equal(second, [[-300, 300], [300, -300]])


def test_grid_positions():
    xs = grid_positions(-400, 400, 40)
    assert len(xs) == 21
    assert xs[0] == -400 and xs[-1] == 400
    assert grid_positions(0, 30, 40).tolist() == [0]
    assert grid_positions(1, 30, 40).size == 0


def test_grid_positions_rejects_bad_spacing():
    with pytest.raises(ValueError):
        grid_positions(0, 10, 0)
