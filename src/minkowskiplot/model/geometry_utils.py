from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from minkowskiplot.model.geometry_primitives import Point
from minkowskiplot.model.mapping import Viewport

if TYPE_CHECKING:
    from numpy import typing as npt


def circle_to_polyline(
    center: Point,
    radius: float,
    n_segments: int
) -> np.ndarray:
    """
    Discretize a circle in XY into an (N,2) polyline (closed).

    Args:
        center: Center of the circle.
        radius: Radius of the circle.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n, 2) containing the (x, y) coordinates of the points along the circle.
    """
    return ellipse_to_polyline(center, radius, radius, n_segments)


def ellipse_to_polyline(
    center: Point,
    a: float,
    b: float,
    n_segments: int
) -> np.ndarray:
    """
    Discretize an ellipse in XY into an (N,2) polyline (closed).

    Args:
        center: Center of the ellipse.
        a: Semi-axis along x.
        b: Semi-axis along y.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n, 2) containing the (x, y) coordinates of the points along the ellipse.

    Raises:
        ValueError: If fewer than 3 segments are requested.
    """
    if n_segments < 3:
        raise ValueError(f"Need at least 3 segments, got {n_segments}.")
    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[center.x + a * np.cos(theta), center.y + b * np.sin(theta)]

    # close the ring
    if not np.allclose(pts[0], pts[-1]):
        pts = np.vstack((pts, pts[0]))

    return pts


def light_cone_lines(viewport: Viewport) -> list[npt.NDArray[np.float64]]:
    """
    The two light-cone diagonals x = t and x = -t clipped to the viewport,
    in relative (x, t) coordinates.
    """
    r = min(viewport.cx, viewport.cy)
    return [
        np.array([[-r, -r], [r, r]], dtype=np.float64),
        np.array([[-r, r], [r, -r]], dtype=np.float64),
    ]


def grid_positions(start: float, stop: float, spacing: float) -> npt.NDArray[np.float64]:
    """
    Multiples of `spacing` within [start, stop].

    Raises:
        ValueError: If spacing is not positive.
    """
    if spacing <= 0:
        raise ValueError(f"Grid spacing must be positive, got {spacing}.")
    first = np.ceil(start / spacing)
    last = np.floor(stop / spacing)
    if last < first:
        return np.empty(0, dtype=np.float64)
    return np.arange(first, last + 1) * spacing
