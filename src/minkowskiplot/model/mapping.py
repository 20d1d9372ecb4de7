"""
Coordinate Mapping
==================
Converts between canvas pixels and the mode-relative coordinate system.

Euclidean mode uses the screen coordinates as they are. Minkowski mode puts
the origin at the viewport centre and flips the vertical axis so that `t`
grows upward while screen `y` grows downward:

    (x_rel, t) = (x - cx, -(y - cy))

A mapper is bound to one viewport; build a new one whenever the canvas is
resized.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from minkowskiplot.model.geometry_primitives import Event, Point

if TYPE_CHECKING:
    import numpy.typing as npt


class Mode(Enum):
    """Active interpretation of the canvas."""
    EUCLIDEAN = "euclid"
    MINKOWSKI = "minkowski"

    def toggled(self) -> Mode:
        return Mode.MINKOWSKI if self is Mode.EUCLIDEAN else Mode.EUCLIDEAN


@dataclass(frozen=True)
class Viewport:
    """Size of the drawable area in pixels."""
    width: float
    height: float

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Viewport {name} must be a positive finite number, got {value}.")

    @property
    def cx(self) -> float:
        return self.width / 2

    @property
    def cy(self) -> float:
        return self.height / 2

    @property
    def center(self) -> Point:
        return Point(self.cx, self.cy)


class CoordinateMapper:
    def __init__(self, viewport: Viewport, mode: Mode = Mode.MINKOWSKI) -> None:
        self.viewport = viewport
        self.mode = mode

    def to_relative(self, point: Point) -> Event:
        if self.mode is Mode.EUCLIDEAN:
            return Event(point.x, point.y)
        return Event(point.x - self.viewport.cx, -(point.y - self.viewport.cy))

    def to_screen(self, event: Event) -> Point:
        if self.mode is Mode.EUCLIDEAN:
            return Point(event.x, event.t)
        return Point(event.x + self.viewport.cx, self.viewport.cy - event.t)

    def to_screen_array(self, xt: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Vectorised `to_screen` for an (N, 2) array of (x, t) pairs.

        Raises:
            ValueError: If the input is not of shape (N, 2).
        """
        arr = np.asarray(xt, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
        if self.mode is Mode.EUCLIDEAN:
            return arr.copy()
        return np.column_stack((arr[:, 0] + self.viewport.cx, self.viewport.cy - arr[:, 1]))
