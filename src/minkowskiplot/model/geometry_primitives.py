"""
Geometric Primitives for the plotting canvas.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A user-placed point in screen-pixel space (y grows downward)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Event:
    """
    A point in Minkowski coordinates relative to the viewport centre.
    `t` grows upward, `x` grows to the right.
    """
    x: float
    t: float


class Branch(Enum):
    """The four branches of the hyperbola t^2 - x^2 = +-s^2."""
    TIMELIKE_FUTURE = "timelike+"
    TIMELIKE_PAST = "timelike-"
    SPACELIKE_RIGHT = "spacelike+"
    SPACELIKE_LEFT = "spacelike-"

    @property
    def is_timelike(self) -> bool:
        return self in (Branch.TIMELIKE_FUTURE, Branch.TIMELIKE_PAST)


@dataclass(frozen=True, eq=False)
class Polyline:
    """
    One connected run of curve samples.

    `points` is an (N, 2) array of (x, t) in relative coordinates.
    """
    branch: Branch
    magnitude: float
    points: npt.NDArray[np.float64]

    @property
    def xs(self) -> npt.NDArray[np.float64]:
        return self.points[:, 0]

    @property
    def ts(self) -> npt.NDArray[np.float64]:
        return self.points[:, 1]
