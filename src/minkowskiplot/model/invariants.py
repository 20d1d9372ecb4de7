"""
Invariants & Reports
====================
Scalars that describe a point in each mode, and the text reports built on
top of them.

Sign convention for the squared interval relative to the origin:
    s^2 > 0  timelike   (inside the light cone)
    s^2 < 0  spacelike  (outside the light cone)
    s^2 = 0  lightlike  (on x = +-t)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from minkowskiplot import config
from minkowskiplot.model.geometry_primitives import Point
from minkowskiplot.model.mapping import CoordinateMapper


class Separation(Enum):
    TIMELIKE = "timelike"
    SPACELIKE = "spacelike"
    LIGHTLIKE = "lightlike"


@dataclass(frozen=True)
class Interval:
    s2: float
    t: float
    x: float

    @property
    def separation(self) -> Separation:
        return classify(self.s2)


def distance(a: Point, b: Point) -> float:
    return a.distance_to(b)


def interval(point: Point, mapper: CoordinateMapper) -> Interval:
    """Squared interval of `point` relative to the mapper's origin."""
    event = mapper.to_relative(point)
    return Interval(s2=event.t * event.t - event.x * event.x, t=event.t, x=event.x)


def interval_sq(point: Point, mapper: CoordinateMapper) -> float:
    return interval(point, mapper).s2


def classify(s2: float) -> Separation:
    if s2 > 0:
        return Separation.TIMELIKE
    if s2 < 0:
        return Separation.SPACELIKE
    return Separation.LIGHTLIKE


# -------------------------------------------------------------------------------
# Display reports
# -------------------------------------------------------------------------------

class DisplayInfo:
    """Base class of everything the info panel can show."""

    def to_text(self) -> str:
        raise NotImplementedError("`to_text` must be implemented in subclass.")

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class NoPoints(DisplayInfo):
    def to_text(self) -> str:
        return "No points"


@dataclass(frozen=True)
class DistanceReport(DisplayInfo):
    """Nearest point to the pointer in the Euclidean plane."""
    index: int  # 1-based
    point: Point
    distance: float

    def to_text(self) -> str:
        c = config.COORDINATE_DECIMALS
        return (
            f"Nearest point #{self.index}: ({self.point.x:.{c}f}, {self.point.y:.{c}f}), "
            f"distance = {self.distance:.{config.DISTANCE_DECIMALS}f}"
        )


@dataclass(frozen=True)
class IntervalReport(DisplayInfo):
    """Nearest point to the pointer on the spacetime diagram."""
    index: int  # 1-based
    interval: Interval

    def to_text(self) -> str:
        iv = self.interval
        d = config.TABLE_DECIMALS
        return (
            f"Point #{self.index}: s^2 = {iv.s2:.{config.INTERVAL_DECIMALS}f} (t={iv.t:.{d}f}, x={iv.x:.{d}f}), "
            f"{iv.separation.value}"
        )


@dataclass(frozen=True)
class InvariantTable(DisplayInfo):
    """Interval of every stored point, in insertion order."""
    rows: List[Tuple[int, Interval]] = field(default_factory=list)

    HEADER = "Invariant table (s^2 = t^2 - x^2):"

    def to_text(self) -> str:
        d = config.TABLE_DECIMALS
        lines = [self.HEADER]
        for index, iv in self.rows:
            lines.append(f"#{index}: s^2={iv.s2:.{d}f} (t={iv.t:.{d}f}, x={iv.x:.{d}f})")
        return "\n".join(lines)


@dataclass(frozen=True)
class CoordinateTable(DisplayInfo):
    """Screen coordinates of every stored point, in insertion order."""
    rows: List[Tuple[int, Point]] = field(default_factory=list)

    HEADER = "Points (screen coordinates):"

    def to_text(self) -> str:
        c = config.COORDINATE_DECIMALS
        lines = [self.HEADER]
        for index, p in self.rows:
            lines.append(f"#{index}: ({p.x:.{c}f}, {p.y:.{c}f})")
        return "\n".join(lines)


def invariant_table(points: List[Point], mapper: CoordinateMapper) -> InvariantTable:
    return InvariantTable(rows=[(i + 1, interval(p, mapper)) for i, p in enumerate(points)])


def coordinate_table(points: List[Point]) -> CoordinateTable:
    return CoordinateTable(rows=[(i + 1, p) for i, p in enumerate(points)])
