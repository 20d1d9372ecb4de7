"""
Plot State (Data Model)
=======================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the points, the active mode and the current
   viewport in one place. One instance is created at startup and passed to
   the window explicitly.
2. Commands: The view never touches the store or the geometry directly; every
   user action maps to one method here.
3. Decoupling: The view reads reports and geometry from this object and
   knows nothing about how they are computed.

Classes:
    PlotState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import List, Optional, TYPE_CHECKING

from minkowskiplot import config
from minkowskiplot.model.curves import CurveGenerator
from minkowskiplot.model.geometry_primitives import Point, Polyline
from minkowskiplot.model.geometry_utils import circle_to_polyline
from minkowskiplot.model.invariants import (
    DisplayInfo, DistanceReport, IntervalReport, NoPoints,
    coordinate_table, interval, invariant_table,
)
from minkowskiplot.model.mapping import CoordinateMapper, Mode, Viewport
from minkowskiplot.model.points import NearestResult, PointStore

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _require_finite(x: float, y: float) -> Point:
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Screen coordinates must be finite, got ({x}, {y}).")
    return Point(float(x), float(y))


def _initial_store() -> PointStore:
    return PointStore([Point(x, y) for x, y in config.INITIAL_POINTS])


@dataclass
class PlotState:
    """
    Holds the entire state of the canvas.
    Pass this instance to the window.
    """
    mode: Mode = Mode.EUCLIDEAN
    viewport: Viewport = field(default_factory=lambda: Viewport(*config.DEFAULT_VIEWPORT))
    points: PointStore = field(default_factory=_initial_store)
    show_circles: bool = False
    circle_radius: float = config.CIRCLE_RADIUS
    curves: CurveGenerator = field(default_factory=CurveGenerator)

    # last pointer position passed to `query_nearest`, None until the pointer moves
    last_query: Optional[Point] = None

    def __post_init__(self) -> None:
        self._mapper = CoordinateMapper(self.viewport, Mode.MINKOWSKI)
        self._nearest: Optional[NearestResult] = None

    # ------------------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------------------

    def get_mode(self) -> Mode:
        return self.mode

    def set_mode(self, mode: Mode) -> None:
        if not isinstance(mode, Mode):
            raise TypeError(f"Expected Mode, got {type(mode).__name__}.")
        if mode is not self.mode:
            self.mode = mode
            logger.info(f"Mode switched to {mode.value}")

    def toggle_mode(self) -> Mode:
        self.set_mode(self.mode.toggled())
        return self.mode

    # ------------------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------------------

    @property
    def mapper(self) -> CoordinateMapper:
        """Mapper from screen to Minkowski coordinates for the current viewport."""
        return self._mapper

    def on_viewport_resize(self, width: float, height: float) -> None:
        viewport = Viewport(float(width), float(height))
        if viewport == self.viewport:
            return
        self.viewport = viewport
        self._mapper = CoordinateMapper(viewport, Mode.MINKOWSKI)
        self.curves.invalidate()
        logger.debug(f"Viewport resized to {viewport.width:g}x{viewport.height:g}")

    # ------------------------------------------------------------------------------
    # Points
    # ------------------------------------------------------------------------------

    def add_point_at(self, x: float, y: float) -> Point:
        point = _require_finite(x, y)
        self.points.add(point)
        self._refresh_nearest()
        return point

    def remove_nearest_at(self, x: float, y: float, threshold_px: float = config.REMOVE_THRESHOLD_PX) -> bool:
        query = _require_finite(x, y)
        removed = self.points.remove_nearest_within(query, threshold_px)
        if removed:
            self.last_query = None
            self._nearest = None
        return removed

    def discard_point(self, point: Point) -> bool:
        """Drop one specific stored point, e.g. the one placed by the first half of a double-click."""
        discarded = self.points.discard(point)
        if discarded:
            self._refresh_nearest()
        return discarded

    def clear_all(self) -> None:
        self.points.clear()
        self.last_query = None
        self._nearest = None
        logger.info("All points cleared.")

    def nearest_point(self) -> Optional[Point]:
        """The point currently highlighted as nearest to the pointer."""
        return self._nearest.point if self._nearest else None

    def _refresh_nearest(self) -> None:
        self._nearest = self.points.nearest(self.last_query) if self.last_query is not None else None

    # ------------------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------------------

    def query_nearest(self, x: Optional[float] = None, y: Optional[float] = None) -> DisplayInfo:
        """
        Report on the point nearest to (x, y), or on all points when no query
        position is given.
        """
        if x is None or y is None:
            self.last_query = None
            self._nearest = None
            return self._full_table()

        self.last_query = _require_finite(x, y)
        self._refresh_nearest()
        return self._single_report()

    def current_report(self) -> DisplayInfo:
        """Re-evaluate the last pointer query under the current mode and points."""
        if self.last_query is None:
            return self._full_table()
        self._refresh_nearest()
        return self._single_report()

    def _single_report(self) -> DisplayInfo:
        hit = self._nearest
        if hit is None:
            return NoPoints()
        if self.mode is Mode.MINKOWSKI:
            return IntervalReport(index=hit.index + 1, interval=interval(hit.point, self._mapper))
        return DistanceReport(index=hit.index + 1, point=hit.point, distance=hit.distance)

    def _full_table(self) -> DisplayInfo:
        if not len(self.points):
            return NoPoints()
        if self.mode is Mode.MINKOWSKI:
            return invariant_table(list(self.points), self._mapper)
        return coordinate_table(list(self.points))

    # ------------------------------------------------------------------------------
    # Geometry for the renderer
    # ------------------------------------------------------------------------------

    def get_hyperbola_geometry(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None
    ) -> List[Polyline]:
        """
        Hyperbola polylines in relative (x, t) coordinates.

        An explicit size only selects the sampling extent. The stored viewport
        and the mapper origin stay as they are.
        """
        if width is not None and height is not None:
            return self.curves.generate(Viewport(float(width), float(height)))
        return self.curves.generate(self.viewport)

    def set_show_circles(self, flag: bool) -> None:
        self.show_circles = bool(flag)

    def circle_polylines(self) -> List[npt.NDArray[np.float64]]:
        """Screen-space rings around every point, empty when circles are off."""
        if not self.show_circles:
            return []
        return [circle_to_polyline(p, self.circle_radius, config.CIRCLE_SEGMENTS) for p in self.points]

