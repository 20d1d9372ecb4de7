"""
Point Store
===========
Ordered collection of the user-placed points in screen space.

Why is this file needed?
------------------------
1. Ordering: insertion order drives the 1-based index shown to the user.
2. Identity: two clicks on the same pixel are two entries; removal works on
   positions in the sequence, never on value equality.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from minkowskiplot.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


class NearestResult(NamedTuple):
    index: int  # 0-based position in the store
    point: Point
    distance: float


class PointStore:
    def __init__(self, points: Optional[List[Point]] = None) -> None:
        self._points: List[Point] = list(points) if points else []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def add(self, point: Point) -> None:
        self._points.append(point)
        logger.debug(f"Added point #{len(self._points)} at ({point.x:g}, {point.y:g})")

    def nearest(self, query: Point) -> Optional[NearestResult]:
        """
        Linear scan for the point closest to `query`.

        Ties resolve to the earliest inserted point.

        Returns:
            NearestResult or None if the store is empty.
        """
        best: Optional[NearestResult] = None
        for i, p in enumerate(self._points):
            d = p.distance_to(query)
            if best is None or d < best.distance:
                best = NearestResult(i, p, d)
        return best

    def remove_nearest_within(self, query: Point, threshold: float) -> bool:
        """Remove the nearest point if it lies strictly closer than `threshold`."""
        hit = self.nearest(query)
        if hit is None or hit.distance >= threshold:
            return False
        del self._points[hit.index]
        logger.info(f"Removed point #{hit.index + 1} at ({hit.point.x:g}, {hit.point.y:g})")
        return True

    def discard(self, point: Point) -> bool:
        """Remove this exact entry (by identity, not by value)."""
        for i, p in enumerate(self._points):
            if p is point:
                del self._points[i]
                return True
        return False

    def clear(self) -> None:
        self._points.clear()
