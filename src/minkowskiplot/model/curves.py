"""
Hyperbola Family
================
Samples the curves t^2 - x^2 = +-s^2 for a fixed list of magnitudes.

For every magnitude `s` four branches are produced:

    timelike future   x in [-cx, cx],  t = +sqrt(x^2 + s^2)
    timelike past     x in [-cx, cx],  t = -sqrt(x^2 + s^2)
    spacelike right   t in [cy, -cy],  x = +sqrt(t^2 - s^2)   where t^2 >= s^2
    spacelike left    t in [cy, -cy],  x = -sqrt(t^2 - s^2)   where t^2 >= s^2

Spacelike samples inside the light cone are skipped. Each contiguous run of
valid samples becomes its own polyline, so no segment is ever drawn across
the gap.

The output depends only on the viewport size and the magnitude list, so it
is cached per size.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from minkowskiplot import config
from minkowskiplot.model.geometry_primitives import Branch, Polyline
from minkowskiplot.model.mapping import Viewport

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def sample_axis(half_extent: float, step: float = config.SAMPLE_STEP) -> npt.NDArray[np.float64]:
    """
    Samples -half_extent, -half_extent + step, ... up to and including +half_extent.

    The last sample never exceeds +half_extent, also for fractional extents.
    """
    if step <= 0:
        raise ValueError(f"Sampling step must be positive, got {step}.")
    n = int(math.floor(2.0 * half_extent / step)) + 1
    return -half_extent + step * np.arange(max(n, 0), dtype=np.float64)


def contiguous_runs(mask: npt.NDArray[np.bool_]) -> List[Tuple[int, int]]:
    """
    Return the [start, stop) index pairs of every run of True values.

    Example:
        [F, T, T, F, T] -> [(1, 3), (4, 5)]
    """
    padded = np.concatenate(([0], np.asarray(mask, dtype=np.int8), [0]))
    edges = np.flatnonzero(np.diff(padded))
    return [(int(a), int(b)) for a, b in zip(edges[::2], edges[1::2])]


def timelike_branches(magnitude: float, cx: float, step: float = config.SAMPLE_STEP) -> List[Polyline]:
    xs = sample_axis(cx, step)
    if xs.size == 0:
        return []
    ts = np.sqrt(xs * xs + magnitude * magnitude)
    return [
        Polyline(Branch.TIMELIKE_FUTURE, magnitude, np.column_stack((xs, ts))),
        Polyline(Branch.TIMELIKE_PAST, magnitude, np.column_stack((xs, -ts))),
    ]


def spacelike_branches(magnitude: float, cy: float, step: float = config.SAMPLE_STEP) -> List[Polyline]:
    # t runs downward from +cy, i.e. top to bottom of the screen
    ts = -sample_axis(cy, step)
    val = ts * ts - magnitude * magnitude
    valid = val >= 0

    polylines: List[Polyline] = []
    for branch, sign in ((Branch.SPACELIKE_RIGHT, 1.0), (Branch.SPACELIKE_LEFT, -1.0)):
        for start, stop in contiguous_runs(valid):
            seg_t = ts[start:stop]
            seg_x = sign * np.sqrt(val[start:stop])
            polylines.append(Polyline(branch, magnitude, np.column_stack((seg_x, seg_t))))
    return polylines


class CurveGenerator:
    """
    Builds (and caches) the hyperbola overlay for a viewport.
    """
    def __init__(
        self,
        magnitudes: Iterable[float] = config.HYPERBOLA_MAGNITUDES,
        step: float = config.SAMPLE_STEP
    ) -> None:
        self.magnitudes: Tuple[float, ...] = tuple(float(s) for s in magnitudes)
        self.step = step

        # cache
        self._cache_signature: Optional[Tuple[float, float]] = None
        self._cached: List[Polyline] = []

    def generate(self, viewport: Viewport) -> List[Polyline]:
        """Return the polylines for all magnitudes, rebuilding only when the size changed."""
        signature = (viewport.width, viewport.height)
        if signature == self._cache_signature:
            return list(self._cached)

        polylines: List[Polyline] = []
        for s in self.magnitudes:
            polylines.extend(timelike_branches(s, viewport.cx, self.step))
            polylines.extend(spacelike_branches(s, viewport.cy, self.step))

        self._cache_signature = signature
        self._cached = polylines
        logger.debug(
            f"Rebuilt hyperbola cache for {viewport.width:g}x{viewport.height:g}: "
            f"{len(polylines)} polylines"
        )
        return list(polylines)

    def invalidate(self) -> None:
        self._cache_signature = None
        self._cached = []

    @property
    def is_cached(self) -> bool:
        return self._cache_signature is not None
