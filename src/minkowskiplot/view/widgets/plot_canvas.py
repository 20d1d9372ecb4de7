from __future__ import annotations

import logging
import math
from typing import Sequence, TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget

from minkowskiplot import config
from minkowskiplot.model.geometry_utils import light_cone_lines
from minkowskiplot.model.mapping import Mode
from minkowskiplot.view.widgets.grid_manager import GridManager

if TYPE_CHECKING:
    import numpy.typing as npt
    from minkowskiplot.model.state import PlotState

logger = logging.getLogger(__name__)


def stack_with_breaks(polylines: Sequence[npt.NDArray[np.float64]]) -> npt.NDArray[np.float64]:
    """
    Concatenate (N, 2) polylines into one array with a NaN row between them,
    so a single item drawn with connect="finite" keeps them disconnected.
    """
    if not polylines:
        return np.empty((0, 2), dtype=np.float64)
    gap = np.full((1, 2), np.nan)
    parts = []
    for pl in polylines:
        parts.append(pl)
        parts.append(gap)
    return np.vstack(parts[:-1])


class PlotCanvas(pg.PlotWidget):
    """
    pyqtgraph canvas whose view coordinates are canvas pixels:
      - x grows to the right, y grows downward (inverted view box),
      - the visible range always equals the widget size,
      - pan/zoom disabled; mouse input is re-emitted as pixel coordinates.
    """
    pointer_moved = Signal(float, float)
    clicked = Signal(float, float)
    double_clicked = Signal(float, float)
    resized = Signal(float, float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background=config.STYLE["background"])

        self.plot_item = self.getPlotItem()
        self.plot_item.hideAxis("left")
        self.plot_item.hideAxis("bottom")
        self.plot_item.hideButtons()
        self.plot_item.setMenuEnabled(False)
        self.plot_item.layout.setContentsMargins(0, 0, 0, 0)

        self.view_box = self.plot_item.getViewBox()
        self.view_box.setMouseEnabled(x=False, y=False)
        self.view_box.invertY(True)
        self.view_box.disableAutoRange()

        self.grid = GridManager(self.plot_item)

        # actors state
        self._light_cone_item = pg.PlotDataItem(
            connect="finite", pen=pg.mkPen(config.STYLE["light_cone"], width=1, style=Qt.PenStyle.DashLine)
        )
        self._timelike_item = pg.PlotDataItem(connect="finite", pen=pg.mkPen(config.STYLE["timelike"], width=1.5))
        self._spacelike_item = pg.PlotDataItem(connect="finite", pen=pg.mkPen(config.STYLE["spacelike"], width=1.2))
        self._circles_item = pg.PlotDataItem(connect="finite", pen=pg.mkPen(config.STYLE["circle"], width=1))
        self._origin_item = pg.ScatterPlotItem(size=8, brush=pg.mkBrush("k"), pen=None)
        self._points_item = pg.ScatterPlotItem(pen=None)

        for item in (
            self._light_cone_item, self._timelike_item, self._spacelike_item,
            self._circles_item, self._origin_item, self._points_item,
        ):
            self.plot_item.addItem(item)

        self.view_box.sigResized.connect(self._on_view_resized)
        self.scene().sigMouseMoved.connect(self._on_mouse_moved)
        self.scene().sigMouseClicked.connect(self._on_mouse_clicked)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def canvas_size(self) -> tuple[float, float]:
        rect = self.view_box.boundingRect()
        return float(rect.width()), float(rect.height())

    def render_state(self, state: PlotState) -> None:
        """Redraw everything from the given state."""
        viewport = state.viewport
        self.view_box.setRange(xRange=(0.0, viewport.width), yRange=(0.0, viewport.height), padding=0.0)
        self.grid.update_grid(viewport, state.mode)

        if state.mode is Mode.MINKOWSKI:
            self._draw_minkowski(state)
            self._circles_item.setData([], [])
        else:
            self._clear_minkowski()
            circles = stack_with_breaks(state.circle_polylines())
            self._circles_item.setData(circles[:, 0], circles[:, 1], connect="finite")

        self._draw_points(state)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _draw_minkowski(self, state: PlotState) -> None:
        mapper = state.mapper
        polylines = state.get_hyperbola_geometry()

        timelike = stack_with_breaks([mapper.to_screen_array(p.points) for p in polylines if p.branch.is_timelike])
        spacelike = stack_with_breaks([mapper.to_screen_array(p.points) for p in polylines if not p.branch.is_timelike])
        cone = stack_with_breaks([mapper.to_screen_array(line) for line in light_cone_lines(state.viewport)])

        self._timelike_item.setData(timelike[:, 0], timelike[:, 1], connect="finite")
        self._spacelike_item.setData(spacelike[:, 0], spacelike[:, 1], connect="finite")
        self._light_cone_item.setData(cone[:, 0], cone[:, 1], connect="finite")

        center = state.viewport.center
        self._origin_item.setData([center.x], [center.y])

    def _clear_minkowski(self) -> None:
        for item in (self._timelike_item, self._spacelike_item, self._light_cone_item):
            item.setData([], [])
        self._origin_item.setData([], [])

    def _draw_points(self, state: PlotState) -> None:
        nearest = state.nearest_point()
        spots = []
        for p in state.points:
            is_nearest = p is nearest
            color = config.STYLE["point_nearest"] if is_nearest else config.STYLE["point"]
            spots.append({
                "pos": (p.x, p.y),
                "size": config.POINT_SIZE_NEAREST if is_nearest else config.POINT_SIZE,
                "brush": pg.mkBrush(color),
            })
        self._points_item.setData(spots)

    def _to_canvas(self, scene_pos) -> tuple[float, float] | None:
        """Map a scene position to canvas pixels, None if outside or not finite."""
        if not self.view_box.sceneBoundingRect().contains(scene_pos):
            return None
        view_pos = self.view_box.mapSceneToView(scene_pos)
        x, y = float(view_pos.x()), float(view_pos.y())
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        return x, y

    def _on_view_resized(self, *_) -> None:
        w, h = self.canvas_size()
        if w <= 0 or h <= 0:
            logger.debug(f"Ignoring degenerate canvas size {w}x{h}")
            return
        self.resized.emit(w, h)

    def _on_mouse_moved(self, scene_pos) -> None:
        pos = self._to_canvas(scene_pos)
        if pos is not None:
            self.pointer_moved.emit(*pos)

    def _on_mouse_clicked(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = self._to_canvas(event.scenePos())
        if pos is None:
            return
        if event.double():
            self.double_clicked.emit(*pos)
        else:
            self.clicked.emit(*pos)
