"""
Grid Manager
Handles the 2D background grid and the spacetime axes.
"""
from typing import List

import numpy as np
import pyqtgraph as pg

from minkowskiplot import config
from minkowskiplot.model.geometry_utils import grid_positions
from minkowskiplot.model.mapping import Mode, Viewport


class GridManager:
    def __init__(self, plot_item: pg.PlotItem) -> None:
        self.plot_item = plot_item
        self.spacing: float = config.GRID_STEP

        self._grid_item = pg.PlotDataItem(connect="pairs")
        self._grid_item.setZValue(-20)
        self._axes_item = pg.PlotDataItem(connect="pairs", pen=pg.mkPen(config.STYLE["axis"], width=2))
        self._axes_item.setZValue(-10)
        self._axis_labels: List[pg.TextItem] = [
            pg.TextItem("x", color=config.STYLE["axis"], anchor=(1.0, 1.0)),
            pg.TextItem("ct", color=config.STYLE["axis"], anchor=(0.0, 0.0)),
        ]

        self.plot_item.addItem(self._grid_item)
        self.plot_item.addItem(self._axes_item)
        for label in self._axis_labels:
            self.plot_item.addItem(label)

    def update_grid(self, viewport: Viewport, mode: Mode) -> None:
        """Re-calculates grid lines (and axes in Minkowski mode) for the viewport."""
        if mode is Mode.MINKOWSKI:
            origin_x, origin_y = viewport.cx, viewport.cy
            color = config.STYLE["grid_minkowski"]
        else:
            origin_x, origin_y = 0.0, 0.0
            color = config.STYLE["grid_euclid"]

        lines = self._build_xy_grid_lines(viewport, origin_x, origin_y, self.spacing)
        self._grid_item.setData(lines[:, 0], lines[:, 1], connect="pairs", pen=pg.mkPen(color, width=1))

        if mode is Mode.MINKOWSKI:
            self._draw_axes(viewport)
        else:
            self._hide_axes()

    @staticmethod
    def _build_xy_grid_lines(
        viewport: Viewport,
        origin_x: float,
        origin_y: float,
        spacing: float
    ) -> np.ndarray:
        """
        Create grid line segments covering the viewport.

        Lines run through every multiple of `spacing` measured from the origin.

        Returns:
            A (2N, 2) array of segment endpoints, consecutive rows forming one line.
        """
        xs = origin_x + grid_positions(-origin_x, viewport.width - origin_x, spacing)
        ys = origin_y + grid_positions(-origin_y, viewport.height - origin_y, spacing)

        n_lines = len(xs) + len(ys)
        points = np.empty((n_lines * 2, 2), dtype=float)

        pid = 0
        for x in xs:
            points[pid] = (x, 0.0)
            points[pid + 1] = (x, viewport.height)
            pid += 2
        for y in ys:
            points[pid] = (0.0, y)
            points[pid + 1] = (viewport.width, y)
            pid += 2

        return points

    def _draw_axes(self, viewport: Viewport) -> None:
        cx, cy = viewport.cx, viewport.cy
        xs = np.array([0.0, viewport.width, cx, cx])
        ys = np.array([cy, cy, viewport.height, 0.0])
        self._axes_item.setData(xs, ys, connect="pairs")
        self._axes_item.setVisible(True)

        x_label, ct_label = self._axis_labels
        x_label.setPos(viewport.width - 8, cy - 4)
        ct_label.setPos(cx + 6, 6)
        for label in self._axis_labels:
            label.setVisible(True)

    def _hide_axes(self) -> None:
        self._axes_item.setVisible(False)
        for label in self._axis_labels:
            label.setVisible(False)

