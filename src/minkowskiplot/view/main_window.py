"""
Main Application Window
=======================
The primary GUI container that holds the Toolbar, the Canvas and the Info panel.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects canvas input (move, click, double-click, resize) and
   toolbar actions to the PlotState commands, then redraws.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QToolBar,
    QLabel, QCheckBox, QPlainTextEdit
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from minkowskiplot import config
from minkowskiplot.model.geometry_primitives import Point
from minkowskiplot.model.invariants import DisplayInfo
from minkowskiplot.model.mapping import Mode
from minkowskiplot.model.state import PlotState
from minkowskiplot.view.widgets.plot_canvas import PlotCanvas

logger = logging.getLogger(__name__)

MODE_LABELS = {
    Mode.EUCLIDEAN: "Mode: Euclid",
    Mode.MINKOWSKI: "Mode: Minkowski",
}
TOGGLE_LABELS = {
    Mode.EUCLIDEAN: "Show Minkowski",
    Mode.MINKOWSKI: "Show Euclid",
}


class MainWindow(QMainWindow):
    def __init__(self, state: PlotState) -> None:
        super().__init__()
        self.state: PlotState = state
        self._last_added: Optional[Point] = None

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(1000, 760)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. TOOLBAR ---
        self._create_actions()
        self._create_toolbar()

        # --- 2. SPLITTER (Canvas on top, info below) ---
        splitter = QSplitter(Qt.Vertical)
        main_layout.addWidget(splitter)

        self.canvas = PlotCanvas()
        splitter.addWidget(self.canvas)

        self.info = QPlainTextEdit()
        self.info.setReadOnly(True)
        splitter.addWidget(self.info)
        splitter.setSizes([620, 140])

        # --- SIGNAL CONNECTIONS ---
        self.canvas.resized.connect(self.on_canvas_resized)
        self.canvas.pointer_moved.connect(self.on_pointer_moved)
        self.canvas.clicked.connect(self.on_canvas_clicked)
        self.canvas.double_clicked.connect(self.on_canvas_double_clicked)

        # Initial Render
        self.update_mode_widgets()
        self.refresh()

    def _create_actions(self) -> None:
        self.act_toggle_mode = QAction(TOGGLE_LABELS[self.state.mode], self)
        self.act_toggle_mode.setShortcut("Ctrl+M")
        self.act_toggle_mode.triggered.connect(self.on_toggle_mode)

        self.act_clear = QAction("Clear", self)
        self.act_clear.setShortcut("Ctrl+L")
        self.act_clear.triggered.connect(self.on_clear)

        self.act_exit = QAction("Quit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_toolbar(self) -> None:
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.act_toggle_mode)
        self.mode_label = QLabel()
        self.mode_label.setContentsMargins(8, 0, 8, 0)
        toolbar.addWidget(self.mode_label)
        toolbar.addSeparator()

        toolbar.addAction(self.act_clear)

        self.chk_circles = QCheckBox("Show circles")
        self.chk_circles.setChecked(self.state.show_circles)
        self.chk_circles.toggled.connect(self.on_circles_toggled)
        toolbar.addWidget(self.chk_circles)

        self.addAction(self.act_exit)

    # --- HELPER METHODS ---
    def update_mode_widgets(self) -> None:
        mode = self.state.get_mode()
        self.act_toggle_mode.setText(TOGGLE_LABELS[mode])
        self.mode_label.setText(MODE_LABELS[mode])
        # circles only exist on the Euclidean plane
        self.chk_circles.setEnabled(mode is Mode.EUCLIDEAN)

    def show_info(self, info: DisplayInfo) -> None:
        self.info.setPlainText(info.to_text())

    def refresh(self) -> None:
        """Redraw the canvas and re-evaluate the info panel."""
        self.show_info(self.state.current_report())
        self.canvas.render_state(self.state)

    # --- SLOTS ---
    def on_canvas_resized(self, width: float, height: float) -> None:
        self.state.on_viewport_resize(width, height)
        self.refresh()

    def on_pointer_moved(self, x: float, y: float) -> None:
        self.show_info(self.state.query_nearest(x, y))
        self.canvas.render_state(self.state)

    def on_canvas_clicked(self, x: float, y: float) -> None:
        self._last_added = self.state.add_point_at(x, y)
        self.refresh()

    def on_canvas_double_clicked(self, x: float, y: float) -> None:
        # The first press of a double-click already arrived as a click and placed a point.
        if self._last_added is not None:
            self.state.discard_point(self._last_added)
            self._last_added = None
        if not self.state.remove_nearest_at(x, y):
            logger.debug(f"No point within {config.REMOVE_THRESHOLD_PX:g} px of ({x:.0f}, {y:.0f})")
        self.refresh()

    def on_toggle_mode(self) -> None:
        self.state.toggle_mode()
        self.update_mode_widgets()
        self.refresh()

    def on_clear(self) -> None:
        self.state.clear_all()
        self.refresh()

    def on_circles_toggled(self, checked: bool) -> None:
        self.state.set_show_circles(checked)
        self.canvas.render_state(self.state)
