from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
from typing import Optional, Sequence

import pyqtgraph as pg

from minkowskiplot import config

ORG_ID = "minkowskiplot"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance (or reuse a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(config.APP_NAME)

    app = QApplication.instance() or QApplication(list(argv) if argv is not None else [])
    app.setApplicationDisplayName(config.VISIBLE_APP_NAME)

    pg.setConfigOption("background", config.STYLE["background"])
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)

    return app
