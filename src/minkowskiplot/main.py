"""
Application Initialization
==========================
This module wires the model and the view together and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the application state (PlotState).
3. Instantiates the Main Window (View), passing the state in.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from minkowskiplot.logging_config import setup_logging
from minkowskiplot.model.mapping import Mode
from minkowskiplot.model.state import PlotState

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="minkowskiplot",
        description="Plot points on a Euclidean plane or a Minkowski spacetime diagram."
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.EUCLIDEAN.value,
        help="Display mode at startup",
    )
    parser.add_argument("--circles", action="store_true", help="Draw circles around points in Euclidean mode")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--log-file", default=None, help="Optional path to also write logs to")
    return parser.parse_args(argv)


def build_state(args: argparse.Namespace) -> PlotState:
    state = PlotState(mode=Mode(args.mode))
    state.set_show_circles(args.circles)
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Create the Qt Application (imported late so the model stays importable without a display)
    from minkowskiplot.application import create_app
    from minkowskiplot.view.main_window import MainWindow

    app = create_app(sys.argv[:1])

    # 3. Initialize the Data Model
    state = build_state(args)
    logger.info(f"Starting in {state.mode.value} mode with {len(state.points)} points")

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
