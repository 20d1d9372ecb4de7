"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (thresholds, curve magnitudes,
   colors) scattered throughout the model and the view.
2. Tuning: Every value the canvas depends on can be changed in one place;
   command line options override a few of them at startup.

Exports:
    HYPERBOLA_MAGNITUDES (tuple): Interval magnitudes of the drawn hyperbolas.
    REMOVE_THRESHOLD_PX (float): Max distance for double-click removal.
    INITIAL_POINTS (tuple): Points placed on a fresh canvas.
"""
from typing import Tuple

# Application identity
APP_NAME: str = "minkowskiplot"
VISIBLE_APP_NAME: str = "Euclid / Minkowski Plotter"

# --- Geometry ---
# Interval magnitudes s of the hyperbola family (same pixel units as the canvas)
HYPERBOLA_MAGNITUDES: Tuple[float, ...] = (40.0, 80.0, 140.0, 220.0)
# Curve sampling step in pixels
SAMPLE_STEP: float = 1.0

REMOVE_THRESHOLD_PX: float = 30.0
DEFAULT_VIEWPORT: Tuple[int, int] = (800, 600)
INITIAL_POINTS: Tuple[Tuple[float, float], ...] = ((100.0, 120.0), (240.0, 200.0), (400.0, 90.0))

CIRCLE_RADIUS: float = 50.0
CIRCLE_SEGMENTS: int = 72

# --- Text output ---
DISTANCE_DECIMALS: int = 2
COORDINATE_DECIMALS: int = 0
INTERVAL_DECIMALS: int = 2  # single point report
TABLE_DECIMALS: int = 1  # full invariant table and t/x components

# --- Drawing ---
GRID_STEP: float = 40.0

STYLE = {
    "background": "#ffffff",
    "grid_euclid": "#ececec",
    "grid_minkowski": "#e4e4e4",
    "axis": "#222222",
    "timelike": (200, 50, 50, 230),
    "spacelike": (50, 120, 50, 230),
    "light_cone": (120, 120, 120, 160),
    "circle": (100, 100, 255, 60),
    "point": "#116655",
    "point_nearest": "#ee3344",
}

POINT_SIZE: int = 8
POINT_SIZE_NEAREST: int = 12
