"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sizes, colours, thresholds)
   scattered throughout the drawing and formatting code.
2. Consistency: The renderer, the controller and the value panel all read
   the same canvas geometry from one place.

Exports:
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Size of the drawing surface in pixels.
    CENTER_X, CENTER_Y (float): Screen position of the model origin.
    UNIT_SCALE (float): Pixels per model unit (the circle radius on screen).
"""
import logging
import math
from typing import Optional

# Canvas geometry
CANVAS_WIDTH: int = 600
CANVAS_HEIGHT: int = 600
CENTER_X: float = CANVAS_WIDTH / 2
CENTER_Y: float = CANVAS_HEIGHT / 2
UNIT_SCALE: float = 200.0  # 200px = 1 unit
GRID_SPACING: float = 20.0
POINT_RADIUS: float = 6.0

# Numerics
ASYMPTOTE_EPSILON: float = 0.01
INFINITY_THRESHOLD: float = 100.0
DEGREE_STEP: float = 1.0
RADIAN_STEP: float = math.pi / 24  # 7.5 degrees

# Text precision
VALUE_DECIMALS: int = 3
COORD_DECIMALS: int = 2
DEGREE_DECIMALS: int = 1
PI_MULTIPLE_DECIMALS: int = 2

# Colours
GRID_COLOR: str = "#f0f0f0"
AXIS_COLOR: str = "#333333"
CIRCLE_COLOR: str = "#ced4da"
RADIUS_COLOR: str = "#333333"
SIN_COLOR: str = "#dc3545"
COS_COLOR: str = "#0d6efd"
TAN_COLOR: str = "#198754"
COT_COLOR: str = "#0dcaf0"
SEC_COLOR: str = "#fd7e14"
CSC_COLOR: str = "#6f42c1"
ACTIVE_TEXT_COLOR: str = "#000000"
INACTIVE_TEXT_COLOR: str = "#adb5bd"

# Line widths
GRID_WIDTH: float = 1.0
AXIS_WIDTH: float = 2.0
CIRCLE_WIDTH: float = 2.0
RADIUS_WIDTH: float = 3.0
PRIMARY_WIDTH: float = 4.0
HYPOTENUSE_WIDTH: float = 2.0

# Axis tick labels at +-1
AXIS_LABEL_COLOR: str = "#6c757d"
AXIS_LABEL_OFFSET: float = 6.0

# Logging
LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None  # e.g. "unitcircle.log"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
