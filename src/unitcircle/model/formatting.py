"""
Text formatting for the value panel.

Ratios that run off towards an asymptote are shown as a signed infinity
glyph instead of a huge, meaningless number.
"""
from __future__ import annotations

import math

from unitcircle import config
from unitcircle.model.trig import normalize_angle, normalize_degrees

POSITIVE_INFINITY = "+∞"
NEGATIVE_INFINITY = "-∞"


def fixed(value: float, decimals: int) -> str:
    """Fixed-point text with negative zero printed without its sign."""
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def format_value(value: float, threshold: float = config.INFINITY_THRESHOLD,
                 decimals: int = config.VALUE_DECIMALS) -> str:
    """
    Format a trigonometric ratio.

    Examples:
        format_value(0.5) -> "0.500"
        format_value(100.0) -> "100.000"
        format_value(-100.0001) -> "-∞"
    """
    if math.isnan(value):
        raise ValueError("Cannot format NaN as a trigonometric value.")
    if abs(value) > threshold:
        return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY
    return fixed(value, decimals)


def format_degrees(angle: float) -> str:
    """'90.0°' for pi/2, always wrapped into [0, 360)."""
    degrees = normalize_degrees(math.degrees(angle))
    text = fixed(degrees, config.DEGREE_DECIMALS)
    # 359.96 rounds up to '360.0'
    if float(text) >= 360.0:
        text = fixed(0.0, config.DEGREE_DECIMALS)
    return f"{text}°"


def format_pi_multiple(angle: float) -> str:
    """'(0.50π)' for pi/2, always wrapped into [0, 2π)."""
    text = fixed(normalize_angle(angle) / math.pi, config.PI_MULTIPLE_DECIMALS)
    # 1.999 rounds up to '2.00'
    if float(text) >= 2.0:
        text = fixed(0.0, config.PI_MULTIPLE_DECIMALS)
    return f"({text}π)"


def format_coords(x: float, y: float) -> str:
    """'(1.00, 0.00)'"""
    return f"({fixed(x, config.COORD_DECIMALS)}, {fixed(y, config.COORD_DECIMALS)})"
