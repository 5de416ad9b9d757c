"""
Geometric Primitives for the unit circle construction.
"""
from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    """A point in 2D model space (circle radius = 1)."""
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """A straight line segment between two model points."""
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class ScreenTransform:
    """
    Affine map between model units and screen pixels.

    screen_x = center_x + model_x * scale
    screen_y = center_y - model_y * scale   (screen y grows downwards)
    """
    center_x: float
    center_y: float
    scale: float

    def __post_init__(self) -> None:
        if not (self.scale > 0.0 and math.isfinite(self.scale)):
            raise ValueError(f"Scale must be a positive finite number, got {self.scale}.")

    def to_screen_x(self, model_x: float) -> float:
        return self.center_x + model_x * self.scale

    def to_screen_y(self, model_y: float) -> float:
        return self.center_y - model_y * self.scale

    def to_screen(self, point: Point) -> tuple[float, float]:
        return self.to_screen_x(point.x), self.to_screen_y(point.y)

    def to_model(self, screen_x: float, screen_y: float) -> Point:
        return Point(
            (screen_x - self.center_x) / self.scale,
            (self.center_y - screen_y) / self.scale,
        )

    def relative_vector(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        """Pixel offset from the centre with the vertical axis pointing up."""
        return screen_x - self.center_x, self.center_y - screen_y
