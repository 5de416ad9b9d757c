"""
Geometry Renderer
Redraws the whole unit circle scene from the visualizer state.
"""
from __future__ import annotations

import math

import numpy as np

from unitcircle import config
from unitcircle.model.geometry_primitives import ScreenTransform, Segment
from unitcircle.model.state import VisualizerState
from unitcircle.model.trig import construction_segments
from unitcircle.view.surface import DrawingSurface


class GeometryRenderer:
    """
    Draws back to front:
      grid -> axes -> circle -> cot/csc -> tan/sec -> cos/sin -> radius + point.

    Secondary functions go first so the primary ones stay on top where they overlap.
    """
    def __init__(
        self,
        transform: ScreenTransform,
        width: float = config.CANVAS_WIDTH,
        height: float = config.CANVAS_HEIGHT,
        grid_spacing: float = config.GRID_SPACING,
    ) -> None:
        self.transform = transform
        self.width = width
        self.height = height
        self.grid_spacing = grid_spacing

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def draw(self, surface: DrawingSurface, state: VisualizerState) -> None:
        """Render a complete frame for the current state."""
        surface.clear_rect(0.0, 0.0, self.width, self.height)
        self._draw_grid(surface)
        self._draw_axes(surface)
        self._draw_axis_labels(surface)
        self._draw_unit_circle(surface)

        construction = construction_segments(state.angle, state.enabled)
        self._draw_pair(surface, construction.cotangent, config.COT_COLOR,
                        construction.cosecant, config.CSC_COLOR)
        self._draw_pair(surface, construction.tangent, config.TAN_COLOR,
                        construction.secant, config.SEC_COLOR)

        self._draw_segment(surface, construction.cosine, config.COS_COLOR, config.PRIMARY_WIDTH)
        self._draw_segment(surface, construction.sine, config.SIN_COLOR, config.PRIMARY_WIDTH)

        self._draw_segment(surface, construction.radius, config.RADIUS_COLOR, config.RADIUS_WIDTH)
        self._draw_point(surface, *self.transform.to_screen(construction.radius.end))

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def grid_lines(self) -> tuple[np.ndarray, np.ndarray]:
        """Screen x positions of vertical and y positions of horizontal grid lines."""
        xs = np.arange(0.0, self.width + 0.5 * self.grid_spacing, self.grid_spacing)
        ys = np.arange(0.0, self.height + 0.5 * self.grid_spacing, self.grid_spacing)
        return xs, ys

    def _draw_grid(self, surface: DrawingSurface) -> None:
        surface.set_stroke(config.GRID_COLOR, config.GRID_WIDTH)
        xs, ys = self.grid_lines()
        for x in xs:
            self._line(surface, float(x), 0.0, float(x), self.height)
        for y in ys:
            self._line(surface, 0.0, float(y), self.width, float(y))

    def _draw_axes(self, surface: DrawingSurface) -> None:
        surface.set_stroke(config.AXIS_COLOR, config.AXIS_WIDTH)
        cx, cy = self.transform.center_x, self.transform.center_y
        self._line(surface, 0.0, cy, self.width, cy)
        self._line(surface, cx, 0.0, cx, self.height)

    def _draw_axis_labels(self, surface: DrawingSurface) -> None:
        """Tick labels where the circle crosses the axes."""
        surface.set_fill(config.AXIS_LABEL_COLOR)
        offset = config.AXIS_LABEL_OFFSET
        for value in (-1.0, 1.0):
            label = f"{value:g}"
            x = self.transform.to_screen_x(value)
            surface.fill_text(label, x + offset, self.transform.center_y + offset, align="left", baseline="top")
            y = self.transform.to_screen_y(value)
            surface.fill_text(label, self.transform.center_x - offset, y - offset, align="right", baseline="bottom")

    def _draw_unit_circle(self, surface: DrawingSurface) -> None:
        surface.set_stroke(config.CIRCLE_COLOR, config.CIRCLE_WIDTH)
        surface.begin_path()
        surface.arc(self.transform.center_x, self.transform.center_y,
                    self.transform.scale, 0.0, 2.0 * math.pi)
        surface.stroke()

    def _draw_pair(
        self,
        surface: DrawingSurface,
        leg: Segment | None,
        leg_color: str,
        hypotenuse: Segment | None,
        hypotenuse_color: str,
    ) -> None:
        """A ratio segment on a tangent line plus the line from the origin to its end."""
        if leg is not None:
            self._draw_segment(surface, leg, leg_color, config.PRIMARY_WIDTH)
        if hypotenuse is not None:
            self._draw_segment(surface, hypotenuse, hypotenuse_color, config.HYPOTENUSE_WIDTH)

    def _draw_segment(self, surface: DrawingSurface, segment: Segment, color: str, width: float) -> None:
        surface.set_stroke(color, width)
        x0, y0 = self.transform.to_screen(segment.start)
        x1, y1 = self.transform.to_screen(segment.end)
        self._line(surface, x0, y0, x1, y1)

    @staticmethod
    def _draw_point(surface: DrawingSurface, x: float, y: float) -> None:
        surface.set_fill(config.RADIUS_COLOR)
        surface.begin_path()
        surface.arc(x, y, config.POINT_RADIUS, 0.0, 2.0 * math.pi)
        surface.fill()

    @staticmethod
    def _line(surface: DrawingSurface, x0: float, y0: float, x1: float, y1: float) -> None:
        surface.begin_path()
        surface.move_to(x0, y0)
        surface.line_to(x1, y1)
        surface.stroke()
