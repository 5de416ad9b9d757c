"""
Angle Controller
================
Turns pointer and touch input into angle updates.

The controller owns the VisualizerState and is the only writer to it. Views
subscribe to its signals and redraw themselves; the controller never touches
a widget directly.

State machine:
    IDLE --press--> DRAGGING --release--> IDLE
    A press always sets the angle, a move only while DRAGGING.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from PySide6.QtCore import QObject, Signal

from unitcircle.model.geometry_primitives import ScreenTransform
from unitcircle.model.state import DisplayUnit, InteractionMode, VisualizerState
from unitcircle.model.trig import angle_from_vector, snap_to_degrees, snap_to_radians

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceRect:
    """Top-left corner of the drawing surface in the host's coordinate space."""
    left: float = 0.0
    top: float = 0.0


def snap_angle(angle: float, unit: DisplayUnit) -> float:
    """Whole degrees in degree mode, multiples of pi/24 in radian mode."""
    if unit is DisplayUnit.DEGREES:
        return snap_to_degrees(angle)
    return snap_to_radians(angle)


class AngleController(QObject):
    """Central controller with signals for canvas/panel sync."""
    angle_changed = Signal(float)
    unit_changed = Signal(object)
    mode_changed = Signal(object)
    functions_changed = Signal(object)

    def __init__(self, state: VisualizerState, transform: ScreenTransform, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.transform = transform

    # ---- pointer / touch ----

    def press(self, client_x: float, client_y: float, rect: SurfaceRect = SurfaceRect()) -> None:
        """Pointer down or touch start."""
        self._set_mode(InteractionMode.DRAGGING)
        self.handle_input(client_x, client_y, rect)

    def move(self, client_x: float, client_y: float, rect: SurfaceRect = SurfaceRect()) -> None:
        """Pointer move or touch move. Ignored unless dragging."""
        if self.state.is_dragging:
            self.handle_input(client_x, client_y, rect)

    def release(self) -> None:
        """Pointer up or touch end."""
        self._set_mode(InteractionMode.IDLE)

    def handle_input(self, client_x: float, client_y: float, rect: SurfaceRect = SurfaceRect()) -> bool:
        """
        Set the angle from a pointer position.

        Args:
            client_x, client_y: Pointer position in host coordinates.
            rect: Bounding rectangle of the drawing surface.

        Returns:
            False when the pointer sits exactly on the centre; the previous angle is kept.
        """
        dx, dy = self.transform.relative_vector(client_x - rect.left, client_y - rect.top)
        raw = angle_from_vector(dx, dy)
        if raw is None:
            logger.debug("Pointer on the centre, keeping angle %.4f", self.state.angle)
            return False
        self.set_angle(snap_angle(raw, self.state.display_unit))
        return True

    # ---- direct setters ----

    def set_angle(self, angle: float) -> None:
        """Store a new angle. Non-finite values are rejected by the state."""
        self.state.angle = angle
        logger.debug("Angle set to %.2f deg", math.degrees(angle))
        self.angle_changed.emit(angle)

    def set_display_unit(self, unit: DisplayUnit) -> None:
        """Change snapping granularity and label emphasis. The stored angle is untouched."""
        if unit is self.state.display_unit:
            return
        self.state.display_unit = unit
        logger.info("Display unit switched to %s", unit.label)
        self.unit_changed.emit(unit)

    def toggle_display_unit(self) -> DisplayUnit:
        unit = DisplayUnit.RADIANS if self.state.display_unit is DisplayUnit.DEGREES else DisplayUnit.DEGREES
        self.set_display_unit(unit)
        return unit

    def set_reciprocals_enabled(self, enabled: bool) -> None:
        """Switch between sin/cos/tan only and all six functions."""
        if enabled == self.state.reciprocals_enabled:
            return
        self.state.set_reciprocals(enabled)
        logger.info("Reciprocal functions %s", "shown" if enabled else "hidden")
        self.functions_changed.emit(self.state.enabled)

    def _set_mode(self, mode: InteractionMode) -> None:
        if mode is self.state.mode:
            return
        self.state.mode = mode
        logger.debug("Interaction mode: %s", mode.value)
        self.mode_changed.emit(mode)
