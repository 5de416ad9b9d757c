"""
Visualizer State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current angle, display unit, interaction
   mode and enabled functions in one place.
2. Decoupling: The renderer and the value panel read from this object;
   only the AngleController writes to it.

Classes:
    DisplayUnit: Degrees or radians (snapping and label emphasis).
    InteractionMode: Idle or dragging.
    VisualizerState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math

from unitcircle.model.trig import ALL_FUNCTIONS, BASIC_FUNCTIONS, TrigFunction

logger = logging.getLogger(__name__)


class DisplayUnit(Enum):
    DEGREES = "DEG"
    RADIANS = "RAD"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_toggle(cls, checked: bool) -> DisplayUnit:
        """The unit toggle is 'checked' for radians."""
        return cls.RADIANS if checked else cls.DEGREES


class InteractionMode(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class VisualizerState:
    """
    Holds the runtime state of the visualizer.
    Independent of UI or rendering backend.
    """
    angle: float = 0.0  # radians, may be stored unwrapped
    display_unit: DisplayUnit = DisplayUnit.DEGREES
    mode: InteractionMode = InteractionMode.IDLE
    enabled: frozenset[TrigFunction] = field(default_factory=lambda: ALL_FUNCTIONS)

    def __setattr__(self, name, value) -> None:
        if name == "angle" and not math.isfinite(value):
            raise ValueError(f"Angle must be finite, got {value}.")
        super().__setattr__(name, value)

    @property
    def is_dragging(self) -> bool:
        return self.mode is InteractionMode.DRAGGING

    @property
    def reciprocals_enabled(self) -> bool:
        return {TrigFunction.COT, TrigFunction.SEC, TrigFunction.CSC} <= self.enabled

    def is_enabled(self, function: TrigFunction) -> bool:
        return function in self.enabled

    def set_reciprocals(self, enabled: bool) -> None:
        self.enabled = ALL_FUNCTIONS if enabled else BASIC_FUNCTIONS

    def reset(self) -> None:
        """Restore the startup defaults."""
        self.angle = 0.0
        self.display_unit = DisplayUnit.DEGREES
        self.mode = InteractionMode.IDLE
        self.enabled = ALL_FUNCTIONS
        logger.info("Visualizer state has been reset.")
