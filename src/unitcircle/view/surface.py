"""
Abstract drawing surface and text sink.

The renderer and the value panel are written against these interfaces only,
so they can run headless (tests) or on top of Qt (`view.widgets`).
"""
from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence


class PanelField(Enum):
    """Text outputs of the value panel."""
    ANGLE_DEG = "angle-deg"
    ANGLE_RAD = "angle-rad"
    COORDS = "coords"
    SIN = "val-sin"
    COS = "val-cos"
    TAN = "val-tan"
    COT = "val-cot"
    SEC = "val-sec"
    CSC = "val-csc"
    MODE_TEXT = "mode-text"


class DrawingSurface(Protocol):
    """A canvas-like 2D drawing API in screen pixels."""

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def set_stroke(self, color: str, width: float, dash: Sequence[float] = ()) -> None: ...

    def set_fill(self, color: str) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float,
                  align: str = "left", baseline: str = "alphabetic") -> None: ...


class OutputSink(Protocol):
    """Text labels plus the unit toggle."""

    def write_text(self, field: PanelField, text: str) -> None: ...

    def set_emphasis(self, field: PanelField, active: bool) -> None: ...

    def set_visible(self, field: PanelField, visible: bool) -> None: ...

    def read_toggle(self) -> bool: ...
