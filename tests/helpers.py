"""Headless stand-ins for the drawing surface and the value panel."""
from __future__ import annotations

from unitcircle.view.surface import PanelField


class RecordingSurface:
    """Records every drawing call as (name, args) tuples."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear_rect", x, y, width, height))

    def set_stroke(self, color, width, dash=()):
        self.calls.append(("set_stroke", color, width, tuple(dash)))

    def set_fill(self, color):
        self.calls.append(("set_fill", color))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def arc(self, cx, cy, radius, start, end):
        self.calls.append(("arc", cx, cy, radius, start, end))

    def stroke(self):
        self.calls.append(("stroke",))

    def fill(self):
        self.calls.append(("fill",))

    def fill_text(self, text, x, y, align="left", baseline="alphabetic"):
        self.calls.append(("fill_text", text, x, y, align, baseline))

    def stroke_colors(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] == "set_stroke"]

    def lines_in(self, color: str) -> list[tuple[float, float, float, float]]:
        """(x0, y0, x1, y1) of every straight line stroked with `color`."""
        lines = []
        current = None
        start = None
        for call in self.calls:
            if call[0] == "set_stroke":
                current = call[1]
            elif call[0] == "move_to":
                start = call[1:]
            elif call[0] == "line_to" and current == color:
                lines.append((start[0], start[1], call[1], call[2]))
        return lines


class DictSink:
    """OutputSink backed by dictionaries."""

    def __init__(self, toggle: bool = False) -> None:
        self.text: dict[PanelField, str] = {}
        self.emphasis: dict[PanelField, bool] = {}
        self.visible: dict[PanelField, bool] = {}
        self.toggle = toggle

    def write_text(self, field, text):
        self.text[field] = text

    def set_emphasis(self, field, active):
        self.emphasis[field] = active

    def set_visible(self, field, visible):
        self.visible[field] = visible

    def read_toggle(self):
        return self.toggle
