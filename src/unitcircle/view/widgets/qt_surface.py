"""
QPainter adapter exposing the DrawingSurface API used by the renderer.
"""
from __future__ import annotations

import math
from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPainterPath, QPen


class QPainterSurface:
    """
    Canvas-style path API on top of an active QPainter.

    Angles passed to `arc` follow the screen convention (radians, clockwise
    because y grows downwards); Qt wants counter-clockwise degrees.
    """
    def __init__(self, painter: QPainter, background: str = "#ffffff") -> None:
        self._painter = painter
        self._background = QColor(background)
        self._pen = QPen(QColor("#000000"))
        self._brush = QBrush(QColor("#000000"))
        self._path = QPainterPath()
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._painter.fillRect(QRectF(x, y, width, height), self._background)

    def set_stroke(self, color: str, width: float, dash: Sequence[float] = ()) -> None:
        pen = QPen(QColor(color))
        pen.setWidthF(float(width))
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        if dash:
            # Qt dash lengths are in units of the pen width
            pen.setDashPattern([float(d) / max(width, 1.0) for d in dash])
        self._pen = pen

    def set_fill(self, color: str) -> None:
        self._brush = QBrush(QColor(color))

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(QPointF(x, y))

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        rect = QRectF(cx - radius, cy - radius, 2.0 * radius, 2.0 * radius)
        qt_start = -math.degrees(start)
        qt_sweep = -math.degrees(end - start)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, qt_start)
        self._path.arcTo(rect, qt_start, qt_sweep)

    def stroke(self) -> None:
        self._painter.strokePath(self._path, self._pen)

    def fill(self) -> None:
        self._painter.fillPath(self._path, self._brush)

    def fill_text(self, text: str, x: float, y: float,
                  align: str = "left", baseline: str = "alphabetic") -> None:
        if not text:
            return
        metrics = QFontMetricsF(self._painter.font())
        width = metrics.horizontalAdvance(text)
        if align == "center":
            x -= width / 2.0
        elif align == "right":
            x -= width

        if baseline == "top":
            y += metrics.ascent()
        elif baseline == "middle":
            y += (metrics.ascent() - metrics.descent()) / 2.0
        elif baseline == "bottom":
            y -= metrics.descent()

        self._painter.save()
        self._painter.setPen(QPen(self._brush.color()))
        self._painter.drawText(QPointF(x, y), text)
        self._painter.restore()
