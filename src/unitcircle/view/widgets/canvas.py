"""
Unit Circle Canvas
The drawing surface widget: paints the scene and forwards mouse/touch input.
"""
from __future__ import annotations

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QTouchEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from unitcircle import config
from unitcircle.controller.angle_controller import AngleController, SurfaceRect
from unitcircle.view.renderer import GeometryRenderer
from unitcircle.view.widgets.qt_surface import QPainterSurface


class UnitCircleCanvas(QWidget):
    """Fixed-size canvas. Redraws whenever the controller reports a change."""
    def __init__(self, controller: AngleController, renderer: GeometryRenderer,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.renderer = renderer

        self.setFixedSize(config.CANVAS_WIDTH, config.CANVAS_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self.controller.angle_changed.connect(lambda *_: self.update())
        self.controller.functions_changed.connect(lambda *_: self.update())

    def surface_rect(self) -> SurfaceRect:
        return SurfaceRect(0.0, 0.0)

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.renderer.draw(QPainterSurface(painter), self.controller.state)
        finally:
            painter.end()

    # ---- mouse ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.controller.press(pos.x(), pos.y(), self.surface_rect())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        # Qt grabs the mouse on press, so moves outside the widget still arrive
        pos = event.position()
        self.controller.move(pos.x(), pos.y(), self.surface_rect())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.release()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    # ---- touch ----

    def event(self, event: QEvent) -> bool:
        kind = event.type()
        if kind in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate):
            self._handle_touch(event, begin=kind == QEvent.Type.TouchBegin)
            return True
        if kind in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self.controller.release()
            event.accept()
            return True
        return super().event(event)

    def _handle_touch(self, event: QTouchEvent, begin: bool) -> None:
        # Accepting the event keeps Qt from turning the drag into a scroll gesture
        event.accept()
        points = event.points()
        if not points:
            return
        pos = points[0].position()
        if begin:
            self.controller.press(pos.x(), pos.y(), self.surface_rect())
        else:
            self.controller.move(pos.x(), pos.y(), self.surface_rect())
