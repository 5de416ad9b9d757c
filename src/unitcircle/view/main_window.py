"""
Main Application Window
=======================
The primary GUI container: canvas on the left, value panel on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects controller signals to the canvas and the panel, and
   the menu actions and unit toggle back to the controller.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QWidget

from unitcircle.application import VISIBLE_APP_NAME
from unitcircle.controller.angle_controller import AngleController
from unitcircle.model.state import InteractionMode
from unitcircle.view.panel import ValuePanel
from unitcircle.view.renderer import GeometryRenderer
from unitcircle.view.widgets.canvas import UnitCircleCanvas
from unitcircle.view.widgets.value_panel import ValuePanelWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: AngleController, renderer: GeometryRenderer) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QHBoxLayout(main_widget)

        self.canvas = UnitCircleCanvas(controller, renderer, main_widget)
        layout.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignTop)

        self.panel_widget = ValuePanelWidget(main_widget)
        self.panel_widget.setMinimumWidth(220)
        layout.addWidget(self.panel_widget, 1)
        self.panel = ValuePanel(self.panel_widget)

        # --- SIGNAL CONNECTIONS ---
        self.panel_widget.unit_toggle.toggled.connect(self.on_unit_toggled)
        self.controller.angle_changed.connect(self.refresh_panel)
        self.controller.functions_changed.connect(self.refresh_panel)
        self.controller.unit_changed.connect(self.panel.refresh_unit)
        self.controller.mode_changed.connect(self.on_mode_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage(self.tr("Drag the point around the circle."))
        self.refresh_panel()

    def _create_actions(self) -> None:
        self.act_quit = QAction(self.tr("Quit"), self)
        self.act_quit.setShortcut("Ctrl+Q")
        self.act_quit.triggered.connect(self.close)

        self.act_reciprocals = QAction(self.tr("Show reciprocal functions"), self)
        self.act_reciprocals.setCheckable(True)
        self.act_reciprocals.setChecked(self.controller.state.reciprocals_enabled)
        self.act_reciprocals.toggled.connect(self.controller.set_reciprocals_enabled)

        self.act_radians = QAction(self.tr("Radians"), self)
        self.act_radians.setShortcut("Ctrl+R")
        self.act_radians.setCheckable(True)
        self.act_radians.toggled.connect(self.panel_widget.unit_toggle.setChecked)
        self.panel_widget.unit_toggle.toggled.connect(self.act_radians.setChecked)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu(self.tr("&File"))
        file_menu.addAction(self.act_quit)

        view_menu = self.menuBar().addMenu(self.tr("&View"))
        view_menu.addAction(self.act_radians)
        view_menu.addAction(self.act_reciprocals)

    def refresh_panel(self, *_) -> None:
        self.panel.refresh(self.controller.state)

    def on_unit_toggled(self, checked: bool) -> None:
        self.controller.set_display_unit(self.panel.toggle_unit())

    def on_mode_changed(self, mode: InteractionMode) -> None:
        if mode is InteractionMode.DRAGGING:
            self.statusBar().showMessage(self.tr("Dragging..."))
        else:
            self.statusBar().showMessage(self.tr("Drag the point around the circle."))
