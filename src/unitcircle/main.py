"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the state (VisualizerState) and the AngleController.
2. Instantiates the Main Window (View) with the renderer.
3. Passes the controller into the View so they can communicate.
"""
import sys

from unitcircle import config
from unitcircle.application import create_app
from unitcircle.controller.angle_controller import AngleController
from unitcircle.logging_config import setup_logging
from unitcircle.model.geometry_primitives import ScreenTransform
from unitcircle.model.state import VisualizerState
from unitcircle.view.main_window import MainWindow
from unitcircle.view.renderer import GeometryRenderer


def main() -> int:
    # 1. Setup Logging (level and optional file come from config)
    setup_logging()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Model and Controller
    transform = ScreenTransform(config.CENTER_X, config.CENTER_Y, config.UNIT_SCALE)
    state = VisualizerState()
    controller = AngleController(state, transform)

    # 4. Initialize the Main Window
    window = MainWindow(controller, GeometryRenderer(transform))
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
