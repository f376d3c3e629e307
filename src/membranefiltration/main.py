"""
Application Initialization
==========================
This module constructs the Model-View-Controller pieces and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the parameter store (Model).
2. Instantiates the Main Window (View), which owns the drag controller.
3. Passes the store into the View so they can communicate.
"""
import logging
import sys

from membranefiltration.app.application import create_app
from membranefiltration.app.state import ParameterStore
from membranefiltration.logging_config import setup_logging
from membranefiltration.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (use logging.DEBUG to trace drag transitions)
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = ParameterStore()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
