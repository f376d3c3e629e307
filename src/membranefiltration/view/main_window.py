"""
Main Application Window
=======================
The primary GUI container that holds the menu bar and the membrane view.

Why is this file needed?
------------------------
1. Layout: It hosts the view as the central widget.
2. Lifecycle: It activates the view on construction and tears it down when
   the window closes, so no application-wide listener outlives the view.
"""
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QMainWindow

from membranefiltration.app.state import ParameterStore
from membranefiltration.view.membrane_view import MembraneView


VISIBLE_APP_NAME = "Membrane Filtration"


class MainWindow(QMainWindow):
    def __init__(self, store: ParameterStore) -> None:
        super().__init__()
        self.store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 750)

        self.view = MembraneView(self.store)
        self.setCentralWidget(self.view)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.view.activate()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset Parameters", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.store.reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.view.deactivate()
        super().closeEvent(event)
