"""
Membrane Filtration View
========================
Composes the plot, the ΔP drag track, the parameter sliders and the results.

Why is this file needed?
------------------------
1. Wiring: It connects the store, the drag controller and the widgets.
2. Draw cycle: ``redraw`` builds one Frame (one Scale) per store change and
   hands it to both canvases, which repaint before the store write returns.
3. Lifecycle: ``activate``/``deactivate`` own the application-wide release
   listener for as long as the view is alive.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from membranefiltration.app.state import ParameterStore
from membranefiltration.controller.drag import DragController
from membranefiltration.model.parameters import Parameters, get_range
from membranefiltration.view.panels.parameters import ParameterPanel
from membranefiltration.view.panels.results import ResultsPanel
from membranefiltration.view.render import Frame, build_frame
from membranefiltration.view.widgets.canvas import PlotCanvas, SliderCanvas
from membranefiltration.view.widgets.release_watcher import ReleaseWatcher

logger = logging.getLogger(__name__)

SUBHEADING = "J = Pe(ΔP−Δπ), q = J⋅A"


class MembraneView(QWidget):
    def __init__(self, store: ParameterStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.controller = DragController(on_change=self._write_delta_p)
        self.release_watcher = ReleaseWatcher(self.controller.release, self)
        self._frame: Optional[Frame] = None

        layout = QVBoxLayout(self)

        heading = QLabel(SUBHEADING)
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)

        self.plot = PlotCanvas()
        layout.addWidget(self.plot)

        self.delta_p_label = QLabel()
        layout.addWidget(self.delta_p_label)

        self.slider = SliderCanvas()
        layout.addWidget(self.slider)

        self.parameter_panel = ParameterPanel()
        layout.addWidget(self.parameter_panel)

        self.results_panel = ResultsPanel()
        layout.addWidget(self.results_panel)
        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.store.parameters_changed.connect(self._on_parameters_changed)
        self.parameter_panel.value_changed.connect(self.store.set_value)
        self.plot.resized.connect(self.redraw)
        self.slider.pressed.connect(self._on_slider_pressed)
        self.slider.moved.connect(self._on_slider_moved)

        self.parameter_panel.sync(self.store.parameters)
        self.redraw()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Start listening for releases anywhere in the application."""
        if not self.release_watcher.is_installed:
            self.release_watcher.install()
            logger.info("Membrane view activated.")

    def deactivate(self) -> None:
        if self.release_watcher.is_installed:
            self.release_watcher.remove()
            logger.info("Membrane view deactivated.")
        self.controller.release()

    # ------------------------------------------------------------------
    # Draw cycle
    # ------------------------------------------------------------------

    def current_frame(self) -> Optional[Frame]:
        return self._frame

    def redraw(self) -> None:
        """Rebuild the frame from the store and repaint both surfaces."""
        parameters = self.store.parameters
        frame = build_frame(parameters, self.plot.width(), self.plot.height())
        self._frame = frame

        self.plot.set_frame(frame)
        self.slider.set_frame(frame)
        self.plot.repaint()
        self.slider.repaint()

        self.delta_p_label.setText(get_range("delta_p").display(parameters.delta_p))
        self.results_panel.update_results(frame.derived)

    def _on_parameters_changed(self, parameters: Parameters) -> None:
        self.parameter_panel.sync(parameters)
        self.redraw()

    # ------------------------------------------------------------------
    # Drag input
    # ------------------------------------------------------------------

    def _write_delta_p(self, value: float) -> None:
        self.store.set_value("delta_p", value)

    def _on_slider_pressed(self, x: float, y: float) -> None:
        self.controller.press(x, y, self.slider.width(), self.slider.height())

    def _on_slider_moved(self, x: float) -> None:
        if self._frame is None:
            return
        self.controller.move(x, self._frame.scale)
