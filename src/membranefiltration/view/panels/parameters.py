from __future__ import annotations

from typing import Dict, Iterable

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGroupBox, QLabel, QSlider, QVBoxLayout, QWidget

from membranefiltration.model.parameters import ParameterRange, Parameters, get_range


# Inputs bound directly to a slider; ΔP is driven by the drag track instead.
DIRECT_INPUTS = ("delta_pi", "Pe", "A")


class ParameterSlider(QWidget):
    """Caption plus an integer QSlider mapped onto one ParameterRange."""
    value_changed = Signal(str, float)

    def __init__(self, param_range: ParameterRange, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.param_range = param_range

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.caption = QLabel()
        layout.addWidget(self.caption)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, param_range.tick_count)
        self.slider.setSingleStep(1)
        self.slider.setValue(param_range.to_ticks(param_range.default))
        self.slider.valueChanged.connect(self._on_ticks_changed)
        layout.addWidget(self.slider)

        self._update_caption(param_range.default)

    def value(self) -> float:
        return self.param_range.from_ticks(self.slider.value())

    def set_value(self, value: float) -> None:
        """Move the slider without emitting ``value_changed``."""
        self.slider.blockSignals(True)
        self.slider.setValue(self.param_range.to_ticks(value))
        self.slider.blockSignals(False)
        self._update_caption(value)

    def _on_ticks_changed(self, ticks: int) -> None:
        value = self.param_range.from_ticks(ticks)
        self._update_caption(value)
        self.value_changed.emit(self.param_range.name, value)

    def _update_caption(self, value: float) -> None:
        self.caption.setText(self.param_range.display(value))


class ParameterPanel(QGroupBox):
    """Sliders for the inputs that are set directly (Δπ, Pe, A)."""
    value_changed = Signal(str, float)

    def __init__(self, names: Iterable[str] = DIRECT_INPUTS, parent: QWidget | None = None) -> None:
        super().__init__("Parameters", parent)
        layout = QVBoxLayout(self)

        self.sliders: Dict[str, ParameterSlider] = {}
        for name in names:
            slider = ParameterSlider(get_range(name))
            slider.value_changed.connect(self.value_changed)
            layout.addWidget(slider)
            self.sliders[name] = slider

    def sync(self, parameters: Parameters) -> None:
        for name, slider in self.sliders.items():
            slider.set_value(getattr(parameters, name))
