from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from membranefiltration.model.parameters import (
    DerivedOutput,
    Parameters,
    compute_derived,
    get_range,
)

logger = logging.getLogger(__name__)


class ParameterStore(QObject):
    """
    Central state store holding the four filtration inputs.

    Every write emits ``parameters_changed`` synchronously; listeners
    recompute and redraw before the setter returns. Derived outputs are
    evaluated on access and never stored.
    """
    parameters_changed = Signal(object)

    def __init__(self, parameters: Parameters | None = None) -> None:
        super().__init__()
        self._parameters = parameters or Parameters()

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def derived(self) -> DerivedOutput:
        return compute_derived(self._parameters)

    def value(self, name: str) -> float:
        get_range(name)
        return getattr(self._parameters, name)

    def set_value(self, name: str, value: float) -> None:
        """Write one parameter, clamped into its host range."""
        param_range = get_range(name)
        clamped = param_range.clamp(value)
        if clamped != value:
            logger.debug("Clamped %s from %s to %s", name, value, clamped)
        self._parameters = self._parameters.replace(name, clamped)
        self.parameters_changed.emit(self._parameters)

    def set_parameters(self, parameters: Parameters) -> None:
        values = {
            name: get_range(name).clamp(value)
            for name, value in parameters.as_dict().items()
        }
        self._parameters = Parameters(**values)
        self.parameters_changed.emit(self._parameters)

    def reset(self) -> None:
        """Restore the session defaults."""
        self._parameters = Parameters()
        self.parameters_changed.emit(self._parameters)
        logger.info("Parameters have been reset.")
