"""
Drag Controller
===============
Translates pointer press/move/release on the slider surface into ΔP updates.

States:
    IDLE      -> DRAGGING  on a press inside the slider surface
    DRAGGING  -> DRAGGING  on every move (decode, clamp, quantise, write)
    any       -> IDLE      on a release seen anywhere in the application
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

from membranefiltration.config import DRAG_STEP
from membranefiltration.model.parameters import quantize

if TYPE_CHECKING:
    from membranefiltration.model.scale import Scale

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragController:
    """
    Two-state machine bound to a single parameter writer.

    ``on_change`` receives the decoded ΔP; the store it writes to redraws
    synchronously, so the next event is only handled once both surfaces
    show the new value.
    """

    def __init__(self, on_change: Callable[[float], None], step: float = DRAG_STEP) -> None:
        self._on_change = on_change
        self._step = step
        self.state = DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def press(self, x: float, y: float, width: float, height: float) -> bool:
        """Start dragging if (x, y) lies inside a ``width`` x ``height`` surface."""
        if 0 <= x < width and 0 <= y < height:
            if not self.is_dragging:
                logger.debug("Drag started at x=%.1f", x)
            self.state = DragState.DRAGGING
            return True
        return False

    def move(self, x: float, scale: Scale) -> Optional[float]:
        """
        Decode a pointer x (relative to the slider origin) into ΔP.

        Returns the written value, or None when not dragging.
        """
        if not self.is_dragging:
            return None
        value = quantize(scale.domain_x(x), self._step)
        value = max(0.0, min(scale.max_x, value))
        self._on_change(value)
        return value

    def release(self) -> None:
        if self.is_dragging:
            logger.debug("Drag finished")
        self.state = DragState.IDLE
