"""
Canvas Widgets
Raster surfaces for the filtration plot and the ΔP slider track.
"""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from membranefiltration.config import PLOT_SIZE, SLIDER_SIZE
from membranefiltration.view.render import Frame, render_plot, render_slider
from membranefiltration.view.surface import QPainterSurface, Surface


class FrameCanvas(QWidget):
    """Paints the last Frame it was given with ``render``."""

    def __init__(
        self,
        render: Callable[[Surface, Frame], None],
        size_hint: tuple[int, int],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._render = render
        self._size_hint = QSize(*size_hint)
        self._frame: Optional[Frame] = None
        self.setMinimumSize(200, size_hint[1])
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

    def sizeHint(self) -> QSize:
        return self._size_hint

    def frame(self) -> Optional[Frame]:
        return self._frame

    def set_frame(self, frame: Frame) -> None:
        self._frame = frame

    def paintEvent(self, event: QPaintEvent) -> None:
        if self._frame is None:
            return
        painter = QPainter(self)
        try:
            self._render(QPainterSurface(painter, self.width(), self.height()), self._frame)
        finally:
            painter.end()


class PlotCanvas(FrameCanvas):
    resized = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(render_plot, PLOT_SIZE, parent)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.resized.emit()


class SliderCanvas(FrameCanvas):
    """
    ΔP track with a draggable thumb.

    Press and move positions are forwarded in widget-local pixels; the drag
    state itself lives in the DragController.
    """
    pressed = Signal(float, float)
    moved = Signal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(render_slider, SLIDER_SIZE, parent)
        self.setCursor(Qt.PointingHandCursor)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.pressed.emit(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.moved.emit(event.position().x())
        super().mouseMoveEvent(event)
