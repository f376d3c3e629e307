"""
Drawing Surface
===============
The minimal 2D raster API the renderers draw against.

Why is this file needed?
------------------------
1. Testability: Renderers only know the ``Surface`` protocol, so they can be
   exercised against an in-memory recorder without a display.
2. Decoupling: ``QPainterSurface`` is the only place that talks to QPainter.

Coordinates are pixels with the origin at the top-left corner; text ``y`` is
the baseline and ``align`` positions the text horizontally relative to ``x``.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFontMetricsF, QPainter, QPen, QPolygonF

from membranefiltration.config import BACKGROUND, LABEL_FONT_SIZE, RGBA


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Surface(Protocol):
    width: float
    height: float

    def clear(self) -> None: ...
    def set_pen(self, color: RGBA, width: float, dash: Optional[Sequence[float]] = None) -> None: ...
    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None: ...
    def draw_polyline(self, points: Iterable[Tuple[float, float]]) -> None: ...
    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None: ...
    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        color: RGBA,
        align: TextAlign = TextAlign.LEFT,
        font_size: Optional[int] = None,
    ) -> None: ...
    def save(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def rotate(self, degrees: float) -> None: ...
    def restore(self) -> None: ...


class QPainterSurface:
    """Surface backed by an active QPainter on a widget or pixmap."""

    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self.width = float(width)
        self.height = float(height)
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def clear(self) -> None:
        self.painter.save()
        self.painter.resetTransform()
        self.painter.fillRect(QRectF(0.0, 0.0, self.width, self.height), QColor(*BACKGROUND))
        self.painter.restore()

    def set_pen(self, color: RGBA, width: float, dash: Optional[Sequence[float]] = None) -> None:
        pen = QPen(QColor(*color))
        pen.setWidthF(width)
        if dash:
            # Qt dash lengths are in units of the pen width
            unit = max(width, 1e-6)
            pen.setDashPattern([d / unit for d in dash])
        self.painter.setPen(pen)

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))

    def draw_polyline(self, points: Iterable[Tuple[float, float]]) -> None:
        polygon = QPolygonF([QPointF(x, y) for x, y in points])
        if polygon.size() > 1:
            self.painter.drawPolyline(polygon)

    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None:
        self.painter.save()
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QColor(*color))
        self.painter.drawEllipse(QPointF(cx, cy), radius, radius)
        self.painter.restore()

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        color: RGBA,
        align: TextAlign = TextAlign.LEFT,
        font_size: Optional[int] = None,
    ) -> None:
        self.painter.save()
        font = self.painter.font()
        font.setPixelSize(font_size or LABEL_FONT_SIZE)
        self.painter.setFont(font)
        self.painter.setPen(QColor(*color))

        advance = QFontMetricsF(font).horizontalAdvance(text)
        if align is TextAlign.CENTER:
            x -= advance / 2.0
        elif align is TextAlign.RIGHT:
            x -= advance

        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()

    def save(self) -> None:
        self.painter.save()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def rotate(self, degrees: float) -> None:
        self.painter.rotate(degrees)

    def restore(self) -> None:
        self.painter.restore()
