import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from membranefiltration.view.surface import TextAlign  # noqa: E402


class RecordingSurface:
    """In-memory Surface that records every call as (op, *args)."""

    def __init__(self, width: float = 800.0, height: float = 300.0) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []
        self.depth = 0

    def clear(self):
        self.calls.append(("clear",))

    def set_pen(self, color, width, dash=None):
        self.calls.append(("set_pen", color, width, tuple(dash) if dash else None))

    def draw_line(self, x0, y0, x1, y1):
        self.calls.append(("line", x0, y0, x1, y1))

    def draw_polyline(self, points):
        self.calls.append(("polyline", list(points)))

    def fill_circle(self, cx, cy, radius, color):
        self.calls.append(("circle", cx, cy, radius, color))

    def draw_text(self, x, y, text, color, align=TextAlign.LEFT, font_size=None):
        self.calls.append(("text", x, y, text, align))

    def save(self):
        self.depth += 1
        self.calls.append(("save",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def rotate(self, degrees):
        self.calls.append(("rotate", degrees))

    def restore(self):
        self.depth -= 1
        self.calls.append(("restore",))

    def ops(self, name):
        return [c for c in self.calls if c[0] == name]

    def texts(self):
        return {c[3]: c for c in self.ops("text")}


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def slider_surface():
    return RecordingSurface(800.0, 40.0)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
