import pytest

from membranefiltration.config import EQUILIBRIUM_DASH, POINT_RADIUS, THUMB_RADIUS
from membranefiltration.model.parameters import Parameters
from membranefiltration.view.render import (
    EQUILIBRIUM_LABEL,
    X_AXIS_TITLE,
    Y_AXIS_TITLE,
    build_frame,
    render_plot,
    render_slider,
)
from membranefiltration.view.surface import TextAlign


@pytest.fixture
def frame():
    return build_frame(Parameters(), 800, 300)


def test_frame_contents(frame):
    assert frame.scale.x_scale == 16.0
    assert frame.derived.J == 10.0
    assert frame.derived.q == 100.0
    assert len(frame.curve) == 101


def test_plot_clears_first(surface, frame):
    render_plot(surface, frame)
    assert surface.calls[0] == ("clear",)
    assert surface.ops("clear") == [("clear",)]


def test_plot_redraw_is_idempotent(surface, frame):
    render_plot(surface, frame)
    first = list(surface.calls)
    surface.calls.clear()
    render_plot(surface, frame)
    assert surface.calls == first


def test_axes_and_grid(surface, frame):
    render_plot(surface, frame)
    lines = surface.ops("line")
    assert ("line", 0.0, 150.0, 800.0, 150.0) in lines
    assert ("line", 0.0, 0.0, 0.0, 300.0) in lines
    for x in (0, 10, 20, 30, 40, 50):
        px = x * 16.0
        assert ("line", px, 0.0, px, 300.0) in lines
        assert str(x) in surface.texts()


def test_equilibrium_marker(surface):
    frame = build_frame(Parameters(delta_pi=12.5, Pe=3.0), 800, 300)
    render_plot(surface, frame)
    eq_x = frame.scale.pixel_x(12.5)
    assert eq_x == 200.0
    dash_index = surface.calls.index(("set_pen", (100, 100, 100, 178), 1.0, EQUILIBRIUM_DASH))
    assert surface.calls[dash_index + 1] == ("line", eq_x, 0.0, eq_x, 300.0)
    label = surface.texts()[EQUILIBRIUM_LABEL]
    assert label[1] == eq_x
    assert label[4] is TextAlign.CENTER


def test_curve_and_operating_point(surface, frame):
    render_plot(surface, frame)
    (polyline,) = surface.ops("polyline")
    points = polyline[1]
    assert len(points) == 101
    assert points[0] == (0.0, frame.scale.pixel_y(-10.0))
    assert points[-1] == (800.0, frame.scale.pixel_y(40.0))

    (point,) = surface.ops("circle")
    assert point[1] == frame.scale.pixel_x(20.0)
    assert point[2] == frame.scale.pixel_y(10.0)
    assert point[3] == POINT_RADIUS


def test_j_labels_inside_surface(surface, frame):
    render_plot(surface, frame)
    labels = [c for c in surface.ops("text") if c[4] is TextAlign.RIGHT]
    assert len(labels) == 5
    assert "0.0" in [c[3] for c in labels]
    for _, x, y, _, _ in labels:
        assert x == 20.0
        assert 10 <= y - 4 <= 290


def test_axis_titles(surface, frame):
    render_plot(surface, frame)
    texts = surface.texts()
    assert texts[X_AXIS_TITLE][1:3] == (400.0, 295.0)
    rotated = surface.calls.index(("rotate", -90.0))
    assert surface.calls[rotated - 1] == ("translate", 15.0, 150.0)
    assert surface.calls[rotated + 1][3] == Y_AXIS_TITLE
    assert surface.depth == 0


def test_slider_thumb_matches_plot(surface, slider_surface):
    frame = build_frame(Parameters(delta_p=33.3), 800, 300)
    render_plot(surface, frame)
    render_slider(slider_surface, frame)

    plot_point = surface.ops("circle")[0]
    (thumb,) = slider_surface.ops("circle")
    assert thumb[1] == plot_point[1]
    assert thumb[2] == 20.0
    assert thumb[3] == THUMB_RADIUS


def test_slider_ticks_match_plot_ticks(surface, slider_surface, frame):
    render_plot(surface, frame)
    render_slider(slider_surface, frame)
    plot_ticks = {c[3]: c[1] for c in surface.ops("text") if c[2] == 150.0 + 15}
    slider_ticks = {c[3]: c[1] for c in slider_surface.ops("text")}
    assert slider_ticks == plot_ticks
    assert set(slider_ticks) == {"0", "10", "20", "30", "40", "50"}


def test_slider_track(slider_surface, frame):
    render_slider(slider_surface, frame)
    assert slider_surface.calls[0] == ("clear",)
    assert ("line", 0.0, 20.0, 800.0, 20.0) in slider_surface.ops("line")
