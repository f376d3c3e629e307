"""
Renderers
=========
Full-surface redraws of the filtration plot and the ΔP slider track.

Both renderers take the same ``Frame``: the Scale inside it is computed once
per draw cycle, so a ΔP value lands on the same pixel column on both surfaces.
Each call clears its whole surface first; nothing from a previous frame
survives.
"""
from __future__ import annotations

from dataclasses import dataclass

from membranefiltration.config import (
    AXIS_COLOR,
    CURVE_COLOR,
    EQUILIBRIUM_COLOR,
    EQUILIBRIUM_DASH,
    EQUILIBRIUM_LABEL_COLOR,
    FONT_SIZE,
    GRID_COLOR,
    LABEL_COLOR,
    LABEL_INSET,
    MAX_X,
    POINT_COLOR,
    POINT_RADIUS,
    THUMB_RADIUS,
    TITLE_COLOR,
    TRACK_COLOR,
)
from membranefiltration.model.curve import CurveSampler
from membranefiltration.model.parameters import DerivedOutput, Parameters, compute_derived
from membranefiltration.model.scale import Scale, compute_scale
from membranefiltration.view.surface import Surface, TextAlign

EQUILIBRIUM_LABEL = "Equilibrium (J=0)"
X_AXIS_TITLE = "Hydrostatic Pressure Gradient (ΔP) mmHg"
Y_AXIS_TITLE = "Filtration Rate (J)"


@dataclass(frozen=True)
class Frame:
    """Everything one draw cycle needs, shared by both surfaces."""
    scale: Scale
    parameters: Parameters
    derived: DerivedOutput
    curve: CurveSampler


def build_frame(parameters: Parameters, width: float, height: float, max_x: float = MAX_X) -> Frame:
    curve = CurveSampler(parameters, max_x=max_x)
    scale = compute_scale(parameters, width, height, max_x=max_x, sampler=curve)
    return Frame(scale=scale, parameters=parameters, derived=compute_derived(parameters), curve=curve)


def render_plot(surface: Surface, frame: Frame) -> None:
    """Redraw the primary surface: axes, grid, equilibrium, curve, operating point."""
    scale = frame.scale
    params = frame.parameters
    width, height = surface.width, surface.height

    surface.clear()

    # Axes: J = 0 line and x = 0
    surface.set_pen(AXIS_COLOR, 1.0)
    surface.draw_line(0.0, scale.y_offset, width, scale.y_offset)
    surface.draw_line(0.0, 0.0, 0.0, height)

    # Vertical gridlines with ΔP labels
    surface.set_pen(GRID_COLOR, 0.5)
    for x in scale.x_ticks():
        px = scale.pixel_x(x)
        surface.draw_line(px, 0.0, px, height)
        surface.draw_text(px, scale.y_offset + 15, f"{x:g}", LABEL_COLOR, TextAlign.CENTER)

    # J labels, skipped when too close to the top/bottom edge
    for j in scale.j_ticks():
        label_y = scale.pixel_y(j)
        if LABEL_INSET <= label_y <= height - LABEL_INSET:
            surface.draw_text(20.0, label_y + 4, f"{j:.1f}", LABEL_COLOR, TextAlign.RIGHT)

    # J(Δπ) = 0 by construction
    eq_x = scale.pixel_x(params.delta_pi)
    surface.set_pen(EQUILIBRIUM_COLOR, 1.0, dash=EQUILIBRIUM_DASH)
    surface.draw_line(eq_x, 0.0, eq_x, height)
    surface.draw_text(eq_x, height - 10, EQUILIBRIUM_LABEL, EQUILIBRIUM_LABEL_COLOR, TextAlign.CENTER)

    surface.set_pen(CURVE_COLOR, 2.0)
    surface.draw_polyline((scale.pixel_x(x), scale.pixel_y(j)) for x, j in frame.curve)

    surface.fill_circle(
        scale.pixel_x(params.delta_p),
        scale.pixel_y(frame.derived.J),
        POINT_RADIUS,
        POINT_COLOR,
    )

    surface.draw_text(width / 2.0, height - 5, X_AXIS_TITLE, TITLE_COLOR, TextAlign.CENTER, FONT_SIZE)

    surface.save()
    surface.translate(15.0, height / 2.0)
    surface.rotate(-90.0)
    surface.draw_text(0.0, 0.0, Y_AXIS_TITLE, TITLE_COLOR, TextAlign.CENTER, FONT_SIZE)
    surface.restore()


def render_slider(surface: Surface, frame: Frame) -> None:
    """Redraw the ΔP track and thumb using the primary surface's x scale."""
    scale = frame.scale
    width, height = surface.width, surface.height
    mid = height / 2.0

    surface.clear()

    surface.set_pen(TRACK_COLOR, 2.0)
    surface.draw_line(0.0, mid, width, mid)

    surface.fill_circle(scale.pixel_x(frame.parameters.delta_p), mid, THUMB_RADIUS, POINT_COLOR)

    for x in scale.x_ticks():
        surface.draw_text(scale.pixel_x(x), height - 5, f"{x:g}", LABEL_COLOR, TextAlign.CENTER)
