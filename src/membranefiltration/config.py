"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
model, the renderers and the widgets.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (domain bounds, margins, colours)
   scattered throughout the code.
2. Synchrony: Both drawing surfaces and the drag decoding read the same domain
   bound and steps from here.

Exports:
    MAX_X (float): Upper bound of the plotted ΔP domain.
    SAMPLE_STEP (float): Step used when sampling the filtration curve.
    DRAG_STEP (float): Quantisation step of drag-decoded values.
"""
from typing import Tuple

RGBA = Tuple[int, int, int, int]

# Domain
MAX_X: float = 50.0
SAMPLE_STEP: float = 0.5
GRID_STEP: float = 10.0
DRAG_STEP: float = 0.1

# Vertical range margins: |J| extent * 1.1 (headroom) * 1.2 (padding)
J_MARGIN: float = 1.1
J_PADDING: float = 1.2
J_RANGE_FLOOR: float = 1e-6

# y-axis labels at i * jRange / J_LABEL_DIVISIONS, i in [-2, 2]
J_LABEL_DIVISIONS: int = 5
J_LABEL_HALF_COUNT: int = 2
LABEL_INSET: float = 10.0

# Surface sizes (width, height) in pixels
PLOT_SIZE: Tuple[int, int] = (800, 300)
SLIDER_SIZE: Tuple[int, int] = (800, 40)

# Palette
BACKGROUND: RGBA = (255, 255, 255, 255)
AXIS_COLOR: RGBA = (204, 204, 204, 255)
GRID_COLOR: RGBA = (238, 238, 238, 255)
LABEL_COLOR: RGBA = (102, 102, 102, 255)
EQUILIBRIUM_COLOR: RGBA = (100, 100, 100, 178)
EQUILIBRIUM_LABEL_COLOR: RGBA = (100, 100, 100, 229)
CURVE_COLOR: RGBA = (0, 0, 255, 255)
POINT_COLOR: RGBA = (255, 0, 0, 255)
TITLE_COLOR: RGBA = (0, 0, 0, 255)
TRACK_COLOR: RGBA = (170, 170, 170, 255)

FONT_SIZE: int = 12
LABEL_FONT_SIZE: int = 10
EQUILIBRIUM_DASH: Tuple[float, float] = (5.0, 3.0)
POINT_RADIUS: float = 5.0
THUMB_RADIUS: float = 10.0
