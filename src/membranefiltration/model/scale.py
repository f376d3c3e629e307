"""
Scale Model
===========
Mapping between the ΔP/J domain and the pixel space of a drawing surface.

Why is this file needed?
------------------------
The primary plot and the slider track are two separate surfaces that must
place a given ΔP at the same pixel column. A single Scale value is computed
once per draw cycle and handed to both renderers and to the drag decoding.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from membranefiltration.config import (
    GRID_STEP,
    J_LABEL_DIVISIONS,
    J_LABEL_HALF_COUNT,
    J_MARGIN,
    J_PADDING,
    J_RANGE_FLOOR,
    MAX_X,
)
from membranefiltration.model.curve import CurveSampler
from membranefiltration.model.parameters import Parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scale:
    x_scale: float
    j_scale: float
    y_offset: float
    j_range: float
    max_x: float
    width: float
    height: float

    def pixel_x(self, x: float) -> float:
        return x * self.x_scale

    def pixel_y(self, j: float) -> float:
        return self.y_offset - j * self.j_scale

    def domain_x(self, px: float) -> float:
        """Inverse of ``pixel_x``, clamped to [0, max_x]."""
        return max(0.0, min(self.max_x, px / self.x_scale))

    def x_ticks(self, step: float = GRID_STEP) -> List[float]:
        """Domain values of the vertical gridlines (0, 10, ..., max_x)."""
        count = int(np.floor(self.max_x / step + 1e-9))
        return [i * step for i in range(count + 1)]

    def j_ticks(self) -> List[float]:
        """J values of the y-axis labels, symmetric around zero."""
        j_step = self.j_range / J_LABEL_DIVISIONS
        return [i * j_step for i in range(-J_LABEL_HALF_COUNT, J_LABEL_HALF_COUNT + 1)]


def compute_j_range(sampler: CurveSampler) -> float:
    """
    Half-height of the visible J window.

    Falls back to J_RANGE_FLOOR when the whole curve is zero (Pe == 0), which
    would otherwise give a zero-size scale.
    """
    j_values = sampler.j_values()
    max_j = float(np.max(j_values)) * J_MARGIN
    min_j = float(np.min(j_values)) * J_MARGIN
    j_range = max(abs(max_j), abs(min_j)) * J_PADDING
    if not j_range > 0.0:
        logger.debug("Degenerate J range, using floor %g", J_RANGE_FLOOR)
        return J_RANGE_FLOOR
    return j_range


def compute_scale(
    parameters: Parameters,
    width: float,
    height: float,
    max_x: float = MAX_X,
    sampler: Optional[CurveSampler] = None,
) -> Scale:
    """
    Derive the Scale for a surface of ``width`` x ``height`` pixels.

    Args:
        parameters: Current inputs; J range depends on Pe and Δπ.
        width: Pixel width of the primary surface.
        height: Pixel height of the primary surface.
        max_x: Upper bound of the ΔP domain.
        sampler: Optional pre-built sampler for the same parameters.

    Raises:
        ValueError: If ``width`` is not positive.
    """
    if width <= 0:
        raise ValueError(f"Surface width must be positive, got {width}.")
    if sampler is None:
        sampler = CurveSampler(parameters, max_x=max_x)

    j_range = compute_j_range(sampler)
    return Scale(
        x_scale=width / max_x,
        j_scale=height / (2.0 * j_range),
        y_offset=height / 2.0,
        j_range=j_range,
        max_x=max_x,
        width=float(width),
        height=float(height),
    )
