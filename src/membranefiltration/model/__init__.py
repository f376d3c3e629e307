"""
The MODEL layer contains pure data structures and the filtration physics.
It has NO knowledge of the GUI (Qt) or of the drawing surfaces.
It deals with Parameters, derived outputs, curve sampling and scaling.
"""
from membranefiltration.model.parameters import (
    PARAMETER_RANGES,
    DerivedOutput,
    ParameterRange,
    Parameters,
    compute_derived,
    filtration_rate,
    get_range,
    quantize,
)
from membranefiltration.model.curve import CurveSampler
from membranefiltration.model.scale import Scale, compute_scale

__all__ = [
    "PARAMETER_RANGES",
    "CurveSampler",
    "DerivedOutput",
    "ParameterRange",
    "Parameters",
    "Scale",
    "compute_derived",
    "compute_scale",
    "filtration_rate",
    "get_range",
    "quantize",
]
