"""
Filtration Parameters
=====================
Input parameters of the Starling filtration relation and its derived outputs.

    J = Pe * (ΔP - Δπ)      filtration rate across the membrane
    q = J * A               total fluid flow

Classes:
    Parameters: Immutable snapshot of the four inputs.
    DerivedOutput: The (J, q) pair computed from a Parameters snapshot.
    ParameterRange: Host contract (bounds, step, default) of one input.
"""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Dict


def quantize(value: float, step: float) -> float:
    """
    Round ``value`` to the nearest multiple of ``step``.

    Halves are rounded away from zero, so 0.25 with step 0.1 gives 0.3.
    The result is produced by division when ``1 / step`` is integral, which
    keeps values like 25.0 exact instead of 25.000000000000004.
    """
    if step <= 0:
        raise ValueError(f"Quantization step must be positive, got {step}.")
    inv = 1.0 / step
    n = math.copysign(math.floor(abs(value) * inv + 0.5), value)
    if abs(inv - round(inv)) < 1e-9:
        return n / round(inv)
    return n * step


def filtration_rate(pe: float, delta_p: float, delta_pi: float) -> float:
    """J = Pe * (ΔP - Δπ). Zero exactly when ``delta_p == delta_pi``."""
    return pe * (delta_p - delta_pi)


@dataclass(frozen=True)
class Parameters:
    """The four inputs of the filtration view."""
    delta_p: float = 20.0   # hydrostatic pressure gradient [mmHg]
    delta_pi: float = 10.0  # oncotic pressure gradient [mmHg]
    Pe: float = 1.0         # hydraulic permeability
    A: float = 10.0         # membrane area [cm²]

    def replace(self, name: str, value: float) -> Parameters:
        """Return a copy with a single parameter changed."""
        get_range(name)
        return dataclasses.replace(self, **{name: float(value)})

    def as_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class DerivedOutput:
    J: float  # filtration rate
    q: float  # total flow

    def format_J(self) -> str:
        return f"{self.J:.2f}"

    def format_q(self) -> str:
        return f"{self.q:.2f}"


def compute_derived(parameters: Parameters) -> DerivedOutput:
    """Evaluate J and q. Cheap enough that callers never cache the result."""
    j = filtration_rate(parameters.Pe, parameters.delta_p, parameters.delta_pi)
    return DerivedOutput(J=j, q=j * parameters.A)


@dataclass(frozen=True)
class ParameterRange:
    """
    Bounds and step of one input as offered by the host UI.

    Integer slider widgets work in "ticks": tick 0 is ``minimum`` and every
    tick adds one ``step``.
    """
    name: str
    label: str
    unit: str
    minimum: float
    maximum: float
    step: float
    default: float

    @property
    def tick_count(self) -> int:
        return int(round((self.maximum - self.minimum) / self.step))

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, float(value)))

    def quantize(self, value: float) -> float:
        return self.clamp(quantize(self.clamp(value), self.step))

    def to_ticks(self, value: float) -> int:
        return int(round((self.clamp(value) - self.minimum) / self.step))

    def from_ticks(self, ticks: int) -> float:
        return self.quantize(self.minimum + ticks * self.step)

    def display(self, value: float) -> str:
        """Slider caption, e.g. 'Membrane Area (A): 10 cm²'."""
        text = f"{self.label}: {value:g}"
        return f"{text} {self.unit}" if self.unit else text


_DEFAULTS = Parameters()

PARAMETER_RANGES: Dict[str, ParameterRange] = {
    "delta_p": ParameterRange(
        name="delta_p",
        label="Hydrostatic Pressure Gradient (ΔP)",
        unit="mmHg",
        minimum=0.0,
        maximum=50.0,
        step=0.1,
        default=_DEFAULTS.delta_p,
    ),
    "delta_pi": ParameterRange(
        name="delta_pi",
        label="Oncotic Pressure Gradient (Δπ)",
        unit="mmHg",
        minimum=0.0,
        maximum=30.0,
        step=0.1,
        default=_DEFAULTS.delta_pi,
    ),
    "Pe": ParameterRange(
        name="Pe",
        label="Hydraulic Permeability (Pe)",
        unit="",
        minimum=0.1,
        maximum=5.0,
        step=0.1,
        default=_DEFAULTS.Pe,
    ),
    "A": ParameterRange(
        name="A",
        label="Membrane Area (A)",
        unit="cm²",
        minimum=1.0,
        maximum=50.0,
        step=1.0,
        default=_DEFAULTS.A,
    ),
}


def get_range(name: str) -> ParameterRange:
    try:
        return PARAMETER_RANGES[name]
    except KeyError:
        raise ValueError(f"Unknown parameter '{name}'.") from None
