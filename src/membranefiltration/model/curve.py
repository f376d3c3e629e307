from __future__ import annotations

from typing import Iterator, Tuple, TYPE_CHECKING

import numpy as np

from membranefiltration.config import MAX_X, SAMPLE_STEP
from membranefiltration.model.parameters import Parameters, filtration_rate

if TYPE_CHECKING:
    import numpy.typing as npt


class CurveSampler:
    """
    Samples J(x) = Pe * (x - Δπ) over [0, max_x] at a fixed step.

    Iterating yields (x, J) pairs lazily; every iteration starts over, so the
    same sampler feeds both the range computation and the polyline.
    """

    def __init__(self, parameters: Parameters, max_x: float = MAX_X, step: float = SAMPLE_STEP) -> None:
        self.pe = parameters.Pe
        self.delta_pi = parameters.delta_pi
        self.max_x = max_x
        self.step = step
        self._count = int(np.floor(max_x / step + 1e-9)) + 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for i in range(self._count):
            x = i * self.step
            yield x, filtration_rate(self.pe, x, self.delta_pi)

    def x_values(self) -> npt.NDArray[np.float64]:
        return np.arange(self._count, dtype=np.float64) * self.step

    def j_values(self) -> npt.NDArray[np.float64]:
        return self.pe * (self.x_values() - self.delta_pi)
