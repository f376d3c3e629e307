import numpy as np

from membranefiltration.model.curve import CurveSampler
from membranefiltration.model.parameters import Parameters


def test_samples_cover_domain():
    sampler = CurveSampler(Parameters())
    points = list(sampler)
    assert len(points) == len(sampler) == 101
    assert points[0] == (0.0, -10.0)
    assert points[-1] == (50.0, 40.0)
    assert points[1][0] == 0.5


def test_restartable():
    sampler = CurveSampler(Parameters(Pe=2.0))
    assert list(sampler) == list(sampler)


def test_j_values_match_iteration():
    sampler = CurveSampler(Parameters(delta_pi=7.3, Pe=0.4))
    np.testing.assert_allclose(sampler.j_values(), [j for _, j in sampler])


def test_passes_through_zero_at_oncotic_pressure():
    sampler = CurveSampler(Parameters(delta_pi=12.5, Pe=3.0))
    assert dict(sampler)[12.5] == 0.0
