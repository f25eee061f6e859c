import itertools
import math

import pytest

from terraforge.noise import SmoothHill
from terraforge.variable_poisson import VariablePoissonDiscSampler


class ConstantNoise:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def calculate_radius(self, x, z, max_radius=3):
        self.calls.append((x, z))
        return self.value


def test_min_larger_than_max_raises():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.0))
    with pytest.raises(ValueError):
        sampler.generate_points(5, 2, (0, 0), (10, 10))


def test_empty_region_raises():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.0))
    with pytest.raises(ValueError):
        sampler.generate_points(1, 2, (0, 0), (0, 10))


def test_first_radius_sampled_at_region_centre():
    noise = ConstantNoise(0.0)
    VariablePoissonDiscSampler(noise).generate_points(1, 2, (0, 0), (20, 20))
    assert noise.calls[0] == (10.0, 10.0)


def test_points_inside_region_and_nonempty():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.0))
    points = sampler.generate_points(1, 2, (-5, 3), (20, 20), 30)
    assert len(points) > 0
    for x, y in points:
        assert -5 <= x < 15
        assert 3 <= y < 23


def test_points_spaced_by_at_least_min_radius():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.0))
    points = sampler.generate_points(1, 2, (0, 0), (20, 20), 30)
    centre = (10.0, 10.0)
    for p in points:
        assert math.dist(p, centre) > 1
    for a, b in itertools.combinations(points, 2):
        assert math.dist(a, b) > 1


def test_full_noise_spaces_by_max_radius():
    sampler = VariablePoissonDiscSampler(ConstantNoise(1.0))
    points = sampler.generate_points(1, 3, (0, 0), (40, 40), 30)
    for a, b in itertools.combinations(points, 2):
        assert math.dist(a, b) > 3


def test_deterministic_for_same_seed():
    hill = SmoothHill(hill_center=(10, 10), hill_radius=20, hill_height=1)
    first = VariablePoissonDiscSampler(hill, seed=5).generate_points(1, 2, (0, 0), (30, 30), 10)
    second = VariablePoissonDiscSampler(hill, seed=5).generate_points(1, 2, (0, 0), (30, 30), 10)
    assert first == second


def test_repeated_calls_give_same_result():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.5), seed=3)
    first = sampler.generate_points(1, 2, (0, 0), (25, 25), 10)
    second = sampler.generate_points(1, 2, (0, 0), (25, 25), 10)
    assert len(first) > 0
    assert len(second) == len(first)
    for a, b in zip(first, second):
        assert tuple(a) == tuple(b)
    for x, y in first:
        assert 0 <= x < 25
        assert 0 <= y < 25


def test_zero_samples_gives_no_points():
    sampler = VariablePoissonDiscSampler(ConstantNoise(0.0))
    assert sampler.generate_points(1, 2, (0, 0), (20, 20), 0) == []