import itertools
import math

import pytest

from terraforge.poisson import PoissonDiscSampler, box_circle_collision, circle_circle_collision


def test_box_circle_inside():
    assert box_circle_collision((0, 0), 10, 10, (5, 5), 1)


def test_box_circle_far():
    assert not box_circle_collision((0, 0), 10, 10, (20, 20), 1)


def test_box_circle_touching_edge():
    assert box_circle_collision((0, 0), 10, 10, (12, 5), 2)
    assert not box_circle_collision((0, 0), 10, 10, (12.5, 5), 2)


def test_circle_circle_touching():
    assert circle_circle_collision((0, 0), 1, (3, 4), 4)
    assert not circle_circle_collision((0, 0), 1, (3, 4), 3.9)


def test_circle_circle_symmetric():
    assert circle_circle_collision((1, 1), 2, (2, 2), 0.1) == circle_circle_collision((2, 2), 0.1, (1, 1), 2)


@pytest.fixture
def points():
    return PoissonDiscSampler().generate_points(5.0, (10.0, -40.0), (50.0, 50.0))


def test_points_inside_region(points):
    assert points
    assert all(10.0 <= x < 60.0 and -40.0 <= y < 10.0 for x, y in points)


def test_points_respect_radius(points):
    for (ax, ay), (bx, by) in itertools.combinations(points, 2):
        assert math.hypot(ax - bx, ay - by) >= 5.0 - 1e-9


def test_generation_is_deterministic(points):
    again = PoissonDiscSampler().generate_points(5.0, (10.0, -40.0), (50.0, 50.0))
    assert again == points


def test_fills_region_reasonably():
    pts = PoissonDiscSampler(3).generate_points(2.0, (0, 0), (40, 40))
    # Maximal packing leaves no spot further than 2r from every point.
    assert len(pts) > 40


def test_invalid_radius():
    with pytest.raises(ValueError):
        PoissonDiscSampler().generate_points(0.0, (0, 0), (10, 10))


def test_invalid_region():
    with pytest.raises(ValueError):
        PoissonDiscSampler().generate_points(1.0, (0, 0), (0, 10))