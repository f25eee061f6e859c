"""Poisson disc sampling with a per-point radius taken from a noise function."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from terraforge.poisson import box_circle_collision

Vec2 = tuple[float, float]


class RadiusNoise(Protocol):
    """Anything that yields a radius factor at a world position."""

    def calculate_radius(self, x: float, z: float) -> float: ...


def _vec2(values: Iterable[float]) -> Vec2:
    result = tuple(float(v) for v in values)
    if len(result) != 2:
        raise ValueError(f"expected 2 components, got {len(result)}")
    return result  # type: ignore[return-value]


@dataclass
class _Point:
    position: Vec2
    radius: float


@dataclass
class _Cell:
    position: Vec2
    points: list[_Point] = field(default_factory=list)


class VariablePoissonDiscSampler:
    """Places points whose spacing follows a noise function.

    Each point's radius is ``min_radius + noise * (max_radius - min_radius)``,
    where ``noise`` is ``radius_noise.calculate_radius(x, z)`` at the point.
    Every call of :meth:`generate_points` starts from the same seed.
    """

    def __init__(self, radius_noise: RadiusNoise, seed: int = 21) -> None:
        self.radius_noise = radius_noise
        self.seed = seed

    def _radius_at(self, position: Vec2, min_radius: float, max_radius: float) -> float:
        factor = self.radius_noise.calculate_radius(position[0], position[1])
        return min_radius + factor * (max_radius - min_radius)

    @staticmethod
    def _inside(point: Vec2, start: Vec2, size: Vec2) -> bool:
        return (
            start[0] <= point[0] < start[0] + size[0]
            and start[1] <= point[1] < start[1] + size[1]
        )

    @staticmethod
    def _cell_index(point: Vec2, start: Vec2, cell_size: float, width: int, height: int) -> tuple[int, int]:
        cx = min(int((point[0] - start[0]) / cell_size), width - 1)
        cy = min(int((point[1] - start[1]) / cell_size), height - 1)
        return cx, cy

    def _is_valid(
        self,
        candidate: Vec2,
        radius: float,
        start: Vec2,
        size: Vec2,
        cell_size: float,
        grid: list[list[_Cell]],
    ) -> bool:
        """A candidate is rejected when its circle reaches a nearby cell that already holds a point."""
        if not self._inside(candidate, start, size):
            return False
        width, height = len(grid), len(grid[0])
        cell_x, cell_y = self._cell_index(candidate, start, cell_size, width, height)
        for column in grid[max(0, cell_x - 2):min(cell_x + 2, width - 1) + 1]:
            for cell in column[max(0, cell_y - 2):min(cell_y + 2, height - 1) + 1]:
                if not box_circle_collision(cell.position, cell_size, cell_size, candidate, radius):
                    continue
                if cell.points:
                    return False
        return True

    def generate_points(
        self,
        min_radius: float,
        max_radius: float,
        region_start: Iterable[float],
        region_size: Iterable[float],
        samples_before_rejection: int = 4,
    ) -> list[Vec2]:
        """Sample points inside the region, growing outward from its centre.

        The centre only seeds the sampling and is not returned; an unlucky
        centre can leave the result empty.
        """
        if min_radius > max_radius:
            raise ValueError("minimum radius is larger than maximum radius")
        if max_radius <= 0:
            raise ValueError("maximum radius must be positive")
        start = _vec2(region_start)
        size = _vec2(region_size)
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError("region size must be positive")

        cell_size = max_radius / math.sqrt(2.0)
        width = math.ceil(size[0] / cell_size)
        height = math.ceil(size[1] / cell_size)
        grid = [
            [_Cell((start[0] + x * cell_size, start[1] + y * cell_size)) for y in range(height)]
            for x in range(width)
        ]

        middle_pos = (start[0] + size[0] / 2.0, start[1] + size[1] / 2.0)
        middle = _Point(middle_pos, self._radius_at(middle_pos, min_radius, max_radius))
        mx, my = self._cell_index(middle_pos, start, cell_size, width, height)
        grid[mx][my].points.append(middle)

        rng = random.Random(self.seed)
        points: list[_Point] = []
        spawn_points: list[_Point] = [middle]

        while spawn_points:
            spawn_index = int(rng.random() * len(spawn_points))
            spawn = spawn_points[spawn_index]
            for _ in range(samples_before_rejection):
                angle = rng.random() * 2.0 * math.pi
                distance = rng.random() * spawn.radius + spawn.radius
                candidate = (
                    spawn.position[0] + math.sin(angle) * distance,
                    spawn.position[1] + math.cos(angle) * distance,
                )
                radius = self._radius_at(candidate, min_radius, max_radius)
                if self._is_valid(candidate, radius, start, size, cell_size, grid):
                    point = _Point(candidate, radius)
                    points.append(point)
                    spawn_points.append(point)
                    cx, cy = self._cell_index(candidate, start, cell_size, width, height)
                    grid[cx][cy].points.append(point)
                    break
            else:
                del spawn_points[spawn_index]

        return [point.position for point in points]