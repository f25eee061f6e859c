"""Simple 2D collision tests and uniform Poisson disc sampling."""

from __future__ import annotations

import math
import random
from typing import Iterable, Sequence

Vec2 = tuple[float, float]


def _vec2(values: Iterable[float]) -> Vec2:
    result = tuple(float(v) for v in values)
    if len(result) != 2:
        raise ValueError(f"expected 2 components, got {len(result)}")
    return result  # type: ignore[return-value]


def box_circle_collision(
    box_pos: Iterable[float],
    box_width: float,
    box_height: float,
    circle_pos: Iterable[float],
    circle_radius: float,
) -> bool:
    """Whether a circle touches the axis-aligned box starting at ``box_pos``."""
    bx, by = _vec2(box_pos)
    cx, cy = _vec2(circle_pos)
    closest_x = max(bx, min(cx, bx + box_width))
    closest_y = max(by, min(cy, by + box_height))
    return math.hypot(closest_x - cx, closest_y - cy) <= circle_radius


def circle_circle_collision(
    pos1: Iterable[float], radius1: float, pos2: Iterable[float], radius2: float
) -> bool:
    """Whether two circles touch or overlap."""
    x1, y1 = _vec2(pos1)
    x2, y2 = _vec2(pos2)
    return math.hypot(x1 - x2, y1 - y2) <= radius1 + radius2


def _inside(point: Vec2, start: Vec2, size: Vec2) -> bool:
    return start[0] <= point[0] < start[0] + size[0] and start[1] <= point[1] < start[1] + size[1]


def _cell_of(point: Vec2, start: Vec2, cell_size: float, width: int, height: int) -> tuple[int, int]:
    cx = min(int((point[0] - start[0]) / cell_size), width - 1)
    cy = min(int((point[1] - start[1]) / cell_size), height - 1)
    return cx, cy


class PoissonDiscSampler:
    """Places points in a rectangle so that no two are closer than a fixed radius.

    Every call of :meth:`generate_points` starts from the same seed, so equal
    arguments give equal results.
    """

    def __init__(self, seed: int = 21) -> None:
        self.seed = seed

    def _is_valid(
        self,
        candidate: Vec2,
        start: Vec2,
        size: Vec2,
        cell_size: float,
        radius: float,
        points: Sequence[Vec2],
        grid: list[list[int | None]],
    ) -> bool:
        if not _inside(candidate, start, size):
            return False
        width, height = len(grid), len(grid[0])
        cell_x, cell_y = _cell_of(candidate, start, cell_size, width, height)
        for x in range(max(0, cell_x - 2), min(cell_x + 2, width - 1) + 1):
            for y in range(max(0, cell_y - 2), min(cell_y + 2, height - 1) + 1):
                index = grid[x][y]
                if index is None:
                    continue
                px, py = points[index]
                if math.hypot(candidate[0] - px, candidate[1] - py) < radius:
                    return False
        return True

    def generate_points(
        self,
        radius: float,
        region_start: Iterable[float],
        region_size: Iterable[float],
        samples_before_rejection: int = 30,
    ) -> list[Vec2]:
        """Sample points at least ``radius`` apart inside the region.

        Sampling grows outward from the region's centre; the centre itself is
        used only as a starting spawn point and is not part of the result.
        """
        start = _vec2(region_start)
        size = _vec2(region_size)
        if radius <= 0:
            raise ValueError("radius must be positive")
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError("region size must be positive")

        cell_size = radius / math.sqrt(2.0)
        width = math.ceil(size[0] / cell_size)
        height = math.ceil(size[1] / cell_size)
        grid: list[list[int | None]] = [[None] * height for _ in range(width)]

        rng = random.Random(self.seed)
        points: list[Vec2] = []
        spawn_points: list[Vec2] = [(start[0] + size[0] / 2.0, start[1] + size[1] / 2.0)]

        while spawn_points:
            spawn_index = int(rng.random() * len(spawn_points))
            sx, sy = spawn_points[spawn_index]
            for _ in range(samples_before_rejection):
                angle = rng.random() * 2.0 * math.pi
                distance = rng.random() * radius + radius
                candidate = (sx + math.sin(angle) * distance, sy + math.cos(angle) * distance)
                if self._is_valid(candidate, start, size, cell_size, radius, points, grid):
                    points.append(candidate)
                    spawn_points.append(candidate)
                    cx, cy = _cell_of(candidate, start, cell_size, width, height)
                    grid[cx][cy] = len(points) - 1
                    break
            else:
                del spawn_points[spawn_index]

        return points