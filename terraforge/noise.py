"""Height and radius noise functions."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Iterable

Vec2 = tuple[float, float]


def _vec2(values: Iterable[float]) -> Vec2:
    result = tuple(float(v) for v in values)
    if len(result) != 2:
        raise ValueError(f"expected 2 components, got {len(result)}")
    return result  # type: ignore[return-value]


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation of ``x`` between ``edge0`` and ``edge1``, clamped to [0, 1]."""
    t = (x - edge0) / (edge1 - edge0)
    t = min(max(t, 0.0), 1.0)
    return t * t * (3.0 - 2.0 * t)


class NoiseFunction(ABC):
    """A source of noise values sampled at world coordinates ``(x, z)``."""

    @abstractmethod
    def noise(self, x: float, z: float) -> float:
        """Raw noise value at ``(x, z)``."""

    def calculate_height(self, x: float, z: float, max_height: float = 128) -> float:
        """Noise at ``(x, z)`` scaled by ``max_height``."""
        return self.noise(x, z) * max_height

    def calculate_radius(self, x: float, z: float, max_radius: float = 3) -> float:
        """Noise at ``(x, z)`` scaled by ``max_radius``."""
        return self.noise(x, z) * max_radius


class RandomNoise(NoiseFunction):
    """Uniform random integers in ``[0, range_]``, independent of position."""

    def __init__(self, seed: int, range_: int) -> None:
        self._rng = random.Random(seed)
        self.update_values(range_)

    def update_values(self, range_: int) -> None:
        """Change the upper bound of the generated values."""
        range_ = int(range_)
        if range_ < 0:
            raise ValueError("range must not be negative")
        self.range = range_

    def noise(self, x: float = 0.0, z: float = 0.0) -> float:
        return float(self._rng.randint(0, self.range))

    def calculate_height(self, x: float, z: float, max_height: float = 1) -> float:
        return self.noise(x, z) * max_height


class SmoothHill(NoiseFunction):
    """A single round hill whose height falls off smoothly with distance from its centre."""

    def __init__(
        self,
        seed: int = 21,
        hill_center: Iterable[float] = (250.0, -250.0),
        hill_radius: float = 250.0,
        hill_height: float = 128.0,
    ) -> None:
        self.seed = seed
        self.update_values(hill_center, hill_radius, hill_height)

    def update_values(
        self,
        hill_center: Iterable[float] = (250.0, -250.0),
        hill_radius: float = 250.0,
        hill_height: float = 128.0,
    ) -> None:
        """Change the hill's centre, radius and height (the height is stored as an integer)."""
        self.hill_center = _vec2(hill_center)
        self.hill_radius = float(hill_radius)
        self.hill_height = int(hill_height)

    def noise(self, x: float, z: float) -> float:
        cx, cz = self.hill_center
        distance = math.hypot(cx - x, cz - z)
        factor = smoothstep(0.0, self.hill_radius, distance)
        return self.hill_height * (1.0 - factor)

    def calculate_height(self, x: float, z: float, max_height: float = 1) -> float:
        return self.noise(x, z) * max_height