"""A drawable model: a mesh with its transformation matrices."""

from __future__ import annotations

from typing import Any

import numpy as np

from terraforge.mesh import Mesh


def _as_matrix(value: Any) -> np.ndarray:
    matrix = np.array(value, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


class Model:
    """Mesh, texture and material together with a temporary and a base matrix.

    ``matrix`` holds temporary transformations such as animations; the base
    matrix holds the model's placement and is changed only through
    :meth:`apply_transformation`.
    """

    def __init__(self, mesh: Mesh | None = None) -> None:
        self.exists = True
        self.mesh = mesh
        self.texture: Any = None
        self.material: Any = None
        self._matrix = np.identity(4)
        self._base_matrix = np.identity(4)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @matrix.setter
    def matrix(self, value: Any) -> None:
        self._matrix = _as_matrix(value)

    @property
    def base_matrix(self) -> np.ndarray:
        return self._base_matrix.copy()

    def model_matrix(self) -> np.ndarray:
        """The full model matrix: temporary matrix times base matrix."""
        return self._matrix @ self._base_matrix

    def apply_transformation(self, transformation: Any) -> None:
        """Permanently apply a transformation on top of the base matrix."""
        self._base_matrix = _as_matrix(transformation) @ self._base_matrix