"""Terrain chunks: a height-mapped grid mesh and height lookups on it."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, MutableSequence

from terraforge.mesh import Mesh, VertexData

Vec3 = tuple[float, float, float]
HeightFunction = Callable[[float, float], float]


def bilinear_interpolation(
    x: float,
    z: float,
    x0: float,
    z0: float,
    x1: float,
    z1: float,
    h00: float,
    h10: float,
    h01: float,
    h11: float,
) -> float:
    """Interpolate a value inside the grid square ``(x0, z0)``-``(x1, z1)``.

    ``h00`` lies at ``(x0, z0)``, ``h10`` at ``(x1, z0)``, ``h01`` at
    ``(x0, z1)`` and ``h11`` at ``(x1, z1)``.
    """
    norm_x = (x - x0) / (x1 - x0)
    norm_z = (z - z0) / (z1 - z0)
    bottom = h00 * (1.0 - norm_x) + h10 * norm_x
    top = h01 * (1.0 - norm_x) + h11 * norm_x
    return bottom * (1.0 - norm_z) + top * norm_z


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def recalculate_normals(vertices: MutableSequence[VertexData]) -> None:
    """Give every vertex of each consecutive triangle that triangle's face normal."""
    if len(vertices) % 3:
        raise ValueError("vertex count must be a multiple of three")
    triangles = zip(*[iter(vertices)] * 3)
    for a, b, c in triangles:
        normal = _normalize(_cross(_sub(c.position, b.position), _sub(a.position, b.position)))
        for vertex in (a, b, c):
            vertex.normal = normal


class TerrainChunk:
    """A square patch of terrain that grows from ``(chunk_x, chunk_z)`` towards +X and -Z.

    Heights come from ``height_fn(x, z)`` and are kept in a height map keyed
    by the grid's ``(x, z)`` coordinates.
    """

    def __init__(
        self,
        height_fn: HeightFunction,
        chunk_x: float = 0.0,
        chunk_z: float = 0.0,
        chunk_size: int = 500,
        resolution: int = 128,
    ) -> None:
        if int(chunk_size) <= 0:
            raise ValueError("chunk size must be positive")
        if int(resolution) <= 0:
            raise ValueError("resolution must be positive")
        self.height_fn = height_fn
        self.chunk_x = float(chunk_x)
        self.chunk_z = float(chunk_z)
        self.chunk_size = int(chunk_size)
        self.resolution = int(resolution)
        self.segment_width = self.chunk_size / self.resolution
        self.segment_length = self.chunk_size / self.resolution
        self.mesh: Mesh | None = None
        self._heights: dict[tuple[float, float], float] = {}

        # Heights at which each terrain texture is best suited, and the zone
        # around each within which no blending happens.
        self.optimal_height0 = 10.0
        self.optimal_height1 = 150.0
        self.optimal_height2 = 200.0
        self.ideal_zone0 = 10.0
        self.ideal_zone1 = 100.0
        self.ideal_zone2 = 20.0

    @property
    def height_map(self) -> Mapping[tuple[float, float], float]:
        """Read-only view of the stored heights."""
        return MappingProxyType(self._heights)

    def create_vertices(self) -> list[VertexData]:
        """Flat, unindexed triangle vertices of the chunk's grid (two triangles per cell)."""
        grid_x = grid_z = self.resolution
        row = grid_x + 1
        corners: list[tuple[Vec3, tuple[float, float]]] = []
        for iz in range(grid_z + 1):
            z = -iz * self.segment_length + self.chunk_z
            for ix in range(row):
                x = ix * self.segment_width + self.chunk_x
                uv = (
                    (ix / float(grid_x)) * self.resolution,
                    1.0 - (iz / float(grid_z)) * self.resolution,
                )
                corners.append(((x, 0.0, z), uv))

        vertices: list[VertexData] = []
        for iz in range(grid_z):
            for ix in range(grid_x):
                a = ix + row * iz
                b = ix + row * (iz + 1)
                c = ix + 1 + row * (iz + 1)
                d = ix + 1 + row * iz
                for index in (a, d, b, b, d, c):
                    position, uv = corners[index]
                    vertices.append(VertexData(position, uv, (0.0, 0.0, 0.0)))
        return vertices

    def generate(self) -> Mesh:
        """Build the height map, raise the grid to it and create the mesh."""
        vertices = self.create_vertices()
        heights: dict[tuple[float, float], float] = {}
        for vertex in vertices:
            x, _, z = vertex.position
            if (x, z) not in heights:
                heights[(x, z)] = float(self.height_fn(x, z))
        self._heights = heights

        for vertex in vertices:
            x, _, z = vertex.position
            vertex.position = (x, self.height_at(x, z), z)

        recalculate_normals(vertices)
        self.mesh = Mesh(vertices)
        return self.mesh

    def height_at(self, x: float, z: float) -> float:
        """Stored height at a grid point; raises ``KeyError`` for other points."""
        key = (float(x), float(z))
        try:
            return self._heights[key]
        except KeyError:
            raise KeyError(f"no height stored at ({x}, {z})") from None

    def update_height(self, x: float, z: float, new_value: float) -> bool:
        """Replace the stored height at a grid point; the mesh is not touched.

        Returns whether the point exists.
        """
        key = (float(x), float(z))
        if key not in self._heights:
            return False
        self._heights[key] = float(new_value)
        return True

    def recalculate_height(self) -> None:
        """Sample the height function again and move the mesh vertices to the new heights."""
        if self.mesh is None:
            raise RuntimeError("chunk has not been generated")
        for vertex in self.mesh.vertices:
            x, _, z = vertex.position
            new_height = float(self.height_fn(x, z))
            if self.update_height(x, z, new_height):
                vertex.position = (x, new_height, z)

    def approximate_height(self, pos: Iterable[float]) -> float:
        """Height at any point, interpolated from the four surrounding grid points.

        Grid points outside the chunk count as height zero.
        """
        x, _, z = (float(v) for v in pos)
        res_x = math.floor(x / self.segment_width) * self.segment_width
        res_z = -math.floor(abs(z) / self.segment_length) * self.segment_length
        x0, x1 = res_x, res_x + self.segment_width
        z0, z1 = res_z, res_z + self.segment_length
        heights = self._heights
        return bilinear_interpolation(
            x,
            z,
            x0,
            z0,
            x1,
            z1,
            heights.get((x0, z0), 0.0),
            heights.get((x1, z0), 0.0),
            heights.get((x0, z1), 0.0),
            heights.get((x1, z1), 0.0),
        )