"""Vertex data, OBJ loading, vertex indexing and tangent computation."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field, replace
from os import PathLike
from typing import Iterable, Sequence

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_PACK = struct.Struct("<11f")


def _vec(values: Iterable[float], size: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{name} must have {size} components, got {len(result)}")
    return result


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        # Zero-length vectors normalise to NaN, as in single-precision GL maths.
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass
class VertexData:
    """Position, texture coordinate, normal and tangent of one vertex."""

    position: Vec3
    uv: Vec2 = (0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tangent: Vec3 = field(default=(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        self.position = _vec(self.position, 3, "position")
        self.uv = _vec(self.uv, 2, "uv")
        self.normal = _vec(self.normal, 3, "normal")
        self.tangent = _vec(self.tangent, 3, "tangent")

    @property
    def packed(self) -> bytes:
        """Single-precision bytes of all attributes; equal bytes mean the same vertex."""
        # Only position, uv and normal are stored in the key the way the
        # record is laid out; the tangent follows them.
        return _PACK.pack(*self.position, *self.uv, *self.normal) + struct.pack(
            "<3f", *self.tangent
        )


def _resolve_index(token: str, count: int, kind: str, lineno: int) -> int:
    try:
        index = int(token)
    except ValueError:
        raise ValueError(f"line {lineno}: bad {kind} index {token!r}") from None
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = count + index
    else:
        raise ValueError(f"line {lineno}: {kind} index must not be zero")
    if not 0 <= resolved < count:
        raise ValueError(f"line {lineno}: {kind} index {index} out of range")
    return resolved


def _parse_floats(fields: Sequence[str], wanted: int, minimum: int, lineno: int) -> tuple[float, ...]:
    if len(fields) < minimum:
        raise ValueError(f"line {lineno}: expected at least {minimum} numbers")
    try:
        values = [float(f) for f in fields[:wanted]]
    except ValueError:
        raise ValueError(f"line {lineno}: bad number in {' '.join(fields)!r}") from None
    values.extend([0.0] * (wanted - len(values)))
    return tuple(values)


def load_obj(path: str | PathLike[str]) -> list[VertexData]:
    """Read a Wavefront OBJ file into an unindexed list of triangle vertices.

    Polygons are triangulated as fans.  The V texture coordinate is flipped
    (``1 - v``).  Missing texture coordinates or normals become zero vectors.
    """
    positions: list[tuple[float, ...]] = []
    texcoords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    vertices: list[VertexData] = []

    with open(path, encoding="utf-8") as handle:
        for lineno, raw in enumerate(handle, 1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            keyword, *fields = line.split()
            if keyword == "v":
                positions.append(_parse_floats(fields, 3, 3, lineno))
            elif keyword == "vt":
                texcoords.append(_parse_floats(fields, 2, 1, lineno))
            elif keyword == "vn":
                normals.append(_parse_floats(fields, 3, 3, lineno))
            elif keyword == "f":
                if len(fields) < 3:
                    raise ValueError(f"line {lineno}: a face needs at least three vertices")
                corners = []
                for token in fields:
                    parts = token.split("/")
                    pos = _resolve_index(parts[0], len(positions), "vertex", lineno)
                    uv = None
                    if len(parts) > 1 and parts[1]:
                        uv = _resolve_index(parts[1], len(texcoords), "texcoord", lineno)
                    normal = None
                    if len(parts) > 2 and parts[2]:
                        normal = _resolve_index(parts[2], len(normals), "normal", lineno)
                    corners.append((pos, uv, normal))
                for second, third in zip(corners[1:-1], corners[2:]):
                    for pos, uv, normal in (corners[0], second, third):
                        tex = (0.0, 0.0)
                        if uv is not None:
                            u, v = texcoords[uv]
                            tex = (u, 1.0 - v)
                        norm = normals[normal] if normal is not None else (0.0, 0.0, 0.0)
                        vertices.append(VertexData(positions[pos], tex, norm))
    return vertices


def index_vertices(vertices: Iterable[VertexData]) -> tuple[list[int], list[VertexData]]:
    """Merge identical vertices.

    Returns the index list and the list of unique vertices (copies), in order
    of first appearance.
    """
    seen: dict[bytes, int] = {}
    indices: list[int] = []
    unique: list[VertexData] = []
    for vertex in vertices:
        key = vertex.packed
        index = seen.get(key)
        if index is None:
            index = len(unique)
            unique.append(replace(vertex))
            seen[key] = index
        indices.append(index)
    return indices, unique


def calculate_tangents(vertices: list[VertexData], indices: Sequence[int]) -> None:
    """Accumulate per-triangle tangents into the vertices, then normalise them."""
    for start in range(0, len(indices) - len(indices) % 3, 3):
        v0, v1, v2 = (vertices[i] for i in indices[start:start + 3])

        edge1 = tuple(b - a for a, b in zip(v0.position, v1.position))
        edge2 = tuple(b - a for a, b in zip(v0.position, v2.position))
        du1 = (v1.uv[0] - v0.uv[0], v1.uv[1] - v0.uv[1])
        du2 = (v2.uv[0] - v0.uv[0], v2.uv[1] - v0.uv[1])

        denominator = du1[0] * du2[1] - du2[0] * du1[1]
        if denominator == 0.0:
            f = math.copysign(math.inf, denominator)
        else:
            f = 1.0 / denominator

        tangent = tuple(f * (du2[1] * e1 - du1[1] * e2) for e1, e2 in zip(edge1, edge2))
        for vertex in (v0, v1, v2):
            vertex.tangent = tuple(a + b for a, b in zip(vertex.tangent, tangent))

    for vertex in vertices:
        vertex.tangent = _normalize(vertex.tangent)


class Mesh:
    """Indexed triangle mesh."""

    def __init__(self, vertices: Iterable[VertexData], compute_tangents: bool = True) -> None:
        self.indices, self.vertices = index_vertices(vertices)
        if compute_tangents:
            calculate_tangents(self.vertices, self.indices)

    @classmethod
    def from_arrays(
        cls,
        positions: Sequence[Sequence[float]],
        uvs: Sequence[Sequence[float]] | None = None,
        normals: Sequence[Sequence[float]] | None = None,
    ) -> "Mesh":
        """Build a mesh from parallel attribute lists; tangents are left at zero."""
        count = len(positions)
        if uvs is None:
            uvs = [(0.0, 0.0)] * count
        if normals is None:
            normals = [(0.0, 0.0, 0.0)] * count
        if len(uvs) != count or len(normals) != count:
            raise ValueError("positions, uvs and normals must have the same length")
        vertices = [VertexData(p, uv, n) for p, uv, n in zip(positions, uvs, normals)]
        return cls(vertices, compute_tangents=False)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "Mesh":
        """Load a mesh from an OBJ file."""
        text = str(path)
        if not text.endswith("obj"):
            raise ValueError(f"File format not supported: {text}")
        return cls(load_obj(path))

    def index_count(self) -> int:
        return len(self.indices)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def update_vertex_z(self, index: int, new_z: float) -> None:
        """Set the z coordinate of one indexed vertex."""
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")
        vertex = self.vertices[index]
        x, y, _ = vertex.position
        vertex.position = (x, y, float(new_z))