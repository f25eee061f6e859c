"""Quaternion helpers and a positioned, oriented, scaled scene object."""

from __future__ import annotations

import math
from typing import Any, Iterable

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]
"""Quaternion stored as ``(w, x, y, z)``."""

IDENTITY: Quat = (1.0, 0.0, 0.0, 0.0)
DEFAULT_POSITION: Vec3 = (0.0, 0.0, 0.0)
DEFAULT_SCALE: Vec3 = (1.0, 1.0, 1.0)


def _vec3(values: Iterable[float]) -> Vec3:
    result = tuple(float(v) for v in values)
    if len(result) != 3:
        raise ValueError(f"expected 3 components, got {len(result)}")
    return result  # type: ignore[return-value]


def _quat(values: Iterable[float]) -> Quat:
    result = tuple(float(v) for v in values)
    if len(result) != 4:
        raise ValueError(f"expected a quaternion (w, x, y, z), got {len(result)} components")
    return result  # type: ignore[return-value]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def quat_multiply(a: Iterable[float], b: Iterable[float]) -> Quat:
    """Hamilton product ``a * b``: applying ``b`` first, then ``a``."""
    aw, ax, ay, az = _quat(a)
    bw, bx, by, bz = _quat(b)
    return (
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    )


def quat_normalize(q: Iterable[float]) -> Quat:
    """Scale a quaternion to unit length; a zero quaternion becomes the identity."""
    w, x, y, z = _quat(q)
    length = math.sqrt(w * w + x * x + y * y + z * z)
    if length <= 0.0:
        return IDENTITY
    return (w / length, x / length, y / length, z / length)


def quat_rotate(q: Iterable[float], v: Iterable[float]) -> Vec3:
    """Rotate vector ``v`` by the unit quaternion ``q``."""
    w, x, y, z = _quat(q)
    vec = _vec3(v)
    u = (x, y, z)
    uv = _cross(u, vec)
    uuv = _cross(u, uv)
    return tuple(vi + 2.0 * (uvi * w + uuvi) for vi, uvi, uuvi in zip(vec, uv, uuv))  # type: ignore[return-value]


def angle_axis(angle: float, axis: Iterable[float]) -> Quat:
    """Quaternion rotating by ``angle`` radians around ``axis`` (expected to be unit length)."""
    ax, ay, az = _vec3(axis)
    half = float(angle) * 0.5
    s = math.sin(half)
    return (math.cos(half), ax * s, ay * s, az * s)


def euler_to_quat(pitch: float, yaw: float, roll: float) -> Quat:
    """Unit quaternion for rotations around X (pitch), Y (yaw) and Z (roll), applied in that order."""
    rx = angle_axis(pitch, (1.0, 0.0, 0.0))
    ry = angle_axis(yaw, (0.0, 1.0, 0.0))
    rz = angle_axis(roll, (0.0, 0.0, 1.0))
    return quat_normalize(quat_multiply(quat_multiply(rz, ry), rx))


class Object:
    """Something placed in the world with a position, orientation and scale, optionally drawn by a model."""

    def __init__(
        self,
        position: Iterable[float] = DEFAULT_POSITION,
        orientation: Iterable[float] = IDENTITY,
        scale: Iterable[float] = DEFAULT_SCALE,
    ) -> None:
        self.model: Any = None
        self.position = position
        self.orientation = orientation
        self.scale = scale

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _vec3(value)

    @property
    def orientation(self) -> Quat:
        return self._orientation

    @orientation.setter
    def orientation(self, value: Iterable[float]) -> None:
        self._orientation = quat_normalize(value)

    @property
    def scale(self) -> Vec3:
        return self._scale

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self._scale = _vec3(value)

    def up(self) -> Vec3:
        """Up direction; +Y in object space."""
        return quat_rotate(self._orientation, (0.0, 1.0, 0.0))

    def forward(self) -> Vec3:
        """Forward direction; -Z in object space."""
        return quat_rotate(self._orientation, (0.0, 0.0, -1.0))

    def right(self) -> Vec3:
        """Right direction; +X in object space."""
        return quat_rotate(self._orientation, (1.0, 0.0, 0.0))

    def translate(self, translation: Iterable[float]) -> None:
        """Move the object by ``translation``."""
        self.position = (a + b for a, b in zip(self._position, _vec3(translation)))

    def rotate(self, rotation: Iterable[float]) -> None:
        """Apply a rotation quaternion on top of the current orientation."""
        self.orientation = quat_multiply(quat_normalize(rotation), self._orientation)

    def rotate_axis(self, angle: float, axis: Iterable[float]) -> None:
        """Rotate by ``angle`` radians around ``axis``."""
        self.rotate(angle_axis(angle, axis))

    def change_scale(self, scale_factor: Iterable[float]) -> None:
        """Add ``scale_factor`` to the current scale."""
        self.scale = (a + b for a, b in zip(self._scale, _vec3(scale_factor)))