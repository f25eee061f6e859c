"""Shader uniform identifiers, vertex attribute slots and uniform-block binding points."""

from __future__ import annotations

from enum import IntEnum

UNIFORM_NAMES: tuple[str, ...] = ("M", "Terrain")
"""Names of plain uniforms, in the order of their :class:`Uniform` values."""

UBO_NAMES: tuple[str, ...] = ("VPmatrices", "Lights")
"""Names of uniform blocks, in the order of their :class:`BindingPoint` values."""

_UBO_OFFSET = 100


class Uniform(IntEnum):
    """Uniforms a shader may receive.

    Uniform blocks are numbered from 100; their last digit is their binding point.
    """

    MODEL_MATRIX = 0
    TERRAIN = 1
    VP_MATRIX = 100
    LIGHTS = 101

    @property
    def is_block(self) -> bool:
        """Whether this uniform is a uniform block."""
        return self.value >= _UBO_OFFSET


class LayoutPosition(IntEnum):
    """Vertex attribute locations."""

    POSITION = 0
    NORMAL = 1
    UV = 2
    TANGENT = 3


class BindingPoint(IntEnum):
    """Binding points that uniform blocks are bound to."""

    VP_MATRIX = 0
    LIGHTS = 1


_BLOCK_BINDINGS = {
    Uniform.VP_MATRIX: BindingPoint.VP_MATRIX,
    Uniform.LIGHTS: BindingPoint.LIGHTS,
}

_NAME_BINDINGS = {
    "VPmatrices": BindingPoint.VP_MATRIX,
    "Lights": BindingPoint.LIGHTS,
}


def binding_point(target: Uniform | str) -> BindingPoint:
    """Return the binding point of a uniform block, given as a :class:`Uniform` or by name.

    Raises ``KeyError`` when the target has no binding point.
    """
    if isinstance(target, Uniform):
        table: dict = _BLOCK_BINDINGS
    elif isinstance(target, str):
        table = _NAME_BINDINGS
    else:
        raise TypeError(f"expected a Uniform or a block name, got {type(target).__name__}")
    try:
        return table[target]
    except KeyError:
        raise KeyError(f"{target!r} is not a uniform block with a binding point") from None


def uniform_name(target: Uniform) -> str:
    """Return the name used in shader source for a uniform or uniform block."""
    target = Uniform(target)
    if target.is_block:
        return UBO_NAMES[target.value - _UBO_OFFSET]
    return UNIFORM_NAMES[target.value]