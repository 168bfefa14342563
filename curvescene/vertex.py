"""Vertex records used to build meshes and line geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]


def _as_tuple(value: Iterable[float], size: int, name: str) -> tuple:
    """Convert any sequence or array of numbers into a float tuple of a fixed size."""
    items = tuple(float(component) for component in value)
    if len(items) != size:
        raise ValueError(f"{name} needs {size} components, got {len(items)}")
    return items


@dataclass(frozen=True)
class Vertex:
    """A full vertex: position, colour, normal, texture coordinate and a 4D position."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)
    position4: Vec4 = field(default=(0.0, 0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_tuple(self.position, 3, "position"))
        object.__setattr__(self, "color", _as_tuple(self.color, 3, "color"))
        object.__setattr__(self, "normal", _as_tuple(self.normal, 3, "normal"))
        object.__setattr__(self, "uv", _as_tuple(self.uv, 2, "uv"))
        object.__setattr__(self, "position4", _as_tuple(self.position4, 4, "position4"))


@dataclass(frozen=True)
class VertexUV:
    """A reduced vertex: position, colour and texture coordinate."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_tuple(self.position, 3, "position"))
        object.__setattr__(self, "color", _as_tuple(self.color, 3, "color"))
        object.__setattr__(self, "uv", _as_tuple(self.uv, 2, "uv"))