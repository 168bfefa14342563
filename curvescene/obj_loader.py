"""Reading Wavefront OBJ triangle meshes into flat vertex and index lists."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from curvescene.vertex import Vertex


@dataclass
class ObjModel:
    """An unindexed triangle mesh: one vertex per face corner, indices in order."""

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)


def _floats(tokens: List[str], count: int) -> Tuple[float, ...]:
    """Read up to ``count`` leading numbers; missing or unreadable ones become zero."""
    values: List[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _face_corner(token: str, line_number: int) -> Tuple[int, int, int]:
    parts = token.split("/")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(
            f"line {line_number}: face corner {token!r} is not of the form v/vt/vn"
        )
    return int(parts[0]), int(parts[1]), int(parts[2])


def _lookup(items: list, index: int, kind: str):
    if not 1 <= index <= len(items):
        raise ValueError(f"{kind} index {index} out of range 1..{len(items)}")
    return items[index - 1]


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Parse OBJ text lines holding positions, texture coordinates, normals and triangles.

    Only the first three corners of each face are used; every corner must give
    position, texture and normal indices.
    """
    positions: List[Tuple[float, ...]] = []
    uvs: List[Tuple[float, ...]] = []
    normals: List[Tuple[float, ...]] = []
    corners: List[Tuple[int, int, int]] = []

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        prefix, rest = tokens[0], tokens[1:]
        if prefix == "v":
            positions.append(_floats(rest, 3))
        elif prefix == "vt":
            uvs.append(_floats(rest, 2))
        elif prefix == "vn":
            normals.append(_floats(rest, 3))
        elif prefix == "f":
            if len(rest) < 3:
                raise ValueError(f"line {line_number}: face needs three corners")
            corners.extend(_face_corner(token, line_number) for token in rest[:3])

    model = ObjModel()
    for index, (vi, ti, ni) in enumerate(corners):
        model.vertices.append(
            Vertex(
                position=_lookup(positions, vi, "position"),
                normal=_lookup(normals, ni, "normal"),
                uv=_lookup(uvs, ti, "texture coordinate"),
            )
        )
        model.indices.append(index)
    return model


def load_obj(path: str | os.PathLike) -> ObjModel:
    """Read and parse an OBJ file."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)