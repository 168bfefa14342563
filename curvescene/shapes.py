"""Procedural geometry: a thick polyline ribbon and an axis-aligned box."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from curvescene.vertex import Vertex

LINE_WIDTH = 0.03
_LINE_COLOR = (1.0, 1.0, 1.0)
_VIEW_AXIS = np.array([0.0, 0.0, 1.0])


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    # A zero-length vector yields NaN components rather than an error.
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class LineShape:
    """A flat ribbon of quads following a polyline, facing the +Z axis.

    Each added point extends the ribbon by one quad sharing its leading edge
    with the trailing edge of the previous quad.
    """

    def __init__(self, begin: Sequence[float] | np.ndarray, width: float = LINE_WIDTH) -> None:
        self.vertices: List[Vertex] = []
        self.indices: List[int] = []
        self.width = width
        self._begin = _vec3(begin)
        self._last_v1 = 0
        self._last_v3 = 0

    def add_position(self, end: Sequence[float] | np.ndarray) -> None:
        """Extend the ribbon from the current point to ``end``."""
        end = _vec3(end)
        self._add_quad(end)
        self._begin = end

    def _add_quad(self, end: np.ndarray) -> None:
        direction = _normalize(end - self._begin)
        side = _normalize(np.cross(_VIEW_AXIS, direction))
        offset = side * self.width

        v0 = self._begin + offset
        v1 = end + offset
        v2 = self._begin - offset
        v3 = end - offset

        if not self.vertices:
            # v0 --- v1
            #  |   / |
            #  | /   |
            # v2 --- v3
            self.vertices = [Vertex(v, _LINE_COLOR) for v in (v0, v1, v2, v3)]
            self.indices = [0, 2, 1, 2, 3, 1]
            self._last_v1 = 1
            self._last_v3 = 3
            return

        self.vertices.append(Vertex(v1, _LINE_COLOR))
        self.vertices.append(Vertex(v3, _LINE_COLOR))
        current_v1 = len(self.vertices) - 2
        current_v3 = len(self.vertices) - 1
        self.indices.extend(
            [
                self._last_v1, self._last_v3, current_v1,
                self._last_v3, current_v3, current_v1,
            ]
        )
        self._last_v1 = current_v1
        self._last_v3 = current_v3


_UV_LEFT_TOP = (0.0, 1.0)
_UV_LEFT_BOTTOM = (0.0, 0.0)
_UV_RIGHT_BOTTOM = (1.0, 0.0)
_UV_RIGHT_TOP = (1.0, 1.0)
_FACE_UVS = (_UV_LEFT_TOP, _UV_RIGHT_TOP, _UV_LEFT_BOTTOM, _UV_RIGHT_BOTTOM)

_RED = (1.0, 0.0, 0.0)
_WHITE = (1.0, 1.0, 1.0)

# Each face: (normal, colour, four corner signs in uv order).
_BOX_FACES = (
    ((0, 1, 0), _WHITE, ((-1, 1, -1), (1, 1, -1), (-1, 1, 1), (1, 1, 1))),
    ((0, -1, 0), _WHITE, ((1, -1, -1), (-1, -1, -1), (1, -1, 1), (-1, -1, 1))),
    ((0, 0, 1), _RED, ((-1, 1, 1), (1, 1, 1), (-1, -1, 1), (1, -1, 1))),
    ((0, 0, -1), _WHITE, ((1, 1, -1), (-1, 1, -1), (1, -1, -1), (-1, -1, -1))),
    ((-1, 0, 0), _WHITE, ((-1, 1, -1), (-1, 1, 1), (-1, -1, -1), (-1, -1, 1))),
    ((1, 0, 0), _WHITE, ((1, 1, 1), (1, 1, -1), (1, -1, 1), (1, -1, -1))),
)

_BOX_INDICES = (
    0, 2, 1, 2, 3, 1,
    4, 6, 5, 6, 7, 5,
    8, 10, 9, 10, 11, 9,
    12, 14, 13, 13, 14, 15,
    16, 18, 17, 17, 18, 19,
    20, 22, 21, 22, 23, 21,
)


class BoxShape:
    """A box of 24 vertices (four per face) and 36 triangle indices."""

    def __init__(self, half_extents: Sequence[float] | np.ndarray = (1.0, 1.0, 1.0)) -> None:
        extents = _vec3(half_extents)
        self.vertices: List[Vertex] = [
            Vertex(extents * np.array(corner, dtype=float), color, normal, uv)
            for normal, color, corners in _BOX_FACES
            for corner, uv in zip(corners, _FACE_UVS)
        ]
        self.indices: List[int] = list(_BOX_INDICES)