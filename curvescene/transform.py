"""Quaternion helpers and transforms that build model matrices for scene objects."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

IDENTITY_QUAT = np.array([1.0, 0.0, 0.0, 0.0])
_EPSILON = np.finfo(float).eps


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _quat(value: Sequence[float] | np.ndarray) -> np.ndarray:
    quat = np.array(value, dtype=float)
    if quat.shape != (4,):
        raise ValueError(f"expected a quaternion (w, x, y, z), got shape {quat.shape}")
    return quat


def quat_from_euler(euler_radians) -> np.ndarray:
    """Quaternion (w, x, y, z) from pitch, yaw and roll angles in radians."""
    half = _vec3(euler_radians) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b``: rotate by ``b`` first, then by ``a``."""
    aw, ax, ay, az = _quat(a)
    bw, bx, by, bz = _quat(b)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
        ]
    )


def quat_inverse(q) -> np.ndarray:
    """Multiplicative inverse of a quaternion."""
    q = _quat(q)
    norm_sq = float(np.dot(q, q))
    if norm_sq == 0.0:
        raise ValueError("the zero quaternion has no inverse")
    return np.array([q[0], -q[1], -q[2], -q[3]]) / norm_sq


def quat_rotate(q, v) -> np.ndarray:
    """Rotate a 3D vector by a unit quaternion."""
    q = _quat(q)
    v = _vec3(v)
    axis = q[1:]
    uv = np.cross(axis, v)
    uuv = np.cross(axis, uv)
    return v + (uv * q[0] + uuv) * 2.0


def quat_to_mat4(q) -> np.ndarray:
    """4x4 rotation matrix (column-vector convention) of a unit quaternion."""
    w, x, y, z = _quat(q)
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return matrix


def quat_to_euler(q) -> np.ndarray:
    """Pitch, yaw and roll in radians of a unit quaternion."""
    w, x, y, z = _quat(q)

    roll_y = 2.0 * (x * y + w * z)
    roll_x = w * w + x * x - y * y - z * z
    if abs(roll_x) <= _EPSILON and abs(roll_y) <= _EPSILON:
        roll = 0.0
    else:
        roll = math.atan2(roll_y, roll_x)

    pitch_y = 2.0 * (y * z + w * x)
    pitch_x = w * w - x * x - y * y + z * z
    if abs(pitch_x) <= _EPSILON and abs(pitch_y) <= _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(pitch_y, pitch_x)

    yaw = math.asin(min(max(-2.0 * (x * z - w * y), -1.0), 1.0))
    return np.array([pitch, yaw, roll])


def translation_matrix(offset) -> np.ndarray:
    """4x4 matrix translating by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def scale_matrix(scale) -> np.ndarray:
    """4x4 matrix scaling each axis by the matching component of ``scale``."""
    matrix = np.identity(4)
    matrix[:3, :3] = np.diag(_vec3(scale))
    return matrix


def rotation_matrix(angle: float, axis) -> np.ndarray:
    """4x4 matrix rotating by ``angle`` radians about ``axis``."""
    axis = _vec3(axis)
    length = np.linalg.norm(axis)
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = axis / length
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return matrix


class Transform:
    """Position, quaternion rotation and scale with an optional parent transform."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._euler_angles = np.zeros(3)
        self._scale = np.ones(3)
        self._rotation = IDENTITY_QUAT.copy()
        self._forward = np.array([0.0, 0.0, 1.0])
        self._right = np.array([1.0, 0.0, 0.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self._model_matrix = np.identity(4)
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []

    @property
    def parent(self) -> Optional["Transform"]:
        return self._parent

    @property
    def children(self) -> List["Transform"]:
        return list(self._children)

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)
        self._refresh_matrix()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = _vec3(value)
        self._refresh_matrix()

    @property
    def rotation(self) -> np.ndarray:
        """Rotation quaternion (w, x, y, z)."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value) -> None:
        self._rotation = _quat(value)
        self._euler_angles = quat_to_euler(self._rotation)
        self._refresh_matrix()
        self._refresh_axis()

    @property
    def euler_angles(self) -> np.ndarray:
        """Rotation as pitch, yaw and roll in degrees."""
        return np.degrees(self._euler_angles)

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model_matrix.copy()

    def set_parent(self, parent: "Transform") -> None:
        """Attach this transform under ``parent``."""
        self._check_not_ancestor(parent)
        self._parent = parent
        parent.add_child(self)
        self._refresh_matrix()

    def add_child(self, child: "Transform") -> None:
        """Attach ``child`` under this transform."""
        child._check_not_ancestor(self)
        self._children.append(child)
        child._parent = self
        child._refresh_matrix()

    def set_euler_angles_on_local_axis(self, euler) -> None:
        """Replace the rotation with one given by Euler angles in degrees."""
        self.rotation = quat_from_euler(np.radians(_vec3(euler)))

    def set_euler_angles_on_world_axis(self, euler) -> None:
        """Replace the rotation with Euler angles in degrees taken in the current frame."""
        rotation = quat_from_euler(np.radians(_vec3(euler)))
        self.rotation = quat_multiply(
            quat_multiply(quat_inverse(self._rotation), rotation), self._rotation
        )

    def rotate_on_local_axis(self, euler_angles) -> None:
        """Rotate further about the local axes by Euler angles in degrees."""
        rotation = quat_from_euler(np.radians(_vec3(euler_angles)))
        self.rotation = quat_multiply(self._rotation, rotation)

    def rotate_on_world_axis(self, euler_angles) -> None:
        """Rotate further about the world axes by Euler angles in degrees."""
        rotation = quat_from_euler(np.radians(_vec3(euler_angles)))
        conjugated = quat_multiply(
            quat_multiply(quat_inverse(self._rotation), rotation), self._rotation
        )
        self.rotation = quat_multiply(self._rotation, conjugated)

    def _check_not_ancestor(self, other: "Transform") -> None:
        node: Optional[Transform] = other
        while node is not None:
            if node is self:
                raise ValueError("a transform cannot be attached under itself")
            node = node._parent

    def _local_matrix(self) -> np.ndarray:
        return (
            translation_matrix(self._position)
            @ quat_to_mat4(self._rotation)
            @ scale_matrix(self._scale)
        )

    def _refresh_matrix(self) -> None:
        local = self._local_matrix()
        if self._parent is not None:
            self._model_matrix = self._parent._model_matrix @ local
        else:
            self._model_matrix = local
        self._refresh_axis()
        for child in self._children:
            child._refresh_matrix()

    def _refresh_axis(self) -> None:
        self._forward = quat_rotate(self._rotation, (0.0, 0.0, -1.0))
        self._up = quat_rotate(self._rotation, (0.0, 1.0, 0.0))
        self._right = np.cross(self._forward, self._up)


class SimpleTransform:
    """Position, Euler rotation and scale composed as T * Ry * Rx * Rz * S."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._euler_angles = np.zeros(3)
        self._scale = np.ones(3)
        self._model_matrix = np.identity(4)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)
        self._refresh_matrix()

    @property
    def euler_angles(self) -> np.ndarray:
        """Rotation angles about x, y and z in degrees."""
        return np.degrees(self._euler_angles)

    @euler_angles.setter
    def euler_angles(self, value) -> None:
        self._euler_angles = np.radians(_vec3(value))
        self._refresh_matrix()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = _vec3(value)
        self._refresh_matrix()

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model_matrix.copy()

    def _refresh_matrix(self) -> None:
        ax, ay, az = self._euler_angles
        rotation = (
            rotation_matrix(ay, (0.0, 1.0, 0.0))
            @ rotation_matrix(ax, (1.0, 0.0, 0.0))
            @ rotation_matrix(az, (0.0, 0.0, 1.0))
        )
        self._model_matrix = (
            translation_matrix(self._position) @ rotation @ scale_matrix(self._scale)
        )