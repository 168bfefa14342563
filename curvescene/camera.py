"""A free-flying first-person camera and the view and projection matrices it needs."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Sequence

import numpy as np

MAX_PITCH = 89.0
MIN_FOV = 1.0
MAX_FOV = 90.0


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    f = _normalize(_vec3(center) - eye)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection onto depth range -1..1; ``fov_y`` in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


class MovementDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


class Camera:
    """Camera steered by yaw and pitch angles, moving at a constant speed."""

    WORLD_UP = np.array([0.0, 1.0, 0.0])

    def __init__(self, position: Optional[Sequence[float]] = None) -> None:
        self._position = np.zeros(3)
        self.forward = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.movement_direction = np.zeros(3)
        self.velocity = np.zeros(3)
        self.yaw = 0.0
        self.pitch = 0.0
        self.speed = 10.0
        self.zoom = 60.0
        if position is not None:
            self._position = _vec3(position)
            self._update_vectors()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)

    def view_matrix(self) -> np.ndarray:
        """View matrix from the camera's position along its forward vector."""
        return look_at(self._position, self._position + self.forward, self.up)

    def set_move_direction(self, input_direction) -> None:
        """Set velocity from an input direction: -z is forward, +x is right."""
        direction = _vec3(input_direction)
        move = self.forward * -direction[2] + self.right * direction[0]
        self.velocity = move * self.speed

    def add_movement(self, direction: MovementDirection) -> None:
        """Start moving in ``direction``, replacing the opposite one on that axis."""
        if direction is MovementDirection.FORWARD:
            self.movement_direction[2] = -1.0
        elif direction is MovementDirection.BACKWARD:
            self.movement_direction[2] = 1.0
        elif direction is MovementDirection.LEFT:
            self.movement_direction[0] = -1.0
        elif direction is MovementDirection.RIGHT:
            self.movement_direction[0] = 1.0
        self.set_move_direction(self.movement_direction)

    def remove_movement(self, direction: MovementDirection) -> None:
        """Stop moving along the axis of ``direction``."""
        if direction in (MovementDirection.FORWARD, MovementDirection.BACKWARD):
            self.movement_direction[2] = 0.0
        else:
            self.movement_direction[0] = 0.0
        self.set_move_direction(self.movement_direction)

    def reset_movement(self) -> None:
        """Stop all movement."""
        self.movement_direction = np.zeros(3)
        self.set_move_direction(self.movement_direction)

    def add_yaw(self, xoffset: float) -> None:
        self.yaw += xoffset

    def add_pitch(self, yoffset: float) -> None:
        """Add to the pitch, keeping it within +-89 degrees."""
        self.pitch = min(max(self.pitch + yoffset, -MAX_PITCH), MAX_PITCH)

    def reset_rotation(self) -> None:
        self.yaw = 0.0
        self.pitch = 0.0

    def apply_mouse_wheel(self, yoffset: float) -> None:
        """Narrow the field of view by the wheel offset, within 1..90 degrees."""
        self.zoom = min(max(self.zoom - yoffset, MIN_FOV), MAX_FOV)

    def update(self, delta_time: float) -> None:
        """Advance the position by the velocity and recompute the axes."""
        self._position = self._position + self.velocity * delta_time
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.sin(yaw) * math.cos(pitch),
                math.sin(pitch),
                -math.cos(yaw) * math.cos(pitch),
            ]
        )
        self.forward = _normalize(front)
        self.right = _normalize(np.cross(self.forward, self.WORLD_UP))
        self.up = _normalize(np.cross(self.right, self.forward))