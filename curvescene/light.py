"""A directional light whose direction follows its transform's forward axis."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from curvescene.transform import Transform

INITIAL_ROTATION = (-90.0, 0.0, -45.0)


class DirectionalLight:
    """A light shining along its transform's forward vector, white by default."""

    def __init__(self) -> None:
        self.transform = Transform()
        self.transform.rotate_on_world_axis(INITIAL_ROTATION)
        self._color = np.array([1.0, 1.0, 1.0])

    @property
    def direction(self) -> np.ndarray:
        """Forward vector as a 4-component direction with w = 0."""
        return np.append(self.transform.forward, 0.0)

    @property
    def color(self) -> np.ndarray:
        return self._color.copy()

    @color.setter
    def color(self, value: Sequence[float] | np.ndarray) -> None:
        color = np.array(value, dtype=float)
        if color.shape != (3,):
            raise ValueError(f"expected a 3-component colour, got shape {color.shape}")
        self._color = color