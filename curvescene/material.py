"""Materials: a shader pairing plus named uniform values and bound textures."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import numpy as np


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


class Material:
    """Shaders to draw with and the property values handed to them.

    ``shader`` draws the first pass; ``shader2``, when set, draws a second pass
    with the same properties (used for outlines and similar effects).
    """

    def __init__(self, shader: Any = None, shader2: Any = None) -> None:
        self.shader: Optional[Any] = shader
        self.shader2: Optional[Any] = shader2
        self.properties_vec3: Dict[str, np.ndarray] = {}
        self.properties_vec3_array: Dict[str, List[np.ndarray]] = {}
        self.properties_float: Dict[str, float] = {}
        self.texture_ids: List[int] = []

    def set_property_vec3(self, name: str, value) -> None:
        """Set or replace a 3-component property."""
        self.properties_vec3[name] = _vec3(value)

    def add_property_vec3_array(self, name: str, value) -> None:
        """Append a 3-component value to the array property ``name``."""
        self.properties_vec3_array.setdefault(name, []).append(_vec3(value))

    def set_property_float(self, name: str, value: float) -> None:
        """Set or replace a scalar property."""
        self.properties_float[name] = float(value)

    def add_texture(self, texture_id: int) -> None:
        """Bind another texture; its position is its texture unit."""
        self.texture_ids.append(int(texture_id))