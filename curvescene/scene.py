"""Scene graph: objects with materials and transforms, and the scenes holding them.

Drawing is expressed as :class:`DrawPass` records carrying the shader, the
uniform values it receives and the geometry to draw.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from curvescene.camera import Camera, perspective
from curvescene.light import DirectionalLight
from curvescene.material import Material
from curvescene.shapes import BoxShape
from curvescene.transform import Transform

AMBIENT_INTENSITY = 0.2
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0
CAMERA_START = (0.0, 0.0, 100.0)


@dataclass
class ShaderParam:
    """Per-frame values shared by every object drawn in a scene."""

    projection_matrix: np.ndarray = field(default_factory=lambda: np.zeros((4, 4)))
    view_matrix: np.ndarray = field(default_factory=lambda: np.zeros((4, 4)))
    view_projection_matrix: np.ndarray = field(default_factory=lambda: np.zeros((4, 4)))
    light_dir: np.ndarray = field(default_factory=lambda: np.zeros(4))
    light_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    camera_world_position: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class WindowParam:
    """Size of the drawing surface in pixels."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class DrawPass:
    """One draw of an object's geometry with one shader."""

    shader: Any
    uniforms: Dict[str, Any]
    textures: Tuple[Tuple[int, int], ...]
    mesh: Any = None
    line: Any = None


class GameObject:
    """An object in a scene: a transform, a material and a mesh and/or line."""

    def __init__(self, instance_id: int = 0) -> None:
        self.instance_id = instance_id
        self.transform = Transform()
        self.mesh: Any = None
        self.line: Any = None
        self.material: Optional[Material] = None

    def _require_material(self) -> Material:
        if self.material is None:
            raise ValueError(f"object {self.instance_id} has no material")
        return self.material

    def uniforms(self, shader_param: ShaderParam) -> Dict[str, Any]:
        """Uniform values this object hands to its shaders, in upload order."""
        material = self._require_material()
        model = self.transform.model_matrix
        values: Dict[str, Any] = {
            "mvp": shader_param.view_projection_matrix @ model,
            "normalMatrix": np.linalg.inv(model).T[:3, :3],
            "lightDirection": np.asarray(shader_param.light_dir, dtype=float)[:3],
            "lightColor": np.clip(np.asarray(shader_param.light_color, dtype=float), 0.0, 1.0),
            "ambientIntensity": AMBIENT_INTENSITY,
            "cameraWorldPosition": np.asarray(shader_param.camera_world_position, dtype=float),
            "modelMatrix": model[:3, :3],
        }
        for name in sorted(material.properties_vec3):
            values[name] = material.properties_vec3[name].copy()
        for name in sorted(material.properties_vec3_array):
            for index, value in enumerate(material.properties_vec3_array[name]):
                values[f"{name}[{index}]"] = value.copy()
        for name in sorted(material.properties_float):
            values[name] = material.properties_float[name]
        for unit, _ in enumerate(material.texture_ids):
            values[f"sample{unit}"] = unit
        return values

    def update(self, shader_param: ShaderParam, delta_sec: float) -> List[DrawPass]:
        """Draw passes for this frame: one per shader the material holds."""
        material = self._require_material()
        textures = tuple(enumerate(material.texture_ids))
        passes = [
            DrawPass(shader, self.uniforms(shader_param), textures, self.mesh, self.line)
            for shader in (material.shader, material.shader2)
            if shader is not None
        ]
        if material.shader is None:
            # The first pass always runs, even without a shader assigned.
            passes.insert(
                0, DrawPass(None, self.uniforms(shader_param), textures, self.mesh, self.line)
            )
        return passes


class Scene:
    """A set of objects viewed through one camera and lit by one directional light."""

    def __init__(self, scene_id: int) -> None:
        self.instance_id = scene_id
        self.box_shape = BoxShape()
        self.camera = Camera()
        self.camera.position = CAMERA_START
        self.directional_light = DirectionalLight()
        self._last_object_id = 0
        self._objects: Dict[int, GameObject] = {}
        self._pending_destroy: Dict[int, bool] = {}

    @property
    def objects(self) -> List[GameObject]:
        """Live objects in id order."""
        return [self._objects[key] for key in sorted(self._objects)]

    def create_object(self) -> GameObject:
        """Add a new object with the next free id."""
        self._last_object_id += 1
        obj = GameObject(self._last_object_id)
        self._objects[self._last_object_id] = obj
        return obj

    def destroy_object(self, obj: GameObject) -> None:
        """Mark an object for removal at the end of the next update."""
        self._pending_destroy[obj.instance_id] = True

    def find_object(self, object_id: int) -> Optional[GameObject]:
        """The object with ``object_id``, or None."""
        return self._objects.get(object_id)

    def update(self, width: int, height: int, delta_sec: float) -> List[DrawPass]:
        """Advance the camera, draw every object and drop those marked for removal."""
        if height == 0:
            raise ValueError("window height must not be zero")
        self.camera.update(delta_sec)

        param = ShaderParam()
        fov = math.radians(self.camera.zoom)
        param.projection_matrix = perspective(fov, width / height, NEAR_PLANE, FAR_PLANE)
        param.view_matrix = self.camera.view_matrix()
        param.view_projection_matrix = param.projection_matrix @ param.view_matrix
        direction = self.directional_light.direction
        param.light_dir = direction / np.linalg.norm(direction)
        param.light_color = self.directional_light.color
        param.camera_world_position = self.camera.position

        passes: List[DrawPass] = []
        for obj in self.objects:
            passes.extend(obj.update(param, delta_sec))

        for object_id in sorted(self._pending_destroy):
            self._objects.pop(object_id, None)
        self._pending_destroy.clear()
        return passes


class SceneManager:
    """Creates scenes with increasing ids; :meth:`instance` gives the shared manager."""

    _shared: Optional["SceneManager"] = None

    def __init__(self) -> None:
        self._last_scene_id = 0
        self._scenes: Dict[int, Scene] = {}

    @classmethod
    def instance(cls) -> "SceneManager":
        """The process-wide manager, created on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @property
    def scenes(self) -> List[Scene]:
        return [self._scenes[key] for key in sorted(self._scenes)]

    def create_scene(self) -> Scene:
        """Add a new scene with the next free id."""
        self._last_scene_id += 1
        scene = Scene(self._last_scene_id)
        self._scenes[self._last_scene_id] = scene
        return scene

    def destroy_all_scenes(self) -> None:
        """Forget every scene and restart ids from one."""
        self._scenes.clear()
        self._last_scene_id = 0