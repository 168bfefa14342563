"""Scenes that show Bezier, Hermite and Catmull-Rom curves as lines and marker spheres."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from curvescene.curves import Bezier, BezierSpline, CatmullRomSpline, Hermite, HermiteSpline
from curvescene.material import Material
from curvescene.scene import GameObject, Scene, SceneManager
from curvescene.shapes import LineShape
from curvescene.vertex import Vertex

VERTEX_COLOR_SHADER = ("shaders/VertexColor.vs", "shaders/VertexColor.fs")
COLOR_SHADER = ("shaders/Color.vs", "shaders/Color.fs")

LINE_COLOR = (1.0, 0.0, 0.0)
CAMERA_BEGIN_POSITION = (0.0, 1.0, 10.0)
CAMERA_BEGIN_ZOOM = 40.0
CAMERA_SPEED = 2.0
LIGHT_ROTATION = (-45.0, 90.0, 0.0)

Evaluate = Callable[[float], Any]


class CurveType(Enum):
    BEZIER_CURVE = "bezier_curve"
    BEZIER_SPLINE = "bezier_spline"
    HERMITE_CURVE = "hermite_curve"
    HERMITE_SPLINE = "hermite_spline"
    CATMULL_ROM_SPLINE = "catmull_rom_spline"


def sample_curve(
    evaluate: Evaluate, begin: Sequence[float] | np.ndarray, steps: int
) -> Tuple[List[np.ndarray], List[Vertex], LineShape]:
    """Sample ``evaluate`` at ``i / steps`` for ``i`` in 1..steps.

    Returns the sampled points, a thin line as vertex pairs from each point to
    the next (starting at ``begin``), and a thick ribbon through the same points.
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    previous = np.array(begin, dtype=float)
    ribbon = LineShape(previous)
    points: List[np.ndarray] = []
    line: List[Vertex] = []
    for i in range(1, steps + 1):
        position = np.array(evaluate(i / steps), dtype=float)
        line.append(Vertex(previous, LINE_COLOR))
        line.append(Vertex(position, LINE_COLOR))
        ribbon.add_position(position)
        points.append(position)
        previous = position
    return points, line, ribbon


class CurveDemo:
    """A scene holding one curve, drawn as a ribbon or thin line, with marker spheres."""

    def __init__(
        self,
        curve_type: CurveType | str,
        scene_manager: Optional[SceneManager] = None,
        sphere_mesh: Any = None,
        use_thick_line: bool = True,
    ) -> None:
        self.curve_type = CurveType(curve_type)
        self.sphere_mesh = sphere_mesh
        self.use_thick_line = use_thick_line

        self.line_material = Material(shader=VERTEX_COLOR_SHADER)
        self.line_shape_material = Material(shader=COLOR_SHADER)

        manager = scene_manager if scene_manager is not None else SceneManager.instance()
        self.scene: Scene = manager.create_scene()

        self.camera_begin_position = np.array(CAMERA_BEGIN_POSITION)
        self.camera_begin_zoom = CAMERA_BEGIN_ZOOM
        camera = self.scene.camera
        camera.position = self.camera_begin_position
        camera.speed = CAMERA_SPEED
        camera.zoom = self.camera_begin_zoom

        self.markers: List[GameObject] = []
        builders = {
            CurveType.BEZIER_CURVE: self._build_bezier_curve,
            CurveType.BEZIER_SPLINE: self._build_bezier_spline,
            CurveType.HERMITE_CURVE: self._build_hermite_curve,
            CurveType.HERMITE_SPLINE: self._build_hermite_spline,
            CurveType.CATMULL_ROM_SPLINE: self._build_catmull_rom_spline,
        }
        points, line, ribbon = builders[self.curve_type]()
        self.curve_points: List[np.ndarray] = points
        self.line_vertices: List[Vertex] = line
        self.line_shape: LineShape = ribbon

        self.curve_object = self.scene.create_object()
        if use_thick_line:
            self.curve_object.mesh = ribbon
            self.curve_object.material = self.line_shape_material
        else:
            self.curve_object.line = line
            self.curve_object.material = self.line_material
        self.curve_object.transform.position = (0.0, 0.0, 0.0)

        self.scene.directional_light.transform.set_euler_angles_on_local_axis(LIGHT_ROTATION)

    def _add_sphere(self, position, scale: float, material: Material) -> GameObject:
        sphere = self.scene.create_object()
        sphere.mesh = self.sphere_mesh
        sphere.material = material
        sphere.transform.position = position
        sphere.transform.scale = (scale, scale, scale)
        self.markers.append(sphere)
        return sphere

    def _set_camera_begin(self, position) -> None:
        self.camera_begin_position = np.array(position, dtype=float)
        self.scene.camera.position = self.camera_begin_position

    def _build_bezier_curve(self):
        begin = np.array([-2.0, 0.0, 0.0])
        control_point0 = np.array([-1.0, 3.0, 0.0])
        control_point1 = np.array([1.0, -2.0, 0.0])
        end = np.array([1.0, 3.0, 0.0])

        bezier = Bezier()
        bezier.add(begin, control_point0, control_point1, end)

        for position in (begin, end, control_point0, control_point1):
            self._add_sphere(position, 0.05, self.line_material)

        result = sample_curve(bezier.evaluate, begin, 20)
        for position in result[0]:
            self._add_sphere(position, 0.05, self.line_material)
        return result

    def _build_bezier_spline(self):
        begin = np.array([0.0, 0.0, 0.0])
        end = np.array([6.0, -3.0, -5.0])
        positions: List[np.ndarray] = []

        v0 = begin
        v1 = np.array([2.0, 3.0, 0.0])
        v2 = np.array([-2.0, 2.0, 0.0])
        v3 = np.array([2.0, 0.0, 0.0])
        positions.extend([v0, v1, v2, v3])
        self._add_sphere(v0, 0.1, self.line_shape_material)
        self._add_sphere(v3, 0.1, self.line_shape_material)

        # Each following segment starts where the last ended, its first control
        # point mirroring the previous segment's last control point.
        for next_offset, next_end in (
            (np.array([2.0, 3.0, 0.0]), np.array([5.0, 0.0, -2.0])),
            (np.array([3.0, 0.0, -3.0]), end),
        ):
            v0 = v3
            v1 = v0 + (v3 - v2)
            v2 = v1 + next_offset
            v3 = next_end
            positions.extend([v0, v1, v2, v3])
            self._add_sphere(v0, 0.1, self.line_shape_material)
            self._add_sphere(v3, 0.1, self.line_shape_material)

        spline = BezierSpline()
        for position in positions:
            spline.add(position)

        result = sample_curve(spline.evaluate, begin, 60)
        self._set_camera_begin((3.0, 1.0, 10.0))
        return result

    def _build_hermite_curve(self):
        begin = np.array([0.0, 0.0, 0.0])
        tangent_u = np.array([0.0, -2.0, 0.0])
        end = np.array([2.0, 0.0, 0.0])
        tangent_v = np.array([0.0, -2.0, 0.0])

        hermite = Hermite()
        hermite.set(begin, tangent_u, end, tangent_v)
        return sample_curve(hermite.evaluate, begin, 20)

    def _build_hermite_spline(self):
        begin = np.array([0.0, 0.0, 0.0])
        end = np.array([2.0, 0.0, 2.0])
        knots = [
            (begin, np.array([7.0, 3.0, 0.0])),
            (np.array([4.0, 0.0, 0.0]), np.array([5.0, -3.0, 0.0])),
            (np.array([0.0, -2.0, 2.0]), np.array([-5.0, 2.0, 0.0])),
            (end, np.array([0.0, -5.0, 0.0])),
        ]

        spline = HermiteSpline()
        for position, tangent in knots:
            spline.add(position, tangent)

        for position, tangent in knots:
            self._add_sphere(position + tangent, 0.1, self.line_shape_material)
        for position, _ in knots:
            self._add_sphere(position, 0.2, self.line_shape_material)

        result = sample_curve(spline.evaluate, begin, 100)
        self._set_camera_begin((1.0, 0.0, 20.0))
        return result

    def _build_catmull_rom_spline(self):
        points = [
            np.array([0.0, 0.0, 0.0]),
            np.array([5.0, -5.0, 0.0]),
            np.array([10.0, -1.5, 0.0]),
            np.array([15.0, -5.0, 0.0]),
            np.array([17.0, 0.5, 0.0]),
        ]

        spline = CatmullRomSpline()
        for point in points:
            spline.add(point)
            self._add_sphere(point, 0.5, self.line_shape_material)

        # Full tension turns the Catmull-Rom tangents into a cardinal spline's.
        spline.tension = 1.0

        result = sample_curve(spline.evaluate, points[0], 100)
        self._set_camera_begin((8.0, 0.0, 30.0))
        return result


def build_curve_demo(curve_type: CurveType | str) -> CurveDemo:
    """Build the demo scene for ``curve_type`` in the shared scene manager."""
    return CurveDemo(curve_type)