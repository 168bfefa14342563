# curvescene

`curvescene` contains the geometry and scene logic for a small 3D renderer. It works on plain numpy arrays. A frame update returns the uniform values and draw passes that a renderer would submit.

## What it contains

### Curves (`curvescene.curves`)

- `Bezier`
  - `add(begin, control_point0, control_point1, end)` sets a cubic curve.
  - `evaluate(t)` evaluates the curve by de Casteljau's algorithm.
  - `evaluate2` and `evaluate3` give the quadratic and cubic forms.
- `BezierSpline`
  - Every fourth point passed to `add` completes a cubic segment.
  - `evaluate(t)` gives each segment an equal share of `t` from 0 to 1.
- `Hermite`
  - `set(begin, tangent_u, end, tangent_v)` defines the curve.
  - `evaluate(t)` evaluates it.
  - The static method `Hermite.evaluate3(...)` evaluates a curve without building one.
- `HermiteSpline`
  - `add(position, tangent)` adds one knot at a time.
  - `evaluate(t)` returns the last point once `t` reaches 1.
- `CatmullRomSpline`
  - Built from points passed to `add`.
  - `tension` defaults to 0.5, which gives Catmull-Rom tangents.
  - Any other value gives a cardinal spline.

Empty or too-short curves evaluate to the zero vector. A negative parameter on a spline raises `IndexError`.

### Shapes (`curvescene.shapes`)

- `LineShape(begin, width=0.03)` grows a flat ribbon of quads facing +Z. Each call to `add_position(end)` adds a quad. The ribbon is held in `vertices` and `indices`.
- `BoxShape(half_extents=(1, 1, 1))` has 24 vertices (four per face, with normals and UVs) and 36 triangle indices.

### Vertices (`curvescene.vertex`)

`Vertex` and `VertexUV` are frozen dataclasses. They turn any numeric sequence into a float tuple and check its length.

### OBJ loading (`curvescene.obj_loader`)

- `parse_obj(lines)` reads `v`, `vt`, `vn` and `f` records from an iterable of lines.
- `load_obj(path)` does the same for a file.

Both return an `ObjModel` with one vertex per face corner and sequential indices. Each face must give three or more `v/vt/vn` corners, and only the first three are used. A malformed corner or an index out of range raises `ValueError`.

### Transforms (`curvescene.transform`)

- Quaternion helpers: `quat_from_euler`, `quat_multiply`, `quat_inverse`, `quat_rotate`, `quat_to_mat4` and `quat_to_euler`.
- Matrix helpers: `translation_matrix`, `scale_matrix` and `rotation_matrix`.
- `Transform` has `position`, `rotation` (quaternion `w, x, y, z`) and `scale`. It supports parent and child links through `set_parent` and `add_child`, and refuses cycles. Its rotation methods take Euler angles in degrees:
  - `set_euler_angles_on_local_axis`
  - `set_euler_angles_on_world_axis`
  - `rotate_on_local_axis`
  - `rotate_on_world_axis`
- `SimpleTransform` composes `T * Ry * Rx * Rz * S` from `position`, `euler_angles` (in degrees) and `scale`.

### Camera and light (`curvescene.camera`, `curvescene.light`)

- `Camera` is a fly camera.
  - Movement: `add_movement`, `remove_movement` and `reset_movement` take a `MovementDirection`.
  - Rotation: `add_yaw`, `add_pitch` (clamped to ±89°) and `reset_rotation`.
  - Zoom: `apply_mouse_wheel` keeps the field of view within 1 to 90 degrees.
  - `update(delta_time)` moves the camera, and `view_matrix()` returns its view.
- `look_at` and `perspective` build right-handed view and projection matrices.
- `DirectionalLight` shines along its transform's forward axis. It exposes `direction` (w = 0) and `color`.

### Scene graph (`curvescene.material`, `curvescene.scene`)

- `Material` holds:
  - `shader` and an optional second-pass `shader2`, which can be any objects;
  - vec3, vec3-array and float properties;
  - texture ids.
- `GameObject` has a `transform`, a `material`, and a `mesh` and/or `line`.
  - `uniforms(shader_param)` returns the values sent to the shader: `mvp`, `normalMatrix`, the light, the camera position, the material properties and the `sampleN` texture units.
  - `update(...)` returns one `DrawPass` per shader.
- `Scene` manages objects:
  - `create_object`, `find_object` and `destroy_object`. Destroyed objects are removed at the end of the next update.
  - `update(width, height, delta_sec)` advances the camera and returns every draw pass for the frame.
- `SceneManager.instance()` is a shared manager. It creates scenes with increasing ids.

### Curve demo (`curvescene.curve_demo`)

- `build_curve_demo(curve_type)` builds a scene for one `CurveType`. The scene contains:
  - the sampled curve, as a ribbon or a thin line;
  - marker objects for its points;
  - the camera start position.
- `sample_curve(evaluate, begin, steps)` samples any curve into points, line vertex pairs and a `LineShape`.

## Installation

```
pip install .
```

## Examples

```python
from curvescene.curves import Bezier, CatmullRomSpline

bezier = Bezier()
bezier.add((-2, 0, 0), (-1, 3, 0), (1, -2, 0), (1, 3, 0))
print(bezier.evaluate(0.5))

spline = CatmullRomSpline()
for point in [(0, 0, 0), (5, -5, 0), (10, -1.5, 0), (15, -5, 0)]:
    spline.add(point)
print(spline.evaluate(0.25))
```

A scene frame:

```python
from curvescene.material import Material
from curvescene.scene import SceneManager

scene = SceneManager().create_scene()
obj = scene.create_object()
obj.material = Material(shader="color")
obj.material.set_property_vec3("customColor", (0, 1, 0))
obj.transform.position = (0, 0, -5)

for draw in scene.update(800, 600, 1 / 60):
    print(draw.shader, draw.uniforms["mvp"])
```

A demo scene:

```python
from curvescene.curve_demo import CurveType, build_curve_demo

demo = build_curve_demo(CurveType.HERMITE_SPLINE)
print(len(demo.curve_points), len(demo.markers))
```

## What it does not do

The package has no command-line program and no interactive menu. It does not:

- open a window or read keyboard or mouse input;
- compile or load shader files;
- load textures;
- upload anything to a GPU.

Shaders in a `Material` are opaque values. Rendering means handing the returned `DrawPass` records to a renderer of your own.

## Running the tests

```
pip install .[test]
pytest
```