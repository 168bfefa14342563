import numpy as np
import pytest

from curvescene.material import Material
from curvescene.scene import GameObject, Scene, SceneManager, ShaderParam, WindowParam


def _identity_param(**overrides):
    param = ShaderParam(
        view_projection_matrix=np.identity(4),
        light_dir=np.array([0.0, -1.0, 0.0, 0.0]),
        light_color=np.array([1.0, 1.0, 1.0]),
        camera_world_position=np.array([0.0, 0.0, 5.0]),
    )
    for key, value in overrides.items():
        setattr(param, key, value)
    return param


def _object_with_material(**material_kwargs):
    obj = GameObject(1)
    obj.material = Material(**material_kwargs)
    return obj


def test_window_param_defaults_to_zero():
    param = WindowParam()
    assert (param.width, param.height) == (0, 0)


def test_create_object_ids_increase():
    scene = Scene(1)
    first = scene.create_object()
    second = scene.create_object()
    assert (first.instance_id, second.instance_id) == (1, 2)
    assert scene.find_object(2) is second


def test_find_missing_object_returns_none():
    scene = Scene(1)
    assert scene.find_object(5) is None


def test_camera_starts_back_from_origin():
    scene = Scene(3)
    np.testing.assert_array_equal(scene.camera.position, [0, 0, 100])
    assert scene.instance_id == 3


def test_destroy_is_deferred_until_update():
    scene = Scene(1)
    obj = scene.create_object()
    obj.material = Material(shader="color")
    scene.destroy_object(obj)
    assert scene.find_object(obj.instance_id) is obj
    passes = scene.update(800, 600, 0.0)
    assert len(passes) == 1
    assert scene.find_object(obj.instance_id) is None
    assert scene.objects == []


def test_update_produces_pass_per_shader():
    scene = Scene(1)
    obj = scene.create_object()
    obj.mesh = "sphere"
    obj.material = Material(shader="color", shader2="outline")
    passes = scene.update(800, 600, 0.016)
    assert [p.shader for p in passes] == ["color", "outline"]
    assert all(p.mesh == "sphere" for p in passes)


def test_update_rejects_zero_height():
    scene = Scene(1)
    with pytest.raises(ValueError):
        scene.update(800, 0, 0.0)


def test_update_without_material_raises():
    scene = Scene(1)
    scene.create_object()
    with pytest.raises(ValueError):
        scene.update(800, 600, 0.0)


def test_mvp_is_model_matrix_for_identity_view_projection():
    obj = _object_with_material(shader="color")
    obj.transform.position = (1.0, 2.0, 3.0)
    uniforms = obj.uniforms(_identity_param())
    np.testing.assert_allclose(uniforms["mvp"], obj.transform.model_matrix)
    np.testing.assert_allclose(uniforms["modelMatrix"], obj.transform.model_matrix[:3, :3])


def test_normal_matrix_is_inverse_transpose():
    obj = _object_with_material(shader="color")
    obj.transform.scale = (2.0, 4.0, 8.0)
    normal = obj.uniforms(_identity_param())["normalMatrix"]
    model3 = obj.transform.model_matrix[:3, :3]
    np.testing.assert_allclose(normal.T @ model3, np.identity(3), atol=1e-12)


def test_light_color_is_clamped_and_ambient_fixed():
    obj = _object_with_material(shader="color")
    param = _identity_param(light_color=np.array([2.0, -1.0, 0.5]))
    uniforms = obj.uniforms(param)
    np.testing.assert_allclose(uniforms["lightColor"], [1.0, 0.0, 0.5])
    assert uniforms["ambientIntensity"] == 0.2
    np.testing.assert_allclose(uniforms["lightDirection"], [0.0, -1.0, 0.0])


def test_material_properties_become_uniforms():
    obj = _object_with_material(shader="color")
    obj.material.set_property_vec3("customColor", (0, 1, 0))
    obj.material.add_property_vec3_array("points", (1, 2, 3))
    obj.material.add_property_vec3_array("points", (4, 5, 6))
    obj.material.set_property_float("thickness", 0.05)
    obj.material.add_texture(11)
    obj.material.add_texture(12)
    uniforms = obj.uniforms(_identity_param())
    np.testing.assert_array_equal(uniforms["customColor"], [0, 1, 0])
    np.testing.assert_array_equal(uniforms["points[1]"], [4, 5, 6])
    assert uniforms["thickness"] == 0.05
    assert (uniforms["sample0"], uniforms["sample1"]) == (0, 1)
    passes = obj.update(_identity_param(), 0.0)
    assert passes[0].textures == ((0, 11), (1, 12))


def test_scene_manager_ids_and_reset():
    manager = SceneManager()
    first = manager.create_scene()
    second = manager.create_scene()
    assert (first.instance_id, second.instance_id) == (1, 2)
    assert manager.scenes == [first, second]
    manager.destroy_all_scenes()
    assert manager.scenes == []
    assert manager.create_scene().instance_id == 1


def test_scene_manager_instance_is_shared():
    first = SceneManager.instance()
    second = SceneManager.instance()
    scene = first.create_scene()
    assert any(s is scene for s in second.scenes)
    first.destroy_all_scenes()
    assert second.scenes == []