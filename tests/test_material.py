import numpy as np
import pytest

from curvescene.material import Material


def test_new_material_is_empty():
    material = Material()
    assert material.shader is None
    assert material.shader2 is None
    assert material.properties_vec3 == {}
    assert material.properties_vec3_array == {}
    assert material.properties_float == {}
    assert material.texture_ids == []


def test_shaders_are_kept():
    material = Material(shader="color", shader2="outline")
    assert material.shader == "color"
    assert material.shader2 == "outline"


def test_set_property_vec3_replaces_value():
    material = Material()
    material.set_property_vec3("customColor", (0, 1, 0))
    material.set_property_vec3("customColor", (1, 1, 1))
    assert list(material.properties_vec3) == ["customColor"]
    np.testing.assert_array_equal(material.properties_vec3["customColor"], [1, 1, 1])


def test_set_property_vec3_rejects_wrong_size():
    material = Material()
    with pytest.raises(ValueError):
        material.set_property_vec3("customColor", (1, 2))


def test_vec3_array_appends_in_order():
    material = Material()
    material.add_property_vec3_array("points", (1, 2, 3))
    material.add_property_vec3_array("points", (4, 5, 6))
    values = material.properties_vec3_array["points"]
    assert len(values) == 2
    np.testing.assert_array_equal(values[0], [1, 2, 3])
    np.testing.assert_array_equal(values[1], [4, 5, 6])


def test_set_property_float_replaces_value():
    material = Material()
    material.set_property_float("thickness", 0.05)
    material.set_property_float("thickness", 0.25)
    assert material.properties_float == {"thickness": 0.25}


def test_textures_keep_order():
    material = Material()
    material.add_texture(7)
    material.add_texture(3)
    assert material.texture_ids == [7, 3]