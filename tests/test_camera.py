import math

import numpy as np
import pytest

from curvescene.camera import Camera, MovementDirection, look_at, perspective


def test_defaults():
    camera = Camera()
    assert camera.zoom == 60.0
    assert camera.speed == 10.0
    np.testing.assert_allclose(camera.forward, [0.0, 0.0, -1.0])
    np.testing.assert_allclose(camera.position, [0.0, 0.0, 0.0])


def test_constructor_position():
    camera = Camera((1.0, 2.0, 3.0))
    np.testing.assert_allclose(camera.position, [1.0, 2.0, 3.0])


def test_pitch_is_clamped():
    camera = Camera()
    camera.add_pitch(200.0)
    assert camera.pitch == 89.0
    camera.add_pitch(-500.0)
    assert camera.pitch == -89.0


def test_mouse_wheel_clamps_zoom():
    camera = Camera()
    camera.apply_mouse_wheel(-100.0)
    assert camera.zoom == 90.0
    camera.apply_mouse_wheel(500.0)
    assert camera.zoom == 1.0


def test_reset_rotation():
    camera = Camera()
    camera.add_yaw(33.0)
    camera.add_pitch(12.0)
    camera.reset_rotation()
    assert (camera.yaw, camera.pitch) == (0.0, 0.0)


def test_forward_movement():
    camera = Camera()
    camera.speed = 2.0
    camera.add_movement(MovementDirection.FORWARD)
    forward = camera.forward
    np.testing.assert_allclose(camera.velocity, forward * 2.0)
    camera.update(0.5)
    np.testing.assert_allclose(camera.position, forward * 2.0 * 0.5)


def test_left_and_backward_movement():
    camera = Camera()
    camera.add_movement(MovementDirection.LEFT)
    np.testing.assert_allclose(camera.velocity, -camera.right * camera.speed)
    camera.reset_movement()
    camera.add_movement(MovementDirection.BACKWARD)
    np.testing.assert_allclose(camera.velocity, -camera.forward * camera.speed)


def test_remove_movement_stops_axis():
    camera = Camera()
    camera.add_movement(MovementDirection.FORWARD)
    camera.add_movement(MovementDirection.RIGHT)
    camera.remove_movement(MovementDirection.BACKWARD)
    np.testing.assert_allclose(camera.velocity, camera.right * camera.speed)
    camera.remove_movement(MovementDirection.LEFT)
    np.testing.assert_allclose(camera.velocity, np.zeros(3))


def test_yaw_turns_forward():
    camera = Camera()
    camera.add_yaw(90.0)
    camera.update(0.0)
    np.testing.assert_allclose(camera.forward, [1.0, 0.0, 0.0], atol=1e-12)


def test_axes_stay_orthonormal():
    camera = Camera()
    camera.add_yaw(37.0)
    camera.add_pitch(-22.0)
    camera.update(0.0)
    axes = np.array([camera.forward, camera.up, camera.right])
    np.testing.assert_allclose(axes @ axes.T, np.identity(3), atol=1e-12)


def test_view_matrix_maps_eye_to_origin():
    camera = Camera()
    camera.position = (1.0, 2.0, 3.0)
    camera.add_yaw(20.0)
    camera.update(0.0)
    mapped = camera.view_matrix() @ np.array([1.0, 2.0, 3.0, 1.0])
    np.testing.assert_allclose(mapped, [0.0, 0.0, 0.0, 1.0], atol=1e-12)


def test_look_at_rotation_is_orthonormal():
    m = look_at((1.0, 2.0, 3.0), (4.0, -1.0, 0.5), (0.0, 1.0, 0.0))[:3, :3]
    np.testing.assert_allclose(m @ m.T, np.identity(3), atol=1e-12)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 1000.0
    m = perspective(math.radians(60.0), 1.5, near, far)
    at_near = m @ np.array([0.0, 0.0, -near, 1.0])
    at_far = m @ np.array([0.0, 0.0, -far, 1.0])
    assert at_near[2] / at_near[3] == pytest.approx(-1.0)
    assert at_far[2] / at_far[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)