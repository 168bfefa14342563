import math

import numpy as np
import pytest

from curvescene.shapes import BoxShape, LineShape


def test_box_counts_and_index_range():
    box = BoxShape()
    assert len(box.vertices) == 24
    assert len(box.indices) == 36
    assert all(0 <= i < 24 for i in box.indices)
    assert set(box.indices) == set(range(24))


def test_box_positions_scaled_by_half_extents():
    box = BoxShape((2.0, 3.0, 4.0))
    for vertex in box.vertices:
        assert tuple(abs(c) for c in vertex.position) == (2.0, 3.0, 4.0)


def test_box_normals_are_unit_and_point_outward():
    box = BoxShape((1.0, 1.0, 1.0))
    for vertex in box.vertices:
        assert math.isclose(np.linalg.norm(vertex.normal), 1.0)
        assert np.dot(vertex.normal, vertex.position) > 0


def test_box_front_face_is_red_others_white():
    box = BoxShape()
    for vertex in box.vertices:
        if vertex.normal == (0.0, 0.0, 1.0):
            assert vertex.color == (1.0, 0.0, 0.0)
        else:
            assert vertex.color == (1.0, 1.0, 1.0)


def test_box_rejects_bad_extents():
    with pytest.raises(ValueError):
        BoxShape((1.0, 2.0))


def test_line_first_quad_layout():
    shape = LineShape((0.0, 0.0, 0.0))
    shape.add_position((1.0, 0.0, 0.0))
    assert len(shape.vertices) == 4
    assert shape.indices == [0, 2, 1, 2, 3, 1]
    assert shape.vertices[0].position[0] == 0.0
    assert shape.vertices[1].position[0] == 1.0
    assert shape.vertices[0].color == (1.0, 1.0, 1.0)


def test_line_edges_span_twice_the_width():
    shape = LineShape((0.0, 0.0, 0.0))
    shape.add_position((1.0, 2.0, 0.0))
    v0, v1, v2, v3 = (np.array(v.position) for v in shape.vertices)
    assert math.isclose(np.linalg.norm(v0 - v2), 2 * shape.width)
    assert math.isclose(np.linalg.norm(v1 - v3), 2 * shape.width)
    # The ribbon's sides lie across the direction of travel.
    assert math.isclose(np.dot(v0 - v2, np.array([1.0, 2.0, 0.0])), 0.0, abs_tol=1e-12)


def test_line_later_quads_share_edges():
    shape = LineShape((0.0, 0.0, 0.0))
    points = [(1.0, 0.0, 0.0), (2.0, 1.0, 0.0), (3.0, 1.0, 0.0)]
    for point in points:
        shape.add_position(point)
    assert len(shape.vertices) == 4 + 2 * (len(points) - 1)
    assert len(shape.indices) == 6 * len(points)
    assert all(0 <= i < len(shape.vertices) for i in shape.indices)
    # Each new quad starts at the previous quad's trailing edge.
    assert shape.indices[6:8] == [1, 3]
    assert shape.indices[12:14] == [4, 5]


def test_line_vertices_follow_points():
    shape = LineShape((0.0, 0.0, 0.0))
    shape.add_position((1.0, 0.0, 0.0))
    shape.add_position((2.0, 0.0, 0.0))
    v1 = np.array(shape.vertices[4].position)
    v3 = np.array(shape.vertices[5].position)
    assert np.allclose((v1 + v3) / 2, [2.0, 0.0, 0.0])