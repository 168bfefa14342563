import pytest

from curvescene.obj_loader import ObjModel, load_obj, parse_obj

TRIANGLE = """\
# a single triangle
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1
"""


def test_parse_triangle_corners():
    model = parse_obj(TRIANGLE.splitlines())
    assert model.indices == [0, 1, 2]
    assert [v.position for v in model.vertices] == [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
    ]
    assert [v.uv for v in model.vertices] == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    assert all(v.normal == (0.0, 0.0, 1.0) for v in model.vertices)
    assert all(v.color == (0.0, 0.0, 0.0) for v in model.vertices)


def test_shared_positions_are_duplicated_per_corner():
    text = TRIANGLE + "f 3/3/1 2/2/1 1/1/1\n"
    model = parse_obj(text.splitlines())
    assert model.indices == list(range(6))
    assert model.vertices[3].position == model.vertices[2].position
    assert model.vertices[5].position == model.vertices[0].position


def test_only_first_three_corners_of_a_face_are_used():
    text = TRIANGLE.replace("f 1/1/1 2/2/1 3/3/1", "v 1 1 0\nf 1/1/1 2/2/1 3/3/1 4/1/1")
    model = parse_obj(text.splitlines())
    assert len(model.vertices) == 3


def test_empty_input_gives_empty_model():
    assert parse_obj([]) == ObjModel()


def test_malformed_face_raises():
    text = TRIANGLE.replace("f 1/1/1 2/2/1 3/3/1", "f 1//1 2//1 3//1")
    with pytest.raises(ValueError):
        parse_obj(text.splitlines())


def test_out_of_range_index_raises():
    text = TRIANGLE.replace("3/3/1", "9/3/1")
    with pytest.raises(ValueError):
        parse_obj(text.splitlines())


def test_load_obj_matches_parse(tmp_path):
    path = tmp_path / "triangle.obj"
    path.write_text(TRIANGLE, encoding="utf-8")
    assert load_obj(path) == parse_obj(TRIANGLE.splitlines())


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")