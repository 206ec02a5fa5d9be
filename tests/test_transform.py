import struct

import pytest

from mazeclick.fvector import Vector3
from mazeclick.matrix import Matrix4
from mazeclick.transform import Transform


def test_default_transform_is_identity():
    assert Transform().matrix() == Matrix4.IDENTITY


def test_scale_only_fills_diagonal():
    m = Transform(scale=Vector3(2.0, 3.0, 4.0)).matrix()
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 3.0, 4.0, 1.0)


def test_translation_is_in_last_column_after_transpose():
    m = Transform(position=Vector3(5.0, -6.0, 7.5)).matrix()
    assert (m[0, 3], m[1, 3], m[2, 3]) == (5.0, -6.0, 7.5)


def test_translation_is_not_scaled():
    transform = Transform(position=Vector3(1.0, 2.0, 3.0), scale=Vector3(2.0, 2.0, 2.0))
    row_major = transform.matrix().transposed()
    assert row_major.rows[3] == (1.0, 2.0, 3.0, 1.0)


def test_rotation_turns_right_into_up():
    transform = Transform(rotation=Vector3(0.0, 0.0, 90.0))
    result = Vector3.RIGHT * transform.matrix().transposed()
    assert tuple(result) == pytest.approx(tuple(Vector3.UP), abs=1e-5)


def test_scale_applied_before_rotation():
    transform = Transform(rotation=Vector3(0.0, 0.0, 90.0), scale=Vector3(3.0, 1.0, 1.0))
    result = Vector3.RIGHT * transform.matrix().transposed()
    assert tuple(result) == pytest.approx(tuple(Vector3.UP * 3.0), abs=1e-5)


def test_to_bytes_holds_matrix():
    transform = Transform(position=Vector3(5.0, 6.0, 7.0))
    data = transform.to_bytes()
    assert len(data) == Matrix4.STRIDE
    values = struct.unpack("<16f", data)
    assert (values[3], values[7], values[11]) == (5.0, 6.0, 7.0)


def test_changing_fields_updates_matrix():
    transform = Transform()
    transform.position = Vector3(1.0, 0.0, 0.0)
    assert transform.matrix() == Matrix4.translation(1.0, 0.0, 0.0).transposed()