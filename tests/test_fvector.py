import math
import struct

import pytest

from mazeclick.fvector import Vector2f, Vector3, Vertex, dot, lerp


def test_vector2f_addition_and_subtraction_round_trip():
    a = Vector2f(1.5, -2.0)
    b = Vector2f(0.25, 4.0)
    assert (a + b) - b == a
    assert a + b == Vector2f(1.5 + 0.25, -2.0 + 4.0)


def test_vector2f_scaling_both_sides():
    v = Vector2f(3.0, -1.0)
    assert v * 2 == 2 * v
    assert v * 2 == Vector2f(3.0 * 2, -1.0 * 2)
    assert (v * 2) / 2 == v


def test_vector2f_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2f(1.0, 1.0) / 0


def test_vector2f_negation():
    v = Vector2f(2.0, -7.0)
    assert -v == Vector2f(-2.0, 7.0)
    assert -(-v) == v


def test_vector2f_str_format():
    assert str(Vector2f(1.5, -2)) == "(1.500000,-2.000000)"


def test_vector2f_length():
    assert Vector2f(3.0, 4.0).length() == pytest.approx(5.0)


def test_vector2f_normalized_has_unit_length():
    v = Vector2f(-6.0, 2.5).normalized()
    assert v.length() == pytest.approx(1.0)


def test_vector2f_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2f.ZERO.normalized()


def test_vector2f_constants():
    assert Vector2f.ONE - Vector2f.RIGHT == Vector2f(0.0, 1.0)
    assert Vector2f.UP == Vector2f(0.0, 1.0)
    assert Vector2f.ZERO + Vector2f.ONE == Vector2f(1.0, 1.0)


def test_dot_of_self_is_length_squared():
    v = Vector2f(1.25, -3.5)
    assert dot(v, v) == pytest.approx(v.length() ** 2)
    w = Vector3(1.0, 2.0, -2.0)
    assert dot(w, w) == pytest.approx(w.length() ** 2)


def test_dot_of_perpendicular_axes_is_zero():
    assert dot(Vector2f.RIGHT, Vector2f.UP) == 0.0
    assert dot(Vector3.RIGHT, Vector3.FORWARD) == 0.0


def test_dot_rejects_mixed_kinds():
    with pytest.raises(TypeError):
        dot(Vector2f.ONE, Vector3.ONE)


@pytest.mark.parametrize("t", [-1.0, 0.0])
def test_lerp_clamps_low(t):
    start = Vector2f(1.0, 2.0)
    end = Vector2f(5.0, -6.0)
    assert lerp(start, end, t) == start


@pytest.mark.parametrize("t", [1.0, 2.5])
def test_lerp_clamps_high(t):
    start = Vector3(1.0, 2.0, 3.0)
    end = Vector3(-4.0, 0.0, 8.0)
    assert lerp(start, end, t) == end


def test_lerp_midpoint_is_average():
    start = Vector3(0.0, 2.0, 4.0)
    end = Vector3(2.0, 6.0, 8.0)
    assert lerp(start, end, 0.5) == (start + end) / 2


def test_vector3_cross_is_perpendicular_and_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert b.cross(a) == -c


def test_vector3_cross_of_right_and_up_is_forward():
    assert Vector3.RIGHT.cross(Vector3.UP) == Vector3.FORWARD


def test_vector3_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1.0, 1.0, 1.0) / 0.0


def test_vector3_normalized_unit_length():
    assert Vector3(2.0, -3.0, 6.0).normalized().length() == pytest.approx(1.0)


def test_vector_to_bytes_round_trip():
    v = Vector3(1.5, -0.25, 8.0)
    assert len(v.to_bytes()) == Vector3.STRIDE
    assert struct.unpack("<3f", v.to_bytes()) == (1.5, -0.25, 8.0)
    w = Vector2f(0.5, 2.0)
    assert struct.unpack("<2f", w.to_bytes()) == (0.5, 2.0)


def test_vertex_bytes_layout():
    vertex = Vertex(Vector3(-0.5, 0.5, 0.5), Vector3(1.0, 0.0, 0.0), Vector2f(0.0, 1.0))
    data = vertex.to_bytes()
    assert len(data) == Vertex.STRIDE
    assert struct.unpack("<8f", data) == (-0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 1.0)


def test_vertex_position_is_replaceable():
    vertex = Vertex(Vector3.ONE, Vector3.ZERO, Vector2f.ZERO)
    vertex.position = vertex.position * 2
    assert vertex.position == Vector3(2.0, 2.0, 2.0)
    assert not math.isnan(vertex.position.length())