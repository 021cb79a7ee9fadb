import pytest

from gkitlite.vec import (
    Point,
    Vec4,
    Vector,
    center,
    cross,
    distance,
    distance2,
    dot,
    length,
    length2,
    max_point,
    min_point,
    normalize,
    origin,
)

A = Point(1.0, -2.0, 3.5)
B = Point(-4.0, 0.5, 2.0)
U = Vector(0.3, -1.2, 2.0)
V = Vector(-2.5, 0.7, 1.1)


def test_origin_is_default_point():
    assert origin() == Point()


def test_indexing():
    assert [A[0], A[1], A[2]] == [A.x, A.y, A.z]
    assert [U[0], U[1], U[2]] == [U.x, U.y, U.z]
    with pytest.raises(IndexError):
        A[3]


def test_point_difference_is_vector_between():
    d = B - A
    assert isinstance(d, Vector)
    assert d == Vector.between(A, B)


def test_point_vector_round_trip():
    moved = A + U
    assert isinstance(moved, Point)
    back = moved - U
    assert back.x == pytest.approx(A.x)
    assert back.y == pytest.approx(A.y)
    assert back.z == pytest.approx(A.z)


def test_vector_plus_point_commutes():
    assert U + A == A + U


def test_vector_minus_point_moves_point_by_minus_vector():
    assert U - A == A - U


def test_point_sum_and_scaling():
    s = A + B
    assert isinstance(s, Point)
    assert s == Point(A.x + B.x, A.y + B.y, A.z + B.z)
    assert 2 * A == A * 2
    half = A / 2
    assert half.x == pytest.approx(A.x * 0.5)


def test_vector_arithmetic():
    assert U + V - V == Vector(U.x + V.x - V.x, U.y + V.y - V.y, U.z + V.z - V.z)
    assert -(-U) == U
    assert U * V == Vector(U.x * V.x, U.y * V.y, U.z * V.z)
    assert 3 * U == U * 3
    scaled = U / 4
    assert scaled.z == pytest.approx(U.z / 4)


def test_distance_properties():
    assert distance(A, B) == pytest.approx(distance(B, A))
    assert distance2(A, B) == pytest.approx(distance(A, B) ** 2)
    assert distance(A, A) == 0


def test_center_is_equidistant():
    c = center(A, B)
    assert distance(c, A) == pytest.approx(distance(c, B))
    assert distance(c, A) == pytest.approx(distance(A, B) / 2)


def test_min_max_points():
    lo = min_point(A, B)
    hi = max_point(A, B)
    assert lo == Point(B.x, A.y, B.z)
    assert hi == Point(A.x, B.y, A.z)


def test_normalize_has_unit_length():
    assert length(normalize(U)) == pytest.approx(1.0)


def test_cross_is_orthogonal():
    w = cross(U, V)
    assert dot(w, U) == pytest.approx(0.0, abs=1e-12)
    assert dot(w, V) == pytest.approx(0.0, abs=1e-12)
    assert cross(V, U) == -w


def test_cross_of_axes():
    assert cross(Vector(1, 0, 0), Vector(0, 1, 0)) == Vector(0, 0, 1)


def test_length2_matches_dot():
    assert length2(U) == pytest.approx(dot(U, U))


def test_vec4_homogeneous():
    p = Vec4.from_point(A)
    v = Vec4.from_vector(U)
    assert (p.x, p.y, p.z, p.w) == (A.x, A.y, A.z, 1.0)
    assert (v.x, v.y, v.z, v.w) == (U.x, U.y, U.z, 0.0)
    assert v[3] == 0.0