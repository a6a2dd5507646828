"""Point and Vector primitives."""
import math

import numpy as np
import pytest

from cartesiangeometry import CartesianElement, Point, Vector


def test_point_coordinates_are_floats():
    p = Point.of(1, 2, 3)

    assert p.coords == (1.0, 2.0, 3.0)
    assert all(isinstance(c, float) for c in p)
    assert p.num_dimensions == len(p) == 3
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)


def test_point_dim_out_of_range():
    p = Point.of(1, 2)
    with pytest.raises(IndexError):
        p.dim(2)
    with pytest.raises(IndexError):
        p.dim(-1)
    with pytest.raises(IndexError):
        _ = p.z


def test_zero_dimensional_point_is_rejected():
    with pytest.raises(ValueError):
        Point(())


@pytest.mark.parametrize("text", ["12", b"12"])
def test_string_coordinates_are_rejected(text):
    with pytest.raises(TypeError):
        Point(text)
    with pytest.raises(TypeError):
        Vector(text)


def test_point_is_immutable_and_hashable():
    p = Point.of(1, 2)
    with pytest.raises(AttributeError):
        p.coords = (3.0, 4.0)
    assert len({p, Point.of(1.0, 2.0)}) == 1


def test_point_from_array():
    p = Point.from_array(np.array([0.5, -1.0]))
    assert p == Point.of(0.5, -1.0)
    with pytest.raises(ValueError):
        Point.from_array(np.zeros((2, 2)))


def test_point_vector_arithmetic():
    a = Point.of(1, 1)
    b = Point.of(4, 5)

    assert b - a == Vector.of(3, 4)
    assert a + Vector.of(3, 4) == b
    assert b - Vector.of(3, 4) == a
    assert a.distance_to(b) == pytest.approx(5.0)


def test_point_arithmetic_type_errors():
    with pytest.raises(TypeError):
        Point.of(1, 1) + Point.of(1, 1)
    with pytest.raises(TypeError):
        Point.of(1, 1) - 1.0


def test_point_dimension_mismatch():
    with pytest.raises(ValueError):
        Point.of(1, 1) - Point.of(1, 1, 1)
    with pytest.raises(ValueError):
        Point.of(1, 1) + Vector.of(1, 1, 1)


def test_almost_equal():
    assert Point.of(1, 2).almost_equal(Point.of(1 + 1e-12, 2))
    assert not Point.of(1, 2).almost_equal(Point.of(1.1, 2))
    assert not Point.of(1, 2).almost_equal(Point.of(1, 2, 0))
    assert Point.of(1, 2).almost_equal(Point.of(1.05, 2), tol=0.1)


def test_vector_operations():
    v = Vector.of(3, 4)
    w = Vector.of(1, -1)

    assert v + w == Vector.of(4, 3)
    assert v - w == Vector.of(2, 5)
    assert v * 2 == 2 * v == Vector.of(6, 8)
    assert v / 2 == Vector.of(1.5, 2)
    assert -w == Vector.of(-1, 1)
    assert v.magnitude == pytest.approx(5.0)
    assert v.dot(w) == pytest.approx(-1.0)
    assert v.normalize().magnitude == pytest.approx(1.0)


def test_vector_edge_cases():
    assert Vector.zeros(3).normalize() == Vector.zeros(3)
    with pytest.raises(ZeroDivisionError):
        Vector.of(1, 2) / 0
    with pytest.raises(ValueError):
        Vector.of(1, 2) + Vector.of(1, 2, 3)
    with pytest.raises(ValueError):
        Vector.of(1, 2).dot(Vector.of(1))
    with pytest.raises(IndexError):
        Vector.of(1, 2).dim(5)


def test_vector_point_conversion():
    p = Point.of(0.5, 1.5, 2.5)
    v = Vector.from_point(p)

    assert v.to_point() == p
    assert v.dim(1) == 1.5
    np.testing.assert_array_equal(v.to_array(), p.to_array())


def test_vector_accumulates_centroid():
    points = [Point.of(0, 0), Point.of(2, 0), Point.of(0, 4)]
    total = Vector.zeros(2)
    for p in points:
        total = total + Vector.from_point(p)
    centroid = (total * (1.0 / len(points))).to_point()

    assert centroid.x == pytest.approx(2 / 3)
    assert centroid.y == pytest.approx(4 / 3)
    assert not math.isnan(centroid.x)


@pytest.mark.parametrize("element", [Point.of(1.0), Vector.of(1.0, 2.0)])
def test_primitives_are_cartesian_elements(element):
    assert isinstance(element, CartesianElement)
