"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from phongcast.vec3 import Vec3, Point3, Color


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array(self):
        v = Vec3.from_array(np.array([1.0, 2.0, 3.0]))
        assert v.to_tuple() == (1.0, 2.0, 3.0)

    def test_to_array_is_copy(self):
        v = Vec3(1, 2, 3)
        arr = v.to_array()
        arr[0] = 100
        assert v.x == 1


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        assert -Vec3(1, 2, 3) == Vec3(-1, -2, -3)

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_scalar_multiplication(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_component_wise_multiplication(self):
        light = Color(1.0, 0.5, 0.0)
        surface = Color(0.5, 1.0, 1.0)
        assert light * surface == Color(0.5, 0.5, 0.0)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_operations_do_not_mutate(self):
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        _ = a + b
        _ = a * b
        _ = -a
        assert a == Vec3(1, 2, 3)
        assert b == Vec3(4, 5, 6)


class TestVec3Products:
    """Test dot, cross and normalization."""

    def test_dot(self):
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32

    def test_cross(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)

    def test_length(self):
        assert abs(Vec3(3, 4, 0).length() - 5.0) < 1e-12
        assert Vec3(3, 4, 0).length_squared() == 25

    def test_normalize(self):
        v = Vec3(3, 4, 0).normalize()
        assert abs(v.length() - 1.0) < 1e-12
        assert v == Vec3(0.6, 0.8, 0.0)

    def test_normalize_zero(self):
        assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)

    def test_reflect_along_normal(self):
        n = Vec3(0, 1, 0)
        assert Vec3(0, 1, 0).reflect(n) == Vec3(0, 1, 0)

    def test_reflect_oblique(self):
        n = Vec3(0, 1, 0)
        assert Vec3(1, 1, 0).reflect(n) == Vec3(-1, 1, 0)


class TestVec3Projection:
    """Test dominant axis helpers."""

    def test_dominant_axis(self):
        assert Vec3(1, -5, 2).dominant_axis() == 1
        assert Vec3(0, 0, -0.1).dominant_axis() == 2
        assert Vec3(7, 1, 1).dominant_axis() == 0

    def test_dominant_axis_tie_prefers_lowest(self):
        assert Vec3(1, 1, 1).dominant_axis() == 0

    def test_drop_axis(self):
        v = Vec3(1, 2, 3)
        assert v.drop_axis(0) == (2.0, 3.0)
        assert v.drop_axis(1) == (1.0, 3.0)
        assert v.drop_axis(2) == (1.0, 2.0)


class TestVec3Misc:
    """Test equality, hashing and iteration."""

    def test_equality_tolerance(self):
        assert Vec3(1, 2, 3) == Vec3(1 + 1e-12, 2, 3)
        assert Vec3(1, 2, 3) != Vec3(1.1, 2, 3)

    def test_not_equal_to_other_types(self):
        assert Vec3(1, 2, 3) != (1, 2, 3)

    def test_iteration(self):
        x, y, z = Vec3(1, 2, 3)
        assert (x, y, z) == (1.0, 2.0, 3.0)

    def test_indexing(self):
        v = Vec3(1, 2, 3)
        assert v[0] == 1 and v[1] == 2 and v[2] == 3

    def test_repr(self):
        assert "Vec3" in repr(Vec3(1, 2, 3))

    def test_aliases(self):
        assert Point3 is Vec3
        assert Color is Vec3
