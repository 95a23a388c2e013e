"""Unit tests for homogeneous tuples and colors.

Tests cover:
- Point/vector construction and w-component semantics
- Arithmetic combining w consistently
- Magnitude, normalization, dot and cross products
- Reflection about a normal
- Color arithmetic
"""

import math

import pytest

from src.whitted.core.color import BLACK, WHITE, Color
from src.whitted.core.tuple import Tuple, point, vector


class TestTupleKinds:
    """Tests for points versus vectors."""

    def test_tuple_with_w1_is_point(self):
        """Test that w = 1.0 marks a point."""
        t = Tuple(4.3, -4.2, 3.1, 1.0)
        assert t.is_point
        assert not t.is_vector

    def test_tuple_with_w0_is_vector(self):
        """Test that w = 0.0 marks a vector."""
        t = Tuple(4.3, -4.2, 3.1, 0.0)
        assert t.is_vector
        assert not t.is_point

    def test_point_factory(self):
        """Test point() sets w = 1."""
        assert point(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 1.0)

    def test_vector_factory(self):
        """Test vector() sets w = 0."""
        assert vector(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 0.0)

    def test_kind_checks_use_epsilon(self):
        """Test that w within EPSILON of 0 or 1 still counts as vector or point."""
        assert Tuple(1.0, 2.0, 3.0, 1e-7).is_vector
        assert not Tuple(1.0, 2.0, 3.0, 1e-7).is_point
        assert Tuple(1.0, 2.0, 3.0, 1.0 - 1e-7).is_point
        assert not Tuple(1.0, 2.0, 3.0, 1.0 - 1e-7).is_vector

    def test_equality_is_approximate(self):
        """Test that components within EPSILON compare equal."""
        assert point(1.0, 2.0, 3.0) == point(1.000001, 2.0, 3.0)
        assert point(1.0, 2.0, 3.0) != point(1.001, 2.0, 3.0)


class TestTupleArithmetic:
    """Tests for tuple arithmetic."""

    def test_adding_vector_to_point(self):
        """Test point + vector = point."""
        result = Tuple(3.0, -2.0, 5.0, 1.0) + Tuple(-2.0, 3.0, 1.0, 0.0)
        assert result == Tuple(1.0, 1.0, 6.0, 1.0)
        assert result.is_point

    def test_subtracting_two_points(self):
        """Test point - point = vector."""
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_subtracting_vector_from_point(self):
        """Test point - vector = point."""
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_subtracting_two_vectors(self):
        """Test vector - vector = vector."""
        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_negating(self):
        """Test unary minus negates every component."""
        assert -Tuple(1.0, -2.0, 3.0, -4.0) == Tuple(-1.0, 2.0, -3.0, 4.0)

    def test_scalar_multiplication(self):
        """Test multiplying by a scalar, from either side."""
        t = Tuple(1.0, -2.0, 3.0, -4.0)
        assert t * 3.5 == Tuple(3.5, -7.0, 10.5, -14.0)
        assert 0.5 * t == Tuple(0.5, -1.0, 1.5, -2.0)

    def test_scalar_division(self):
        """Test dividing by a scalar."""
        assert Tuple(1.0, -2.0, 3.0, -4.0) / 2 == Tuple(0.5, -1.0, 1.5, -2.0)


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    @pytest.mark.parametrize(
        "v, expected",
        [
            (vector(1, 0, 0), 1.0),
            (vector(0, 1, 0), 1.0),
            (vector(0, 0, 1), 1.0),
            (vector(1, 2, 3), math.sqrt(14)),
            (vector(-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, v, expected):
        """Test vector magnitude."""
        assert v.magnitude() == pytest.approx(expected)

    def test_normalize(self):
        """Test normalize returns the unit vector in the same direction."""
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
        root14 = math.sqrt(14)
        assert vector(1, 2, 3).normalize() == vector(1 / root14, 2 / root14, 3 / root14)

    @pytest.mark.parametrize(
        "v",
        [vector(1, 2, 3), vector(-0.3, 7.0, 1e-3), vector(1e4, -2e4, 5.0), vector(0, 0, -9)],
    )
    def test_normalized_magnitude_is_one(self, v):
        """Test any non-zero vector normalizes to magnitude 1."""
        assert v.normalize().magnitude() == pytest.approx(1.0)

    def test_dot_product(self):
        """Test dot product."""
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross_product(self):
        """Test cross product is anti-commutative."""
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)

    def test_reflect_at_45_degrees(self):
        """Test reflecting a vector approaching at 45 degrees."""
        assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        """Test reflecting off a slanted surface."""
        half = math.sqrt(2) / 2
        assert vector(0, -1, 0).reflect(vector(half, half, 0)) == vector(1, 0, 0)


class TestColor:
    """Tests for color arithmetic."""

    def test_color_channels(self):
        """Test channel access."""
        c = Color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)

    def test_adding_colors(self):
        """Test component-wise addition."""
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtracting_colors(self):
        """Test component-wise subtraction."""
        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_multiplying_by_scalar(self):
        """Test scaling a color."""
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        """Test component-wise color multiplication."""
        assert Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == Color(0.9, 0.2, 0.04)

    def test_clamped(self):
        """Test clamping into [0, 1]."""
        assert Color(-0.5, 0.5, 1.5).clamped() == Color(0.0, 0.5, 1.0)

    def test_constants(self):
        """Test BLACK and WHITE."""
        assert BLACK == Color(0, 0, 0)
        assert WHITE == Color(1, 1, 1)
