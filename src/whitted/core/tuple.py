"""Homogeneous tuples for points and vectors.

A Tuple is an immutable (x, y, z, w) value. The w component tells points
(w = 1.0) from vectors (w = 0.0), which lets a single 4x4 matrix express
translation, rotation and scaling alike: translations move points but leave
vectors untouched.

Example:
    >>> from src.whitted.core.tuple import point, vector
    >>> p = point(3.0, 2.0, 1.0)
    >>> v = vector(5.0, 6.0, 7.0)
    >>> p - v
    Tuple(x=-2.0, y=-4.0, z=-6.0, w=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance used when comparing floating-point components
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Compare two floats within EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous coordinate (x, y, z, w).

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    @property
    def is_point(self) -> bool:
        return approx_equal(self.w, 1.0)

    @property
    def is_vector(self) -> bool:
        return approx_equal(self.w, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scale: float) -> Tuple:
        return Tuple(self.x * scale, self.y * scale, self.z * scale, self.w * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Tuple:
        return Tuple(self.x / scale, self.y / scale, self.z / scale, self.w / scale)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def magnitude(self) -> float:
        """Euclidean length of the x, y, z components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple:
        """Return the unit vector pointing the same way.

        The result is always a vector (w = 0.0). Normalizing a zero-length
        vector divides by zero; callers must not do it.
        """
        mag = self.magnitude()
        return Tuple(self.x / mag, self.y / mag, self.z / mag, 0.0)

    def dot(self, other: Tuple) -> float:
        """Dot product of the x, y, z components."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        """Cross product; only meaningful for vectors."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector, ``self - normal * 2 * dot(self, normal)``.
        """
        return self - normal * (2.0 * self.dot(normal))


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1.0)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0.0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
