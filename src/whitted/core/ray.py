"""Ray data structure.

A ray has an origin point and a direction vector. Shapes intersect rays in
their own object space, so rays know how to move between coordinate spaces
through ``transform``.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuple import point, vector
    >>> ray = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> ray.position_at(2.5)
    Tuple(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import Matrix
from src.whitted.core.tuple import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            normalized; object-space rays generally are not, and distances are
            measured in units of this vector.
    """

    origin: Tuple
    direction: Tuple

    def position_at(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point ``origin + t * direction``.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction multiplied by ``matrix``."""
        return Ray(matrix.multiply_tuple(self.origin), matrix.multiply_tuple(self.direction))
