"""Infinite plane primitive.

The plane is the xz plane of its object space; its normal is +y everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.ray import Ray
from src.whitted.core.tuple import Tuple, vector
from src.whitted.geometry.shape import Intersection, Shape

# Rays whose |direction.y| is below this are treated as parallel to the plane
PARALLEL_EPSILON = 1e-5

UP = vector(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane(Shape):
    """The xz plane in object space."""

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        """Intersect a ray with y = 0.

        Parallel and coplanar rays have no slope in y and never intersect.
        Otherwise there is exactly one intersection at ``-origin.y / direction.y``.
        """
        if abs(local_ray.direction.y) < PARALLEL_EPSILON:
            return []
        distance = -local_ray.origin.y / local_ray.direction.y
        return [Intersection(self.shape_id, distance)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return UP
