"""Sphere primitive.

In object space the sphere is centered at the origin with radius 1 (or the
radius given). Ray-sphere intersection solves

    a*t^2 + b*t + c = 0

with
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - radius^2

A negative discriminant means the ray misses. Roots closer than
TANGENT_EPSILON collapse to a single tangent intersection; otherwise both
roots are returned, nearest first.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuple import point, vector
    >>> s = Sphere(1)
    >>> [i.distance for i in s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from src.whitted.core.ray import Ray
from src.whitted.core.tuple import ORIGIN, Tuple
from src.whitted.geometry.shape import Intersection, Shape

# Roots closer than this are treated as one tangent hit
TANGENT_EPSILON = 1e-5


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere centered at the object-space origin.

    Attributes:
        radius: Object-space radius (default 1.0).
    """

    radius: float = 1.0

    def set_radius(self, radius: float) -> Sphere:
        return replace(self, radius=radius)

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        sphere_to_ray = local_ray.origin - ORIGIN
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)

        if abs(t1 - t2) < TANGENT_EPSILON:
            return [Intersection(self.shape_id, t1)]
        if t1 > t2:
            t1, t2 = t2, t1
        return [Intersection(self.shape_id, t1), Intersection(self.shape_id, t2)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - ORIGIN
