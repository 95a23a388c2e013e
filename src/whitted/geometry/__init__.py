"""Geometry module for shape primitives.

This module provides the shape abstraction and its primitives:

Components:
    shape: Shape base class and the Intersection record
    sphere: Sphere primitive with quadratic ray-sphere intersection
    plane: Infinite xz plane

Every shape intersects rays in its own object space:
    intersect(ray) -> local_intersect(ray transformed by the inverse)
    normal_at(p)   -> local_normal_at(inverse * p), mapped back by the
                      inverse-transpose and re-normalized
"""

from .plane import Plane
from .shape import Intersection, Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Intersection",
    "Sphere",
    "Plane",
]
