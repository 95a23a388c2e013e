"""Shape abstraction shared by every primitive.

A shape owns a cached Transformation and a Material and knows two things
about its own geometry, expressed in object space:

    local_intersect(local_ray) -> list of Intersection
    local_normal_at(local_point) -> normal vector

The public ``intersect`` and ``normal_at`` wrap these with the world/object
space conversions, so a new primitive only implements the two local methods.

Shapes are immutable; ``set_transform`` and ``set_material`` return copies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from src.whitted.core.matrix import Matrix, Transformation
from src.whitted.core.ray import Ray
from src.whitted.core.tuple import Tuple, vector
from src.whitted.materials.material import Material


@dataclass(frozen=True)
class Intersection:
    """A ray-shape intersection.

    Attributes:
        object_id: Identity of the intersected shape.
        distance: Signed distance along the ray. Negative values lie behind
            the ray origin and are kept so callers can decide what to do.
    """

    object_id: int
    distance: float


@dataclass(frozen=True)
class Shape(ABC):
    """Base class for renderable primitives.

    Attributes:
        shape_id: Identity of the shape inside a world; assigned by the caller
            and unique per world.
        transform: Object-to-world transform with cached inverse and
            inverse-transpose.
        material: Surface material.
    """

    shape_id: int
    transform: Transformation = field(default_factory=Transformation.identity)
    material: Material = field(default_factory=Material)

    def set_transform(self, matrix: Matrix) -> Shape:
        """Return a copy with a new transform.

        Raises:
            ValueError: If ``matrix`` is singular.
        """
        return replace(self, transform=Transformation.make(matrix))

    def set_material(self, material: Material) -> Shape:
        return replace(self, material=material)

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        """Intersect a ray already expressed in object space."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Surface normal at an object-space point."""

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space.

        Returns:
            Intersections tagged with this shape's identity, in the order the
            shape produces them. May be empty.
        """
        local_ray = ray.transform(self.transform.inverse)
        return self.local_intersect(local_ray)

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a world-space point.

        The object-space normal is mapped back with the inverse-transpose,
        which keeps it perpendicular to the surface under non-uniform scaling.
        The translation part of that matrix pollutes w, so w is reset before
        normalizing.
        """
        local_point = self.transform.inverse.multiply_tuple(world_point)
        local_normal = self.local_normal_at(local_point)
        world_normal = self.transform.inverse_transpose.multiply_tuple(local_normal)
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()
