"""World: the shapes and lights of a scene, and how a ray sees them.

The world answers four questions:

    intersect_with_ray(ray)   every positive-distance intersection, nearest first
    shade_hit(comps)          color at a prepared intersection, summed over lights
    color_at(ray)             color seen along a ray (black on a miss)
    is_shadowed(point, light) whether something sits between point and light

Worlds are immutable and built incrementally:

Example:
    >>> from src.whitted.core.color import WHITE
    >>> from src.whitted.core.tuple import point
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.scene.light import PointLight
    >>> world = (
    ...     World()
    ...     .add_object(Sphere(1))
    ...     .set_light(PointLight(point(-10, 10, -10), WHITE))
    ... )
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from src.whitted.core.color import BLACK, WHITE, Color
from src.whitted.core.matrix import scaling
from src.whitted.core.ray import Ray
from src.whitted.core.tuple import Tuple, point
from src.whitted.geometry.shape import Intersection, Shape
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import PreparedComputations, hit, prepare_computations
from src.whitted.scene.light import PointLight, lighting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class World:
    """An ordered collection of shapes plus zero or more lights.

    Attributes:
        objects: Shapes in insertion order. Identities are unique.
        lights: Point lights; their contributions are summed.
    """

    objects: tuple[Shape, ...] = ()
    lights: tuple[PointLight, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for shape in self.objects:
            if shape.shape_id in seen:
                raise ValueError(f"Duplicate shape id {shape.shape_id} in world")
            seen.add(shape.shape_id)
        logger.debug("World has %d shapes and %d lights", len(self.objects), len(self.lights))

    # =========================================================================
    # Construction
    # =========================================================================

    def add_object(self, shape: Shape) -> World:
        """Return a world with ``shape`` appended.

        Raises:
            ValueError: If a shape with the same identity is already present.
        """
        return replace(self, objects=(*self.objects, shape))

    def add_objects(self, shapes: Iterable[Shape]) -> World:
        return replace(self, objects=(*self.objects, *shapes))

    def set_light(self, light: PointLight) -> World:
        """Return a world lit by ``light`` alone."""
        return replace(self, lights=(light,))

    def set_lights(self, lights: Iterable[PointLight]) -> World:
        return replace(self, lights=tuple(lights))

    def add_light(self, light: PointLight) -> World:
        return replace(self, lights=(*self.lights, light))

    def object_by_id(self, shape_id: int) -> Shape:
        """Look up a shape by identity.

        Raises:
            KeyError: If no shape has this identity. Intersections only come
                from the world's own shapes, so this is a logic error.
        """
        for shape in self.objects:
            if shape.shape_id == shape_id:
                return shape
        raise KeyError(f"No shape with id {shape_id} in world")

    # =========================================================================
    # Ray Queries
    # =========================================================================

    def intersect_with_ray(self, ray: Ray) -> list[Intersection]:
        """Intersect every shape with ``ray``.

        Args:
            ray: The world-space ray.

        Returns:
            All intersections with a positive distance, sorted ascending by
            distance. The sort is stable, so ties keep the order in which the
            shapes were added.
        """
        intersections = [
            i for shape in self.objects for i in shape.intersect(ray) if i.distance > 0.0
        ]
        intersections.sort(key=lambda i: i.distance)
        return intersections

    def shade_hit(self, comps: PreparedComputations) -> Color:
        """Color at a prepared intersection.

        Each light contributes ambient + diffuse + specular, with diffuse and
        specular dropped when that light is shadowed at ``comps.over_point``.
        Contributions are summed without normalization; a world without
        lights is black.
        """
        if not self.lights:
            return BLACK
        shape = self.object_by_id(comps.object_id)
        color = BLACK
        for light in self.lights:
            color = color + lighting(
                shape.material,
                shape.transform,
                light,
                comps.over_point,
                comps.eye,
                comps.normal,
                self.is_shadowed(comps.over_point, light),
            )
        return color

    def color_at(self, ray: Ray) -> Color:
        """Color seen along ``ray``: the nearest hit shaded, or black."""
        intersections = self.intersect_with_ray(ray)
        if not intersections:
            return BLACK
        comps = prepare_computations(intersections[0], ray, self)
        return self.shade_hit(comps)

    def is_shadowed(self, world_point: Tuple, light: PointLight) -> bool:
        """Check whether an object lies between ``world_point`` and ``light``.

        Args:
            world_point: The point being lit, usually a shadow-bias point.
            light: The light to test against.

        Returns:
            True if a hit exists strictly closer than the light. Objects
            behind the point or beyond the light cast no shadow.
        """
        to_light = light.position - world_point
        distance = to_light.magnitude()
        shadow_ray = Ray(world_point, to_light.normalize())
        nearest = hit(self.intersect_with_ray(shadow_ray))
        return nearest is not None and nearest.distance < distance


def default_world() -> World:
    """The reference world used to check shading.

    A white light at (-10, 10, -10) and two concentric spheres: an outer unit
    sphere (id 1) with color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2, and
    an inner sphere (id 2) of world radius sqrt(0.5) / 2.
    """
    outer = Sphere(1, material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(2, radius=math.sqrt(0.5)).set_transform(scaling(0.5, 0.5, 0.5))
    return World(
        objects=(outer, inner),
        lights=(PointLight(point(-10.0, 10.0, -10.0), WHITE),),
    )
