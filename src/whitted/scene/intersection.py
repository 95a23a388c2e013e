"""Hit selection and pre-shading computations.

This module turns raw ray-shape intersections into what shading needs:

    hit(intersections)
        The nearest intersection in front of the ray origin, or None.

    prepare_computations(intersection, ray, world)
        World point, eye vector, surface normal (flipped when the eye is
        inside the shape), and a shadow-bias point nudged off the surface.

Example:
    >>> from src.whitted.geometry.shape import Intersection
    >>> hit([Intersection(1, -1.0), Intersection(1, 2.0), Intersection(1, 1.0)])
    Intersection(object_id=1, distance=1.0)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuple import Tuple
from src.whitted.geometry.shape import Intersection

if TYPE_CHECKING:
    from src.whitted.scene.world import World

# Offset along the normal applied before casting shadow rays
SHADOW_BIAS = 1e-5


@dataclass(frozen=True)
class PreparedComputations:
    """Per-intersection data consumed by shading.

    Attributes:
        object_id: Identity of the intersected shape.
        distance: Distance along the ray of the intersection.
        point: World-space intersection point.
        over_point: ``point`` moved SHADOW_BIAS along ``normal``; shadow rays
            start here so the surface does not shadow itself.
        eye: Vector from the point back toward the ray origin.
        normal: Unit surface normal, facing the eye.
        inside: True when the ray origin is inside the shape and the normal
            was flipped.
    """

    object_id: int
    distance: float
    point: Tuple
    over_point: Tuple
    eye: Tuple
    normal: Tuple
    inside: bool


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Args:
        intersections: Intersections in any order.

    Returns:
        The intersection with the smallest positive distance, or None when
        the input is empty or every distance is non-positive.
    """
    visible = [i for i in intersections if i.distance > 0.0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.distance)


def prepare_computations(
    intersection: Intersection,
    ray: Ray,
    world: World,
) -> PreparedComputations:
    """Compute shading inputs for an intersection.

    Args:
        intersection: The intersection being shaded.
        ray: The ray that produced it.
        world: The world holding the intersected shape.

    Returns:
        The prepared computations for ``intersection``.

    Raises:
        KeyError: If ``world`` holds no shape with the intersection's identity.
    """
    shape = world.object_by_id(intersection.object_id)
    point = ray.position_at(intersection.distance)
    eye = -ray.direction
    normal = shape.normal_at(point)

    # a normal pointing away from the eye means the ray started inside
    inside = normal.dot(eye) < 0.0
    if inside:
        normal = -normal

    return PreparedComputations(
        object_id=intersection.object_id,
        distance=intersection.distance,
        point=point,
        over_point=point + normal * SHADOW_BIAS,
        eye=eye,
        normal=normal,
        inside=inside,
    )
