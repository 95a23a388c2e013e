"""Point lights and the Phong lighting model.

``lighting`` returns the color a single light contributes at a surface point:

    effective = surface_color * intensity
    ambient   = effective * material.ambient
    diffuse   = effective * material.diffuse * dot(light_dir, normal)
    specular  = intensity * material.specular * dot(reflect_dir, eye) ^ shininess

Diffuse and specular drop to zero when the point is in shadow or the light
is behind the surface; specular also drops to zero when the reflection points
away from the eye. The sum is not clamped.

Example:
    >>> from src.whitted.core.color import WHITE
    >>> from src.whitted.core.matrix import Transformation
    >>> from src.whitted.core.tuple import point, vector
    >>> from src.whitted.materials.material import Material
    >>> light = PointLight(point(0, 0, -10), WHITE)
    >>> lighting(
    ...     Material(), Transformation.identity(), light,
    ...     point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1), False,
    ... ) == Color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.color import BLACK, Color
from src.whitted.core.matrix import Transformation
from src.whitted.core.tuple import Tuple
from src.whitted.materials.material import Material


@dataclass(frozen=True)
class PointLight:
    """A light source with no size.

    Attributes:
        position: Light position (point).
        intensity: Light color and brightness.
    """

    position: Tuple
    intensity: Color


def lighting(
    material: Material,
    object_transform: Transformation,
    light: PointLight,
    point: Tuple,
    eye: Tuple,
    normal: Tuple,
    in_shadow: bool,
) -> Color:
    """Shade a surface point for one light with the Phong model.

    Args:
        material: The surface material.
        object_transform: Transform of the shape, used to evaluate patterns.
        light: The light source.
        point: World-space surface point.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal facing the eye.
        in_shadow: Whether another object blocks ``light`` from ``point``.

    Returns:
        The ambient + diffuse + specular contribution of ``light``.
    """
    if material.pattern is None:
        surface_color = material.color
    else:
        surface_color = material.pattern.pattern_at_object(object_transform, point)

    effective_color = surface_color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    light_dir = (light.position - point).normalize()
    light_dot_normal = light_dir.dot(normal)
    if light_dot_normal < 0.0:
        # light on the other side of the surface
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    specular = BLACK
    reflect_dir = (-light_dir).reflect(normal)
    reflect_dot_eye = reflect_dir.dot(eye)
    if reflect_dot_eye >= 0.0:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
