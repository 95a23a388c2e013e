"""Demo scene configuration.

This module provides a factory for a small showcase scene that exercises
every primitive and pattern:

- A checkered floor plane and a ringed back wall plane
- A large striped sphere in the middle
- A smaller gradient sphere on the right
- A small flat-colored sphere on the left
- A single white point light above and to the left of the camera

Example:
    >>> from src.whitted.scene.demo_scene import create_demo_scene
    >>> world, camera = create_demo_scene(width=100, height=50)
    >>> canvas = camera.render(world)  # doctest: +SKIP
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.whitted.camera.pinhole import PinholeCamera
from src.whitted.core.color import Color
from src.whitted.core.matrix import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from src.whitted.core.tuple import point, vector
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

# =============================================================================
# Demo Scene Parameters
# =============================================================================


@dataclass
class DemoSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        light_position: Position of the point light.
            Default is (-10, 10, -10), above and left of the camera.
        light_color: Intensity of the point light. Default is white.
        camera_from: Eye position. Default is (0, 1.5, -5).
        camera_to: Point the camera looks at. Default is (0, 1, 0).
        field_of_view: Horizontal field of view in radians. Default is pi/3.
    """

    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    camera_from: tuple[float, float, float] = (0.0, 1.5, -5.0)
    camera_to: tuple[float, float, float] = (0.0, 1.0, 0.0)
    field_of_view: float = math.pi / 3.0


FLOOR_COLORS = (Color(1.0, 0.9, 0.9), Color(0.35, 0.3, 0.3))
WALL_COLORS = (Color(0.8, 0.8, 0.9), Color(0.55, 0.55, 0.7))


def create_demo_scene(
    width: int = 400,
    height: int = 200,
    params: DemoSceneParams | None = None,
) -> tuple[World, PinholeCamera]:
    """Create the demo world and a camera looking at it.

    Args:
        width: Output width in pixels.
        height: Output height in pixels.
        params: Optional DemoSceneParams for light and camera placement.
            If None, uses default DemoSceneParams().

    Returns:
        A tuple (World, PinholeCamera). Shape identities are 1 through 5.
    """
    if params is None:
        params = DemoSceneParams()

    # =========================================================================
    # Planes
    # =========================================================================

    floor = Plane(
        1,
        material=Material(
            specular=0.0,
            pattern=CheckerPattern(*FLOOR_COLORS),
        ),
    )

    back_wall = Plane(
        2,
        material=Material(
            specular=0.0,
            pattern=RingPattern(*WALL_COLORS).set_transform(scaling(0.5, 0.5, 0.5)),
        ),
    ).set_transform(translation(0.0, 0.0, 5.0) * rotation_x(math.pi / 2.0))

    # =========================================================================
    # Spheres
    # =========================================================================

    middle = Sphere(
        3,
        material=Material(
            diffuse=0.7,
            specular=0.3,
            pattern=StripePattern(Color(0.1, 1.0, 0.5), Color(0.05, 0.5, 0.25)).set_transform(
                scaling(0.2, 0.2, 0.2) * rotation_z(math.pi / 4.0)
            ),
        ),
    ).set_transform(translation(-0.5, 1.0, 0.5))

    right = Sphere(
        4,
        material=Material(
            diffuse=0.7,
            specular=0.3,
            pattern=GradientPattern(Color(0.5, 1.0, 0.1), Color(1.0, 0.2, 0.1)).set_transform(
                translation(-1.0, 0.0, 0.0) * scaling(2.0, 1.0, 1.0)
            ),
        ),
    ).set_transform(translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5))

    left = Sphere(
        5,
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    ).set_transform(
        translation(-1.5, 0.33, -0.75) * rotation_y(math.pi / 6.0) * scaling(0.33, 0.33, 0.33)
    )

    # =========================================================================
    # Light and Camera
    # =========================================================================

    light = PointLight(point(*params.light_position), Color(*params.light_color))
    world = World().add_objects((floor, back_wall, middle, right, left)).set_light(light)

    camera = PinholeCamera(width, height, params.field_of_view).set_transform(
        view_transform(
            point(*params.camera_from),
            point(*params.camera_to),
            vector(0.0, 1.0, 0.0),
        )
    )

    return world, camera
