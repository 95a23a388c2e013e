"""Scene module for worlds, lights and shading.

This module composes shapes and lights into a renderable scene:

Components:
    intersection: Hit selection and pre-shading computations
    light: Point lights and the Phong lighting function
    world: World aggregate with ray intersection, shading and shadow tests
    demo_scene: Showcase scene factory

Shading a ray:
    1. world.intersect_with_ray(ray)  -> positive intersections, nearest first
    2. prepare_computations(nearest)  -> point, eye, normal, shadow-bias point
    3. world.shade_hit(comps)         -> sum of lighting() over every light,
                                         with shadowed lights reduced to ambient
"""

from .demo_scene import DemoSceneParams, create_demo_scene
from .intersection import SHADOW_BIAS, PreparedComputations, hit, prepare_computations
from .light import PointLight, lighting
from .world import World, default_world

__all__ = [
    # Intersection module
    "PreparedComputations",
    "hit",
    "prepare_computations",
    "SHADOW_BIAS",
    # Light module
    "PointLight",
    "lighting",
    # World module
    "World",
    "default_world",
    # Demo scene module
    "DemoSceneParams",
    "create_demo_scene",
]
