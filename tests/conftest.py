"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: the reference
world and a ray that looks down +z from five units in front of the origin.
"""

import pytest


@pytest.fixture
def default_world():
    """The two-concentric-spheres reference world."""
    from src.whitted.scene.world import default_world

    return default_world()


@pytest.fixture
def front_ray():
    """Ray from (0, 0, -5) toward +z."""
    from src.whitted.core.ray import Ray
    from src.whitted.core.tuple import point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
