"""Core algebra module.

This module contains the value types every other module builds on:

Components:
    tuple: Homogeneous points and vectors
    matrix: 2x2/3x3/4x4 matrices, transform builders, cached Transformation
    color: RGB color values
    ray: Ray data structure and coordinate-space transforms

All types here are immutable; operations return new values.
"""

from .color import BLACK, WHITE, Color
from .matrix import (
    Matrix,
    Transformation,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuple import EPSILON, ORIGIN, Tuple, point, vector

__all__ = [
    "Tuple",
    "point",
    "vector",
    "ORIGIN",
    "EPSILON",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "Transformation",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
]
