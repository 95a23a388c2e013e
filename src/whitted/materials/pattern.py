"""Procedural color patterns.

A pattern maps a point in pattern space to one of its colors. Pattern space
is reached from world space in two steps: the shape's inverse transform takes
the world point into object space, then the pattern's own inverse transform
takes it into pattern space. A pattern can therefore be scaled, rotated or
moved independently of the shape it decorates.

Variants:
    StripePattern: alternates in x
    GradientPattern: blends linearly from ``a`` to ``b`` along x
    RingPattern: concentric rings in the xz plane
    CheckerPattern: 3D checkerboard

Example:
    >>> from src.whitted.core.color import BLACK, WHITE
    >>> from src.whitted.core.tuple import point
    >>> pattern = StripePattern(WHITE, BLACK)
    >>> pattern.pattern_at(point(1.0, 0.0, 0.0)) == BLACK
    True
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from src.whitted.core.color import Color
from src.whitted.core.matrix import Matrix, Transformation
from src.whitted.core.tuple import Tuple


@dataclass(frozen=True)
class Pattern(ABC):
    """Base class for two-color patterns.

    Attributes:
        a: The first color.
        b: The second color.
        transform: Pattern-to-object transform with cached inverse.
    """

    a: Color
    b: Color
    transform: Transformation = field(default_factory=Transformation.identity)

    def set_transform(self, matrix: Matrix) -> Pattern:
        """Return a copy of this pattern with a new transform."""
        return replace(self, transform=Transformation.make(matrix))

    @abstractmethod
    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Color at a point already expressed in pattern space."""

    def to_pattern_space(self, object_transform: Transformation, world_point: Tuple) -> Tuple:
        """Map a world point through object space into pattern space."""
        object_point = object_transform.inverse.multiply_tuple(world_point)
        return self.transform.inverse.multiply_tuple(object_point)

    def pattern_at_object(self, object_transform: Transformation, world_point: Tuple) -> Color:
        """Color of this pattern at a world point on a shape.

        Args:
            object_transform: The decorated shape's transformation.
            world_point: The point in world space.

        Returns:
            The pattern color at the corresponding pattern-space point.
        """
        return self.pattern_at(self.to_pattern_space(object_transform, world_point))


@dataclass(frozen=True)
class StripePattern(Pattern):
    """Stripes of unit width along x; constant in y and z."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        # floor() and Python's modulo keep negative x continuous with positive x
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True)
class GradientPattern(Pattern):
    """Linear blend from ``a`` to ``b`` over each unit of x."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        fraction = math.modf(pattern_point.x)[0]
        return self.a + (self.b - self.a) * fraction


@dataclass(frozen=True)
class RingPattern(Pattern):
    """Concentric rings around the y axis."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        distance = math.sqrt(pattern_point.x**2 + pattern_point.z**2)
        if math.floor(distance) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True)
class CheckerPattern(Pattern):
    """Alternating unit cubes in x, y and z."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        total = (
            math.floor(pattern_point.x) + math.floor(pattern_point.y) + math.floor(pattern_point.z)
        )
        if total % 2 == 0:
            return self.a
        return self.b
