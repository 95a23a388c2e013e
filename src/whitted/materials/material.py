"""Phong surface material.

A Material holds the reflectance coefficients of the Phong model and an
optional pattern that replaces the flat color.

    ambient:   light reflected regardless of the light's direction
    diffuse:   light reflected from a matte surface, scaled by the cosine
               between the light direction and the normal
    specular:  the highlight, scaled by the reflection/eye cosine raised to
               ``shininess``

Materials are immutable. Use ``set_color``, ``set_pattern`` or
``with_changes`` to derive a modified copy.

Example:
    >>> from src.whitted.core.color import Color
    >>> base = Material()
    >>> matte = base.with_changes(color=Color(1.0, 0.9, 0.9), specular=0.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from src.whitted.core.color import WHITE, Color
from src.whitted.materials.pattern import Pattern


@dataclass(frozen=True)
class Material:
    """Phong material parameters.

    Attributes:
        color: Flat surface color, used when no pattern is set.
        ambient: Ambient coefficient (default 0.1).
        diffuse: Diffuse coefficient (default 0.9).
        specular: Specular coefficient (default 0.9).
        shininess: Specular exponent (default 200.0).
        pattern: Optional pattern evaluated in place of ``color``.

    Raises:
        ValueError: If a coefficient is negative.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} must not be negative")

    def set_color(self, color: Color) -> Material:
        return replace(self, color=color)

    def set_pattern(self, pattern: Pattern | None) -> Material:
        return replace(self, pattern=pattern)

    def with_changes(self, **changes: Any) -> Material:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
