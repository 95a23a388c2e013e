"""Materials module for surface appearance.

This module describes how surfaces respond to light:

Components:
    material: Phong reflectance coefficients with an optional pattern
    pattern: Procedural two-color patterns (stripe, gradient, ring, checker)

Patterns are evaluated in pattern space, reached from world space through
the shape's inverse transform followed by the pattern's inverse transform.
"""

from .material import Material
from .pattern import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
]
