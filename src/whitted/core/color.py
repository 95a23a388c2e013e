"""RGB color values.

Colors are unbounded floats until they are encoded for output; shading may
produce channels above 1.0 and only the exporters clamp them.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.tuple import approx_equal


@dataclass(frozen=True, eq=False)
class Color:
    """A three-channel floating-point color.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        """Hadamard product with another color, or scale by a float."""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scale: float) -> Color:
        return Color(self.red * scale, self.green * scale, self.blue * scale)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def clamped(self) -> Color:
        """Clip every channel into [0, 1]."""
        return Color(
            min(max(self.red, 0.0), 1.0),
            min(max(self.green, 0.0), 1.0),
            min(max(self.blue, 0.0), 1.0),
        )


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
