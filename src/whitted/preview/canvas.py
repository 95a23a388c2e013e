"""Canvas: the pixel buffer the camera renders into.

Pixels are stored in a NumPy float64 array of shape (height, width, 3), so
x indexes columns and y indexes rows with y = 0 at the top. Values are not
clamped; encoders clamp on export.

Example:
    >>> from src.whitted.core.color import Color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3) == Color(1.0, 0.0, 0.0)
    True
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.whitted.core.color import BLACK, Color


class Canvas:
    """A width x height grid of colors.

    Args:
        width: Number of pixel columns.
        height: Number of pixel rows.
        fill: Initial color of every pixel (default black).

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.empty((height, width, 3), dtype=np.float64)
        self._pixels[:, :] = (fill.red, fill.green, fill.blue)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at column ``x``, row ``y``.

        Raises:
            IndexError: If the pixel lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixels as an array of shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
