"""Pinhole camera: maps pixels to rays and renders a world.

The camera sits at the origin of camera space looking toward -z, with the
canvas plane one unit away at z = -1. The field of view spans the longer
side of the canvas:

    half_view = tan(field_of_view / 2)
    aspect >= 1: half_width = half_view,          half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect,  half_height = half_view
    pixel_size = 2 * half_width / hsize

A view transform (see ``core.matrix.view_transform``) orients the camera in
the world; its inverse, cached in the camera's Transformation, maps canvas
points and the eye back into world space.

Example:
    >>> import math
    >>> from src.whitted.core.matrix import view_transform
    >>> from src.whitted.core.tuple import point, vector
    >>> from src.whitted.scene.world import default_world
    >>> camera = PinholeCamera(11, 11, math.pi / 2).set_transform(
    ...     view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    ... )
    >>> canvas = camera.render(default_world())
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from src.whitted.core.matrix import Matrix, Transformation
from src.whitted.core.ray import Ray
from src.whitted.core.tuple import ORIGIN, point
from src.whitted.preview.canvas import Canvas

if TYPE_CHECKING:
    from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class PinholeCamera:
    """A perspective camera with no depth of field.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle in radians covered by the longer canvas side.
        transform: View transform with cached inverse.
        half_width: Half the canvas width at z = -1 (derived).
        half_height: Half the canvas height at z = -1 (derived).
        pixel_size: Size of one pixel at z = -1 (derived).

    Raises:
        ValueError: If a dimension or the field of view is not positive.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Transformation = field(default_factory=Transformation.identity)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {self.hsize}x{self.vsize}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {self.field_of_view}")

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            half_width, half_height = half_view, half_view / aspect
        else:
            half_width, half_height = half_view * aspect, half_view

        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", (half_width * 2.0) / self.hsize)

    def set_transform(self, matrix: Matrix) -> PinholeCamera:
        """Return a camera with a new view transform.

        Raises:
            ValueError: If ``matrix`` is singular.
        """
        return replace(self, transform=Transformation.make(matrix))

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            px: Pixel column (0 = left).
            py: Pixel row (0 = top).

        Returns:
            A ray from the eye through the pixel center, with a normalized
            direction.
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # the camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.transform.inverse
        pixel = inverse.multiply_tuple(point(world_x, world_y, -1.0))
        origin = inverse.multiply_tuple(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(
        self,
        world: World,
        canvas: Canvas | None = None,
        progress: ProgressCallback | None = None,
    ) -> Canvas:
        """Render ``world`` one pixel at a time.

        Pixels are visited row by row (y outer, x inner). Each pixel is
        independent; neither the world nor the camera is modified.

        Args:
            world: The scene to render.
            canvas: Optional sink of size (hsize, vsize). A new black canvas
                is created when omitted.
            progress: Optional callback called after each row with
                (rows_completed, total_rows).

        Returns:
            The canvas holding the rendered image.

        Raises:
            ValueError: If ``canvas`` does not match the camera size.
        """
        if canvas is None:
            canvas = Canvas(self.hsize, self.vsize)
        elif (canvas.width, canvas.height) != (self.hsize, self.vsize):
            raise ValueError(
                f"Canvas is {canvas.width}x{canvas.height}, camera is {self.hsize}x{self.vsize}"
            )

        logger.info(
            "Rendering %dx%d (%d shapes, %d lights)",
            self.hsize,
            self.vsize,
            len(world.objects),
            len(world.lights),
        )
        start = time.perf_counter()

        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                canvas.write(x, y, world.color_at(ray))
            logger.debug("Row %d/%d done", y + 1, self.vsize)
            if progress is not None:
                progress(y + 1, self.vsize)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas
