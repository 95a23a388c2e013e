"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera with ray_for_pixel and render

Camera responsibilities:
    - Map pixel (px, py) to a world-space ray through the pixel center
    - Orient the view through a cached view transform
    - Render a world into a Canvas, row by row
"""

from .pinhole import PinholeCamera, ProgressCallback

__all__ = [
    "PinholeCamera",
    "ProgressCallback",
]
