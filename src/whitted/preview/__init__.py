"""Preview module for output and visualization.

This module handles the image sink and rendering output:

Components:
    canvas: Pixel buffer the camera writes into
    display: Tone mapping, gamma and Matplotlib preview
    export: PNG (Pillow) and PPM export

Example:
    >>> from src.whitted.preview import save_png
    >>> canvas = camera.render(world)  # doctest: +SKIP
    >>> save_png(canvas, "output.png", gamma=2.2)  # doctest: +SKIP
"""

from src.whitted.preview.canvas import Canvas
from src.whitted.preview.display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from src.whitted.preview.export import (
    image_to_uint8,
    save_png,
    save_png_from_array,
    save_ppm,
    to_ppm,
)

__all__ = [
    "Canvas",
    # Display functions
    "show_preview",
    # Tone mapping
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    # Export functions
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
    "to_ppm",
    "save_ppm",
]
