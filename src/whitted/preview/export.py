"""Image export for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)
    - PPM (plain-text P3)

Both encoders clamp each channel into [0, 1] before scaling to 0-255.

Example:
    >>> from src.whitted.preview.export import save_png, save_ppm
    >>> save_png(canvas, "scene.png")  # doctest: +SKIP
    >>> save_ppm(canvas, "scene.ppm")  # doctest: +SKIP
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.whitted.preview.display import ToneMapMethod, process_image_for_display

if TYPE_CHECKING:
    from src.whitted.preview.canvas import Canvas

PPM_MAX_VALUE = 255
PPM_MAX_LINE_LENGTH = 70


def image_to_uint8(
    image: npt.NDArray[np.floating],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8 for export.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value (default 1.0, linear).
        exposure: Exposure value for exposure tone mapping.

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    processed = process_image_for_display(
        image,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )
    return np.rint(processed * PPM_MAX_VALUE).astype(np.uint8)


def save_png(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a canvas as an 8-bit RGB PNG file."""
    save_png_from_array(
        canvas.to_numpy(),
        filepath,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )


def save_png_from_array(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a NumPy image of shape (H, W, 3) as a PNG file."""
    image_uint8 = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)


def _scale_channel(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return PPM_MAX_VALUE
    return int(value * PPM_MAX_VALUE + 0.5)


def to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain-text PPM (P3).

    Each canvas row starts on a new line and no line exceeds 70 characters.
    The output ends with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_VALUE)]
    pixels = canvas.to_numpy()

    for row in pixels:
        current = ""
        for pixel in row:
            for channel in pixel:
                token = str(_scale_channel(float(channel)))
                if not current:
                    current = token
                elif len(current) + 1 + len(token) <= PPM_MAX_LINE_LENGTH:
                    current = f"{current} {token}"
                else:
                    lines.append(current)
                    current = token
        lines.append(current)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to a PPM file."""
    Path(filepath).write_text(to_ppm(canvas), encoding="ascii")
