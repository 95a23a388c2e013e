#!/usr/bin/env python3
"""Render the demo scene.

This script renders the showcase scene of checkered floor, ringed wall and
three patterned spheres lit by a single point light, then saves it as PNG or
PPM.

Usage:
    python -m examples.render_demo [options]

Options:
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --fov DEGREES       Horizontal field of view in degrees (default: 60)
    --output OUTPUT     Output file path (default: demo.png)
    --format FORMAT     png or ppm (default: inferred from --output)
    --gamma GAMMA       Gamma for PNG output (default: 1.0)
    --log-level LEVEL   Logging level (default: INFO)
    --quiet             Suppress progress output
    --preview           Show the result in a Matplotlib window

Example:
    python -m examples.render_demo --width 200 --height 100 --output demo.ppm
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

logger = logging.getLogger("render_demo")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Horizontal field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="demo.png",
        help="Output file path (default: demo.png)",
    )
    parser.add_argument(
        "--format",
        choices=("png", "ppm"),
        default=None,
        help="Output format (default: inferred from --output)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma for PNG output (default: 1.0)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window (requires the preview extra)",
    )
    return parser.parse_args(argv)


def render_demo(
    width: int = 400,
    height: int = 200,
    fov_degrees: float = 60.0,
    output_path: str = "demo.png",
    output_format: str | None = None,
    gamma: float = 1.0,
    quiet: bool = False,
    preview: bool = False,
) -> Path:
    """Render the demo scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Horizontal field of view in degrees.
        output_path: Output file path.
        output_format: "png" or "ppm"; inferred from the suffix when None.
        gamma: Gamma applied to PNG output.
        quiet: If True, suppress progress output.
        preview: If True, show the saved image in a Matplotlib window.

    Returns:
        Path to the saved image file.
    """
    from src.whitted.preview.export import save_png, save_ppm
    from src.whitted.scene.demo_scene import DemoSceneParams, create_demo_scene

    output_file = Path(output_path)
    if output_format is None:
        output_format = "ppm" if output_file.suffix.lower() == ".ppm" else "png"

    params = DemoSceneParams(field_of_view=math.radians(fov_degrees))
    world, camera = create_demo_scene(width=width, height=height, params=params)

    start_time = time.time()

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            progress_pct = (current / total) * 100 if total > 0 else 0
            print(f"\r  Progress: {current}/{total} rows ({progress_pct:.1f}%)", end="", flush=True)

    canvas = camera.render(world, progress=progress_callback)

    if not quiet:
        print()  # Newline after progress

    if output_format == "ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file, gamma=gamma)

    logger.info("Saved to %s in %.2fs", output_file.absolute(), time.time() - start_time)

    if preview:
        from src.whitted.preview.display import show_preview

        show_preview(canvas, gamma=gamma, title=f"Demo - {width}x{height}", block=True)

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        render_demo(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            output_format=args.format,
            gamma=args.gamma,
            quiet=args.quiet,
            preview=args.preview,
        )
        return 0
    except (OSError, ValueError) as e:
        logger.error("Render failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
