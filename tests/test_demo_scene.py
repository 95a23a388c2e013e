"""Integration tests for the demo scene and its render script.

Tests cover:
- Demo scene composition (shapes, patterns, light, camera)
- Custom scene parameters
- Rendering a small image end to end
- The command-line script writing PNG and PPM files
"""

import math

import pytest
from PIL import Image as PILImage


class TestDemoScene:
    """Tests for create_demo_scene()."""

    def test_scene_contents(self):
        """Test the scene holds two planes, three spheres and one light."""
        from src.whitted.geometry.plane import Plane
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.scene.demo_scene import create_demo_scene

        world, _ = create_demo_scene(width=40, height=20)
        assert [s.shape_id for s in world.objects] == [1, 2, 3, 4, 5]
        assert sum(isinstance(s, Plane) for s in world.objects) == 2
        assert sum(isinstance(s, Sphere) for s in world.objects) == 3
        assert len(world.lights) == 1

    def test_every_pattern_used(self):
        """Test each pattern variant decorates one shape."""
        from src.whitted.materials.pattern import (
            CheckerPattern,
            GradientPattern,
            RingPattern,
            StripePattern,
        )
        from src.whitted.scene.demo_scene import create_demo_scene

        world, _ = create_demo_scene(width=40, height=20)
        kinds = {type(s.material.pattern) for s in world.objects if s.material.pattern}
        assert kinds == {CheckerPattern, GradientPattern, RingPattern, StripePattern}

    def test_camera_matches_size(self):
        """Test the camera uses the requested size and default field of view."""
        from src.whitted.scene.demo_scene import create_demo_scene

        _, camera = create_demo_scene(width=64, height=32)
        assert (camera.hsize, camera.vsize) == (64, 32)
        assert camera.field_of_view == pytest.approx(math.pi / 3)

    def test_custom_params(self):
        """Test light and camera parameters are applied."""
        from src.whitted.core.color import Color
        from src.whitted.core.tuple import point
        from src.whitted.scene.demo_scene import DemoSceneParams, create_demo_scene

        params = DemoSceneParams(
            light_position=(5.0, 5.0, -5.0),
            light_color=(0.5, 0.5, 0.5),
            field_of_view=math.pi / 2,
        )
        world, camera = create_demo_scene(width=20, height=10, params=params)
        assert world.lights[0].position == point(5, 5, -5)
        assert world.lights[0].intensity == Color(0.5, 0.5, 0.5)
        assert camera.field_of_view == pytest.approx(math.pi / 2)

    def test_small_render(self):
        """Test a small render produces a lit, non-uniform image."""
        import numpy as np

        from src.whitted.scene.demo_scene import create_demo_scene

        world, camera = create_demo_scene(width=16, height=8)
        pixels = camera.render(world).to_numpy()
        assert pixels.shape == (8, 16, 3)
        assert np.all(np.isfinite(pixels))
        assert pixels.max() > 0.1
        assert pixels.std() > 0.0


class TestRenderScript:
    """Tests for the render_demo example script."""

    def test_main_writes_ppm(self, tmp_path):
        """Test the script writes a PPM inferred from the suffix."""
        from examples.render_demo import main

        output = tmp_path / "demo.ppm"
        code = main(["--width", "8", "--height", "4", "--output", str(output), "--quiet"])
        assert code == 0
        lines = output.read_text(encoding="ascii").splitlines()
        assert lines[:3] == ["P3", "8 4", "255"]

    def test_main_writes_png(self, tmp_path):
        """Test the script writes a PNG of the requested size."""
        from examples.render_demo import main

        output = tmp_path / "demo.png"
        code = main(
            ["--width", "8", "--height", "4", "--output", str(output), "--gamma", "2.2", "--quiet"]
        )
        assert code == 0
        with PILImage.open(output) as img:
            assert img.size == (8, 4)

    def test_main_reports_bad_fov(self, tmp_path):
        """Test an invalid field of view returns a non-zero exit code."""
        from examples.render_demo import main

        output = tmp_path / "demo.png"
        code = main(["--width", "8", "--height", "4", "--fov", "180", "--output", str(output)])
        assert code == 1
        assert not output.exists()
