"""Unit tests for the pinhole camera.

Tests cover:
- Derived half-width, half-height and pixel size
- Rays through the canvas center and corner
- Rays from a transformed camera
- Rendering the reference world
- Progress reporting and canvas validation
"""

import math

import pytest


class TestCameraSetup:
    """Tests for camera construction."""

    def test_construct(self):
        """Test stored sizes and the default transform."""
        from src.whitted.camera.pinhole import PinholeCamera
        from src.whitted.core.matrix import identity

        camera = PinholeCamera(160, 120, math.pi / 2)
        assert camera.hsize == 160
        assert camera.vsize == 120
        assert camera.field_of_view == pytest.approx(math.pi / 2)
        assert camera.transform.matrix == identity()

    def test_pixel_size_horizontal(self):
        """Test pixel size for a landscape canvas."""
        from src.whitted.camera.pinhole import PinholeCamera

        assert PinholeCamera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical(self):
        """Test pixel size for a portrait canvas."""
        from src.whitted.camera.pinhole import PinholeCamera

        assert PinholeCamera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    @pytest.mark.parametrize(
        "hsize, vsize, fov",
        [(0, 10, 1.0), (10, 0, 1.0), (10, 10, 0.0), (10, 10, math.pi)],
    )
    def test_invalid_parameters(self, hsize, vsize, fov):
        """Test invalid sizes or field of view raise ValueError."""
        from src.whitted.camera.pinhole import PinholeCamera

        with pytest.raises(ValueError):
            PinholeCamera(hsize, vsize, fov)


class TestRayForPixel:
    """Tests for ray_for_pixel()."""

    def test_center_of_canvas(self):
        """Test the ray through the center looks straight down -z."""
        from src.whitted.camera.pinhole import PinholeCamera
        from src.whitted.core.tuple import point, vector

        ray = PinholeCamera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0, 0, -1)

    def test_corner_of_canvas(self):
        """Test the ray through the top-left corner pixel."""
        from src.whitted.camera.pinhole import PinholeCamera
        from src.whitted.core.tuple import point, vector

        ray = PinholeCamera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        """Test a rotated and translated camera."""
        from src.whitted.camera.pinhole import PinholeCamera
        from src.whitted.core.matrix import rotation_y, translation
        from src.whitted.core.tuple import point, vector

        camera = PinholeCamera(201, 101, math.pi / 2).set_transform(
            rotation_y(math.pi / 4) * translation(0, -2, 5)
        )
        ray = camera.ray_for_pixel(100, 50)
        half = math.sqrt(2) / 2
        assert ray.origin == point(0, 2, -5)
        assert ray.direction == vector(half, 0, -half)

    def test_direction_is_normalized(self):
        """Test every generated direction is a unit vector."""
        from src.whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(7, 5, math.pi / 3)
        for py in range(5):
            for px in range(7):
                assert camera.ray_for_pixel(px, py).direction.magnitude() == pytest.approx(1.0)


class TestRender:
    """Tests for render()."""

    @pytest.fixture
    def camera(self):
        from src.whitted.camera.pinhole import PinholeCamera
        from src.whitted.core.matrix import view_transform
        from src.whitted.core.tuple import point, vector

        return PinholeCamera(11, 11, math.pi / 2).set_transform(
            view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
        )

    def test_render_default_world(self, camera, default_world):
        """Test the center pixel of the reference world."""
        canvas = camera.render(default_world)
        c = canvas.pixel_at(5, 5)
        assert (c.red, c.green, c.blue) == pytest.approx((0.38066, 0.47583, 0.2855), abs=1e-4)

    def test_render_size_and_background(self, camera, default_world):
        """Test the canvas size and that corner pixels miss the spheres."""
        from src.whitted.core.color import BLACK

        canvas = camera.render(default_world)
        assert (canvas.width, canvas.height) == (11, 11)
        assert canvas.pixel_at(0, 0) == BLACK

    def test_render_into_existing_canvas(self, camera, default_world):
        """Test rendering into a provided canvas returns that canvas."""
        from src.whitted.preview.canvas import Canvas

        canvas = Canvas(11, 11)
        assert camera.render(default_world, canvas=canvas) is canvas

    def test_canvas_size_mismatch(self, camera, default_world):
        """Test a canvas of the wrong size raises ValueError."""
        from src.whitted.preview.canvas import Canvas

        with pytest.raises(ValueError, match="Canvas is 5x5"):
            camera.render(default_world, canvas=Canvas(5, 5))

    def test_progress_callback(self, camera, default_world):
        """Test progress is reported once per row."""
        calls = []
        camera.render(default_world, progress=lambda done, total: calls.append((done, total)))
        assert calls == [(row, 11) for row in range(1, 12)]

    def test_render_does_not_modify_world(self, camera, default_world):
        """Test the world is untouched by rendering."""
        objects = default_world.objects
        lights = default_world.lights
        camera.render(default_world)
        assert default_world.objects is objects
        assert default_world.lights is lights

    def test_render_logs(self, camera, default_world, caplog):
        """Test start and finish are logged at INFO."""
        import logging

        with caplog.at_level(logging.INFO, logger="src.whitted.camera.pinhole"):
            camera.render(default_world)
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Rendering 11x11") for m in messages)
        assert any(m.startswith("Render finished") for m in messages)
