"""Tests for Renderer class."""

import logging
import pytest
import numpy as np

from phongcast.vec3 import Vec3, Point3, Color
from phongcast.camera import Camera
from phongcast.shapes import Sphere, Triangle
from phongcast.materials import Material
from phongcast.scene import Scene
from phongcast.shading import ShadowPolicy, SHADOW_BIAS
from phongcast.renderer import Renderer, RenderSettings


class TestRenderSettings:
    """Test RenderSettings configuration."""

    def test_default_values(self):
        settings = RenderSettings()
        assert settings.width == 600
        assert settings.height == 337
        assert settings.shadow_policy is ShadowPolicy.BLACK
        assert settings.shadow_bias == SHADOW_BIAS

    def test_policy_from_string(self):
        settings = RenderSettings(shadow_policy='Ambient')
        assert settings.shadow_policy is ShadowPolicy.AMBIENT

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            RenderSettings(shadow_policy='grey')

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            RenderSettings(width=0)
        with pytest.raises(ValueError):
            RenderSettings(height=-3)

    def test_aspect_ratio(self):
        assert RenderSettings(width=20, height=10).aspect_ratio == 2.0


class TestRendererBasic:
    """Test basic renderer functionality."""

    def test_render_produces_image(self):
        renderer = Renderer(RenderSettings(width=6, height=4))
        scene = Scene(objects=[Sphere(Point3(0, 0, -1), 0.5)])
        image = renderer.render(scene, Camera())

        assert image.shape == (4, 6, 3)
        assert image.dtype == np.float64

    def test_empty_scene_is_background(self):
        background = Color(0.1, 0.4, 0.7)
        renderer = Renderer(RenderSettings(width=8, height=5))
        image = renderer.render(Scene(background_color=background), Camera())

        assert np.array_equal(image, np.broadcast_to(background.to_array(), image.shape))

    def test_default_settings(self):
        assert Renderer().settings == RenderSettings()

    def test_single_pixel(self):
        renderer = Renderer(RenderSettings(width=1, height=1))
        image = renderer.render(Scene(), Camera())
        assert image.shape == (1, 1, 3)


class TestRendererRows:
    """Test scanline order and independence."""

    def _scene(self):
        # Sphere above the view axis, visible only in the top part of the frame
        return Scene(
            ambient_light=Color(0.5, 0.5, 0.5),
            objects=[Sphere(Point3(0, 1.5, -1), 0.5, Material(k_a=1.0))]
        )

    def test_top_row_first(self):
        renderer = Renderer(RenderSettings(width=3, height=3))
        image = renderer.render(self._scene(), Camera())
        background = Color(0.2, 0.2, 0.2).to_array()

        assert not np.allclose(image[0, 1], background)
        assert np.allclose(image[2, 1], background)

    def test_rows_are_independent(self):
        renderer = Renderer(RenderSettings(width=5, height=4))
        scene = self._scene()
        camera = Camera()
        image = renderer.render(scene, camera)

        for row in reversed(range(4)):
            assert np.array_equal(renderer.render_row(scene, camera, row), image[row])

    def test_progress_callback(self):
        renderer = Renderer(RenderSettings(width=2, height=4))
        progress = []
        renderer.set_progress_callback(progress.append)
        renderer.render(Scene(), Camera())

        assert progress == [0.25, 0.5, 0.75, 1.0]

    def test_shadow_policy_applied(self):
        material = Material(k_a=1.0, k_d=0.0, k_s=0.0)
        scene = Scene(
            direction_to_light=Vec3(0, 0, 1),
            ambient_light=Color(0.5, 0.5, 0.5),
            objects=[
                Sphere(Point3(0, 0, -1), 0.5, material),
                Triangle(Point3(-1, -1, 2), Point3(1, -1, 2), Point3(0, 1, 2)),
            ]
        )
        black = Renderer(RenderSettings(width=3, height=3, shadow_policy=ShadowPolicy.BLACK))
        ambient = Renderer(RenderSettings(width=3, height=3, shadow_policy=ShadowPolicy.AMBIENT))

        # The triangle behind the camera blocks the light for the center pixel
        assert np.allclose(black.render(scene, Camera())[1, 1], [0, 0, 0])
        assert np.allclose(ambient.render(scene, Camera())[1, 1], [0.5, 0.5, 0.5])


class TestRendererOverflow:
    """Test overflow reporting."""

    def test_overflow_logged(self, caplog):
        scene = Scene(
            ambient_light=Color(2, 2, 2),
            objects=[Sphere(Point3(0, 0, -1), 0.5, Material(k_a=1.0, k_d=0.0, k_s=0.0))]
        )
        renderer = Renderer(RenderSettings(width=3, height=3))

        with caplog.at_level(logging.WARNING, logger='phongcast.renderer'):
            image = renderer.render(scene, Camera())

        assert image.max() == pytest.approx(2.0)
        assert "exceed displayable range" in caplog.text

    def test_no_overflow_no_warning(self, caplog):
        renderer = Renderer(RenderSettings(width=3, height=3))
        with caplog.at_level(logging.WARNING, logger='phongcast.renderer'):
            renderer.render(Scene(), Camera())
        assert "exceed" not in caplog.text


class TestSaveImage:
    """Test Renderer.save_image()."""

    def test_save_ppm(self, tmp_path):
        renderer = Renderer(RenderSettings(width=2, height=2))
        image = renderer.render(Scene(), Camera())
        path = tmp_path / "render.ppm"
        renderer.save_image(image, path)

        lines = path.read_text().splitlines()
        assert lines[:3] == ["P3", "2 2", "255"]
        assert lines[3] == "51 51 51 51 51 51"
