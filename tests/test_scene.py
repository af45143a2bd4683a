"""Tests for the Scene container."""

import dataclasses
import pytest

from phongcast.vec3 import Vec3, Point3, Color
from phongcast.shapes import Sphere
from phongcast.lights import DirectionalLight, PointLight
from phongcast.scene import Scene


class TestScene:
    """Test Scene construction and access."""

    def test_defaults(self):
        scene = Scene()
        assert scene.objects == ()
        assert scene.background_color == Color(0.2, 0.2, 0.2)
        assert scene.light_position is None
        assert len(scene) == 0

    def test_objects_stored_as_tuple(self):
        spheres = [Sphere(Point3(0, 0, 0), 1.0), Sphere(Point3(2, 0, 0), 1.0)]
        scene = Scene(objects=spheres)
        spheres.append(Sphere(Point3(4, 0, 0), 1.0))

        assert isinstance(scene.objects, tuple)
        assert len(scene) == 2
        assert list(scene) == spheres[:2]

    def test_frozen(self):
        scene = Scene()
        with pytest.raises(dataclasses.FrozenInstanceError):
            scene.background_color = Color(1, 1, 1)

    def test_direction_stored_unnormalized(self):
        scene = Scene(direction_to_light=Vec3(1, 1, 1))
        assert scene.direction_to_light == Vec3(1, 1, 1)

    def test_directional_light(self):
        scene = Scene(direction_to_light=Vec3(0, 2, 0), light_color=Color(1, 0, 0))
        light = scene.light
        assert isinstance(light, DirectionalLight)
        assert light.color == Color(1, 0, 0)

    def test_point_light_takes_precedence(self):
        scene = Scene(direction_to_light=Vec3(0, 1, 0), light_position=Point3(1, 2, 3))
        light = scene.light
        assert isinstance(light, PointLight)
        assert light.position == Point3(1, 2, 3)
