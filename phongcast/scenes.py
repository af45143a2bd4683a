"""
Built-in scenes.

- sphere: a single magenta sphere lit from above
- 1: a reflective sphere over a blue/yellow triangle fold
- 2: spheres and triangles lit from the side
- 3: a fan of red triangles with stacked spheres
"""

from __future__ import annotations
from typing import Callable, Dict

from .vec3 import Vec3, Point3, Color
from .shapes import Sphere, Triangle
from .materials import Material
from .scene import Scene


def _mat(k_d, k_s, k_a, o_d, o_s, k_gls, refl=0.0) -> Material:
    return Material(k_a=k_a, k_d=k_d, k_s=k_s, k_gls=k_gls,
                    o_d=Color(*o_d), o_s=Color(*o_s), reflectivity=refl)


WHITE = (1.0, 1.0, 1.0)
RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0)
GREY = (0.75, 0.75, 0.75)
MINT = (0.5, 1.0, 0.5)


def single_sphere() -> Scene:
    return Scene(
        direction_to_light=Vec3(0.0, 1.0, 0.0),
        light_color=Color(1.0, 1.0, 1.0),
        ambient_light=Color(0.0, 0.0, 0.0),
        background_color=Color(0.2, 0.2, 0.2),
        objects=[
            Sphere(Point3(0.0, 0.0, 0.0), 0.4, _mat(0.7, 0.2, 0.1, (1.0, 0.0, 1.0), WHITE, 16.0)),
        ]
    )


def scene_1() -> Scene:
    return Scene(
        direction_to_light=Vec3(0.0, 1.0, 0.0),
        light_color=Color(1.0, 1.0, 1.0),
        ambient_light=Color(0.0, 0.0, 0.0),
        background_color=Color(0.2, 0.2, 0.2),
        objects=[
            # reflective sphere
            Sphere(Point3(0.0, 0.3, -1.0), 0.25, _mat(0.0, 0.1, 0.1, GREY, WHITE, 10.0, 0.9)),
            # blue triangle
            Triangle(
                Point3(0.0, -0.7, -0.5), Point3(1.0, 0.4, -1.0), Point3(0.0, -0.7, -1.5),
                _mat(0.9, 1.0, 0.1, BLUE, WHITE, 4.0)
            ),
            # yellow triangle
            Triangle(
                Point3(0.0, -0.7, -0.5), Point3(0.0, -0.7, -1.5), Point3(-1.0, 0.4, -1.0),
                _mat(0.9, 1.0, 0.1, YELLOW, WHITE, 4.0)
            ),
        ]
    )


def scene_2() -> Scene:
    return Scene(
        direction_to_light=Vec3(1.0, 0.0, 0.0),
        light_color=Color(1.0, 1.0, 1.0),
        ambient_light=Color(0.1, 0.1, 0.1),
        background_color=Color(0.2, 0.2, 0.2),
        objects=[
            Sphere(Point3(0.5, 0.0, -0.15), 0.05, _mat(0.8, 0.1, 0.3, WHITE, WHITE, 4.0)),
            Sphere(Point3(0.3, 0.0, -0.1), 0.08, _mat(0.8, 0.8, 0.1, RED, MINT, 32.0)),
            Sphere(Point3(-0.6, 0.0, 0.0), 0.3, _mat(0.7, 0.5, 0.1, GREEN, MINT, 64.0)),
            # reflective sphere
            Sphere(Point3(0.1, -0.55, 0.25), 0.3, _mat(0.0, 0.1, 0.1, GREY, WHITE, 10.0, 0.9)),
            Triangle(
                Point3(0.3, -0.3, -0.4), Point3(0.0, 0.3, -0.1), Point3(-0.3, -0.3, 0.2),
                _mat(0.9, 0.9, 0.1, BLUE, WHITE, 32.0)
            ),
            Triangle(
                Point3(-0.2, 0.1, 0.1), Point3(-0.2, -0.5, 0.2), Point3(-0.2, 0.1, -0.3),
                _mat(0.9, 0.5, 0.1, YELLOW, WHITE, 4.0)
            ),
        ]
    )


def scene_3() -> Scene:
    red_mirror = _mat(0.9, 1.0, 0.1, RED, WHITE, 4.0, 0.9)
    fan = [
        Triangle(Point3(x0, 0.0, -1.0), Point3(x1, 0.18, 0.0), Point3(x1, -0.18, 0.0), red_mirror)
        for x0, x1 in ((-0.40, -0.60), (-0.20, -0.40), (0.0, -0.20), (0.20, 0.0))
    ]
    return Scene(
        direction_to_light=Vec3(1.0, 1.0, 1.0),
        light_color=Color(1.0, 1.0, 1.0),
        ambient_light=Color(0.2, 0.2, 0.2),
        background_color=Color(0.2, 0.2, 0.2),
        objects=fan + [
            Triangle(
                Point3(0.20, 0.20, -1.0), Point3(0.20, -0.20, -1.0), Point3(0.40, -0.18, -1.0),
                red_mirror
            ),
            Sphere(Point3(0.0, 0.0, -0.5), 0.05, red_mirror),
            Sphere(Point3(0.2, 0.2, -0.5), 0.1, _mat(0.8, 0.1, 0.3, BLUE, WHITE, 4.0, 1.0)),
            Sphere(Point3(0.2, 0.1, -0.5), 0.08, _mat(0.8, 0.1, 0.3, GREEN, WHITE, 32.0, 1.0)),
            Sphere(Point3(0.2, 0.02, -0.5), 0.06, _mat(0.8, 0.1, 0.3, RED, WHITE, 64.0, 1.0)),
            Sphere(Point3(0.0, 1.0, 0.0), 0.75, _mat(0.8, 0.1, 0.3, (0.0, 0.0, 0.0), WHITE, 64.0, 1.0)),
            Sphere(Point3(0.0, -1.0, 0.0), 0.75, _mat(0.8, 0.1, 0.3, (0.0, 0.0, 0.0), WHITE, 64.0, 1.0)),
        ]
    )


SCENES: Dict[str, Callable[[], Scene]] = {
    'sphere': single_sphere,
    '1': scene_1,
    '2': scene_2,
    '3': scene_3,
}


def get_scene(name: str) -> Scene:
    """Build a built-in scene by name."""
    try:
        return SCENES[name]()
    except KeyError:
        raise ValueError(f"Unknown scene: {name} (choose from {', '.join(SCENES)})") from None
