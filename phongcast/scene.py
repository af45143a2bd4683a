"""
Scene container.

Holds the light, the ambient and background colors and the ordered list of
primitives. A scene is built once and then only read while rendering.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .vec3 import Vec3, Point3, Color
from .shapes import Primitive
from .lights import Light, DirectionalLight, PointLight


@dataclass(frozen=True)
class Scene:
    """Everything a ray needs to compute a color.

    Attributes:
        direction_to_light: Direction toward a directional light, stored
            as given and normalized where it is used
        light_color: Color of the light
        ambient_light: Ambient light color
        background_color: Color of rays that hit nothing
        objects: Primitives, in insertion order
        light_position: If set, the light is a point light at this
            position and direction_to_light is ignored
    """
    direction_to_light: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    light_color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient_light: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0))
    background_color: Color = field(default_factory=lambda: Color(0.2, 0.2, 0.2))
    objects: Sequence[Primitive] = ()
    light_position: Optional[Point3] = None

    def __post_init__(self):
        # objects is always a tuple
        object.__setattr__(self, 'objects', tuple(self.objects))

    @property
    def light(self) -> Light:
        if self.light_position is not None:
            return PointLight(self.light_position, self.light_color)
        return DirectionalLight(self.direction_to_light, self.light_color)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)
