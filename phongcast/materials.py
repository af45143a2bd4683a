"""
Phong materials.

A material holds the reflectance coefficients of a surface and turns a
surface normal, a view direction and the scene's light into a color:

    ambient  = k_a * ambient_light * o_d
    diffuse  = k_d * light_color * o_d * max(N.L, 0)
    specular = k_s * light_color * o_s * max(V.R, 0) ** k_gls

where products of colors are component-wise, V points back toward the eye
and R is L mirrored about N. Specular is dropped when N.L <= 0.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .vec3 import Vec3, Color


def _white() -> Color:
    return Color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Material:
    """Reflectance coefficients of a surface.

    Attributes:
        k_a: Ambient weight
        k_d: Diffuse weight
        k_s: Specular weight
        k_gls: Specular (gloss) exponent, must be positive
        o_d: Diffuse color
        o_s: Specular color
        reflectivity: Mirror weight; stored with the scene but not used
            by shading
    """
    k_a: float = 0.1
    k_d: float = 0.7
    k_s: float = 0.2
    k_gls: float = 16.0
    o_d: Color = field(default_factory=_white)
    o_s: Color = field(default_factory=_white)
    reflectivity: float = 0.0

    def __post_init__(self):
        if self.k_gls <= 0:
            raise ValueError(f"Gloss exponent k_gls must be positive, got {self.k_gls}")

    def ambient(self, ambient_light: Color) -> Color:
        """Ambient term alone, used for points that cannot see the light."""
        return (ambient_light * self.o_d) * self.k_a

    def shade(
        self,
        normal: Vec3,
        view_direction: Vec3,
        light_direction: Vec3,
        light_color: Color,
        ambient_light: Color
    ) -> Color:
        """Evaluate the Phong model at a lit point.

        Args:
            normal: Unit surface normal
            view_direction: Unit direction of the incoming ray (eye to surface)
            light_direction: Direction from the surface to the light
                (normalized here)
            light_color: Color of the light
            ambient_light: Ambient light of the scene

        Returns:
            The unclamped radiance at the point
        """
        v = -view_direction
        l = light_direction.normalize()
        n_dot_l = normal.dot(l)

        ambient = self.ambient(ambient_light)
        diffuse = (light_color * self.o_d) * (self.k_d * max(n_dot_l, 0.0))

        if n_dot_l <= 0.0:
            return ambient + diffuse

        r = l.reflect(normal)
        highlight = max(v.dot(r), 0.0) ** self.k_gls
        specular = (light_color * self.o_s) * (self.k_s * highlight)

        return ambient + diffuse + specular
