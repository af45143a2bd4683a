"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a unit direction vector.
Ray(t) = origin + t * direction, so t is a distance along the ray.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Union, TYPE_CHECKING

from .vec3 import Vec3, Point3, Color
from .shading import ShadowPolicy, SHADOW_BIAS, surface_color

if TYPE_CHECKING:
    from .scene import Scene
    from .shapes import Primitive


@dataclass(frozen=True)
class Hit:
    """The nearest intersection of a ray with a scene.

    Attributes:
        point: The intersection point in world space
        primitive: The primitive that was struck
        t: The distance along the ray to the intersection
    """
    point: Point3
    primitive: Primitive
    t: float


class Ray:
    """A ray with origin and unit direction.

    The direction is normalized once, at construction, and never again.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: Any non-zero direction vector; it is normalized here

        Raises:
            ValueError: If the direction has zero length
        """
        if direction.length_squared() == 0:
            raise ValueError("Ray direction must be non-zero")
        self.origin = origin
        self.direction = direction.normalize()

    def at(self, t: float) -> Point3:
        """Get the point along the ray at distance t."""
        return self.origin + self.direction * t

    def nearest_hit(self, scene: Union[Scene, Iterable[Primitive]]) -> Optional[Hit]:
        """Find the closest primitive struck by this ray.

        Every primitive is tested against the best distance found so far,
        which only ever shrinks, so the result does not depend on the order
        of the objects.

        Args:
            scene: A Scene, or any iterable of primitives

        Returns:
            Hit for the nearest intersection, or None if nothing is struck
        """
        objects = getattr(scene, 'objects', scene)
        hit: Optional[Hit] = None
        t_closest = float('inf')

        for obj in objects:
            t = obj.intersect(self, t_closest)
            if t is not None:
                t_closest = t
                hit = Hit(self.at(t), obj, t)

        return hit

    def color(
        self,
        scene: Scene,
        policy: ShadowPolicy = ShadowPolicy.BLACK,
        shadow_bias: float = SHADOW_BIAS
    ) -> Color:
        """Compute the radiance carried back along this ray.

        Args:
            scene: The scene to cast into
            policy: What an occluded point contributes
            shadow_bias: Offset along the normal for the shadow ray origin

        Returns:
            Shaded color of the nearest hit, or the scene background
        """
        hit = self.nearest_hit(scene)
        if hit is None:
            return scene.background_color

        return surface_color(hit.primitive, hit.point, self.direction, scene, policy, shadow_bias)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
