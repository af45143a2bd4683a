"""
Surface shading with hard shadows.

Combines a primitive's material with the scene light, after casting a
shadow ray from the hit point toward the light.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .vec3 import Vec3, Point3, Color

if TYPE_CHECKING:
    from .lights import LightSample
    from .scene import Scene
    from .shapes import Primitive

# Offset of a shadow ray's origin along the surface normal.
SHADOW_BIAS = 1e-6


class ShadowPolicy(Enum):
    """What a point that cannot see the light contributes."""
    BLACK = 'black'
    AMBIENT = 'ambient'


def in_shadow(
    point: Point3,
    normal: Vec3,
    scene: Scene,
    shadow_bias: float = SHADOW_BIAS,
    sample: Optional[LightSample] = None
) -> bool:
    """Test whether any primitive blocks the light from a surface point.

    Args:
        point: Point on a surface
        normal: Unit surface normal at the point
        scene: Scene holding the light and the occluders
        shadow_bias: Distance to lift the shadow ray off the surface
        sample: The light as seen from point, if already sampled

    Returns:
        True if the shadow ray strikes a primitive before reaching the light
    """
    # Ray imports this module for Ray.color
    from .ray import Ray

    if sample is None:
        sample = scene.light.sample(point)
    shadow_ray = Ray(point + normal * shadow_bias, sample.direction)

    for obj in scene.objects:
        if obj.intersect(shadow_ray, sample.distance) is not None:
            return True
    return False


def surface_color(
    primitive: Primitive,
    point: Point3,
    view_direction: Vec3,
    scene: Scene,
    policy: ShadowPolicy = ShadowPolicy.BLACK,
    shadow_bias: float = SHADOW_BIAS
) -> Color:
    """Color of a primitive at a point seen along view_direction.

    Args:
        primitive: The primitive that was hit
        point: The hit point
        view_direction: Unit direction of the primary ray
        scene: The scene being rendered
        policy: Contribution of occluded points
        shadow_bias: Offset for the shadow ray origin

    Returns:
        Unclamped radiance
    """
    normal = primitive.normal_at(point)
    material = primitive.material

    sample = scene.light.sample(point)

    if in_shadow(point, normal, scene, shadow_bias, sample):
        if policy is ShadowPolicy.AMBIENT:
            return material.ambient(scene.ambient_light)
        return Color(0.0, 0.0, 0.0)

    return material.shade(normal, view_direction, sample.direction, sample.color, scene.ambient_light)
