"""
Light sources for the ray caster.

A scene has a single light, either:
- Directional (infinitely far, like the sun)
- Point (at a position, no distance falloff)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import math

from .vec3 import Vec3, Point3, Color


@dataclass
class LightSample:
    """Result of sampling a light source."""
    direction: Vec3       # Unit direction from the point to the light
    distance: float       # Distance to the light, inf for directional lights
    color: Color          # Light color arriving at the point


class Light(ABC):
    """Abstract base class for light sources."""

    @abstractmethod
    def sample(self, point: Point3) -> LightSample:
        """Sample the light as seen from a point.

        Args:
            point: The point being illuminated

        Returns:
            LightSample with direction, distance and color
        """


class DirectionalLight(Light):
    """A directional light.

    Directional lights have parallel rays and no falloff.
    """

    def __init__(self, direction_to_light: Vec3, color: Color):
        """Create a directional light.

        Args:
            direction_to_light: Direction from the scene TOWARD the light,
                any length (normalized when sampled)
            color: Color of the light
        """
        self.direction_to_light = direction_to_light
        self.color = color

    def sample(self, point: Point3) -> LightSample:
        return LightSample(
            direction=self.direction_to_light.normalize(),
            distance=math.inf,
            color=self.color
        )


class PointLight(Light):
    """A point light source.

    Point lights emit equally in all directions from one position and
    cast hard shadows. Intensity does not fall off with distance.
    """

    def __init__(self, position: Point3, color: Color):
        self.position = position
        self.color = color

    def sample(self, point: Point3) -> LightSample:
        offset = self.position - point
        return LightSample(
            direction=offset.normalize(),
            distance=offset.length(),
            color=self.color
        )
