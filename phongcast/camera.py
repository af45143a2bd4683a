"""
Camera module for generating primary rays.

A fixed pinhole camera looking down -Z through a rectangular viewport
placed focal_length in front of it.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A pinhole camera with an axis-aligned image plane."""

    def __init__(
        self,
        origin: Point3 = Point3(0.0, 0.0, 1.0),
        viewport_width: float = 3.0,
        aspect_ratio: float = 16.0 / 9.0,
        focal_length: float = 1.0
    ):
        """Create a camera.

        Args:
            origin: Eye position in world space
            viewport_width: Width of the image plane in world units
            aspect_ratio: Width / Height ratio
            focal_length: Distance from the eye to the image plane

        Raises:
            ValueError: If viewport_width or aspect_ratio is not positive
        """
        if viewport_width <= 0 or aspect_ratio <= 0:
            raise ValueError(
                f"Viewport width and aspect ratio must be positive, got {viewport_width} and {aspect_ratio}"
            )
        self.origin = origin
        self.viewport_width = viewport_width
        self.viewport_height = viewport_width / aspect_ratio
        self.focal_length = focal_length

        self.horizontal = Vec3(self.viewport_width, 0.0, 0.0)
        self.vertical = Vec3(0.0, self.viewport_height, 0.0)
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - Vec3(0.0, 0.0, focal_length)
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the image plane.

        Args:
            u: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            v: Vertical coordinate [0, 1] (0 = bottom, 1 = top)

        Returns:
            A ray from the eye through that point of the viewport
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin}, "
                f"viewport={self.viewport_width:.3f}x{self.viewport_height:.3f})")
