"""
Geometric primitives for the ray caster.

Each primitive implements the Primitive capability set: an intersection
test against a ray bounded by the closest distance found so far, and a
unit surface normal at a point.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .materials import Material

# Hits closer than this are treated as self-intersections and ignored.
T_EPSILON = 1e-9


class Primitive(ABC):
    """Abstract base class for renderable shapes."""

    material: Material

    @abstractmethod
    def intersect(self, ray: Ray, t_closest: float = math.inf) -> Optional[float]:
        """Test if ray strikes this primitive closer than t_closest.

        Args:
            ray: The ray to test (unit direction)
            t_closest: The nearest hit distance found so far

        Returns:
            The hit distance t with T_EPSILON < t < t_closest, or None
        """

    @abstractmethod
    def normal_at(self, point: Point3) -> Vec3:
        """Unit surface normal at a point on the primitive."""


class Sphere(Primitive):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Optional[Material] = None):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be positive
            material: Material for shading (default material if None)
        """
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material if material is not None else Material()

    def intersect(self, ray: Ray, t_closest: float = math.inf) -> Optional[float]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t) expands to
        t² + bt + c = 0, since the ray direction has unit length.
        The near root is tried first; if it lies behind the origin or beyond
        t_closest the far root gets the same test, which is what a ray
        starting inside the sphere needs.
        """
        oc = ray.origin - self.center
        b = 2.0 * oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = b * b - 4.0 * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        root = (-b - sqrtd) / 2.0
        if root <= T_EPSILON or root >= t_closest:
            root = (-b + sqrtd) / 2.0
            if root <= T_EPSILON or root >= t_closest:
                return None

        return root

    def normal_at(self, point: Point3) -> Vec3:
        return ((point - self.center) / self.radius).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Triangle(Primitive):
    """A triangle defined by three vertices.

    The vertex order sets the winding, and with it the side the normal
    points to.
    """

    def __init__(self, v0: Point3, v1: Point3, v2: Point3, material: Optional[Material] = None):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material if material is not None else Material()

        self._raw_normal = (v1 - v0).cross(v2 - v1)
        self._unit_normal = self._raw_normal.normalize()
        self._plane_d = -self._raw_normal.dot(v0)

    @classmethod
    def from_vertices(cls, vertices: Sequence[Point3], material: Optional[Material] = None) -> Triangle:
        if len(vertices) != 3:
            raise ValueError(f"Triangle needs exactly 3 vertices, got {len(vertices)}")
        return cls(vertices[0], vertices[1], vertices[2], material)

    @property
    def vertices(self) -> tuple[Point3, Point3, Point3]:
        return self.v0, self.v1, self.v2

    def raw_normal(self) -> Vec3:
        """Unnormalized edge cross product (v1 - v0) x (v2 - v1)."""
        return self._raw_normal

    def intersect(self, ray: Ray, t_closest: float = math.inf) -> Optional[float]:
        """Test ray-triangle intersection.

        Solves the ray against the triangle's plane, then decides membership
        with an even-odd crossing test in 2D, after dropping the axis along
        which the normal is largest.
        """
        normal = self._raw_normal
        v_d = normal.dot(ray.direction)

        # Ray is parallel to the plane
        if v_d == 0.0:
            return None

        t = -(normal.dot(ray.origin) + self._plane_d) / v_d
        if t <= T_EPSILON or t >= t_closest:
            return None

        axis = normal.dominant_axis()
        pu, pv = ray.at(t).drop_axis(axis)
        projected = []
        for vertex in self.vertices:
            u, v = vertex.drop_axis(axis)
            projected.append((u - pu, v - pv))

        # Cast a ray from the projected point along +u and count edge crossings
        crossings = 0
        count = len(projected)
        for i in range(count):
            u0, v0 = projected[i]
            u1, v1 = projected[(i + 1) % count]
            if (v0 < 0.0) == (v1 < 0.0):
                continue
            if u0 > 0.0 and u1 > 0.0:
                crossings += 1
            elif u0 > 0.0 or u1 > 0.0:
                u_cross = u0 - v0 * (u1 - u0) / (v1 - v0)
                if u_cross > 0.0:
                    crossings += 1

        if crossings % 2 == 0:
            return None
        return t

    def normal_at(self, point: Point3) -> Vec3:
        return self._unit_normal

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"
