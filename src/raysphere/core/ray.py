"""Ray data structure with a unit-length direction.

This module provides the Ray class, a half-line given by an origin point and
a direction that is normalized once, at construction. Points along the ray are
addressed by a signed Euclidean distance from the origin.

The kernel-side counterpart ``ray_at`` evaluates the same expression inside
Taichi kernels on plain ``vec3`` values.

Example:
    >>> from raysphere.core.ray import Ray
    >>> from raysphere.core.vector import Vector
    >>> ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 2.0))
    >>> ray.direction
    Vector(0.0, 0.0, 1.0)
    >>> ray.point_at_dist(5.0)  # Point 5 units along the ray
    Vector(0.0, 0.0, 5.0)
"""

from typing import Optional

import taichi as ti

from raysphere.core.vector import Vector, vec3


class Ray:
    """A ray with an origin point and unit direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Unit length when built from a
            nonzero direction; zero for a default-constructed ray or a zero
            input direction.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Optional[Vector] = None, direction: Optional[Vector] = None) -> None:
        if origin is None and direction is None:
            self.origin = Vector()
            self.direction = Vector()
            return
        self.origin = origin.copy() if origin is not None else Vector()
        self.direction = direction.copy() if direction is not None else Vector()
        self.direction.normalize()

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None  # type: ignore[assignment]

    def point_at_dist(self, dist: float) -> Vector:
        """Compute the point at signed distance dist along the ray.

        Args:
            dist: Distance from the origin. Negative values lie behind it.

        Returns:
            The point origin + dist * direction. A zero direction collapses
            every distance to the origin.
        """
        return dist * self.direction + self.origin

    def distance_along(self, point: Vector) -> float:
        """Signed distance of a point's projection onto the ray.

        Recovers the parametric distance of a hit point, so callers that need
        forward-only hits can check its sign.
        """
        return (point - self.origin).dot(self.direction)


@ti.func
def ray_at(origin: vec3, direction: vec3, t: ti.f32) -> vec3:
    """Compute the point along a ray at parameter t inside a Taichi kernel.

    Args:
        origin: The starting point of the ray.
        direction: The direction vector of the ray (unit length for t to be a
            Euclidean distance).
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point origin + t * direction.
    """
    return origin + t * direction
