"""Sphere primitive with ray-sphere intersection.

Substituting the ray P(t) = O + t*D into the sphere equation
|P - C|^2 = r^2 gives

    (D.D) t^2 + 2 (D.(O - C)) t + (O - C).(O - C) - r^2 = 0

Ray directions are unit length, so D.D = 1 and the quadratic reduces to

    t^2 + 2 b t + c = 0,   b = D.(O - C),   c = |O - C|^2 - r^2

with discriminant det = b^2 - c and roots t = -b +/- sqrt(det).

The intersection works on the infinite line through the ray: the smaller
root is reported even when it is negative, i.e. behind the ray origin (for
example when the origin lies inside the sphere). Callers wanting a forward-only
ray cast check the sign of ``Sphere.ray_intersect_distance`` or of
``Ray.distance_along`` on the returned point.

Both the Python-scope Sphere and the kernel-side ``hit_sphere`` follow the
same three-way branch on the discriminant.

Example:
    >>> from raysphere import Ray, Sphere, Vector
    >>> sphere = Sphere(Vector(0.0, 0.0, 0.0), 1.0)
    >>> ray = Ray(Vector(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> sphere.ray_intersect(ray)
    Vector(0.0, 0.0, -1.0)
"""

import math
from typing import Optional

import taichi as ti
import taichi.math as tm

from raysphere.core.ray import Ray, ray_at
from raysphere.core.vector import Vector, vec3


class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere. Expected non-negative; not validated.
    """

    __slots__ = ("center", "radius")

    def __init__(self, center: Optional[Vector] = None, radius: float = 0.0) -> None:
        self.center = center.copy() if center is not None else Vector()
        self.radius = float(radius)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.center == other.center and self.radius == other.radius

    __hash__ = None  # type: ignore[assignment]

    def ray_intersect_distance(self, ray: Ray) -> Optional[float]:
        """Find the parametric distance of the selected intersection.

        Args:
            ray: The ray to test. Its direction must be unit length (any Ray
                built from a nonzero direction is).

        Returns:
            The smaller root t of the intersection quadratic, which may be
            negative, or None if the line through the ray misses the sphere.
        """
        oc = ray.origin - self.center
        b = ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        det = b * b - c

        if det < 0:
            return None
        if det == 0:
            # Tangent: the two roots coincide
            return -b

        sqrt_det = math.sqrt(det)
        t1 = -b + sqrt_det
        t2 = -b - sqrt_det
        if t1 > t2:
            return t2
        return t1

    def ray_intersect(self, ray: Ray) -> Optional[Vector]:
        """Test for ray-sphere intersection.

        Args:
            ray: The ray to test.

        Returns:
            The hit point at the smaller root, or None on a miss. Never raises
            for finite input, including zero-radius spheres and rays with a
            zero direction.
        """
        t = self.ray_intersect_distance(ray)
        if t is None:
            return None
        return ray.point_at_dist(t)


# =============================================================================
# Kernel-side counterpart
# =============================================================================


@ti.dataclass
class SphereData:
    """Sphere layout for use inside Taichi kernels.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere.
    """

    center: vec3
    radius: ti.f32


@ti.dataclass
class HitRecord:
    """Record of a ray-sphere intersection inside a Taichi kernel.

    Attributes:
        hit: Whether the line through the ray meets the sphere (1 if hit,
            0 if miss).
        t: The selected (smaller) root. Only valid if hit == 1, and may be
            negative.
        point: The point on the ray at t. Only valid if hit == 1.
    """

    hit: ti.i32
    t: ti.f32
    point: vec3


@ti.func
def hit_sphere(ray_origin: vec3, ray_direction: vec3, sphere: SphereData) -> HitRecord:
    """Test for ray-sphere intersection inside a Taichi kernel.

    Same algorithm and root selection as Sphere.ray_intersect_distance,
    evaluated in single precision.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction of the ray. Must be unit length.
        sphere: The sphere to test intersection against.

    Returns:
        A HitRecord. Check the hit field to determine if intersection occurred.
    """
    oc = ray_origin - sphere.center
    b = tm.dot(ray_direction, oc)
    c = tm.dot(oc, oc) - sphere.radius * sphere.radius
    det = b * b - c

    # Taichi requires outer-scope declaration
    did_hit = 0
    hit_t = 0.0
    hit_point = vec3(0.0, 0.0, 0.0)

    if det == 0.0:
        did_hit = 1
        hit_t = -b
    elif det > 0.0:
        sqrt_det = ti.sqrt(det)
        t1 = -b + sqrt_det
        t2 = -b - sqrt_det
        did_hit = 1
        hit_t = t1
        if t1 > t2:
            hit_t = t2

    if did_hit == 1:
        hit_point = ray_at(ray_origin, ray_direction, hit_t)

    return HitRecord(hit=did_hit, t=hit_t, point=hit_point)
