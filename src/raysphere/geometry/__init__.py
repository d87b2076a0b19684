"""Geometry module for the sphere primitive.

Components:
    sphere: Sphere primitive with ray-sphere intersection

Ray-sphere intersection follows the pattern:
    hit_point = sphere.ray_intersect(ray)          # Python scope, None on miss
    record = hit_sphere(origin, direction, data)   # inside a Taichi kernel
"""

from .sphere import HitRecord, Sphere, SphereData, hit_sphere

__all__ = [
    "Sphere",
    "SphereData",
    "HitRecord",
    "hit_sphere",
]
