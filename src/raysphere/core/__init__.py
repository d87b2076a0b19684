"""Core geometry module.

Components:
    vector: The Vector value type and the Taichi vec3 alias
    ray: The Ray type and the kernel-side ray_at helper

Python-scope types (Vector, Ray) are plain value objects and need no Taichi
runtime. The @ti.func helpers are only callable from inside Taichi kernels,
after ti.init().
"""

from .ray import Ray, ray_at
from .vector import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, Vector, vec3

__all__ = [
    "Vector",
    "Ray",
    "ray_at",
    "vec3",
    "DEFAULT_REL_TOL",
    "DEFAULT_ABS_TOL",
]
