"""Ray-sphere intersection in three-dimensional space.

This package provides the geometry needed to decide whether a ray meets a
sphere and where, with both Python-scope value types and Taichi functions
for use inside kernels:
- Vector arithmetic, dot/cross products, length and normalization
- Rays with a direction normalized at construction
- Spheres with a quadratic ray intersection test

Subpackages:
    core: Vector and Ray types, plus their Taichi kernel helpers
    geometry: The Sphere primitive and its intersection algorithm
"""

from .core import Ray, Vector
from .geometry import Sphere

__version__ = "0.1.0"

__all__ = ["Vector", "Ray", "Sphere"]
