"""3D vector value type for ray-sphere geometry.

This module provides the Python-scope Vector class used by Ray and Sphere,
plus the Taichi ``vec3`` alias used by the kernel-side helpers. A Vector is
either a point or a displacement depending on context.

Binary operators always return a new Vector. The in-place operators
(``+=``, ``-=``, ``*=``, ``/=``) and ``normalize()`` mutate the receiver and
return it, so they can be chained.

Example:
    >>> from raysphere.core.vector import Vector
    >>> v = Vector(3.0, 4.0, 0.0)
    >>> v.length()
    5.0
    >>> v.normalized()
    Vector(0.6, 0.8, 0.0)
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, Iterator, Tuple

import taichi.math as tm

# Type alias for 3D vectors inside Taichi kernels
vec3 = tm.vec3

# Default tolerances for Vector.is_close
DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12


class Vector:
    """A 3-component real vector.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector:
        """Build a Vector from any iterable of exactly three numbers.

        Raises:
            ValueError: If the iterable does not hold exactly three values.
        """
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(f"Vector requires exactly 3 components, got {len(components)}")
        return cls(*components)

    def copy(self) -> Vector:
        return Vector(self.x, self.y, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # Mutable through the in-place operators
    __hash__ = None  # type: ignore[assignment]

    def is_close(
        self,
        other: Vector,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL,
    ) -> bool:
        """Compare componentwise within floating-point tolerance.

        Args:
            other: The vector to compare against.
            rel_tol: Relative tolerance, as in math.isclose.
            abs_tol: Absolute tolerance, as in math.isclose.

        Returns:
            True if every component pair is close.
        """
        return (
            math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, rel_tol=rel_tol, abs_tol=abs_tol)
        )

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        """Divide every component by a scalar.

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide Vector by zero")
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other: Vector) -> Vector:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector) -> Vector:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector:
        """Divide in place.

        Raises:
            ZeroDivisionError: If scalar is zero. The receiver is left unchanged.
        """
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide Vector by zero")
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    # =========================================================================
    # Metric operations
    # =========================================================================

    def length(self) -> float:
        """Euclidean length, sqrt(x^2 + y^2 + z^2).

        Computed with math.hypot, which does not overflow or underflow for
        components whose squares are outside the double range.
        """
        return math.hypot(self.x, self.y, self.z)

    def length_squared(self) -> float:
        """Squared length.

        Cheaper than length() when only comparing magnitudes, as it avoids
        the square root.
        """
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Right-handed cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def normalized(self) -> Vector:
        """Return a unit vector in the same direction.

        Returns:
            A new unit-length Vector. If this vector has zero length, a zero
            vector is returned instead of raising.
        """
        length = self.length()
        if length > 0:
            return self / length
        return Vector()

    def normalize(self) -> Vector:
        """Normalize in place with the same zero-length policy as normalized().

        Returns:
            This vector, to allow chaining.
        """
        unit = self.normalized()
        self.x, self.y, self.z = unit.x, unit.y, unit.z
        return self
