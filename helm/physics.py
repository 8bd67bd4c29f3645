#!/usr/bin/env python3
"""
Planar Vector Math for the Helm Steering Engine

Implements the 2D geometry every steering and targeting routine relies on:
- 2D vector operations (arithmetic, dot product, length, normalization)
- Rotation of vectors and heading/angle conversion
- Signed angle normalization and shortest-path angle differences

Angles are in radians, measured counter-clockwise from the +X axis.
Times are in seconds.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


# =============================================================================
# SIMULATION CONSTANTS
# =============================================================================

# Host simulation tick (seconds). Used as the default control horizon.
TICK_LENGTH_S = 1.0 / 60.0

TWO_PI = 2.0 * math.pi


# =============================================================================
# VECTOR2D CLASS
# =============================================================================

@dataclass
class Vector2D:
    """
    2D vector for positions, velocities, and accelerations in the plane.

    Uses a right-handed planar frame where:
    - X: heading 0 rad
    - Y: heading pi/2 rad

    All units in SI (meters, m/s, m/s^2) unless otherwise specified.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        """Vector addition."""
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        """Vector subtraction."""
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        """Scalar multiplication."""
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2D:
        """Right scalar multiplication."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        """Scalar division."""
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2D:
        """Negation."""
        return Vector2D(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        """Equality check with tolerance."""
        if not isinstance(other, Vector2D):
            return False
        eps = 1e-10
        return abs(self.x - other.x) < eps and abs(self.y - other.y) < eps

    def dot(self, other: Vector2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product (signed parallelogram area)."""
        return self.x * other.y - self.y * other.x

    @property
    def magnitude(self) -> float:
        """Vector magnitude (length)."""
        return math.hypot(self.x, self.y)

    @property
    def magnitude_squared(self) -> float:
        """Squared magnitude (avoids sqrt for comparisons)."""
        return self.x**2 + self.y**2

    @property
    def is_zero(self) -> bool:
        """True only for the exact zero vector."""
        return self.x == 0.0 and self.y == 0.0

    def normalized(self) -> Vector2D:
        """Return unit vector in same direction."""
        mag = self.magnitude
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return self / mag

    def distance_to(self, other: Vector2D) -> float:
        """Distance to another point."""
        return (self - other).magnitude

    def angle(self) -> float:
        """Heading of this vector in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def rotate(self, angle_rad: float) -> Vector2D:
        """Rotate counter-clockwise by angle_rad."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return Vector2D(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a
        )

    def clamped(self, max_magnitude: float) -> Vector2D:
        """Return this vector scaled down so its length is at most max_magnitude."""
        mag = self.magnitude
        if mag <= max_magnitude or mag == 0:
            return Vector2D(self.x, self.y)
        return self * (max_magnitude / mag)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: tuple[float, float]) -> Vector2D:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def from_angle(cls, angle_rad: float, length: float = 1.0) -> Vector2D:
        """Vector of the given length pointing along heading angle_rad."""
        return cls(math.cos(angle_rad) * length, math.sin(angle_rad) * length)

    @classmethod
    def zero(cls) -> Vector2D:
        """Zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector2D:
        """Unit vector along heading 0."""
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector2D:
        """Unit vector along heading pi/2."""
        return cls(0.0, 1.0)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.6g}, {self.y:.6g})"


# =============================================================================
# ANGLE UTILITIES
# =============================================================================

def normalize_angle(angle_rad: float) -> float:
    """
    Wrap an angle into the half-open interval (-pi, pi].

    Args:
        angle_rad: Any angle in radians

    Returns:
        Equivalent angle in (-pi, pi]
    """
    wrapped = (angle_rad + math.pi) % TWO_PI - math.pi
    # The modulo lands on -pi for odd multiples of pi; report +pi instead.
    if wrapped <= -math.pi:
        wrapped += TWO_PI
    return wrapped


def angle_diff(from_rad: float, to_rad: float) -> float:
    """
    Shortest signed rotation that takes from_rad onto to_rad.

    Positive results are counter-clockwise.

    Args:
        from_rad: Starting heading (radians)
        to_rad: Goal heading (radians)

    Returns:
        Signed difference in (-pi, pi]
    """
    return normalize_angle(to_rad - from_rad)
