#!/usr/bin/env python3
"""
Kinematic and Motor State for the Helm Steering Engine

Implements the read-only views a steering strategy works against:
- Kinematic: position, velocity, orientation, angular rate, plus derived
  queries (forward direction, speed, linear extrapolation, lead prediction)
- KinematicState: a plain per-tick snapshot of those readings
- MotorState: a snapshot extended with actuation limits and braking
  thresholds

Views are built fresh from host readings every tick and never cached.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .config import MotorConfig
from .physics import Vector2D
from .targeting import intercept_time


# =============================================================================
# KINEMATIC MIXIN
# =============================================================================

class Kinematic:
    """
    Derived queries over a kinematic reading.

    Subclasses supply four attributes (fields or properties):
        position: Vector2D, meters
        velocity: Vector2D, m/s
        orientation: float, radians
        rotation: float, rad/s
    """

    position: Vector2D
    velocity: Vector2D
    orientation: float
    rotation: float

    @property
    def forward(self) -> Vector2D:
        """Unit vector along the current orientation."""
        return Vector2D.from_angle(self.orientation)

    @property
    def speed(self) -> float:
        """Magnitude of the velocity (m/s)."""
        return self.velocity.magnitude

    def at_time(self, t: float) -> Vector2D:
        """
        Linearly extrapolated position after t seconds.

        Ignores acceleration, so only meaningful over short horizons.
        """
        return self.position + self.velocity * t

    def lead_time(self, cannon: Vector2D, projectile_speed: float) -> Optional[float]:
        """
        Flight time for a projectile fired from cannon to hit this body.

        Args:
            cannon: Launch position (meters)
            projectile_speed: Projectile speed (m/s)

        Returns:
            Smallest positive intercept time in seconds, or None if the
            projectile can never reach this body
        """
        return intercept_time(self.position, self.velocity, cannon, projectile_speed)

    def lead_position(self, cannon: Vector2D, projectile_speed: float) -> Optional[Vector2D]:
        """Intercept point for a projectile fired from cannon, or None."""
        t = self.lead_time(cannon, projectile_speed)
        if t is None:
            return None
        return self.at_time(t)


# =============================================================================
# STATE SNAPSHOTS
# =============================================================================

@dataclass
class KinematicState(Kinematic):
    """
    Snapshot of a body's kinematic readings for one tick.

    Attributes:
        position: World position (meters)
        velocity: World velocity (m/s)
        orientation: Heading (radians)
        rotation: Angular velocity (rad/s, counter-clockwise positive)
    """
    position: Vector2D = field(default_factory=Vector2D.zero)
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    orientation: float = 0.0
    rotation: float = 0.0


@dataclass
class MotorState(KinematicState):
    """
    Kinematic snapshot of a ship that can actuate.

    Attributes:
        max_linear_acceleration: Hard cap on linear acceleration (m/s^2)
        max_angular_acceleration: Hard cap on angular acceleration (rad/s^2)
        config: Braking thresholds and control horizon
    """
    max_linear_acceleration: float = 0.0
    max_angular_acceleration: float = 0.0
    config: MotorConfig = field(default_factory=MotorConfig)

    def __post_init__(self):
        if self.max_linear_acceleration < 0:
            raise ValueError("max_linear_acceleration must be non-negative")
        if self.max_angular_acceleration < 0:
            raise ValueError("max_angular_acceleration must be non-negative")

    @property
    def slow_radius(self) -> float:
        """Distance inside which Arrive starts braking (meters)."""
        return self.config.slow_radius

    @property
    def stop_radius(self) -> float:
        """Distance inside which Arrive stops commanding (meters)."""
        return self.config.stop_radius

    @property
    def slow_angle(self) -> float:
        """Heading error inside which Align starts braking (radians)."""
        return self.config.slow_angle

    @property
    def stop_angle(self) -> float:
        """Heading error inside which Align stops commanding (radians)."""
        return self.config.stop_angle

    @property
    def control_horizon(self) -> float:
        """Time over which a velocity change is converted to acceleration (s)."""
        return self.config.control_horizon

    @property
    def max_speed(self) -> float:
        """Top speed Arrive ramps toward (m/s)."""
        if self.config.max_speed is None:
            return self.max_linear_acceleration
        return self.config.max_speed
