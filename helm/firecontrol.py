#!/usr/bin/env python3
"""
Fire Control for the Helm Steering Engine.

This module implements:
- Aim point selection (lead position, falling back to the target's
  current position when no intercept exists)
- Bearing error between the ship's nose and the aim point
- A firing solution telling the control loop whether the gun is on target

Whether to actually pull the trigger is left to the ship's control loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import FireControlConfig
from .kinematics import Kinematic
from .maneuvers import Face
from .physics import Vector2D, angle_diff

logger = logging.getLogger(__name__)


def aim_point(target: Kinematic, cannon: Vector2D, projectile_speed: float) -> Vector2D:
    """
    Point to aim at to hit a moving target.

    Args:
        target: Kinematic view of the target
        cannon: Launch position (meters)
        projectile_speed: Projectile speed (m/s)

    Returns:
        The lead position, or the target's current position when the
        projectile cannot intercept it
    """
    return _aim_from_lead(target, target.lead_time(cannon, projectile_speed))


def _aim_from_lead(target: Kinematic, lead_time: Optional[float]) -> Vector2D:
    if lead_time is None:
        return target.position
    return target.at_time(lead_time)


def bearing_error(shooter: Kinematic, point: Vector2D) -> float:
    """
    Signed angle from the shooter's heading to the bearing of point.

    Returns:
        Angle in (-pi, pi] radians; 0 when point is at the shooter's position
    """
    direction = point - shooter.position
    if direction.is_zero:
        return 0.0
    return angle_diff(shooter.orientation, direction.angle())


@dataclass
class FiringSolution:
    """
    Firing solution for the main gun against one target.

    Attributes:
        aim_point: Where to point the nose (meters)
        lead_time_s: Projectile flight time, None when no intercept exists
        bearing_error: Signed heading error to the aim point (radians)
        in_arc: Whether the bearing error is within the firing arc
    """
    aim_point: Vector2D
    lead_time_s: Optional[float]
    bearing_error: float
    in_arc: bool

    @property
    def has_intercept(self) -> bool:
        """True if the aim point is a real intercept rather than a fallback."""
        return self.lead_time_s is not None


@dataclass
class FireControl:
    """
    Computes firing solutions and the matching Face maneuver.

    Attributes:
        config: Projectile speed and firing arc
    """
    config: FireControlConfig = field(default_factory=FireControlConfig)

    def solve(self, shooter: Kinematic, target: Kinematic) -> FiringSolution:
        """
        Compute the firing solution for this tick.

        Args:
            shooter: Kinematic view of the firing ship (its position is the cannon)
            target: Kinematic view of the target

        Returns:
            FiringSolution
        """
        speed = self.config.projectile_speed
        lead_time = target.lead_time(shooter.position, speed)
        point = _aim_from_lead(target, lead_time)
        error = bearing_error(shooter, point)
        in_arc = abs(error) <= self.config.firing_arc

        if lead_time is None:
            logger.debug("no lead solution, aiming at target position %s", point)
        logger.debug("bearing error %.4f rad, in arc: %s", error, in_arc)

        return FiringSolution(
            aim_point=point,
            lead_time_s=lead_time,
            bearing_error=error,
            in_arc=in_arc,
        )

    def aim(self, shooter: Kinematic, target: Kinematic) -> Face:
        """Face maneuver pointing the nose at the current aim point."""
        return Face(self.solve(shooter, target).aim_point)
