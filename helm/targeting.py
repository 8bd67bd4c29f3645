#!/usr/bin/env python3
"""
Intercept Solver for the Helm Steering Engine.

Kinetic weapons must aim ahead of a moving target to account for projectile
travel time. This module solves the constant-velocity intercept problem
exactly, with a single quadratic solver shared by every caller:

    |p + v*t - cannon| = s*t

    (|v|^2 - s^2) * t^2 + 2 * v.(p - cannon) * t + |p - cannon|^2 = 0

where p and v are the target's position and velocity and s is the
projectile speed.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .physics import Vector2D

logger = logging.getLogger(__name__)


# =============================================================================
# QUADRATIC SOLVER
# =============================================================================

def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """
    Real roots of a*t^2 + b*t + c = 0.

    Uses the cancellation-free form q = -(b + sign(b)*sqrt(disc)) / 2 so
    that neither root loses precision when b^2 dominates 4ac. When a is
    zero the equation is solved as the linear b*t + c = 0.

    Args:
        a: Quadratic coefficient
        b: Linear coefficient
        c: Constant coefficient

    Returns:
        Tuple of real roots (empty when there are none, one root for the
        linear case or a repeated root, otherwise two roots in no
        particular order)
    """
    if a == 0.0:
        if b == 0.0:
            return ()
        return (-c / b,)

    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return ()
    if disc == 0.0:
        return (-b / (2.0 * a),)

    sqrt_disc = math.sqrt(disc)
    # |q| >= sqrt_disc / 2 > 0, so c / q is safe
    q = -0.5 * (b + math.copysign(sqrt_disc, b))
    return (q / a, c / q)


def smallest_positive_root(a: float, b: float, c: float) -> Optional[float]:
    """
    Smallest strictly positive root of a*t^2 + b*t + c = 0.

    Returns:
        The root, or None if the discriminant is negative or no root is
        positive
    """
    positive = [t for t in solve_quadratic(a, b, c) if t > 0.0]
    if not positive:
        return None
    return min(positive)


# =============================================================================
# INTERCEPT
# =============================================================================

def intercept_time(
    target_position: Vector2D,
    target_velocity: Vector2D,
    cannon_position: Vector2D,
    projectile_speed: float
) -> Optional[float]:
    """
    Time at which a projectile fired now meets a constant-velocity target.

    Args:
        target_position: Target position (meters)
        target_velocity: Target velocity (m/s)
        cannon_position: Launch point (meters)
        projectile_speed: Projectile speed (m/s)

    Returns:
        Flight time in seconds, or None when no positive-time intercept
        exists (target outruns the projectile)
    """
    offset = target_position - cannon_position
    a = target_velocity.magnitude_squared - projectile_speed**2
    b = 2.0 * target_velocity.dot(offset)
    c = offset.magnitude_squared

    t = smallest_positive_root(a, b, c)
    if t is None:
        logger.debug(
            "no intercept: range %.1f m, target speed %.1f m/s, projectile %.1f m/s",
            math.sqrt(c), target_velocity.magnitude, projectile_speed
        )
    return t


def intercept_position(
    target_position: Vector2D,
    target_velocity: Vector2D,
    cannon_position: Vector2D,
    projectile_speed: float
) -> Optional[Vector2D]:
    """Point where the projectile meets the target, or None."""
    t = intercept_time(target_position, target_velocity, cannon_position, projectile_speed)
    if t is None:
        return None
    return target_position + target_velocity * t
