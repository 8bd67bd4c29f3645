#!/usr/bin/env python3
"""
Steering Maneuvers for the Helm Steering Engine.

Each maneuver is a policy that looks at a ship's motor state once per tick
and returns the acceleration it wants applied:

- Linear maneuvers: Seek, Flee, Arrive, MatchVelocity
- Rotation maneuvers: Align, Face, FaceForward
- Predictive maneuvers: Pursue, Evade
- Stateful maneuvers: Wander (keeps its heading drift between ticks)
- MovementBlend: weighted sum of any of the above

A maneuver may abstain by returning None. Abstaining means "nothing to
command this tick" (already arrived, already aligned, no usable direction)
and is different from commanding zero: inside a blend the other maneuvers
keep steering, and a caller driving the host directly should hold its
previous actuation.
"""

from __future__ import annotations

import logging
import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .config import WanderConfig
from .kinematics import Kinematic, MotorState
from .physics import Vector2D, angle_diff, normalize_angle

logger = logging.getLogger(__name__)


# =============================================================================
# MANEUVER OUTPUT
# =============================================================================

@dataclass
class MovementOutput:
    """
    Desired actuation for one tick.

    Attributes:
        linear: Linear acceleration (m/s^2, world frame)
        angular: Angular acceleration (rad/s^2, counter-clockwise positive)
    """
    linear: Vector2D = field(default_factory=Vector2D.zero)
    angular: float = 0.0

    def __add__(self, other: MovementOutput) -> MovementOutput:
        return MovementOutput(self.linear + other.linear, self.angular + other.angular)

    def scaled(self, weight: float) -> MovementOutput:
        """Both components multiplied by weight."""
        return MovementOutput(self.linear * weight, self.angular * weight)

    def clamped(self, max_linear: float, max_angular: float) -> MovementOutput:
        """
        Limit each component to the given magnitude.

        Maneuvers never call this themselves; it is offered to callers that
        want blended output kept inside the ship's actuation limits.
        """
        return MovementOutput(
            self.linear.clamped(max_linear),
            max(-max_angular, min(max_angular, self.angular))
        )

    @classmethod
    def zero(cls) -> MovementOutput:
        """No acceleration on either axis."""
        return cls(Vector2D.zero(), 0.0)


# =============================================================================
# BASE MANEUVER CLASS
# =============================================================================

class MovementStrategy(ABC):
    """
    Abstract base class for all maneuvers.

    Maneuvers are cheap to construct and may be rebuilt every tick, except
    for those that carry memory between ticks (Wander), which the caller
    must keep and reuse.
    """

    @abstractmethod
    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        """
        Compute the desired acceleration for this tick.

        Args:
            motor: Current motor state of the ship

        Returns:
            MovementOutput, or None when the maneuver abstains
        """
        ...


# =============================================================================
# LINEAR MANEUVERS
# =============================================================================

@dataclass
class Seek(MovementStrategy):
    """Full linear acceleration straight at a fixed point."""
    target: Vector2D

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        direction = self.target - motor.position
        if direction.is_zero:
            logger.debug("Seek: already at target %s", self.target)
            return None
        return MovementOutput(direction.normalized() * motor.max_linear_acceleration, 0.0)


@dataclass
class Flee(MovementStrategy):
    """Full linear acceleration straight away from a fixed point."""
    target: Vector2D

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        direction = motor.position - self.target
        if direction.is_zero:
            logger.debug("Flee: no direction away from %s", self.target)
            return None
        return MovementOutput(direction.normalized() * motor.max_linear_acceleration, 0.0)


@dataclass
class Arrive(MovementStrategy):
    """
    Approach a point and brake smoothly onto it.

    Beyond the motor's slow radius the desired speed is the motor's max
    speed. Inside it the desired speed falls off linearly with distance.
    Inside the stop radius the maneuver abstains.
    """
    target: Vector2D

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        direction = self.target - motor.position
        distance = direction.magnitude

        if distance <= motor.stop_radius:
            logger.debug("Arrive: within stop radius (%.2f m)", distance)
            return None

        if distance <= motor.slow_radius:
            desired_speed = motor.max_speed * distance / motor.slow_radius
        else:
            desired_speed = motor.max_speed

        desired_velocity = direction.normalized() * desired_speed
        delta_velocity = desired_velocity - motor.velocity
        return MovementOutput(delta_velocity / motor.control_horizon, 0.0)


@dataclass
class MatchVelocity(MovementStrategy):
    """Accelerate to match a target velocity within one control horizon."""
    target: Vector2D

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        return MovementOutput((self.target - motor.velocity) / motor.control_horizon, 0.0)


# =============================================================================
# ROTATION MANEUVERS
# =============================================================================

@dataclass
class Align(MovementStrategy):
    """
    Rotate onto a target heading.

    The desired turn rate is the max angular acceleration beyond the slow
    angle, ramps down linearly inside it, and the maneuver abstains once the
    heading error is within the stop angle. Direction follows the shortest
    way round.
    """
    target: float  # heading, radians

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        error = angle_diff(motor.orientation, self.target)
        error_size = abs(error)

        if error_size <= motor.stop_angle:
            logger.debug("Align: heading error %.4f rad within stop angle", error)
            return None

        if error_size < motor.slow_angle:
            magnitude = motor.max_angular_acceleration * error_size / motor.slow_angle
        else:
            magnitude = motor.max_angular_acceleration

        target_rotation = math.copysign(magnitude, error)
        delta_rotation = target_rotation - motor.rotation
        return MovementOutput(Vector2D.zero(), delta_rotation / motor.control_horizon)


@dataclass
class Face(MovementStrategy):
    """Turn the nose toward a point."""
    target: Vector2D

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        direction = self.target - motor.position
        if direction.is_zero:
            logger.debug("Face: target coincides with ship position")
            return None
        return Align(direction.angle()).execute(motor)


@dataclass
class FaceForward(MovementStrategy):
    """Turn the nose along the current velocity (coasting orientation)."""

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        if motor.velocity.is_zero:
            return None
        return Align(motor.velocity.angle()).execute(motor)


# =============================================================================
# PREDICTIVE MANEUVERS
# =============================================================================

def prediction_time(motor: Kinematic, target: Kinematic, max_prediction: float) -> float:
    """
    How far ahead to extrapolate a moving target.

    Uses the time the ship would need to cover the current range at its
    current speed, capped at max_prediction when the ship is too slow to
    close within that horizon.

    Args:
        motor: The pursuing or evading ship
        target: The body being tracked
        max_prediction: Upper bound on the prediction (seconds)

    Returns:
        Prediction horizon in seconds

    Raises:
        ValueError: If max_prediction is not positive
    """
    if max_prediction <= 0:
        raise ValueError("max_prediction must be positive")
    distance = (target.position - motor.position).magnitude
    speed = motor.speed
    if speed <= distance / max_prediction:
        return max_prediction
    return distance / speed


@dataclass
class Pursue(MovementStrategy):
    """Seek the point where a moving target is predicted to be."""
    target: Kinematic
    max_prediction: float = 1.0  # seconds

    def __post_init__(self):
        if self.max_prediction <= 0:
            raise ValueError("max_prediction must be positive")

    def predicted_position(self, motor: MotorState) -> Vector2D:
        """Target position extrapolated over the prediction horizon."""
        return self.target.at_time(prediction_time(motor, self.target, self.max_prediction))

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        return Seek(self.predicted_position(motor)).execute(motor)


@dataclass
class Evade(Pursue):
    """Flee from the point where a moving target is predicted to be."""

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        return Flee(self.predicted_position(motor)).execute(motor)


# =============================================================================
# STATEFUL MANEUVERS
# =============================================================================

@dataclass
class Wander(MovementStrategy):
    """
    Drift aimlessly by chasing a point on a circle projected ahead.

    Every tick the point's angle on the circle drifts by a random amount of
    at most rate * control_horizon. The ship turns toward the point (Face)
    and accelerates toward it (Seek). Keep the same instance across ticks:
    the drifted angle is what makes the path smooth.

    Attributes:
        radius: Radius of the wander circle (meters)
        offset: Distance of the circle center ahead of the ship (meters)
        rate: Max drift of the wander angle (rad/s)
        orientation: Current wander angle relative to the ship's heading
        rng: Random source for the drift
    """
    radius: float = 50.0
    offset: float = 100.0
    rate: float = math.radians(180.0)
    orientation: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    last_target: Optional[Vector2D] = field(default=None, init=False)

    @classmethod
    def from_config(cls, config: WanderConfig, rng: Optional[random.Random] = None) -> Wander:
        """Create a Wander from its configuration section."""
        return cls(
            radius=config.radius,
            offset=config.offset,
            rate=config.rate,
            rng=rng if rng is not None else random.Random(),
        )

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        drift = self.rng.uniform(-1.0, 1.0) * self.rate * motor.control_horizon
        self.orientation = normalize_angle(self.orientation + drift)

        circle_center = motor.position + motor.forward * self.offset
        target = circle_center + Vector2D.from_angle(
            motor.orientation + self.orientation, self.radius
        )
        self.last_target = target

        facing = Face(target).execute(motor) or MovementOutput.zero()
        seeking = Seek(target).execute(motor) or MovementOutput.zero()
        return MovementOutput(seeking.linear, facing.angular)


# =============================================================================
# BLENDING
# =============================================================================

@dataclass
class MovementBlend(MovementStrategy):
    """
    Weighted sum of several maneuvers.

    Children run in list order. Each output is multiplied by its weight and
    the results are summed; abstaining children contribute nothing. The sum
    is neither renormalized by total weight nor clamped to the ship's
    limits (see MovementOutput.clamped). The blend abstains only when every
    child abstains.
    """
    moves: list[tuple[MovementStrategy, float]] = field(default_factory=list)

    def add(self, strategy: MovementStrategy, weight: float = 1.0) -> MovementBlend:
        """Append a maneuver with its weight; returns self for chaining."""
        self.moves.append((strategy, weight))
        return self

    def execute(self, motor: MotorState) -> Optional[MovementOutput]:
        total: Optional[MovementOutput] = None
        for strategy, weight in self.moves:
            output = strategy.execute(motor)
            if output is None:
                continue
            weighted = output.scaled(weight)
            total = weighted if total is None else total + weighted

        if total is None:
            logger.debug("MovementBlend: all %d maneuvers abstained", len(self.moves))
        return total
