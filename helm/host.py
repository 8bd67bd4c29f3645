"""
Boundary between the helm and the host simulation.

The host exposes per-tick sensor readouts and actuation calls. These
protocols describe what the helm needs from it; any object with matching
methods will do. The helpers here turn readouts into fresh MotorState /
KinematicState views and hand maneuver output back to the actuators.
"""

from __future__ import annotations

from typing import Optional, Protocol

from .config import MotorConfig
from .kinematics import KinematicState, MotorState
from .maneuvers import MovementOutput
from .physics import Vector2D


class ShipSensors(Protocol):
    """Per-tick readouts for the ship being steered."""

    def position(self) -> Vector2D:
        ...

    def velocity(self) -> Vector2D:
        ...

    def heading(self) -> float:
        ...

    def angular_velocity(self) -> float:
        ...

    def max_forward_acceleration(self) -> float:
        ...

    def max_backward_acceleration(self) -> float:
        ...

    def max_lateral_acceleration(self) -> float:
        ...

    def max_angular_acceleration(self) -> float:
        ...


class TargetSensors(Protocol):
    """Per-tick radar readouts for a tracked target."""

    def target(self) -> Vector2D:
        ...

    def target_velocity(self) -> Vector2D:
        ...


class ShipActuators(Protocol):
    """Actuation calls accepted by the host."""

    def accelerate(self, acceleration: Vector2D) -> None:
        ...

    def torque(self, angular_acceleration: float) -> None:
        ...

    def fire(self, index: int) -> None:
        ...


def max_linear_acceleration(sensors: ShipSensors) -> float:
    """Largest of the forward, backward and lateral acceleration limits."""
    return max(
        sensors.max_forward_acceleration(),
        sensors.max_backward_acceleration(),
        sensors.max_lateral_acceleration(),
    )


def ship_state(sensors: ShipSensors, config: Optional[MotorConfig] = None) -> MotorState:
    """
    Snapshot the steered ship for this tick.

    Args:
        sensors: Host readouts for the ship
        config: Braking thresholds; defaults to MotorConfig()

    Returns:
        MotorState built from the current readouts
    """
    return MotorState(
        position=sensors.position(),
        velocity=sensors.velocity(),
        orientation=sensors.heading(),
        rotation=sensors.angular_velocity(),
        max_linear_acceleration=max_linear_acceleration(sensors),
        max_angular_acceleration=sensors.max_angular_acceleration(),
        config=config if config is not None else MotorConfig(),
    )


def target_state(sensors: TargetSensors) -> KinematicState:
    """
    Snapshot a radar-tracked target for this tick.

    Radar gives no attitude, so orientation and rotation are zero.
    """
    return KinematicState(
        position=sensors.target(),
        velocity=sensors.target_velocity(),
        orientation=0.0,
        rotation=0.0,
    )


def apply_output(actuators: ShipActuators, output: Optional[MovementOutput]) -> bool:
    """
    Hand maneuver output to the host.

    An abstention issues no calls, so the host keeps its previous commands.

    Returns:
        True if accelerate/torque were called
    """
    if output is None:
        return False
    actuators.accelerate(output.linear)
    actuators.torque(output.angular)
    return True
