"""Helm: steering, intercept prediction and state estimation for simulated ships."""

import logging

from .physics import (
    TICK_LENGTH_S,
    Vector2D,
    angle_diff,
    normalize_angle,
)

from .targeting import (
    intercept_position,
    intercept_time,
    smallest_positive_root,
    solve_quadratic,
)

from .config import (
    FireControlConfig,
    HelmConfig,
    MotorConfig,
    WanderConfig,
    load_helm_config,
)

from .kinematics import (
    Kinematic,
    KinematicState,
    MotorState,
)

from .maneuvers import (
    # Output and base class
    MovementOutput,
    MovementStrategy,
    # Linear
    Seek,
    Flee,
    Arrive,
    MatchVelocity,
    # Rotation
    Align,
    Face,
    FaceForward,
    # Predictive
    Pursue,
    Evade,
    prediction_time,
    # Stateful and combinators
    Wander,
    MovementBlend,
)

from .perception import (
    DynamicEstimator,
    PositionTracker,
    StaticEstimator,
    filter_series,
)

from .firecontrol import (
    FireControl,
    FiringSolution,
    aim_point,
    bearing_error,
)

from .host import (
    ShipActuators,
    ShipSensors,
    TargetSensors,
    apply_output,
    max_linear_acceleration,
    ship_state,
    target_state,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Physics
    "TICK_LENGTH_S",
    "Vector2D",
    "angle_diff",
    "normalize_angle",
    # Targeting
    "intercept_position",
    "intercept_time",
    "smallest_positive_root",
    "solve_quadratic",
    # Config
    "FireControlConfig",
    "HelmConfig",
    "MotorConfig",
    "WanderConfig",
    "load_helm_config",
    # Kinematics
    "Kinematic",
    "KinematicState",
    "MotorState",
    # Maneuvers
    "MovementOutput",
    "MovementStrategy",
    "Seek",
    "Flee",
    "Arrive",
    "MatchVelocity",
    "Align",
    "Face",
    "FaceForward",
    "Pursue",
    "Evade",
    "prediction_time",
    "Wander",
    "MovementBlend",
    # Perception
    "DynamicEstimator",
    "PositionTracker",
    "StaticEstimator",
    "filter_series",
    # Fire control
    "FireControl",
    "FiringSolution",
    "aim_point",
    "bearing_error",
    # Host boundary
    "ShipActuators",
    "ShipSensors",
    "TargetSensors",
    "apply_output",
    "max_linear_acceleration",
    "ship_state",
    "target_state",
]
