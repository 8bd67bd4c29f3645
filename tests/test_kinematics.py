#!/usr/bin/env python3
"""
Tests for kinematic and motor state views.

Tests:
- Derived queries: forward, speed, linear extrapolation
- Lead time / lead position against moving targets
- MotorState validation and braking-threshold accessors
- Custom Kinematic implementations built on properties
"""

import math
import pytest

from helm.config import MotorConfig
from helm.kinematics import Kinematic, KinematicState, MotorState
from helm.physics import TICK_LENGTH_S, Vector2D


class TestKinematicQueries:
    """Tests for derived kinematic queries."""

    @pytest.mark.parametrize("orientation,expected", [
        (0.0, (1.0, 0.0)),
        (math.pi / 2, (0.0, 1.0)),
        (math.pi, (-1.0, 0.0)),
        (-math.pi / 2, (0.0, -1.0)),
    ])
    def test_forward(self, orientation, expected):
        state = KinematicState(orientation=orientation)
        assert state.forward == Vector2D(*expected)

    def test_speed(self):
        assert KinematicState(velocity=Vector2D(3, -4)).speed == pytest.approx(5.0)

    def test_at_time_extrapolates_linearly(self):
        state = KinematicState(position=Vector2D(10, 20), velocity=Vector2D(1, -2))
        assert state.at_time(0.0) == Vector2D(10, 20)
        assert state.at_time(5.0) == Vector2D(15, 10)

    def test_defaults(self):
        state = KinematicState()
        assert state.position == Vector2D.zero()
        assert state.velocity == Vector2D.zero()
        assert state.orientation == 0.0
        assert state.rotation == 0.0


class TestLead:
    """Tests for lead time and lead position."""

    def test_lead_time_stationary(self):
        target = KinematicState(position=Vector2D(0, 925 * 2))
        assert target.lead_time(Vector2D.zero(), 925.0) == pytest.approx(2.0)

    def test_lead_position_crossing(self):
        target = KinematicState(position=Vector2D(0, 800), velocity=Vector2D(60, 0))
        assert target.lead_position(Vector2D.zero(), 100.0) == Vector2D(600, 800)

    def test_lead_absent_for_receding_faster_target(self):
        target = KinematicState(position=Vector2D(1000, 0), velocity=Vector2D(1000, 0))
        assert target.lead_time(Vector2D.zero(), 925.0) is None
        assert target.lead_position(Vector2D.zero(), 925.0) is None

    @pytest.mark.parametrize("position,velocity,cannon,speed", [
        ((1000, 500), (-30, 80), (0, 0), 925.0),
        ((-2000, 300), (200, -10), (50, -50), 500.0),
        ((0, 100), (0, 0), (0, 0), 10.0),
        ((700, -700), (100, 100), (100, 0), 450.0),
    ])
    def test_lead_round_trip(self, position, velocity, cannon, speed):
        """The lead position is exactly speed * lead_time away from the cannon."""
        target = KinematicState(position=Vector2D(*position), velocity=Vector2D(*velocity))
        cannon = Vector2D(*cannon)
        t = target.lead_time(cannon, speed)
        assert t is not None
        assert target.at_time(t).distance_to(cannon) == pytest.approx(speed * t)


class PropertyKinematic(Kinematic):
    """Kinematic backed by properties, as a host adapter would be."""

    def __init__(self, readings):
        self._readings = readings

    @property
    def position(self):
        return Vector2D(*self._readings["position"])

    @property
    def velocity(self):
        return Vector2D(*self._readings["velocity"])

    @property
    def orientation(self):
        return self._readings["heading"]

    @property
    def rotation(self):
        return 0.0


class TestCustomKinematic:
    """Derived queries work for any object providing the four readings."""

    def test_property_backed_kinematic(self):
        body = PropertyKinematic({"position": (0, 0), "velocity": (10, 0), "heading": math.pi})
        assert body.speed == pytest.approx(10.0)
        assert body.forward == Vector2D(-1, 0)
        assert body.at_time(2.0) == Vector2D(20, 0)

    def test_readings_are_live(self):
        readings = {"position": (0, 0), "velocity": (0, 0), "heading": 0.0}
        body = PropertyKinematic(readings)
        readings["position"] = (5, 5)
        assert body.position == Vector2D(5, 5)


class TestMotorState:
    """Tests for MotorState."""

    def test_default_thresholds(self):
        motor = MotorState(max_linear_acceleration=10.0, max_angular_acceleration=1.0)
        assert motor.slow_radius == 100.0
        assert motor.stop_radius == 25.0
        assert motor.slow_angle == pytest.approx(math.pi / 2)
        assert motor.stop_angle == pytest.approx(math.radians(0.5))
        assert motor.control_horizon == pytest.approx(TICK_LENGTH_S)

    def test_thresholds_come_from_config(self):
        config = MotorConfig(slow_radius=300.0, stop_radius=10.0, control_horizon=0.5)
        motor = MotorState(max_linear_acceleration=10.0, config=config)
        assert motor.slow_radius == 300.0
        assert motor.stop_radius == 10.0
        assert motor.control_horizon == 0.5

    def test_max_speed_falls_back_to_max_linear_acceleration(self):
        motor = MotorState(max_linear_acceleration=42.0)
        assert motor.max_speed == 42.0

    def test_max_speed_from_config(self):
        motor = MotorState(max_linear_acceleration=42.0, config=MotorConfig(max_speed=300.0))
        assert motor.max_speed == 300.0

    @pytest.mark.parametrize("linear,angular", [(-1.0, 1.0), (1.0, -0.1)])
    def test_negative_limits_rejected(self, linear, angular):
        with pytest.raises(ValueError):
            MotorState(max_linear_acceleration=linear, max_angular_acceleration=angular)

    def test_motor_is_kinematic(self):
        motor = MotorState(position=Vector2D(1, 2), velocity=Vector2D(3, 4))
        assert isinstance(motor, Kinematic)
        assert motor.speed == pytest.approx(5.0)
