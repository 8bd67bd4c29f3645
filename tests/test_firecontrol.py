#!/usr/bin/env python3
"""
Tests for fire control.

Tests:
- Aim point selection with and without an intercept
- Bearing error sign and wrap-around
- FiringSolution and firing arc
- The Face maneuver returned by FireControl.aim
"""

import logging
import math
import pytest

from helm.config import FireControlConfig
from helm.firecontrol import FireControl, FiringSolution, aim_point, bearing_error
from helm.kinematics import KinematicState, MotorState
from helm.maneuvers import Face
from helm.physics import Vector2D


@pytest.fixture
def fire_control():
    """Slow projectile so crossing geometry stays round."""
    return FireControl(FireControlConfig(projectile_speed=100.0, firing_arc_deg=2.0))


@pytest.fixture
def crossing_target():
    """800 m north, crossing east at 60 m/s: intercept at (600, 800) after 10 s."""
    return KinematicState(position=Vector2D(0, 800), velocity=Vector2D(60, 0))


class TestAimPoint:
    """Tests for aim_point."""

    def test_leads_moving_target(self, crossing_target):
        assert aim_point(crossing_target, Vector2D.zero(), 100.0) == Vector2D(600, 800)

    def test_stationary_target_is_its_own_aim_point(self):
        target = KinematicState(position=Vector2D(-300, 400))
        assert aim_point(target, Vector2D.zero(), 925.0) == Vector2D(-300, 400)

    def test_falls_back_to_current_position(self):
        target = KinematicState(position=Vector2D(500, 0), velocity=Vector2D(2000, 0))
        assert aim_point(target, Vector2D.zero(), 925.0) == Vector2D(500, 0)


class TestBearingError:
    """Tests for bearing_error."""

    @pytest.mark.parametrize("heading,point,expected", [
        (0.0, (100, 0), 0.0),
        (0.0, (0, 100), math.pi / 2),
        (0.0, (0, -100), -math.pi / 2),
        (math.pi / 2, (100, 0), -math.pi / 2),
        (math.radians(170), (-100, -math.tan(math.radians(10)) * 100), math.radians(20)),
    ])
    def test_signed_error(self, heading, point, expected):
        shooter = KinematicState(orientation=heading)
        assert bearing_error(shooter, Vector2D(*point)) == pytest.approx(expected)

    def test_coincident_point_has_no_error(self):
        shooter = KinematicState(position=Vector2D(5, 5), orientation=1.0)
        assert bearing_error(shooter, Vector2D(5, 5)) == 0.0


class TestFireControl:
    """Tests for FireControl.solve and FireControl.aim."""

    def test_default_config(self):
        assert FireControl().config == FireControlConfig()

    def test_solution_off_arc(self, fire_control, crossing_target):
        shooter = MotorState(orientation=0.0)
        solution = fire_control.solve(shooter, crossing_target)

        assert isinstance(solution, FiringSolution)
        assert solution.has_intercept
        assert solution.lead_time_s == pytest.approx(10.0)
        assert solution.aim_point == Vector2D(600, 800)
        assert solution.bearing_error == pytest.approx(math.atan2(800, 600))
        assert not solution.in_arc

    def test_solution_on_arc(self, fire_control, crossing_target):
        shooter = MotorState(orientation=math.atan2(800, 600) + math.radians(1.5))
        solution = fire_control.solve(shooter, crossing_target)
        assert solution.bearing_error == pytest.approx(-math.radians(1.5))
        assert solution.in_arc

    def test_arc_edge_is_inclusive(self):
        fire_control = FireControl(FireControlConfig(firing_arc_deg=0.0))
        target = KinematicState(position=Vector2D(1000, 0))
        assert fire_control.solve(KinematicState(), target).in_arc

    def test_no_intercept_aims_at_target(self, fire_control, caplog):
        target = KinematicState(position=Vector2D(0, 500), velocity=Vector2D(0, 150))
        with caplog.at_level(logging.DEBUG, logger="helm"):
            solution = fire_control.solve(KinematicState(), target)

        assert not solution.has_intercept
        assert solution.lead_time_s is None
        assert solution.aim_point == Vector2D(0, 500)
        assert "no lead solution" in caplog.text

    def test_aim_returns_face_at_aim_point(self, fire_control, crossing_target):
        shooter = MotorState(max_angular_acceleration=1.0)
        maneuver = fire_control.aim(shooter, crossing_target)
        assert isinstance(maneuver, Face)
        assert maneuver.target == Vector2D(600, 800)

        output = maneuver.execute(shooter)
        assert output is not None
        assert output.angular > 0

    @pytest.mark.parametrize("position,velocity", [
        ((0, 800), (60, 0)),
        ((0, 500), (0, 150)),
        ((-300, 400), (0, 0)),
        ((2000, -100), (-40, 25)),
    ])
    def test_solution_agrees_with_aim_point(self, fire_control, position, velocity):
        """solve and aim_point pick the same point, intercept or fallback."""
        shooter = MotorState(position=Vector2D(10, -20))
        target = KinematicState(position=Vector2D(*position), velocity=Vector2D(*velocity))
        solution = fire_control.solve(shooter, target)
        assert solution.aim_point == aim_point(target, shooter.position, 100.0)
