"""
Recursive estimators for smoothing noisy scalar sensor readings.

Two filters are provided:
    - StaticEstimator: estimates a constant. Gain 1/n, so the estimate is
      the running mean of every measurement since construction.
    - DynamicEstimator: alpha-beta filter tracking a value and its rate of
      change, sampled at a fixed interval.

PositionTracker pairs two DynamicEstimators to smooth 2D position fixes.
Filters are owned by the caller, created when tracking of a signal starts
and updated in place every time a new measurement arrives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

import numpy as np

from .kinematics import KinematicState
from .physics import Vector2D


@dataclass
class StaticEstimator:
    """
    Converging-gain estimator for a constant quantity.

    The gain shrinks as 1/n, so each update weighs all past measurements
    equally. Late disturbances have less and less effect: right for a
    constant, slow to follow a quantity that changes.

    Attributes:
        estimate: Current estimate; the initial value is only a prior and
            is fully replaced by the first measurement
        sample_count: Measurements absorbed so far
    """
    estimate: float = 0.0
    sample_count: int = field(default=0, init=False)

    @property
    def gain(self) -> float:
        """Gain applied by the most recent update (0 before any update)."""
        if self.sample_count == 0:
            return 0.0
        return 1.0 / self.sample_count

    def predict(self) -> float:
        """Forecast of the next measurement. Constant model: the estimate."""
        return self.estimate

    def update(self, measurement: float) -> float:
        """
        Absorb one measurement.

        Args:
            measurement: New noisy reading

        Returns:
            Updated estimate
        """
        self.sample_count += 1
        self.estimate += self.gain * (measurement - self.estimate)
        return self.estimate


@dataclass
class DynamicEstimator:
    """
    Alpha-beta filter for a value changing at a roughly constant rate.

    Each update first predicts one sample interval ahead, then corrects
    the value by alpha times the residual and the rate by beta times the
    residual per second.

    Attributes:
        value: Current value estimate
        rate: Current rate-of-change estimate (units per second)
        interval: Fixed time between measurements (seconds)
        alpha: Value correction weight, in (0, 1)
        beta: Rate correction weight, in (0, 1)
    """
    value: float
    rate: float
    interval: float
    alpha: float = 0.2
    beta: float = 0.1

    def __post_init__(self):
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        for name in ("alpha", "beta"):
            weight = getattr(self, name)
            if not 0.0 < weight < 1.0:
                raise ValueError(f"{name} must be in (0, 1), got {weight}")

    def estimate(self) -> Tuple[float, float]:
        """Current (value, rate) estimate."""
        return (self.value, self.rate)

    def predict(self) -> Tuple[float, float]:
        """One-step-ahead forecast (value, rate); does not change the filter."""
        return (self.value + self.rate * self.interval, self.rate)

    def update(self, measurement: float) -> Tuple[float, float]:
        """
        Absorb one measurement taken one interval after the last.

        Args:
            measurement: New noisy reading of the value

        Returns:
            Updated (value, rate) estimate
        """
        predicted_value, predicted_rate = self.predict()
        residual = measurement - predicted_value
        self.value = predicted_value + self.alpha * residual
        self.rate = predicted_rate + self.beta * residual / self.interval
        return self.estimate()


Estimator = Union[StaticEstimator, DynamicEstimator]


def filter_series(estimator: Estimator, measurements: Iterable[float]) -> np.ndarray:
    """
    Run an estimator over a sequence of measurements.

    The estimator is updated in place, so it can keep tracking afterwards.

    Args:
        estimator: StaticEstimator or DynamicEstimator
        measurements: Readings in arrival order

    Returns:
        Post-update estimates, shape (n,) for a StaticEstimator and
        (n, 2) with columns (value, rate) for a DynamicEstimator
    """
    history = [estimator.update(float(m)) for m in measurements]
    if isinstance(estimator, DynamicEstimator):
        return np.asarray(history, dtype=float).reshape(-1, 2)
    return np.asarray(history, dtype=float)


@dataclass
class PositionTracker:
    """
    Smooths noisy 2D position fixes into a kinematic estimate.

    One DynamicEstimator per axis; the rate estimates form the velocity.
    Feed the resulting state to Pursue, Evade or fire control in place of
    raw radar readings.
    """
    x: DynamicEstimator
    y: DynamicEstimator

    @classmethod
    def start(
        cls,
        position: Vector2D,
        velocity: Vector2D,
        interval: float,
        alpha: float = 0.2,
        beta: float = 0.1
    ) -> PositionTracker:
        """Begin tracking from an initial position and velocity guess."""
        return cls(
            x=DynamicEstimator(position.x, velocity.x, interval, alpha, beta),
            y=DynamicEstimator(position.y, velocity.y, interval, alpha, beta),
        )

    def state(self) -> KinematicState:
        """Current smoothed estimate (attitude is not tracked)."""
        return KinematicState(
            position=Vector2D(self.x.value, self.y.value),
            velocity=Vector2D(self.x.rate, self.y.rate),
        )

    def predict(self) -> Vector2D:
        """Position expected at the next fix."""
        return Vector2D(self.x.predict()[0], self.y.predict()[0])

    def update(self, fix: Vector2D) -> KinematicState:
        """Absorb one position fix and return the new estimate."""
        self.x.update(fix.x)
        self.y.update(fix.y)
        return self.state()
