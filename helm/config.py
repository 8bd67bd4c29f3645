"""
Tuning configuration for ships driven by the helm.

Braking thresholds, control horizon, wander parameters and fire-control
settings are plain dataclasses with the defaults a ship uses out of the
box. A whole set can be loaded from a JSON file:

    {
        "motor": {"slow_radius": 150.0, "stop_angle_deg": 1.0},
        "wander": {"radius": 40.0},
        "fire_control": {"projectile_speed": 1000.0}
    }

Missing sections and keys keep their defaults.
"""

import json
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .physics import TICK_LENGTH_S


def _reject_unknown(cls, data: Dict[str, Any], allowed: set) -> None:
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}")


def _require_mapping(cls, data: Any) -> None:
    if not isinstance(data, Mapping):
        raise ValueError(
            f"{cls.__name__} section must be a JSON object, got {type(data).__name__}"
        )


def _number(cls, key: str, value: Any) -> float:
    """Numeric config value as a float; booleans and strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{cls.__name__} {key} must be a number, got {value!r}")
    return float(value)


def _parse_numbers(cls, data: Mapping[str, Any], optional: tuple = ()) -> Dict[str, Any]:
    """Check keys against the dataclass fields and convert values to float."""
    _reject_unknown(cls, data, {f.name for f in fields(cls)})
    parsed = {}
    for key, value in data.items():
        if value is None and key in optional:
            parsed[key] = None
        else:
            parsed[key] = _number(cls, key, value)
    return parsed


@dataclass
class MotorConfig:
    """Braking thresholds and control horizon for a motor-capable ship."""
    slow_radius: float = 100.0  # meters
    stop_radius: float = 25.0  # meters
    slow_angle: float = math.radians(90.0)
    stop_angle: float = math.radians(0.5)
    control_horizon: float = TICK_LENGTH_S  # seconds
    # Top speed Arrive ramps toward; None uses the max linear acceleration
    max_speed: Optional[float] = None

    def __post_init__(self):
        if self.stop_radius < 0:
            raise ValueError("stop_radius must be non-negative")
        if self.slow_radius <= self.stop_radius:
            raise ValueError("slow_radius must be greater than stop_radius")
        if self.stop_angle < 0:
            raise ValueError("stop_angle must be non-negative")
        if self.slow_angle <= self.stop_angle:
            raise ValueError("slow_angle must be greater than stop_angle")
        if self.control_horizon <= 0:
            raise ValueError("control_horizon must be positive")
        if self.max_speed is not None and self.max_speed <= 0:
            raise ValueError("max_speed must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MotorConfig":
        """
        Build a MotorConfig from a dictionary.

        Angles may be given in radians (slow_angle, stop_angle) or in
        degrees (slow_angle_deg, stop_angle_deg).
        """
        _require_mapping(cls, data)
        data = dict(data)
        for name in ("slow_angle", "stop_angle"):
            degrees = data.pop(f"{name}_deg", None)
            if degrees is not None:
                if name in data:
                    raise ValueError(f"Give either {name} or {name}_deg, not both")
                data[name] = math.radians(_number(cls, f"{name}_deg", degrees))
        return cls(**_parse_numbers(cls, data, optional=("max_speed",)))


@dataclass
class WanderConfig:
    """Geometry of the wander circle projected ahead of the ship."""
    radius: float = 50.0  # meters
    offset: float = 100.0  # meters ahead of the ship
    rate: float = math.radians(180.0)  # max heading drift, rad/s

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError("Wander radius must be positive")
        if self.rate < 0:
            raise ValueError("Wander rate must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WanderConfig":
        _require_mapping(cls, data)
        return cls(**_parse_numbers(cls, data))


@dataclass
class FireControlConfig:
    """Projectile and trigger settings for the main gun."""
    projectile_speed: float = 925.0  # m/s
    firing_arc_deg: float = 2.0  # max bearing error to fire

    def __post_init__(self):
        if self.projectile_speed <= 0:
            raise ValueError("projectile_speed must be positive")
        if self.firing_arc_deg < 0:
            raise ValueError("firing_arc_deg must be non-negative")

    @property
    def firing_arc(self) -> float:
        """Firing arc in radians."""
        return math.radians(self.firing_arc_deg)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FireControlConfig":
        _require_mapping(cls, data)
        return cls(**_parse_numbers(cls, data))


@dataclass
class HelmConfig:
    """Complete helm configuration for one ship."""
    motor: MotorConfig = field(default_factory=MotorConfig)
    wander: WanderConfig = field(default_factory=WanderConfig)
    fire_control: FireControlConfig = field(default_factory=FireControlConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HelmConfig":
        """Create from a dictionary with optional motor/wander/fire_control sections."""
        _require_mapping(cls, data)
        _reject_unknown(cls, data, {"motor", "wander", "fire_control"})
        return cls(
            motor=MotorConfig.from_dict(data.get("motor", {})),
            wander=WanderConfig.from_dict(data.get("wander", {})),
            fire_control=FireControlConfig.from_dict(data.get("fire_control", {})),
        )


def load_helm_config(filepath: str | Path) -> HelmConfig:
    """
    Load helm configuration from a JSON file.

    Args:
        filepath: Path to the JSON configuration file.

    Returns:
        HelmConfig with defaults for anything the file leaves out.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the file holds unknown keys or invalid values.
    """
    with open(filepath, "r") as f:
        return HelmConfig.from_dict(json.load(f))
