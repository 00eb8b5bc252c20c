"""
Planner Configuration
Named, overridable constants of the journey planner.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict

from ev_journey_planner.charging.energy import MINIMUM_CHARGING_MINUTES, TAPER_START_PCT
from ev_journey_planner.errors import InvalidPlanInputError


@dataclass(frozen=True)
class PlannerConfig:
    """Thresholds used when deciding and sizing charging stops."""
    # Battery % kept in reserve above the bare need of the next leg
    safety_margin_pct: float = 10.0

    # Lookahead pass charges load-bearing stops to next leg + this buffer
    fast_charge_buffer_pct: float = 20.0

    # Required stops charge to at least this level
    target_charge_floor_pct: float = 80.0

    # Charging session durations (minutes)
    minimum_charging_minutes: int = MINIMUM_CHARGING_MINUTES
    default_charging_minutes: int = 30

    # Charge added at a required stop with no available connector
    default_charge_increment_pct: float = 30.0

    # First / final leg length when no route distance is known (km)
    default_leg_km: float = 10.0

    # DC charging power tapers above this battery level
    taper_start_pct: float = TAPER_START_PCT

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidPlanInputError(
                    f"PlannerConfig.{f.name} must be a finite number, got {value!r}"
                )
            if value < 0:
                raise InvalidPlanInputError(f"PlannerConfig.{f.name} must be >= 0, got {value}")
        if self.target_charge_floor_pct > 100:
            raise InvalidPlanInputError(
                f"PlannerConfig.target_charge_floor_pct must be <= 100, got {self.target_charge_floor_pct}"
            )
        if self.default_leg_km <= 0:
            raise InvalidPlanInputError("PlannerConfig.default_leg_km must be positive")
        if self.minimum_charging_minutes < 1:
            raise InvalidPlanInputError(
                f"PlannerConfig.minimum_charging_minutes must be >= 1, got {self.minimum_charging_minutes}"
            )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "PlannerConfig":
        """Build a config from a mapping, ignoring None values and rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise InvalidPlanInputError(f"Unknown planner settings: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in values.items() if v is not None})
