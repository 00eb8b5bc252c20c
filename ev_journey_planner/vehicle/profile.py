"""
Vehicle profile: the battery and range figures the planner works with.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ev_journey_planner.errors import DegenerateProfileError


@dataclass(frozen=True)
class VehicleProfile:
    """
    Battery capacity and rated range of an electric vehicle.

    Fixed for a whole planning run.
    """
    battery_capacity_kwh: float
    rated_range_km: float
    name: str = "Custom vehicle"

    def __post_init__(self) -> None:
        for attr in ("battery_capacity_kwh", "rated_range_km"):
            value = getattr(self, attr)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise DegenerateProfileError(
                    f"{self.name}: {attr} must be a positive finite number, got {value!r}"
                )

    def range_at(self, battery_pct: float) -> float:
        """Remaining range in km at the given battery percentage."""
        return self.rated_range_km * battery_pct / 100

    def __repr__(self) -> str:
        return (f"VehicleProfile({self.name}, "
                f"{self.battery_capacity_kwh:.1f} kWh, {self.rated_range_km:.0f} km)")
