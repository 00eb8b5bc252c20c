"""
Energy and charge-time math.

Battery levels are percentages (0-100). Consumption is linear in distance:
the share of the battery used over a distance only depends on the rated range.
"""

from __future__ import annotations

import math
from typing import Optional

from ev_journey_planner.errors import InvalidChargeTargetError, InvalidPlanInputError
from ev_journey_planner.vehicle.profile import VehicleProfile

MINIMUM_CHARGING_MINUTES = 10       # Connector setup / session overhead floor
TAPER_START_PCT = 60.0              # DC fast charging slows down above this level
MIN_TAPER_FACTOR = 0.1              # Tapered power never drops below 10% of rated


def energy_per_km(profile: VehicleProfile) -> float:
    """kWh consumed per km."""
    return profile.battery_capacity_kwh / profile.rated_range_km


def percentage_used(distance_km: float, profile: VehicleProfile,
                    kwh_per_km: Optional[float] = None) -> float:
    """
    Battery percentage consumed driving ``distance_km``.

    Pass ``kwh_per_km`` to reuse a rate already computed for the profile.
    """
    if kwh_per_km is None:
        kwh_per_km = energy_per_km(profile)
    return (distance_km * kwh_per_km / profile.battery_capacity_kwh) * 100


def tapered_power_kw(power_kw: float, arrival_pct: float,
                     taper_start_pct: float = TAPER_START_PCT) -> float:
    """
    Effective charging power once the battery is above the taper threshold.

    Above ``taper_start_pct`` the rated power is de-rated by one percent per
    percentage point of charge. The result never exceeds the rated power and
    never drops below MIN_TAPER_FACTOR of it.
    """
    if arrival_pct <= taper_start_pct:
        return power_kw
    factor = 1.0 - (arrival_pct - taper_start_pct) / 100
    return power_kw * max(MIN_TAPER_FACTOR, min(1.0, factor))


def charging_time_minutes(
    battery_capacity_kwh: float,
    from_pct: float,
    to_pct: float,
    power_kw: float,
    minimum_minutes: int = MINIMUM_CHARGING_MINUTES,
) -> int:
    """
    Minutes needed to charge from ``from_pct`` to ``to_pct`` at ``power_kw``.

    Rounded up to whole minutes and never below ``minimum_minutes``.

    Raises:
        InvalidChargeTargetError: If ``to_pct`` is below ``from_pct``.
        InvalidPlanInputError: If ``power_kw`` is not positive.
    """
    if to_pct < from_pct:
        raise InvalidChargeTargetError(from_pct, to_pct)
    if power_kw <= 0:
        raise InvalidPlanInputError(f"Charging power must be positive, got {power_kw} kW")

    hours = battery_capacity_kwh * (to_pct - from_pct) / 100 / power_kw
    # Round away float noise first so 12.000000001 minutes stays 12
    return max(minimum_minutes, math.ceil(round(hours * 60, 6)))
