"""charging – stations, connectors and charge-time / energy math."""

from .station import Connector, Station, StationAvailability
from .energy import (
    MINIMUM_CHARGING_MINUTES,
    TAPER_START_PCT,
    charging_time_minutes,
    energy_per_km,
    percentage_used,
    tapered_power_kw,
)

__all__ = [
    "Connector", "Station", "StationAvailability",
    "MINIMUM_CHARGING_MINUTES", "TAPER_START_PCT",
    "charging_time_minutes", "energy_per_km", "percentage_used", "tapered_power_kw",
]
