"""
Charging Station Module
Read-only description of a charging station found along a route.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ev_journey_planner.errors import InvalidPlanInputError
from ev_journey_planner.geo.geo_utils import LonLat


class StationAvailability(Enum):
    """Live status shown for a station in the itinerary."""
    AVAILABLE = "Available"
    BUSY = "Currently in use"
    UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class Connector:
    """A single charging connector (plug) at a station."""
    type: str                  # e.g. "CCS", "CHAdeMO", "Type 2"
    power_kw: float
    available: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.power_kw) or self.power_kw <= 0:
            raise InvalidPlanInputError(
                f"Connector '{self.type}' must have a positive power rating, got {self.power_kw}"
            )


@dataclass(frozen=True)
class Station:
    """
    Charging station positioned along a route.

    ``distance_from_start_km`` is the km position along the route. When it is
    None the planner derives it from the route geometry (or treats it as 0).
    ``distance_from_route_km`` is the lateral detour and is informational only.
    """
    id: str
    name: str
    position: LonLat
    distance_from_start_km: Optional[float] = None
    distance_from_route_km: Optional[float] = None
    connectors: Tuple[Connector, ...] = field(default_factory=tuple)
    address: str = ""
    is_available: bool = True
    is_busy: bool = False

    def __post_init__(self) -> None:
        # Accept lists from JSON / callers; store immutable tuples
        object.__setattr__(self, "position", tuple(self.position))
        object.__setattr__(self, "connectors", tuple(self.connectors))

        for attr in ("distance_from_start_km", "distance_from_route_km"):
            value = getattr(self, attr)
            if value is not None and (not math.isfinite(value) or value < 0):
                raise InvalidPlanInputError(
                    f"Station '{self.id}': {attr} must be a non-negative number, got {value}"
                )

    @property
    def availability(self) -> StationAvailability:
        if not self.is_available:
            return StationAvailability.UNAVAILABLE
        if self.is_busy:
            return StationAvailability.BUSY
        return StationAvailability.AVAILABLE

    def available_connectors(self) -> Tuple[Connector, ...]:
        return tuple(c for c in self.connectors if c.available)

    def best_connector(self) -> Optional[Connector]:
        """
        Highest-power available connector, or None if none is available.

        Ties keep the connector listed first.
        """
        best: Optional[Connector] = None
        for connector in self.connectors:
            if not connector.available:
                continue
            if best is None or connector.power_kw > best.power_kw:
                best = connector
        return best

    def __repr__(self) -> str:
        km = "?" if self.distance_from_start_km is None else f"{self.distance_from_start_km:.1f}"
        return (f"Station({self.id}, km={km}, "
                f"connectors={len(self.connectors)}, {self.availability.name})")
