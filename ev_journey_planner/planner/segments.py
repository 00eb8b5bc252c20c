"""
Journey plan output types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from ev_journey_planner.charging.station import Connector, Station
from ev_journey_planner.vehicle.profile import VehicleProfile


class SegmentStatus(Enum):
    """Role of a station in the plan."""
    REQUIRED = "required"         # Must charge here to reach the next stop
    OPTIONAL = "optional"         # Reachable and safely skippable
    UNREACHABLE = "unreachable"   # Battery runs out before this station


@dataclass(frozen=True)
class JourneySegment:
    """
    One station of the plan together with the leg that leads to it.

    ``departure_charge_pct`` and ``charging_time_minutes`` are set iff the
    stop is REQUIRED. ``final_battery_pct`` is only set on the last segment,
    and only when the destination is reached with charge left.
    """
    station: Station
    distance_from_start_km: float
    distance_from_previous_km: float
    distance_to_next_km: float
    arrival_battery_pct: float
    status: SegmentStatus
    distance_from_route_km: Optional[float] = None
    departure_charge_pct: Optional[float] = None
    charging_time_minutes: Optional[int] = None
    connector: Optional[Connector] = None
    final_battery_pct: Optional[float] = None

    def __post_init__(self) -> None:
        is_required = self.status is SegmentStatus.REQUIRED
        has_charge = self.departure_charge_pct is not None and self.charging_time_minutes is not None
        if is_required != has_charge:
            raise ValueError(
                f"Segment {self.station.id}: charge target and time must be set "
                f"exactly when the stop is required (status={self.status.name})"
            )

    @property
    def charge_added_pct(self) -> float:
        if self.departure_charge_pct is None:
            return 0.0
        return self.departure_charge_pct - self.arrival_battery_pct


@dataclass(frozen=True)
class JourneyPlan:
    """Ordered journey segments from the first station to the last."""
    segments: Tuple[JourneySegment, ...] = field(default_factory=tuple)
    profile: Optional[VehicleProfile] = None
    start_battery_pct: Optional[float] = None
    route_total_distance_km: Optional[float] = None

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __getitem__(self, index: int) -> JourneySegment:
        return self.segments[index]

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def _with_status(self, status: SegmentStatus) -> List[JourneySegment]:
        return [s for s in self.segments if s.status is status]

    @property
    def required_stops(self) -> List[JourneySegment]:
        return self._with_status(SegmentStatus.REQUIRED)

    @property
    def optional_stops(self) -> List[JourneySegment]:
        return self._with_status(SegmentStatus.OPTIONAL)

    @property
    def unreachable_stops(self) -> List[JourneySegment]:
        return self._with_status(SegmentStatus.UNREACHABLE)

    @property
    def total_charging_minutes(self) -> int:
        return sum(s.charging_time_minutes or 0 for s in self.segments)

    @property
    def final_battery_pct(self) -> Optional[float]:
        return self.segments[-1].final_battery_pct if self.segments else None

    @property
    def is_feasible(self) -> bool:
        """True when every station is reachable and the destination is reached."""
        if not self.segments:
            return True
        return not self.unreachable_stops and self.final_battery_pct is not None

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def summary(self, start_label: str = "Start", end_label: str = "Destination") -> str:
        """Return a human-readable itinerary."""
        lines = []
        if self.profile is not None and self.start_battery_pct is not None:
            initial_range = round(self.profile.range_at(self.start_battery_pct))
            lines.append(f"{start_label}  |  Starting point • {self.start_battery_pct:.0f}% "
                         f"• {initial_range} km range ({self.profile.name})")
        else:
            lines.append(f"{start_label}  |  Starting point")

        for seg in self.segments:
            detour = ""
            if seg.distance_from_route_km is not None:
                detour = f", {seg.distance_from_route_km:.1f} km from route"
            line = (f"  km {seg.distance_from_start_km:6.1f}  |  {seg.station.name} "
                    f"[{seg.status.value}] arrive {seg.arrival_battery_pct:.0f}%{detour}")
            if seg.status is SegmentStatus.REQUIRED:
                via = f" via {seg.connector.type} {seg.connector.power_kw:g} kW" if seg.connector else ""
                line += (f" -> charge to {seg.departure_charge_pct:.0f}% "
                         f"({seg.charging_time_minutes} min charge{via})")
            lines.append(line)

        if self.final_battery_pct is not None:
            lines.append(f"{end_label}  |  Destination • arrive with {self.final_battery_pct:.0f}%")
        elif self.segments:
            lines.append(f"{end_label}  |  Destination • NOT reachable with this plan")
        else:
            lines.append(f"{end_label}  |  Destination")

        lines.append("")
        lines.append(
            f"  Stops: {len(self.required_stops)} required, {len(self.optional_stops)} optional, "
            f"{len(self.unreachable_stops)} unreachable  |  "
            f"total charging {self.total_charging_minutes} min"
        )
        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per segment, in route order."""
        rows = []
        for seg in self.segments:
            rows.append({
                "station_id": seg.station.id,
                "station_name": seg.station.name,
                "distance_from_start_km": seg.distance_from_start_km,
                "distance_from_previous_km": seg.distance_from_previous_km,
                "distance_to_next_km": seg.distance_to_next_km,
                "distance_from_route_km": seg.distance_from_route_km,
                "status": seg.status.value,
                "arrival_battery_pct": seg.arrival_battery_pct,
                "departure_charge_pct": seg.departure_charge_pct,
                "charging_time_minutes": seg.charging_time_minutes,
                "connector_type": seg.connector.type if seg.connector else None,
                "connector_power_kw": seg.connector.power_kw if seg.connector else None,
                "final_battery_pct": seg.final_battery_pct,
            })
        columns = [
            "station_id", "station_name", "distance_from_start_km",
            "distance_from_previous_km", "distance_to_next_km", "distance_from_route_km",
            "status", "arrival_battery_pct", "departure_charge_pct",
            "charging_time_minutes", "connector_type", "connector_power_kw",
            "final_battery_pct",
        ]
        return pd.DataFrame(rows, columns=columns)

    def save_csv(self, filepath: Union[str, Path]) -> Path:
        """Write the segment table to CSV and return the path."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(path, index=False)
        return path
