"""
JSON plan requests.

A request bundles what the upstream collaborators deliver (route, stations,
vehicle) with the driver's starting battery level::

    {
      "start": "Lyon", "destination": "Marseille",
      "vehicle": {"model": "nissan-leaf"},
      "start_battery_pct": 80,
      "route": {"distance_m": 314000, "geometry": {"type": "LineString", "coordinates": [...]}},
      "stations": [
        {"id": "st-1", "name": "Aire de Montélimar", "position": [4.75, 44.55],
         "distance_from_start_km": 150,
         "connectors": [{"type": "CCS", "power_kw": 150, "available": true}]}
      ]
    }

The vehicle may instead be given inline with ``battery_capacity_kwh`` and
``rated_range_km``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ev_journey_planner.charging.station import Connector, Station
from ev_journey_planner.errors import InvalidPlanInputError, JourneyPlanningError
from ev_journey_planner.geo.route import RouteGeometry
from ev_journey_planner.planner.config import PlannerConfig
from ev_journey_planner.planner.journey import plan_journey
from ev_journey_planner.planner.segments import JourneyPlan
from ev_journey_planner.vehicle.catalog import lookup_vehicle
from ev_journey_planner.vehicle.profile import VehicleProfile


@dataclass
class PlanRequest:
    """Everything needed for one planning call."""
    stations: List[Station]
    profile: VehicleProfile
    start_battery_pct: float
    route_total_distance_km: float
    route: Optional[RouteGeometry] = None
    start_label: str = "Start"
    end_label: str = "Destination"
    config: PlannerConfig = field(default_factory=PlannerConfig)

    def plan(self) -> JourneyPlan:
        return plan_journey(
            self.stations,
            self.profile,
            self.start_battery_pct,
            self.route_total_distance_km,
            config=self.config,
            route=self.route,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanRequest":
        """
        Parse a request mapping.

        Raises:
            InvalidPlanInputError: On missing or malformed fields.
        """
        if not isinstance(data, dict):
            raise InvalidPlanInputError("Plan request must be a JSON object")

        profile = _parse_vehicle(data.get("vehicle"))
        route, total_km = _parse_route(data.get("route"))

        if "start_battery_pct" not in data:
            raise InvalidPlanInputError("Plan request is missing 'start_battery_pct'")
        start_pct = _as_float(data["start_battery_pct"], "start_battery_pct")

        raw_stations = data.get("stations", [])
        if not isinstance(raw_stations, list):
            raise InvalidPlanInputError("'stations' must be a list")
        stations = [_parse_station(raw, i) for i, raw in enumerate(raw_stations)]

        config_values = data.get("planner", {})
        if not isinstance(config_values, dict):
            raise InvalidPlanInputError("'planner' must be an object")

        return cls(
            stations=stations,
            profile=profile,
            start_battery_pct=start_pct,
            route_total_distance_km=total_km,
            route=route,
            start_label=str(data.get("start", "Start")),
            end_label=str(data.get("destination", "Destination")),
            config=PlannerConfig.from_dict(config_values),
        )


def load_plan_request(path: Union[str, Path]) -> PlanRequest:
    """Load a PlanRequest from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise InvalidPlanInputError(f"Could not read plan request '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidPlanInputError(f"Plan request '{path}' is not valid JSON: {exc}") from exc
    return PlanRequest.from_dict(data)


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------

def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidPlanInputError(f"'{name}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidPlanInputError(f"'{name}' must be a number, got {value!r}") from exc


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidPlanInputError(f"'{name}' must be true or false, got {value!r}")
    return value


def _parse_vehicle(raw: Any) -> VehicleProfile:
    if not isinstance(raw, dict):
        raise InvalidPlanInputError("Plan request needs a 'vehicle' object")
    if "model" in raw:
        try:
            return lookup_vehicle(str(raw["model"]))
        except JourneyPlanningError:
            raise
        except ValueError as exc:
            raise InvalidPlanInputError(str(exc)) from exc
    for key in ("battery_capacity_kwh", "rated_range_km"):
        if key not in raw:
            raise InvalidPlanInputError(f"'vehicle' needs 'model' or '{key}'")
    return VehicleProfile(
        battery_capacity_kwh=_as_float(raw["battery_capacity_kwh"], "vehicle.battery_capacity_kwh"),
        rated_range_km=_as_float(raw["rated_range_km"], "vehicle.rated_range_km"),
        name=str(raw.get("name", "Custom vehicle")),
    )


def _parse_route(raw: Any):
    if not isinstance(raw, dict):
        raise InvalidPlanInputError("Plan request needs a 'route' object")

    total_km: Optional[float] = None
    if "total_distance_km" in raw:
        total_km = _as_float(raw["total_distance_km"], "route.total_distance_km")
    elif "distance_m" in raw:
        total_km = _as_float(raw["distance_m"], "route.distance_m") / 1000.0

    route = None
    if raw.get("geometry") is not None:
        if not isinstance(raw["geometry"], dict):
            raise InvalidPlanInputError("'route.geometry' must be a GeoJSON object")
        route = RouteGeometry.from_geojson(raw["geometry"])
        if total_km is not None:
            route = RouteGeometry(nodes=route.nodes, total_distance_km=total_km)
        total_km = route.total_distance_km

    if total_km is None:
        raise InvalidPlanInputError(
            "'route' needs 'total_distance_km', 'distance_m' or a 'geometry'"
        )
    return route, total_km


def _parse_connector(raw: Any, where: str) -> Connector:
    if not isinstance(raw, dict):
        raise InvalidPlanInputError(f"{where}: connector must be an object")
    power = raw.get("power_kw", raw.get("power"))
    if power is None:
        raise InvalidPlanInputError(f"{where}: connector is missing 'power_kw'")
    return Connector(
        type=str(raw.get("type", "unknown")),
        power_kw=_as_float(power, f"{where}.power_kw"),
        available=_as_bool(raw.get("available", True), f"{where}.available"),
    )


def _parse_station(raw: Any, index: int) -> Station:
    where = f"stations[{index}]"
    if not isinstance(raw, dict):
        raise InvalidPlanInputError(f"{where} must be an object")

    position = raw.get("position", raw.get("location"))
    if not isinstance(position, (list, tuple)) or len(position) != 2:
        raise InvalidPlanInputError(f"{where}: 'position' must be [lon, lat]")

    def optional_float(key: str) -> Optional[float]:
        value = raw.get(key)
        return None if value is None else _as_float(value, f"{where}.{key}")

    connectors = raw.get("connectors", [])
    if not isinstance(connectors, list):
        raise InvalidPlanInputError(f"{where}: 'connectors' must be a list")

    return Station(
        id=str(raw.get("id", f"station-{index}")),
        name=str(raw.get("name", f"EV Station {index + 1}")),
        position=(_as_float(position[0], f"{where}.position[0]"),
                  _as_float(position[1], f"{where}.position[1]")),
        distance_from_start_km=optional_float("distance_from_start_km"),
        distance_from_route_km=optional_float("distance_from_route_km"),
        connectors=tuple(_parse_connector(c, f"{where}.connectors[{j}]")
                         for j, c in enumerate(connectors)),
        address=str(raw.get("address", "")),
        is_available=_as_bool(raw.get("is_available", True), f"{where}.is_available"),
        is_busy=_as_bool(raw.get("is_busy", False), f"{where}.is_busy"),
    )
