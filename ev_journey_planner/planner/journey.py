"""
Journey Planner
Decides, for one vehicle on one fixed route, which charging stations must be
used, which may be skipped and which cannot be reached.

Planning runs in three steps, each a pure function:

1. ``assign_legs``      – sort stations and measure the leg into and out of each one
2. ``discover_optional_candidates`` – forward simulation that flags stations the
                          vehicle could drive past with enough reserve
3. ``classify``         – final pass that builds the segments, sizing charge
                          targets and durations at required stops

``plan_journey`` composes the three.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ev_journey_planner.charging.energy import (
    charging_time_minutes,
    energy_per_km,
    percentage_used,
    tapered_power_kw,
)
from ev_journey_planner.charging.station import Connector, Station
from ev_journey_planner.errors import InvalidPlanInputError
from ev_journey_planner.geo.geo_utils import haversine_km
from ev_journey_planner.geo.route import RouteGeometry
from ev_journey_planner.vehicle.profile import VehicleProfile

from .config import PlannerConfig
from .segments import JourneyPlan, JourneySegment, SegmentStatus


@dataclass(frozen=True)
class Leg:
    """A station with the distances (and battery shares) of the legs around it."""
    station: Station
    distance_from_start_km: float   # Route position used for ordering
    incoming_km: float              # From the previous station (or the start)
    outgoing_km: float              # To the next station (or the destination)
    incoming_pct: float
    outgoing_pct: float


# ---------------------------------------------------------------------------
# Step 1: distance assignment
# ---------------------------------------------------------------------------

def _route_position(station: Station) -> float:
    return station.distance_from_start_km if station.distance_from_start_km is not None else 0.0


def sort_stations(stations: Sequence[Station]) -> List[Station]:
    """Stations in route order; a missing route position counts as 0 km."""
    return sorted(stations, key=_route_position)


def _distance_between(previous: Station, current: Station) -> float:
    if previous.distance_from_start_km is not None and current.distance_from_start_km is not None:
        distance = current.distance_from_start_km - previous.distance_from_start_km
    else:
        distance = haversine_km(previous.position, current.position)
    # Co-located stations cost nothing to drive between
    return max(0.0, distance)


def assign_legs(
    stations: Sequence[Station],
    profile: VehicleProfile,
    route_total_distance_km: float,
    config: Optional[PlannerConfig] = None,
) -> List[Leg]:
    """
    Sort stations and compute the incoming and outgoing leg of each.

    The first leg is the station's route position, or ``default_leg_km`` if
    unknown. The final leg runs to the destination and is floored at
    ``default_leg_km`` when the route total leaves no positive distance.
    """
    config = config or PlannerConfig()
    ordered = sort_stations(stations)
    kwh_per_km = energy_per_km(profile)

    incoming: List[float] = []
    for i, station in enumerate(ordered):
        if i == 0:
            if station.distance_from_start_km is not None:
                incoming.append(station.distance_from_start_km)
            else:
                incoming.append(config.default_leg_km)
        else:
            incoming.append(_distance_between(ordered[i - 1], station))

    legs = []
    for i, station in enumerate(ordered):
        if i + 1 < len(ordered):
            outgoing = incoming[i + 1]
        else:
            outgoing = route_total_distance_km - _route_position(station)
            if outgoing <= 0:
                outgoing = config.default_leg_km
        legs.append(Leg(
            station=station,
            distance_from_start_km=_route_position(station),
            incoming_km=incoming[i],
            outgoing_km=outgoing,
            incoming_pct=percentage_used(incoming[i], profile, kwh_per_km),
            outgoing_pct=percentage_used(outgoing, profile, kwh_per_km),
        ))
    return legs


# ---------------------------------------------------------------------------
# Step 2: lookahead simulation
# ---------------------------------------------------------------------------

def discover_optional_candidates(
    legs: Sequence[Leg],
    start_battery_pct: float,
    config: Optional[PlannerConfig] = None,
) -> FrozenSet[str]:
    """
    Ids of stations the vehicle can pass without charging.

    Simulates the trip once: a station whose arrival battery covers the next
    leg plus the safety margin is a candidate and the battery keeps draining;
    any other reachable station charges to next leg + fast-charge buffer.
    """
    config = config or PlannerConfig()
    battery = float(start_battery_pct)
    candidates = set()

    for leg in legs:
        arrival = max(0.0, battery - leg.incoming_pct)
        if arrival <= 0:
            battery = 0.0
            continue
        if arrival > leg.outgoing_pct + config.safety_margin_pct:
            candidates.add(leg.station.id)
            battery = arrival
        else:
            battery = min(100.0, max(arrival, leg.outgoing_pct + config.fast_charge_buffer_pct))

    return frozenset(candidates)


# ---------------------------------------------------------------------------
# Step 3: classification
# ---------------------------------------------------------------------------

def _size_charging_stop(
    station: Station,
    arrival_pct: float,
    needed_pct: float,
    profile: VehicleProfile,
    config: PlannerConfig,
) -> Tuple[float, int, Optional[Connector]]:
    """Return (target %, minutes, connector) for a required stop."""
    connector = station.best_connector()
    if connector is None:
        warnings.warn(
            f"No available connector at required stop '{station.name}' ({station.id}); "
            f"assuming {config.default_charging_minutes} min and "
            f"+{config.default_charge_increment_pct:g}%",
            RuntimeWarning,
        )
        target = min(100.0, arrival_pct + config.default_charge_increment_pct)
        return target, max(config.minimum_charging_minutes, config.default_charging_minutes), None

    target = min(100.0, max(config.target_charge_floor_pct,
                            arrival_pct + needed_pct + config.safety_margin_pct))
    power_kw = tapered_power_kw(connector.power_kw, arrival_pct, config.taper_start_pct)
    minutes = charging_time_minutes(
        profile.battery_capacity_kwh, arrival_pct, target, power_kw,
        minimum_minutes=config.minimum_charging_minutes,
    )
    return target, minutes, connector


def classify(
    legs: Sequence[Leg],
    profile: VehicleProfile,
    start_battery_pct: float,
    optional_candidates: FrozenSet[str],
    config: Optional[PlannerConfig] = None,
    route_total_distance_km: Optional[float] = None,
) -> JourneyPlan:
    """
    Build the journey plan from the legs and the lookahead candidates.

    Unreachable stations carry their clamped arrival (0 %) forward, so every
    station after the first unreachable one is unreachable as well.
    """
    config = config or PlannerConfig()
    battery = float(start_battery_pct)
    segments: List[JourneySegment] = []

    for i, leg in enumerate(legs):
        arrival = max(0.0, battery - leg.incoming_pct)
        departure: Optional[float] = None
        minutes: Optional[int] = None
        connector: Optional[Connector] = None

        if arrival <= 0:
            status = SegmentStatus.UNREACHABLE
            battery = arrival
        elif (leg.station.id in optional_candidates
              and arrival > leg.outgoing_pct + config.safety_margin_pct):
            status = SegmentStatus.OPTIONAL
            battery = arrival
        else:
            status = SegmentStatus.REQUIRED
            departure, minutes, connector = _size_charging_stop(
                leg.station, arrival, leg.outgoing_pct, profile, config
            )
            battery = departure

        final_pct = None
        if i == len(legs) - 1:
            remaining = battery - leg.outgoing_pct
            if remaining > 0:
                final_pct = remaining

        segments.append(JourneySegment(
            station=leg.station,
            distance_from_start_km=leg.distance_from_start_km,
            distance_from_previous_km=leg.incoming_km,
            distance_to_next_km=leg.outgoing_km,
            distance_from_route_km=leg.station.distance_from_route_km,
            arrival_battery_pct=arrival,
            status=status,
            departure_charge_pct=departure,
            charging_time_minutes=minutes,
            connector=connector,
            final_battery_pct=final_pct,
        ))

    return JourneyPlan(
        segments=tuple(segments),
        profile=profile,
        start_battery_pct=float(start_battery_pct),
        route_total_distance_km=route_total_distance_km,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _validate_inputs(
    stations: Sequence[Station],
    profile: VehicleProfile,
    start_battery_pct: float,
    route_total_distance_km: float,
) -> None:
    if not isinstance(profile, VehicleProfile):
        raise InvalidPlanInputError(f"Expected a VehicleProfile, got {type(profile).__name__}")
    if not math.isfinite(start_battery_pct) or not 1 <= start_battery_pct <= 100:
        raise InvalidPlanInputError(
            f"Start battery must be between 1 and 100 %, got {start_battery_pct}"
        )
    if not math.isfinite(route_total_distance_km) or route_total_distance_km < 0:
        raise InvalidPlanInputError(
            f"Route total distance must be non-negative, got {route_total_distance_km}"
        )

    seen = set()
    for station in stations:
        if station.id in seen:
            raise InvalidPlanInputError(f"Duplicate station id '{station.id}'")
        seen.add(station.id)


def plan_journey(
    stations: Sequence[Station],
    profile: VehicleProfile,
    start_battery_pct: float,
    route_total_distance_km: Optional[float] = None,
    config: Optional[PlannerConfig] = None,
    route: Optional[RouteGeometry] = None,
) -> JourneyPlan:
    """
    Plan the charging stops of a trip.

    Args:
        stations: Candidate stations, in any order.
        profile: Vehicle battery capacity and rated range.
        start_battery_pct: Battery level at departure (1-100).
        route_total_distance_km: Driving distance from start to destination.
                                 Defaults to the route's total when ``route`` is given.
        config: Planner thresholds; defaults to PlannerConfig().
        route: Optional route geometry used to place stations that have no
               route position.

    Returns:
        JourneyPlan with one segment per station in route order. An empty
        station list gives an empty plan.

    Raises:
        InvalidPlanInputError: Bad battery level, route distance or duplicate station ids.
    """
    config = config or PlannerConfig()
    if route_total_distance_km is None:
        if route is None:
            raise InvalidPlanInputError("route_total_distance_km is required when no route is given")
        route_total_distance_km = route.total_distance_km

    _validate_inputs(stations, profile, start_battery_pct, route_total_distance_km)

    if not stations:
        return JourneyPlan(
            profile=profile,
            start_battery_pct=float(start_battery_pct),
            route_total_distance_km=route_total_distance_km,
        )

    if route is not None:
        stations = route.locate_stations(stations)
    else:
        unplaced = [s.id for s in stations if s.distance_from_start_km is None]
        if unplaced:
            warnings.warn(
                f"{len(unplaced)} station(s) have no route position and no route geometry "
                f"was given; ordering them at km 0: {', '.join(unplaced)}",
                RuntimeWarning,
            )

    farthest = max(_route_position(s) for s in stations)
    if farthest > route_total_distance_km:
        warnings.warn(
            f"Station at km {farthest:.1f} lies beyond the route total of "
            f"{route_total_distance_km:.1f} km",
            RuntimeWarning,
        )

    legs = assign_legs(stations, profile, route_total_distance_km, config)
    candidates = discover_optional_candidates(legs, start_battery_pct, config)
    return classify(legs, profile, start_battery_pct, candidates, config, route_total_distance_km)
