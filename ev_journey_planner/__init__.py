"""
EV Journey Planner
==================
Charging-stop planning for an electric vehicle on a single road trip.

Package layout
--------------
ev_journey_planner/
    geo/            – haversine distance, route geometry, station placement
    vehicle/        – vehicle profile, built-in model catalog
    charging/       – stations, connectors, energy and charge-time math
    planner/        – planner config, segment types, two-pass journey planner
    data/           – JSON plan requests
    visualization/  – battery-profile chart
    cli.py          – command line entry point
"""

from .errors import (
    DegenerateProfileError,
    InvalidChargeTargetError,
    InvalidPlanInputError,
    JourneyPlanningError,
)
from .charging import Connector, Station, StationAvailability
from .geo import RouteGeometry, haversine_km
from .planner import (
    JourneyPlan,
    JourneySegment,
    PlannerConfig,
    SegmentStatus,
    plan_journey,
)
from .vehicle import VehicleProfile, lookup_vehicle

__version__ = "0.1.0"

__all__ = [
    "plan_journey", "PlannerConfig",
    "JourneyPlan", "JourneySegment", "SegmentStatus",
    "Station", "Connector", "StationAvailability",
    "VehicleProfile", "lookup_vehicle",
    "RouteGeometry", "haversine_km",
    "JourneyPlanningError", "InvalidChargeTargetError",
    "DegenerateProfileError", "InvalidPlanInputError",
]
