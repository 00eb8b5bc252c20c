"""planner – configuration, plan types and the two-pass journey planner."""

from .config import PlannerConfig
from .segments import JourneyPlan, JourneySegment, SegmentStatus
from .journey import (
    Leg,
    assign_legs,
    classify,
    discover_optional_candidates,
    plan_journey,
    sort_stations,
)

__all__ = [
    "PlannerConfig",
    "JourneyPlan", "JourneySegment", "SegmentStatus",
    "Leg", "assign_legs", "classify", "discover_optional_candidates",
    "plan_journey", "sort_stations",
]
