"""
Exception types raised by the journey planner.

All of them derive from ``ValueError`` so callers that already guard planner
calls with ``except ValueError`` keep working.
"""


class JourneyPlanningError(ValueError):
    """Base class for planner precondition violations."""


class InvalidChargeTargetError(JourneyPlanningError):
    """Charge target below the current battery percentage."""

    def __init__(self, from_pct: float, to_pct: float):
        self.from_pct = from_pct
        self.to_pct = to_pct
        super().__init__(
            f"Charge target {to_pct:.1f}% is below the current level {from_pct:.1f}%"
        )


class DegenerateProfileError(JourneyPlanningError):
    """Vehicle profile with a non-positive battery capacity or rated range."""


class InvalidPlanInputError(JourneyPlanningError):
    """Malformed planner input (battery level, distances, request files)."""
