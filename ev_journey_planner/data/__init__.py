"""data – JSON plan requests (route, stations, vehicle, start battery)."""

from .plan_request import PlanRequest, load_plan_request

__all__ = ["PlanRequest", "load_plan_request"]
