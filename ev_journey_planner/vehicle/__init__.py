"""vehicle – vehicle profile and built-in model catalog."""

from .profile import VehicleProfile
from .catalog import VEHICLE_CATALOG, list_available_vehicles, lookup_vehicle

__all__ = ["VehicleProfile", "VEHICLE_CATALOG", "list_available_vehicles", "lookup_vehicle"]
