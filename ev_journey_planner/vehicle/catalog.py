"""
Built-in vehicle catalog.

Typical usage::

    from ev_journey_planner.vehicle import lookup_vehicle

    profile = lookup_vehicle("tesla-model-3-lr")
    print(profile.range_at(80))   # km available at 80 %
"""

from __future__ import annotations

from typing import Dict, List

from .profile import VehicleProfile


# Usable battery capacity (kWh) and WLTP rated range (km) of common models.
VEHICLE_CATALOG: Dict[str, Dict] = {
    "tesla-model-3-sr":     {"name": "Tesla Model 3 Standard Range", "battery_capacity_kwh": 57.5, "rated_range_km": 491},
    "tesla-model-3-lr":     {"name": "Tesla Model 3 Long Range",     "battery_capacity_kwh": 75.0, "rated_range_km": 629},
    "tesla-model-y-lr":     {"name": "Tesla Model Y Long Range",     "battery_capacity_kwh": 75.0, "rated_range_km": 533},
    "nissan-leaf":          {"name": "Nissan Leaf",                  "battery_capacity_kwh": 39.0, "rated_range_km": 270},
    "nissan-leaf-e-plus":   {"name": "Nissan Leaf e+",               "battery_capacity_kwh": 59.0, "rated_range_km": 385},
    "vw-id3-pro":           {"name": "Volkswagen ID.3 Pro",          "battery_capacity_kwh": 58.0, "rated_range_km": 426},
    "vw-id4-pro":           {"name": "Volkswagen ID.4 Pro",          "battery_capacity_kwh": 77.0, "rated_range_km": 520},
    "hyundai-kona-64":      {"name": "Hyundai Kona Electric 64 kWh", "battery_capacity_kwh": 64.0, "rated_range_km": 484},
    "hyundai-ioniq5-lr":    {"name": "Hyundai Ioniq 5 Long Range",   "battery_capacity_kwh": 77.4, "rated_range_km": 507},
    "kia-ev6-lr":           {"name": "Kia EV6 Long Range",           "battery_capacity_kwh": 77.4, "rated_range_km": 528},
    "renault-zoe-r135":     {"name": "Renault Zoe R135",             "battery_capacity_kwh": 52.0, "rated_range_km": 386},
    "bmw-i4-edrive40":      {"name": "BMW i4 eDrive40",              "battery_capacity_kwh": 80.7, "rated_range_km": 590},
    "chevrolet-bolt":       {"name": "Chevrolet Bolt EV",            "battery_capacity_kwh": 65.0, "rated_range_km": 417},
}


def list_available_vehicles() -> List[Dict]:
    """
    Return the catalog entries with their model ids.

    Each entry is a dict with keys: model_id, name, battery_capacity_kwh, rated_range_km.
    """
    return [{"model_id": model_id, **info} for model_id, info in VEHICLE_CATALOG.items()]


def lookup_vehicle(model_id: str) -> VehicleProfile:
    """
    Build the VehicleProfile of a catalog model (case-insensitive id).

    Raises:
        ValueError: If the model id is not in VEHICLE_CATALOG.
    """
    key = model_id.strip().lower()
    if key not in VEHICLE_CATALOG:
        available = ", ".join(sorted(VEHICLE_CATALOG))
        raise ValueError(
            f"Vehicle model '{model_id}' is not in the built-in catalog. "
            f"Available: {available}."
        )
    info = VEHICLE_CATALOG[key]
    return VehicleProfile(
        battery_capacity_kwh=info["battery_capacity_kwh"],
        rated_range_km=info["rated_range_km"],
        name=info["name"],
    )
