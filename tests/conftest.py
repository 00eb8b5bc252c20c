"""
Shared pytest fixtures for the EV Journey Planner test suite.
"""

import pytest
from ev_journey_planner.charging.station import Connector, Station
from ev_journey_planner.planner.config import PlannerConfig
from ev_journey_planner.vehicle.profile import VehicleProfile


@pytest.fixture
def ten_km_per_pct():
    """40 kWh / 1000 km: every 10 km uses exactly 1% of the battery."""
    return VehicleProfile(battery_capacity_kwh=40.0, rated_range_km=1000.0, name="Test car")


@pytest.fixture
def short_range_profile():
    """40 kWh / 400 km: every 4 km uses 1% of the battery."""
    return VehicleProfile(battery_capacity_kwh=40.0, rated_range_km=400.0, name="City car")


@pytest.fixture
def long_range_profile():
    """A range far beyond any test route."""
    return VehicleProfile(battery_capacity_kwh=100.0, rated_range_km=10000.0, name="Endless")


@pytest.fixture
def default_config():
    return PlannerConfig()


@pytest.fixture
def fast_station():
    """Station at km 100 with a 150 kW CCS and a 22 kW Type 2 connector."""
    return Station(
        id="fast",
        name="Fast Hub",
        position=(4.9, 44.9),
        distance_from_start_km=100.0,
        distance_from_route_km=0.4,
        connectors=(Connector("CCS", 150.0), Connector("Type 2", 22.0)),
    )
