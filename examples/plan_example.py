"""plan_example – plan a Lyon -> Marseille trip in code.

Run directly:  python examples/plan_example.py
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ev_journey_planner import Connector, Station, lookup_vehicle, plan_journey
from ev_journey_planner.data import load_plan_request


def plan_by_hand():
    """Stations with known route positions, no geometry needed."""
    profile = lookup_vehicle("renault-zoe-r135")
    stations = [
        Station("a", "Aire de Vienne", (4.872, 45.515), distance_from_start_km=30,
                connectors=(Connector("CCS", 50),)),
        Station("b", "Aire de Valence", (4.893, 44.925), distance_from_start_km=100,
                connectors=(Connector("CCS", 150), Connector("Type 2", 22))),
        Station("c", "Aire d'Orange", (4.810, 44.140), distance_from_start_km=200,
                connectors=(Connector("CHAdeMO", 50),)),
    ]
    plan = plan_journey(stations, profile, start_battery_pct=45, route_total_distance_km=314)
    print(plan.summary("Lyon", "Marseille"))


def plan_from_request():
    """Stations placed on the route geometry of a JSON request."""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "lyon_marseille.json")
    request = load_plan_request(path)
    plan = request.plan()
    print(plan.summary(request.start_label, request.end_label))
    print()
    print(plan.to_dataframe()[["station_name", "status", "arrival_battery_pct",
                               "charging_time_minutes"]])


if __name__ == "__main__":
    plan_by_hand()
    print()
    plan_from_request()
