"""
geo – haversine distance and route geometry.

Quick start::

    from ev_journey_planner.geo import RouteGeometry

    route = RouteGeometry.from_geojson(feature["geometry"], distance_m=feature["properties"]["distance"])
    nearby = route.stations_within_radius(stations, radius_km=5)
"""

from .geo_utils import (
    EARTH_RADIUS_KM,
    LonLat,
    build_polyline_km_index,
    haversine_km,
    haversine_km_many,
    project_point_to_polyline,
)
from .route import RouteGeometry

__all__ = [
    "RouteGeometry",
    "LonLat",
    "EARTH_RADIUS_KM",
    "haversine_km",
    "haversine_km_many",
    "build_polyline_km_index",
    "project_point_to_polyline",
]
