"""
Geographic utilities for route and station positioning.

All coordinates are (longitude, latitude) pairs in decimal degrees, the
order used by GeoJSON route geometries. Distances use the haversine formula.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

# GeoJSON coordinate order: (longitude, latitude), decimal degrees
LonLat = Tuple[float, float]

EARTH_RADIUS_KM = 6371.0


def haversine_km(point_a: LonLat, point_b: LonLat) -> float:
    """
    Great-circle distance in km between two (lon, lat) points.

    Symmetric and never negative. Identical points short-circuit to exactly 0.0
    so co-located stations compare equal.
    """
    if tuple(point_a) == tuple(point_b):
        return 0.0

    lon_a, lat_a = map(math.radians, point_a)
    lon_b, lat_b = map(math.radians, point_b)
    h = (math.sin((lat_b - lat_a) / 2) ** 2
         + math.cos(lat_a) * math.cos(lat_b) * math.sin((lon_b - lon_a) / 2) ** 2)
    # Rounding can push h a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def haversine_km_many(point: LonLat, nodes: np.ndarray) -> np.ndarray:
    """
    Vectorised haversine distance from one point to every row of ``nodes``.

    Args:
        point: (longitude, latitude) of the reference point.
        nodes: Array of shape (n, 2) holding (longitude, latitude) rows.

    Returns:
        Array of n distances in kilometres.
    """
    lon1, lat1 = np.radians(point[0]), np.radians(point[1])
    lon2 = np.radians(nodes[:, 0])
    lat2 = np.radians(nodes[:, 1])

    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    return EARTH_RADIUS_KM * 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


def build_polyline_km_index(nodes: Sequence[LonLat]) -> Tuple[List[float], float]:
    """
    Running route distance at every vertex of a (lon, lat) route line.

    Step lengths between consecutive vertices are haversine distances, so a
    repeated vertex adds 0 km. The first entry is always 0.0 and the last is
    the length of the whole line, which is also returned on its own. An empty
    line gives ``([], 0.0)``.
    """
    coords = np.asarray(nodes, dtype=float).reshape(-1, 2)
    if len(coords) == 0:
        return [], 0.0

    lon = np.radians(coords[:, 0])
    lat = np.radians(coords[:, 1])
    a = (np.sin(np.diff(lat) / 2) ** 2
         + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(np.diff(lon) / 2) ** 2)
    steps = EARTH_RADIUS_KM * 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))

    cumulative = np.concatenate(([0.0], np.cumsum(steps)))
    return cumulative.tolist(), float(cumulative[-1])


def project_point_to_polyline(
    point: LonLat,
    nodes: Sequence[LonLat],
    cumulative_km: Sequence[float],
) -> Tuple[float, float]:
    """
    Find the km position of a point along a polyline via nearest-node projection.

    Args:
        point: (lon, lat) of the point to project.
        nodes: Ordered list of polyline nodes.
        cumulative_km: Cumulative km index (same length as nodes).

    Returns:
        (km_along, km_off_route): km position of the nearest node from the start
        of the polyline, and the haversine distance from the point to that node.
        Returns (0.0, 0.0) if nodes is empty.
    """
    if len(nodes) == 0:
        return 0.0, 0.0

    distances = haversine_km_many(point, np.asarray(nodes, dtype=float))
    # argmin returns the first minimum, so ties resolve towards the route start
    nearest_idx = int(np.argmin(distances))
    return float(cumulative_km[nearest_idx]), float(distances[nearest_idx])
