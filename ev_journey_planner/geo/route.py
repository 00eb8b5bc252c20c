"""
Route geometry as delivered by a routing provider.

Holds the ordered path of a route and places stations along it: the km
position of a station is the cumulative distance to its nearest route node,
and the off-route distance is the haversine distance to that node.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

from ev_journey_planner.errors import InvalidPlanInputError

from .geo_utils import LonLat, build_polyline_km_index, project_point_to_polyline

if TYPE_CHECKING:
    from ev_journey_planner.charging.station import Station


@dataclass
class RouteGeometry:
    """
    Ordered (lon, lat) path of a route plus the provider's total distance.

    Args:
        nodes: Route waypoints from start to destination.
        total_distance_km: Driving distance reported by the routing provider.
                           Defaults to the length of the polyline.
    """
    nodes: List[LonLat]
    total_distance_km: Optional[float] = None
    cumulative_km: List[float] = field(init=False, repr=False)
    length_km: float = field(init=False)

    def __post_init__(self) -> None:
        self.nodes = [(float(lon), float(lat)) for lon, lat in self.nodes]
        self.cumulative_km, self.length_km = build_polyline_km_index(self.nodes)
        if self.total_distance_km is None:
            self.total_distance_km = self.length_km
        elif not math.isfinite(self.total_distance_km) or self.total_distance_km < 0:
            raise InvalidPlanInputError(
                f"Route total distance must be non-negative, got {self.total_distance_km}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_geojson(cls, geometry: Dict[str, Any],
                     distance_m: Optional[float] = None) -> "RouteGeometry":
        """
        Build a route from a GeoJSON ``LineString`` or ``MultiLineString``.

        MultiLineString parts are joined in order. ``distance_m`` is the
        provider's route distance in metres, as routing APIs report it.
        """
        geom_type = geometry.get("type")
        coordinates = geometry.get("coordinates")
        if coordinates is None:
            raise InvalidPlanInputError("Route geometry has no 'coordinates'")

        if geom_type == "LineString":
            raw_nodes: Sequence = coordinates
        elif geom_type == "MultiLineString":
            raw_nodes = [point for part in coordinates for point in part]
        else:
            raise InvalidPlanInputError(
                f"Unsupported route geometry type '{geom_type}' "
                "(expected LineString or MultiLineString)"
            )

        nodes: List[LonLat] = []
        for point in raw_nodes:
            if len(point) < 2:
                raise InvalidPlanInputError(f"Invalid route coordinate: {point!r}")
            node = (float(point[0]), float(point[1]))
            # Consecutive parts usually share their joining vertex
            if not nodes or nodes[-1] != node:
                nodes.append(node)

        total_km = distance_m / 1000.0 if distance_m is not None else None
        return cls(nodes=nodes, total_distance_km=total_km)

    # ------------------------------------------------------------------
    # Station placement
    # ------------------------------------------------------------------

    @property
    def start(self) -> Optional[LonLat]:
        return self.nodes[0] if self.nodes else None

    @property
    def end(self) -> Optional[LonLat]:
        return self.nodes[-1] if self.nodes else None

    def locate(self, position: LonLat) -> Tuple[float, float]:
        """Return (km along the route, km off the route) for a position."""
        km_along, km_off = project_point_to_polyline(position, self.nodes, self.cumulative_km)
        if self.length_km > 0 and self.total_distance_km:
            # Rescale polyline km onto the provider's driving distance
            km_along *= self.total_distance_km / self.length_km
        return km_along, km_off

    def locate_stations(self, stations: Sequence["Station"]) -> List["Station"]:
        """
        Fill in missing route distances of stations.

        Values already present on a station are kept. Returns new Station
        instances; the inputs are left untouched.
        """
        located = []
        for station in stations:
            if station.distance_from_start_km is not None and station.distance_from_route_km is not None:
                located.append(station)
                continue
            km_along, km_off = self.locate(station.position)
            located.append(dataclasses.replace(
                station,
                distance_from_start_km=(
                    km_along if station.distance_from_start_km is None
                    else station.distance_from_start_km
                ),
                distance_from_route_km=(
                    km_off if station.distance_from_route_km is None
                    else station.distance_from_route_km
                ),
            ))
        return located

    def stations_within_radius(self, stations: Sequence["Station"],
                               radius_km: float) -> List["Station"]:
        """Located stations whose detour from the route is at most ``radius_km``."""
        return [
            s for s in self.locate_stations(stations)
            if s.distance_from_route_km <= radius_km
        ]
