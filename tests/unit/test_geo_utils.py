"""
Unit tests for the geographic helpers.

Covers:
- haversine_km(): zero distance, symmetry, known distances
- haversine_km_many(): agrees with the scalar version
- build_polyline_km_index(): empty, cumulative values
- project_point_to_polyline(): nearest node, lateral offset, empty polyline
"""

import math

import numpy as np
import pytest

from ev_journey_planner.geo.geo_utils import (
    EARTH_RADIUS_KM,
    build_polyline_km_index,
    haversine_km,
    haversine_km_many,
    project_point_to_polyline,
)

ONE_DEGREE_KM = EARTH_RADIUS_KM * math.pi / 180   # ~111.19 km
PARIS = (2.3522, 48.8566)
LONDON = (-0.1276, 51.5072)


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(PARIS, PARIS) == 0.0

    def test_symmetric(self):
        assert haversine_km(PARIS, LONDON) == pytest.approx(haversine_km(LONDON, PARIS))

    def test_paris_london(self):
        assert haversine_km(PARIS, LONDON) == pytest.approx(343.5, rel=0.01)

    def test_one_degree_of_longitude_at_equator(self):
        assert haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(ONE_DEGREE_KM)

    def test_coordinate_order_is_lon_lat(self):
        # One degree of longitude at 60°N is half a degree-length
        d = haversine_km((0.0, 60.0), (1.0, 60.0))
        assert d == pytest.approx(ONE_DEGREE_KM * 0.5, rel=0.01)

    def test_distinct_points_are_positive(self):
        assert haversine_km((0.0, 0.0), (0.0, 0.0001)) > 0.0


class TestHaversineMany:
    def test_matches_scalar_version(self):
        nodes = np.array([LONDON, (0.0, 0.0), PARIS])
        distances = haversine_km_many(PARIS, nodes)
        assert distances[0] == pytest.approx(haversine_km(PARIS, LONDON))
        assert distances[1] == pytest.approx(haversine_km(PARIS, (0.0, 0.0)))
        assert distances[2] == pytest.approx(0.0, abs=1e-9)


class TestPolylineIndex:
    def test_empty(self):
        assert build_polyline_km_index([]) == ([], 0.0)

    def test_cumulative_km(self):
        nodes = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
        cumulative, total = build_polyline_km_index(nodes)
        assert cumulative[0] == 0.0
        assert cumulative[1] == pytest.approx(ONE_DEGREE_KM)
        assert total == pytest.approx(2 * ONE_DEGREE_KM)

    def test_repeated_vertex_adds_nothing(self):
        cumulative, total = build_polyline_km_index([(0.0, 0.0), (1.0, 0.0), (1.0, 0.0)])
        assert cumulative[2] == cumulative[1]
        assert total == pytest.approx(ONE_DEGREE_KM)

    def test_matches_pairwise_haversine(self):
        nodes = [PARIS, (3.0, 47.0), (4.8, 45.7)]
        cumulative, _ = build_polyline_km_index(nodes)
        expected = haversine_km(nodes[0], nodes[1]) + haversine_km(nodes[1], nodes[2])
        assert cumulative[-1] == pytest.approx(expected)

    def test_single_node(self):
        assert build_polyline_km_index([PARIS]) == ([0.0], 0.0)


class TestProjection:
    def setup_method(self):
        self.nodes = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
        self.cumulative, _ = build_polyline_km_index(self.nodes)

    def test_point_near_middle_node(self):
        km_along, km_off = project_point_to_polyline((1.0, 0.01), self.nodes, self.cumulative)
        assert km_along == pytest.approx(ONE_DEGREE_KM)
        assert km_off == pytest.approx(0.01 * ONE_DEGREE_KM, rel=1e-3)

    def test_point_on_node_has_no_offset(self):
        km_along, km_off = project_point_to_polyline((2.0, 0.0), self.nodes, self.cumulative)
        assert km_along == pytest.approx(2 * ONE_DEGREE_KM)
        assert km_off == pytest.approx(0.0, abs=1e-9)

    def test_empty_polyline(self):
        assert project_point_to_polyline((1.0, 1.0), [], []) == (0.0, 0.0)
