"""
Unit tests for the battery-profile chart.
"""

import pytest

from ev_journey_planner.charging.station import Connector, Station
from ev_journey_planner.planner.journey import plan_journey
from ev_journey_planner.planner.segments import JourneyPlan
from ev_journey_planner.visualization import battery_trace, plot_battery_profile


@pytest.fixture
def plan(ten_km_per_pct):
    stations = [
        Station("a", "A", (4.8, 45.0), distance_from_start_km=80.0,
                connectors=(Connector("CCS", 50.0),)),
        Station("b", "B", (4.9, 44.0), distance_from_start_km=280.0,
                connectors=(Connector("CCS", 50.0),)),
    ]
    return plan_journey(stations, ten_km_per_pct, 20.0, 300.0)


class TestBatteryTrace:
    def test_points(self, plan):
        trace = battery_trace(plan)
        kms = [p[0] for p in trace]
        pcts = [p[1] for p in trace]
        # start, arrival + departure at the required stop, optional stop, destination
        assert kms == pytest.approx([0.0, 80.0, 80.0, 280.0, 300.0])
        assert pcts == pytest.approx([20.0, 12.0, 80.0, 60.0, 58.0])

    def test_plan_without_context(self):
        assert battery_trace(JourneyPlan()) == []


class TestPlotBatteryProfile:
    def test_writes_png(self, plan, tmp_path):
        path = plot_battery_profile(plan, str(tmp_path / "charts" / "profile.png"), title="Test")
        assert path.endswith("profile.png")
        assert (tmp_path / "charts" / "profile.png").stat().st_size > 0

    def test_plan_without_context_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            plot_battery_profile(JourneyPlan(), str(tmp_path / "x.png"))
