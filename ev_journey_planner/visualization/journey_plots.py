"""
Battery-profile chart of a journey plan.
"""

import os
from typing import List, Optional, Tuple

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from ev_journey_planner.charging.energy import percentage_used
from ev_journey_planner.planner.segments import JourneyPlan, SegmentStatus

STATUS_COLORS = {
    SegmentStatus.REQUIRED: "#F44336",
    SegmentStatus.OPTIONAL: "#4CAF50",
    SegmentStatus.UNREACHABLE: "#9E9E9E",
}


def battery_trace(plan: JourneyPlan) -> List[Tuple[float, float]]:
    """
    (km, battery %) points from the start to the destination.

    A required stop contributes two points at the same km: arrival and departure.
    """
    if plan.start_battery_pct is None:
        return []
    points = [(0.0, plan.start_battery_pct)]
    battery = plan.start_battery_pct
    for seg in plan.segments:
        points.append((seg.distance_from_start_km, seg.arrival_battery_pct))
        battery = seg.arrival_battery_pct
        if seg.status is SegmentStatus.REQUIRED:
            points.append((seg.distance_from_start_km, seg.departure_charge_pct))
            battery = seg.departure_charge_pct

    if plan.segments and plan.profile is not None:
        last = plan.segments[-1]
        end_km = last.distance_from_start_km + last.distance_to_next_km
        end_pct = max(0.0, battery - percentage_used(last.distance_to_next_km, plan.profile))
        points.append((end_km, end_pct))
    return points


def plot_battery_profile(plan: JourneyPlan, output_path: str,
                         title: Optional[str] = None) -> str:
    """Save a battery % vs km chart of the plan and return the file path."""
    trace = battery_trace(plan)
    if not trace:
        raise ValueError("Plan has no start battery level to plot")

    km = np.array([p[0] for p in trace])
    pct = np.array([p[1] for p in trace])

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(km, pct, "-", color="#2196F3", linewidth=1.8, label="Battery")
    ax.fill_between(km, 0, pct, color="#2196F3", alpha=0.08)

    for status, color in STATUS_COLORS.items():
        segs = [s for s in plan.segments if s.status is status]
        if not segs:
            continue
        ax.scatter(
            [s.distance_from_start_km for s in segs],
            [s.arrival_battery_pct for s in segs],
            color=color, s=50, zorder=3,
            label=f"{status.value.capitalize()} ({len(segs)})",
        )
        if status is SegmentStatus.REQUIRED:
            for s in segs:
                ax.annotate(
                    f"{s.charging_time_minutes} min",
                    xy=(s.distance_from_start_km, s.departure_charge_pct),
                    xytext=(0, 6), textcoords="offset points",
                    ha="center", fontsize=8,
                )

    ax.set_xlabel("Distance from start (km)")
    ax.set_ylabel("Battery (%)")
    ax.set_ylim(0, 105)
    ax.set_title(title or "Battery Profile Along Route")
    ax.legend(loc="upper right")
    ax.grid(alpha=0.3)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
