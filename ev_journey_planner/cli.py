"""
EV Journey Planner - command line entry point.
Plan the charging stops of a trip described in a JSON request file.
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from ev_journey_planner.data import load_plan_request
from ev_journey_planner.vehicle import list_available_vehicles, lookup_vehicle


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan EV charging stops along a route",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "request", nargs="?",
        help="JSON plan request (route, stations, vehicle, start battery)"
    )

    # Vehicle / trip overrides
    parser.add_argument(
        "--vehicle", type=str, default=None,
        help="Catalog model id, overrides the request's vehicle"
    )
    parser.add_argument(
        "--battery", type=float, default=None,
        help="Starting battery percentage (1-100), overrides the request"
    )

    # Planner thresholds
    parser.add_argument(
        "--safety-margin", type=float, default=None,
        help="Battery %% kept in reserve above the next leg (default 10)"
    )
    parser.add_argument(
        "--charge-buffer", type=float, default=None,
        help="Lookahead charge buffer above the next leg in %% (default 20)"
    )
    parser.add_argument(
        "--target-floor", type=float, default=None,
        help="Minimum charge target at required stops in %% (default 80)"
    )

    # Output configuration
    parser.add_argument(
        "--csv", type=str, default=None,
        help="Write the segment table to this CSV file"
    )
    parser.add_argument(
        "--plot", type=str, default=None,
        help="Save a battery-profile chart to this PNG file"
    )
    parser.add_argument(
        "--list-vehicles", action="store_true",
        help="List the built-in vehicle catalog and exit"
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Only print the itinerary"
    )

    args = parser.parse_args(argv)
    if not args.list_vehicles and args.request is None:
        parser.error("a plan request file is required")
    return args


def print_vehicle_catalog() -> None:
    print(f"{'Model id':<22s} {'Name':<32s} {'kWh':>6s} {'km':>6s}")
    for entry in list_available_vehicles():
        print(f"{entry['model_id']:<22s} {entry['name']:<32s} "
              f"{entry['battery_capacity_kwh']:6.1f} {entry['rated_range_km']:6.0f}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = parse_args(argv)

    if args.list_vehicles:
        print_vehicle_catalog()
        return 0

    try:
        request = load_plan_request(args.request)
        if args.vehicle:
            request.profile = lookup_vehicle(args.vehicle)
        if args.battery is not None:
            request.start_battery_pct = args.battery

        overrides = {
            "safety_margin_pct": args.safety_margin,
            "fast_charge_buffer_pct": args.charge_buffer,
            "target_charge_floor_pct": args.target_floor,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            request.config = dataclasses.replace(request.config, **overrides)

        plan = request.plan()
    except ValueError as exc:
        # JourneyPlanningError and catalog lookups both surface as ValueError
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if not args.quiet:
        print("=" * 70)
        print("EV JOURNEY PLAN")
        print("=" * 70)
        print(f"Route: {request.start_label} -> {request.end_label} "
              f"({request.route_total_distance_km:.1f} km)")
        print(f"Vehicle: {request.profile.name} "
              f"({request.profile.battery_capacity_kwh:g} kWh, {request.profile.rated_range_km:g} km)")
        print(f"Stations considered: {len(request.stations)}")
        print("=" * 70)
        print()

    print(plan.summary(request.start_label, request.end_label))

    if args.csv:
        path = plan.save_csv(args.csv)
        if not args.quiet:
            print(f"\nSegment table saved to {path}")

    if args.plot:
        # Imported lazily so matplotlib is only loaded when a chart is requested
        from ev_journey_planner.visualization import plot_battery_profile
        path = plot_battery_profile(
            plan, args.plot,
            title=f"{request.start_label} -> {request.end_label}",
        )
        if not args.quiet:
            print(f"Battery profile saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
