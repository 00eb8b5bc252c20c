"""
EV Journey Planner - Main Entry Point
Run this file to plan the charging stops of a trip described in a JSON request.

    python main.py examples/lyon_marseille.json --plot plan.png
"""

import sys

from ev_journey_planner.cli import main


if __name__ == "__main__":
    sys.exit(main())
