import sys

from ev_journey_planner.cli import main

sys.exit(main())
