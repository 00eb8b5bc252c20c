"""visualization – battery-profile chart of a journey plan."""

from .journey_plots import battery_trace, plot_battery_profile

__all__ = ["battery_trace", "plot_battery_profile"]
