"""Station Tracker - place-named position forecasts for an orbiting object."""

__version__ = "0.1.0"

from station_tracker.core.logger import setup_logger

__all__ = ["__version__", "setup_logger"]
