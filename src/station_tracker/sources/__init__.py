"""Position sources for the tracked object."""

from station_tracker.sources.base import PositionSource, hourly_timestamps
from station_tracker.sources.wheretheiss import WhereTheIssPositionSource

__all__ = ["PositionSource", "hourly_timestamps", "WhereTheIssPositionSource"]
