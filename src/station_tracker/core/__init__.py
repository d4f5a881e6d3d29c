"""Core utilities and data models for the station tracker."""

from station_tracker.core.logger import setup_logger, get_logger
from station_tracker.core.exceptions import (
    TrackerError,
    NetworkError,
    AggregateError,
    PipelineTimeoutError,
    ConfigurationError,
)
from station_tracker.core.parallel import parallel_map

__all__ = [
    "setup_logger",
    "get_logger",
    "TrackerError",
    "NetworkError",
    "AggregateError",
    "PipelineTimeoutError",
    "ConfigurationError",
    "parallel_map",
]
