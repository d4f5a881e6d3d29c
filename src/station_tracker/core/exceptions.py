"""Custom exceptions for the station tracking pipeline."""


class TrackerError(Exception):
    """Base exception for all tracker errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class NetworkError(TrackerError):
    """Exception raised when the position service cannot be queried or decoded."""
    pass


class AggregateError(TrackerError):
    """Exception raised when any transform of a parallel map fails."""
    pass


class PipelineTimeoutError(TrackerError):
    """Exception raised when an enrichment run exceeds its deadline."""
    pass


class ConfigurationError(TrackerError):
    """Exception raised for configuration errors."""
    pass
