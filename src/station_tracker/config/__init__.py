"""Configuration management for the station tracker."""

from station_tracker.config.settings import (
    ConfigManager,
    create_default_config,
    load_config,
)

__all__ = ["ConfigManager", "create_default_config", "load_config"]
