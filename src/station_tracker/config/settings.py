"""Configuration management and settings for the station tracker."""

import copy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse
import yaml

from station_tracker.core.exceptions import ConfigurationError
from station_tracker.core.logger import LOG_LEVELS, get_logger
from station_tracker.core.types import TrackerConfig

MEASUREMENT_SYSTEMS = ("metric", "imperial")

DEFAULTS: Dict[str, Any] = {
    "tracker": {
        "catalog_id": 25544,
        "base_url": "https://api.wheretheiss.at/v1",
        "hourly_intervals": 10,
    },
    "geocoding": {
        "base_url": "https://nominatim.openstreetmap.org",
        "user_agent": "station_tracker/0.1.0",
        "zoom": 10,
        "language": "en",
    },
    "network": {
        "timeout_seconds": 10.0,
        "geocode_timeout_seconds": 10.0,
        "pipeline_deadline_seconds": 60.0,
    },
    "display": {
        "measurement_system": "metric",
    },
    "logging": {
        "level": "INFO",
        "log_file": None,
    },
}


class ConfigManager:
    """Manages configuration for the station tracker."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to configuration file
        """
        self.logger = get_logger("config.manager")
        self.config_path = config_path
        self._config: Dict[str, Any] = {}

        if config_path and config_path.exists():
            self.load_from_file(config_path)
        else:
            self._load_defaults()

    def _load_defaults(self):
        """Load default configuration."""
        self._config = copy.deepcopy(DEFAULTS)

    def load_from_file(self, config_path: Path):
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration file
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        self._load_defaults()
        self.config_path = config_path

        if file_config is None:
            self.logger.warning(f"Empty configuration file: {config_path}")
            return
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a mapping",
                details={"type": type(file_config).__name__},
            )

        self._deep_update(self._config, file_config)
        self.logger.info(f"Loaded configuration from {config_path}")

    def save_to_file(self, config_path: Optional[Path] = None):
        """
        Save configuration to YAML file.

        Args:
            config_path: Optional path to save configuration
        """
        if config_path is None:
            config_path = self.config_path

        if config_path is None:
            raise ConfigurationError("No configuration path specified")

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, indent=2)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to save configuration to {config_path}: {e}"
            ) from e

        self.config_path = config_path
        self.logger.info(f"Saved configuration to {config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "tracker.catalog_id")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self._config

        try:
            for k in key.split("."):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "network.timeout_seconds")
            value: Value to set
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def _number(self, key: str, default: Any, cast: Callable[[Any], Any]) -> Any:
        value = self.get(key, default)
        try:
            return cast(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r}",
                details={"key": key, "value": value},
            ) from e

    def get_tracker_config(self) -> TrackerConfig:
        """
        Get TrackerConfig object from configuration.

        Returns:
            TrackerConfig instance

        Raises:
            ConfigurationError: If a numeric setting cannot be converted
        """
        defaults = TrackerConfig()
        deadline = self.get("network.pipeline_deadline_seconds")

        return TrackerConfig(
            catalog_id=self._number("tracker.catalog_id", defaults.catalog_id, int),
            base_url=self.get("tracker.base_url", defaults.base_url),
            hourly_intervals=self._number(
                "tracker.hourly_intervals", defaults.hourly_intervals, int
            ),
            geocoder_url=self.get("geocoding.base_url", defaults.geocoder_url),
            user_agent=self.get("geocoding.user_agent", defaults.user_agent),
            geocoder_zoom=self._number("geocoding.zoom", defaults.geocoder_zoom, int),
            geocoder_language=self.get("geocoding.language", defaults.geocoder_language),
            timeout_seconds=self._number(
                "network.timeout_seconds", defaults.timeout_seconds, float
            ),
            geocode_timeout_seconds=self._number(
                "network.geocode_timeout_seconds", defaults.geocode_timeout_seconds, float
            ),
            pipeline_deadline_seconds=(
                self._number("network.pipeline_deadline_seconds", None, float)
                if deadline is not None
                else None
            ),
            measurement_system=self.get(
                "display.measurement_system", defaults.measurement_system
            ),
        )

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages
        """
        issues = []

        catalog_id = self.get("tracker.catalog_id")
        if not isinstance(catalog_id, int) or catalog_id < 1:
            issues.append("tracker.catalog_id must be a positive integer")

        intervals = self.get("tracker.hourly_intervals")
        if not isinstance(intervals, int) or intervals < 0:
            issues.append("tracker.hourly_intervals must be a non-negative integer")

        for key in ("tracker.base_url", "geocoding.base_url"):
            parsed = urlparse(str(self.get(key, "")))
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                issues.append(f"{key} must be an http(s) URL")

        if not self.get("geocoding.user_agent"):
            issues.append("geocoding.user_agent must be set")

        for key in ("network.timeout_seconds", "network.geocode_timeout_seconds"):
            value = self.get(key)
            if not isinstance(value, (int, float)) or value <= 0:
                issues.append(f"{key} must be a positive number")

        deadline = self.get("network.pipeline_deadline_seconds")
        if deadline is not None and (
            not isinstance(deadline, (int, float)) or deadline <= 0
        ):
            issues.append("network.pipeline_deadline_seconds must be positive or null")

        if self.get("display.measurement_system") not in MEASUREMENT_SYSTEMS:
            issues.append(
                f"display.measurement_system must be one of {', '.join(MEASUREMENT_SYSTEMS)}"
            )

        if str(self.get("logging.level", "")).upper() not in LOG_LEVELS:
            issues.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

        return issues

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Recursively update nested dictionaries."""
        for key, value in update_dict.items():
            if (
                key in base_dict
                and isinstance(base_dict[key], dict)
                and isinstance(value, dict)
            ):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def to_dict(self) -> dict:
        """Return configuration as dictionary."""
        return copy.deepcopy(self._config)

    def __repr__(self) -> str:
        return f"ConfigManager(config_path={self.config_path})"


def load_config(config_path: Path) -> ConfigManager:
    """
    Load configuration from file.

    Args:
        config_path: Path to configuration file

    Returns:
        ConfigManager instance
    """
    return ConfigManager(config_path)


def create_default_config(config_path: Path) -> ConfigManager:
    """
    Create a default configuration file.

    Args:
        config_path: Path where to save the configuration

    Returns:
        ConfigManager instance with defaults
    """
    manager = ConfigManager()
    manager.save_to_file(config_path)
    return manager
