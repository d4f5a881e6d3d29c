"""Reverse geocoding interfaces and the sentinel-returning place resolver."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from station_tracker.core.logger import get_logger
from station_tracker.core.types import UNKNOWN_PLACE


@dataclass(frozen=True)
class Placemark:
    """A single reverse-geocoding candidate."""

    name: str
    display_name: Optional[str] = None
    country_code: Optional[str] = None


class Geocoder(ABC):
    """Abstract base class for reverse geocoding services."""

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float) -> List[Placemark]:
        """
        Look up the places at a coordinate.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            Candidates ranked best first, empty when nothing matches
        """
        pass


class PlaceResolver:
    """Resolves coordinates to a display name, falling back to ``"Unknown"``."""

    def __init__(self, geocoder: Geocoder, timeout: Optional[float] = 10.0):
        """
        Initialize the resolver.

        Args:
            geocoder: Reverse geocoding backend
            timeout: Per-lookup timeout in seconds, None to wait indefinitely
        """
        self.geocoder = geocoder
        self.timeout = timeout
        self.logger = get_logger("geocoding.resolver")

    async def resolve_name(self, latitude: float, longitude: float) -> str:
        """
        Name of the best place candidate at a coordinate.

        Never raises for lookup failures: errors, timeouts and empty results
        all yield ``UNKNOWN_PLACE``.
        """
        try:
            candidates = await asyncio.wait_for(
                self.geocoder.reverse(latitude, longitude),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            self.logger.warning(
                f"Geocoding ({latitude:.3f}, {longitude:.3f}) timed out after {self.timeout}s"
            )
            return UNKNOWN_PLACE
        except Exception as e:
            self.logger.warning(f"Geocoding ({latitude:.3f}, {longitude:.3f}) failed: {e}")
            return UNKNOWN_PLACE

        if not candidates or not candidates[0].name:
            self.logger.debug(f"No place found at ({latitude:.3f}, {longitude:.3f})")
            return UNKNOWN_PLACE

        return candidates[0].name
