"""Type definitions and data models for the station tracker."""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any, Dict, Optional, Tuple

KILOMETERS_PER_MILE = 1.609344

UNKNOWN_PLACE = "Unknown"


class Visibility(Enum):
    """Illumination state of the tracked object."""

    DAYLIGHT = "daylight"
    ECLIPSED = "eclipsed"
    VISIBLE = "visible"  # daylight on the object, night at the ground track


class Units(Enum):
    """Unit system reported by the position service."""

    MILES = "miles"
    KILOMETERS = "kilometers"


def km_to_miles(kilometers: float) -> float:
    return kilometers / KILOMETERS_PER_MILE


def miles_to_km(miles: float) -> float:
    return miles * KILOMETERS_PER_MILE


@dataclass(frozen=True)
class RawPosition:
    """One sample of the tracked object at one instant."""

    name: str
    id: int  # catalog id
    latitude: float  # degrees
    longitude: float  # degrees
    altitude: float  # kilometers
    velocity: float  # kilometers/hour
    visibility: Visibility
    footprint: float  # kilometers
    timestamp: float  # unix seconds
    daynum: float  # fractional julian day
    solar_lat: float  # degrees
    solar_lon: float  # degrees
    units: Units = Units.KILOMETERS

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawPosition":
        """
        Build a position from one object of the service's JSON payload.

        Args:
            data: Decoded JSON object

        Returns:
            RawPosition instance

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong type or range
        """
        return cls(
            name=str(data["name"]),
            id=int(data["id"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            altitude=float(data["altitude"]),
            velocity=float(data["velocity"]),
            visibility=Visibility(data["visibility"]),
            footprint=float(data["footprint"]),
            timestamp=float(data["timestamp"]),
            daynum=float(data["daynum"]),
            solar_lat=float(data["solar_lat"]),
            solar_lon=float(data["solar_lon"]),
            units=Units(data.get("units", Units.KILOMETERS.value)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
            "velocity": self.velocity,
            "visibility": self.visibility.value,
            "footprint": self.footprint,
            "timestamp": self.timestamp,
            "daynum": self.daynum,
            "solar_lat": self.solar_lat,
            "solar_lon": self.solar_lon,
            "units": self.units.value,
        }

    @property
    def coordinate(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    @property
    def altitude_km(self) -> float:
        if self.units is Units.MILES:
            return miles_to_km(self.altitude)
        return self.altitude

    @property
    def altitude_miles(self) -> float:
        return km_to_miles(self.altitude_km)

    @property
    def velocity_kmh(self) -> float:
        if self.units is Units.MILES:
            return miles_to_km(self.velocity)
        return self.velocity

    @property
    def velocity_mph(self) -> float:
        return km_to_miles(self.velocity_kmh)

    @property
    def date(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def local_time(self, tz: Optional[tzinfo] = None) -> datetime:
        """Sample time in ``tz``, or in the machine's local zone when omitted."""
        return self.date.astimezone(tz)


@dataclass(frozen=True)
class EnrichedPosition:
    """A position tagged with the place name found beneath it."""

    position: RawPosition
    location_name: str = UNKNOWN_PLACE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnrichedPosition":
        return cls(
            position=RawPosition.from_dict(data["spaceStationLocation"]),
            location_name=str(data.get("locationName") or UNKNOWN_PLACE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spaceStationLocation": self.position.to_dict(),
            "locationName": self.location_name,
        }

    @property
    def id(self) -> int:
        return self.position.id

    @property
    def timestamp(self) -> float:
        return self.position.timestamp

    @property
    def coordinate(self) -> Tuple[float, float]:
        return self.position.coordinate

    @property
    def altitude_km(self) -> float:
        return self.position.altitude_km

    @property
    def altitude_miles(self) -> float:
        return self.position.altitude_miles

    @property
    def velocity_kmh(self) -> float:
        return self.position.velocity_kmh

    @property
    def velocity_mph(self) -> float:
        return self.position.velocity_mph

    @property
    def date(self) -> datetime:
        return self.position.date

    def local_time(self, tz: Optional[tzinfo] = None) -> datetime:
        return self.position.local_time(tz)


@dataclass
class TrackerConfig:
    """Configuration for an enrichment run."""

    catalog_id: int = 25544
    base_url: str = "https://api.wheretheiss.at/v1"
    hourly_intervals: int = 10
    geocoder_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = "station_tracker/0.1.0"
    geocoder_zoom: int = 10
    geocoder_language: Optional[str] = "en"
    timeout_seconds: float = 10.0
    geocode_timeout_seconds: float = 10.0
    pipeline_deadline_seconds: Optional[float] = 60.0
    measurement_system: str = "metric"
