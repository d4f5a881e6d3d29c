"""Reverse geocoding for tracked positions."""

from station_tracker.geocoding.base import Geocoder, Placemark, PlaceResolver
from station_tracker.geocoding.nominatim import NominatimGeocoder

__all__ = ["Geocoder", "Placemark", "PlaceResolver", "NominatimGeocoder"]
