"""Reverse geocoding through OpenStreetMap Nominatim."""

from typing import List, Optional

import httpx

from station_tracker.core.exceptions import NetworkError
from station_tracker.core.logger import get_logger
from station_tracker.geocoding.base import Geocoder, Placemark


class NominatimGeocoder(Geocoder):
    """Geocoder for the Nominatim ``/reverse`` endpoint."""

    BASE_URL = "https://nominatim.openstreetmap.org"

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = BASE_URL,
        zoom: int = 10,
        language: Optional[str] = "en",
    ):
        """
        Initialize the Nominatim geocoder.

        Args:
            client: Shared async HTTP client, expected to carry a User-Agent
            base_url: Service root, without trailing slash
            zoom: Address detail level (3 country ... 18 building)
            language: Preferred language for names, None for local names
        """
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.zoom = zoom
        self.language = language
        self.logger = get_logger("geocoding.nominatim")

    async def reverse(self, latitude: float, longitude: float) -> List[Placemark]:
        params = {
            "format": "jsonv2",
            "lat": f"{latitude:.6f}",
            "lon": f"{longitude:.6f}",
            "zoom": str(self.zoom),
        }
        if self.language:
            params["accept-language"] = self.language

        try:
            response = await self.client.get(f"{self.base_url}/reverse", params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise NetworkError(
                "Reverse geocoding request failed",
                details={"error": str(e), "lat": latitude, "lon": longitude},
            ) from e

        # Open water and other unmapped areas come back as {"error": "..."}
        if not isinstance(payload, dict) or "error" in payload:
            return []

        placemark = self._parse_placemark(payload)
        return [placemark] if placemark else []

    @staticmethod
    def _parse_placemark(payload: dict) -> Optional[Placemark]:
        display_name = payload.get("display_name") or None
        name = payload.get("name") or ""
        if not name and display_name:
            name = display_name.split(",")[0].strip()
        if not name:
            return None
        return Placemark(
            name=name,
            display_name=display_name,
            country_code=(payload.get("address") or {}).get("country_code"),
        )
