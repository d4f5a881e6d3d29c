"""Position source backed by the wheretheiss.at REST API."""

from typing import List

import httpx

from station_tracker.core.exceptions import NetworkError
from station_tracker.core.types import RawPosition, Units
from station_tracker.sources.base import PositionSource


class WhereTheIssPositionSource(PositionSource):
    """Fetches satellite positions from https://wheretheiss.at."""

    name = "wheretheiss"
    BASE_URL = "https://api.wheretheiss.at/v1"

    def __init__(
        self,
        client: httpx.AsyncClient,
        catalog_id: int = 25544,
        base_url: str = BASE_URL,
    ):
        """
        Initialize the wheretheiss.at source.

        Args:
            client: Shared async HTTP client
            catalog_id: Catalog number of the tracked object
            base_url: API root, without trailing slash
        """
        super().__init__(catalog_id)
        self.client = client
        self.base_url = base_url.rstrip("/")

    @property
    def positions_url(self) -> str:
        return f"{self.base_url}/satellites/{self.catalog_id}/positions"

    async def fetch_timestamps(self, timestamps: List[float]) -> List[RawPosition]:
        """
        Fetch positions for the given timestamps with one GET request.

        Args:
            timestamps: Epoch seconds, strictly increasing

        Returns:
            Decoded positions, one per requested timestamp and in request order

        Raises:
            NetworkError: If the request fails or the answer does not match
                the requested timestamps
        """
        params = {
            "units": Units.KILOMETERS.value,
            "timestamps": ",".join(repr(float(ts)) for ts in timestamps),
        }

        try:
            response = await self.client.get(self.positions_url, params=params)
        except httpx.InvalidURL as e:
            raise NetworkError(
                "Invalid position service URL",
                details={"error": str(e), "url": self.positions_url},
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(
                "Failed to reach position service",
                details={"error": str(e), "url": self.positions_url},
            ) from e

        if not response.is_success:
            raise NetworkError(
                f"Position service returned HTTP {response.status_code}",
                details={"status_code": response.status_code, "url": str(response.url)},
            )

        positions = self._decode(response)
        if len(positions) != len(timestamps):
            raise NetworkError(
                f"Expected {len(timestamps)} positions, received {len(positions)}",
                details={"requested": len(timestamps), "received": len(positions)},
            )

        received = [position.timestamp for position in positions]
        if received != [float(ts) for ts in timestamps]:
            raise NetworkError(
                "Position service answered for different timestamps",
                details={"requested": list(timestamps), "received": received},
            )

        self.logger.debug(f"Decoded {len(positions)} positions")
        return positions

    def _decode(self, response: httpx.Response) -> List[RawPosition]:
        try:
            payload = response.json()
            if not isinstance(payload, list):
                raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
            return [RawPosition.from_dict(item) for item in payload]
        except (ValueError, KeyError, TypeError) as e:
            raise NetworkError(
                "Failed to decode position service response",
                details={"error": str(e), "url": str(response.url)},
            ) from e
