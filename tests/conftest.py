"""Pytest configuration and fixtures for station_tracker tests."""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Tuple

import httpx
import pytest

from station_tracker.core.samples import sample_positions
from station_tracker.core.types import RawPosition
from station_tracker.geocoding.base import Geocoder, Placemark
from station_tracker.sources.base import PositionSource

# 2022-11-12 16:37:12 UTC, inside the hour of the first sample
SAMPLE_START = datetime(2022, 11, 12, 16, 37, 12, tzinfo=timezone.utc)


class StubPositionSource(PositionSource):
    """Position source returning canned positions."""

    name = "stub"

    def __init__(self, positions: List[RawPosition], error: Exception | None = None):
        super().__init__(catalog_id=25544)
        self.positions = positions
        self.error = error
        self.requests: List[List[float]] = []

    async def fetch_timestamps(self, timestamps: List[float]) -> List[RawPosition]:
        self.requests.append(timestamps)
        if self.error is not None:
            raise self.error
        return self.positions[: len(timestamps)]


class StubGeocoder(Geocoder):
    """Geocoder answering from a table, with optional per-coordinate latency."""

    def __init__(
        self,
        names: Dict[Tuple[float, float], str],
        delays: Dict[Tuple[float, float], float] | None = None,
    ):
        self.names = names
        self.delays = delays or {}
        self.calls: List[Tuple[float, float]] = []
        self.completed: List[Tuple[float, float]] = []

    async def reverse(self, latitude: float, longitude: float) -> List[Placemark]:
        key = (latitude, longitude)
        self.calls.append(key)
        await asyncio.sleep(self.delays.get(key, 0))
        self.completed.append(key)
        name = self.names.get(key)
        return [Placemark(name=name)] if name else []


@pytest.fixture
def sample_start():
    """Provide an instant inside the hour of the first sample."""
    return SAMPLE_START


@pytest.fixture
def stub_source():
    """Provide a factory for canned position sources."""
    return StubPositionSource


@pytest.fixture
def stub_geocoder():
    """Provide a factory for table-driven geocoders."""
    return StubGeocoder


@pytest.fixture
def mock_client():
    """Provide a factory for async clients answered by a handler function."""

    def make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return make


@pytest.fixture
def sample_enriched():
    """Provide the ten bundled enriched positions."""
    return sample_positions()


@pytest.fixture
def sample_raw(sample_enriched):
    """Provide the bundled positions without place names."""
    return [item.position for item in sample_enriched]


@pytest.fixture
def positions_payload(sample_raw):
    """Provide the first three positions as the service's JSON payload."""
    return [position.to_dict() for position in sample_raw[:3]]


@pytest.fixture
def place_names(sample_enriched):
    """Map the first three coordinates to their known place names."""
    return {item.coordinate: item.location_name for item in sample_enriched[:3]}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
