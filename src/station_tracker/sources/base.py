"""Base class for position sources."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from station_tracker.core.logger import get_logger
from station_tracker.core.types import RawPosition

SECONDS_PER_HOUR = 3600


def top_of_hour(moment: datetime) -> datetime:
    """Truncate a datetime to the start of its hour, keeping its timezone."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.replace(minute=0, second=0, microsecond=0)


def hourly_timestamps(starting_at: datetime, count: int) -> List[float]:
    """
    Unix timestamps for ``count`` consecutive hours.

    The first timestamp is the top of the hour containing ``starting_at``;
    each following one is exactly one hour later.

    Args:
        starting_at: Instant inside the first hour
        count: Number of timestamps

    Returns:
        List of epoch seconds
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    first = top_of_hour(starting_at).timestamp()
    return [first + index * SECONDS_PER_HOUR for index in range(count)]


class PositionSource(ABC):
    """Abstract base class for fetching batches of timestamped positions."""

    name = "base"

    def __init__(self, catalog_id: int):
        """
        Initialize the position source.

        Args:
            catalog_id: Catalog number of the tracked object
        """
        self.catalog_id = catalog_id
        self.logger = get_logger(f"sources.{self.name}")

    @abstractmethod
    async def fetch_timestamps(self, timestamps: List[float]) -> List[RawPosition]:
        """
        Fetch the positions at the given instants in a single request.

        Args:
            timestamps: Epoch seconds, strictly increasing

        Returns:
            One position per timestamp, in the same order

        Raises:
            NetworkError: If the request fails or the response cannot be decoded
        """
        pass

    async def fetch_positions(
        self,
        starting_at: Optional[datetime] = None,
        count: int = 10,
    ) -> List[RawPosition]:
        """
        Fetch ``count`` hourly positions starting at the top of the current hour.

        Args:
            starting_at: Instant inside the first hour, now when omitted
            count: Number of hourly samples

        Returns:
            Positions in chronological order
        """
        if starting_at is None:
            starting_at = datetime.now().astimezone()

        timestamps = hourly_timestamps(starting_at, count)
        if not timestamps:
            return []

        first = datetime.fromtimestamp(timestamps[0]).astimezone()
        self.logger.info(
            f"Requesting {count} hourly positions for #{self.catalog_id} "
            f"from {first:%Y-%m-%d %H:%M %Z}"
        )
        return await self.fetch_timestamps(timestamps)
