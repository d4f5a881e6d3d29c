"""Location enrichment pipeline: fetch positions, then name them concurrently."""

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

import httpx

from station_tracker.core.exceptions import PipelineTimeoutError
from station_tracker.core.logger import get_logger
from station_tracker.core.parallel import parallel_map
from station_tracker.core.types import EnrichedPosition, RawPosition, TrackerConfig
from station_tracker.geocoding.base import PlaceResolver
from station_tracker.geocoding.nominatim import NominatimGeocoder
from station_tracker.sources.base import PositionSource
from station_tracker.sources.wheretheiss import WhereTheIssPositionSource


class EnrichmentPipeline:
    """Produces chronologically ordered, place-named positions."""

    def __init__(
        self,
        source: PositionSource,
        resolver: PlaceResolver,
        deadline: Optional[float] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            source: Batch position source
            resolver: Place name resolver
            deadline: Overall time limit for one run in seconds, None for no limit
        """
        self.source = source
        self.resolver = resolver
        self.deadline = deadline
        self.logger = get_logger("pipeline.enrichment")

    async def enrich(
        self,
        starting_at: Optional[datetime] = None,
        count: int = 10,
    ) -> List[EnrichedPosition]:
        """
        Fetch ``count`` hourly positions and tag each with a place name.

        Source and mapper errors propagate unchanged.

        Args:
            starting_at: Instant inside the first hour, now when omitted
            count: Number of hourly samples

        Returns:
            Enriched positions in chronological order

        Raises:
            NetworkError: If the position batch cannot be fetched
            AggregateError: If enriching any single position fails
            PipelineTimeoutError: If the run exceeds ``deadline``
        """
        if self.deadline is None:
            return await self._run(starting_at, count)

        try:
            return await asyncio.wait_for(self._run(starting_at, count), self.deadline)
        except asyncio.TimeoutError as e:
            raise PipelineTimeoutError(
                f"Enrichment did not finish within {self.deadline}s",
                details={"deadline": self.deadline, "count": count},
            ) from e

    async def _run(
        self,
        starting_at: Optional[datetime],
        count: int,
    ) -> List[EnrichedPosition]:
        positions = await self.source.fetch_positions(starting_at, count)
        self.logger.info(f"Resolving place names for {len(positions)} positions")

        enriched = await parallel_map(positions, self._tag)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                json.dumps(
                    [item.to_dict() for item in enriched],
                    indent=2,
                    sort_keys=True,
                    ensure_ascii=False,
                )
            )
        return enriched

    async def _tag(self, position: RawPosition) -> EnrichedPosition:
        name = await self.resolver.resolve_name(position.latitude, position.longitude)
        return EnrichedPosition(position=position, location_name=name)


@asynccontextmanager
async def open_pipeline(
    config: Optional[TrackerConfig] = None,
) -> AsyncIterator[EnrichmentPipeline]:
    """
    Build a live pipeline sharing one HTTP client for its lifetime.

    Args:
        config: Tracker configuration, defaults when omitted

    Yields:
        EnrichmentPipeline wired to wheretheiss.at and Nominatim
    """
    config = config or TrackerConfig()
    async with httpx.AsyncClient(
        timeout=config.timeout_seconds,
        headers={"User-Agent": config.user_agent},
        follow_redirects=True,
    ) as client:
        source = WhereTheIssPositionSource(
            client,
            catalog_id=config.catalog_id,
            base_url=config.base_url,
        )
        geocoder = NominatimGeocoder(
            client,
            base_url=config.geocoder_url,
            zoom=config.geocoder_zoom,
            language=config.geocoder_language,
        )
        resolver = PlaceResolver(geocoder, timeout=config.geocode_timeout_seconds)
        yield EnrichmentPipeline(
            source,
            resolver,
            deadline=config.pipeline_deadline_seconds,
        )
