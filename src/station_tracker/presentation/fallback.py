"""Degrade to bundled sample data when the live pipeline fails."""

from datetime import datetime
from typing import List, Optional

from station_tracker.core.exceptions import TrackerError
from station_tracker.core.logger import get_logger
from station_tracker.core.samples import sample_positions
from station_tracker.core.types import EnrichedPosition
from station_tracker.pipeline.enrichment import EnrichmentPipeline

logger = get_logger("presentation.fallback")


async def positions_or_samples(
    pipeline: EnrichmentPipeline,
    starting_at: Optional[datetime] = None,
    count: int = 10,
) -> List[EnrichedPosition]:
    """
    Enriched positions from the pipeline, or the sample dataset on failure.

    Args:
        pipeline: Live enrichment pipeline
        starting_at: Instant inside the first hour, now when omitted
        count: Number of hourly samples

    Returns:
        Live positions, or the bundled samples if any tracker error occurred
    """
    try:
        return await pipeline.enrich(starting_at, count)
    except TrackerError as e:
        logger.warning(f"Live positions unavailable, showing sample data: {e}")
        return sample_positions()
