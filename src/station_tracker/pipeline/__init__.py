"""Enrichment pipeline for tracked positions."""

from station_tracker.pipeline.enrichment import EnrichmentPipeline, open_pipeline

__all__ = ["EnrichmentPipeline", "open_pipeline"]
