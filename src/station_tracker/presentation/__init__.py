"""Presentation adapters consuming enriched positions."""

from station_tracker.presentation.annotations import (
    Annotation,
    MeasurementSystem,
    make_annotations,
)
from station_tracker.presentation.fallback import positions_or_samples
from station_tracker.presentation.timeline import (
    EntryKind,
    TimelineEntry,
    WidgetFamily,
    make_timeline,
    placeholder_entry,
)

__all__ = [
    "Annotation",
    "MeasurementSystem",
    "make_annotations",
    "positions_or_samples",
    "EntryKind",
    "TimelineEntry",
    "WidgetFamily",
    "make_timeline",
    "placeholder_entry",
]
