"""Map annotations built from enriched positions."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from station_tracker.core.types import EnrichedPosition


class MeasurementSystem(Enum):
    """Unit system used when formatting distances and speeds."""

    METRIC = "metric"
    IMPERIAL = "imperial"


def format_altitude(position: EnrichedPosition, system: MeasurementSystem) -> str:
    if system is MeasurementSystem.IMPERIAL:
        return f"{position.altitude_miles:,.0f} mi"
    return f"{position.altitude_km:,.0f} km"


def format_velocity(position: EnrichedPosition, system: MeasurementSystem) -> str:
    if system is MeasurementSystem.IMPERIAL:
        return f"{position.velocity_mph:,.0f} mph"
    return f"{position.velocity_kmh:,.0f} km/h"


def hour_label(moment: datetime) -> str:
    """Hour of day on a 12-hour clock, e.g. ``"4 PM"``."""
    hour = moment.hour % 12 or 12
    return f"{hour} {'AM' if moment.hour < 12 else 'PM'}"


@dataclass(frozen=True)
class Annotation:
    """One map pin with preformatted labels."""

    coordinate: Tuple[float, float]
    name: str
    time: str
    altitude: str
    velocity: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def make_annotation(
    position: EnrichedPosition,
    system: MeasurementSystem = MeasurementSystem.METRIC,
    tz: Optional[tzinfo] = None,
) -> Annotation:
    return Annotation(
        coordinate=position.coordinate,
        name=position.location_name,
        time=hour_label(position.local_time(tz)),
        altitude=format_altitude(position, system),
        velocity=format_velocity(position, system),
    )


def make_annotations(
    positions: Sequence[EnrichedPosition],
    system: MeasurementSystem = MeasurementSystem.METRIC,
    tz: Optional[tzinfo] = None,
) -> List[Annotation]:
    """
    Convert enriched positions into map annotations, keeping their order.

    Args:
        positions: Enriched positions in chronological order
        system: Unit system for altitude and velocity labels
        tz: Timezone for the time label, local time when omitted

    Returns:
        One annotation per position
    """
    return [make_annotation(position, system, tz) for position in positions]
