"""Widget timeline entries built from enriched positions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from station_tracker.core.logger import get_logger
from station_tracker.core.parallel import parallel_map
from station_tracker.core.samples import sample_positions
from station_tracker.core.types import EnrichedPosition

logger = get_logger("presentation.timeline")

# (coordinate, span in degrees, size in points) -> encoded image
Snapshotter = Callable[[Tuple[float, float], float, Tuple[int, int]], Awaitable[bytes]]

SNAPSHOT_SPAN_DEGREES = 20.0


class WidgetFamily(Enum):
    """Widget sizes; accessory families only have room for text."""

    ACCESSORY_CIRCULAR = "accessory_circular"
    ACCESSORY_CORNER = "accessory_corner"
    ACCESSORY_INLINE = "accessory_inline"
    ACCESSORY_RECTANGULAR = "accessory_rectangular"
    SYSTEM_SMALL = "system_small"
    SYSTEM_MEDIUM = "system_medium"
    SYSTEM_LARGE = "system_large"
    SYSTEM_EXTRA_LARGE = "system_extra_large"

    @property
    def is_accessory(self) -> bool:
        return self.value.startswith("accessory")


DISPLAY_SIZES = {
    WidgetFamily.SYSTEM_SMALL: (170, 170),
    WidgetFamily.SYSTEM_MEDIUM: (364, 170),
    WidgetFamily.SYSTEM_LARGE: (364, 382),
    WidgetFamily.SYSTEM_EXTRA_LARGE: (715, 382),
}


class EntryKind(Enum):
    TEXT = "text"
    MAP = "map"


@dataclass(frozen=True)
class TimelineEntry:
    """A timeline entry shown at the time of its position."""

    kind: EntryKind
    position: EnrichedPosition
    image: Optional[bytes] = None

    @property
    def id(self) -> int:
        return self.position.id

    @property
    def date(self) -> datetime:
        return self.position.date


def inline_text(position: EnrichedPosition) -> str:
    return f"ISS over {position.location_name}"


async def make_entry(
    position: EnrichedPosition,
    family: WidgetFamily,
    snapshotter: Optional[Snapshotter] = None,
) -> TimelineEntry:
    """
    Build the entry for one position.

    Accessory families get a text entry. System families get a map entry;
    a missing or failing snapshotter leaves the image empty.
    """
    if family.is_accessory:
        return TimelineEntry(EntryKind.TEXT, position)

    if snapshotter is None:
        return TimelineEntry(EntryKind.MAP, position, b"")

    try:
        image = await snapshotter(
            position.coordinate,
            SNAPSHOT_SPAN_DEGREES,
            DISPLAY_SIZES[family],
        )
    except Exception as e:
        logger.warning(f"Map snapshot for {position.location_name} failed: {e}")
        image = b""
    return TimelineEntry(EntryKind.MAP, position, image)


async def make_timeline(
    positions: Sequence[EnrichedPosition],
    family: WidgetFamily,
    snapshotter: Optional[Snapshotter] = None,
) -> List[TimelineEntry]:
    """
    Build timeline entries for every position, rendering snapshots concurrently.

    Args:
        positions: Enriched positions in chronological order
        family: Widget family being rendered
        snapshotter: Optional async map renderer

    Returns:
        Entries in the same order as ``positions``
    """
    return await parallel_map(
        positions,
        lambda position: make_entry(position, family, snapshotter),
    )


def placeholder_entry() -> TimelineEntry:
    return TimelineEntry(EntryKind.TEXT, sample_positions()[0])
