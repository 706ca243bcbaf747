"""
Extraction of waypoint records from an AIXM basic message tree.
"""

import logging
import math
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from ..config import AXIS_ORDER, MISSING_DESIGNATOR, AxisOrder
from ..models.waypoint import WaypointRecord
from ..utils.identifier import new_id
from .schema import (
    DESIGNATED_POINT, DESIGNATED_POINT_TIME_SLICE, DESIGNATOR, ENVELOPE,
    HAS_MEMBER, POSITION_PATH, TIME_SLICE,
)
from .tree import as_list, get_path, resolve_text

logger = logging.getLogger(__name__)


def iter_designated_points(doc: Any) -> Iterator[Any]:
    """Yield every DesignatedPoint of the document in document order."""
    root = get_path(doc, ENVELOPE)
    for member in as_list(get_path(root, HAS_MEMBER)):
        yield from as_list(get_path(member, DESIGNATED_POINT))


def iter_time_slices(point: Any) -> Iterator[Any]:
    """
    Yield every DesignatedPointTimeSlice of a point.

    Both the aixm:timeSlice property and the slice inside it can be
    repeated.
    """
    for wrapper in as_list(get_path(point, TIME_SLICE)):
        yield from as_list(get_path(wrapper, DESIGNATED_POINT_TIME_SLICE))


def position_text(time_slice: Any) -> Optional[str]:
    """Text of the gml:pos of a time slice, or None if absent."""
    return resolve_text(get_path(time_slice, *POSITION_PATH))


def parse_position(text: Optional[str], axis_order: AxisOrder = AxisOrder.LAT_LON) -> Optional[Tuple[float, float]]:
    """
    Parse a gml:pos text into (latitude, longitude).

    Only the first two whitespace separated tokens are used.

    Returns:
        (lat, lon) or None when there are fewer than two tokens or a token
        is not a finite number
    """
    if text is None:
        return None
    tokens = text.split()
    if len(tokens) < 2:
        return None
    try:
        first, second = float(tokens[0]), float(tokens[1])
    except ValueError:
        return None
    if not (math.isfinite(first) and math.isfinite(second)):
        return None
    if axis_order is AxisOrder.LON_LAT:
        return second, first
    return first, second


class WaypointExtractor:
    """
    Builds the flat list of WaypointRecord from a parsed document.

    Missing or malformed structure at any level contributes no records;
    extraction never raises for document content.
    """

    def __init__(self,
                 axis_order: Union[AxisOrder, str] = AXIS_ORDER,
                 id_factory: Callable[[], str] = new_id,
                 missing_designator: str = MISSING_DESIGNATOR):
        """
        Args:
            axis_order: Order of the numbers in gml:pos
            id_factory: Called once per record to get its id
            missing_designator: Designator used when a slice has none
        """
        self.axis_order = AxisOrder.parse(axis_order)
        self.id_factory = id_factory
        self.missing_designator = missing_designator

    def extract(self, doc: Any) -> List[WaypointRecord]:
        """
        Extract one record per time slice with a valid position.

        Args:
            doc: Generic tree as produced by xmltodict

        Returns:
            Records in document order (member, point, then slice order)
        """
        records = []
        skipped = 0
        for point in iter_designated_points(doc):
            for time_slice in iter_time_slices(point):
                record = self._record_from_slice(time_slice)
                if record is None:
                    skipped += 1
                    continue
                records.append(record)

        if skipped:
            logger.debug(f"Skipped {skipped} time slices without a valid position")
        logger.info(f"Extracted {len(records)} waypoints")
        return records

    def _record_from_slice(self, time_slice: Any) -> Optional[WaypointRecord]:
        position = parse_position(position_text(time_slice), self.axis_order)
        if position is None:
            return None
        lat, lon = position
        designator = resolve_text(get_path(time_slice, DESIGNATOR)) or self.missing_designator
        return WaypointRecord(
            id=self.id_factory(),
            designator=designator,
            lat=lat,
            lon=lon
        )


def extract_waypoints(doc: Any, **kwargs) -> List[WaypointRecord]:
    """Extract waypoints with a WaypointExtractor built from kwargs."""
    return WaypointExtractor(**kwargs).extract(doc)
