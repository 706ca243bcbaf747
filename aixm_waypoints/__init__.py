"""
AIXM (Aeronautical Information Exchange Model) waypoint extraction library.

This package reads AIXM 5.1 basic messages, extracts their designated
points and rebuilds waypoints-only documents.

The main public API includes:
- AixmDocument: Parsed AIXM document
- WaypointRecord: Extracted waypoint
- WaypointCollection: Queryable list of waypoints
- WaypointExtractor / DocumentReconstructor: The two tree walkers
- DistanceUnit, distance_meters, format_distance: Distance calculations
- to_dms: Coordinate formatting
"""

from .config import AxisOrder
from .document import AixmDocument
from .exceptions import AixmError, DocumentParseError, SourceError, WaypointNotFoundError
from .models import WaypointRecord, WaypointCollection
from .parsers import WaypointExtractor, DocumentReconstructor, extract_waypoints, build_waypoint_only_document
from .utils import DistanceUnit, distance_meters, format_distance, to_dms, new_id

__version__ = '0.1.0'
__all__ = [
    'AxisOrder',
    'AixmDocument',
    'AixmError',
    'DocumentParseError',
    'SourceError',
    'WaypointNotFoundError',
    'WaypointRecord',
    'WaypointCollection',
    'WaypointExtractor',
    'DocumentReconstructor',
    'extract_waypoints',
    'build_waypoint_only_document',
    'DistanceUnit',
    'distance_meters',
    'format_distance',
    'to_dms',
    'new_id',
]
