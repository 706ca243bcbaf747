"""
Data models for the aixm_waypoints library.
"""

from .waypoint import WaypointRecord
from .queryable_collection import QueryableCollection
from .waypoint_collection import WaypointCollection

__all__ = [
    'WaypointRecord',
    'QueryableCollection',
    'WaypointCollection',
]
