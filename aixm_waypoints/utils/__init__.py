"""
Utility functions for identifiers, distances and coordinate formatting.
"""

from .identifier import new_id, new_feature_id
from .geodesic import (
    EARTH_RADIUS_M,
    DistanceUnit,
    UNIT_CONVERSIONS,
    distance_meters,
    convert_distance,
    format_distance,
    midpoint,
)
from .coordinates import to_dms

__all__ = [
    'new_id',
    'new_feature_id',
    'EARTH_RADIUS_M',
    'DistanceUnit',
    'UNIT_CONVERSIONS',
    'distance_meters',
    'convert_distance',
    'format_distance',
    'midpoint',
    'to_dms',
]
