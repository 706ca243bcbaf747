#!/usr/bin/env python3

"""
Great circle distance between two points and conversion to display units.

All distances are computed in meters on a sphere of radius 6 371 000 m
and converted afterwards.
"""

import math
from enum import Enum
from typing import Dict, Tuple, Union

EARTH_RADIUS_M = 6371000


class DistanceUnit(Enum):
    """Units a distance can be displayed in."""

    KILOMETERS = "km"
    NAUTICAL_MILES = "nm"
    FEET = "ft"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union['DistanceUnit', str]) -> 'DistanceUnit':
        """
        Get a unit from its code ('km', 'nm', 'ft'), case-insensitive.

        Raises:
            ValueError: If the unit is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Unknown distance unit: {value}. Expected one of {valid}")

    @property
    def label(self) -> str:
        return UNIT_CONVERSIONS[self][2]


# unit -> (multiplier applied to meters, decimal places, label)
UNIT_CONVERSIONS: Dict[DistanceUnit, Tuple[float, int, str]] = {
    DistanceUnit.KILOMETERS: (1 / 1000, 2, "Km"),
    DistanceUnit.NAUTICAL_MILES: (1 / 1852, 2, "NM"),
    DistanceUnit.FEET: (3.28084, 0, "ft"),
}


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points using the Haversine formula.

    Args:
        lat1, lon1: First point in decimal degrees
        lat2, lon2: Second point in decimal degrees

    Returns:
        Distance in meters

    Note:
        Inputs are not range checked; values outside [-90, 90] / [-180, 180]
        are computed as given.
    """
    # Convert to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # Haversine formula
    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def convert_distance(meters: float, unit: Union[DistanceUnit, str]) -> float:
    """Convert a distance in meters to the given unit, without rounding."""
    multiplier, _, _ = UNIT_CONVERSIONS[DistanceUnit.parse(unit)]
    return meters * multiplier


def format_distance(meters: float, unit: Union[DistanceUnit, str], with_label: bool = False) -> str:
    """
    Format a distance in meters for display in the given unit.

    Examples:
        format_distance(111194.93, 'km') -> '111.19'
        format_distance(111194.93, 'nm', with_label=True) -> '60.04 NM'
    """
    unit = DistanceUnit.parse(unit)
    multiplier, decimals, label = UNIT_CONVERSIONS[unit]
    text = f"{meters * multiplier:.{decimals}f}"
    if with_label:
        return f"{text} {label}"
    return text


def midpoint(lat1: float, lon1: float, lat2: float, lon2: float) -> Tuple[float, float]:
    """
    Arithmetic mean of two positions.

    This is not the great circle midpoint.
    """
    return (lat1 + lat2) / 2, (lon1 + lon2) / 2
