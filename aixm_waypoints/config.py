#!/usr/bin/env python3

"""
Configuration for the AIXM waypoint tools.

Values can be overridden through environment variables.
"""

import os
from enum import Enum


class AxisOrder(Enum):
    """Order of the two numbers found in a gml:pos element."""

    LAT_LON = "lat_lon"
    LON_LAT = "lon_lat"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> 'AxisOrder':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Invalid axis order: {value}. Expected one of {valid}")


# Logging Configuration
LOG_LEVEL = os.getenv("AIXM_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Parsing Configuration
AXIS_ORDER = AxisOrder.parse(os.getenv("AIXM_AXIS_ORDER", AxisOrder.LAT_LON.value))
MISSING_DESIGNATOR = "N/A"
FEATURE_ID_PREFIX = "uuid."

# Source Configuration
CACHE_DIR = os.getenv("AIXM_CACHE_DIR", "cache")
REQUEST_TIMEOUT = float(os.getenv("AIXM_REQUEST_TIMEOUT", "30"))

# Output Configuration
DEFAULT_DISTANCE_UNIT = "km"
WAYPOINTS_ONLY_SUFFIX = "_waypoints_only"
