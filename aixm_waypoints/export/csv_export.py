"""
CSV export of extracted waypoints.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from ..models.waypoint import WaypointRecord

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Designator", "Lat", "Lon", "Lat DMS", "Lon DMS"]


def waypoints_to_dataframe(waypoints: Iterable[WaypointRecord]) -> pd.DataFrame:
    """One row per waypoint with the CSV_HEADERS columns."""
    return pd.DataFrame([w.to_csv_row() for w in waypoints], columns=CSV_HEADERS)


def write_csv(waypoints: Iterable[WaypointRecord], path: Optional[Union[str, Path]] = None) -> str:
    """
    Render waypoints as CSV and optionally write them to a file.

    Latitude and longitude are written as plain decimal numbers. The DMS
    columns contain a double quote and are therefore quoted.

    Args:
        waypoints: Waypoints in the order they should appear
        path: Output file, if any

    Returns:
        The CSV text
    """
    df = waypoints_to_dataframe(waypoints)
    text = df.to_csv(index=False, lineterminator='\n')
    if path is not None:
        Path(path).write_text(text, encoding='utf-8')
        logger.info(f"Wrote {len(df)} waypoints to {path}")
    return text
