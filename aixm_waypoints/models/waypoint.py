#!/usr/bin/env python3

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple, Union

from ..utils.coordinates import to_dms
from ..utils.geodesic import DistanceUnit, distance_meters, format_distance


@dataclass(frozen=True)
class WaypointRecord:
    """
    A waypoint extracted from a DesignatedPoint time slice.

    Coordinates are stored in decimal degrees. The id is only used to tell
    records apart (e.g. when picking two points to measure) and is never
    written back to the document.
    """

    id: str
    designator: str
    lat: float  # Decimal degrees, positive North
    lon: float  # Decimal degrees, positive East

    def distance_to(self, other: 'WaypointRecord') -> float:
        """Great circle distance to another waypoint, in meters."""
        return distance_meters(self.lat, self.lon, other.lat, other.lon)

    def formatted_distance_to(self, other: 'WaypointRecord',
                              unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
                              with_label: bool = False) -> str:
        """
        Distance to another waypoint formatted for display.

        Examples:
            a.formatted_distance_to(b, 'nm', with_label=True) -> '60.04 NM'
        """
        return format_distance(self.distance_to(other), unit, with_label=with_label)

    def to_dms(self) -> Tuple[str, str]:
        """
        Convert coordinates to Degrees, Minutes, Seconds format.

        Returns:
            Tuple of (latitude string, longitude string)
            Example: ("41°48'0.0000\" N", "12°15'0.0000\" E")
        """
        return to_dms(self.lat, True), to_dms(self.lon, False)

    def to_csv_row(self) -> List[Any]:
        """Row matching the Designator,Lat,Lon,Lat DMS,Lon DMS columns."""
        lat_dms, lon_dms = self.to_dms()
        return [self.designator, self.lat, self.lon, lat_dms, lon_dms]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WaypointRecord':
        return cls(
            id=str(data['id']),
            designator=str(data['designator']),
            lat=float(data['lat']),
            lon=float(data['lon'])
        )

    def __str__(self) -> str:
        return f"{self.designator} ({self.lat}, {self.lon})"
