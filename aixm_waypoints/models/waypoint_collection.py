"""
Collection of extracted waypoints with the lookups used by the tools.
"""

from typing import Optional, Tuple

import pandas as pd

from ..exceptions import WaypointNotFoundError
from .queryable_collection import QueryableCollection
from .waypoint import WaypointRecord


class WaypointCollection(QueryableCollection[WaypointRecord]):
    """
    Waypoints in extraction order.

    Examples:
        waypoints.search('ab').sorted_by_designator().all()
        waypoints.by_designator('ABLAN').distance_to(waypoints.by_designator('BOKSU'))
    """

    def search(self, term: Optional[str]) -> 'WaypointCollection':
        """Waypoints whose designator contains term, ignoring case. Empty term keeps all."""
        if not term:
            return self
        needle = term.lower()
        return self.filter(lambda w: needle in w.designator.lower())

    def sorted_by_designator(self) -> 'WaypointCollection':
        return self.order_by(lambda w: w.designator.casefold())

    def by_id(self, waypoint_id: str) -> WaypointRecord:
        """
        Raises:
            WaypointNotFoundError: If no waypoint has this id
        """
        found = self.where(id=waypoint_id).first()
        if found is None:
            raise WaypointNotFoundError(waypoint_id)
        return found

    def by_designator(self, designator: str) -> WaypointRecord:
        """
        First waypoint with this designator (case-insensitive).

        Raises:
            WaypointNotFoundError: If no waypoint matches
        """
        wanted = designator.casefold()
        found = self.filter(lambda w: w.designator.casefold() == wanted).first()
        if found is None:
            raise WaypointNotFoundError(designator)
        return found

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """
        Bounding box of the waypoints.

        Returns:
            (min_lat, min_lon, max_lat, max_lon), or None when empty
        """
        if not self._items:
            return None
        lats = [w.lat for w in self._items]
        lons = [w.lon for w in self._items]
        return min(lats), min(lons), max(lats), max(lons)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per waypoint with id, designator, lat and lon columns."""
        return pd.DataFrame(
            [w.to_dict() for w in self._items],
            columns=['id', 'designator', 'lat', 'lon']
        )
