"""
Reconstruction of a waypoints-only AIXM basic message.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..utils.identifier import new_feature_id
from .schema import (
    ATTRIBUTE_PREFIX, DESIGNATED_POINT, DESIGNATED_POINT_TIME_SLICE, ENVELOPE,
    GML_ID, HAS_MEMBER, TIME_SLICE,
)
from .extractor import position_text
from .tree import as_list, get_path

logger = logging.getLogger(__name__)


def has_position(time_slice: Any) -> bool:
    """
    True when the slice has a gml:pos with non blank text.

    The text is not checked to be numeric, so a slice can be kept here
    and still be skipped by the extractor.
    A slice without any gml:pos element is deliberately dropped as well.
    """
    text = position_text(time_slice)
    return text is not None and text.strip() != ""


class DocumentReconstructor:
    """
    Builds a copy of a document that only holds DesignatedPoints with a position.

    The input tree is never modified. Kept points get a new gml:id, all
    their other content is carried over.
    """

    def __init__(self, id_factory: Callable[[], str] = new_feature_id):
        """
        Args:
            id_factory: Called once per kept point to get its new gml:id
        """
        self.id_factory = id_factory

    def rebuild(self, doc: Any) -> Optional[Dict[str, Any]]:
        """
        Build the waypoints-only document.

        Args:
            doc: Generic tree as produced by xmltodict

        Returns:
            New tree, or None when the envelope or the member collection is
            missing or no member holds a valid point
        """
        root = get_path(doc, ENVELOPE)
        if not isinstance(root, dict):
            logger.warning(f"No {ENVELOPE} element found")
            return None

        members = as_list(root.get(HAS_MEMBER))
        if not members:
            logger.warning(f"No {HAS_MEMBER} elements found")
            return None

        kept_members = []
        for member in members:
            kept = self._rebuild_member(member)
            if kept is not None:
                kept_members.append(kept)

        if not kept_members:
            logger.warning("No designated point with a position found")
            return None

        logger.info(f"Kept {len(kept_members)} of {len(members)} members")
        return {ENVELOPE: {**root, HAS_MEMBER: kept_members}}

    def _rebuild_member(self, member: Any) -> Optional[Dict[str, Any]]:
        points = []
        for point in as_list(get_path(member, DESIGNATED_POINT)):
            kept = self._rebuild_point(point)
            if kept is not None:
                points.append(kept)
        if not points:
            return None

        # Other features held by the member are dropped, its attributes stay
        attributes = {k: v for k, v in member.items() if k.startswith(ATTRIBUTE_PREFIX)}
        return {**attributes, DESIGNATED_POINT: points}

    def _rebuild_point(self, point: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(point, dict):
            return None

        wrappers = []
        for wrapper in as_list(point.get(TIME_SLICE)):
            slices = [s for s in as_list(get_path(wrapper, DESIGNATED_POINT_TIME_SLICE)) if has_position(s)]
            if slices:
                wrappers.append({**wrapper, DESIGNATED_POINT_TIME_SLICE: slices})

        if not wrappers:
            logger.debug(f"Dropping point {point.get(GML_ID)}: no time slice with a position")
            return None

        return {**point, GML_ID: self.id_factory(), TIME_SLICE: wrappers}


def build_waypoint_only_document(doc: Any, **kwargs) -> Optional[Dict[str, Any]]:
    """Rebuild with a DocumentReconstructor built from kwargs."""
    return DocumentReconstructor(**kwargs).rebuild(doc)
