"""
Export of the waypoints-only AIXM document.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from ..config import WAYPOINTS_ONLY_SUFFIX
from ..document import AixmDocument

logger = logging.getLogger(__name__)

XML_EXTENSION = re.compile(r'\.xml$', re.IGNORECASE)


def waypoint_only_filename(name: str) -> str:
    """
    Name of the exported file for an input file name.

    Examples:
        waypoint_only_filename('Donlon.XML') -> 'Donlon_waypoints_only.xml'
    """
    return f"{XML_EXTENSION.sub('', name)}{WAYPOINTS_ONLY_SUFFIX}.xml"


def export_waypoints_only(document: AixmDocument, output_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Write the waypoints-only version of a document.

    Args:
        document: Source document
        output_path: Destination file. Defaults to the name derived from
                     the document name in the current directory.

    Returns:
        Path written, or None when the document has no waypoint to export
    """
    waypoints_only = document.waypoints_only()
    if waypoints_only is None:
        logger.warning(f"No waypoints to export from {document.name or 'document'}")
        return None

    if output_path is None:
        output_path = waypoint_only_filename(document.name or 'document.xml')
    return waypoints_only.write(output_path)
