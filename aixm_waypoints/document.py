"""
AIXM basic message document.

Holds the generic tree parsed from an AIXM file and gives access to its
waypoints and to the waypoints-only copy of the document.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import SourceError
from .models.waypoint_collection import WaypointCollection
from .parsers.extractor import WaypointExtractor
from .parsers.reconstructor import DocumentReconstructor
from .parsers.schema import ENVELOPE
from .parsers.tree import get_path, parse_xml, unparse_xml

logger = logging.getLogger(__name__)


class AixmDocument:
    """
    A parsed AIXM document.

    The tree is treated as read only; waypoints() and waypoints_only()
    build new structures every time they are called.
    """

    def __init__(self, tree: Dict[str, Any], name: Optional[str] = None):
        """
        Args:
            tree: Generic tree as produced by xmltodict
            name: Optional name of the document (usually the file name)
        """
        self.tree = tree
        self.name = name

    @classmethod
    def from_xml(cls, text: str, name: Optional[str] = None) -> 'AixmDocument':
        """
        Parse an XML string.

        Raises:
            DocumentParseError: If the text is not XML
        """
        return cls(parse_xml(text), name=name)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'AixmDocument':
        """
        Read and parse an XML file.

        Raises:
            SourceError: If the file cannot be read
            DocumentParseError: If the file is not XML
        """
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise SourceError(f"Cannot read {path}", source=str(path), details=str(e)) from e
        logger.info(f"Loaded {path} ({len(text)} characters)")
        return cls.from_xml(text, name=path.name)

    @property
    def has_envelope(self) -> bool:
        return get_path(self.tree, ENVELOPE) is not None

    def waypoints(self, extractor: Optional[WaypointExtractor] = None) -> WaypointCollection:
        """Extract the waypoints, in document order."""
        extractor = extractor or WaypointExtractor()
        return WaypointCollection(extractor.extract(self.tree))

    def waypoints_only(self, reconstructor: Optional[DocumentReconstructor] = None) -> Optional['AixmDocument']:
        """
        Build a copy holding only the designated points with a position.

        Returns:
            New document, or None if there is nothing to export
        """
        reconstructor = reconstructor or DocumentReconstructor()
        tree = reconstructor.rebuild(self.tree)
        if tree is None:
            return None
        return AixmDocument(tree, name=self.name)

    def to_xml(self, pretty: bool = True) -> str:
        return unparse_xml(self.tree, pretty=pretty)

    def write(self, path: Union[str, Path], pretty: bool = True) -> Path:
        """Serialize the document to a UTF-8 file."""
        path = Path(path)
        path.write_text(self.to_xml(pretty=pretty), encoding='utf-8')
        logger.info(f"Wrote {path}")
        return path

    def __repr__(self) -> str:
        return f"AixmDocument(name={self.name!r})"
