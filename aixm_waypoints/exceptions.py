"""
Exceptions raised by the aixm_waypoints package.

Extraction and reconstruction never raise for malformed document content;
these exceptions cover the boundaries around them (reading, parsing and
looking up waypoints).
"""

from typing import Any, Optional


class AixmError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details is not None:
            return f"{self.message} ({self.details})"
        return self.message


class DocumentParseError(AixmError):
    """Raised when the input text is not an XML document."""


class SourceError(AixmError):
    """Raised when a document cannot be read from its source."""

    def __init__(self, message: str, source: Optional[str] = None, details: Any = None):
        super().__init__(message, details)
        self.source = source


class WaypointNotFoundError(AixmError):
    """Raised when a waypoint lookup by designator or id finds nothing."""

    def __init__(self, key: str):
        super().__init__(f"Waypoint not found: {key}")
        self.key = key
