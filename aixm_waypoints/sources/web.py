"""
Source for AIXM documents published on the web.

The document is downloaded once and kept in the cache directory; later
loads reuse the cached copy unless it is older than max_age_days or a
refresh is forced.
"""

import hashlib
import logging
from typing import Optional
from urllib.parse import urlparse

import requests

from ..config import REQUEST_TIMEOUT
from ..document import AixmDocument
from ..exceptions import SourceError
from .base import DocumentSource
from .cached import CachedSource

logger = logging.getLogger(__name__)


class WebSource(CachedSource, DocumentSource):
    """An AIXM document downloaded from a URL."""

    def __init__(self, cache_dir: str, url: str, timeout: float = REQUEST_TIMEOUT, max_age_days: Optional[int] = None):
        """
        Args:
            cache_dir: Base directory for caching
            url: URL of the XML document
            timeout: HTTP timeout in seconds
            max_age_days: Refetch when the cached copy is older (None keeps it forever)
        """
        super().__init__(cache_dir)
        self.url = url
        self.timeout = timeout
        self.max_age_days = max_age_days

    def fetch_document(self, url: str) -> str:
        """
        Download the document text.

        Raises:
            SourceError: On connection failures and HTTP error statuses
        """
        return self._download(url).decode('utf-8-sig')

    def _download(self, url: str) -> bytes:
        """Download content from URL."""
        logger.info(f"Downloading {url}")
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise SourceError(f"Failed to download {url}", source=url, details=str(e)) from e
        return resp.content

    def _cache_param(self) -> str:
        return hashlib.sha1(self.url.encode('utf-8')).hexdigest()[:16]

    def load(self) -> AixmDocument:
        text = self.get_document('document', self.url, cache_param=self._cache_param(), max_age_days=self.max_age_days)
        return AixmDocument.from_xml(text, name=self.get_source_name())

    def get_source_name(self) -> str:
        name = urlparse(self.url).path.rstrip('/').split('/')[-1]
        return name or 'document.xml'
