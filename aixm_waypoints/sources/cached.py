from abc import ABC
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that cache fetched XML documents on disk.

    Documents are stored under `{cache_dir}/{source_name}` and reused until
    they are older than the requested maximum age.

    Key Format:
    The cache key follows the format `{base_key}_{parameter}`. The base_key
    must correspond to a fetch method in the implementing class: the key
    'document_abc' requires a method named 'fetch_document' which is called
    with the parameter and returns the document text.
    """

    def __init__(self, cache_dir: str):
        self.cache_dir = Path(cache_dir)
        self.source_name = self.__class__.__name__.lower()
        self.cache_path = self.cache_dir / self.source_name
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False
        self._never_refresh = False

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Always fetch, ignoring cached documents."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """Use a cached document if it exists, regardless of age."""
        self._never_refresh = never_refresh

    def _get_cache_file(self, key: str) -> Path:
        return self.cache_path / f"{key}.xml"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file is valid (exists and not too old).

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh or max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _validate_fetch_method(self, base_key: str) -> None:
        """
        Raises:
            NotImplementedError: If the fetch method doesn't exist
        """
        method_name = f"fetch_{base_key}"
        if not hasattr(self, method_name):
            raise NotImplementedError(
                f"No fetch method found for key '{base_key}'. "
                f"Class {self.__class__.__name__} must implement a method named '{method_name}'."
            )

    def get_document(self, key: str, param: str, cache_param: Optional[str] = None,
                     max_age_days: Optional[int] = None, **kwargs) -> str:
        """
        Get a document from cache or fetch it if not available.

        Args:
            key: Base key for the document type (e.g., 'document')
            param: Parameter to pass to the fetch method
            cache_param: Optional parameter to use in the cache key (if None, uses param)
            max_age_days: Maximum age of cache in days (None for no limit)
            **kwargs: Additional arguments to pass to the fetch method

        Raises:
            NotImplementedError: If the fetch method doesn't exist
        """
        cache_key = f"{key}_{cache_param if cache_param is not None else param}"
        cache_file = self._get_cache_file(cache_key)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            return cache_file.read_text(encoding='utf-8')

        self._validate_fetch_method(key)
        fetch_method = getattr(self, f"fetch_{key}")
        text = fetch_method(param, **kwargs)

        cache_file.write_text(text, encoding='utf-8')
        logger.info(f"{cache_file.name} [{reason}] fetched using {fetch_method.__name__}")
        return text
