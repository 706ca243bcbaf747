import logging
from pathlib import Path
from typing import Union

from ..document import AixmDocument
from ..exceptions import SourceError
from .base import DocumentSource

logger = logging.getLogger(__name__)


class FileSource(DocumentSource):
    """A document stored in a local XML file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> AixmDocument:
        if not self.path.exists():
            logger.warning(f"File does not exist: {self.path}")
            raise SourceError(f"File does not exist: {self.path}", source=str(self.path))
        return AixmDocument.from_file(self.path)

    def get_source_name(self) -> str:
        return self.path.name
