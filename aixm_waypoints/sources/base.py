from abc import ABC, abstractmethod

from ..document import AixmDocument


class DocumentSource(ABC):
    """
    Base interface for all document sources.

    A source knows where an AIXM document lives (a local file, a URL)
    and how to read it into an AixmDocument.
    """

    @abstractmethod
    def load(self) -> AixmDocument:
        """
        Read and parse the document.

        Raises:
            SourceError: If the document cannot be read
            DocumentParseError: If the content is not XML
        """
        pass

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
