from .base import DocumentSource
from .cached import CachedSource
from .file import FileSource
from .web import WebSource

__all__ = [
    'DocumentSource',
    'CachedSource',
    'FileSource',
    'WebSource',
]
