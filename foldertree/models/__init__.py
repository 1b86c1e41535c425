from foldertree.models.time_mixin import TimeMixin
from foldertree.models.base import NodeDocument
from foldertree.models.file import File
from foldertree.models.folder import Folder

__all__ = [
    "TimeMixin",
    "NodeDocument",
    "File",
    "Folder",
]

# List of all document models for Beanie initialization
DOCUMENT_MODELS = [
    File,
    Folder,
]
