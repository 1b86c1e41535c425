from .hierarchy_validator import HierarchyValidator
from .folder_service import FolderService
from .file_service import FileService

__all__ = ["HierarchyValidator", "FolderService", "FileService"]
