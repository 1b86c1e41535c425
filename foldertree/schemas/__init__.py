from foldertree.schemas.response import ApiResponse, ApiError, ErrorDetail, HealthCheck
from foldertree.schemas.node import NodeCreateRequest, NodeRenameRequest, NodeResponse
from foldertree.schemas.file import FileCreate, FileUpdate, FileResponse, FileList
from foldertree.schemas.folder import FolderCreate, FolderUpdate, FolderResponse, FolderList, FolderContents

__all__ = [
    "ApiResponse",
    "ApiError",
    "ErrorDetail",
    "HealthCheck",
    "NodeCreateRequest",
    "NodeRenameRequest",
    "NodeResponse",
    "FileCreate",
    "FileUpdate",
    "FileResponse",
    "FileList",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "FolderList",
    "FolderContents",
]
