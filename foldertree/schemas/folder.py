from typing import List

from pydantic import BaseModel

from foldertree.schemas.node import NodeCreate, NodeResponse, NodeUpdate
from foldertree.schemas.file import FileResponse


class FolderCreate(NodeCreate):
    pass


class FolderUpdate(NodeUpdate):
    pass


class FolderResponse(NodeResponse):
    pass


class FolderList(BaseModel):
    folders: List[FolderResponse]


class FolderContents(BaseModel):
    """Direct children of a folder"""
    files: List[FileResponse]
    folders: List[FolderResponse]
