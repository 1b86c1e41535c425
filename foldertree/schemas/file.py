from typing import List

from pydantic import BaseModel

from foldertree.schemas.node import NodeCreate, NodeResponse, NodeUpdate


class FileCreate(NodeCreate):
    pass


class FileUpdate(NodeUpdate):
    pass


class FileResponse(NodeResponse):
    pass


class FileList(BaseModel):
    files: List[FileResponse]
