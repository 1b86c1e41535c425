from foldertree.crud.node import NodeCRUD
from foldertree.models.file import File
from foldertree.schemas.file import FileCreate, FileUpdate


class FileCRUD(NodeCRUD[File, FileCreate, FileUpdate]):
    def __init__(self):
        super().__init__(File)
