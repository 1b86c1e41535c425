from foldertree.crud.node import NodeCRUD
from foldertree.models.folder import Folder
from foldertree.schemas.folder import FolderCreate, FolderUpdate


class FolderCRUD(NodeCRUD[Folder, FolderCreate, FolderUpdate]):
    def __init__(self):
        super().__init__(Folder)
