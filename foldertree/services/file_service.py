from typing import Optional

from foldertree.consts.node import NodeKind
from foldertree.crud.file import FileCRUD
from foldertree.crud.folder import FolderCRUD
from foldertree.schemas.file import FileCreate
from foldertree.services.hierarchy_validator import HierarchyValidator
from foldertree.services.node_service import NodeService, storage_errors


class FileService(NodeService):
    kind = NodeKind.FILE
    create_schema = FileCreate

    def __init__(
        self,
        crud: Optional[FileCRUD] = None,
        folder_crud: Optional[FolderCRUD] = None,
        validator: Optional[HierarchyValidator] = None,
    ):
        crud = crud or FileCRUD()
        self.folder_crud = folder_crud or FolderCRUD()
        super().__init__(crud, validator or HierarchyValidator(self.folder_crud, crud))

    async def list_files(self):
        with storage_errors("Could not fetch files. Please try again later."):
            return await self.crud.list()
