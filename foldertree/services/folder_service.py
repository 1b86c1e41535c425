import asyncio
from typing import Any, Optional

from foldertree.consts.node import NodeKind
from foldertree.crud.file import FileCRUD
from foldertree.crud.folder import FolderCRUD
from foldertree.schemas.file import FileResponse
from foldertree.schemas.folder import FolderContents, FolderCreate, FolderResponse
from foldertree.services.hierarchy_validator import HierarchyValidator, resolve_level
from foldertree.services.node_service import NodeService, storage_errors
from foldertree.utils import get_logger

logger = get_logger(__name__)


class FolderService(NodeService):
    kind = NodeKind.FOLDER
    create_schema = FolderCreate

    def __init__(
        self,
        crud: Optional[FolderCRUD] = None,
        file_crud: Optional[FileCRUD] = None,
        validator: Optional[HierarchyValidator] = None,
    ):
        crud = crud or FolderCRUD()
        self.file_crud = file_crud or FileCRUD()
        super().__init__(crud, validator or HierarchyValidator(crud, self.file_crud))

    async def list_folders(self, level: Optional[str] = None):
        """All folders, or only those at the given level"""
        resolved = resolve_level(level) if level is not None else None
        with storage_errors("Could not fetch folders. Please try again later."):
            return await self.crud.list_by_level(resolved)

    async def get_children(self, folder_id: Any) -> FolderContents:
        with storage_errors("Could not fetch folder contents. Please try again later."):
            folder = await self.get_or_404(folder_id)
            files, folders = await asyncio.gather(
                self.file_crud.get_children(folder.id),
                self.crud.get_children(folder.id),
            )
            return FolderContents(
                files=[FileResponse.model_validate(f) for f in files],
                folders=[FolderResponse.model_validate(f) for f in folders],
            )

    async def _delete(self, folder) -> None:
        # Direct children only; grandchildren keep their (now dangling) parent.
        # No rollback if one of these fails after another succeeded.
        steps = ("child files", "child folders", "folder itself")
        results = await asyncio.gather(
            self.file_crud.delete_children(folder.id),
            self.crud.delete_children(folder.id),
            self.crud.delete(folder),
            return_exceptions=True,
        )

        failures = []
        for step, result in zip(steps, results):
            if isinstance(result, BaseException):
                logger.error(f"Folder {folder.id} cascade: deleting {step} failed: {str(result)}")
                failures.append(result)
            elif isinstance(result, int):
                logger.info(f"Folder {folder.id} cascade: removed {result} {step}")
            else:
                logger.info(f"Folder {folder.id} cascade: removed {step}")

        if failures:
            raise failures[0]
