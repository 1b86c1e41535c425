from typing import Optional

from foldertree.consts.node import Level, NodeKind
from foldertree.core.exceptions import (
    DuplicateNameError,
    InvalidLevelError,
    MissingNameError,
    MissingParentError,
    ParentNotFoundError,
)
from foldertree.crud.file import FileCRUD
from foldertree.crud.folder import FolderCRUD
from foldertree.crud.node import NodeCRUD
from foldertree.utils import get_logger

logger = get_logger(__name__)


def resolve_level(level: Optional[str]) -> Level:
    """Map a raw level value to Level; absent means root"""
    if level is None:
        return Level.ROOT
    try:
        return Level(level)
    except ValueError:
        raise InvalidLevelError()


def require_name(name: Optional[str]) -> str:
    if not isinstance(name, str) or not name.strip():
        raise MissingNameError()
    return name


class HierarchyValidator:
    """Checks that a create keeps the two-level hierarchy consistent

    Runs before any insert. Rename and delete paths do not go through it.
    """

    def __init__(self, folder_crud: FolderCRUD, file_crud: FileCRUD):
        self.folder_crud = folder_crud
        self._cruds: dict[NodeKind, NodeCRUD] = {
            NodeKind.FOLDER: folder_crud,
            NodeKind.FILE: file_crud,
        }

    async def validate_create(
        self,
        kind: NodeKind,
        name: Optional[str],
        level: Optional[str],
        parent_id: Optional[str],
    ) -> None:
        require_name(name)
        resolved_level = resolve_level(level)

        scope = None
        if resolved_level == Level.CHILD:
            if not parent_id:
                raise MissingParentError()
            parent = await self.folder_crud.get_by_id(parent_id)
            if not parent:
                logger.info(f"Rejected {kind.value} '{name}': parent {parent_id} not found")
                raise ParentNotFoundError()
            scope = parent.id

        existing = await self._cruds[kind].get_by_name_in_scope(name, scope)
        if existing:
            raise DuplicateNameError(
                f"A {kind.value} with this name already exists in this directory"
            )
