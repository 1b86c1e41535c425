from contextlib import contextmanager
from typing import Any, Optional

from foldertree.consts.node import Level, NodeKind
from foldertree.core.exceptions import AppError, NotFoundError, StorageError
from foldertree.crud.base import to_object_id
from foldertree.crud.node import NodeCRUD
from foldertree.schemas.node import NodeCreate
from foldertree.services.hierarchy_validator import HierarchyValidator, require_name, resolve_level
from foldertree.utils import get_logger

logger = get_logger(__name__)


@contextmanager
def storage_errors(failure_message: str):
    """Turn unexpected store failures into StorageError with a client-safe message"""
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        logger.error(f"{failure_message} Cause: {str(e)}")
        raise StorageError(failure_message) from e


class NodeService:
    """Operations shared by the file and folder services"""

    kind: NodeKind
    create_schema: type[NodeCreate] = NodeCreate

    def __init__(self, crud: NodeCRUD, validator: HierarchyValidator):
        self.crud = crud
        self.validator = validator

    @property
    def label(self) -> str:
        return self.kind.value.capitalize()

    async def create(self, name: Optional[str], level: Optional[str] = None, parent_id: Optional[str] = None):
        with storage_errors(f"{self.label} creation failed. Please try again later."):
            await self.validator.validate_create(self.kind, name, level, parent_id)

            resolved_level = resolve_level(level)
            if resolved_level == Level.ROOT and parent_id:
                logger.warning(f"Ignoring parent {parent_id} for root {self.kind.value} '{name}'")
            parent = to_object_id(parent_id) if resolved_level == Level.CHILD else None

            record = await self.crud.create(
                self.create_schema(name=name, level=resolved_level, parent=parent)
            )
            logger.info(f"{self.label} created successfully: {record.id}")
            return record

    async def get_or_404(self, record_id: Any):
        record = await self.crud.get_by_id(record_id)
        if not record:
            raise NotFoundError(f"Could not find {self.kind.value}.")
        return record

    async def rename(self, record_id: Any, new_name: Optional[str]):
        """Overwrite the name; siblings are not checked for a clash"""
        require_name(new_name)
        with storage_errors(f"Could not edit {self.kind.value} name. Please try again later."):
            record = await self.get_or_404(record_id)
            record = await self.crud.update(record, {"name": new_name})
            logger.info(f"{self.label} {record_id} renamed to '{new_name}'")
            return record

    async def delete(self, record_id: Any) -> None:
        with storage_errors(f"Could not delete {self.kind.value}. Please try again later."):
            record = await self.get_or_404(record_id)
            await self._delete(record)
            logger.info(f"{self.label} deleted successfully: {record_id}")

    async def _delete(self, record) -> None:
        await self.crud.delete(record)
