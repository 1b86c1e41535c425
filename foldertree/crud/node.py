from typing import Any, List, Optional

from foldertree.consts.node import Level
from foldertree.crud.base import BaseCRUD, ModelT, CreateSchemaT, UpdateSchemaT, to_object_id


class NodeCRUD(BaseCRUD[ModelT, CreateSchemaT, UpdateSchemaT]):
    """Hierarchy queries shared by files and folders"""

    async def get_by_name_in_scope(self, name: str, parent_id: Optional[Any] = None) -> Optional[ModelT]:
        """Find a sibling with this name; parent_id None means the root scope"""
        if parent_id is None:
            return await self.get_one({"name": name, "parent": None})
        parent = to_object_id(parent_id)
        if parent is None:
            return None
        return await self.get_one({"name": name, "parent": parent})

    async def list_by_level(self, level: Optional[Level] = None) -> List[ModelT]:
        if level is None:
            return await self.list()
        return await self.list({"level": level.value})

    async def get_children(self, parent_id: Any) -> List[ModelT]:
        parent = to_object_id(parent_id)
        if parent is None:
            return []
        return await self.list({"parent": parent})

    async def delete_children(self, parent_id: Any) -> int:
        parent = to_object_id(parent_id)
        if parent is None:
            return 0
        return await self.delete_many({"parent": parent})
