from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from bson import ObjectId
from bson.errors import InvalidId
from beanie import Document
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=Document)
CreateSchemaT = TypeVar("CreateSchemaT", bound=BaseModel)
UpdateSchemaT = TypeVar("UpdateSchemaT", bound=BaseModel)


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id coming from a client, None when it is not a valid ObjectId"""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None


class BaseCRUD(Generic[ModelT, CreateSchemaT, UpdateSchemaT]):
    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def get_by_id(self, id: Any) -> Optional[ModelT]:
        object_id = to_object_id(id)
        if object_id is None:
            return None
        return await self.get_one({"_id": object_id})

    async def get_one(self, filter_: Dict[str, Any]) -> Optional[ModelT]:
        return await self.model.find_one(dict(filter_))

    async def list(self, filter_: Optional[Dict[str, Any]] = None) -> List[ModelT]:
        return await self.model.find(dict(filter_ or {})).to_list()

    async def create(self, obj_in: CreateSchemaT) -> ModelT:
        db_obj = self.model(**obj_in.model_dump())
        await db_obj.insert()
        return db_obj

    async def update(
        self,
        db_obj: ModelT,
        obj_in: UpdateSchemaT | Dict[str, Any],
    ) -> ModelT:
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = {k: v for k, v in obj_in.items() if v is not None}

        if "updated_at" in self.model.model_fields:
            update_data["updated_at"] = datetime.utcnow()

        await db_obj.set(update_data)
        return db_obj

    async def delete(self, db_obj: ModelT) -> None:
        await db_obj.delete()

    async def delete_many(self, filter_: Dict[str, Any]) -> int:
        result = await self.model.find(dict(filter_)).delete()
        return result.deleted_count if result else 0
