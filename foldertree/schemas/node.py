from datetime import datetime
from typing import Any, Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from foldertree.consts.node import Level


class NodeCreateRequest(BaseModel):
    """Create request body.

    Every field is optional here so that missing or out-of-range values reach
    the hierarchy validator and get its error codes instead of a generic
    schema error.
    """
    name: Optional[str] = Field(None, description="Record name, unique within its directory")
    level: Optional[str] = Field(None, description="root or child, defaults to root")
    parent: Optional[str] = Field(None, description="Parent folder id, required for child records")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "sub",
                "level": "child",
                "parent": "507f1f77bcf86cd799439011"
            }
        }
    )


class NodeRenameRequest(BaseModel):
    """Rename request body"""
    name: Optional[str] = Field(None, description="New record name")


class NodeCreate(BaseModel):
    """Internal schema for inserting a record after validation"""
    name: str
    level: Level = Level.ROOT
    parent: Optional[PydanticObjectId] = None


class NodeUpdate(BaseModel):
    name: Optional[str] = None


class NodeResponse(BaseModel):
    """Schema for returning a file or folder record"""
    id: str = Field(..., description="Record identifier")
    name: str
    level: Level
    parent: Optional[str] = Field(None, description="Parent folder id")
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "parent", mode="before")
    @classmethod
    def _object_id_to_str(cls, value: Any) -> Any:
        if value is None:
            return None
        return str(value)
