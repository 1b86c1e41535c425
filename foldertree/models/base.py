from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from foldertree.consts.node import Level
from foldertree.models.time_mixin import TimeMixin


class NodeDocument(Document, TimeMixin):
    """Fields shared by files and folders"""

    name: str = Field(..., description="Record name")
    level: Level = Field(default=Level.ROOT, description="root or child")
    parent: Optional[PydanticObjectId] = Field(default=None, description="Id of the parent folder")


# Sibling lookups filter on (parent, name)
SCOPE_INDEXES = [
    IndexModel([("parent", ASCENDING), ("name", ASCENDING)]),
    IndexModel([("level", ASCENDING)]),
]
