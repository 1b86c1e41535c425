"""Shared fixtures: in-memory collections standing in for MongoDB."""

from datetime import datetime
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from foldertree.api.deps import get_file_service, get_folder_service
from foldertree.configs.setup import create_app
from foldertree.consts.node import Level
from foldertree.crud.file import FileCRUD
from foldertree.crud.folder import FolderCRUD
from foldertree.services import FileService, FolderService, HierarchyValidator


def _matches(record, filter_):
    for key, value in filter_.items():
        attr = 'id' if key == '_id' else key
        if getattr(record, attr, None) != value:
            return False
    return True


class InMemoryCRUDMixin:
    """Replaces the store primitives of BaseCRUD; query building stays real."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.records = {}

    async def get_one(self, filter_):
        return next((r for r in self.records.values() if _matches(r, filter_)), None)

    async def list(self, filter_=None):
        return [r for r in self.records.values() if _matches(r, filter_ or {})]

    async def create(self, obj_in):
        now = datetime.utcnow()
        record = SimpleNamespace(id=ObjectId(), created_at=now, updated_at=now, **obj_in.model_dump())
        self.records[record.id] = record
        return record

    async def update(self, db_obj, obj_in):
        for key, value in obj_in.items():
            setattr(db_obj, key, value)
        db_obj.updated_at = datetime.utcnow()
        return db_obj

    async def delete(self, db_obj):
        self.records.pop(db_obj.id, None)

    async def delete_many(self, filter_):
        doomed = [key for key, r in self.records.items() if _matches(r, filter_)]
        for key in doomed:
            del self.records[key]
        return len(doomed)

    def seed(self, name, parent=None):
        """Insert a record directly, bypassing validation."""
        now = datetime.utcnow()
        record = SimpleNamespace(
            id=ObjectId(),
            name=name,
            level=Level.CHILD if parent is not None else Level.ROOT,
            parent=parent.id if parent is not None else None,
            created_at=now,
            updated_at=now,
        )
        self.records[record.id] = record
        return record

    def names(self):
        return sorted(r.name for r in self.records.values())


class InMemoryFolderCRUD(InMemoryCRUDMixin, FolderCRUD):
    pass


class InMemoryFileCRUD(InMemoryCRUDMixin, FileCRUD):
    pass


@pytest.fixture
def folder_crud():
    """Empty in-memory folders collection."""
    return InMemoryFolderCRUD()


@pytest.fixture
def file_crud():
    """Empty in-memory files collection."""
    return InMemoryFileCRUD()


@pytest.fixture
def validator(folder_crud, file_crud):
    return HierarchyValidator(folder_crud, file_crud)


@pytest.fixture
def folder_service(folder_crud, file_crud):
    return FolderService(crud=folder_crud, file_crud=file_crud)


@pytest.fixture
def file_service(folder_crud, file_crud):
    return FileService(crud=file_crud, folder_crud=folder_crud)


@pytest.fixture
def client(folder_crud, file_crud):
    """API client wired to the in-memory collections.

    The lifespan is not entered, so no database connection is attempted.
    """
    app = create_app()
    app.dependency_overrides[get_folder_service] = lambda: FolderService(
        crud=folder_crud, file_crud=file_crud,
    )
    app.dependency_overrides[get_file_service] = lambda: FileService(
        crud=file_crud, folder_crud=folder_crud,
    )
    return TestClient(app)
