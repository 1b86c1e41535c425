"""Tests for the hierarchy queries built on the CRUD primitives."""

from bson import ObjectId

from foldertree.consts.node import Level
from foldertree.crud.base import to_object_id


def test_to_object_id_parses_valid_hex():
    """Test a 24-char hex id is parsed."""
    raw = '507f1f77bcf86cd799439011'
    assert to_object_id(raw) == ObjectId(raw)


def test_to_object_id_rejects_garbage():
    """Test malformed ids resolve to None instead of raising."""
    assert to_object_id('not-an-id') is None
    assert to_object_id('') is None
    assert to_object_id(None) is None
    assert to_object_id(42) is None


async def test_get_by_id_with_malformed_id(folder_crud):
    """Test a malformed id behaves like a missing record."""
    folder_crud.seed('docs')

    assert await folder_crud.get_by_id('zzz') is None


async def test_name_lookup_is_scoped_to_parent(folder_crud):
    """Test the same name in another directory does not count as a sibling."""
    docs = folder_crud.seed('docs')
    folder_crud.seed('sub', parent=docs)

    assert await folder_crud.get_by_name_in_scope('sub') is None
    found = await folder_crud.get_by_name_in_scope('sub', str(docs.id))
    assert found is not None
    assert found.parent == docs.id


async def test_name_lookup_with_malformed_parent(folder_crud):
    """Test a malformed parent id never falls back to the root scope."""
    folder_crud.seed('docs')

    assert await folder_crud.get_by_name_in_scope('docs', 'bogus') is None


async def test_list_by_level(folder_crud):
    """Test level filtering and the unfiltered listing."""
    docs = folder_crud.seed('docs')
    folder_crud.seed('sub', parent=docs)

    roots = await folder_crud.list_by_level(Level.ROOT)
    children = await folder_crud.list_by_level(Level.CHILD)
    everything = await folder_crud.list_by_level()

    assert [f.name for f in roots] == ['docs']
    assert [f.name for f in children] == ['sub']
    assert len(everything) == 2


async def test_delete_children_only_touches_direct_children(folder_crud):
    """Test delete_children removes one level and reports the count."""
    docs = folder_crud.seed('docs')
    sub = folder_crud.seed('sub', parent=docs)
    folder_crud.seed('deep', parent=sub)

    removed = await folder_crud.delete_children(docs.id)

    assert removed == 1
    assert folder_crud.names() == ['deep', 'docs']


async def test_get_children_with_malformed_id(file_crud):
    """Test malformed parent ids yield no children."""
    assert await file_crud.get_children('nope') == []
    assert await file_crud.delete_children('nope') == 0
