from foldertree.crud.base import BaseCRUD, to_object_id
from foldertree.crud.node import NodeCRUD
from foldertree.crud.file import FileCRUD
from foldertree.crud.folder import FolderCRUD

__all__ = ["BaseCRUD", "NodeCRUD", "FileCRUD", "FolderCRUD", "to_object_id"]
