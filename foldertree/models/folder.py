from foldertree.models.base import NodeDocument, SCOPE_INDEXES


class Folder(NodeDocument):
    """Folder metadata in MongoDB"""

    class Settings:
        name = "folders"
        indexes = SCOPE_INDEXES
