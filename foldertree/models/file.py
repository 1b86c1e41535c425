from foldertree.models.base import NodeDocument, SCOPE_INDEXES


class File(NodeDocument):
    """File metadata in MongoDB, no content is stored"""

    class Settings:
        name = "files"
        indexes = SCOPE_INDEXES
