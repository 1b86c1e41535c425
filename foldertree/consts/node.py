from enum import Enum


class Level(str, Enum):
    ROOT = "root"
    CHILD = "child"


class NodeKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"
