from foldertree.databases.mongodb import MongoDB

__all__ = ["MongoDB"]
