from foldertree.api.folder import router as folder_router
from foldertree.api.file import router as file_router
from foldertree.api.health import router as health_router

__all__ = ["folder_router", "file_router", "health_router"]
