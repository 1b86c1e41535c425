from fastapi import Request

from foldertree.services import FileService, FolderService


def get_folder_service(request: Request) -> FolderService:
    """Build the folder service from the CRUD instances opened at startup"""
    state = request.app.state
    return FolderService(crud=state.folder_crud, file_crud=state.file_crud)


def get_file_service(request: Request) -> FileService:
    state = request.app.state
    return FileService(crud=state.file_crud, folder_crud=state.folder_crud)
