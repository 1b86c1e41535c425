from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from foldertree.api.deps import get_folder_service
from foldertree.schemas import (
    ApiError,
    ApiResponse,
    FolderContents,
    FolderList,
    FolderResponse,
    NodeCreateRequest,
    NodeRenameRequest,
)
from foldertree.services import FolderService
from foldertree.utils.api_response import ok

router = APIRouter(
    tags=["Folders"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        404: {"model": ApiError, "description": "Not Found"},
        500: {"model": ApiError, "description": "Internal Server Error"}
    }
)


@router.post("/folders", response_model=ApiResponse[FolderResponse], summary="Create Folder")
async def create_folder(
    payload: NodeCreateRequest = Body(...),
    folder_service: FolderService = Depends(get_folder_service),
):
    folder = await folder_service.create(payload.name, payload.level, payload.parent)
    return ok(data=FolderResponse.model_validate(folder), message="Folder successfully created.")


@router.get("/folders", response_model=ApiResponse[FolderList], summary="List Folders")
async def list_folders(
    level: Optional[str] = Query(None, description="Only return folders at this level (root or child)"),
    folder_service: FolderService = Depends(get_folder_service),
):
    folders = await folder_service.list_folders(level)
    return ok(data=FolderList(folders=[FolderResponse.model_validate(f) for f in folders]))


@router.get("/folder/{folder_id}", response_model=ApiResponse[FolderContents], summary="Get Folder Contents")
async def get_folder_contents(
    folder_id: str,
    folder_service: FolderService = Depends(get_folder_service),
):
    """Direct child files and folders of a folder"""
    contents = await folder_service.get_children(folder_id)
    return ok(data=contents)


@router.put("/folder/{folder_id}", response_model=ApiResponse[FolderResponse], summary="Rename Folder")
async def rename_folder(
    folder_id: str,
    payload: NodeRenameRequest = Body(...),
    folder_service: FolderService = Depends(get_folder_service),
):
    folder = await folder_service.rename(folder_id, payload.name)
    return ok(data=FolderResponse.model_validate(folder), message="Folder updated successfully")


@router.delete("/folder/{folder_id}", response_model=ApiResponse[None], summary="Delete Folder")
async def delete_folder(
    folder_id: str,
    folder_service: FolderService = Depends(get_folder_service),
):
    """Delete a folder together with its direct children"""
    await folder_service.delete(folder_id)
    return ok(message="Folder successfully deleted")
