from fastapi import APIRouter, Body, Depends

from foldertree.api.deps import get_file_service
from foldertree.schemas import (
    ApiError,
    ApiResponse,
    FileList,
    FileResponse,
    NodeCreateRequest,
    NodeRenameRequest,
)
from foldertree.services import FileService
from foldertree.utils.api_response import ok

router = APIRouter(
    tags=["Files"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        404: {"model": ApiError, "description": "Not Found"},
        500: {"model": ApiError, "description": "Internal Server Error"}
    }
)


@router.post("/files", response_model=ApiResponse[FileResponse], summary="Create File")
async def create_file(
    payload: NodeCreateRequest = Body(...),
    file_service: FileService = Depends(get_file_service),
):
    file = await file_service.create(payload.name, payload.level, payload.parent)
    return ok(data=FileResponse.model_validate(file), message="File successfully created.")


@router.get("/files", response_model=ApiResponse[FileList], summary="List Files")
async def list_files(file_service: FileService = Depends(get_file_service)):
    files = await file_service.list_files()
    return ok(data=FileList(files=[FileResponse.model_validate(f) for f in files]))


@router.put("/file/{file_id}", response_model=ApiResponse[FileResponse], summary="Rename File")
async def rename_file(
    file_id: str,
    payload: NodeRenameRequest = Body(...),
    file_service: FileService = Depends(get_file_service),
):
    file = await file_service.rename(file_id, payload.name)
    return ok(data=FileResponse.model_validate(file), message="File successfully edited")


@router.delete("/file/{file_id}", response_model=ApiResponse[None], summary="Delete File")
async def delete_file(
    file_id: str,
    file_service: FileService = Depends(get_file_service),
):
    await file_service.delete(file_id)
    return ok(message="File successfully deleted")
