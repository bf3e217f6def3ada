from typing import List

from fastapi import APIRouter, Depends, Query, status

from files_manager.dependencies import get_current_user_id, get_file_registry
from files_manager.models.file_model import ROOT_ID
from files_manager.schemas.file_schema import FileCreate, FileResponse
from files_manager.schemas.user_schema import ErrorResponse
from files_manager.services.file_registry import FileRegistry

router = APIRouter()


@router.post("", response_model=FileResponse, status_code=status.HTTP_201_CREATED,
             summary="Upload a file or create a folder",
             description="""
                Creates a folder, file or image owned by the signed in user.
                Content is sent base64 encoded in ``data`` and is required unless the type is folder.
             """,
             responses={
                 400: {"model": ErrorResponse,
                       "description": "Missing or invalid field, parent not found or not a folder"},
                 401: {"model": ErrorResponse, "description": "Unauthorized"},
             })
def upload_file(payload: FileCreate,
                user_id: int = Depends(get_current_user_id),
                files: FileRegistry = Depends(get_file_registry)):
    return files.create(user_id, payload.name, payload.type,
                        parent_id=payload.parent_id, is_public=payload.is_public, data=payload.data)


@router.get("", response_model=List[FileResponse], summary="List the user's files",
            description="""
                Lists the files of the signed in user, 20 per page, optionally restricted to one folder.
            """,
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"}
            })
def list_files(parent_id: str = Query(str(ROOT_ID), alias="parentId"),
               page: str = Query("0"),
               user_id: int = Depends(get_current_user_id),
               files: FileRegistry = Depends(get_file_registry)):
    return files.list(user_id, parent_id=parent_id, page=page)


@router.get("/{file_id}", response_model=FileResponse, summary="Show one file",
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"},
                404: {"model": ErrorResponse, "description": "Not found"},
            })
def get_file(file_id: str,
             user_id: int = Depends(get_current_user_id),
             files: FileRegistry = Depends(get_file_registry)):
    return files.get_by_id(user_id, file_id)


@router.put("/{file_id}/publish", response_model=FileResponse, summary="Make a file public",
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"},
                404: {"model": ErrorResponse, "description": "Not found"},
            })
def publish(file_id: str,
            user_id: int = Depends(get_current_user_id),
            files: FileRegistry = Depends(get_file_registry)):
    return files.set_visibility(user_id, file_id, True)


@router.put("/{file_id}/unpublish", response_model=FileResponse, summary="Make a file private",
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"},
                404: {"model": ErrorResponse, "description": "Not found"},
            })
def unpublish(file_id: str,
              user_id: int = Depends(get_current_user_id),
              files: FileRegistry = Depends(get_file_registry)):
    return files.set_visibility(user_id, file_id, False)
