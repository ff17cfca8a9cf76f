from fastapi import APIRouter, Depends, File, UploadFile
from dashboard.database.supabase_client import get_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.files.schemas import FileRename, StoredFileResponse
from dashboard.modules.files.service import FileService
from dashboard.core.dependencies import get_current_identity, require_confirmation
from supabase import Client
from typing import List

router = APIRouter(prefix="/files", tags=["files"])


def get_file_service(supabase: Client = Depends(get_supabase)) -> FileService:
    return FileService(supabase)


@router.get("", response_model=List[StoredFileResponse])
async def list_files(
    identity: Identity = Depends(get_current_identity),
    service: FileService = Depends(get_file_service)
):
    """List the current user's files"""
    return service.list_files(identity.id)


@router.post("", response_model=StoredFileResponse, status_code=201)
async def upload_file(
    file: UploadFile = File(...),
    identity: Identity = Depends(get_current_identity),
    service: FileService = Depends(get_file_service)
):
    """Upload a file to Drive Lite"""
    return await service.upload_file(file, identity.id)


@router.patch("/{file_id}", response_model=StoredFileResponse)
async def rename_file(
    file_id: str,
    rename: FileRename,
    identity: Identity = Depends(get_current_identity),
    service: FileService = Depends(get_file_service)
):
    return service.rename_file(file_id, rename, identity.id)


@router.delete("/{file_id}", status_code=204)
async def delete_file(
    file_id: str,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: FileService = Depends(get_file_service)
):
    """Delete the file from storage and the database"""
    service.delete_file(file_id, identity.id)
    return None
