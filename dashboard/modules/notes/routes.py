from fastapi import APIRouter, Depends
from dashboard.database.supabase_client import get_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.notes.schemas import NoteCreate, NoteUpdate, NoteResponse
from dashboard.modules.notes.service import NoteService
from dashboard.core.dependencies import get_current_identity, require_confirmation
from supabase import Client
from typing import List, Literal

router = APIRouter(prefix="/notes", tags=["notes"])


def get_note_service(supabase: Client = Depends(get_supabase)) -> NoteService:
    return NoteService(supabase)


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    sort: Literal["newest", "oldest", "title_asc", "title_desc"] = "newest",
    identity: Identity = Depends(get_current_identity),
    service: NoteService = Depends(get_note_service)
):
    """List the current user's Markdown notes"""
    return service.list_notes(identity.id, sort)


@router.post("", response_model=NoteResponse, status_code=201)
async def create_note(
    note_data: NoteCreate,
    identity: Identity = Depends(get_current_identity),
    service: NoteService = Depends(get_note_service)
):
    return service.create_note(note_data, identity.id)


@router.patch("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    note_data: NoteUpdate,
    identity: Identity = Depends(get_current_identity),
    service: NoteService = Depends(get_note_service)
):
    return service.update_note(note_id, note_data, identity.id)


@router.delete("/{note_id}", status_code=204)
async def delete_note(
    note_id: str,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: NoteService = Depends(get_note_service)
):
    service.delete_note(note_id, identity.id)
    return None
