from supabase import Client
from dashboard.core.errors import ValidationFailure
from dashboard.core.owned_collection import OwnedCollection, require_text
from dashboard.modules.notes.schemas import NoteCreate, NoteUpdate, NoteResponse
from typing import List

NOTE_SORTS = {
    "newest": ("created_at", True),
    "oldest": ("created_at", False),
    "title_asc": ("title", False),
    "title_desc": ("title", True),
}


class NoteService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.notes = OwnedCollection(supabase, "markdown_notes", NoteResponse, label="note")

    def list_notes(self, user_id: str, sort: str = "newest") -> List[NoteResponse]:
        order_by, descending = NOTE_SORTS.get(sort, NOTE_SORTS["newest"])
        return self.notes.fetch(user_id, order_by=order_by, descending=descending)

    def create_note(self, note_data: NoteCreate, user_id: str) -> NoteResponse:
        """Title and content are both required"""
        return self.notes.create(user_id, {
            "title": require_text(note_data.title, "Title"),
            "content": require_text(note_data.content, "Content"),
        })

    def update_note(self, note_id: str, note_data: NoteUpdate, user_id: str) -> NoteResponse:
        changes = {}
        if note_data.title is not None:
            changes["title"] = require_text(note_data.title, "Title")
        if note_data.content is not None:
            changes["content"] = require_text(note_data.content, "Content")
        if not changes:
            raise ValidationFailure("Nothing to update: provide a title or content.")
        return self.notes.replace(note_id, user_id, changes)

    def delete_note(self, note_id: str, user_id: str) -> None:
        self.notes.delete(note_id, user_id)
