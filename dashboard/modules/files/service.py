import logging
from supabase import Client
from fastapi import UploadFile
from dashboard.config import settings
from dashboard.core.owned_collection import OwnedCollection, require_text
from dashboard.core.storage import ObjectBucket, read_upload
from dashboard.modules.files.schemas import FileRename, StoredFileResponse
from typing import List

logger = logging.getLogger(__name__)


class FileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.bucket = ObjectBucket(supabase, settings.drive_bucket)
        self.files = OwnedCollection(supabase, "photos", StoredFileResponse, label="file")

    def list_files(self, user_id: str) -> List[StoredFileResponse]:
        """Newest first"""
        return self.files.fetch(user_id)

    async def upload_file(self, file: UploadFile, user_id: str) -> StoredFileResponse:
        """Upload to the drive bucket and record the file row"""
        content = await read_upload(file, settings.max_upload_bytes)
        record = self.files.create_with_object(
            user_id,
            self.bucket,
            file.filename,
            content,
            content_type=file.content_type,
            fields={"size": len(content)},
        )
        logger.info(f"User {user_id} uploaded file {record.id} ({record.name})")
        return record

    def rename_file(self, file_id: str, rename: FileRename, user_id: str) -> StoredFileResponse:
        name = require_text(rename.name, "Name")
        return self.files.replace(file_id, user_id, {"name": name})

    def delete_file(self, file_id: str, user_id: str) -> None:
        """Remove the stored object, then the row"""
        self.files.delete_with_object(file_id, user_id, self.bucket)
