"""Supabase Storage bucket wrapper for file-bearing activities."""
import logging
import os
import time
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import unquote

from fastapi import UploadFile
from supabase import Client

from dashboard.core.errors import StorageFailure, ValidationFailure

logger = logging.getLogger(__name__)


@dataclass
class StoredObject:
    path: str
    url: str


class ObjectBucket:
    def __init__(self, supabase: Client, bucket_name: str):
        self.supabase = supabase
        self.bucket_name = bucket_name

    @property
    def _bucket(self):
        return self.supabase.storage.from_(self.bucket_name)

    @staticmethod
    def object_path(owner_id: str, filename: str, now_ms: Optional[int] = None) -> str:
        """Owner-keyed, timestamp-qualified path: ``{owner_id}/{ms}_{filename}``."""
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        base_name = os.path.basename(filename.replace("\\", "/")) or "file"
        return f"{owner_id}/{now_ms}_{base_name}"

    def path_from_url(self, url: str) -> Optional[str]:
        """Recover the object path from a public URL, or None if the URL is not from this bucket."""
        marker = f"/{self.bucket_name}/"
        if not url or marker not in url:
            return None
        path = url.split(marker, 1)[1].split("?", 1)[0]
        return unquote(path) or None

    def upload(self, path: str, content: bytes, content_type: Optional[str] = None) -> None:
        try:
            self._bucket.upload(
                path,
                content,
                file_options={"content-type": content_type or "application/octet-stream"},
            )
            logger.info(f"Uploaded to Supabase Storage: {self.bucket_name}/{path}")
        except Exception as e:
            logger.error(f"Supabase Storage upload failed ({self.bucket_name}/{path}): {e}")
            raise StorageFailure(f"Failed to upload to storage: {str(e)}")

    def public_url(self, path: str) -> str:
        try:
            url = self._bucket.get_public_url(path)
        except Exception as e:
            logger.error(f"Could not get public URL ({self.bucket_name}/{path}): {e}")
            raise StorageFailure(f"Could not get public URL: {str(e)}")
        if not url:
            raise StorageFailure("Could not get public URL")
        return url

    def download(self, path: str) -> bytes:
        try:
            return self._bucket.download(path)
        except Exception as e:
            logger.error(f"Supabase Storage download failed ({self.bucket_name}/{path}): {e}")
            raise StorageFailure(f"Failed to download from storage: {str(e)}")

    def remove(self, paths: List[str]) -> None:
        if not paths:
            return
        try:
            self._bucket.remove(paths)
            logger.info(f"Removed from Supabase Storage: {self.bucket_name} {paths}")
        except Exception as e:
            logger.error(f"Supabase Storage remove failed ({self.bucket_name} {paths}): {e}")
            raise StorageFailure(f"Failed to remove from storage: {str(e)}")

    def list_paths(self, prefix: str, page_size: int = 100) -> List[str]:
        """Paths of the objects directly under ``prefix`` (one folder level)."""
        paths: List[str] = []
        offset = 0
        while True:
            try:
                entries = self._bucket.list(prefix, {"limit": page_size, "offset": offset}) or []
            except Exception as e:
                logger.error(f"Supabase Storage list failed ({self.bucket_name}/{prefix}): {e}")
                raise StorageFailure(f"Failed to list storage objects: {str(e)}")
            paths.extend(f"{prefix}/{entry['name']}" for entry in entries if entry.get("name"))
            if len(entries) < page_size:
                return paths
            offset += page_size

    def store(self, owner_id: str, filename: str, content: bytes, content_type: Optional[str] = None) -> StoredObject:
        """Upload and resolve the public URL; the upload is undone if the URL cannot be resolved."""
        path = self.object_path(owner_id, filename)
        self.upload(path, content, content_type)
        try:
            url = self.public_url(path)
        except StorageFailure:
            self.discard(path)
            raise
        return StoredObject(path=path, url=url)

    def discard(self, path: str) -> bool:
        """Best-effort removal used to undo an upload. Never raises."""
        try:
            self._bucket.remove([path])
            logger.warning(f"Compensation: removed orphaned object {self.bucket_name}/{path}")
            return True
        except Exception as e:
            logger.error(f"Compensation failed, orphaned object left at {self.bucket_name}/{path}: {e}")
            return False

    def restore(self, path: str, content: bytes) -> bool:
        """Best-effort re-upload of an object removed earlier in a failed delete. Never raises."""
        try:
            self._bucket.upload(path, content, file_options={"upsert": "true"})
            logger.warning(f"Compensation: restored object {self.bucket_name}/{path}")
            return True
        except Exception as e:
            logger.error(f"Compensation failed, could not restore {self.bucket_name}/{path}: {e}")
            return False


async def read_upload(file: Optional[UploadFile], max_bytes: int, image_only: bool = False) -> bytes:
    """Read an uploaded file, rejecting missing, empty, oversized or (optionally) non-image uploads."""
    if file is None or not file.filename:
        raise ValidationFailure("Please select a file first!")
    if image_only and not (file.content_type or "").startswith("image/"):
        raise ValidationFailure("Only image files are accepted")
    content = await file.read()
    if not content:
        raise ValidationFailure("The selected file is empty")
    if len(content) > max_bytes:
        raise ValidationFailure(f"File exceeds the {max_bytes // (1024 * 1024)} MB upload limit")
    return content
