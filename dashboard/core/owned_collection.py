"""
Owner-scoped collection over a single Supabase table.

Every activity (todos, stored files, food photos and reviews, Pokémon reviews,
notes) is a list of rows owned by one user. OwnedCollection holds the shared
fetch / create / update / delete logic; modules bind it to their table and
response schema.

All reads and writes carry ``eq(owner_column, owner_id)``; a row owned by
someone else is indistinguishable from a missing row (NotFound).
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel
from supabase import Client

from dashboard.core.errors import NotFound, RemoteOperationFailure, ValidationFailure
from dashboard.core.storage import ObjectBucket

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def require_text(value: Optional[str], label: str) -> str:
    """Trim and reject empty text fields."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationFailure(f"{label} is required.")
    return cleaned


class OwnedCollection(Generic[RecordT]):
    def __init__(
        self,
        supabase: Client,
        table: str,
        schema: Type[RecordT],
        *,
        order_by: str = "created_at",
        descending: bool = True,
        owner_column: str = "user_id",
        label: Optional[str] = None,
    ):
        self.supabase = supabase
        self.table = table
        self.schema = schema
        self.order_by = order_by
        self.descending = descending
        self.owner_column = owner_column
        self.label = label or table

    def _rows(self):
        return self.supabase.table(self.table)

    def fetch(
        self,
        owner_id: Optional[str],
        order_by: Optional[str] = None,
        descending: Optional[bool] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[RecordT]:
        """Whole collection for one owner (or, with owner_id None, for the given filters only)."""
        column = order_by or self.order_by
        desc = self.descending if descending is None else descending
        try:
            query = self._rows().select("*")
            if owner_id is not None:
                query = query.eq(self.owner_column, owner_id)
            for key, value in (filters or {}).items():
                query = query.eq(key, value)
            result = query.order(column, desc=desc).execute()
            return [self.schema(**row) for row in result.data or []]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching {self.label}: {e}")
            raise RemoteOperationFailure(f"Failed to load {self.label}: {str(e)}")

    def get(self, record_id: Any, owner_id: str) -> RecordT:
        try:
            result = self._rows()\
                .select("*")\
                .eq("id", record_id)\
                .eq(self.owner_column, owner_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error loading {self.label} {record_id}: {e}")
            raise RemoteOperationFailure(f"Failed to load {self.label}: {str(e)}")
        if not result.data:
            raise NotFound(f"{self.label.capitalize()} not found")
        return self.schema(**result.data[0])

    def create(self, owner_id: str, fields: Dict[str, Any]) -> RecordT:
        row = {**fields, self.owner_column: owner_id}
        try:
            result = self._rows().insert(row).execute()
        except Exception as e:
            logger.error(f"Error adding {self.label}: {e}")
            raise RemoteOperationFailure(f"Failed to add {self.label}: {str(e)}")
        if not result.data:
            raise RemoteOperationFailure(f"Failed to add {self.label}")
        return self.schema(**result.data[0])

    def create_with_object(
        self,
        owner_id: str,
        bucket: ObjectBucket,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
    ) -> RecordT:
        """Upload the object, then insert the row that points at it. The object is removed if the insert fails."""
        if not content:
            raise ValidationFailure("Please select a file first.")
        stored = bucket.store(owner_id, filename, content, content_type)
        row = {"name": filename, "url": stored.url, **(fields or {})}
        try:
            return self.create(owner_id, row)
        except HTTPException:
            bucket.discard(stored.path)
            raise

    def _update(self, record_id: Any, owner_id: str, changes: Dict[str, Any]) -> RecordT:
        try:
            result = self._rows()\
                .update(changes)\
                .eq("id", record_id)\
                .eq(self.owner_column, owner_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating {self.label} {record_id}: {e}")
            raise RemoteOperationFailure(f"Failed to update {self.label}: {str(e)}")
        if not result.data:
            raise NotFound(f"{self.label.capitalize()} not found")
        return self.schema(**result.data[0])

    def toggle(self, record_id: Any, owner_id: str, field: str) -> RecordT:
        current = self.get(record_id, owner_id)
        return self._update(record_id, owner_id, {field: not getattr(current, field)})

    def replace(self, record_id: Any, owner_id: str, changes: Dict[str, Any]) -> RecordT:
        """Partial update; returns the stored row untouched when nothing would change."""
        current = self.get(record_id, owner_id)
        changed = {k: v for k, v in changes.items() if getattr(current, k) != v}
        if not changed:
            return current
        return self._update(record_id, owner_id, changed)

    def delete(self, record_id: Any, owner_id: str) -> None:
        try:
            result = self._rows()\
                .delete()\
                .eq("id", record_id)\
                .eq(self.owner_column, owner_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting {self.label} {record_id}: {e}")
            raise RemoteOperationFailure(f"Failed to delete {self.label}: {str(e)}")
        if not result.data:
            raise NotFound(f"{self.label.capitalize()} not found")

    def delete_where(self, column: str, value: Any) -> int:
        """Delete every row matching ``column = value`` (children of a deleted parent)."""
        try:
            result = self._rows().delete().eq(column, value).execute()
        except Exception as e:
            logger.error(f"Error deleting {self.label} where {column}={value}: {e}")
            raise RemoteOperationFailure(f"Failed to delete {self.label}: {str(e)}")
        return len(result.data or [])

    def delete_with_object(
        self,
        record_id: Any,
        owner_id: str,
        bucket: ObjectBucket,
        before_delete: Optional[Callable[[RecordT], None]] = None,
    ) -> None:
        """
        Remove the backing object, then dependent rows, then the row.

        Nothing is deleted if the object cannot be removed. ``before_delete``
        removes dependent rows once the object is gone. The object's bytes are
        kept so it can be put back if either later step fails.
        """
        record = self.get(record_id, owner_id)

        path = bucket.path_from_url(getattr(record, "url", "") or "")
        content = None
        if path is None:
            logger.warning(f"{self.label} {record_id} has no object in bucket {bucket.bucket_name}; deleting row only")
        else:
            try:
                content = bucket.download(path)
            except HTTPException:
                logger.warning(f"Backing object {path} unreadable before delete; it cannot be restored on failure")
            bucket.remove([path])

        try:
            if before_delete is not None:
                before_delete(record)
            self.delete(record_id, owner_id)
        except HTTPException:
            if path is not None and content is not None:
                bucket.restore(path, content)
            raise
