from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class FileRename(BaseModel):
    name: str


class StoredFileResponse(BaseModel):
    id: str
    name: str
    url: str
    user_id: str
    size: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
