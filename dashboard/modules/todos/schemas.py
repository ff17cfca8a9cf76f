from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class TodoCreate(BaseModel):
    task: str


class TodoResponse(BaseModel):
    id: int
    task: str
    is_complete: bool = False
    user_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TodoStats(BaseModel):
    total: int
    completed: int
    pending: int


class TodoListResponse(BaseModel):
    items: List[TodoResponse]
    stats: TodoStats
