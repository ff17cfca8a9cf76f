from pydantic import BaseModel
from typing import List
from dashboard.modules.auth.schemas import Identity


class Activity(BaseModel):
    key: str
    title: str
    path: str


class HomeResponse(BaseModel):
    user: Identity
    activities: List[Activity]
