from fastapi import APIRouter, Depends
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.home.schemas import Activity, HomeResponse
from dashboard.core.dependencies import get_current_identity

router = APIRouter(prefix="/home", tags=["home"])

ACTIVITIES = [
    Activity(key="todos", title="To-do List", path="/api/v1/todos"),
    Activity(key="files", title="Google Drive Lite", path="/api/v1/files"),
    Activity(key="food", title="Food Review App", path="/api/v1/food/photos"),
    Activity(key="pokemon", title="Pokémon Review", path="/api/v1/pokemon/stats"),
    Activity(key="notes", title="Markdown Notes", path="/api/v1/notes"),
]


@router.get("", response_model=HomeResponse)
async def home(identity: Identity = Depends(get_current_identity)):
    """Dashboard landing data: who is signed in and which activities exist"""
    return HomeResponse(user=identity, activities=ACTIVITIES)
