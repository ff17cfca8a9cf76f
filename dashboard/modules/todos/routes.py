from fastapi import APIRouter, Depends
from dashboard.database.supabase_client import get_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.todos.schemas import TodoCreate, TodoResponse, TodoListResponse
from dashboard.modules.todos.service import TodoService
from dashboard.core.dependencies import get_current_identity, require_confirmation
from supabase import Client

router = APIRouter(prefix="/todos", tags=["todos"])


def get_todo_service(supabase: Client = Depends(get_supabase)) -> TodoService:
    return TodoService(supabase)


@router.get("", response_model=TodoListResponse)
async def list_todos(
    identity: Identity = Depends(get_current_identity),
    service: TodoService = Depends(get_todo_service)
):
    """List the current user's todos"""
    return service.list_todos(identity.id)


@router.post("", response_model=TodoResponse, status_code=201)
async def create_todo(
    todo_data: TodoCreate,
    identity: Identity = Depends(get_current_identity),
    service: TodoService = Depends(get_todo_service)
):
    return service.create_todo(todo_data, identity.id)


@router.post("/{todo_id}/toggle", response_model=TodoResponse)
async def toggle_todo(
    todo_id: int,
    identity: Identity = Depends(get_current_identity),
    service: TodoService = Depends(get_todo_service)
):
    """Flip the completion state"""
    return service.toggle_todo(todo_id, identity.id)


@router.delete("/{todo_id}", status_code=204)
async def delete_todo(
    todo_id: int,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: TodoService = Depends(get_todo_service)
):
    service.delete_todo(todo_id, identity.id)
    return None
