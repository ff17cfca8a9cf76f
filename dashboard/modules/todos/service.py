from supabase import Client
from dashboard.modules.todos.schemas import TodoCreate, TodoResponse, TodoStats, TodoListResponse
from dashboard.core.owned_collection import OwnedCollection, require_text


class TodoService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.todos = OwnedCollection(
            supabase, "todos", TodoResponse, order_by="id", descending=False, label="todo"
        )

    def list_todos(self, user_id: str) -> TodoListResponse:
        """List the user's todos in insertion order, with completion counts"""
        items = self.todos.fetch(user_id)
        completed = sum(1 for t in items if t.is_complete)
        return TodoListResponse(
            items=items,
            stats=TodoStats(total=len(items), completed=completed, pending=len(items) - completed),
        )

    def create_todo(self, todo_data: TodoCreate, user_id: str) -> TodoResponse:
        """Create a new, incomplete todo"""
        task = require_text(todo_data.task, "Task")
        return self.todos.create(user_id, {"task": task, "is_complete": False})

    def toggle_todo(self, todo_id: int, user_id: str) -> TodoResponse:
        return self.todos.toggle(todo_id, user_id, "is_complete")

    def delete_todo(self, todo_id: int, user_id: str) -> None:
        self.todos.delete(todo_id, user_id)
