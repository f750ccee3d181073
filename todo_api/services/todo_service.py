"""Todo service - business logic layer."""

from __future__ import annotations

from typing import List, Optional

from todo_api.errors import EmptyTodoBody, StorageError
from todo_api.models.todo import Todo, TodoCreate
from todo_api.repositories.base import TodoStore
from todo_api.repositories.todo_repository import InMemoryTodoRepository


class TodoService:
    """Service for todo business logic.

    Validation happens here, before the store is touched. Storage failures
    are re-raised with a message naming the operation that failed.
    """

    def __init__(self, store: Optional[TodoStore] = None) -> None:
        self.store = store if store is not None else InMemoryTodoRepository()

    def list_todos(self) -> List[Todo]:
        """Get all todo items."""
        try:
            return self.store.list_todos()
        except StorageError as exc:
            raise StorageError("Failed to list todos") from exc

    def create_todo(self, todo_data: TodoCreate) -> Todo:
        """Create a new todo item."""
        if not todo_data.body:
            raise EmptyTodoBody()
        try:
            return self.store.insert_todo(todo_data.body)
        except StorageError as exc:
            raise StorageError("Failed to create todo") from exc

    def get_todo(self, raw_id: str) -> Todo:
        """Get a specific todo by ID."""
        todo_id = self.store.parse_id(raw_id)
        try:
            return self.store.find_todo(todo_id)
        except StorageError as exc:
            raise StorageError("Failed to load todo") from exc

    def toggle_todo(self, raw_id: str) -> bool:
        """Flip the completion flag and return its new value."""
        todo_id = self.store.parse_id(raw_id)
        try:
            return self.store.toggle_todo(todo_id)
        except StorageError as exc:
            raise StorageError("Failed to update todo") from exc

    def delete_todo(self, raw_id: str) -> None:
        """Delete a todo item."""
        todo_id = self.store.parse_id(raw_id)
        try:
            self.store.delete_todo(todo_id)
        except StorageError as exc:
            raise StorageError("Failed to delete todo") from exc
