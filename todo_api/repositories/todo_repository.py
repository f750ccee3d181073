"""In-memory todo repository for local development and tests."""

from __future__ import annotations

import threading
from typing import Dict, List

from todo_api.errors import InvalidTodoId, TodoNotFound
from todo_api.models.todo import Todo
from todo_api.repositories.base import TodoStore


class InMemoryTodoRepository(TodoStore):
    """Repository for todo data access with in-memory storage.

    Ids are sequential integers starting at 1 and are never reused until
    ``clear`` is called. All reads and writes happen under one lock, so a
    toggle cannot interleave with another operation on the same todo.
    """

    name = "memory"

    def __init__(self) -> None:
        self._todos: Dict[int, Todo] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def parse_id(self, raw_id: str) -> int:
        if not raw_id.isascii() or not raw_id.isdigit():
            raise InvalidTodoId()
        todo_id = int(raw_id)
        if todo_id < 1:
            raise InvalidTodoId()
        return todo_id

    def insert_todo(self, body: str) -> Todo:
        with self._lock:
            todo = Todo(id=self._next_id, body=body, completed=False)
            self._todos[self._next_id] = todo
            self._next_id += 1
            return todo.model_copy()

    def list_todos(self) -> List[Todo]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos.values()]

    def find_todo(self, todo_id: int) -> Todo:
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                raise TodoNotFound()
            return todo.model_copy()

    def toggle_todo(self, todo_id: int) -> bool:
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                raise TodoNotFound()
            todo.completed = not todo.completed
            return todo.completed

    def delete_todo(self, todo_id: int) -> None:
        with self._lock:
            self._todos.pop(todo_id, None)

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        with self._lock:
            self._todos.clear()
            self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)
