"""Store contract shared by every todo backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from todo_api.models.todo import Todo


class TodoStore(ABC):
    """Persistence abstraction over a collection of todos.

    Identifiers are backend specific: ``parse_id`` turns a raw path segment
    into whatever the backend uses and raises ``InvalidTodoId`` when the
    value is not well formed. Every other id-addressed operation expects an
    already parsed identifier.
    """

    name = "base"

    @abstractmethod
    def parse_id(self, raw_id: str) -> Any:
        """Convert a path segment into a backend identifier."""

    @abstractmethod
    def insert_todo(self, body: str) -> Todo:
        """Persist a new, uncompleted todo and return the stored record."""

    @abstractmethod
    def list_todos(self) -> List[Todo]:
        """Return every stored todo."""

    @abstractmethod
    def find_todo(self, todo_id: Any) -> Todo:
        """Return one todo or raise ``TodoNotFound``."""

    @abstractmethod
    def toggle_todo(self, todo_id: Any) -> bool:
        """Atomically negate ``completed`` and return the new value."""

    @abstractmethod
    def delete_todo(self, todo_id: Any) -> None:
        """Remove a todo. Missing ids are not an error."""

    def ping(self) -> None:
        """Verify the backend is reachable."""

    def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all todos (testing helper)."""
