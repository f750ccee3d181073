"""Todo storage backends."""

from .base import TodoStore
from .mongo_repository import MongoTodoRepository
from .todo_repository import InMemoryTodoRepository

__all__ = ["InMemoryTodoRepository", "MongoTodoRepository", "TodoStore"]
