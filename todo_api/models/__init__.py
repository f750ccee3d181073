"""Pydantic models for the todo API."""

from .todo import DeleteResult, ErrorResponse, Todo, TodoCreate, ToggleResult

__all__ = [
    "DeleteResult",
    "ErrorResponse",
    "Todo",
    "TodoCreate",
    "ToggleResult",
]
