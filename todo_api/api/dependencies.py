"""API dependencies for todo management."""

from fastapi import Depends, HTTPException, Request

from todo_api.repositories.base import TodoStore
from todo_api.services.todo_service import TodoService


def get_todo_store(request: Request) -> TodoStore:
    """Dependency for getting the store bound to the running app."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Todo store is not ready")
    return store


def get_todo_service(
    store: TodoStore = Depends(get_todo_store),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(store)
