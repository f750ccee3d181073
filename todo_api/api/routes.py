"""API routes for todo management."""

from typing import List

from fastapi import APIRouter, Depends, status

from todo_api.api.dependencies import get_todo_service
from todo_api.models.todo import DeleteResult, ErrorResponse, Todo, TodoCreate, ToggleResult
from todo_api.services.todo_service import TodoService

router = APIRouter(tags=["todos"])

_ID_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/todos", response_model=List[Todo], responses={500: {"model": ErrorResponse}})
def get_todos(service: TodoService = Depends(get_todo_service)) -> List[Todo]:
    """Get all todo items."""
    return service.list_todos()


@router.post(
    "/todos",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a new todo item."""
    return service.create_todo(todo_data)


@router.get("/todos/{todo_id}", response_model=Todo, responses=_ID_ERRORS)
def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> Todo:
    """Get a specific todo item by ID."""
    return service.get_todo(todo_id)


@router.patch("/todos/{todo_id}", response_model=ToggleResult, responses=_ID_ERRORS)
def toggle_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> ToggleResult:
    """Toggle the completed flag of a todo item."""
    completed = service.toggle_todo(todo_id)
    return ToggleResult(completed=completed)


@router.delete("/todos/{todo_id}", response_model=DeleteResult, responses=_ID_ERRORS)
def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> DeleteResult:
    """Delete a todo item. Deleting an id that no longer exists succeeds."""
    service.delete_todo(todo_id)
    return DeleteResult()
