"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Model for creating new todos."""

    body: Optional[str] = Field(None, description="Task text, must not be empty")


class Todo(BaseModel):
    """Stored todo item."""

    id: Union[int, str]
    body: str
    completed: bool = False

    model_config = ConfigDict(from_attributes=True)


class ToggleResult(BaseModel):
    success: Literal[True] = True
    completed: bool


class DeleteResult(BaseModel):
    success: Literal[True] = True


class ErrorResponse(BaseModel):
    """Single error payload shape returned by every failing endpoint."""

    error: str
