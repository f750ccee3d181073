"""Error taxonomy shared by the store, service and HTTP layers."""

from __future__ import annotations

from typing import Optional


class TodoError(Exception):
    """Base error that maps directly onto an HTTP error response."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class TodoValidationError(TodoError):
    """Request was rejected before reaching the store."""

    status_code = 400
    message = "Invalid request"


class EmptyTodoBody(TodoValidationError):
    message = "Todo body cannot be empty"


class InvalidTodoId(TodoValidationError):
    message = "Invalid todo ID"


class TodoNotFound(TodoError):
    status_code = 404
    message = "Todo not found"


class StorageError(TodoError):
    """Backend unreachable, timed out, or rejected the operation."""

    status_code = 500
    message = "Storage error"


class ConfigurationError(Exception):
    """Raised at startup when settings cannot produce a working store."""
