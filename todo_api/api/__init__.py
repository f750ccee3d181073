"""HTTP layer for the todo API."""

from .routes import router

__all__ = ["router"]
