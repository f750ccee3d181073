"""Main FastAPI application for the todo API."""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.routes import router as api_router
from todo_api.errors import StorageError, TodoError
from todo_api.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_api.models.todo import ErrorResponse
from todo_api.repositories.base import TodoStore
from todo_api.repositories.mongo_repository import MongoTodoRepository
from todo_api.repositories.todo_repository import InMemoryTodoRepository
from todo_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> TodoStore:
    """Create the store selected by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "mongo":
        return MongoTodoRepository.connect(
            settings.mongodb_uri,
            settings.mongodb_database,
            settings.mongodb_collection,
            timeout_ms=settings.mongodb_timeout_ms,
        )
    return InMemoryTodoRepository()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    owns_store = app.state.store is None
    logger.info("Starting Todo API (backend=%s)", settings.storage_backend)
    logger.info("CORS allowed origins=%s", list(settings.allowed_origins))

    if owns_store:
        store = build_store(settings)
        try:
            store.ping()
        except StorageError:
            logger.exception("Failed to verify %s storage connection", store.name)
            store.close()
            raise
        app.state.store = store
        logger.info("Connected to %s storage", store.name)

    yield

    logger.info("Shutting down Todo API...")
    if owns_store:
        app.state.store.close()
        app.state.store = None


def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    """Build the application. A given ``store`` is used as-is and never closed."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="Create, list, toggle and delete todo items",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s",
                request.method,
                request.url.path,
                exc.__cause__ or exc,
            )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return _error_response(exc.status_code, message)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error for %s %s", request.method, request.url.path)
            response = _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": "Todo API",
            "endpoints": "/api/todos",
        }

    @app.get("/health")
    def health_check(request: Request) -> dict[str, object]:
        """Health check for monitoring."""
        store = request.app.state.store
        return {
            "ok": True,
            "status": "healthy",
            "backend": store.name if store is not None else None,
        }

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
