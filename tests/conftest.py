"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402
from pytest import fixture  # noqa: E402

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import InMemoryTodoRepository  # noqa: E402
from todo_api.services.todo_service import TodoService  # noqa: E402
from todo_api.settings import Settings  # noqa: E402


def make_settings(**overrides) -> Settings:
    values = dict(
        storage_backend="memory",
        mongodb_uri=None,
        mongodb_database="todo_app",
        mongodb_collection="todos",
        mongodb_timeout_ms=5000,
        allowed_origins=("http://localhost:5173",),
        environment="test",
        host="127.0.0.1",
        port=8080,
        log_level="INFO",
    )
    values.update(overrides)
    return Settings(**values)


@fixture
def settings() -> Settings:
    """Settings for an in-memory app."""
    return make_settings()


@fixture
def store() -> InMemoryTodoRepository:
    """Fresh in-memory store for each test."""
    return InMemoryTodoRepository()


@fixture
def service(store: InMemoryTodoRepository) -> TodoService:
    return TodoService(store)


@fixture
def client(settings: Settings, store: InMemoryTodoRepository):
    """Provide a TestClient bound to the test store."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
