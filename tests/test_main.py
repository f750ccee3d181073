"""Application lifecycle tests."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError
from pytest import raises

from todo_api.errors import StorageError
from todo_api.main import build_store, create_app
from todo_api.repositories.mongo_repository import MongoTodoRepository
from todo_api.repositories.todo_repository import InMemoryTodoRepository

from conftest import make_settings

MONGO_CLIENT = "todo_api.repositories.mongo_repository.MongoClient"


def test_build_store_memory() -> None:
    assert isinstance(build_store(make_settings()), InMemoryTodoRepository)


def test_build_store_mongo_uses_timeouts() -> None:
    settings = make_settings(
        storage_backend="mongo",
        mongodb_uri="mongodb://db:27017",
        mongodb_database="tasks",
        mongodb_timeout_ms=1500,
    )
    with patch(MONGO_CLIENT) as client_cls:
        store = build_store(settings)

    assert isinstance(store, MongoTodoRepository)
    client_cls.assert_called_once_with(
        "mongodb://db:27017",
        serverSelectionTimeoutMS=1500,
        connectTimeoutMS=1500,
        socketTimeoutMS=1500,
    )
    client = client_cls.return_value
    assert store.collection is client.__getitem__.return_value.__getitem__.return_value


def test_lifespan_opens_and_closes_owned_store() -> None:
    app = create_app(settings=make_settings())
    assert app.state.store is None

    with TestClient(app) as client:
        assert isinstance(app.state.store, InMemoryTodoRepository)
        assert client.post("/api/todos", json={"body": "in memory"}).status_code == 201

    assert app.state.store is None


def test_lifespan_pings_mongo_on_startup() -> None:
    settings = make_settings(storage_backend="mongo", mongodb_uri="mongodb://db:27017")
    with patch(MONGO_CLIENT) as client_cls:
        app = create_app(settings=settings)
        with TestClient(app):
            client_cls.return_value.admin.command.assert_called_once_with("ping")
        client_cls.return_value.close.assert_called_once_with()


def test_startup_fails_fast_when_mongo_is_unreachable() -> None:
    settings = make_settings(storage_backend="mongo", mongodb_uri="mongodb://db:27017")
    with patch(MONGO_CLIENT) as client_cls:
        client_cls.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")
        app = create_app(settings=settings)
        with raises(StorageError):
            with TestClient(app):
                pass
        client_cls.return_value.close.assert_called_once_with()


def test_injected_store_is_not_closed() -> None:
    store = MagicMock(spec=InMemoryTodoRepository)
    store.name = "memory"
    app = create_app(settings=make_settings(), store=store)

    with TestClient(app):
        pass

    store.ping.assert_not_called()
    store.close.assert_not_called()


def test_requests_before_startup_are_rejected() -> None:
    client = TestClient(create_app(settings=make_settings()))
    response = client.get("/api/todos")
    assert response.status_code == 503
    assert response.json() == {"error": "Todo store is not ready"}
