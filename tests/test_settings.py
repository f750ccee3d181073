"""Settings loading tests."""

from pytest import fixture, raises

from todo_api.errors import ConfigurationError
from todo_api.settings import get_settings, load_settings

_ENV_VARS = (
    "STORAGE_BACKEND",
    "MONGODB_URI",
    "MONGODB_DATABASE",
    "MONGODB_COLLECTION",
    "MONGODB_TIMEOUT_MS",
    "ALLOWED_ORIGINS",
    "ENVIRONMENT",
    "HOST",
    "PORT",
    "LOG_LEVEL",
)


@fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_to_memory_backend() -> None:
    settings = load_settings()
    assert settings.storage_backend == "memory"
    assert settings.mongodb_uri is None
    assert settings.port == 8080
    assert settings.allowed_origins == ("http://localhost:5173",)


def test_mongo_uri_selects_mongo_backend(monkeypatch) -> None:
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("MONGODB_DATABASE", "tasks")
    settings = load_settings()
    assert settings.storage_backend == "mongo"
    assert settings.mongodb_database == "tasks"
    assert settings.mongodb_collection == "todos"


def test_explicit_memory_backend_wins_over_uri(monkeypatch) -> None:
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    assert load_settings().storage_backend == "memory"


def test_mongo_backend_requires_uri(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "mongo")
    with raises(ConfigurationError):
        load_settings()


def test_unknown_backend(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
    with raises(ConfigurationError):
        load_settings()


def test_invalid_port_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("MONGODB_TIMEOUT_MS", "250")
    settings = load_settings()
    assert settings.port == 8080
    assert settings.mongodb_timeout_ms == 250


def test_allowed_origins_parsing(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, *, https://b.example,")
    assert load_settings().allowed_origins == ("https://a.example", "https://b.example")


def test_production_has_no_default_origins(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = load_settings()
    assert settings.is_production is True
    assert settings.allowed_origins == ()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
