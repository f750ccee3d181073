from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from todo_api.errors import ConfigurationError

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("memory", "mongo")
DEFAULT_DEV_ORIGINS = ("http://localhost:5173",)


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    mongodb_uri: Optional[str]
    mongodb_database: str
    mongodb_collection: str
    mongodb_timeout_ms: int
    allowed_origins: Tuple[str, ...]
    environment: str
    host: str
    port: int
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def parse_int_env(raw_value: Optional[str], default: int, name: str = "") -> int:
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid %s value '%s'; defaulting to %s", name or "integer", raw_value, default)
        return default


def parse_allowed_origins(raw_origins: Optional[str], is_production: bool) -> Tuple[str, ...]:
    parsed = [origin.strip() for origin in (raw_origins or "").split(",") if origin.strip()]
    if "*" in parsed:
        logger.warning("ALLOWED_ORIGINS contains '*'; ignoring wildcard entry.")
    origins = tuple(origin for origin in parsed if origin != "*")
    if origins:
        return origins
    if is_production:
        logger.warning(
            "ALLOWED_ORIGINS is empty in production; CORS will block all cross-origin requests."
        )
        return ()
    return DEFAULT_DEV_ORIGINS


def load_settings() -> Settings:
    """Build settings from the process environment."""
    mongodb_uri = os.getenv("MONGODB_URI") or None
    default_backend = "mongo" if mongodb_uri else "memory"
    storage_backend = (os.getenv("STORAGE_BACKEND") or default_backend).strip().lower()
    if storage_backend not in STORAGE_BACKENDS:
        raise ConfigurationError(
            f"Unknown STORAGE_BACKEND '{storage_backend}'; expected one of {', '.join(STORAGE_BACKENDS)}"
        )
    if storage_backend == "mongo" and not mongodb_uri:
        raise ConfigurationError("STORAGE_BACKEND=mongo requires MONGODB_URI")

    environment = os.getenv("ENVIRONMENT", "").lower()
    return Settings(
        storage_backend=storage_backend,
        mongodb_uri=mongodb_uri,
        mongodb_database=os.getenv("MONGODB_DATABASE", "todo_app"),
        mongodb_collection=os.getenv("MONGODB_COLLECTION", "todos"),
        mongodb_timeout_ms=parse_int_env(os.getenv("MONGODB_TIMEOUT_MS"), 5000, "MONGODB_TIMEOUT_MS"),
        allowed_origins=parse_allowed_origins(os.getenv("ALLOWED_ORIGINS"), environment == "production"),
        environment=environment,
        host=os.getenv("HOST", "0.0.0.0"),
        port=parse_int_env(os.getenv("PORT"), 8080, "PORT"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return load_settings()
