"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < 1:
        raise ValueError(f"{name} must be >= 1, got {parsed}")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "catalog-api"
    DB_FILENAME = "catalog.db"
    STORE_BACKENDS = ("sqlmodel", "memory")
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("CATALOG_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("CATALOG_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("CATALOG_DATABASE_URL", self._build_sqlite_url())
        self.DEFAULT_PER_PAGE = _env_int("CATALOG_DEFAULT_PER_PAGE", 10)
        self.MAX_PER_PAGE = _env_int("CATALOG_MAX_PER_PAGE", 100)
        self.STORE_BACKEND = os.getenv("CATALOG_STORE", "sqlmodel").strip().lower()
        if self.STORE_BACKEND not in self.STORE_BACKENDS:
            raise ValueError(
                f"CATALOG_STORE must be one of {', '.join(self.STORE_BACKENDS)}, "
                f"got {self.STORE_BACKEND!r}"
            )
        if self.DEFAULT_PER_PAGE > self.MAX_PER_PAGE:
            raise ValueError("CATALOG_DEFAULT_PER_PAGE cannot exceed CATALOG_MAX_PER_PAGE.")
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("CATALOG_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("CATALOG_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Configuration used by the test-suite; callers point DATA_DIR at a tmp dir."""

    TESTING = True
