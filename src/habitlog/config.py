"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKENDS = ("sqlmodel", "memory")


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "habitlog"
    DB_FILENAME = "habitlog.db"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}
    TESTING = False

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITLOG_DEV_MODE", default=False)
        self.LOG_TO_FILE = _env_bool("HABITLOG_LOG_TO_FILE", default=True)
        self.STORAGE_BACKEND = os.getenv("HABITLOG_STORAGE", "sqlmodel").strip().lower()
        self.DATABASE_URL = os.getenv("HABITLOG_DATABASE_URL", self._build_sqlite_url())
        if self.STORAGE_BACKEND not in STORAGE_BACKENDS:
            raise ValueError(
                f"HABITLOG_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}; "
                f"got {self.STORAGE_BACKEND!r}."
            )

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the SQLite file and logs."""

        path = Path(os.getenv("HABITLOG_DATA_DIR", "instance")).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True


class TestConfig(BaseConfig):
    """In-memory store, no log files."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.STORAGE_BACKEND = "memory"
        self.LOG_TO_FILE = False


_CONFIG_MAP: dict[str, type[BaseConfig]] = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)
