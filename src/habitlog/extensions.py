"""Store and service wiring for the Flask app."""

from __future__ import annotations

from datetime import date
from typing import Callable

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import HabitStore
from .logging_config import get_logger
from .models.habit import utc_today
from .services.habits import HabitService

logger = get_logger(__name__)

EXTENSION_KEY = "habitlog"


def build_store(config: BaseConfig) -> HabitStore:
    """Construct the habit store selected by ``config.STORAGE_BACKEND``."""

    if config.STORAGE_BACKEND == "memory":
        from .infra.repositories import InMemoryHabitStore

        return InMemoryHabitStore()

    from .infra.database import bootstrap_database
    from .infra.repositories import SQLModelHabitStore

    _engine, session_factory = bootstrap_database(config)
    return SQLModelHabitStore(session_factory)


def init_store(
    app: Flask,
    *,
    store: HabitStore | None = None,
    clock: Callable[[], date] | None = None,
) -> HabitService:
    """Attach a HabitService (and its store) to ``app.extensions``."""

    config: BaseConfig = app.config["HABITLOG_CONFIG"]
    if store is None:
        store = build_store(config)
    service = HabitService(store, clock=clock or utc_today)
    app.extensions[EXTENSION_KEY] = {"store": store, "service": service}
    logger.info("Habit store ready", extra={"store": type(store).__name__})
    return service


def get_habit_service() -> HabitService:
    """Return the HabitService bound to the current app."""

    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - misconfigured app
        raise RuntimeError("Habit store not initialized")
    return state["service"]
