"""Pytest configuration and shared fixtures for habitlog tests.

Database fixtures use a throwaway SQLite file per test; app fixtures run on the
in-memory store with a fixed clock so date arithmetic is reproducible.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from habitlog.models import Completion, Habit  # noqa: F401

# Wednesday; the week window starts on Sunday 2024-05-12.
TODAY = date(2024, 5, 15)
WEEK_START = date(2024, 5, 12)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config side effects (data dir, logs) inside the test's tmp dir."""

    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("HABITLOG_DATABASE_URL", raising=False)
    monkeypatch.delenv("HABITLOG_STORAGE", raising=False)
    monkeypatch.setenv("HABITLOG_LOG_TO_FILE", "false")


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False}
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the Callable[[], Session] repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def sql_store(session_factory):
    from habitlog.infra.repositories import SQLModelHabitStore

    return SQLModelHabitStore(session_factory)


@pytest.fixture
def memory_store():
    from habitlog.infra.repositories import InMemoryHabitStore

    return InMemoryHabitStore()


@pytest.fixture(params=["sqlmodel", "memory"])
def store(request):
    """Run a test against every HabitStore implementation."""

    fixture_name = "sql_store" if request.param == "sqlmodel" else "memory_store"
    return request.getfixturevalue(fixture_name)


@pytest.fixture
def habit_factory(store):
    """Factory for persisting habits in the active store."""

    def _create_habit(
        name: str = "Exercise",
        frequency: str = "daily",
        description: str | None = None,
        created_at: date = TODAY,
    ) -> Habit:
        return store.create_habit(
            Habit(name=name, frequency=frequency, description=description, created_at=created_at)
        )

    return _create_habit


# =============================================================================
# Service / App Fixtures
# =============================================================================


@pytest.fixture
def clock():
    """Mutable fixed clock; tests may reassign ``clock.today``."""

    class _Clock:
        today = TODAY

        def __call__(self) -> date:
            return self.today

    return _Clock()


@pytest.fixture
def service(memory_store, clock):
    from habitlog.services.habits import HabitService

    return HabitService(memory_store, clock=clock)


@pytest.fixture
def app(memory_store, clock):
    from habitlog import create_app

    app = create_app("testing", store=memory_store, clock=clock)
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
