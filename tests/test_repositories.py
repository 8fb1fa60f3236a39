"""Unit tests for HabitStore implementations."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from habitlog.models import Habit

from .conftest import TODAY


def test_habit_crud(store, habit_factory):
    """Create, read, update, list and delete a habit."""
    created = habit_factory(name="Meditate", description="Ten minutes")

    assert created.id
    fetched = store.get_habit(created.id)
    assert fetched is not None
    assert fetched.name == "Meditate"
    assert fetched.created_at == TODAY

    updated = store.update_habit(
        Habit(id=created.id, name="Meditate daily", description=None, frequency="weekly")
    )
    assert updated is not None
    assert updated.name == "Meditate daily"
    assert updated.description is None
    assert updated.frequency == "weekly"
    # creation date is immutable
    assert updated.created_at == TODAY

    assert [h.id for h in store.list_habits()] == [created.id]

    assert store.delete_habit(created.id) is True
    assert store.get_habit(created.id) is None
    assert store.list_habits() == []


def test_missing_habit(store):
    assert store.get_habit("nope") is None
    assert store.update_habit(Habit(id="nope", name="x", frequency="daily")) is None
    assert store.delete_habit("nope") is False


def test_habits_are_listed_oldest_first(store, habit_factory):
    habit_factory(name="Newer", created_at=date(2024, 5, 10))
    habit_factory(name="Older", created_at=date(2024, 1, 1))

    assert [h.name for h in store.list_habits()] == ["Older", "Newer"]


def test_completion_roundtrip(store, habit_factory):
    habit = habit_factory()

    store.create_completion(habit.id, date(2024, 5, 13))
    store.create_completion(habit.id, date(2024, 5, 15))
    store.create_completion(habit.id, date(2024, 5, 14))

    completions = store.list_completions(habit.id)
    assert [c.completed_at for c in completions] == [
        date(2024, 5, 15),
        date(2024, 5, 14),
        date(2024, 5, 13),
    ]
    assert all(c.habit_id == habit.id for c in completions)

    found = store.get_completion(habit.id, date(2024, 5, 14))
    assert found is not None
    assert found.completed_at == date(2024, 5, 14)
    assert store.get_completion(habit.id, date(2024, 5, 1)) is None

    assert store.delete_completion(habit.id, date(2024, 5, 14)) is True
    assert store.delete_completion(habit.id, date(2024, 5, 14)) is False
    assert len(store.list_completions(habit.id)) == 2


def test_completions_are_scoped_to_habit(store, habit_factory):
    first = habit_factory(name="First")
    second = habit_factory(name="Second")

    store.create_completion(first.id, TODAY)

    assert store.list_completions(second.id) == []
    assert store.get_completion(second.id, TODAY) is None


def test_delete_habit_cascades_to_completions(store, habit_factory):
    habit = habit_factory()
    other = habit_factory(name="Other")
    store.create_completion(habit.id, TODAY)
    store.create_completion(habit.id, date(2024, 5, 14))
    store.create_completion(other.id, TODAY)

    assert store.delete_habit(habit.id) is True

    assert store.list_completions(habit.id) == []
    assert len(store.list_completions(other.id)) == 1


def test_returned_objects_are_detached(store, habit_factory):
    habit = habit_factory(name="Original")
    fetched = store.get_habit(habit.id)
    fetched.name = "Mutated locally"

    assert store.get_habit(habit.id).name == "Original"


def test_sql_store_rejects_duplicate_day(sql_store):
    habit = sql_store.create_habit(Habit(name="Once a day", frequency="daily", created_at=TODAY))
    sql_store.create_completion(habit.id, TODAY)

    with pytest.raises(IntegrityError):
        sql_store.create_completion(habit.id, TODAY)
