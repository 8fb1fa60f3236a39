"""SQLModel implementation of the habit store."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.habit import Completion, Habit


class SQLModelHabitStore:
    """SQLModel-based habit store implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_habits(self) -> list[Habit]:
        with self.session_factory() as session:
            statement = select(Habit).order_by(Habit.created_at, Habit.name)  # type: ignore[arg-type]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        with self.session_factory() as session:
            obj = session.get(Habit, habit_id)
            if obj:
                session.expunge(obj)
            return obj

    def create_habit(self, habit: Habit) -> Habit:
        with self.session_factory() as session:
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def update_habit(self, habit: Habit) -> Optional[Habit]:
        """Update mutable fields; ``created_at`` is left untouched."""
        with self.session_factory() as session:
            existing = session.get(Habit, habit.id)
            if existing is None:
                return None
            existing.name = habit.name
            existing.description = habit.description
            existing.frequency = habit.frequency
            session.add(existing)
            session.commit()
            session.refresh(existing)
            session.expunge(existing)
            return existing

    def delete_habit(self, habit_id: str) -> bool:
        with self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                return False
            for completion in session.exec(
                select(Completion).where(Completion.habit_id == habit_id)
            ).all():
                session.delete(completion)
            session.flush()
            session.delete(habit)
            session.commit()
            return True

    # Completion operations
    def list_completions(self, habit_id: str) -> list[Completion]:
        with self.session_factory() as session:
            statement = (
                select(Completion)
                .where(Completion.habit_id == habit_id)
                .order_by(Completion.completed_at.desc())  # type: ignore[attr-defined]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def get_completion(self, habit_id: str, day: date) -> Optional[Completion]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Completion)
                .where(Completion.habit_id == habit_id)
                .where(Completion.completed_at == day)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def create_completion(self, habit_id: str, day: date) -> Completion:
        with self.session_factory() as session:
            completion = Completion(habit_id=habit_id, completed_at=day)
            session.add(completion)
            session.commit()
            session.refresh(completion)
            session.expunge(completion)
            return completion

    def delete_completion(self, habit_id: str, day: date) -> bool:
        with self.session_factory() as session:
            completion = session.exec(
                select(Completion)
                .where(Completion.habit_id == habit_id)
                .where(Completion.completed_at == day)
            ).first()
            if completion is None:
                return False
            session.delete(completion)
            session.commit()
            return True
