"""Habit service: CRUD plus completion toggling, returning habits with fresh stats."""

from __future__ import annotations

import threading
from datetime import date
from typing import Callable, Optional

from ..domain.repositories import HabitStore
from ..logging_config import get_logger
from ..models.habit import Habit, HabitFrequency, utc_today
from .stats import HabitWithStats, build_habit_stats

logger = get_logger(__name__)


class HabitNotFoundError(LookupError):
    """Raised when a habit id does not resolve to a stored habit."""

    def __init__(self, habit_id: str):
        super().__init__(f"Habit {habit_id!r} not found")
        self.habit_id = habit_id


class HabitService:
    """Coordinates the habit store with the streak/progress calculators.

    Statistics are recomputed from the full completion history on every call,
    using ``clock()`` as the reference date.
    """

    def __init__(self, store: HabitStore, *, clock: Callable[[], date] = utc_today):
        self.store = store
        self.clock = clock
        self._completion_lock = threading.Lock()

    def _with_stats(self, habit: Habit, today: date | None = None) -> HabitWithStats:
        completions = self.store.list_completions(habit.id)
        return build_habit_stats(
            habit,
            (c.completed_at for c in completions),
            today=today or self.clock(),
        )

    def _require(self, habit_id: str) -> Habit:
        habit = self.store.get_habit(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    def list_habits(self) -> list[HabitWithStats]:
        today = self.clock()
        return [self._with_stats(habit, today) for habit in self.store.list_habits()]

    def get_habit(self, habit_id: str) -> HabitWithStats:
        return self._with_stats(self._require(habit_id))

    def create_habit(
        self,
        *,
        name: str,
        frequency: HabitFrequency | str,
        description: Optional[str] = None,
    ) -> HabitWithStats:
        today = self.clock()
        habit = self.store.create_habit(
            Habit(
                name=name,
                description=description,
                frequency=HabitFrequency(frequency).value,
                created_at=today,
            )
        )
        logger.info("Habit created", extra={"habit_id": habit.id, "frequency": habit.frequency})
        return self._with_stats(habit, today)

    def update_habit(
        self,
        habit_id: str,
        *,
        name: str,
        frequency: HabitFrequency | str,
        description: Optional[str] = None,
    ) -> HabitWithStats:
        """Full-record update of name, description and frequency."""

        updated = self.store.update_habit(
            Habit(
                id=habit_id,
                name=name,
                description=description,
                frequency=HabitFrequency(frequency).value,
            )
        )
        if updated is None:
            raise HabitNotFoundError(habit_id)
        logger.info("Habit updated", extra={"habit_id": habit_id})
        return self._with_stats(updated)

    def delete_habit(self, habit_id: str) -> None:
        """Delete a habit and, with it, its completions."""

        with self._completion_lock:
            deleted = self.store.delete_habit(habit_id)
        if not deleted:
            raise HabitNotFoundError(habit_id)
        logger.info("Habit deleted", extra={"habit_id": habit_id})

    def toggle_completion(self, habit_id: str, day: date | None = None) -> HabitWithStats:
        """Mark ``day`` (default: today) complete, or undo it if already complete."""

        today = self.clock()
        target = day or today

        # check-then-act must not interleave with another toggle or a delete
        with self._completion_lock:
            habit = self._require(habit_id)
            if self.store.get_completion(habit_id, target) is not None:
                self.store.delete_completion(habit_id, target)
                completed = False
            else:
                self.store.create_completion(habit_id, target)
                completed = True

        logger.info(
            "Habit completion toggled",
            extra={"habit_id": habit_id, "day": target.isoformat(), "completed": completed},
        )
        return self._with_stats(habit, today)


__all__ = ["HabitNotFoundError", "HabitService"]
