"""Process-local habit store used for tests and throwaway instances."""

from __future__ import annotations

import threading
from datetime import date
from typing import Optional

from ...models.habit import Completion, Habit


def _copy_habit(habit: Habit, **changes) -> Habit:
    fields = {
        "id": habit.id,
        "name": habit.name,
        "description": habit.description,
        "frequency": habit.frequency,
        "created_at": habit.created_at,
    }
    fields.update(changes)
    return Habit(**fields)


def _copy_completion(completion: Completion) -> Completion:
    return Completion(
        id=completion.id,
        habit_id=completion.habit_id,
        completed_at=completion.completed_at,
    )


class InMemoryHabitStore:
    """Dict-backed habit store. Each instance is independent; callers get copies."""

    def __init__(self) -> None:
        self._habits: dict[str, Habit] = {}
        self._completions: dict[str, Completion] = {}
        self._lock = threading.RLock()

    def list_habits(self) -> list[Habit]:
        with self._lock:
            rows = [_copy_habit(h) for h in self._habits.values()]
        return sorted(rows, key=lambda h: (h.created_at, h.name))

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        with self._lock:
            habit = self._habits.get(habit_id)
            return _copy_habit(habit) if habit else None

    def create_habit(self, habit: Habit) -> Habit:
        with self._lock:
            self._habits[habit.id] = _copy_habit(habit)
            return _copy_habit(habit)

    def update_habit(self, habit: Habit) -> Optional[Habit]:
        with self._lock:
            existing = self._habits.get(habit.id)
            if existing is None:
                return None
            updated = _copy_habit(
                existing,
                name=habit.name,
                description=habit.description,
                frequency=habit.frequency,
            )
            self._habits[habit.id] = updated
            return _copy_habit(updated)

    def delete_habit(self, habit_id: str) -> bool:
        with self._lock:
            if habit_id not in self._habits:
                return False
            for key in [k for k, c in self._completions.items() if c.habit_id == habit_id]:
                del self._completions[key]
            del self._habits[habit_id]
            return True

    # Completion operations
    def list_completions(self, habit_id: str) -> list[Completion]:
        with self._lock:
            rows = [_copy_completion(c) for c in self._completions.values() if c.habit_id == habit_id]
        return sorted(rows, key=lambda c: c.completed_at, reverse=True)

    def get_completion(self, habit_id: str, day: date) -> Optional[Completion]:
        with self._lock:
            for completion in self._completions.values():
                if completion.habit_id == habit_id and completion.completed_at == day:
                    return _copy_completion(completion)
            return None

    def create_completion(self, habit_id: str, day: date) -> Completion:
        with self._lock:
            completion = Completion(habit_id=habit_id, completed_at=day)
            self._completions[completion.id] = completion
            return _copy_completion(completion)

    def delete_completion(self, habit_id: str, day: date) -> bool:
        with self._lock:
            for key, completion in self._completions.items():
                if completion.habit_id == habit_id and completion.completed_at == day:
                    del self._completions[key]
                    return True
            return False
