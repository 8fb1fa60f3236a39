"""Habit store protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.habit import Completion, Habit


class HabitStore(Protocol):
    """Storage capability for habits and their completions."""

    def list_habits(self) -> list[Habit]:
        """List all habits, oldest first."""
        ...

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def create_habit(self, habit: Habit) -> Habit:
        """Persist a new habit."""
        ...

    def update_habit(self, habit: Habit) -> Optional[Habit]:
        """Replace name/description/frequency of an existing habit."""
        ...

    def delete_habit(self, habit_id: str) -> bool:
        """Delete a habit and all of its completions."""
        ...

    # Completion operations
    def list_completions(self, habit_id: str) -> list[Completion]:
        """Completions for a habit, newest first."""
        ...

    def get_completion(self, habit_id: str, day: date) -> Optional[Completion]:
        """Get the completion for a habit on a specific day."""
        ...

    def create_completion(self, habit_id: str, day: date) -> Completion:
        """Record a completion for a habit on a day."""
        ...

    def delete_completion(self, habit_id: str, day: date) -> bool:
        """Remove the completion for a habit on a day."""
        ...
