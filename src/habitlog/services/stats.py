"""Assemble derived statistics onto a habit record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from ..models.habit import Habit
from .progress import compute_weekly_progress, is_period_complete
from .streaks import compute_streaks


@dataclass(frozen=True, slots=True)
class HabitWithStats:
    """Read-only projection of a habit plus its statistics. Never persisted."""

    id: str
    name: str
    description: Optional[str]
    frequency: str
    created_at: date
    current_streak: int
    longest_streak: int
    completed_today: bool
    weekly_progress: int
    total_completions: int
    last_completed_at: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase transport shape."""

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "frequency": self.frequency,
            "createdAt": self.created_at.isoformat(),
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "completedToday": self.completed_today,
            "weeklyProgress": self.weekly_progress,
            "totalCompletions": self.total_completions,
            "lastCompletedAt": (
                self.last_completed_at.isoformat() if self.last_completed_at else None
            ),
        }


def build_habit_stats(habit: Habit, completion_dates: Iterable[date], *, today: date) -> HabitWithStats:
    """Recompute every statistic for ``habit`` from its full completion history."""

    dates = list(completion_dates)
    streaks = compute_streaks(dates, habit.frequency, today=today)

    return HabitWithStats(
        id=habit.id,
        name=habit.name,
        description=habit.description,
        frequency=habit.frequency,
        created_at=habit.created_at,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        completed_today=is_period_complete(dates, habit.frequency, today=today),
        weekly_progress=compute_weekly_progress(dates, habit.frequency, today=today),
        total_completions=len(dates),
        last_completed_at=streaks.last_completed_at,
    )


__all__ = ["HabitWithStats", "build_habit_stats"]
