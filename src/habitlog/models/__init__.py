"""SQLModel table exports."""

from .habit import Completion, Habit, HabitFrequency, utc_today

__all__ = [
    "Completion",
    "Habit",
    "HabitFrequency",
    "utc_today",
]
