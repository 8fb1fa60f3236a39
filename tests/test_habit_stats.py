"""Tests for assembling HabitWithStats views."""

from __future__ import annotations

from datetime import date, timedelta

from habitlog.models import Habit
from habitlog.services.stats import build_habit_stats

from .conftest import TODAY


def _habit(frequency: str = "daily", **overrides) -> Habit:
    fields = dict(
        id="habit-1",
        name="Read",
        description=None,
        frequency=frequency,
        created_at=date(2024, 5, 1),
    )
    fields.update(overrides)
    return Habit(**fields)


def test_new_habit_has_zeroed_stats():
    stats = build_habit_stats(_habit(), [], today=TODAY)

    assert stats.to_dict() == {
        "id": "habit-1",
        "name": "Read",
        "description": None,
        "frequency": "daily",
        "createdAt": "2024-05-01",
        "currentStreak": 0,
        "longestStreak": 0,
        "completedToday": False,
        "weeklyProgress": 0,
        "totalCompletions": 0,
        "lastCompletedAt": None,
    }


def test_daily_habit_stats():
    dates = [TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2), date(2024, 4, 1)]
    stats = build_habit_stats(_habit(description="One chapter"), dates, today=TODAY)

    assert stats.current_streak == 3
    assert stats.longest_streak == 3
    assert stats.completed_today is True
    assert stats.weekly_progress == 43  # Sunday..Wednesday with three hits
    assert stats.total_completions == 4
    assert stats.last_completed_at == TODAY
    assert stats.to_dict()["lastCompletedAt"] == "2024-05-15"
    assert stats.to_dict()["description"] == "One chapter"


def test_weekly_habit_completed_earlier_this_week():
    dates = [date(2024, 5, 13), date(2024, 5, 6)]
    stats = build_habit_stats(_habit("weekly"), dates, today=TODAY)

    assert stats.current_streak == 2
    assert stats.completed_today is True
    assert stats.weekly_progress == 100


def test_daily_habit_done_yesterday_only():
    stats = build_habit_stats(_habit(), [TODAY - timedelta(days=1)], today=TODAY)

    assert stats.current_streak == 1
    assert stats.completed_today is False


def test_accepts_generators_and_recomputes_identically():
    dates = (TODAY - timedelta(days=i) for i in range(3))
    first = build_habit_stats(_habit(), dates, today=TODAY)
    second = build_habit_stats(_habit(), [TODAY - timedelta(days=i) for i in range(3)], today=TODAY)

    assert first == second
    assert first.total_completions == 3
