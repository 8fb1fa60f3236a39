"""Weekly progress helpers."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..models.habit import HabitFrequency
from .streaks import week_start

DAYS_IN_WEEK = 7


def compute_weekly_progress(
    completion_dates: Iterable[date],
    frequency: HabitFrequency | str,
    *,
    today: date,
) -> int:
    """Return 0-100 completeness of the week containing ``today``.

    Every supplied date on or after the week's Sunday counts, so backdated or
    duplicated rows can push a daily habit past seven; the result is clamped.
    """

    boundary = week_start(today)
    this_week = sum(1 for day in completion_dates if day >= boundary)

    if HabitFrequency(frequency) is HabitFrequency.WEEKLY:
        return 100 if this_week else 0
    return round(min(this_week / DAYS_IN_WEEK, 1) * 100)


def is_period_complete(
    completion_dates: Iterable[date],
    frequency: HabitFrequency | str,
    *,
    today: date,
) -> bool:
    """Whether the active period (today, or this week for weekly habits) has a completion."""

    if HabitFrequency(frequency) is HabitFrequency.WEEKLY:
        boundary = week_start(today)
        return any(day >= boundary for day in completion_dates)
    return today in set(completion_dates)


__all__ = ["DAYS_IN_WEEK", "compute_weekly_progress", "is_period_complete"]
