"""Streak calculations for daily and weekly habits."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..models.habit import HabitFrequency

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


@dataclass(frozen=True, slots=True)
class StreakSummary:
    """Current/longest streak plus the most recent completion date."""

    current_streak: int = 0
    longest_streak: int = 0
    last_completed_at: Optional[date] = None


def week_start(day: date) -> date:
    """Return the Sunday on or before ``day``."""

    # date.weekday(): Monday == 0 ... Sunday == 6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _longest_run(periods: list[date], step: timedelta) -> int:
    """Longest run of adjacent periods exactly ``step`` apart (periods sorted newest first)."""

    if not periods:
        return 0
    longest = run = 1
    for newer, older in zip(periods, periods[1:]):
        if newer - older == step:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def _daily_streaks(days: list[date], today: date) -> tuple[int, int]:
    present = set(days)
    current = 0
    # One day of slack: a streak survives until a whole day passes without a completion.
    if days[0] in (today, today - ONE_DAY):
        cursor = days[0]
        while cursor in present:
            current += 1
            cursor -= ONE_DAY
    return current, max(_longest_run(days, ONE_DAY), current)


def _weekly_streaks(days: list[date], today: date) -> tuple[int, int]:
    weeks = sorted({week_start(day) for day in days}, reverse=True)
    this_week = week_start(today)
    current = 0
    if this_week in weeks:
        current = 1
        for newer, older in zip(weeks, weeks[1:]):
            if newer - older != ONE_WEEK:
                break
            current += 1
    return current, max(_longest_run(weeks, ONE_WEEK), current)


def compute_streaks(
    completion_dates: Iterable[date],
    frequency: HabitFrequency | str,
    *,
    today: date,
) -> StreakSummary:
    """Return the streak summary for a habit's completion history.

    ``today`` is the reference date; nothing here reads the clock. Duplicate
    dates are ignored. Daily habits count consecutive days and keep a streak
    alive through ``today - 1``; weekly habits count consecutive Sunday-anchored
    weeks and require a completion in the current week.
    """

    days = sorted(set(completion_dates), reverse=True)
    if not days:
        return StreakSummary()

    if HabitFrequency(frequency) is HabitFrequency.WEEKLY:
        current, longest = _weekly_streaks(days, today)
    else:
        current, longest = _daily_streaks(days, today)

    return StreakSummary(
        current_streak=current,
        longest_streak=longest,
        last_completed_at=days[0],
    )


__all__ = ["StreakSummary", "compute_streaks", "week_start"]
