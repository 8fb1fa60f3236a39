"""Service module exports."""

from . import habits, progress, stats, streaks

__all__ = [
    "habits",
    "progress",
    "stats",
    "streaks",
]
