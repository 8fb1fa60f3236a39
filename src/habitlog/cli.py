"""Flask CLI commands for habitlog."""

from __future__ import annotations

from datetime import date, timedelta

import click

DEMO_HABITS = (
    ("Morning run", "20 minutes before breakfast", "daily"),
    ("Read", "At least one chapter", "daily"),
    ("Call family", None, "weekly"),
)


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("habitlog-seed")
    @click.option("--days", default=21, show_default=True, type=click.IntRange(1, 366),
                  help="Days of history to generate")
    def habitlog_seed(days: int) -> None:
        """Create demo habits with a completion history."""

        from .extensions import get_habit_service

        service = get_habit_service()
        today = service.clock()
        for index, (name, description, frequency) in enumerate(DEMO_HABITS):
            habit = service.create_habit(name=name, description=description, frequency=frequency)
            step = 7 if frequency == "weekly" else 1
            for offset in range(0, days, step):
                # leave a gap every few periods so streaks differ per habit
                if (offset // step) % (4 + index) == 3:
                    continue
                service.store.create_completion(habit.id, today - timedelta(days=offset))
            click.echo(f"Seeded {name!r} ({frequency})")

    @app.cli.command("habitlog-stats")
    @click.option("--date", "on", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
                  help="Reference date (defaults to today, UTC)")
    def habitlog_stats(on) -> None:
        """Print streak and progress statistics for every habit."""

        from .extensions import get_habit_service
        from .services.habits import HabitService

        service = get_habit_service()
        if on is not None:
            reference: date = on.date()
            service = HabitService(service.store, clock=lambda: reference)

        habits = service.list_habits()
        if not habits:
            click.echo("No habits yet.")
            return
        for habit in habits:
            last = habit.last_completed_at.isoformat() if habit.last_completed_at else "never"
            click.echo(
                f"{habit.name} [{habit.frequency}] current={habit.current_streak} "
                f"longest={habit.longest_streak} week={habit.weekly_progress}% "
                f"done={'yes' if habit.completed_today else 'no'} last={last}"
            )
