"""Habit tracking data structures."""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from typing import ClassVar, Optional
from uuid import uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class HabitFrequency(str, Enum):
    """Supported habit cadences."""

    DAILY = "daily"
    WEEKLY = "weekly"


def utc_today() -> date:
    """Current calendar date in the UTC reference calendar."""

    return datetime.now(timezone.utc).date()


def new_id() -> str:
    return str(uuid4())


class Habit(SQLModel, table=True):
    """A recurring habit the user tracks."""

    __tablename__: ClassVar[str] = "habit"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(nullable=False, max_length=100, index=True)
    description: Optional[str] = Field(default=None, max_length=400)
    frequency: str = Field(default=HabitFrequency.DAILY.value, nullable=False, max_length=16)
    created_at: date = Field(default_factory=utc_today, nullable=False)


class Completion(SQLModel, table=True):
    """A habit marked done on one calendar day."""

    __tablename__: ClassVar[str] = "completion"
    __table_args__ = (UniqueConstraint("habit_id", "completed_at", name="uq_completion_habit_day"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    habit_id: str = Field(foreign_key="habit.id", nullable=False, index=True, ondelete="CASCADE")
    completed_at: date = Field(nullable=False, index=True)
