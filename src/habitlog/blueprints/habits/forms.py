"""Habit payload validation."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...models.habit import HabitFrequency


def structured_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten a pydantic ValidationError into ``{field: [messages]}``."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


class HabitForm(BaseModel):
    """Create/update payload for a habit."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(description="Short label for the habit", max_length=100)
    description: Optional[str] = Field(
        default=None, description="Optional details about the habit", max_length=400
    )
    frequency: HabitFrequency = Field(description="Habit frequency")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a habit name.")
        return value

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @classmethod
    def from_payload(cls, payload: Any) -> tuple[Optional["HabitForm"], dict[str, list[str]]]:
        """Return ``(form, {})`` on success or ``(None, errors)``."""

        if not isinstance(payload, dict):
            return None, {"__root__": ["Expected a JSON object."]}
        try:
            return cls.model_validate(payload), {}
        except ValidationError as exc:
            return None, structured_errors(exc)


class ToggleForm(BaseModel):
    """Optional body for the toggle endpoint."""

    model_config = ConfigDict(extra="ignore")

    day: Optional[date] = Field(default=None, alias="date", description="Day to toggle, YYYY-MM-DD")

    @field_validator("day", mode="before")
    @classmethod
    def require_iso_string(cls, value: Any) -> Any:
        # lax mode would otherwise read integers as Unix timestamps
        if value is not None and not isinstance(value, str):
            raise ValueError("Expected a YYYY-MM-DD date string.")
        return value


__all__ = ["HabitForm", "ToggleForm", "structured_errors"]
