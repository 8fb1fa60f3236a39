"""Habit routes."""

from __future__ import annotations

from flask import jsonify, request
from pydantic import ValidationError

from ...extensions import get_habit_service
from ...services.habits import HabitNotFoundError
from . import bp
from .forms import HabitForm, ToggleForm, structured_errors


def _invalid(errors: dict[str, list[str]]):
    return jsonify({"error": "Invalid habit data", "details": errors}), 400


@bp.errorhandler(HabitNotFoundError)
def _habit_not_found(exc: HabitNotFoundError):
    return jsonify({"error": "Habit not found"}), 404


@bp.get("")
def list_habits():
    """All habits with their current statistics."""

    return jsonify([habit.to_dict() for habit in get_habit_service().list_habits()])


@bp.get("/<habit_id>")
def get_habit(habit_id: str):
    return jsonify(get_habit_service().get_habit(habit_id).to_dict())


@bp.post("")
def create_habit():
    form, errors = HabitForm.from_payload(request.get_json(silent=True))
    if form is None:
        return _invalid(errors)

    habit = get_habit_service().create_habit(
        name=form.name,
        description=form.description,
        frequency=form.frequency,
    )
    return jsonify(habit.to_dict()), 201


@bp.patch("/<habit_id>")
def update_habit(habit_id: str):
    """Replace name, description and frequency."""

    form, errors = HabitForm.from_payload(request.get_json(silent=True))
    if form is None:
        return _invalid(errors)

    habit = get_habit_service().update_habit(
        habit_id,
        name=form.name,
        description=form.description,
        frequency=form.frequency,
    )
    return jsonify(habit.to_dict())


@bp.delete("/<habit_id>")
def delete_habit(habit_id: str):
    get_habit_service().delete_habit(habit_id)
    return jsonify({"success": True})


@bp.post("/<habit_id>/toggle")
def toggle_habit(habit_id: str):
    """Toggle completion for today, or for the ``date`` given in the body."""

    payload = request.get_json(silent=True) or {}
    try:
        form = ToggleForm.model_validate(payload)
    except ValidationError as exc:
        return _invalid(structured_errors(exc))

    habit = get_habit_service().toggle_completion(habit_id, form.day)
    return jsonify(habit.to_dict())
