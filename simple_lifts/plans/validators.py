"""Validators for plan edits.

Enforces preconditions before any new plan is built:
- Edit date must be a session date of the plan
- Corrected exercises must match the day's exercises position by position
"""

import datetime as dt
from collections.abc import Sequence

from simple_lifts.plans.errors import DateNotFoundError, MisalignedEditError
from simple_lifts.plans.types import LoggedExercise, Plan, date_key


def validate_edit_date(plan: Plan, edit_date: dt.date | str) -> str:
    """Validate that edit_date is a session date of the plan.

    Args:
        plan: Current plan
        edit_date: Date to edit (date or ISO string)

    Returns:
        Normalized ISO date key

    Raises:
        DateNotFoundError: If the date is malformed or not in the plan
    """
    try:
        key = date_key(edit_date)
    except ValueError as e:
        raise DateNotFoundError(f"Invalid date: {edit_date!r}") from e

    if key not in plan.root:
        raise DateNotFoundError(f"No session scheduled on {key}")
    return key


def validate_alignment(
    existing: Sequence[LoggedExercise],
    corrected: Sequence[LoggedExercise],
) -> None:
    """Validate that corrected exercises line up with the existing ones.

    Raises:
        MisalignedEditError: If lengths differ or any position holds a different exercise
    """
    if len(corrected) != len(existing):
        raise MisalignedEditError(
            f"Expected {len(existing)} exercises, got {len(corrected)}"
        )

    mismatches = [
        f"position {idx}: expected '{old.name}', got '{new.name}'"
        for idx, (old, new) in enumerate(zip(existing, corrected))
        if old.name != new.name
    ]
    if mismatches:
        raise MisalignedEditError(mismatches)


def validate_edit(
    plan: Plan,
    edit_date: dt.date | str,
    corrected: Sequence[LoggedExercise],
) -> None:
    """Validate a single-day log edit against the plan."""
    key = validate_edit_date(plan, edit_date)
    validate_alignment(plan.root[key].exercises, corrected)
