"""Log propagation - re-derive future weights from a single-day edit.

Rules:
- The edited day takes the corrected exercises verbatim
- Only exercises whose weight actually changed are propagated
- Later days are matched positionally: same index, same exercise name
- Days before the edit are never touched
- The input plan is never mutated; a new Plan is returned
"""

import datetime as dt
from collections.abc import Sequence

from simple_lifts.plans.constants import SLOTS_PER_WEEK
from simple_lifts.plans.progression import propagate_weight
from simple_lifts.plans.types import LoggedExercise, Plan, SessionDay, date_key
from simple_lifts.plans.validators import validate_edit


def weeks_between(edit_index: int, position: int) -> int:
    """Convert a gap in session positions to a gap in weeks."""
    return (position - edit_index) // SLOTS_PER_WEEK


def apply_edit(
    plan: Plan,
    edit_date: dt.date | str,
    corrected_exercises: Sequence[LoggedExercise],
) -> Plan:
    """Apply a logged correction and propagate it to later sessions.

    Args:
        plan: Current plan
        edit_date: Date of the logged session (date or ISO string)
        corrected_exercises: Actual weights, aligned with the day's exercises

    Returns:
        New Plan with the edit applied and future weights recomputed

    Raises:
        DateNotFoundError: If edit_date is not a session date of the plan
        MisalignedEditError: If corrected_exercises do not line up with the day
    """
    validate_edit(plan, edit_date, corrected_exercises)

    edit_key = date_key(edit_date)
    previous = plan[edit_key].exercises
    corrected = tuple(corrected_exercises)

    sorted_dates = plan.sorted_dates()
    edit_index = sorted_dates.index(edit_key)

    changed = [
        (idx, exercise)
        for idx, exercise in enumerate(corrected)
        if exercise.weight != previous[idx].weight
    ]

    days: dict[str, SessionDay] = dict(plan.root)
    days[edit_key] = plan[edit_key].with_exercises(corrected)

    if changed:
        for position in range(edit_index + 1, len(sorted_dates)):
            key = sorted_dates[position]
            exercises = list(days[key].exercises)
            weeks_after = weeks_between(edit_index, position)
            touched = False

            for idx, exercise in changed:
                if idx >= len(exercises) or exercises[idx].name != exercise.name:
                    continue  # Different exercise at this slot
                exercises[idx] = LoggedExercise(
                    name=exercise.name,
                    weight=propagate_weight(exercise.weight, weeks_after),
                )
                touched = True

            if touched:
                days[key] = days[key].with_exercises(exercises)

    return Plan(days)
