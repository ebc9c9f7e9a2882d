"""Plan generation - closed-form calendar construction.

Builds the full multi-week A/B schedule:
- Training on Monday, Wednesday and Friday only
- Even weeks run A/B/A, odd weeks run B/A/B
- Every exercise gains 5% per week, rounded to 5 lbs after each week

Pure function of its inputs: the caller supplies "today", nothing is read
from the clock and nothing is logged.
"""

import datetime as dt
from collections.abc import Sequence

from simple_lifts.plans.constants import (
    DAY_LABELS,
    DEFAULT_HORIZON_WEEKS,
    EVEN_WEEK_PATTERN,
    LIFTING_DAYS_OF_WEEK,
    ODD_WEEK_PATTERN,
)
from simple_lifts.plans.errors import NoTemplatesError
from simple_lifts.plans.progression import project_weight
from simple_lifts.plans.types import ExerciseTemplate, LoggedExercise, Plan, SessionDay


def day_of_week(value: dt.date) -> int:
    """Weekday index with Sunday=0 ... Saturday=6."""
    return (value.weekday() + 1) % 7


def get_starting_date(reference_date: dt.date) -> dt.date:
    """Get the first lifting day of the week containing reference_date.

    Weeks start on Sunday, so a Sunday reference resolves to the next day.
    From that week's Monday, walk forward to the first lifting weekday.

    Args:
        reference_date: Host-supplied "today"

    Returns:
        First session date of the plan
    """
    week_start = reference_date - dt.timedelta(days=day_of_week(reference_date))
    start = week_start + dt.timedelta(days=1)  # Monday
    while day_of_week(start) not in LIFTING_DAYS_OF_WEEK:
        start += dt.timedelta(days=1)
    return start


def get_week_pattern(week: int) -> tuple[str, ...]:
    """Template group for each lifting slot of a week."""
    return EVEN_WEEK_PATTERN if week % 2 == 0 else ODD_WEEK_PATTERN


def build_session_exercises(templates: Sequence[ExerciseTemplate], week: int) -> tuple[LoggedExercise, ...]:
    """Project every template of a group to its weight for the given week."""
    return tuple(
        LoggedExercise(name=template.name, weight=project_weight(template.starting_weight, week))
        for template in templates
    )


def generate_plan(
    templates_a: Sequence[ExerciseTemplate],
    templates_b: Sequence[ExerciseTemplate],
    reference_date: dt.date,
    *,
    horizon_weeks: int = DEFAULT_HORIZON_WEEKS,
) -> Plan:
    """Generate the full training plan.

    Args:
        templates_a: Ordered exercises for A days
        templates_b: Ordered exercises for B days
        reference_date: Anchor "today" used to find the first session
        horizon_weeks: Number of weeks to generate

    Returns:
        Plan with len(LIFTING_DAYS_OF_WEEK) * horizon_weeks sessions

    Raises:
        NoTemplatesError: If both template groups are empty
        ValueError: If horizon_weeks < 1
    """
    if not templates_a and not templates_b:
        raise NoTemplatesError("Add at least one A or B exercise before generating a plan")
    if horizon_weeks < 1:
        raise ValueError(f"horizon_weeks must be >= 1, got {horizon_weeks}")

    groups = {"A": templates_a, "B": templates_b}
    start_date = get_starting_date(reference_date)
    start_dow = day_of_week(start_date)

    days: list[SessionDay] = []
    for week in range(horizon_weeks):
        pattern = get_week_pattern(week)

        for slot, weekday in enumerate(LIFTING_DAYS_OF_WEEK):
            day_offset = (weekday - start_dow + 7) % 7
            session_date = start_date + dt.timedelta(days=week * 7 + day_offset)

            days.append(
                SessionDay(
                    date=session_date,
                    day_label=DAY_LABELS[day_of_week(session_date)],
                    exercises=build_session_exercises(groups[pattern[slot]], week),
                )
            )

    return Plan.from_days(days)
