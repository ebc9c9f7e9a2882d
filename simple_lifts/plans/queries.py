"""Read-only helpers over a Plan."""

import datetime as dt

from simple_lifts.plans.types import Plan, SessionDay, date_key


def get_next_session_date(plan: Plan, today: dt.date | str) -> str | None:
    """Get the first session date on or after today.

    Args:
        plan: Plan to search
        today: Reference date

    Returns:
        ISO date of the next session, or None if the plan has ended
    """
    today_key = date_key(today)
    return next((key for key in plan.sorted_dates() if key >= today_key), None)


def get_next_session(plan: Plan, today: dt.date | str) -> SessionDay | None:
    key = get_next_session_date(plan, today)
    return plan[key] if key is not None else None


def get_sessions_between(
    plan: Plan,
    start: dt.date | str | None = None,
    end: dt.date | str | None = None,
) -> list[SessionDay]:
    """Sessions in chronological order within an inclusive date range."""
    start_key = date_key(start) if start is not None else None
    end_key = date_key(end) if end is not None else None
    return [
        plan[key]
        for key in plan.sorted_dates()
        if (start_key is None or key >= start_key) and (end_key is None or key <= end_key)
    ]


def get_exercise_history(plan: Plan, name: str) -> list[tuple[str, int]]:
    """Chronological (date, weight) pairs for every occurrence of an exercise."""
    return [
        (day.key, exercise.weight)
        for day in plan.days()
        for exercise in day.exercises
        if exercise.name == name
    ]
