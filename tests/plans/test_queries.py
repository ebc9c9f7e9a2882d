"""Tests for plan read helpers."""

import datetime as dt

from simple_lifts.plans.queries import (
    get_exercise_history,
    get_next_session,
    get_next_session_date,
    get_sessions_between,
)


def test_next_session_on_training_day(default_plan):
    assert get_next_session_date(default_plan, dt.date(2026, 10, 21)) == "2026-10-21"


def test_next_session_on_rest_day(default_plan):
    assert get_next_session_date(default_plan, "2026-10-22") == "2026-10-23"
    assert get_next_session(default_plan, "2026-10-24").key == "2026-10-26"


def test_next_session_after_plan_end(default_plan):
    assert get_next_session_date(default_plan, "2027-04-03") is None
    assert get_next_session(default_plan, "2027-04-03") is None


def test_sessions_between(default_plan):
    sessions = get_sessions_between(default_plan, "2026-10-20", dt.date(2026, 10, 28))
    assert [s.key for s in sessions] == ["2026-10-21", "2026-10-23", "2026-10-26", "2026-10-28"]
    assert len(get_sessions_between(default_plan)) == len(default_plan)


def test_exercise_history(default_plan):
    history = get_exercise_history(default_plan, "Bench Press")
    assert history[:3] == [("2026-10-19", 100), ("2026-10-23", 100), ("2026-10-28", 105)]
    assert get_exercise_history(default_plan, "Curl") == []
