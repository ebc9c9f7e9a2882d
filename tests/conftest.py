"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import datetime as dt

import pytest
from loguru import logger

from simple_lifts.plans.generator import generate_plan
from simple_lifts.plans.templates import default_template_set
from simple_lifts.plans.types import ExerciseTemplate, Plan, TemplateSet


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (e.g. by the CLI callback).

    CliRunner swaps sys.stderr per invocation; a sink left pointing at the
    swapped stream would break logging in later tests.
    """
    yield
    logger.remove()


@pytest.fixture
def monday() -> dt.date:
    """A Monday used as the reference "today"."""
    return dt.date(2026, 10, 19)


@pytest.fixture
def templates() -> TemplateSet:
    return default_template_set()


@pytest.fixture
def bench_only() -> list[ExerciseTemplate]:
    return [ExerciseTemplate(name="Bench Press", starting_weight=100)]


@pytest.fixture
def default_plan(templates: TemplateSet, monday: dt.date) -> Plan:
    """24-week plan from the starter templates."""
    return generate_plan(templates.group_a, templates.group_b, monday)
