"""Plans module - A/B strength plan generation and log propagation.

This module provides:
- Immutable plan, session and template types
- Plan generation over a fixed Mon/Wed/Fri grid with 5% weekly overload
- Propagation of a logged correction to every later session
- Template editing and read helpers

Generation and propagation are pure: no I/O, no clock, no logging.
"""

from simple_lifts.plans.errors import (
    CorruptPlanDataError,
    DateNotFoundError,
    MisalignedEditError,
    NoTemplatesError,
    PlanError,
    PlanNotFoundError,
    TemplateIndexError,
)
from simple_lifts.plans.generator import generate_plan, get_starting_date, get_week_pattern
from simple_lifts.plans.progression import project_weight, propagate_weight, round_to_increment
from simple_lifts.plans.propagation import apply_edit
from simple_lifts.plans.queries import get_exercise_history, get_next_session, get_next_session_date
from simple_lifts.plans.serializers import (
    deserialize_plan,
    deserialize_templates,
    serialize_plan,
    serialize_templates,
)
from simple_lifts.plans.templates import add_exercise, default_template_set, remove_exercise, update_exercise
from simple_lifts.plans.types import (
    ExerciseTemplate,
    LoggedExercise,
    Plan,
    SessionDay,
    TemplateGroup,
    TemplateSet,
)

__all__ = [
    "CorruptPlanDataError",
    "DateNotFoundError",
    "ExerciseTemplate",
    "LoggedExercise",
    "MisalignedEditError",
    "NoTemplatesError",
    "Plan",
    "PlanError",
    "PlanNotFoundError",
    "SessionDay",
    "TemplateGroup",
    "TemplateIndexError",
    "TemplateSet",
    "add_exercise",
    "apply_edit",
    "default_template_set",
    "deserialize_plan",
    "deserialize_templates",
    "generate_plan",
    "get_exercise_history",
    "get_next_session",
    "get_next_session_date",
    "get_starting_date",
    "get_week_pattern",
    "project_weight",
    "propagate_weight",
    "remove_exercise",
    "round_to_increment",
    "serialize_plan",
    "serialize_templates",
    "update_exercise",
]
