"""A/B template editing.

Templates are edited one exercise at a time. Every operation returns a new
TemplateSet; a full regeneration is needed for edits to reach the plan.
"""

from simple_lifts.plans.errors import TemplateIndexError
from simple_lifts.plans.types import ExerciseTemplate, TemplateGroup, TemplateSet


def default_template_set() -> TemplateSet:
    """Starter templates for a user who has not saved any."""
    return TemplateSet(
        group_a=(
            ExerciseTemplate(name="Bench Press", starting_weight=100),
            ExerciseTemplate(name="Incline Dumbbell Press", starting_weight=50),
        ),
        group_b=(
            ExerciseTemplate(name="Squat", starting_weight=150),
            ExerciseTemplate(name="Deadlift", starting_weight=180),
        ),
    )


def _check_index(templates: TemplateSet, group: TemplateGroup, index: int) -> None:
    size = len(templates.get_group(group))
    if not 0 <= index < size:
        raise TemplateIndexError(f"Group {group} has {size} exercises, no position {index}")


def add_exercise(
    templates: TemplateSet,
    group: TemplateGroup,
    name: str = "",
    starting_weight: int = 0,
) -> TemplateSet:
    """Append an exercise to a group."""
    exercise = ExerciseTemplate(name=name, starting_weight=starting_weight)
    return templates.with_group(group, (*templates.get_group(group), exercise))


def update_exercise(
    templates: TemplateSet,
    group: TemplateGroup,
    index: int,
    *,
    name: str | None = None,
    starting_weight: int | None = None,
) -> TemplateSet:
    """Replace the name and/or starting weight of one exercise.

    Args:
        templates: Current templates
        group: "A" or "B"
        index: Position within the group
        name: New name (None = keep)
        starting_weight: New starting weight (None = keep)

    Returns:
        Updated TemplateSet

    Raises:
        TemplateIndexError: If index is outside the group
        ValueError: If group is invalid or starting_weight is negative
    """
    _check_index(templates, group, index)

    exercises = list(templates.get_group(group))
    current = exercises[index]
    exercises[index] = ExerciseTemplate(
        name=current.name if name is None else name,
        starting_weight=current.starting_weight if starting_weight is None else starting_weight,
    )
    return templates.with_group(group, exercises)


def remove_exercise(templates: TemplateSet, group: TemplateGroup, index: int) -> TemplateSet:
    """Remove one exercise from a group."""
    _check_index(templates, group, index)
    exercises = templates.get_group(group)
    return templates.with_group(group, exercises[:index] + exercises[index + 1 :])
