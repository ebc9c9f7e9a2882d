"""Tests for A/B template editing."""

import pytest
from pydantic import ValidationError

from simple_lifts.plans.errors import TemplateIndexError
from simple_lifts.plans.templates import add_exercise, default_template_set, remove_exercise, update_exercise
from simple_lifts.plans.types import ExerciseTemplate, TemplateSet


def test_default_templates():
    templates = default_template_set()
    assert [(t.name, t.starting_weight) for t in templates.group_a] == [
        ("Bench Press", 100),
        ("Incline Dumbbell Press", 50),
    ]
    assert [(t.name, t.starting_weight) for t in templates.group_b] == [
        ("Squat", 150),
        ("Deadlift", 180),
    ]


def test_add_exercise_appends_to_group(templates):
    updated = add_exercise(templates, "B", "Lunge", 40)

    assert updated.group_b[-1] == ExerciseTemplate(name="Lunge", starting_weight=40)
    assert updated.group_a == templates.group_a
    assert len(templates.group_b) == 2  # original untouched


def test_add_blank_exercise(templates):
    updated = add_exercise(templates, "A")
    assert updated.group_a[-1] == ExerciseTemplate(name="", starting_weight=0)


def test_update_exercise(templates):
    updated = update_exercise(templates, "A", 1, starting_weight=55)
    assert updated.group_a[1] == ExerciseTemplate(name="Incline Dumbbell Press", starting_weight=55)

    renamed = update_exercise(updated, "A", 0, name="Close Grip Bench")
    assert renamed.group_a[0] == ExerciseTemplate(name="Close Grip Bench", starting_weight=100)


def test_remove_exercise(templates):
    updated = remove_exercise(templates, "B", 0)
    assert [t.name for t in updated.group_b] == ["Deadlift"]


def test_removing_everything_empties_set(templates):
    updated = templates
    for group in ("A", "B"):
        while updated.get_group(group):
            updated = remove_exercise(updated, group, 0)
    assert updated.is_empty


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_bad_index_rejected(templates, index):
    with pytest.raises(TemplateIndexError):
        remove_exercise(templates, "A", index)
    with pytest.raises(TemplateIndexError):
        update_exercise(templates, "A", index, name="x")


def test_bad_group_rejected(templates):
    with pytest.raises(ValueError, match="Invalid template group"):
        add_exercise(templates, "C", "Curl", 20)  # type: ignore[arg-type]


def test_negative_weight_rejected(templates):
    with pytest.raises(ValidationError):
        add_exercise(templates, "A", "Curl", -5)


def test_templates_accept_legacy_alias():
    template = ExerciseTemplate.model_validate({"name": "Squat", "startingWeight": 150})
    assert template.starting_weight == 150
    assert TemplateSet(group_a=(template,)).is_empty is False
