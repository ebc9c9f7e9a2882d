"""Tests for plan and template serialization."""

import json

import pytest
from pydantic import ValidationError

from simple_lifts.plans.serializers import (
    deserialize_plan,
    deserialize_templates,
    serialize_plan,
    serialize_templates,
)


def test_serialized_plan_shape(default_plan):
    data = serialize_plan(default_plan)

    assert list(data) == default_plan.sorted_dates()
    assert data["2026-10-19"] == {
        "date": "2026-10-19",
        "dayLabel": "Mon",
        "exercises": [
            {"name": "Bench Press", "weight": 100},
            {"name": "Incline Dumbbell Press", "weight": 50},
        ],
    }
    # Must survive a real JSON round trip
    assert deserialize_plan(json.loads(json.dumps(data))) == default_plan


def test_deserialize_legacy_plan_keys():
    data = {
        "2026-10-19": {
            "date": "2026-10-19",
            "dayName": "Mon",
            "logs": [{"name": "Bench Press", "weight": 100}],
        }
    }
    plan = deserialize_plan(data)
    assert plan["2026-10-19"].day_label == "Mon"
    assert plan["2026-10-19"].exercises[0].weight == 100


def test_deserialize_rejects_mismatched_key():
    data = {"2026-10-20": {"date": "2026-10-19", "dayLabel": "Mon", "exercises": []}}
    with pytest.raises(ValidationError):
        deserialize_plan(data)


def test_templates_serialization(templates):
    data = serialize_templates(templates)
    assert data["workoutsA"][0] == {"name": "Bench Press", "startingWeight": 100}
    assert deserialize_templates(data) == templates


def test_deserialize_templates_missing_group():
    templates = deserialize_templates({"workoutsA": [{"name": "Bench Press", "startingWeight": 100}]})
    assert templates.group_b == ()
