"""Serializers for plans and templates - JSON serialization utilities.

Plans serialize to a dict keyed by ISO date. Deserialization also accepts
the legacy storage keys ("dayName", "logs", "workoutsA", "workoutsB").
"""

from typing import Any

from simple_lifts.plans.types import Plan, TemplateSet


def serialize_plan(plan: Plan) -> dict[str, Any]:
    """Serialize Plan to a JSON-serializable dict.

    Args:
        plan: Plan to serialize

    Returns:
        Dict keyed by ISO date, in chronological order
    """
    data = plan.model_dump(mode="json", by_alias=True)
    return {key: data[key] for key in plan.sorted_dates()}


def _normalize_day(day: dict[str, Any]) -> dict[str, Any]:
    normalized = dict(day)
    if "dayName" in normalized and "dayLabel" not in normalized:
        normalized["dayLabel"] = normalized.pop("dayName")
    if "logs" in normalized and "exercises" not in normalized:
        normalized["exercises"] = normalized.pop("logs")
    return normalized


def deserialize_plan(data: dict[str, Any]) -> Plan:
    """Deserialize dict to Plan.

    Args:
        data: Dict keyed by ISO date

    Returns:
        Plan object

    Raises:
        ValueError: If the data does not describe a valid plan
    """
    return Plan.model_validate({key: _normalize_day(day) for key, day in data.items()})


def serialize_templates(templates: TemplateSet) -> dict[str, Any]:
    return {
        "workoutsA": [t.model_dump(mode="json", by_alias=True) for t in templates.group_a],
        "workoutsB": [t.model_dump(mode="json", by_alias=True) for t in templates.group_b],
    }


def deserialize_templates(data: dict[str, Any]) -> TemplateSet:
    """Deserialize dict to TemplateSet.

    Accepts either {"workoutsA", "workoutsB"} or {"group_a", "group_b"}.
    """
    return TemplateSet.model_validate(
        {
            "group_a": data.get("workoutsA", data.get("group_a", [])),
            "group_b": data.get("workoutsB", data.get("group_b", [])),
        }
    )
