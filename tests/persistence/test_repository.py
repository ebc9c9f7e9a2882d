"""Tests for plan repositories."""

import json

import pytest

from simple_lifts.persistence.repository import InMemoryPlanRepository, JsonFilePlanRepository
from simple_lifts.plans.errors import CorruptPlanDataError
from simple_lifts.plans.templates import add_exercise


def test_in_memory_round_trip(default_plan, templates):
    repo = InMemoryPlanRepository()
    assert repo.load("user-1") is None
    assert repo.load_templates("user-1") is None

    repo.save("user-1", default_plan)
    repo.save_templates("user-1", templates)

    assert repo.load("user-1") == default_plan
    assert repo.load_templates("user-1") == templates
    assert repo.load("user-2") is None


def test_in_memory_instances_are_isolated(default_plan):
    first = InMemoryPlanRepository()
    second = InMemoryPlanRepository()
    first.save("user-1", default_plan)
    assert second.load("user-1") is None


def test_json_file_round_trip(tmp_path, default_plan, templates):
    repo = JsonFilePlanRepository(tmp_path)
    assert repo.load("user-1") is None

    repo.save("user-1", default_plan)
    repo.save_templates("user-1", add_exercise(templates, "A", "Dip", 0))

    assert (tmp_path / "user-1" / "plan.json").exists()
    assert not (tmp_path / "user-1" / "plan.json.tmp").exists()

    reloaded = JsonFilePlanRepository(tmp_path)
    assert reloaded.load("user-1") == default_plan
    assert reloaded.load_templates("user-1").group_a[-1].name == "Dip"


def test_json_file_uses_reference_format(tmp_path, default_plan):
    repo = JsonFilePlanRepository(tmp_path)
    repo.save("user-1", default_plan)

    data = json.loads((tmp_path / "user-1" / "plan.json").read_text(encoding="utf-8"))
    assert data["2026-10-21"]["dayLabel"] == "Wed"
    assert data["2026-10-21"]["exercises"][0] == {"name": "Squat", "weight": 150}


def test_json_file_reads_legacy_files(tmp_path):
    user_dir = tmp_path / "user-1"
    user_dir.mkdir()
    (user_dir / "templates.json").write_text(
        json.dumps({"workoutsA": [{"name": "Bench Press", "startingWeight": 100}], "workoutsB": []}),
        encoding="utf-8",
    )
    templates = JsonFilePlanRepository(tmp_path).load_templates("user-1")
    assert templates.group_a[0].starting_weight == 100


@pytest.mark.parametrize("user_id", ["", "..", "a/b"])
def test_json_file_rejects_unsafe_user_ids(tmp_path, user_id):
    with pytest.raises(ValueError, match="Invalid user_id"):
        JsonFilePlanRepository(tmp_path).load(user_id)


@pytest.mark.parametrize("filename", ["plan.json", "templates.json"])
def test_json_file_unparseable_file_raises_corrupt_data(tmp_path, filename):
    user_dir = tmp_path / "user-1"
    user_dir.mkdir()
    (user_dir / filename).write_text("{not json", encoding="utf-8")
    repo = JsonFilePlanRepository(tmp_path)

    with pytest.raises(CorruptPlanDataError) as exc_info:
        repo.load("user-1") if filename == "plan.json" else repo.load_templates("user-1")

    assert exc_info.value.code == "CORRUPT_DATA"
    assert filename in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        [],
        {"2026-10-19": "Mon"},
        {"2026-10-20": {"date": "2026-10-19", "dayLabel": "Mon", "exercises": []}},
        {"2026-10-19": {"date": "2026-10-19", "dayLabel": "Mon", "exercises": [{"name": "Squat"}]}},
    ],
)
def test_json_file_invalid_plan_raises_corrupt_data(tmp_path, content):
    user_dir = tmp_path / "user-1"
    user_dir.mkdir()
    (user_dir / "plan.json").write_text(json.dumps(content), encoding="utf-8")

    with pytest.raises(CorruptPlanDataError, match="plan.json"):
        JsonFilePlanRepository(tmp_path).load("user-1")


def test_json_file_invalid_templates_raise_corrupt_data(tmp_path):
    user_dir = tmp_path / "user-1"
    user_dir.mkdir()
    (user_dir / "templates.json").write_text(
        json.dumps({"workoutsA": [{"name": "Bench Press", "startingWeight": -5}]}),
        encoding="utf-8",
    )

    with pytest.raises(CorruptPlanDataError, match="templates.json"):
        JsonFilePlanRepository(tmp_path).load_templates("user-1")
