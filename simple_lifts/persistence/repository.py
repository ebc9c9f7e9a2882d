"""Repository implementations for plan and template persistence.

The plan core never stores anything. Hosts inject a PlanRepository and
persist the complete Plan returned by each generation or edit.
"""

import json
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

from simple_lifts.plans.errors import CorruptPlanDataError
from simple_lifts.plans.serializers import (
    deserialize_plan,
    deserialize_templates,
    serialize_plan,
    serialize_templates,
)
from simple_lifts.plans.types import Plan, TemplateSet

PLAN_FILENAME = "plan.json"
TEMPLATES_FILENAME = "templates.json"


class PlanRepository(Protocol):
    """Load/save contract for a user's plan and templates."""

    def load(self, user_id: str) -> Plan | None: ...

    def save(self, user_id: str, plan: Plan) -> None: ...

    def load_templates(self, user_id: str) -> TemplateSet | None: ...

    def save_templates(self, user_id: str, templates: TemplateSet) -> None: ...


class InMemoryPlanRepository:
    """Per-instance in-memory store.

    Plans and templates are immutable values, so they are stored as-is.
    """

    def __init__(self) -> None:
        self._plans: dict[str, Plan] = {}
        self._templates: dict[str, TemplateSet] = {}

    def load(self, user_id: str) -> Plan | None:
        return self._plans.get(user_id)

    def save(self, user_id: str, plan: Plan) -> None:
        self._plans[user_id] = plan

    def load_templates(self, user_id: str) -> TemplateSet | None:
        return self._templates.get(user_id)

    def save_templates(self, user_id: str, templates: TemplateSet) -> None:
        self._templates[user_id] = templates


class JsonFilePlanRepository:
    """Stores each user's data as JSON under <base_dir>/<user_id>/.

    Writes go to a temporary file first and are renamed into place, so a
    failed write never leaves a half-written plan behind.
    """

    def __init__(self, base_dir: Path | str) -> None:
        self.base_dir = Path(base_dir)

    def _user_dir(self, user_id: str) -> Path:
        if not user_id or Path(user_id).name != user_id or user_id in {".", ".."}:
            raise ValueError(f"Invalid user_id: {user_id!r}")
        return self.base_dir / user_id

    def _read(self, path: Path) -> dict[str, Any] | None:
        if not path.exists():
            return None
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.error("Stored data unreadable", path=str(path), error=str(e))
            raise CorruptPlanDataError(f"Could not parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise CorruptPlanDataError(f"{path} must contain a JSON object")
        return data

    def _write(self, path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(path)

    def load(self, user_id: str) -> Plan | None:
        path = self._user_dir(user_id) / PLAN_FILENAME
        data = self._read(path)
        if data is None:
            logger.debug("No stored plan", user_id=user_id, path=str(path))
            return None
        try:
            return deserialize_plan(data)
        except (TypeError, ValueError) as e:
            # ValidationError is a ValueError; TypeError covers non-object days
            logger.error("Stored plan invalid", user_id=user_id, path=str(path))
            raise CorruptPlanDataError(f"Invalid plan in {path}: {e}") from e

    def save(self, user_id: str, plan: Plan) -> None:
        path = self._user_dir(user_id) / PLAN_FILENAME
        self._write(path, serialize_plan(plan))
        logger.info("Plan saved", user_id=user_id, sessions=len(plan), path=str(path))

    def load_templates(self, user_id: str) -> TemplateSet | None:
        path = self._user_dir(user_id) / TEMPLATES_FILENAME
        data = self._read(path)
        if data is None:
            return None
        try:
            return deserialize_templates(data)
        except ValueError as e:
            logger.error("Stored templates invalid", user_id=user_id, path=str(path))
            raise CorruptPlanDataError(f"Invalid templates in {path}: {e}") from e

    def save_templates(self, user_id: str, templates: TemplateSet) -> None:
        path = self._user_dir(user_id) / TEMPLATES_FILENAME
        self._write(path, serialize_templates(templates))
        logger.info(
            "Templates saved",
            user_id=user_id,
            group_a=len(templates.group_a),
            group_b=len(templates.group_b),
        )
