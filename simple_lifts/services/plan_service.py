"""Plan service - host-side orchestration of templates, generation and logs.

Every write follows load → compute → save. The compute step is pure and
raises before anything is saved, so a rejected request leaves the stored
plan untouched.
"""

import datetime as dt
from collections.abc import Sequence

from loguru import logger

from simple_lifts.persistence.repository import PlanRepository
from simple_lifts.plans.constants import DEFAULT_HORIZON_WEEKS
from simple_lifts.plans.errors import NoTemplatesError, PlanError, PlanNotFoundError
from simple_lifts.plans.generator import generate_plan
from simple_lifts.plans.propagation import apply_edit
from simple_lifts.plans.queries import get_exercise_history, get_next_session
from simple_lifts.plans.templates import add_exercise, default_template_set, remove_exercise, update_exercise
from simple_lifts.plans.types import LoggedExercise, Plan, SessionDay, TemplateGroup, TemplateSet


class PlanService:
    """Plan operations for one repository.

    Attributes:
        repository: Injected plan/template store
        horizon_weeks: Weeks generated by create_plan
    """

    def __init__(self, repository: PlanRepository, horizon_weeks: int = DEFAULT_HORIZON_WEEKS):
        self.repository = repository
        self.horizon_weeks = horizon_weeks

    def get_templates(self, user_id: str) -> TemplateSet:
        """Get saved templates, falling back to the starter set."""
        templates = self.repository.load_templates(user_id)
        if templates is None:
            return default_template_set()
        return templates

    def add_template_exercise(
        self,
        user_id: str,
        group: TemplateGroup,
        name: str = "",
        starting_weight: int = 0,
    ) -> TemplateSet:
        templates = add_exercise(self.get_templates(user_id), group, name, starting_weight)
        self.repository.save_templates(user_id, templates)
        return templates

    def update_template_exercise(
        self,
        user_id: str,
        group: TemplateGroup,
        index: int,
        *,
        name: str | None = None,
        starting_weight: int | None = None,
    ) -> TemplateSet:
        templates = update_exercise(
            self.get_templates(user_id),
            group,
            index,
            name=name,
            starting_weight=starting_weight,
        )
        self.repository.save_templates(user_id, templates)
        return templates

    def remove_template_exercise(self, user_id: str, group: TemplateGroup, index: int) -> TemplateSet:
        templates = remove_exercise(self.get_templates(user_id), group, index)
        self.repository.save_templates(user_id, templates)
        return templates

    def create_plan(
        self,
        user_id: str,
        reference_date: dt.date,
        horizon_weeks: int | None = None,
    ) -> Plan:
        """Generate and store a new plan from the user's templates.

        Replaces any existing plan, discarding logged corrections.

        Args:
            user_id: User ID
            reference_date: "Today" for the first session
            horizon_weeks: Optional override of the configured horizon

        Returns:
            Newly generated Plan

        Raises:
            NoTemplatesError: If both template groups are empty
        """
        templates = self.get_templates(user_id)
        if templates.is_empty:
            logger.warning("Plan generation rejected", user_id=user_id, code=NoTemplatesError.code)
            raise NoTemplatesError("Add at least one A or B exercise before generating a plan")
        weeks = horizon_weeks if horizon_weeks is not None else self.horizon_weeks

        try:
            plan = generate_plan(
                templates.group_a,
                templates.group_b,
                reference_date,
                horizon_weeks=weeks,
            )
        except PlanError as e:
            logger.warning("Plan generation rejected", user_id=user_id, code=e.code, details=e.details)
            raise

        # Templates are saved alongside so the plan can be regenerated later
        self.repository.save_templates(user_id, templates)
        self.repository.save(user_id, plan)

        dates = plan.sorted_dates()
        logger.info(
            "Plan generated",
            user_id=user_id,
            sessions=len(plan),
            weeks=weeks,
            start=dates[0],
            end=dates[-1],
        )
        return plan

    def get_plan(self, user_id: str) -> Plan:
        """Get the stored plan.

        Raises:
            PlanNotFoundError: If the user has no plan yet
        """
        plan = self.repository.load(user_id)
        if plan is None:
            raise PlanNotFoundError(f"No plan found for user {user_id}. Generate one first.")
        return plan

    def log_session(
        self,
        user_id: str,
        session_date: dt.date | str,
        exercises: Sequence[LoggedExercise],
    ) -> Plan:
        """Record actual weights for a session and update later sessions.

        Raises:
            PlanNotFoundError: If the user has no plan yet
            DateNotFoundError: If session_date is not in the plan
            MisalignedEditError: If exercises do not match the session
        """
        plan = self.get_plan(user_id)

        try:
            updated = apply_edit(plan, session_date, exercises)
        except PlanError as e:
            logger.warning(
                "Session log rejected",
                user_id=user_id,
                date=str(session_date),
                code=e.code,
                details=e.details,
            )
            raise

        self.repository.save(user_id, updated)

        changed_days = sum(1 for key in plan.root if plan.root[key] != updated.root[key])
        logger.info(
            "Session logged",
            user_id=user_id,
            date=str(session_date),
            changed_days=changed_days,
        )
        return updated

    def get_next_session(self, user_id: str, today: dt.date) -> SessionDay | None:
        return get_next_session(self.get_plan(user_id), today)

    def get_exercise_history(self, user_id: str, name: str) -> list[tuple[str, int]]:
        return get_exercise_history(self.get_plan(user_id), name)
