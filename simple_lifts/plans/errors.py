"""Canonical plan error types.

All precondition violations raised by plan generation, log propagation and
template editing use these types. They are raised before any state is built,
so a caller that catches one still holds its previous, untouched value.

Standard error codes:
- NO_TEMPLATES: Both template groups are empty at generation time
- DATE_NOT_FOUND: Edit references a date absent from the plan
- MISALIGNED_EDIT: Corrected exercises do not line up with the day's exercises
- TEMPLATE_INDEX: Template edit references a position outside the group
- PLAN_NOT_FOUND: No stored plan exists for the user
- CORRUPT_DATA: A stored plan or template file is not valid
"""


class PlanError(ValueError):
    """Base class for plan errors.

    Attributes:
        code: Error code (e.g., "NO_TEMPLATES", "DATE_NOT_FOUND")
        details: List of error detail strings
    """

    code = "PLAN_ERROR"

    def __init__(self, details: list[str] | str):
        self.details = [details] if isinstance(details, str) else list(details)
        super().__init__(f"{self.code}: {'; '.join(self.details)}")


class NoTemplatesError(PlanError):
    """Raised when both A and B template groups are empty."""

    code = "NO_TEMPLATES"


class DateNotFoundError(PlanError):
    """Raised when an edit date is not a session date of the plan."""

    code = "DATE_NOT_FOUND"


class MisalignedEditError(PlanError):
    """Raised when corrected exercises do not match the day positionally."""

    code = "MISALIGNED_EDIT"


class TemplateIndexError(PlanError):
    """Raised when a template edit targets a missing position."""

    code = "TEMPLATE_INDEX"


class PlanNotFoundError(PlanError):
    """Raised when a user has no stored plan to edit."""

    code = "PLAN_NOT_FOUND"


class CorruptPlanDataError(PlanError):
    """Raised when a stored plan or template file cannot be read back."""

    code = "CORRUPT_DATA"
