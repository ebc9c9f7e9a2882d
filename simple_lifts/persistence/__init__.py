"""Persistence module.

Repository implementations for storing plans and templates per user.
"""

from simple_lifts.persistence.repository import InMemoryPlanRepository, JsonFilePlanRepository, PlanRepository

__all__ = [
    "InMemoryPlanRepository",
    "JsonFilePlanRepository",
    "PlanRepository",
]
