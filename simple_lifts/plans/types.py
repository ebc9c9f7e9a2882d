"""Canonical training plan schema.

This module defines the immutable value types shared by plan generation
and log propagation:
- Templates carry a starting weight, logged exercises carry a target weight
- A session day keeps its exercises in template order (index-addressed)
- A plan is keyed by ISO date so chronological order is a plain key sort
"""

import datetime as dt
from collections.abc import Iterable, Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

TemplateGroup = Literal["A", "B"]


class ExerciseTemplate(BaseModel):
    """A lift in one of the two rotating template groups.

    Attributes:
        name: Exercise name (e.g., "Bench Press")
        starting_weight: Week-0 target weight in lbs
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    starting_weight: int = Field(ge=0, alias="startingWeight")


class LoggedExercise(BaseModel):
    """Predicted or corrected weight for one exercise on one date."""

    model_config = ConfigDict(frozen=True)

    name: str
    weight: int = Field(ge=0)


class SessionDay(BaseModel):
    """One training session in the plan.

    Attributes:
        date: Calendar date of the session
        day_label: Short weekday name (e.g., "Mon")
        exercises: Exercises in template order
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: dt.date
    day_label: str = Field(alias="dayLabel")
    exercises: tuple[LoggedExercise, ...] = ()

    @property
    def key(self) -> str:
        return self.date.isoformat()

    def with_exercises(self, exercises: Iterable[LoggedExercise]) -> "SessionDay":
        return self.model_copy(update={"exercises": tuple(exercises)})


def date_key(value: dt.date | str) -> str:
    """Normalize a date, datetime or ISO date string to a plan key."""
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    return dt.date.fromisoformat(value).isoformat()


class Plan(RootModel[dict[str, SessionDay]]):
    """Mapping of ISO date to SessionDay.

    Keys are unique and always equal to their day's date, so sorting
    the keys lexicographically gives chronological order.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _keys_match_dates(self) -> "Plan":
        for key, day in self.root.items():
            if key != day.key:
                raise ValueError(f"Plan key {key} does not match session date {day.key}")
        return self

    @classmethod
    def from_days(cls, days: Iterable[SessionDay]) -> "Plan":
        return cls({day.key: day for day in days})

    def sorted_dates(self) -> list[str]:
        return sorted(self.root)

    def days(self) -> list[SessionDay]:
        return [self.root[key] for key in self.sorted_dates()]

    def get(self, value: dt.date | str) -> SessionDay | None:
        return self.root.get(date_key(value))

    def __getitem__(self, value: dt.date | str) -> SessionDay:
        return self.root[date_key(value)]

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (dt.date, str)):
            return False
        try:
            return date_key(value) in self.root
        except ValueError:
            return False

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.sorted_dates())

    def __len__(self) -> int:
        return len(self.root)


class TemplateSet(BaseModel):
    """The A and B template groups used to generate a plan."""

    model_config = ConfigDict(frozen=True)

    group_a: tuple[ExerciseTemplate, ...] = ()
    group_b: tuple[ExerciseTemplate, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.group_a and not self.group_b

    def get_group(self, group: TemplateGroup) -> tuple[ExerciseTemplate, ...]:
        if group == "A":
            return self.group_a
        if group == "B":
            return self.group_b
        raise ValueError(f"Invalid template group: {group}. Must be 'A' or 'B'")

    def with_group(self, group: TemplateGroup, templates: Iterable[ExerciseTemplate]) -> "TemplateSet":
        if group == "A":
            return self.model_copy(update={"group_a": tuple(templates)})
        if group == "B":
            return self.model_copy(update={"group_b": tuple(templates)})
        raise ValueError(f"Invalid template group: {group}. Must be 'A' or 'B'")
