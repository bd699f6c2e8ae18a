"""
Progress tracking schemas for Correlativas.

Defines Pydantic models for student progress including:
- The persisted taken/passed state document
- The toggle command issued by the UI
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ToggleKind(str, Enum):
    TAKEN = "taken"
    FINAL = "final"


def coerce_flags(v: Any) -> Any:
    """
    Normalize a course-id -> flag mapping read from JSON.

    JSON object keys are strings. Only canonical decimal keys ("1", not
    "01", " 1" or "+1") become course ids; anything else is dropped since
    a lookup by id would never reach it. Values are read by truthiness.
    """
    if not isinstance(v, dict):
        return v
    flags = {}
    for key, value in v.items():
        try:
            course_id = int(key)
        except (TypeError, ValueError):
            continue
        if str(course_id) != str(key):
            continue
        flags[course_id] = bool(value)
    return flags


class ProgressState(BaseModel):
    """
    Persisted progress: which courses are taken and which are passed.

    The passed => taken invariant is kept by the toggle operation, not here.
    """
    model_config = ConfigDict(populate_by_name=True)

    taken: dict[int, bool] = Field(
        default={},
        validation_alias=AliasChoices("taken", "cursadas"),
    )
    passed: dict[int, bool] = Field(
        default={},
        validation_alias=AliasChoices("passed", "aprobadas"),
    )

    @field_validator("taken", "passed", mode="before")
    @classmethod
    def flags_valid(cls, v):
        return coerce_flags(v)

    def is_taken(self, course_id: int) -> bool:
        return self.taken.get(course_id, False)

    def is_passed(self, course_id: int) -> bool:
        return self.passed.get(course_id, False)


class Toggle(BaseModel):
    """Command from the UI: set one flag of one course."""
    model_config = ConfigDict(frozen=True)

    course_id: int
    kind: ToggleKind
    value: bool
