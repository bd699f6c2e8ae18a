"""
Catalog schemas for Correlativas.

Defines Pydantic models for the static course catalog:
- Course prerequisites (enroll vs. final exam)
- Course records
- The sorted, immutable catalog handle
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class Prerequisites(BaseModel):
    """
    Two independent prerequisite lists for a course.

    requires_taken: courses that must be at least taken (or passed) to enroll
    requires_passed: courses that must be passed to sit this course's final
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    requires_taken: list[int] = Field(
        default=[],
        validation_alias=AliasChoices("requires_taken", "requiresTaken", "requiresCursada"),
        serialization_alias="requiresTaken",
    )
    requires_passed: list[int] = Field(
        default=[],
        validation_alias=AliasChoices("requires_passed", "requiresPassed", "requiresAcreditar"),
        serialization_alias="requiresPassed",
    )

    @field_validator("requires_taken", "requires_passed", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v


class Course(BaseModel):
    """A single course ("materia") from the catalog."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)
    name: str = Field(..., validation_alias=AliasChoices("name", "nombre"))
    year: int = Field(..., validation_alias=AliasChoices("year", "anio"))
    prerequisites: Prerequisites = Field(
        default_factory=Prerequisites,
        validation_alias=AliasChoices("prerequisites", "prerrequisitos"),
    )

    @field_validator("prerequisites", mode="before")
    @classmethod
    def null_as_no_prerequisites(cls, v):
        return Prerequisites() if v is None else v

    @property
    def requires_taken(self) -> list[int]:
        return self.prerequisites.requires_taken

    @property
    def requires_passed(self) -> list[int]:
        return self.prerequisites.requires_passed


class Catalog(BaseModel):
    """
    Immutable course catalog, sorted ascending by course id.

    Constructed once at startup and passed explicitly to the evaluator,
    the tracker and the renderers.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    courses: list[Course] = Field(..., validation_alias=AliasChoices("courses", "materias"))

    @field_validator("courses")
    @classmethod
    def sort_and_check_ids(cls, v: list[Course]) -> list[Course]:
        seen: set[int] = set()
        for course in v:
            if course.id in seen:
                raise ValueError(f"Duplicate course id: {course.id}")
            seen.add(course.id)
        return sorted(v, key=lambda c: c.id)

    def __len__(self) -> int:
        return len(self.courses)

    def get(self, course_id: int) -> Optional[Course]:
        """Look up a course by id."""
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    def ids(self) -> list[int]:
        """Course ids in ascending order."""
        return [course.id for course in self.courses]

    def by_year(self) -> dict[int, list[Course]]:
        """Group courses by year (ascending), keeping id order inside each year."""
        groups: dict[int, list[Course]] = {}
        for course in self.courses:
            groups.setdefault(course.year, []).append(course)
        return {year: groups[year] for year in sorted(groups)}
