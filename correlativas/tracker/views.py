"""
View data - Pure projections of catalog + progress for the renderers.

Provides:
- Checklist grouped by year, with checkbox state per course
- Matrix cells with a single display state per course
"""

from dataclasses import dataclass
from enum import Enum

from correlativas.schemas import Catalog, Course

from .eligibility import CourseStatus


class MatrixCellState(str, Enum):
    """Matrix cell colouring, first match wins in this order."""
    PASSED = "passed"
    TAKEN = "taken"
    LOCKED = "locked"           # enroll prerequisites not met
    AVAILABLE = "available"     # can enroll, nothing recorded yet


@dataclass
class ChecklistItem:
    """One course row with its checkbox pair."""
    course: Course
    status: CourseStatus

    @property
    def locked(self) -> bool:
        return not self.status.can_enroll

    @property
    def taken_checked(self) -> bool:
        return self.status.is_taken or self.status.is_passed

    @property
    def final_checked(self) -> bool:
        return self.status.is_passed

    @property
    def taken_disabled(self) -> bool:
        return not self.status.can_enroll

    @property
    def final_disabled(self) -> bool:
        return not self.status.can_sit_final


@dataclass
class YearSection:
    """Courses of one year."""
    year: int
    items: list[ChecklistItem]

    @property
    def title(self) -> str:
        return f"{self.year} Año"

    @property
    def passed_count(self) -> int:
        return sum(1 for item in self.items if item.status.is_passed)

    @property
    def total_count(self) -> int:
        return len(self.items)


@dataclass
class MatrixCell:
    course_id: int
    name: str
    state: MatrixCellState


def build_checklist(catalog: Catalog, statuses: dict[int, CourseStatus]) -> list[YearSection]:
    """Group courses by year (ascending) with their evaluated status."""
    return [
        YearSection(
            year=year,
            items=[ChecklistItem(course=course, status=statuses[course.id]) for course in courses],
        )
        for year, courses in catalog.by_year().items()
    ]


def matrix_cell_state(status: CourseStatus) -> MatrixCellState:
    if status.is_passed:
        return MatrixCellState.PASSED
    if status.is_taken:
        return MatrixCellState.TAKEN
    if not status.can_enroll:
        return MatrixCellState.LOCKED
    return MatrixCellState.AVAILABLE


def build_matrix(catalog: Catalog, statuses: dict[int, CourseStatus]) -> list[MatrixCell]:
    """One cell per course in id order."""
    return [
        MatrixCell(
            course_id=course.id,
            name=course.name,
            state=matrix_cell_state(statuses[course.id]),
        )
        for course in catalog.courses
    ]
