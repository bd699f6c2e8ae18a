"""
Eligibility - Derive per-course status from the catalog and progress.

A course can be enrolled in once every enroll prerequisite is taken (or
passed). Its final can be sat once the course itself is taken and every
final prerequisite is passed.
"""

from dataclasses import dataclass, field

from correlativas.schemas import Catalog, Course, ProgressState


@dataclass(frozen=True)
class CourseStatus:
    """Derived facts about one course for the current progress."""
    course_id: int
    is_taken: bool
    is_passed: bool
    can_enroll: bool
    can_sit_final: bool
    missing_for_enroll: list[int] = field(default_factory=list)
    missing_for_final: list[int] = field(default_factory=list)


def evaluate(course: Course, state: ProgressState) -> CourseStatus:
    """Evaluate one course against the current progress."""
    is_taken = state.is_taken(course.id)
    is_passed = state.is_passed(course.id)

    missing_for_enroll = [
        pid for pid in course.requires_taken
        if not (state.is_taken(pid) or state.is_passed(pid))
    ]
    missing_for_final = [
        pid for pid in course.requires_passed
        if not state.is_passed(pid)
    ]

    return CourseStatus(
        course_id=course.id,
        is_taken=is_taken,
        is_passed=is_passed,
        can_enroll=not missing_for_enroll,
        can_sit_final=is_taken and not missing_for_final,
        missing_for_enroll=missing_for_enroll,
        missing_for_final=missing_for_final,
    )


def evaluate_catalog(catalog: Catalog, state: ProgressState) -> dict[int, CourseStatus]:
    """Evaluate every course, keyed by course id in catalog order."""
    return {course.id: evaluate(course, state) for course in catalog.courses}
