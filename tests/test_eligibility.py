"""
Eligibility evaluator tests.
"""

import pytest

from correlativas.schemas import Catalog, Course, Prerequisites, ProgressState
from correlativas.tracker import evaluate, evaluate_catalog


STATES = [
    ProgressState(),
    ProgressState(taken={1: True, 2: True}),
    ProgressState(taken={1: True}, passed={1: True, 5: True}),
    ProgressState(taken={7: False}, passed={7: False}),
]


class TestEvaluate:

    @pytest.mark.parametrize("state", STATES)
    def test_no_enroll_prerequisites_always_enrollable(self, state):
        course = Course(id=3, name="c", year=1)
        assert evaluate(course, state).can_enroll

    def test_flags_default_false(self):
        status = evaluate(Course(id=1, name="a", year=1), ProgressState())
        assert not status.is_taken
        assert not status.is_passed
        assert not status.can_sit_final

    def test_passed_prerequisite_counts_for_enroll(self):
        course = Course(id=2, name="b", year=1, prerequisites=Prerequisites(requires_taken=[1]))
        status = evaluate(course, ProgressState(passed={1: True}))
        assert status.can_enroll

    def test_missing_prerequisites_listed_in_order(self):
        course = Course(
            id=9, name="x", year=3,
            prerequisites=Prerequisites(requires_taken=[5, 2, 7], requires_passed=[2, 5]),
        )
        status = evaluate(course, ProgressState(taken={9: True, 2: True}, passed={5: True}))
        assert status.missing_for_enroll == [7]
        assert status.missing_for_final == [2]
        assert not status.can_enroll
        assert not status.can_sit_final

    def test_final_needs_course_taken(self):
        course = Course(id=1, name="a", year=1)
        assert not evaluate(course, ProgressState()).can_sit_final
        assert evaluate(course, ProgressState(taken={1: True})).can_sit_final

    def test_final_needs_prerequisites_passed_not_taken(self):
        course = Course(id=2, name="b", year=1, prerequisites=Prerequisites(requires_passed=[1]))
        assert not evaluate(course, ProgressState(taken={1: True, 2: True})).can_sit_final
        assert evaluate(course, ProgressState(taken={1: True, 2: True}, passed={1: True})).can_sit_final

    def test_unknown_prerequisite_never_satisfied(self):
        course = Course(id=2, name="b", year=1, prerequisites=Prerequisites(requires_taken=[99]))
        assert not evaluate(course, ProgressState(taken={1: True})).can_enroll


class TestTwoCourseScenario:
    """Course 2 requires course 1 taken to enroll and passed for its final."""

    def test_initial(self, two_course_catalog):
        statuses = evaluate_catalog(two_course_catalog, ProgressState())
        assert statuses[1].can_enroll
        assert not statuses[2].can_enroll

    def test_after_taking_course_one(self, two_course_catalog):
        statuses = evaluate_catalog(two_course_catalog, ProgressState(taken={1: True}))
        assert statuses[2].can_enroll
        assert not statuses[2].can_sit_final

    def test_after_passing_course_one(self, two_course_catalog):
        state = ProgressState(taken={1: True}, passed={1: True})
        statuses = evaluate_catalog(two_course_catalog, state)
        # course 2 itself still has to be taken
        assert not statuses[2].can_sit_final

        state.taken[2] = True
        assert evaluate_catalog(two_course_catalog, state)[2].can_sit_final

    def test_catalog_order(self):
        catalog = Catalog(courses=[Course(id=5, name="e", year=1), Course(id=2, name="b", year=1)])
        assert list(evaluate_catalog(catalog, ProgressState())) == [2, 5]
