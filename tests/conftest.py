"""
Shared fixtures for Correlativas tests.
"""

import pytest

from correlativas.schemas import Catalog, Course, Prerequisites
from correlativas.tracker import ProgressStore, Tracker


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CORRELATIVAS_* variables from the host out of the tests."""
    for suffix in ("CONFIG", "CATALOG", "STATE_DB", "STATE_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(f"CORRELATIVAS_{suffix}", raising=False)


@pytest.fixture
def two_course_catalog():
    """Course 2 needs course 1 taken to enroll and passed to sit its final."""
    return Catalog(courses=[
        Course(id=1, name="Álgebra I", year=1),
        Course(
            id=2,
            name="Álgebra II",
            year=1,
            prerequisites=Prerequisites(requires_taken=[1], requires_passed=[1]),
        ),
    ])


@pytest.fixture
def store(tmp_path):
    return ProgressStore(tmp_path / "progress.db")


@pytest.fixture
def tracker(two_course_catalog, store):
    return Tracker(two_course_catalog, store)
