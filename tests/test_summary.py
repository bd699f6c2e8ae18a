"""
Progress summary tests: percentage, rounding and message bands.
"""

import pytest

from correlativas.schemas import Catalog, Course, ProgressState
from correlativas.tracker import compute_summary, progress_message, progress_percent
from correlativas.tracker.summary import COMPLETE_MESSAGE, PROGRESS_BANDS


def make_catalog(n):
    return Catalog(courses=[Course(id=i, name=f"m{i}", year=1) for i in range(1, n + 1)])


def passed_state(ids):
    return ProgressState(taken={i: True for i in ids}, passed={i: True for i in ids})


class TestPercent:

    def test_rounds_half_up(self):
        assert progress_percent(1, 8) == 13   # 12.5
        assert progress_percent(3, 8) == 38   # 37.5

    def test_thirds(self):
        assert progress_percent(1, 3) == 33
        assert progress_percent(2, 3) == 67

    def test_zero_total_rejected(self):
        with pytest.raises(ValueError):
            progress_percent(0, 0)

    @pytest.mark.parametrize("total", [1, 3, 7, 12, 40])
    def test_monotonic_in_passed_count(self, total):
        percents = [progress_percent(k, total) for k in range(total + 1)]
        assert percents == sorted(percents)
        assert percents[0] == 0
        assert percents[-1] == 100


class TestMessageBands:

    def test_band_boundaries(self):
        baseline, tier_a, tier_b, tier_c = (band[2] for band in PROGRESS_BANDS)
        assert progress_message(0) == baseline
        assert progress_message(24) == baseline
        assert progress_message(25) == tier_a
        assert progress_message(49) == tier_a
        assert progress_message(50) == tier_b
        assert progress_message(74) == tier_b
        assert progress_message(75) == tier_c
        assert progress_message(99) == tier_c
        assert progress_message(100) == COMPLETE_MESSAGE

    def test_bands_are_distinct(self):
        messages = {progress_message(p) for p in (0, 25, 50, 75, 100)}
        assert len(messages) == 5


class TestComputeSummary:

    def test_empty_catalog_has_no_summary(self):
        assert compute_summary(make_catalog(0), ProgressState()) is None

    def test_one_of_four_is_tier_a(self):
        summary = compute_summary(make_catalog(4), passed_state([1]))
        assert summary.percent == 25
        assert summary.message == PROGRESS_BANDS[1][2]
        assert summary.note == "1/4 Materias (25%) • ¡Bien! Ya podés anotarte en Listado de Emergencia."

    def test_complete(self):
        summary = compute_summary(make_catalog(3), passed_state([1, 2, 3]))
        assert summary.percent == 100
        assert summary.message == COMPLETE_MESSAGE
        assert summary.fraction == 1.0

    def test_ignores_ids_outside_catalog(self):
        summary = compute_summary(make_catalog(2), passed_state([1, 77, 78]))
        assert summary.passed_count == 1
        assert summary.percent == 50

    def test_taken_does_not_count(self):
        summary = compute_summary(make_catalog(2), ProgressState(taken={1: True, 2: True}))
        assert summary.passed_count == 0
        assert summary.fraction == 0.0
