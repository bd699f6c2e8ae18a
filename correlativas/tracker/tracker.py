"""
Tracker - Toggle commands, import/export and derived views.

Combines the Catalog (content) with the ProgressStore (user state). The UI
sends Toggle commands and gets back a fresh TrackerView; every mutation
re-reads storage, persists immediately and re-derives every view.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from correlativas.schemas import Catalog, ProgressState, Toggle, ToggleKind

from .eligibility import CourseStatus, evaluate_catalog
from .progress import ProgressStore
from .summary import ProgressSummary, compute_summary
from .transfer import export_state, import_state
from .views import MatrixCell, YearSection, build_checklist, build_matrix


logger = logging.getLogger(__name__)


def apply_toggle(state: ProgressState, toggle: Toggle) -> ProgressState:
    """
    Apply a toggle to a copy of the state.

    - taken on: mark taken
    - taken off: clear taken and passed (passing implies having taken it)
    - final on: mark passed and taken
    - final off: clear passed only
    """
    new_state = state.model_copy(deep=True)
    cid = toggle.course_id

    if toggle.kind == ToggleKind.TAKEN:
        new_state.taken[cid] = toggle.value
        if not toggle.value:
            new_state.passed[cid] = False
    else:
        new_state.passed[cid] = toggle.value
        if toggle.value:
            new_state.taken[cid] = True

    return new_state


@dataclass
class TrackerView:
    """Everything the UI needs for one render pass."""
    state: ProgressState
    statuses: dict[int, CourseStatus]
    checklist: list[YearSection]
    matrix: list[MatrixCell]
    summary: Optional[ProgressSummary]


class Tracker:
    """Single entry point for reading and changing progress."""

    def __init__(self, catalog: Catalog, store: ProgressStore):
        """
        Initialize tracker.

        Args:
            catalog: Loaded course catalog
            store: ProgressStore for user progress
        """
        self.catalog = catalog
        self.store = store
        self.latest_summary: Optional[ProgressSummary] = compute_summary(catalog, store.load())
        store.subscribe(self._refresh_summary)

    def _refresh_summary(self, state: ProgressState):
        """Save callback: keep latest_summary in step with storage."""
        self.latest_summary = compute_summary(self.catalog, state)

    def build_view(self, state: ProgressState) -> TrackerView:
        """Derive every view from a state."""
        statuses = evaluate_catalog(self.catalog, state)
        return TrackerView(
            state=state,
            statuses=statuses,
            checklist=build_checklist(self.catalog, statuses),
            matrix=build_matrix(self.catalog, statuses),
            summary=compute_summary(self.catalog, state),
        )

    def view(self) -> TrackerView:
        """Derive every view from the stored state."""
        return self.build_view(self.store.load())

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def dispatch(self, toggle: Toggle) -> TrackerView:
        """
        Apply a toggle, persist it and return the refreshed views.

        Raises:
            ValueError: If the course isn't in the catalog
            StorageError: If the state can't be saved
        """
        if self.catalog.get(toggle.course_id) is None:
            raise ValueError(f"Unknown course id: {toggle.course_id}")

        state = apply_toggle(self.store.load(), toggle)
        self.store.save(state)
        logger.debug(f"Toggled {toggle.kind.value}={toggle.value} for course {toggle.course_id}")
        return self.build_view(state)

    def toggle(self, course_id: int, kind: ToggleKind | str, value: bool) -> TrackerView:
        """Shorthand for dispatch(Toggle(...))."""
        return self.dispatch(Toggle(course_id=course_id, kind=ToggleKind(kind), value=value))

    def import_document(self, raw: bytes | str) -> TrackerView:
        """
        Replace all progress with an imported document.

        Raises:
            ImportRejected: If the document is refused (store unchanged)
            StorageError: If the state can't be saved
        """
        state = import_state(raw)
        self.store.save(state)
        logger.info(f"Imported progress: {sum(state.passed.values())} passed, {sum(state.taken.values())} taken")
        return self.build_view(state)

    def export_document(self) -> str:
        """Current progress as the exported JSON document."""
        return export_state(self.store.load())

    def reset(self) -> TrackerView:
        """Clear all progress."""
        self.store.reset()
        self._refresh_summary(ProgressState())
        logger.info("Progress reset")
        return self.view()
