"""
Correlativas Tracker - Runtime components for loading and tracking progress.

This module provides:
- load_catalog: Load the course catalog from a file or URL
- ProgressStore: Persist taken/passed state
- evaluate: Per-course eligibility
- Tracker: Toggle commands, import/export and derived views
"""

from .loader import (
    CatalogLoadError,
    load_catalog,
    parse_catalog,
    find_catalog_issues,
)

from .progress import (
    ProgressStore,
    StateLoadResult,
    StateParseError,
    StorageError,
    parse_state,
)

from .eligibility import (
    CourseStatus,
    evaluate,
    evaluate_catalog,
)

from .summary import (
    ProgressSummary,
    compute_summary,
    progress_message,
    progress_percent,
)

from .transfer import (
    ImportRejected,
    IMPORT_OK_MESSAGE,
    export_state,
    import_state,
)

from .views import (
    ChecklistItem,
    YearSection,
    MatrixCell,
    MatrixCellState,
    build_checklist,
    build_matrix,
)

from .tracker import (
    Tracker,
    TrackerView,
    apply_toggle,
)

__all__ = [
    # Loader
    "CatalogLoadError",
    "load_catalog",
    "parse_catalog",
    "find_catalog_issues",
    # Progress
    "ProgressStore",
    "StateLoadResult",
    "StateParseError",
    "StorageError",
    "parse_state",
    # Eligibility
    "CourseStatus",
    "evaluate",
    "evaluate_catalog",
    # Summary
    "ProgressSummary",
    "compute_summary",
    "progress_message",
    "progress_percent",
    # Transfer
    "ImportRejected",
    "IMPORT_OK_MESSAGE",
    "export_state",
    "import_state",
    # Views
    "ChecklistItem",
    "YearSection",
    "MatrixCell",
    "MatrixCellState",
    "build_checklist",
    "build_matrix",
    # Tracker
    "Tracker",
    "TrackerView",
    "apply_toggle",
]
