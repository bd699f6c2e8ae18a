"""
Correlativas Viewer - Rendering components for the progress views.

This module provides:
- Checklist course rows and year headers
- Matrix grid
- Progress bar
"""

from .checklist import (
    get_checklist_css,
    card_classes,
    render_course_info,
    render_year_header,
    missing_prerequisites_hint,
)

from .matrix import (
    get_matrix_css,
    render_matrix_cell,
    render_matrix_legend,
    render_matrix,
    MATRIX_STYLES,
)

from .progress import (
    get_progress_css,
    render_progress_bar,
)

__all__ = [
    # Checklist
    "get_checklist_css",
    "card_classes",
    "render_course_info",
    "render_year_header",
    "missing_prerequisites_hint",
    # Matrix
    "get_matrix_css",
    "render_matrix_cell",
    "render_matrix_legend",
    "render_matrix",
    "MATRIX_STYLES",
    # Progress
    "get_progress_css",
    "render_progress_bar",
]
