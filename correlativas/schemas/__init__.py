"""
Correlativas Schemas - Pydantic models for the course progress tracker.

This module exports all schema classes for:
- Catalog: courses, prerequisites, the sorted catalog handle
- Progress: persisted taken/passed state and toggle commands
"""

# Catalog schemas
from .catalog import (
    Prerequisites,
    Course,
    Catalog,
)

# Progress schemas
from .progress import (
    ToggleKind,
    ProgressState,
    Toggle,
    coerce_flags,
)

__all__ = [
    # Catalog
    'Prerequisites',
    'Course',
    'Catalog',
    # Progress
    'ToggleKind',
    'ProgressState',
    'Toggle',
    'coerce_flags',
]
