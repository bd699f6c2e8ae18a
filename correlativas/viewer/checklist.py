"""
Checklist renderer - Course rows grouped by year.

Provides:
- Course label HTML (id, name, locked badge)
- Year header with completion count
- Hint text listing unmet prerequisites
"""

import html
from typing import Optional

from correlativas.schemas import Catalog
from correlativas.tracker import ChecklistItem, YearSection


def get_checklist_css() -> str:
    """Get CSS styles for checklist display."""
    return """
    <style>
    .materia-card {
        display: flex;
        align-items: center;
        gap: 0.6em;
        padding: 0.3em 0;
    }
    .materia-card.bloqueada {
        opacity: 0.6;
    }
    .materia-card.aprobada-full .materia-nombre {
        color: #2a7a2a;
        font-weight: 600;
    }
    .materia-id {
        font-family: monospace;
        color: #666;
        min-width: 2.5em;
    }
    .badge.bloqueada {
        background: #b23b3b;
        color: white;
        border-radius: 4px;
        padding: 0.1em 0.5em;
        font-size: 0.75em;
    }
    .anio-progress {
        color: #666;
        font-size: 0.85em;
    }
    </style>
    """


def card_classes(item: ChecklistItem) -> str:
    """CSS classes for a course row."""
    classes = ["materia-card", "bloqueada" if item.locked else "habilitada"]
    if item.status.is_passed:
        classes.append("aprobada-full")
    return " ".join(classes)


def render_course_info(item: ChecklistItem) -> str:
    """
    Render the label part of a course row.

    Args:
        item: ChecklistItem for the course

    Returns:
        HTML string with id, name and a locked badge when applicable
    """
    parts = [f'<div class="{card_classes(item)}">']
    parts.append(f'<span class="materia-id">#{item.course.id}</span>')
    parts.append(f'<span class="materia-nombre">{html.escape(item.course.name)}</span>')
    if item.locked:
        parts.append('<span class="badge bloqueada">Bloqueada</span>')
    parts.append('</div>')
    return ''.join(parts)


def render_year_header(section: YearSection) -> str:
    """Expander label for a year, e.g. '1 Año (2/5)'."""
    return f"{section.title} ({section.passed_count}/{section.total_count})"


def _describe(course_ids: list[int], catalog: Optional[Catalog]) -> str:
    names = []
    for cid in course_ids:
        course = catalog.get(cid) if catalog is not None else None
        names.append(f"#{cid} {course.name}" if course else f"#{cid}")
    return ", ".join(names)


def missing_prerequisites_hint(item: ChecklistItem, catalog: Optional[Catalog] = None) -> Optional[str]:
    """
    Explain why a checkbox is disabled.

    Returns:
        Hint text, or None when nothing is missing
    """
    lines = []
    if item.status.missing_for_enroll:
        lines.append("Para cursar necesitás: " + _describe(item.status.missing_for_enroll, catalog))
    if item.status.missing_for_final:
        lines.append("Para rendir el final necesitás aprobar: " + _describe(item.status.missing_for_final, catalog))
    elif not item.status.is_taken and item.status.can_enroll:
        lines.append("Marcá la cursada para habilitar el final.")
    return "\n\n".join(lines) if lines else None
