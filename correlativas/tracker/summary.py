"""
Progress summary - Percentage of passed courses and the advisory message.
"""

import math
from dataclasses import dataclass
from typing import Optional

from correlativas.schemas import Catalog, ProgressState


# (lower bound inclusive, upper bound exclusive, message); 100 is matched exactly
PROGRESS_BANDS = [
    (0, 25, "Seguí sumando materias."),
    (25, 50, "¡Bien! Ya podés anotarte en Listado de Emergencia."),
    (50, 75, "¡Excelente! Habilitado para Listado 108 B Item 5."),
    (75, 100, "¡Casi listo! Habilitado para Listado 108 B Item 4."),
]
COMPLETE_MESSAGE = "¡Felicitaciones! Título completo (Listado 108 A)."


@dataclass(frozen=True)
class ProgressSummary:
    passed_count: int
    total: int
    percent: int
    message: str

    @property
    def fraction(self) -> float:
        """Progress bar fill, 0.0-1.0."""
        return self.percent / 100

    @property
    def note(self) -> str:
        return f"{self.passed_count}/{self.total} Materias ({self.percent}%) • {self.message}"


def round_half_up(value: float) -> int:
    """Round .5 upward, like Math.round (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def progress_percent(passed_count: int, total: int) -> int:
    """Percentage of passed courses, rounded half up."""
    if total <= 0:
        raise ValueError("total must be positive")
    return round_half_up(passed_count / total * 100)


def progress_message(percent: int) -> str:
    """Advisory message for a percentage; only exactly 100 is complete."""
    if percent == 100:
        return COMPLETE_MESSAGE
    for low, high, message in PROGRESS_BANDS:
        if low <= percent < high:
            return message
    return PROGRESS_BANDS[0][2]


def compute_summary(catalog: Catalog, state: ProgressState) -> Optional[ProgressSummary]:
    """
    Summarize progress over the catalog.

    Only passed flags for courses in the catalog are counted, so stale ids
    left in storage never push the percentage past 100.

    Returns:
        ProgressSummary, or None for an empty catalog
    """
    total = len(catalog)
    if total == 0:
        return None

    passed_count = sum(1 for course_id in catalog.ids() if state.is_passed(course_id))
    percent = progress_percent(passed_count, total)

    return ProgressSummary(
        passed_count=passed_count,
        total=total,
        percent=percent,
        message=progress_message(percent),
    )
