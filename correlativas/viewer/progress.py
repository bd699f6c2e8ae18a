"""
Progress renderer - Progress bar and advisory note.
"""

import html
from typing import Optional

from correlativas.tracker import ProgressSummary


def get_progress_css() -> str:
    """Get CSS styles for the progress bar."""
    return """
    <style>
    .progress-bar {
        background: #eee;
        border-radius: 8px;
        height: 14px;
        overflow: hidden;
    }
    .progress-fill {
        background: #2a7a2a;
        height: 100%;
        transition: width 0.3s;
    }
    .progreso-nota {
        margin-top: 0.4em;
        color: #444;
        font-size: 0.95em;
    }
    </style>
    """


def render_progress_bar(summary: Optional[ProgressSummary]) -> str:
    """
    Render the progress bar with its note.

    Returns:
        HTML string, or an empty string when there is no summary (empty catalog)
    """
    if summary is None:
        return ""

    parts = [get_progress_css()]
    parts.append('<div class="progress-bar">')
    parts.append(f'<div class="progress-fill" style="width: {summary.percent}%"></div>')
    parts.append('</div>')
    parts.append(f'<div class="progreso-nota">{html.escape(summary.note)}</div>')
    return ''.join(parts)
