"""
Matrix renderer - Compact grid of course ids coloured by state.
"""

import html

from correlativas.tracker import MatrixCell, MatrixCellState


MATRIX_STYLES = {
    MatrixCellState.PASSED: "background: var(--ok, #2a7a2a); color: #fff;",
    MatrixCellState.TAKEN: "background: #8ebf8e;",
    MatrixCellState.LOCKED: "background: var(--bad, #b23b3b); color: #fff; opacity: 0.5;",
    MatrixCellState.AVAILABLE: "border: 1px solid var(--ink, #333);",
}

STATE_LABELS = {
    MatrixCellState.PASSED: "Aprobada",
    MatrixCellState.TAKEN: "Cursada",
    MatrixCellState.LOCKED: "Bloqueada",
    MatrixCellState.AVAILABLE: "Disponible",
}


def get_matrix_css() -> str:
    """Get CSS styles for the matrix grid."""
    return """
    <style>
    .matriz {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(2.6em, 1fr));
        gap: 4px;
    }
    .matriz-item {
        display: flex;
        align-items: center;
        justify-content: center;
        font-weight: bold;
        border-radius: 4px;
        padding: 4px;
        font-size: 0.8rem;
    }
    .matriz-legend {
        display: flex;
        gap: 1em;
        margin-top: 0.8em;
        font-size: 0.8rem;
    }
    .matriz-legend span {
        padding: 0 0.5em;
        border-radius: 4px;
    }
    </style>
    """


def render_matrix_cell(cell: MatrixCell) -> str:
    """Render one cell; the course name shows as tooltip."""
    return (
        f'<div class="matriz-item" title="{html.escape(cell.name)}" '
        f'style="{MATRIX_STYLES[cell.state]}">{cell.course_id}</div>'
    )


def render_matrix_legend() -> str:
    parts = ['<div class="matriz-legend">']
    for state, label in STATE_LABELS.items():
        parts.append(f'<span style="{MATRIX_STYLES[state]}">{label}</span>')
    parts.append('</div>')
    return ''.join(parts)


def render_matrix(cells: list[MatrixCell], with_legend: bool = True) -> str:
    """
    Render the full matrix grid.

    Args:
        cells: Matrix cells in display order
        with_legend: Whether to append the colour legend

    Returns:
        HTML string for the grid
    """
    parts = [get_matrix_css(), '<div class="matriz">']
    parts.extend(render_matrix_cell(cell) for cell in cells)
    parts.append('</div>')
    if with_legend:
        parts.append(render_matrix_legend())
    return ''.join(parts)
