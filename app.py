"""
Correlativas - Seguimiento de avance de la carrera

Streamlit application for tracking taken/passed courses and seeing which
courses are unlocked by their prerequisites ("correlativas").

Usage:
    streamlit run app.py
"""

import html
import logging

import streamlit as st

from correlativas.config import load_settings
from correlativas.schemas import ToggleKind
from correlativas.tracker import (
    CatalogLoadError,
    ImportRejected,
    IMPORT_OK_MESSAGE,
    ProgressStore,
    StorageError,
    Tracker,
    TrackerView,
    load_catalog,
)
from correlativas.viewer import (
    get_checklist_css,
    missing_prerequisites_hint,
    render_course_info,
    render_matrix,
    render_progress_bar,
    render_year_header,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Correlativas",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def render_load_error(message: str):
    """Static error panel shown when the catalog can't be loaded."""
    st.markdown(f"""
    <div style="padding:20px; color:red; text-align:center">
      <h3>Error cargando materias</h3>
      <p>Verificá que el archivo <b>materias.json</b> exista y tenga el formato correcto.</p>
      <small>{html.escape(message)}</small>
    </div>
    """, unsafe_allow_html=True)


def init_session_state():
    """Initialize session state variables; halts the app if the catalog fails."""
    if "tracker" not in st.session_state:
        try:
            catalog = load_catalog(settings.catalog_source, timeout=settings.request_timeout)
        except CatalogLoadError as e:
            render_load_error(str(e))
            st.stop()

        store = ProgressStore(
            settings.state_db,
            key=settings.state_key,
            max_bytes=settings.max_state_bytes,
        )
        st.session_state.tracker = Tracker(catalog, store)

    if "flash" not in st.session_state:
        st.session_state.flash = None


def flash(kind: str, message: str):
    """Queue a message for the next render."""
    st.session_state.flash = (kind, message)


def render_flash():
    if st.session_state.flash:
        kind, message = st.session_state.flash
        if kind == "error":
            st.error(message)
        else:
            st.success(message)
        st.session_state.flash = None


# -----------------------------------------------------------------------------
# Callbacks
# -----------------------------------------------------------------------------

def on_toggle(course_id: int, kind: ToggleKind, key: str):
    """Checkbox callback: send the new value to the tracker."""
    try:
        st.session_state.tracker.toggle(course_id, kind, st.session_state[key])
    except StorageError as e:
        # widget would otherwise keep showing the unsaved value
        st.session_state.pop(key, None)
        flash("error", f"No se pudo guardar el progreso: {e}")


def on_import():
    """File uploader callback: replace progress with the uploaded file."""
    uploaded = st.session_state.get("import_file")
    if uploaded is None:
        return
    try:
        st.session_state.tracker.import_document(uploaded.getvalue())
    except ImportRejected as e:
        flash("error", e.message)
    except StorageError as e:
        flash("error", f"No se pudo guardar el progreso: {e}")
    else:
        flash("success", IMPORT_OK_MESSAGE)


# -----------------------------------------------------------------------------
# Sidebar: Progress, Export/Import, Help
# -----------------------------------------------------------------------------

@st.dialog("Cómo usar")
def show_help():
    st.markdown("""
    - **Cursada**: marcala cuando terminaste la cursada de la materia.
    - **Final**: marcala cuando aprobaste el final. Marcar el final también marca la cursada.
    - Una materia queda **bloqueada** hasta tener cursadas sus correlativas.
    - Para rendir el final necesitás tener **aprobadas** las correlativas de final.
    - El progreso se guarda en esta computadora. Usá *Exportar* para llevarlo a otra.
    """)


def render_sidebar():
    """Render the sidebar with progress summary and export/import."""
    st.sidebar.title("📚 Correlativas")

    summary = st.session_state.tracker.latest_summary
    if summary:
        st.sidebar.progress(summary.fraction)
        st.sidebar.caption(summary.note)

    st.sidebar.divider()
    st.sidebar.subheader("Progreso")

    st.sidebar.download_button(
        "Exportar progreso",
        data=st.session_state.tracker.export_document(),
        file_name=settings.export_filename,
        mime="application/json",
        use_container_width=True,
    )
    st.sidebar.file_uploader(
        "Importar progreso",
        type=["json"],
        key="import_file",
        on_change=on_import,
    )

    st.sidebar.divider()
    if st.sidebar.button("ℹ️ Cómo usar", use_container_width=True):
        show_help()


# -----------------------------------------------------------------------------
# Main Content
# -----------------------------------------------------------------------------

def render_checklist(view: TrackerView):
    """Render the checklist, one expander per year."""
    tracker = st.session_state.tracker
    st.markdown(get_checklist_css(), unsafe_allow_html=True)

    for section in view.checklist:
        with st.expander(render_year_header(section), expanded=True):
            for item in section.items:
                cid = item.course.id
                hint = missing_prerequisites_hint(item, tracker.catalog)

                col1, col2, col3 = st.columns([6, 2, 2])
                with col1:
                    st.markdown(render_course_info(item), unsafe_allow_html=True)

                # keys carry the checked value so widgets follow cascaded changes
                taken_key = f"taken_{cid}_{int(item.taken_checked)}"
                final_key = f"final_{cid}_{int(item.final_checked)}"
                with col2:
                    st.checkbox(
                        "Cursada",
                        value=item.taken_checked,
                        disabled=item.taken_disabled,
                        key=taken_key,
                        on_change=on_toggle,
                        args=(cid, ToggleKind.TAKEN, taken_key),
                        help=hint if item.taken_disabled else None,
                    )
                with col3:
                    st.checkbox(
                        "Final",
                        value=item.final_checked,
                        disabled=item.final_disabled,
                        key=final_key,
                        on_change=on_toggle,
                        args=(cid, ToggleKind.FINAL, final_key),
                        help=hint if item.final_disabled else None,
                    )


def render_main(view: TrackerView):
    """Render progress bar, checklist and matrix."""
    st.title("Avance de la carrera")
    render_flash()

    st.markdown(render_progress_bar(view.summary), unsafe_allow_html=True)

    st.subheader("Materias")
    render_checklist(view)

    with st.expander("Matriz", expanded=False):
        st.markdown(render_matrix(view.matrix), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    view = st.session_state.tracker.view()
    render_sidebar()
    render_main(view)


if __name__ == "__main__":
    main()
