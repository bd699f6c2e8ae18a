"""
Import/export of the progress document.

The exported file is the stored document verbatim. Imports only need both
the taken and passed fields to be present (as JSON objects); files
exported by the older web version (cursadas/aprobadas) are accepted too.
"""

import json
import logging

from pydantic import ValidationError

from correlativas.schemas import ProgressState


logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "Error al leer el archivo JSON."
FORMAT_ERROR_MESSAGE = "El archivo no tiene el formato correcto."
IMPORT_OK_MESSAGE = "Progreso importado correctamente."

TAKEN_KEYS = ("taken", "cursadas")
PASSED_KEYS = ("passed", "aprobadas")


class ImportRejected(ValueError):
    """An imported document was refused; current progress is untouched."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def export_state(state: ProgressState) -> str:
    """Serialize progress to the exported JSON document."""
    return state.model_dump_json()


def _has_field(document: dict, keys: tuple[str, ...]) -> bool:
    return any(isinstance(document.get(key), dict) for key in keys)


def import_state(raw: bytes | str) -> ProgressState:
    """
    Parse an imported progress document.

    Args:
        raw: File contents as bytes or text

    Returns:
        The ProgressState to replace the current one with

    Raises:
        ImportRejected: If the file isn't JSON or lacks taken/passed
    """
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        document = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.info(f"Import rejected, unreadable file: {e}")
        raise ImportRejected(READ_ERROR_MESSAGE) from e

    if not isinstance(document, dict) or not (
        _has_field(document, TAKEN_KEYS) and _has_field(document, PASSED_KEYS)
    ):
        logger.info("Import rejected, taken/passed fields missing")
        raise ImportRejected(FORMAT_ERROR_MESSAGE)

    try:
        return ProgressState.model_validate(document)
    except ValidationError as e:
        raise ImportRejected(FORMAT_ERROR_MESSAGE) from e
