"""
ProgressStore - Persist taken/passed state in ~/.correlativas/progress.db.

Works like a browser localStorage: a single key-value table where the
whole progress document lives under one namespaced key.
- Every read goes to disk (no in-memory cache)
- Every save overwrites the full document
- Save callbacks let the UI refresh derived views
"""

import json
import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from correlativas.config import DEFAULT_STATE_DB, MAX_STATE_BYTES, STATE_KEY
from correlativas.schemas import ProgressState


logger = logging.getLogger(__name__)


class StateParseError(ValueError):
    """The stored progress document could not be parsed."""


class StorageError(RuntimeError):
    """The progress document could not be written."""


@dataclass
class StateLoadResult:
    """Outcome of reading the stored document: a state or a parse error."""
    state: Optional[ProgressState] = None
    error: Optional[StateParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_default(self) -> ProgressState:
        """Return the loaded state, or a fresh empty state on error."""
        if self.state is not None:
            return self.state
        return ProgressState()


def parse_state(text: str) -> ProgressState:
    """
    Parse a stored progress document.

    Raises:
        StateParseError: If the text is not a valid progress document
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateParseError(f"Malformed progress JSON: {e}") from e

    # JSON null behaves like a missing document
    if data is None:
        return ProgressState()
    if not isinstance(data, dict):
        raise StateParseError(f"Progress document must be an object, got {type(data).__name__}")

    try:
        return ProgressState.model_validate(data)
    except ValidationError as e:
        raise StateParseError(f"Invalid progress document: {e}") from e


class ProgressStore:
    """
    Key-value progress storage in SQLite.

    Progress is stored separately from the catalog so that:
    - The catalog can be updated without losing progress
    - Progress is user-specific, the catalog is shared
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        key: str = STATE_KEY,
        max_bytes: int = MAX_STATE_BYTES,
        on_save: Optional[Callable[[ProgressState], None]] = None,
    ):
        """
        Initialize progress store.

        Args:
            db_path: Path to progress.db (default: ~/.correlativas/progress.db)
            key: Namespaced storage key for the progress document
            max_bytes: Largest serialized document accepted by save()
            on_save: Optional callback run after every successful save
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STATE_DB
        self.key = key
        self.max_bytes = max_bytes
        self._callbacks: list[Callable[[ProgressState], None]] = []
        if on_save:
            self._callbacks.append(on_save)
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def subscribe(self, callback: Callable[[ProgressState], None]):
        """Register a callback run after every save."""
        self._callbacks.append(callback)

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def read_raw(self) -> Optional[str]:
        """Get the stored document text, or None if nothing is stored."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT value FROM storage WHERE key = ?", (self.key,)
            )
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def write_raw(self, value: str):
        """Overwrite the stored document text."""
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO storage (key, value) VALUES (?, ?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
                (self.key, value)
            )
            conn.commit()
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def load_result(self) -> StateLoadResult:
        """
        Read the stored state.

        Returns:
            StateLoadResult with an empty state if nothing is stored, the
            parsed state, or the parse error for a corrupt document
        """
        raw = self.read_raw()
        if raw is None:
            return StateLoadResult(state=ProgressState())
        try:
            return StateLoadResult(state=parse_state(raw))
        except StateParseError as e:
            return StateLoadResult(error=e)

    def load(self) -> ProgressState:
        """Read the stored state, falling back to an empty state if corrupt."""
        result = self.load_result()
        if not result.ok:
            logger.warning(f"Ignoring unreadable progress under {self.key!r}: {result.error}")
        return result.unwrap_or_default()

    def save(self, state: ProgressState):
        """
        Persist the full state and notify callbacks.

        Raises:
            StorageError: If the document is too large or the write fails
        """
        payload = state.model_dump_json()
        size = len(payload.encode("utf-8"))
        if size > self.max_bytes:
            raise StorageError(
                f"Progress document is {size} bytes, over the {self.max_bytes} byte limit"
            )

        try:
            self.write_raw(payload)
        except sqlite3.Error as e:
            logger.error(f"Failed to save progress to {self.db_path}: {e}")
            raise StorageError(f"Could not save progress: {e}") from e

        for callback in self._callbacks:
            callback(state)

    def reset(self):
        """Delete the stored state for this key."""
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM storage WHERE key = ?", (self.key,))
            conn.commit()
        finally:
            conn.close()
