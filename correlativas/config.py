"""
Configuration for Correlativas.

Settings are resolved in three layers:
- built-in defaults
- an optional YAML file (explicit path or CORRELATIVAS_CONFIG)
- environment variables (a .env file is loaded first)
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_CATALOG = PROJECT_ROOT / "data" / "materias.json"
DEFAULT_STATE_DIR = Path.home() / ".correlativas"
DEFAULT_STATE_DB = DEFAULT_STATE_DIR / "progress.db"

# Storage key and export name match the earlier web version so exported
# files stay interchangeable.
STATE_KEY = "matematica_avance_v1"
EXPORT_FILENAME = "progreso_materias.json"

# Same order of magnitude as a browser localStorage quota
MAX_STATE_BYTES = 5 * 1024 * 1024

ENV_PREFIX = "CORRELATIVAS_"


class Settings(BaseModel):
    """Runtime settings for the app and scripts."""
    model_config = ConfigDict(extra="forbid")

    catalog_source: str = str(DEFAULT_CATALOG)  # path or http(s) URL
    state_db: Path = DEFAULT_STATE_DB
    state_key: str = Field(default=STATE_KEY, min_length=1)
    export_filename: str = EXPORT_FILENAME
    max_state_bytes: int = Field(default=MAX_STATE_BYTES, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')

    @field_validator("state_db")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()


# environment variable suffix -> settings field
ENV_FIELDS = {
    "CATALOG": "catalog_source",
    "STATE_DB": "state_db",
    "STATE_KEY": "state_key",
    "LOG_LEVEL": "log_level",
}


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Load settings overrides from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Dict of overrides (empty for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file isn't a YAML mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def env_overrides(environ: Optional[dict[str, str]] = None) -> dict[str, str]:
    """Collect CORRELATIVAS_* overrides from the environment."""
    environ = os.environ if environ is None else environ
    overrides = {}
    for suffix, field_name in ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value:
            overrides[field_name] = value
    return overrides


def load_settings(config_path: Optional[Path] = None, use_dotenv: bool = True) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Optional YAML config path (falls back to CORRELATIVAS_CONFIG)
        use_dotenv: Whether to load a .env file from the project root first

    Raises:
        ValueError: If a value fails validation or the file has unknown keys
    """
    if use_dotenv:
        load_dotenv(PROJECT_ROOT / ".env")

    values: dict[str, Any] = {}

    path = config_path or os.environ.get(ENV_PREFIX + "CONFIG")
    if path:
        values.update(load_config_file(Path(path)))

    values.update(env_overrides())

    # pydantic's ValidationError is a ValueError subclass
    return Settings(**values)
