"""App path helpers (cross-platform).

SSOT for Parameter Panel app data paths.

Environment overrides (useful for portable/dev launches):
- PP_DATA_DIR: base dir for app data (logs/ lives under it)
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

from src.config import DATA_DIR_ENV

APP_NAME = "ParameterPanel"
LOG_FILENAME = "param_panel.log"


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir."""
    data_dir = _env_path(DATA_DIR_ENV)
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_log_dir() -> Path:
    """Log dir under the app data dir."""
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_path() -> Path:
    return get_log_dir() / LOG_FILENAME


def resolve_log_file(setting: str) -> Path:
    """
    Turn a PP_LOG_FILE setting into a path.
    "1" / "true" / "yes" mean the default log path.
    """
    if setting.strip().lower() in ("1", "true", "yes"):
        return get_log_path()
    path = Path(os.path.expanduser(setting)).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
