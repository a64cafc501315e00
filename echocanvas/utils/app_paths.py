"""App path helpers (cross-platform).

SSOT for Echo Canvas app data paths.

Environment overrides (useful for portable/dev launches and tests):
- ECHO_CANVAS_DATA_DIR: base dir holding presets.json
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

from echocanvas.config import APP_NAME, PRESETS_FILENAME


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir."""
    data_dir = _env_path("ECHO_CANVAS_DATA_DIR")
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_presets_path() -> Path:
    return get_app_data_dir() / PRESETS_FILENAME
