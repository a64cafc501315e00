"""
Preset manager - persistence boundary and in-memory preset set.

PresetGateway reads/writes presets.json. Failures never escape it:
they are logged and treated as "no presets" (load) or "not saved" (save).
PresetManager keeps the in-memory name -> Preset mapping used by the UI.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from echocanvas.utils.app_paths import get_presets_path
from echocanvas.utils.logger import logger

from .preset_schema import Preset, split_presets, presets_to_dict


class PresetError(Exception):
    """Raised when preset storage operations fail."""
    pass


def read_presets_file(path: Path) -> Dict[str, Preset]:
    """
    Read presets from path. Missing file means no presets.

    Raises:
        PresetError: unreadable file or invalid JSON
    """
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PresetError(f"Invalid JSON in preset file: {e}")
    except OSError as e:
        raise PresetError(f"Failed to read preset file: {e}")

    presets, errors = split_presets(data)
    for err in errors:
        logger.warning("Skipping preset record", component="PRESET", details=err)
    return presets


def write_presets_file(path: Path, presets: Dict[str, Preset]) -> None:
    """
    Write presets atomically: temp file in the same directory, then os.replace.

    Raises:
        PresetError: if the directory or file cannot be written
    """
    json_str = json.dumps(presets_to_dict(presets), indent=2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            suffix='.tmp',
            prefix='.presets_',
            dir=path.parent
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(json_str)
            os.replace(temp_path, path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
    except OSError as e:
        raise PresetError(f"Failed to write presets: {e}")


class PresetGateway:
    """Best-effort load/save of the preset mapping."""

    def __init__(self, path: Optional[Path] = None):
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = get_presets_path()
        return self._path

    def load(self) -> Dict[str, Preset]:
        try:
            presets = read_presets_file(self.path)
        except (PresetError, OSError) as e:
            logger.warning("Failed to read presets", component="PRESET", details=str(e))
            return {}
        logger.debug(f"Loaded {len(presets)} presets", component="PRESET")
        return presets

    def save(self, presets: Dict[str, Preset]) -> bool:
        try:
            write_presets_file(self.path, presets)
        except (PresetError, OSError) as e:
            logger.warning("Failed to save presets", component="PRESET", details=str(e))
            return False
        return True


class PresetManager:
    """
    In-memory preset set, persisted through a PresetGateway after every change.

    Usage:
        manager = PresetManager(PresetGateway())
        preset = manager.make_preset("Warm", params)
        manager.store(preset)
        manager.delete("Warm")
    """

    def __init__(self, gateway: PresetGateway):
        self._gateway = gateway
        self._presets: Dict[str, Preset] = gateway.load()

    @property
    def presets(self) -> Dict[str, Preset]:
        """Read-only copy of the current presets (insertion order)."""
        return dict(self._presets)

    def get(self, name: str) -> Optional[Preset]:
        return self._presets.get(name)

    def default_name(self) -> str:
        return f"Preset {len(self._presets) + 1}"

    def make_preset(self, name: str, params) -> Preset:
        """Snapshot current parameters under name (or the next default name)."""
        name = (name or "").strip() or self.default_name()
        return Preset(
            name=name,
            pitch=params.base_pitch,
            volume=params.volume,
            decay=params.decay_time,
        )

    def store(self, preset: Preset) -> None:
        """Add or overwrite by name, then persist."""
        self._presets[preset.name] = preset
        self._gateway.save(self._presets)
        logger.info(f"Saved preset '{preset.name}'", component="PRESET")

    def delete(self, name: str) -> bool:
        if name not in self._presets:
            return False
        del self._presets[name]
        self._gateway.save(self._presets)
        logger.info(f"Deleted preset '{name}'", component="PRESET")
        return True
