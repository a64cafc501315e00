"""
Preset schema - named snapshots of the three tunable parameters.

File layout (presets.json):
    {
      "version": 1,
      "presets": {
        "Warm": {"name": "Warm", "pitch": 330.0, "volume": 0.6, "decay": 0.3},
        ...
      }
    }

A bare {name: record} mapping (no version wrapper) is also accepted on load.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from echocanvas.config import PRESET_VERSION

PRESET_FIELDS = ("pitch", "volume", "decay")


@dataclass(frozen=True)
class Preset:
    """Named parameter snapshot. Name is the unique key."""
    name: str
    pitch: float
    volume: float
    decay: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pitch": self.pitch,
            "volume": self.volume,
            "decay": self.decay,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], name: str = None) -> "Preset":
        return cls(
            name=str(data.get("name") or name),
            pitch=float(data["pitch"]),
            volume=float(data["volume"]),
            decay=float(data["decay"]),
        )


def validate_record(key: str, data: Any) -> List[str]:
    """Return a list of problems with one stored preset record."""
    errors = []
    if not isinstance(key, str) or not key:
        errors.append(f"preset key {key!r} must be a non-empty string")
    if not isinstance(data, dict):
        errors.append(f"{key}: record must be an object")
        return errors
    for field in PRESET_FIELDS:
        value = data.get(field)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{key}: '{field}' must be a number")
        elif not math.isfinite(value):
            errors.append(f"{key}: '{field}' must be finite")
    return errors


def split_presets(data: Any) -> Tuple[Dict[str, Preset], List[str]]:
    """
    Parse loaded JSON into presets.

    Invalid records are skipped and reported; the rest are kept.
    """
    if not isinstance(data, dict):
        return {}, ["preset file must contain an object"]

    if "presets" in data and isinstance(data.get("presets"), dict):
        version = data.get("version", PRESET_VERSION)
        if version != PRESET_VERSION:
            return {}, [f"unsupported preset version {version!r}"]
        records = data["presets"]
    else:
        records = data

    presets = {}
    errors = []
    for key, record in records.items():
        problems = validate_record(key, record)
        if problems:
            errors.extend(problems)
            continue
        presets[key] = Preset.from_dict(record, name=key)
    return presets, errors


def presets_to_dict(presets: Dict[str, Preset]) -> Dict[str, Any]:
    return {
        "version": PRESET_VERSION,
        "presets": {name: p.to_dict() for name, p in presets.items()},
    }
