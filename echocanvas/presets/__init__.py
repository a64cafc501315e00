"""
Presets module - named parameter snapshots that persist across sessions.
"""

from .preset_schema import (
    Preset,
    validate_record,
    split_presets,
    presets_to_dict,
)

from .preset_manager import (
    PresetError,
    PresetGateway,
    PresetManager,
    read_presets_file,
    write_presets_file,
)

__all__ = [
    "Preset",
    "validate_record",
    "split_presets",
    "presets_to_dict",
    "PresetError",
    "PresetGateway",
    "PresetManager",
    "read_presets_file",
    "write_presets_file",
]
