"""
Echo State - Data model for echoes and the tunable parameters

Echo is an immutable record; its render state (radius, alpha, stroke)
is derived from progress at draw time and never stored.
ParameterState is the live parameter tuple owned by the control panel
and read as a snapshot on every spawn.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict

from echocanvas.config import (
    DEFAULT_BASE_PITCH,
    DEFAULT_VOLUME,
    DEFAULT_DECAY_TIME,
    parse_float,
    coerce_positive,
)


@dataclass(frozen=True)
class Echo:
    """Single transient ripple. created_at is monotonic milliseconds."""
    x: float
    y: float
    hue: float
    max_radius: float
    life: float
    created_at: float

    def age(self, now: float) -> float:
        """Seconds elapsed since spawn."""
        return (now - self.created_at) / 1000.0

    def progress(self, now: float) -> float:
        """Normalized age (age / life)."""
        return self.age(now) / self.life

    def is_live(self, now: float) -> bool:
        return self.age(now) < self.life


@dataclass
class ParameterState:
    """
    Current values of the three tunable parameters.

    base_pitch in Hz, volume as unit gain, decay_time in seconds.
    """
    base_pitch: float = DEFAULT_BASE_PITCH
    volume: float = DEFAULT_VOLUME
    decay_time: float = DEFAULT_DECAY_TIME

    def snapshot(self) -> "ParameterState":
        """Detached copy for a single spawn."""
        return replace(self)

    def set_base_pitch(self, value) -> None:
        self.base_pitch = coerce_positive(value, DEFAULT_BASE_PITCH)

    def set_volume(self, value) -> None:
        self.volume = max(0.0, min(1.0, parse_float(value, DEFAULT_VOLUME)))

    def set_decay_time(self, value) -> None:
        self.decay_time = coerce_positive(value, DEFAULT_DECAY_TIME)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_pitch": self.base_pitch,
            "volume": self.volume,
            "decay_time": self.decay_time,
        }
