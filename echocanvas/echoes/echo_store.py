"""
Echo Store - Live echo collection with spawn and age-based eviction

Every spawn appends one immutable Echo and fires exactly one tone.
Eviction happens only in evict_and_snapshot(), once per frame, and is
the only place echoes are removed (clear() aside).

Frequency mapping:
    freq = base_pitch * (1 + (y / canvas_height - 0.5) * 0.8)
Vertical position warps pitch +/-40% around the base pitch;
horizontal position does not affect pitch.
"""

import math
import random
import time
from typing import Callable, Iterator, List, Optional, Tuple

from echocanvas.config import (
    HUE_RANGE,
    SPAWN_RADIUS_RANGE,
    PITCH_SPREAD,
    TONE_MAX_DURATION,
    TONE_DURATION_FACTOR,
    parse_float,
    coerce_positive,
)
from echocanvas.utils.logger import logger

from .echo_state import Echo, ParameterState


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


def pitch_for_position(y: float, canvas_height: float, base_pitch: float) -> float:
    """
    Map vertical spawn position to tone frequency.

    A degenerate canvas height (zero, negative or non-finite) maps to the
    vertical centre, i.e. the base pitch itself.
    """
    if not canvas_height or canvas_height <= 0 or not math.isfinite(canvas_height):
        return base_pitch
    freq = base_pitch * (1 + (y / canvas_height - 0.5) * PITCH_SPREAD)
    if not math.isfinite(freq):
        return base_pitch
    return freq


def tone_duration(life: float) -> float:
    """Tone length for an echo: 90% of its life, capped at 2 seconds."""
    return min(TONE_MAX_DURATION, life * TONE_DURATION_FACTOR)


class EchoStore:
    """
    Owns the live echoes.

    Collaborators are injected so the store runs without a display or an
    audio device:
        tone_emitter: object with play(frequency, duration)
        geometry: callable returning the canvas logical (width, height)
        parameters: callable returning the current ParameterState
        clock: callable returning monotonic milliseconds
    """

    def __init__(self, tone_emitter, geometry: Callable[[], Tuple[float, float]],
                 parameters: Callable[[], ParameterState],
                 clock: Callable[[], float] = monotonic_ms,
                 rng: Optional[random.Random] = None):
        self._tone_emitter = tone_emitter
        self._geometry = geometry
        self._parameters = parameters
        self._clock = clock
        self._rng = rng or random.Random()

        self._echoes: List[Echo] = []

    @property
    def echoes(self) -> Tuple[Echo, ...]:
        """Live echoes in insertion order (read-only copy)."""
        return tuple(self._echoes)

    def __len__(self) -> int:
        return len(self._echoes)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def now(self) -> float:
        return self._clock()

    def spawn(self, x, y, hue=None, max_radius=None, life=None) -> None:
        """
        Spawn one echo at (x, y) and play its tone.

        Coordinates are not clamped (off-canvas spawns are allowed).
        Missing or malformed options fall back to their defaults:
        random hue in [0, 360), random radius in [40, 220],
        life = current decay time.
        """
        params = self._parameters().snapshot()
        _, height = self._geometry()

        x = parse_float(x, 0.0)
        y = parse_float(y, 0.0)

        if hue is None:
            hue = math.floor(self._rng.uniform(*HUE_RANGE))
        hue = parse_float(hue, 0.0) % 360

        if max_radius is None:
            max_radius = self._rng.uniform(*SPAWN_RADIUS_RANGE)
        max_radius = coerce_positive(max_radius, SPAWN_RADIUS_RANGE[0])

        life = coerce_positive(life, params.decay_time)

        echo = Echo(x=x, y=y, hue=hue, max_radius=max_radius,
                    life=life, created_at=self._clock())
        self._echoes.append(echo)

        freq = pitch_for_position(y, height, params.base_pitch)
        logger.echo(f"spawn ({x:.0f}, {y:.0f}) hue={hue:.0f} life={life:.2f}s",
                    details=f"{freq:.1f}Hz")
        # Far above the canvas the mapping goes negative; the tone plays at |f|
        self._tone_emitter.play(abs(freq), tone_duration(life))

    def evict_and_snapshot(self, now: float) -> Iterator[Tuple[Echo, float]]:
        """
        Drop expired echoes and return (echo, progress) pairs for the rest.

        An echo is expired once its age reaches its life, so every
        returned progress lies in [0, 1). Progress is computed lazily as
        the sequence is consumed; removal is immediate.
        """
        if not self._echoes:
            return iter(())

        self._echoes = [e for e in self._echoes if e.is_live(now)]
        survivors = tuple(self._echoes)
        return ((e, max(0.0, e.progress(now))) for e in survivors)

    def clear(self) -> None:
        """Remove every echo immediately. No tones are played."""
        self._echoes = []
