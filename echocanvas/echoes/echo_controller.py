"""
Echo Controller - Ties parameters, the echo store, the frame clock and presets

Connects:
- ParameterState (current pitch/volume/decay)
- EchoStore (spawn, eviction)
- SimulationClock (frame loop, started once a renderer is attached)
- PresetManager (save/delete/apply)

All calls happen on the Qt main thread; pointer handlers and the frame
timer share the same event queue.
"""

import math
from typing import Callable, Optional, Tuple
from PyQt5.QtCore import QObject, pyqtSignal

from echocanvas.config import (
    HUE_RANGE,
    BURST_COUNT,
    BURST_MARGIN,
    BURST_RADIUS_RANGE,
    BURST_LIFE_RANGE,
    PRESET_ECHO_RADIUS,
    PRESET_ECHO_MIN_LIFE,
)
from echocanvas.presets import Preset, PresetManager
from echocanvas.utils.colors import name_hue
from echocanvas.utils.logger import logger

from .echo_state import ParameterState
from .echo_store import EchoStore, monotonic_ms
from .simulation_clock import SimulationClock


class EchoController(QObject):
    """
    Controller for the echo surface.

    Owns the store and (once attached) the frame clock.
    Emits signals for UI updates.
    """

    parameters_changed = pyqtSignal(dict)
    presets_changed = pyqtSignal()
    echoes_cleared = pyqtSignal()

    def __init__(self, tone_emitter, geometry: Callable[[], Tuple[float, float]],
                 presets: PresetManager, params: Optional[ParameterState] = None,
                 clock: Callable[[], float] = monotonic_ms, rng=None, parent=None):
        super().__init__(parent)

        self._params = params or ParameterState()
        self._geometry = geometry
        self._presets = presets
        self._clock_fn = clock

        self._store = EchoStore(
            tone_emitter,
            geometry=geometry,
            parameters=lambda: self._params,
            clock=clock,
            rng=rng,
        )
        self._clock: Optional[SimulationClock] = None

    @property
    def store(self) -> EchoStore:
        return self._store

    @property
    def params(self) -> ParameterState:
        return self._params

    @property
    def clock(self) -> Optional[SimulationClock]:
        return self._clock

    @property
    def echoes(self):
        """Live echoes (read-only copy)."""
        return self._store.echoes

    # === Lifecycle ===

    def attach_renderer(self, renderer) -> SimulationClock:
        """Create the frame clock drawing into renderer (does not start it)."""
        self._clock = SimulationClock(self._store, renderer, clock=self._clock_fn, parent=self)
        return self._clock

    def start(self) -> None:
        if self._clock is None:
            logger.warning("Cannot start frame loop: no renderer attached", component="ECHO")
            return
        self._clock.start()

    # === Spawning ===

    def spawn(self, x, y, hue=None, max_radius=None, life=None) -> None:
        self._store.spawn(x, y, hue=hue, max_radius=max_radius, life=life)

    def pointer_down(self, x: float, y: float) -> None:
        """Pointer or touch contact: spawn with a fresh whole-degree hue."""
        hue = math.floor(self._store.rng.uniform(*HUE_RANGE))
        self.spawn(x, y, hue=hue)

    def random_burst(self) -> None:
        """Spawn BURST_COUNT echoes at random places inside the margins."""
        rng = self._store.rng
        width, height = self._geometry()
        for _ in range(BURST_COUNT):
            x = rng.uniform(BURST_MARGIN, width - BURST_MARGIN)
            y = rng.uniform(BURST_MARGIN, height - BURST_MARGIN)
            hue = math.floor(rng.uniform(*HUE_RANGE))
            self.spawn(x, y, hue=hue,
                       max_radius=rng.uniform(*BURST_RADIUS_RANGE),
                       life=rng.uniform(*BURST_LIFE_RANGE))

    def clear(self) -> None:
        self._store.clear()
        self.echoes_cleared.emit()

    # === Parameters ===

    def set_base_pitch(self, value) -> None:
        self._params.set_base_pitch(value)
        self.parameters_changed.emit(self._params.to_dict())

    def set_volume(self, value) -> None:
        self._params.set_volume(value)
        self.parameters_changed.emit(self._params.to_dict())

    def set_decay_time(self, value) -> None:
        self._params.set_decay_time(value)
        self.parameters_changed.emit(self._params.to_dict())

    # === Presets ===

    def get_presets(self):
        """Read-only copy of the saved presets."""
        return self._presets.presets

    def save_preset(self, name: str = "") -> Preset:
        preset = self._presets.make_preset(name, self._params)
        self._presets.store(preset)
        self.presets_changed.emit()
        return preset

    def delete_preset(self, name: str) -> bool:
        deleted = self._presets.delete(name)
        if deleted:
            self.presets_changed.emit()
        return deleted

    def apply_preset(self, preset: Preset) -> None:
        """
        Load preset values into the live parameters, then spawn one
        confirmation echo at the canvas centre coloured by the preset name.
        """
        self._params.set_base_pitch(preset.pitch)
        self._params.set_volume(preset.volume)
        self._params.set_decay_time(preset.decay)
        self.parameters_changed.emit(self._params.to_dict())

        width, height = self._geometry()
        self.spawn(width / 2, height / 2,
                   hue=name_hue(preset.name),
                   max_radius=PRESET_ECHO_RADIUS,
                   life=max(PRESET_ECHO_MIN_LIFE, preset.decay))
        logger.info(f"Applied preset '{preset.name}'", component="PRESET")

    # === Introspection ===

    def debug_api(self) -> dict:
        """Small inspection surface for tooling and tests."""
        return {
            "spawn": self.spawn,
            "echoes": lambda: self._store.echoes,
            "tick": self._clock.tick if self._clock else None,
            "get_presets": self.get_presets,
        }
