"""
Tone Emitter - One decaying sine tone per echo

Each play() builds its own ToneEvent (pitch, start gain, envelope,
stop time) and hands it to the audio bridge. Nothing is shared between
calls, so overlapping tones never affect each other.

Envelope (rendered by the echoTone SynthDef): exponential ramp from
the current master volume down to ENVELOPE_FLOOR over the nominal
duration, playback stops TONE_TAIL seconds later.
"""

import math
from dataclasses import dataclass
from typing import Callable

from echocanvas.config import (
    ENVELOPE_FLOOR,
    TONE_MAX_DURATION,
    TONE_TAIL,
)
from echocanvas.utils.logger import logger


@dataclass(frozen=True)
class ToneEvent:
    """Everything the audio server needs to render one tone."""
    frequency: float
    gain: float
    duration: float
    stop_after: float
    floor: float = ENVELOPE_FLOOR


class ToneEmitter:
    """
    Drives the audio bridge, one tone per call.

    bridge: AudioBridge (or anything with is_suspended/resume/send_tone)
    volume: callable returning the current master volume (0-1)
    """

    def __init__(self, bridge, volume: Callable[[], float]):
        self._bridge = bridge
        self._volume = volume

    def play(self, frequency: float, duration: float) -> None:
        """Play one tone. Never raises."""
        if self._bridge.is_suspended():
            self._try_resume()

        if not (math.isfinite(frequency) and frequency > 0):
            logger.debug(f"Skipping tone with frequency {frequency}", component="AUDIO")
            return
        if not (math.isfinite(duration) and duration > 0):
            logger.debug(f"Skipping tone with duration {duration}", component="AUDIO")
            return

        duration = min(duration, TONE_MAX_DURATION + TONE_TAIL)
        gain = max(0.0, min(1.0, self._volume()))
        if gain <= 0:
            logger.debug("Muted, tone not sent", component="AUDIO")
            return

        event = ToneEvent(
            frequency=frequency,
            gain=gain,
            duration=duration,
            stop_after=duration + TONE_TAIL,
        )
        try:
            self._bridge.send_tone(event.frequency, event.gain, event.duration,
                                   event.stop_after, event.floor)
        except OSError as e:
            logger.warning("Tone send failed", component="AUDIO", details=str(e))

    def _try_resume(self) -> None:
        # Single best-effort attempt; a later play() tries again while still suspended
        try:
            self._bridge.resume()
        except Exception as e:
            logger.debug("Audio resume failed", component="AUDIO", details=str(e))
