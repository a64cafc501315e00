"""
Echo System

Transient ripples spawned by pointer input, each paired with one tone,
fading out over their lifetime on a persistent trail buffer.
"""

from .echo_state import Echo, ParameterState
from .echo_store import EchoStore, pitch_for_position, tone_duration, monotonic_ms
from .render_pass import RenderPass, RippleStyle
from .simulation_clock import SimulationClock
from .echo_controller import EchoController

__all__ = [
    'Echo',
    'ParameterState',
    'EchoStore',
    'pitch_for_position',
    'tone_duration',
    'monotonic_ms',
    'RenderPass',
    'RippleStyle',
    'SimulationClock',
    'EchoController',
]
