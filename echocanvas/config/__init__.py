"""
Central Configuration
All constants, ranges and settings in one place
"""

import math

# === USER PARAMETERS ===
# Single source of truth for the three tunable parameters.
# Order determines control panel slider order.
PARAMETERS = [
    {
        'key': 'base_pitch',
        'label': 'PITCH',
        'tooltip': 'Base pitch of spawned tones',
        'default': 440.0,
        'min': 80.0,
        'max': 1200.0,
        'step': 1.0,
        'unit': 'Hz',
    },
    {
        'key': 'volume',
        'label': 'VOL',
        'tooltip': 'Master volume',
        'default': 0.5,
        'min': 0.0,
        'max': 1.0,
        'step': 0.01,
        'unit': '%',
    },
    {
        'key': 'decay_time',
        'label': 'DECAY',
        'tooltip': 'Echo lifetime in seconds',
        'default': 1.2,
        'min': 0.1,
        'max': 4.0,
        'step': 0.01,
        'unit': 's',
    },
]

PARAMETERS_BY_KEY = {p['key']: p for p in PARAMETERS}

DEFAULT_BASE_PITCH = PARAMETERS_BY_KEY['base_pitch']['default']
DEFAULT_VOLUME = PARAMETERS_BY_KEY['volume']['default']
DEFAULT_DECAY_TIME = PARAMETERS_BY_KEY['decay_time']['default']


def parse_float(value, default):
    """
    Parse a UI value to float.
    Returns default for unparsable, NaN or infinite input (never raises).
    """
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def coerce_positive(value, default):
    """Parse value, falling back to default unless strictly positive."""
    result = parse_float(value, default)
    if result <= 0:
        return default
    return result


def slider_to_value(position, param, resolution=1000):
    """Map integer slider position (0..resolution) to real parameter value."""
    position = max(0, min(resolution, position))
    return param['min'] + (param['max'] - param['min']) * position / resolution


def value_to_slider(value, param, resolution=1000):
    """Inverse of slider_to_value."""
    span = param['max'] - param['min']
    if span <= 0:
        return 0
    value = max(param['min'], min(param['max'], value))
    return int(round((value - param['min']) / span * resolution))


# === SPAWN ===
HUE_RANGE = (0.0, 360.0)
SPAWN_RADIUS_RANGE = (40.0, 220.0)

# Frequency mapping: vertical position warps pitch +/-40% around base
PITCH_SPREAD = 0.8
TONE_MAX_DURATION = 2.0
TONE_DURATION_FACTOR = 0.9

# Random burst action
BURST_COUNT = 8
BURST_MARGIN = 20.0
BURST_RADIUS_RANGE = (60.0, 240.0)
BURST_LIFE_RANGE = (0.6, 1.8)

# Preset confirmation echo
PRESET_ECHO_RADIUS = 120.0
PRESET_ECHO_MIN_LIFE = 0.6

# === RENDER ===
FRAME_INTERVAL_MS = 16  # ~60fps display refresh

TRAIL_OVERLAY_RGB = (6, 10, 18)
TRAIL_OVERLAY_ALPHA = 0.15

RADIUS_START = 0.6   # fraction of max radius at progress 0
RADIUS_GROWTH = 1.6  # added fraction by progress 1
STROKE_MAX_WIDTH = 8.0
STROKE_MIN_WIDTH = 1.0
ECHO_SATURATION = 0.8
ECHO_VALUE = 1.0
SWATCH_SATURATION = 0.7
SWATCH_VALUE = 0.9

# === AUDIO ===
ENVELOPE_FLOOR = 0.001  # exponential ramp target ("effectively silent")
TONE_TAIL = 0.05        # seconds of ring-out after nominal duration

# === OSC ===
OSC_HOST = "127.0.0.1"
OSC_SEND_PORT = 57120
OSC_RECEIVE_PORT = 57121

OSC_PATHS = {
    # Connection management
    'ping': '/echo/ping',
    'pong': '/echo/pong',
    'heartbeat': '/echo/heartbeat',
    'heartbeat_ack': '/echo/heartbeat_ack',
    # Audio server state
    'resume': '/echo/resume',
    # Tones and master bus
    'tone': '/echo/tone',  # [freq, gain, duration, stop_after, floor]
    'master_volume': '/echo/master/volume',
}

# === PERSISTENCE ===
APP_NAME = "EchoCanvas"
PRESETS_FILENAME = "presets.json"
PRESET_VERSION = 1

# === WIDGET SIZES ===
SIZES = {
    'window_min': (900, 600),
    'window_default': (1200, 760),
    'side_panel_width': 260,
    'slider_height': 140,
    'swatch': 14,
    'spacing_tight': 2,
    'spacing_normal': 6,
    'margin_normal': 8,
}
