"""Pytest configuration - shared fixtures.

Everything here runs without a display or an audio device: the tone
emitter is a recorder, the clock is manual and the canvas geometry is a
fixed tuple.
"""
from __future__ import annotations

import random
from pathlib import Path

import pytest

from echocanvas.echoes import EchoStore, ParameterState

ROOT = Path(__file__).resolve().parents[1]


class ManualClock:
    """Monotonic-milliseconds clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds * 1000.0
        return self.now


class RecordingToneEmitter:
    """Stands in for ToneEmitter; remembers every play() call."""

    def __init__(self):
        self.calls = []

    def play(self, frequency, duration):
        self.calls.append((frequency, duration))


class Geometry:
    """Mutable canvas size, re-read on every call like the real widget."""

    def __init__(self, width: float = 800.0, height: float = 600.0):
        self.width = width
        self.height = height

    def __call__(self):
        return self.width, self.height


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def tones():
    return RecordingToneEmitter()


@pytest.fixture
def geometry():
    return Geometry()


@pytest.fixture
def params():
    return ParameterState()


@pytest.fixture
def store(tones, geometry, params, clock):
    return EchoStore(tones, geometry=geometry, parameters=lambda: params,
                     clock=clock, rng=random.Random(1234))


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the app data dir at a temp folder."""
    monkeypatch.setenv("ECHO_CANVAS_DATA_DIR", str(tmp_path))
    return tmp_path
