"""
Main Frame - Combines all components
"""

import logging

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QLabel)
from PyQt5.QtGui import QFont

from echocanvas.audio.audio_bridge import AudioBridge
from echocanvas.audio.tone_emitter import ToneEmitter
from echocanvas.config import SIZES
from echocanvas.echoes import EchoController
from echocanvas.presets import PresetGateway, PresetManager
from echocanvas.utils.logger import logger

from .control_panel import ControlPanel
from .echo_canvas import EchoCanvasWidget
from .preset_panel import PresetPanel
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, MONO_FONT


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, bridge=None, preset_gateway=None):
        super().__init__()

        self.setWindowTitle("Echo Canvas")
        self.setMinimumSize(*SIZES['window_min'])
        self.resize(*SIZES['window_default'])
        self.setStyleSheet(f"background-color: {COLORS['background']};")

        self.bridge = bridge or AudioBridge()
        self.presets = PresetManager(preset_gateway or PresetGateway())

        self.canvas = EchoCanvasWidget()
        self.controller = EchoController(
            ToneEmitter(self.bridge, volume=lambda: self.controller.params.volume),
            geometry=self.canvas.logical_size,
            presets=self.presets,
        )
        self.controller.attach_renderer(self.canvas)

        self.setup_ui()
        self.connect_signals()

        self.preset_panel.set_presets(self.controller.get_presets())
        self.control_panel.set_parameters(self.controller.params.to_dict())

    def setup_ui(self):
        """Create the main interface layout."""
        central = QWidget()
        self.setCentralWidget(central)

        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(SIZES['margin_normal'], SIZES['margin_normal'],
                                       SIZES['margin_normal'], SIZES['margin_normal'])
        main_layout.setSpacing(SIZES['spacing_normal'])

        main_layout.addWidget(self.canvas, stretch=1)

        side = QWidget()
        side.setFixedWidth(SIZES['side_panel_width'])
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(0, 0, 0, 0)
        side_layout.setSpacing(SIZES['spacing_normal'])

        title = QLabel("ECHO CANVAS")
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['accent']};")
        side_layout.addWidget(title)

        self.control_panel = ControlPanel()
        side_layout.addWidget(self.control_panel)

        self.preset_panel = PresetPanel()
        side_layout.addWidget(self.preset_panel, stretch=1)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        self.status_label.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.status_label.setStyleSheet(f"color: {COLORS['text_dim']};")
        side_layout.addWidget(self.status_label)

        main_layout.addWidget(side)

    def connect_signals(self):
        self.canvas.set_pointer_handler(self.controller.pointer_down)

        self.control_panel.parameter_changed.connect(self.on_parameter_changed)
        self.control_panel.clear_clicked.connect(self.controller.clear)
        self.control_panel.burst_clicked.connect(self.controller.random_burst)
        self.control_panel.connect_clicked.connect(self.on_connect_audio)

        self.preset_panel.save_requested.connect(self.controller.save_preset)
        self.preset_panel.apply_requested.connect(self.on_apply_preset)
        self.preset_panel.delete_requested.connect(self.controller.delete_preset)

        self.controller.echoes_cleared.connect(self.canvas.clear)
        self.controller.presets_changed.connect(
            lambda: self.preset_panel.set_presets(self.controller.get_presets()))
        self.controller.parameters_changed.connect(self.on_parameters_changed)

        self.bridge.state_changed.connect(self.on_audio_state)
        self.bridge.connection_lost.connect(
            lambda: logger.warning("Audio connection lost", component="APP"))

        logger.signal_emitter.log_message.connect(self.on_log_message)

    def start(self):
        """Begin the frame loop (after the window is shown)."""
        self.controller.start()

    # === Handlers ===

    def on_parameter_changed(self, key, value):
        setter = {
            'base_pitch': self.controller.set_base_pitch,
            'volume': self.controller.set_volume,
            'decay_time': self.controller.set_decay_time,
        }[key]
        setter(value)

    def on_audio_state(self, state):
        self.control_panel.set_audio_state(state)
        if state == "running":
            self._send_master_volume(self.controller.params.volume)

    def on_parameters_changed(self, params):
        self.control_panel.set_parameters(params)
        self._send_master_volume(params["volume"])

    def _send_master_volume(self, volume):
        try:
            self.bridge.send_master_volume(volume)
        except OSError as e:
            logger.debug("Master volume send failed", component="AUDIO", details=str(e))

    def on_apply_preset(self, name):
        preset = self.presets.get(name)
        if preset is None:
            logger.warning(f"Preset '{name}' no longer exists", component="PRESET")
            return
        self.controller.apply_preset(preset)

    def on_connect_audio(self):
        if self.bridge.connected:
            self.bridge.disconnect()
        else:
            self.bridge.connect()

    def on_log_message(self, message, level, timestamp):
        if level >= logging.INFO:
            self.status_label.setText(f"{timestamp} {message}")

    def closeEvent(self, event):
        self.bridge.disconnect()
        super().closeEvent(event)
