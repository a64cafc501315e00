"""
Control Panel Component
Pitch / volume / decay faders with value readouts, plus action buttons
"""

import math

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QSlider, QPushButton, QFrame)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from echocanvas.config import (
    PARAMETERS, SIZES,
    slider_to_value, value_to_slider,
)
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style, slider_style

SLIDER_RESOLUTION = 1000


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def format_pitch(value):
    return f"{_round_half_up(value)}Hz"


def format_volume(value):
    return f"{_round_half_up(value * 100)}%"


def format_decay(value):
    return f"{value:.2f}s"


FORMATTERS = {
    'base_pitch': format_pitch,
    'volume': format_volume,
    'decay_time': format_decay,
}


class ParamFader(QWidget):
    """Vertical slider with a title above and a value readout below."""

    value_changed = pyqtSignal(str, float)  # key, real value

    def __init__(self, param, parent=None):
        super().__init__(parent)
        self.param = param
        self.key = param['key']

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_tight'])

        title = QLabel(param['label'])
        title.setAlignment(Qt.AlignCenter)
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['small'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_dim']};")
        title.setToolTip(param['tooltip'])
        layout.addWidget(title)

        self.slider = QSlider(Qt.Vertical)
        self.slider.setRange(0, SLIDER_RESOLUTION)
        self.slider.setMinimumHeight(SIZES['slider_height'])
        self.slider.setStyleSheet(slider_style())
        self.slider.setValue(value_to_slider(param['default'], param, SLIDER_RESOLUTION))
        self.slider.valueChanged.connect(self._on_slider)
        layout.addWidget(self.slider, alignment=Qt.AlignHCenter)

        self.value_label = QLabel()
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
        self.value_label.setStyleSheet(f"color: {COLORS['text']};")
        layout.addWidget(self.value_label)

        self._update_label(param['default'])

    def value(self):
        return slider_to_value(self.slider.value(), self.param, SLIDER_RESOLUTION)

    def set_value(self, value):
        """Set without emitting value_changed."""
        self.slider.blockSignals(True)
        self.slider.setValue(value_to_slider(value, self.param, SLIDER_RESOLUTION))
        self.slider.blockSignals(False)
        self._update_label(value)

    def _on_slider(self, position):
        value = slider_to_value(position, self.param, SLIDER_RESOLUTION)
        self._update_label(value)
        self.value_changed.emit(self.key, value)

    def _update_label(self, value):
        self.value_label.setText(FORMATTERS[self.key](value))


class ControlPanel(QFrame):
    """Parameter faders and the Clear / Random Burst / Connect buttons."""

    parameter_changed = pyqtSignal(str, float)
    clear_clicked = pyqtSignal()
    burst_clicked = pyqtSignal()
    connect_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("controlPanel")
        self.setStyleSheet(f"""
            QFrame#controlPanel {{
                background-color: {COLORS['panel']};
                border: 1px solid {COLORS['border']};
                border-radius: 4px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SIZES['margin_normal'], SIZES['margin_normal'],
                                  SIZES['margin_normal'], SIZES['margin_normal'])
        layout.setSpacing(SIZES['spacing_normal'])

        faders_row = QHBoxLayout()
        self.faders = {}
        for param in PARAMETERS:
            fader = ParamFader(param)
            fader.value_changed.connect(self.parameter_changed)
            faders_row.addWidget(fader)
            self.faders[param['key']] = fader
        layout.addLayout(faders_row)

        buttons_row = QHBoxLayout()
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.setStyleSheet(button_style())
        self.clear_btn.clicked.connect(lambda: self.clear_clicked.emit())
        buttons_row.addWidget(self.clear_btn)

        self.burst_btn = QPushButton("Random Burst")
        self.burst_btn.setStyleSheet(button_style('accent'))
        self.burst_btn.clicked.connect(lambda: self.burst_clicked.emit())
        buttons_row.addWidget(self.burst_btn)
        layout.addLayout(buttons_row)

        self.connect_btn = QPushButton("Connect Audio")
        self.connect_btn.setStyleSheet(button_style())
        self.connect_btn.clicked.connect(lambda: self.connect_clicked.emit())
        layout.addWidget(self.connect_btn)

    def set_parameters(self, params: dict):
        """Reflect parameter values (e.g. after a preset) without re-emitting."""
        for key, value in params.items():
            if key in self.faders:
                self.faders[key].set_value(value)

    def set_audio_state(self, state: str):
        self.connect_btn.setText("Audio: running" if state == "running" else "Connect Audio")
