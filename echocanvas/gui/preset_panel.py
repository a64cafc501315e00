"""
Preset Panel - save, list, apply and delete named presets

Each row shows a colour swatch derived from the preset name,
the name, and Apply / Del buttons. Deleting asks for confirmation.
"""

from typing import Dict

from PyQt5.QtWidgets import (QFrame, QVBoxLayout, QHBoxLayout, QLabel,
                             QLineEdit, QPushButton, QWidget, QScrollArea,
                             QMessageBox)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from echocanvas.config import SIZES, SWATCH_SATURATION, SWATCH_VALUE
from echocanvas.presets import Preset
from echocanvas.utils.colors import hsv_to_rgb, name_hue
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style

EMPTY_TEXT = "No presets yet"


def swatch_color(name: str) -> str:
    """CSS rgb() colour hint for a preset name."""
    r, g, b = hsv_to_rgb(name_hue(name), SWATCH_SATURATION, SWATCH_VALUE)
    return f"rgb({r},{g},{b})"


class PresetRow(QWidget):
    """One preset entry."""

    apply_clicked = pyqtSignal(str)
    delete_clicked = pyqtSignal(str)

    def __init__(self, name: str, parent=None):
        super().__init__(parent)
        self.name = name

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        swatch = QFrame()
        swatch.setFixedSize(SIZES['swatch'], SIZES['swatch'])
        swatch.setStyleSheet(f"background: {swatch_color(name)}; border-radius: 3px;")
        layout.addWidget(swatch)

        title = QLabel(name)
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        title.setStyleSheet(f"color: {COLORS['text_bright']};")
        layout.addWidget(title, stretch=1)

        apply_btn = QPushButton("Apply")
        apply_btn.setStyleSheet(button_style())
        apply_btn.clicked.connect(lambda: self.apply_clicked.emit(self.name))
        layout.addWidget(apply_btn)

        del_btn = QPushButton("Del")
        del_btn.setStyleSheet(button_style('ghost'))
        del_btn.clicked.connect(lambda: self.delete_clicked.emit(self.name))
        layout.addWidget(del_btn)


class PresetPanel(QFrame):
    """Name field + Save button above the list of saved presets."""

    save_requested = pyqtSignal(str)    # name (may be empty)
    apply_requested = pyqtSignal(str)   # name
    delete_requested = pyqtSignal(str)  # name, already confirmed

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("presetPanel")
        self.setStyleSheet(f"""
            QFrame#presetPanel {{
                background-color: {COLORS['panel']};
                border: 1px solid {COLORS['border']};
                border-radius: 4px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SIZES['margin_normal'], SIZES['margin_normal'],
                                  SIZES['margin_normal'], SIZES['margin_normal'])
        layout.setSpacing(SIZES['spacing_normal'])

        header = QLabel("PRESETS")
        header.setFont(QFont(FONT_FAMILY, FONT_SIZES['small'], QFont.Bold))
        header.setStyleSheet(f"color: {COLORS['text_dim']};")
        layout.addWidget(header)

        save_row = QHBoxLayout()
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Preset name")
        self.name_input.setStyleSheet(f"""
            QLineEdit {{
                background: {COLORS['background']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border_light']};
                border-radius: 3px;
                padding: 3px;
            }}
        """)
        self.name_input.returnPressed.connect(self._on_save)
        save_row.addWidget(self.name_input, stretch=1)

        self.save_btn = QPushButton("Save")
        self.save_btn.setStyleSheet(button_style('accent'))
        self.save_btn.clicked.connect(lambda: self._on_save())
        save_row.addWidget(self.save_btn)
        layout.addLayout(save_row)

        self._list_widget = QWidget()
        self._list_layout = QVBoxLayout(self._list_widget)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(SIZES['spacing_normal'])
        self._list_layout.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(self._list_widget)
        layout.addWidget(scroll, stretch=1)

        self.rows: Dict[str, PresetRow] = {}
        self.set_presets({})

    def _on_save(self):
        self.save_requested.emit(self.name_input.text())
        self.name_input.clear()

    def set_presets(self, presets: Dict[str, Preset]):
        """Rebuild the list from a name -> Preset mapping."""
        while self._list_layout.count():
            item = self._list_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.rows = {}

        if not presets:
            empty = QLabel(EMPTY_TEXT)
            empty.setStyleSheet(f"color: {COLORS['text_dim']};")
            self._list_layout.addWidget(empty)
            return

        for name in presets:
            row = PresetRow(name)
            row.apply_clicked.connect(self.apply_requested)
            row.delete_clicked.connect(self._confirm_delete)
            self._list_layout.addWidget(row)
            self.rows[name] = row

    def _confirm_delete(self, name: str):
        answer = QMessageBox.question(
            self, "Delete preset", f'Delete preset "{name}"?',
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No,
        )
        if answer == QMessageBox.Yes:
            self.delete_requested.emit(name)
