"""
Echo Canvas Widget
Persistent trail buffer the render pass draws into, plus pointer input.

The buffer is a QImage kept between frames (the fade wash relies on old
frames still being there). It is recreated on resize and wiped on clear.
"""

from typing import Callable, Optional, Tuple
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QEvent
from PyQt5.QtGui import QPainter, QImage, QColor

from echocanvas.echoes import RenderPass
from .theme import COLORS


class EchoCanvasWidget(QWidget):
    """Drawing surface for echoes. Logical pixels throughout."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)

        self._render_pass = RenderPass()
        self._buffer: Optional[QImage] = None
        self._background = QColor(COLORS['canvas'])

        # Called with (x, y) for every new pointer or touch contact
        self._on_pointer: Optional[Callable[[float, float], None]] = None

    def set_pointer_handler(self, handler: Callable[[float, float], None]) -> None:
        self._on_pointer = handler

    def logical_size(self) -> Tuple[float, float]:
        """Current logical width/height (queried fresh on every call)."""
        return float(self.width()), float(self.height())

    # === Trail buffer ===

    def _ensure_buffer(self) -> QImage:
        ratio = self.devicePixelRatioF()
        w = max(1, int(self.width() * ratio))
        h = max(1, int(self.height() * ratio))
        if self._buffer is None or self._buffer.width() != w or self._buffer.height() != h:
            self._buffer = QImage(w, h, QImage.Format_ARGB32_Premultiplied)
            self._buffer.setDevicePixelRatio(ratio)
            self._buffer.fill(self._background)
        return self._buffer

    def draw(self, snapshot) -> None:
        """Render one frame of the snapshot into the trail buffer."""
        buffer = self._ensure_buffer()
        painter = QPainter(buffer)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            width, height = self.logical_size()
            self._render_pass.draw(painter, width, height, snapshot)
        finally:
            painter.end()
        self.update()

    def clear(self) -> None:
        """Wipe the trail buffer immediately."""
        if self._buffer is not None:
            self._buffer.fill(self._background)
        self.update()

    # === Qt events ===

    def paintEvent(self, event):
        painter = QPainter(self)
        if self._buffer is None:
            painter.fillRect(self.rect(), self._background)
        else:
            painter.drawImage(0, 0, self._buffer)
        painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._ensure_buffer()
        self.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self._on_pointer:
            pos = event.localPos()
            self._on_pointer(pos.x(), pos.y())
        super().mousePressEvent(event)

    def event(self, event):
        # One spawn per newly pressed contact
        if event.type() == QEvent.TouchBegin or event.type() == QEvent.TouchUpdate:
            if self._on_pointer:
                for point in event.touchPoints():
                    if point.state() & Qt.TouchPointPressed:
                        pos = point.pos()
                        self._on_pointer(pos.x(), pos.y())
            event.accept()
            return True
        return super().event(event)
