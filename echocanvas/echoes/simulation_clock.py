"""
Simulation Clock - Per-frame tick driving eviction and drawing

Each tick is one synchronous unit of work on the Qt event loop:
    now -> store.evict_and_snapshot(now) -> renderer.draw(snapshot)
The frame timer reschedules the next tick. Tests call tick(now)
directly instead of starting the timer.
"""

from typing import Callable, Optional
from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from echocanvas.config import FRAME_INTERVAL_MS
from echocanvas.utils.logger import logger

from .echo_store import EchoStore, monotonic_ms


class SimulationClock(QObject):
    """
    Frame loop for the echo surface.

    renderer: object with draw(snapshot), typically the canvas widget.
    """

    frame_drawn = pyqtSignal(int)  # live echo count after eviction

    def __init__(self, store: EchoStore, renderer,
                 clock: Callable[[], float] = monotonic_ms, parent=None):
        super().__init__(parent)
        self._store = store
        self._renderer = renderer
        self._clock = clock
        self._timer: Optional[QTimer] = None
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def start(self) -> None:
        """Start ticking once per display frame."""
        if self.running:
            return
        if self._timer is None:
            self._timer = QTimer(self)
            self._timer.setInterval(FRAME_INTERVAL_MS)
            self._timer.timeout.connect(self._on_timer)
        self._timer.start()
        logger.info("Frame loop started", component="ECHO")

    def _on_timer(self) -> None:
        self.tick()

    def tick(self, now: Optional[float] = None) -> None:
        """Advance one frame. now is monotonic milliseconds."""
        if now is None:
            now = self._clock()

        snapshot = self._store.evict_and_snapshot(now)
        try:
            self._renderer.draw(snapshot)
        except Exception as e:
            # A bad frame must not stop the loop
            logger.error("Frame draw failed", component="ECHO", details=repr(e))

        self._frame_count += 1
        if self._frame_count % 600 == 0:
            logger.echo(f"frame {self._frame_count}: {len(self._store)} live")
        self.frame_drawn.emit(len(self._store))
