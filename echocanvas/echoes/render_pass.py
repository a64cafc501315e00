"""
Render Pass - Draws one frame of echoes onto the persistent trail buffer

The buffer is never cleared between frames. Each frame first lays a
low-opacity dark wash over everything, so old strokes fade out over
successive frames, then strokes every live echo as an unfilled circle.

Per echo, from its progress p in [0, 1):
    radius = max_radius * (0.6 + p * 1.6)
    alpha  = max(0, 1 - p)
    width  = max(1, 8 * (1 - p))
    colour = HSV(hue, 0.8, 1.0)
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QColor, QPen

from echocanvas.config import (
    TRAIL_OVERLAY_RGB,
    TRAIL_OVERLAY_ALPHA,
    RADIUS_START,
    RADIUS_GROWTH,
    STROKE_MAX_WIDTH,
    STROKE_MIN_WIDTH,
    ECHO_SATURATION,
    ECHO_VALUE,
)
from echocanvas.utils.colors import hsv_to_rgb

from .echo_state import Echo


def ripple_radius(max_radius: float, progress: float) -> float:
    return max_radius * (RADIUS_START + progress * RADIUS_GROWTH)


def ripple_alpha(progress: float) -> float:
    return max(0.0, 1.0 - progress)


def ripple_stroke_width(progress: float) -> float:
    return max(STROKE_MIN_WIDTH, STROKE_MAX_WIDTH * (1.0 - progress))


@dataclass(frozen=True)
class RippleStyle:
    """Derived render state for one echo at one instant."""
    radius: float
    alpha: float
    stroke_width: float
    rgb: Tuple[int, int, int]

    @classmethod
    def for_echo(cls, echo: Echo, progress: float) -> "RippleStyle":
        return cls(
            radius=ripple_radius(echo.max_radius, progress),
            alpha=ripple_alpha(progress),
            stroke_width=ripple_stroke_width(progress),
            rgb=hsv_to_rgb(echo.hue, ECHO_SATURATION, ECHO_VALUE),
        )

    def color(self) -> QColor:
        color = QColor(*self.rgb)
        color.setAlphaF(self.alpha)
        return color


class RenderPass:
    """Stateless frame painter; the caller owns the painter and its target."""

    def __init__(self):
        self._overlay = QColor(*TRAIL_OVERLAY_RGB)
        self._overlay.setAlphaF(TRAIL_OVERLAY_ALPHA)

    def draw(self, painter, width: float, height: float,
             snapshot: Iterable[Tuple[Echo, float]]) -> int:
        """
        Paint the fade wash and every echo in snapshot order.

        Returns the number of echoes drawn.
        """
        painter.fillRect(QRectF(0, 0, width, height), self._overlay)
        painter.setBrush(Qt.NoBrush)

        drawn = 0
        for echo, progress in snapshot:
            style = RippleStyle.for_echo(echo, progress)
            pen = QPen(style.color())
            pen.setWidthF(style.stroke_width)
            painter.setPen(pen)
            painter.drawEllipse(QPointF(echo.x, echo.y), style.radius, style.radius)
            drawn += 1
        return drawn
