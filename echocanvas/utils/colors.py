"""
Colour helpers shared by the render pass and the preset list.
"""

from typing import Tuple


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Tuple[int, int, int]:
    """
    Convert HSV to 8-bit RGB.

    hue is in degrees and wraps, saturation and value are 0-1.
    Uses the piecewise k-form: f(n) = v - v*s*max(min(k, 4-k, 1), 0)
    with k = (n + h/60) mod 6.
    """
    def channel(n):
        k = (n + hue / 60.0) % 6
        return value - value * saturation * max(min(k, 4 - k, 1), 0)

    return (
        int(round(channel(5) * 255)),
        int(round(channel(3) * 255)),
        int(round(channel(1) * 255)),
    )


def _char_code(c: str) -> int:
    # Astral characters count as their leading UTF-16 surrogate
    cp = ord(c)
    if cp > 0xFFFF:
        return 0xD800 + ((cp - 0x10000) >> 10)
    return cp


def name_hue(name: str) -> int:
    """Hue derived from a preset name: sum of character codes mod 360."""
    return sum(_char_code(c) for c in name) % 360
