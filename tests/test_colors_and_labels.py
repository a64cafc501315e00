"""
Tests for colour helpers and control panel value readouts.
"""

import pytest

from echocanvas.gui.control_panel import FORMATTERS, format_decay, format_pitch, format_volume
from echocanvas.gui.preset_panel import swatch_color
from echocanvas.utils.colors import hsv_to_rgb, name_hue


class TestHsvToRgb:

    @pytest.mark.parametrize("hue,expected", [
        (0, (255, 0, 0)),
        (120, (0, 255, 0)),
        (240, (0, 0, 255)),
        (60, (255, 255, 0)),
    ])
    def test_primaries(self, hue, expected):
        assert hsv_to_rgb(hue, 1.0, 1.0) == expected

    def test_hue_wraps(self):
        assert hsv_to_rgb(360, 1.0, 1.0) == hsv_to_rgb(0, 1.0, 1.0)

    def test_zero_saturation_is_grey(self):
        assert hsv_to_rgb(200, 0.0, 0.5) == (128, 128, 128)

    def test_echo_stroke_saturation(self):
        assert hsv_to_rgb(0, 0.8, 1.0) == (255, 51, 51)


class TestNameHue:

    def test_sum_of_codes(self):
        assert name_hue("Warm") == (87 + 97 + 114 + 109) % 360

    def test_empty_name(self):
        assert name_hue("") == 0

    def test_deterministic(self):
        assert name_hue("Preset 1") == name_hue("Preset 1")

    def test_astral_character_uses_leading_surrogate(self):
        assert name_hue("\U0001F600") == 0xD83D % 360


class TestSwatch:

    def test_css_format(self):
        r, g, b = hsv_to_rgb(name_hue("Warm"), 0.7, 0.9)
        assert swatch_color("Warm") == f"rgb({r},{g},{b})"


class TestLabels:

    def test_pitch(self):
        assert format_pitch(440.0) == "440Hz"
        assert format_pitch(440.5) == "441Hz"

    def test_volume(self):
        assert format_volume(0.5) == "50%"
        assert format_volume(0.005) == "1%"

    def test_decay(self):
        assert format_decay(1.2) == "1.20s"

    def test_formatter_for_every_parameter(self):
        assert set(FORMATTERS) == {'base_pitch', 'volume', 'decay_time'}
