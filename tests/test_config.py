"""
Tests for echocanvas/config/__init__.py
Validates parameter ranges, value parsing and slider mapping
"""

import pytest

from echocanvas.config import (
    PARAMETERS,
    PARAMETERS_BY_KEY,
    DEFAULT_BASE_PITCH,
    DEFAULT_VOLUME,
    DEFAULT_DECAY_TIME,
    parse_float,
    coerce_positive,
    slider_to_value,
    value_to_slider,
)


class TestParameters:

    def test_three_parameters_in_order(self):
        assert [p['key'] for p in PARAMETERS] == ['base_pitch', 'volume', 'decay_time']

    def test_required_fields(self):
        for p in PARAMETERS:
            for field in ('key', 'label', 'default', 'min', 'max', 'step', 'unit'):
                assert field in p, f"{p.get('key')}: missing {field}"

    def test_defaults_within_range(self):
        for p in PARAMETERS:
            assert p['min'] <= p['default'] <= p['max'], p['key']

    def test_default_values(self):
        assert DEFAULT_BASE_PITCH == 440.0
        assert DEFAULT_VOLUME == 0.5
        assert DEFAULT_DECAY_TIME == 1.2

    def test_ranges(self):
        assert (PARAMETERS_BY_KEY['base_pitch']['min'], PARAMETERS_BY_KEY['base_pitch']['max']) == (80.0, 1200.0)
        assert (PARAMETERS_BY_KEY['volume']['min'], PARAMETERS_BY_KEY['volume']['max']) == (0.0, 1.0)
        assert (PARAMETERS_BY_KEY['decay_time']['min'], PARAMETERS_BY_KEY['decay_time']['max']) == (0.1, 4.0)


class TestParseFloat:

    @pytest.mark.parametrize("value,expected", [
        ("3.5", 3.5),
        (2, 2.0),
        (" 7 ", 7.0),
    ])
    def test_parses_numbers(self, value, expected):
        assert parse_float(value, 0.0) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "nan", "inf", float('-inf'), [1]])
    def test_bad_input_returns_default(self, value):
        assert parse_float(value, 9.0) == 9.0

    def test_coerce_positive_rejects_zero_and_negative(self):
        assert coerce_positive(0, 1.2) == 1.2
        assert coerce_positive(-3, 1.2) == 1.2
        assert coerce_positive("0.4", 1.2) == 0.4


class TestSliderMapping:

    def test_endpoints(self):
        param = PARAMETERS_BY_KEY['base_pitch']
        assert slider_to_value(0, param) == 80.0
        assert slider_to_value(1000, param) == 1200.0

    def test_out_of_range_positions_clamped(self):
        param = PARAMETERS_BY_KEY['volume']
        assert slider_to_value(-5, param) == 0.0
        assert slider_to_value(5000, param) == 1.0

    def test_value_to_slider(self):
        param = PARAMETERS_BY_KEY['volume']
        assert value_to_slider(0.5, param) == 500
        assert value_to_slider(2.0, param) == 1000

    def test_default_survives_slider(self):
        for p in PARAMETERS:
            pos = value_to_slider(p['default'], p)
            assert slider_to_value(pos, p) == pytest.approx(p['default'], abs=(p['max'] - p['min']) / 1000)
