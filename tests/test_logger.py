"""
Tests for the central logger: tag formatting, GUI signal, file output.
"""

import logging

import pytest

from echocanvas.utils.logger import logger


@pytest.fixture
def gui_lines():
    lines = []
    slot = lambda text, level, stamp: lines.append((text, level, stamp))
    logger.signal_emitter.log_message.connect(slot)
    yield lines
    logger.signal_emitter.log_message.disconnect(slot)


class TestGuiSignal:

    def test_component_and_details(self, gui_lines):
        logger.info("Saved preset", component="PRESET", details="Warm")
        text, level, stamp = gui_lines[-1]
        assert text == "[PRESET] Saved preset - Warm"
        assert level == logging.INFO
        assert len(stamp) == 8

    def test_plain_message(self, gui_lines):
        logger.warning("Careful")
        assert gui_lines[-1][0] == "Careful"

    def test_debug_not_sent_to_gui(self, gui_lines):
        logger.echo("spawn (1, 2)")
        assert gui_lines == []


class TestFileLogging:

    def test_debug_records_reach_file(self, tmp_path):
        path = tmp_path / "echo.log"
        logger.enable_file_logging(str(path))
        try:
            logger.osc("Tone dropped", details="no client")
        finally:
            logger.disable_file_logging()
        content = path.read_text(encoding="utf-8")
        assert "[OSC] Tone dropped - no client" in content

    def test_disable_stops_writing(self, tmp_path):
        path = tmp_path / "echo.log"
        logger.enable_file_logging(str(path))
        logger.disable_file_logging()
        logger.error("after", component="APP")
        assert "after" not in path.read_text(encoding="utf-8")
