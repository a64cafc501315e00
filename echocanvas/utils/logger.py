"""
Logger - Central logging system for Echo Canvas

Usage:
    from echocanvas.utils.logger import logger

    logger.info("Frame loop started", component="ECHO")
    logger.warning("Failed to read presets", component="PRESET", details=str(e))
    logger.osc("Tone dropped, no audio client")

Every record carries an optional component tag and details suffix as
LogRecord attributes; ComponentFormatter renders them as
    [COMPONENT] message - details
Records at or above the GUI level are re-emitted as a Qt signal, which is
safe to fire from the OSC server thread.
"""

import logging
import sys
import time
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

LOGGER_NAME = "echo_canvas"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(tagged)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(tagged)s"


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ComponentFormatter(logging.Formatter):
    """Formatter exposing %(tagged)s: message with component tag and details."""

    def format(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        component = getattr(record, "component", None)
        details = getattr(record, "details", None)
        if component:
            text = f"[{component}] {text}"
        if details:
            text = f"{text} - {details}"
        record.tagged = text
        return super().format(record)


class LogSignalEmitter(QObject):
    log_message = pyqtSignal(str, int, str)  # text, level, HH:MM:SS


class QtSignalHandler(logging.Handler):
    """Forwards formatted records to a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter, level=logging.INFO):
        super().__init__(level)
        self.emitter = emitter
        self.setFormatter(ComponentFormatter("%(tagged)s"))

    def emit(self, record: logging.LogRecord):
        try:
            stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            self.emitter.log_message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


class EchoCanvasLogger:
    """
    Thin front end over the stdlib "echo_canvas" logger.

    The stdlib logger passes everything; each handler filters by its own
    level (console INFO, GUI INFO, file DEBUG).
    """

    def __init__(self):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console = logging.StreamHandler(sys.stdout)
        self._console.setLevel(logging.INFO)
        self._console.setFormatter(ComponentFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

        self._qt = QtSignalHandler(self.signal_emitter)
        self._file: Optional[logging.FileHandler] = None

        self._logger.handlers.clear()
        self._logger.addHandler(self._console)
        self._logger.addHandler(self._qt)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_level(self, level: LogLevel):
        """Minimum level for the terminal."""
        self._console.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Also write every record (DEBUG and up) to filepath."""
        self.disable_file_logging()
        self._file = logging.FileHandler(filepath, encoding="utf-8")
        self._file.setLevel(logging.DEBUG)
        self._file.setFormatter(ComponentFormatter(FILE_FORMAT))
        self._logger.addHandler(self._file)

    def disable_file_logging(self):
        if self._file is not None:
            self._logger.removeHandler(self._file)
            self._file.close()
            self._file = None

    def _log(self, level: int, msg: str, component: Optional[str], details: Optional[str]):
        self._logger.log(level, msg, extra={"component": component, "details": details})

    def debug(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.ERROR, msg, component, details)

    # Debug-level shorthands for the two chattiest subsystems

    def osc(self, msg: str, details: Optional[str] = None):
        self.debug(msg, component="OSC", details=details)

    def echo(self, msg: str, details: Optional[str] = None):
        self.debug(msg, component="ECHO", details=details)


logger = EchoCanvasLogger()


def set_log_level(level: LogLevel):
    logger.set_level(level)
