"""
Logger - Central logging system for the Parameter Panel

Usage:
    from src.utils.logger import logger

    logger.info("Window ready", component="APP")
    logger.debug("KnobFreq: 1000.00", component="PANEL", details="KnobFreq")

Every line is tagged "[COMPONENT] msg - details". Besides the terminal (and an
optional file) each record is re-emitted as a Qt signal; the window's log view
(src/gui/log_view.py) listens to it.
"""

import logging
import sys
import time
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

LOGGER_NAME = "param_panel"
LINE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


def parse_log_level(name: str) -> Optional[LogLevel]:
    """'debug' / 'INFO' / 'warn' -> LogLevel, or None if unknown."""
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    try:
        return LogLevel[name]
    except KeyError:
        return None


class LogSignalEmitter(QObject):
    log_message = pyqtSignal(str, int, str)  # message, level, HH:MM:SS


class QtSignalHandler(logging.Handler):
    """Forwards formatted records to a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord):
        try:
            stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            self.emitter.log_message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


class PanelLogger:
    """
    Wraps one stdlib logger with three sinks:
    terminal (level set by set_level), Qt signal (all levels) and an optional file.
    """

    def __init__(self, name: str = LOGGER_NAME):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # sinks filter
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = self._add_handler(
            logging.StreamHandler(sys.stdout), logging.INFO,
            logging.Formatter(LINE_FORMAT, datefmt="%H:%M:%S"))
        self._qt_handler = self._add_handler(
            QtSignalHandler(self.signal_emitter), logging.DEBUG,
            logging.Formatter("%(message)s"))
        self._file_handler: Optional[logging.FileHandler] = None

    def _add_handler(self, handler: logging.Handler, level: int,
                     formatter: logging.Formatter) -> logging.Handler:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        return handler

    @property
    def level(self) -> int:
        """Current console level."""
        return self._console_handler.level

    def set_level(self, level: LogLevel):
        self._console_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Log every level to filepath, replacing any earlier file."""
        self.disable_file_logging()
        self._file_handler = self._add_handler(
            logging.FileHandler(filepath), logging.DEBUG,
            logging.Formatter(LINE_FORMAT))

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def close(self):
        """Detach every sink. The instance is unusable afterwards."""
        self.disable_file_logging()
        for handler in (self._console_handler, self._qt_handler):
            self._logger.removeHandler(handler)

    @staticmethod
    def _format_message(msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        tag = f"[{component}] " if component else ""
        tail = f" - {details}" if details else ""
        return f"{tag}{msg}{tail}"

    def _log(self, level: int, msg: str, component: Optional[str],
             details: Optional[str]):
        self._logger.log(level, self._format_message(msg, component, details))

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._log(logging.ERROR, msg, component, details)

    def gui(self, msg: str, details: Optional[str] = None):
        """Widget events (resets, drags)."""
        self.debug(msg, component="GUI", details=details)


# Global logger instance
logger = PanelLogger()
