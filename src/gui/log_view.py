"""
Log View - recent log lines under the status line

Mirrors the global logger's Qt signal, so every panel message and reset shows
up in the window as well as the terminal.
"""

import html
import logging

from PyQt5.QtWidgets import QPlainTextEdit
from PyQt5.QtGui import QFont

from src.gui.theme import COLORS, LOG_COLORS, MONO_FONT, FONT_SIZES, log_view_style
from src.utils.logger import logger


LOG_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}


def format_log_line(message: str, level: int, timestamp: str) -> str:
    """One log record as an HTML line, coloured by level."""
    color = LOG_COLORS.get(level, COLORS['text'])
    name = LOG_LEVEL_NAMES.get(level, "???")
    return (f"<span style='color: {COLORS['text_dim']}'>{timestamp}</span> "
            f"<span style='color: {color}'>[{name}]</span> "
            f"{html.escape(message)}")


class LogView(QPlainTextEdit):
    """Read-only tail of the log, oldest lines dropped past MAX_LINES."""

    MAX_LINES = 200

    def __init__(self, min_level=logging.DEBUG, parent=None):
        super().__init__(parent)
        self._min_level = min_level
        self.setReadOnly(True)
        self.setMaximumBlockCount(self.MAX_LINES)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.setStyleSheet(log_view_style())

    def connect_logger(self):
        """Start mirroring the global logger."""
        logger.signal_emitter.log_message.connect(self.on_log_message)

    def disconnect_logger(self):
        logger.signal_emitter.log_message.disconnect(self.on_log_message)

    def on_log_message(self, message: str, level: int, timestamp: str):
        if level < self._min_level:
            return
        self.appendHtml(format_log_line(message, level, timestamp))
        bar = self.verticalScrollBar()
        bar.setValue(bar.maximum())
