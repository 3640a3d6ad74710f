"""
Tests for src/gui/log_view.py

Line formatting is pure; widget wiring is checked from source like the other
UI tests, so no QApplication is needed.
"""

import logging
import os

from src.gui.log_view import LogView, format_log_line
from src.gui.theme import LOG_COLORS


class TestFormatLogLine:

    def test_contains_timestamp_level_and_message(self):
        line = format_log_line("[PANEL] HSliderInt: 7", logging.DEBUG, "12:00:01")
        assert "12:00:01" in line
        assert "[DEBUG]" in line
        assert line.endswith("[PANEL] HSliderInt: 7")

    def test_level_colour(self):
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
            assert LOG_COLORS[level] in format_log_line("x", level, "00:00:00")

    def test_warning_short_name(self):
        assert "[WARN]" in format_log_line("x", logging.WARNING, "00:00:00")

    def test_unknown_level(self):
        assert "[???]" in format_log_line("x", 5, "00:00:00")

    def test_message_is_escaped(self):
        line = format_log_line("a < b & c", logging.INFO, "00:00:00")
        assert line.endswith("a &lt; b &amp; c")


class TestLogViewWiring:

    def test_line_limit(self):
        assert LogView.MAX_LINES > 0

    def test_main_frame_mirrors_logger(self, project_root):
        with open(os.path.join(project_root, 'src', 'gui', 'main_frame.py')) as f:
            content = f.read()
        assert 'self.log_view = LogView()' in content
        assert 'self.log_view.connect_logger()' in content
        assert 'self.log_view.disconnect_logger()' in content

    def test_log_view_listens_to_global_logger(self, project_root):
        with open(os.path.join(project_root, 'src', 'gui', 'log_view.py')) as f:
            content = f.read()
        assert 'logger.signal_emitter.log_message.connect(self.on_log_message)' in content
