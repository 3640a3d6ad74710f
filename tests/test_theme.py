"""
Tests for src/gui/theme.py
Every exported colour must resolve from the active skin
"""

import logging
import os
import re

from src.gui import theme
from src.gui.skins import default
from src.model.tick_marks import Tier

MISSING = '#ff00ff'


class TestSkinKeys:

    def test_colors_resolve(self):
        missing = [k for k, v in theme.COLORS.items() if v == MISSING]
        assert not missing, f"COLORS keys missing from skin: {missing}"

    def test_accents_for_every_range_type(self):
        for range_type in ('int', 'db', 'freq', 'float'):
            assert theme.accent(range_type) != MISSING

    def test_tick_colors_for_every_tier(self):
        for tier in Tier:
            assert theme.TICK_COLORS[tier] != MISSING
            assert theme.TICK_LENGTHS[tier] > 0

    def test_log_colors_for_every_level(self):
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
            assert theme.LOG_COLORS[level] != MISSING

    def test_drag_sensitivity_present(self):
        for key, value in theme.DRAG_SENSITIVITY.items():
            assert value != MISSING, key
            assert value > 0

    def test_styles_render(self):
        for style in (theme.button_style(), theme.plain_slider_style(),
                      theme.panel_style(), theme.output_label_style(),
                      theme.log_view_style()):
            assert MISSING not in style


class TestNoDeadEntries:
    """Skin keys and theme exports must all have a reader."""

    def test_every_skin_key_is_read(self, project_root):
        with open(os.path.join(project_root, 'src', 'gui', 'theme.py')) as f:
            content = f.read()
        read = set(re.findall(r"get\('([a-z0-9_]+)'\)", content))
        unread = [k for k in default.SKIN
                  if k not in read and not k.startswith('accent_')]
        assert not unread, f"Skin keys nothing reads: {unread}"

    def test_every_color_is_used(self, project_root):
        gui_dir = os.path.join(project_root, 'src', 'gui')
        sources = []
        for name in ('widgets.py', 'main_frame.py', 'log_view.py'):
            with open(os.path.join(gui_dir, name)) as f:
                sources.append(f.read())
        with open(os.path.join(gui_dir, 'theme.py')) as f:
            # Style functions read COLORS too; skip the dict definition itself
            sources.append(f.read().split('# STYLE FUNCTIONS')[1])
        used = set()
        for source in sources:
            used.update(re.findall(r"COLORS\['([a-z_]+)'\]", source))
        unused = [k for k in theme.COLORS if k not in used]
        assert not unused, f"COLORS keys nothing reads: {unused}"
