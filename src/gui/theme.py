"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in src/gui/skins/
"""
import logging

from src.model.tick_marks import Tier

from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)

def accent(range_type):
    """Get accent colour for range type: 'int', 'db', 'freq', 'float'."""
    return get(f'accent_{range_type}')

# =============================================================================
# EXPORTS
# =============================================================================

FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'label': get('font_size_label'),
    'small': get('font_size_small'),
}

DRAG_SENSITIVITY = {
    'slider_normal': get('drag_slider_normal'),
    'slider_fine': get('drag_slider_fine'),
    'knob_normal': get('drag_knob_normal'),
    'knob_fine': get('drag_knob_fine'),
}

COLORS = {
    'enabled': get('state_enabled_bg'),
    'enabled_text': get('state_enabled_text'),
    'enabled_hover': get('state_enabled_hover'),

    'background': get('bg_mid'),
    'background_dark': get('bg_dark'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_mid'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),

    'slider_groove': get('slider_groove'),
    'slider_groove_border': get('slider_groove_border'),
    'slider_handle': get('slider_handle'),
    'slider_handle_hover': get('slider_handle_hover'),
    'slider_handle_border': get('slider_handle_border'),

    'knob_body': get('knob_body'),
    'knob_rim': get('knob_rim'),
    'knob_pointer': get('knob_pointer'),

    'pad_bg': get('pad_bg'),
    'pad_grid': get('pad_grid'),
    'pad_handle': get('pad_handle'),
}

# Log line colour by level (log view)
LOG_COLORS = {
    logging.DEBUG: get('log_debug'),
    logging.INFO: get('log_info'),
    logging.WARNING: get('log_warning'),
    logging.ERROR: get('log_error'),
}

TICK_COLORS = {
    Tier.ONE: get('tick_tier_1'),
    Tier.TWO: get('tick_tier_2'),
    Tier.THREE: get('tick_tier_3'),
}

# Tick length in px by tier
TICK_LENGTHS = {
    Tier.ONE: 8,
    Tier.TWO: 6,
    Tier.THREE: 4,
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style():
    """Push button stylesheet."""
    return f"""
        QPushButton {{
            background-color: {COLORS['enabled']};
            color: {COLORS['enabled_text']};
            border-radius: 3px;
            padding: 4px 10px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['enabled_hover']};
        }}
    """


def plain_slider_style():
    """Stock horizontal QSlider (the plain 0-1 control)."""
    return f"""
        QSlider::groove:horizontal {{
            border: 1px solid {COLORS['slider_groove_border']};
            height: 6px;
            background: {COLORS['slider_groove']};
            border-radius: 3px;
        }}
        QSlider::handle:horizontal {{
            background: {COLORS['slider_handle']};
            border: 1px solid {COLORS['slider_handle_border']};
            width: 12px;
            margin: -4px 0;
            border-radius: 6px;
        }}
        QSlider::handle:horizontal:hover {{
            background: {COLORS['slider_handle_hover']};
        }}
    """


def panel_style():
    """Main window background."""
    return f"""
        QWidget {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
        }}
    """


def output_label_style():
    """Status line under the widgets."""
    return f"""
        QLabel {{
            background-color: {COLORS['background_dark']};
            color: {COLORS['text_bright']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
            padding: 4px 6px;
        }}
    """


def log_view_style():
    """Read-only log lines under the status line."""
    return f"""
        QPlainTextEdit {{
            background-color: {COLORS['background_dark']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
        }}
    """
