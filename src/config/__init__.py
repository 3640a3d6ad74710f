"""
Central Configuration
All constants, range definitions, and settings in one place
"""

import os

# === WINDOW ===
WINDOW_TITLE = "Simple Example - Parameter Panel"

# === PLAIN CONTROLS ===
# The plain 0-1 slider and button sit above the parameter widgets
SLIDER_MIN = 0.0
SLIDER_MAX = 1.0
SLIDER_STEP = 0.025
SLIDER_INITIAL = 0.0

BUTTON_ID = 128
BUTTON_LABEL = "Click here"

OUTPUT_TEXT_INITIAL = "try anything"

# === PARAMETER RANGES ===
# Single source of truth for the panel's ranges and starting values.
# 'initial' and 'default' are real values, mapped through the range.
PANEL_PARAMS = {
    'h_slider': {
        'range': 'int',
        'label': 'INT',
        'tooltip': 'Integer steps',
        'min': 0,
        'max': 10,
        'initial': 5,
        'default': 5,
        'unit': '',
    },
    'v_slider': {
        'range': 'db',
        'label': 'DB',
        'tooltip': 'Gain (dB)',
        'min': -12.0,
        'max': 12.0,
        'zero_position': 0.5,
        'unit': 'dB',
    },
    'knob': {
        'range': 'freq',
        'label': 'FRQ',
        'tooltip': 'Frequency',
        'min': 20.0,
        'max': 20480.0,
        'initial': 1000.0,
        'default': 1000.0,
        'unit': 'Hz',
    },
    'xy_pad': {
        'range': 'float',
        'label': 'XY',
        'tooltip': 'Bipolar X / Y',
        'min': -1.0,
        'max': 1.0,
        'default': 0.0,
        'unit': '',
    },
}

# === STATUS TEXT ===
# Format strings for the output line, keyed by message
STATUS_FORMATS = {
    'button': "Button Clicked: {id}",
    'slider': "Slider Changed: {value:g}",
    'h_slider': "HSliderInt: {value}",
    'v_slider': "VSliderDB: {value:.3f}",
    'knob': "KnobFreq: {value:.2f}",
    'xy_pad': "XYPadFloat: x: {x:.2f}, y: {y:.2f}",
}


def format_value(value, param):
    """
    Format a real value with its unit for popup display.
    """
    unit = param.get('unit', '')

    if unit == 'Hz':
        if round(value) >= 1000:
            return f"{value/1000:.2f}kHz"
        else:
            return f"{value:.0f}Hz"
    elif unit == 'dB':
        return f"{value:+.1f}dB"
    elif param.get('range') == 'int':
        return f"{int(value)}"
    elif unit == '':
        return f"{value:.2f}"
    else:
        return f"{value:.2f}{unit}"


# === ENVIRONMENT ===
# PP_LOG_LEVEL: DEBUG / INFO / WARNING / ERROR (console)
# PP_LOG_FILE: path to a log file, or "1" for the default path
# PP_DATA_DIR: base dir for app data (see src/utils/app_paths.py)
LOG_LEVEL_ENV = 'PP_LOG_LEVEL'
LOG_FILE_ENV = 'PP_LOG_FILE'
DATA_DIR_ENV = 'PP_DATA_DIR'


def get_env_log_level():
    """Console log level name from the environment, or None."""
    value = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    return value or None


def get_env_log_file():
    """Log file setting from the environment, or None."""
    value = os.environ.get(LOG_FILE_ENV, '').strip()
    return value or None


# === UI SIZES ===
SIZES = {
    # Main column
    'panel_max_width': 300,
    'panel_spacing': 20,
    'panel_padding': 20,

    # Window
    'window_min': (340, 660),
    'window_default': (400, 840),

    # Parameter widgets
    'h_slider': (200, 24),
    'v_slider': (24, 140),
    'knob': (56, 56),
    'xy_pad': (140, 140),

    # Log lines under the status text
    'log_view_height': 90,
}

