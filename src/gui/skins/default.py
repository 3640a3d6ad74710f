"""
Default Skin - High Contrast

Clean, high-contrast dark theme with clear visual hierarchy.
Designed for readability and accessibility.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_dark': '#0d0d0d',
    'bg_mid': '#1a1a1a',
    'bg_highlight': '#2e2e2e',

    # Borders
    'border_dark': '#2a2a2a',
    'border_light': '#4a4a4a',

    # Text (dimmest to brightest)
    'text_dim': '#606060',
    'text_mid': '#909090',
    'text_bright': '#d0d0d0',

    # ==========================================================================
    # ACCENTS - Parameter widget colours, one per range type
    # ==========================================================================

    # Int steps - Green
    'accent_int': '#00ff66',

    # Decibels - Orange
    'accent_db': '#ff8800',

    # Frequency - Cyan
    'accent_freq': '#00ccff',

    # Float - Purple
    'accent_float': '#aa88ff',

    # ==========================================================================
    # STATES - Interactive element states
    # ==========================================================================

    'state_enabled_bg': '#0a2a15',
    'state_enabled_text': '#00ff66',
    'state_enabled_hover': '#0d3a1d',

    # ==========================================================================
    # CONTROLS - Sliders, knobs, pads
    # ==========================================================================

    'slider_groove': '#1a1a1a',
    'slider_groove_border': '#3a3a3a',
    'slider_handle': '#808080',
    'slider_handle_hover': '#a0a0a0',
    'slider_handle_border': '#4a4a4a',

    'knob_body': '#242424',
    'knob_rim': '#3a3a3a',
    'knob_pointer': '#d0d0d0',

    'pad_bg': '#0d0d0d',
    'pad_grid': '#2a2a2a',
    'pad_handle': '#d0d0d0',

    # Tick marks by tier (ONE = most prominent)
    'tick_tier_1': '#b0b0b0',
    'tick_tier_2': '#808080',
    'tick_tier_3': '#505050',

    # ==========================================================================
    # LOG VIEW - Line colour by level
    # ==========================================================================

    'log_debug': '#666666',
    'log_info': '#88ff88',
    'log_warning': '#ffaa44',
    'log_error': '#ff6666',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    'font_size_label': 10,
    'font_size_small': 9,

    # ==========================================================================
    # INTERACTION
    # ==========================================================================

    # Slider travel as a multiple of the widget length for a full sweep
    'drag_slider_normal': 1.0,
    'drag_slider_fine': 3.0,
    # Knob / pad travel in pixels for a full sweep
    'drag_knob_normal': 150,
    'drag_knob_fine': 600,
}
