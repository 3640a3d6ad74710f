"""
Panel Messages

Everything the UI can tell the panel. The set is closed: ParameterPanel
handles exactly these types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class WidgetId(Enum):
    """Identifiers for the parameter widgets on the panel."""
    H_SLIDER = 'h_slider'
    V_SLIDER = 'v_slider'
    KNOB = 'knob'
    XY_PAD = 'xy_pad'


@dataclass(frozen=True)
class SliderChanged:
    """Plain 0-1 slider moved."""
    value: float


@dataclass(frozen=True)
class ButtonClicked:
    button_id: int


@dataclass(frozen=True)
class HSliderInt:
    normal: float


@dataclass(frozen=True)
class VSliderDB:
    normal: float


@dataclass(frozen=True)
class KnobFreq:
    normal: float


@dataclass(frozen=True)
class XYPadFloat:
    """Both axes of the XY pad, always updated together."""
    normal_x: float
    normal_y: float


@dataclass(frozen=True)
class ParamReset:
    """Return a parameter widget to its default (double-click)."""
    widget_id: WidgetId


Message = Union[SliderChanged, ButtonClicked, HSliderInt, VSliderDB,
                KnobFreq, XYPadFloat, ParamReset]
