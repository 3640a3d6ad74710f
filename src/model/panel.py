"""
Parameter Panel - state and update logic for the demo window

The panel owns every parameter. The UI sends it messages and reads back a
render description; it never touches Qt itself.

    panel = ParameterPanel()
    panel.handle_event(KnobFreq(0.7))
    view = panel.render()
    view.output_text  # "KnobFreq: 2560.00"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from src.config import (
    PANEL_PARAMS, STATUS_FORMATS, WINDOW_TITLE, SLIDER_INITIAL, SLIDER_STEP,
    BUTTON_ID, BUTTON_LABEL, OUTPUT_TEXT_INITIAL, SIZES, format_value,
)
from src.model.messages import (
    Message, SliderChanged, ButtonClicked, HSliderInt, VSliderDB, KnobFreq,
    XYPadFloat, ParamReset, WidgetId,
)
from src.model.ranges import range_from_config
from src.model.tick_marks import Tier, TickMarkGroup
from src.utils.logger import logger


@dataclass(frozen=True)
class WidgetView:
    """
    Description of one widget in the panel.

    `message` is the message type the widget produces; `payload` holds any
    leading arguments fixed at render time (e.g. the button id).
    """
    kind: str
    message: type
    values: Tuple[float, ...] = ()
    defaults: Tuple[float, ...] = ()
    widget_id: Optional[WidgetId] = None
    tick_marks: Optional[TickMarkGroup] = None
    label: str = ''
    step: Optional[float] = None
    payload: tuple = ()

    def make_message(self, *args) -> Message:
        return self.message(*self.payload, *args)


@dataclass(frozen=True)
class PanelView:
    """Everything the UI needs to draw the panel, layout sizes included."""
    title: str
    widgets: Tuple[WidgetView, ...]
    output_text: str
    sizes: dict = field(default_factory=dict)

    def widget(self, kind: str) -> WidgetView:
        for w in self.widgets:
            if w.kind == kind:
                return w
        raise KeyError(kind)


class ParameterPanel:
    """Holds the demo parameters and turns UI messages into display text."""

    def __init__(self, params=None, sizes=None):
        params = params or PANEL_PARAMS
        self._params = params
        self._sizes = sizes or SIZES

        self.slider_value = SLIDER_INITIAL
        self.button_id = BUTTON_ID

        # Ranges convert between widget position and real value
        self.int_range = range_from_config(params['h_slider'])
        self.db_range = range_from_config(params['v_slider'])
        self.freq_range = range_from_config(params['knob'])
        self.float_range = range_from_config(params['xy_pad'])

        h_cfg = params['h_slider']
        knob_cfg = params['knob']
        self.h_slider_param = self.int_range.normal_param(
            h_cfg.get('initial', self.int_range.default_value),
            h_cfg.get('default', self.int_range.default_value))
        self.v_slider_param = self.db_range.default_normal_param()
        self.knob_param = self.freq_range.normal_param(
            knob_cfg.get('initial', self.freq_range.default_value),
            knob_cfg.get('default', self.freq_range.default_value))
        self.xy_pad_x_param = self.float_range.default_normal_param()
        self.xy_pad_y_param = self.float_range.default_normal_param()

        self.center_tick_marks = TickMarkGroup.center(Tier.TWO)
        self.knob_tick_marks = TickMarkGroup.min_max_and_center(Tier.TWO, Tier.THREE)

        self.output_text = OUTPUT_TEXT_INITIAL

    def title(self) -> str:
        return WINDOW_TITLE

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def handle_event(self, message: Message):
        """Apply one UI message and regenerate the output text."""
        if isinstance(message, ButtonClicked):
            self.output_text = STATUS_FORMATS['button'].format(id=message.button_id)
        elif isinstance(message, SliderChanged):
            self.slider_value = message.value
            self.output_text = STATUS_FORMATS['slider'].format(value=message.value)
        elif isinstance(message, HSliderInt):
            # Store the snapped normal so the slider steps
            self.h_slider_param.update(self.int_range.snapped(message.normal))
            self.output_text = self._status(WidgetId.H_SLIDER, message.normal)
        elif isinstance(message, VSliderDB):
            self.v_slider_param.update(message.normal)
            self.output_text = self._status(WidgetId.V_SLIDER, message.normal)
        elif isinstance(message, KnobFreq):
            self.knob_param.update(message.normal)
            self.output_text = self._status(WidgetId.KNOB, message.normal)
        elif isinstance(message, XYPadFloat):
            self.xy_pad_x_param.update(message.normal_x)
            self.xy_pad_y_param.update(message.normal_y)
            self.output_text = self._xy_status(message.normal_x, message.normal_y)
        elif isinstance(message, ParamReset):
            self._reset(message.widget_id)
        else:
            raise TypeError(f"Unhandled panel message: {message!r}")

        logger.debug(self.output_text, component="PANEL",
                     details=type(message).__name__)

    def _reset(self, widget_id: WidgetId):
        if widget_id == WidgetId.XY_PAD:
            self.xy_pad_x_param.reset()
            self.xy_pad_y_param.reset()
            self.output_text = self._xy_status(self.xy_pad_x_param.value,
                                               self.xy_pad_y_param.value)
            return
        param = self._param_for(widget_id)
        param.reset()
        self.output_text = self._status(widget_id, param.value)

    def _param_for(self, widget_id: WidgetId):
        if widget_id == WidgetId.H_SLIDER:
            return self.h_slider_param
        if widget_id == WidgetId.V_SLIDER:
            return self.v_slider_param
        if widget_id == WidgetId.KNOB:
            return self.knob_param
        raise ValueError(f"{widget_id} has no single parameter")

    def _range_for(self, widget_id: WidgetId):
        return {
            WidgetId.H_SLIDER: self.int_range,
            WidgetId.V_SLIDER: self.db_range,
            WidgetId.KNOB: self.freq_range,
            WidgetId.XY_PAD: self.float_range,
        }[widget_id]

    def _status(self, widget_id: WidgetId, normal: float) -> str:
        value = self._range_for(widget_id).unmap_to_value(normal)
        return STATUS_FORMATS[widget_id.value].format(value=value)

    def _xy_status(self, normal_x: float, normal_y: float) -> str:
        x = self.float_range.unmap_to_value(normal_x)
        y = self.float_range.unmap_to_value(normal_y)
        return STATUS_FORMATS['xy_pad'].format(x=x, y=y)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def value(self, widget_id: WidgetId):
        """Current real value. The XY pad returns an (x, y) tuple."""
        rng = self._range_for(widget_id)
        if widget_id == WidgetId.XY_PAD:
            return (rng.unmap_to_value(self.xy_pad_x_param.value),
                    rng.unmap_to_value(self.xy_pad_y_param.value))
        return rng.unmap_to_value(self._param_for(widget_id).value)

    def value_text(self, widget_id: WidgetId) -> str:
        """Current value formatted with its unit, for value popups."""
        cfg = self._params[widget_id.value]
        value = self.value(widget_id)
        if widget_id == WidgetId.XY_PAD:
            return ", ".join(format_value(v, cfg) for v in value)
        return format_value(value, cfg)

    def render(self) -> PanelView:
        """Describe the current widget tree. No side effects."""
        widgets = (
            WidgetView('slider', SliderChanged, values=(self.slider_value,),
                       step=SLIDER_STEP),
            WidgetView('button', ButtonClicked, label=BUTTON_LABEL,
                       payload=(self.button_id,)),
            WidgetView('h_slider', HSliderInt,
                       values=(self.h_slider_param.value,),
                       defaults=(self.h_slider_param.default,),
                       widget_id=WidgetId.H_SLIDER,
                       tick_marks=self.center_tick_marks,
                       label=self._params['h_slider'].get('label', '')),
            WidgetView('v_slider', VSliderDB,
                       values=(self.v_slider_param.value,),
                       defaults=(self.v_slider_param.default,),
                       widget_id=WidgetId.V_SLIDER,
                       tick_marks=self.center_tick_marks,
                       label=self._params['v_slider'].get('label', '')),
            WidgetView('knob', KnobFreq,
                       values=(self.knob_param.value,),
                       defaults=(self.knob_param.default,),
                       widget_id=WidgetId.KNOB,
                       tick_marks=self.knob_tick_marks,
                       label=self._params['knob'].get('label', '')),
            WidgetView('xy_pad', XYPadFloat,
                       values=(self.xy_pad_x_param.value, self.xy_pad_y_param.value),
                       defaults=(self.xy_pad_x_param.default, self.xy_pad_y_param.default),
                       widget_id=WidgetId.XY_PAD,
                       label=self._params['xy_pad'].get('label', '')),
        )
        return PanelView(self.title(), widgets, self.output_text, dict(self._sizes))
