"""
Tests for ParameterPanel in src/model/panel.py
Message handling, status text, and the render description
"""

import pytest

from src.model.messages import (
    SliderChanged, ButtonClicked, HSliderInt, VSliderDB, KnobFreq,
    XYPadFloat, ParamReset, WidgetId,
)
from src.model.panel import ParameterPanel, PanelView
from src.model.tick_marks import Tier, TickMarkGroup


class TestInitialState:
    """Tests for the panel as constructed."""

    def test_output_text(self, panel):
        assert panel.output_text == "try anything"

    def test_title(self, panel):
        assert panel.title() == "Simple Example - Parameter Panel"

    def test_int_slider_starts_at_5(self, panel):
        assert panel.h_slider_param.value == 0.5
        assert panel.value(WidgetId.H_SLIDER) == 5

    def test_db_slider_starts_at_0db(self, panel):
        assert panel.v_slider_param.value == 0.5
        assert panel.value(WidgetId.V_SLIDER) == 0.0

    def test_knob_starts_at_1khz(self, panel):
        assert panel.value(WidgetId.KNOB) == pytest.approx(1000.0)

    def test_xy_starts_centered(self, panel):
        assert panel.value(WidgetId.XY_PAD) == (0.0, 0.0)

    def test_button_id(self, panel):
        assert panel.button_id == 128


class TestHandleEvent:
    """Tests for each message type."""

    def test_button_clicked(self, panel):
        panel.handle_event(ButtonClicked(7))
        assert panel.output_text == "Button Clicked: 7"

    def test_slider_changed(self, panel):
        panel.handle_event(SliderChanged(0.25))
        assert panel.slider_value == 0.25
        assert panel.output_text == "Slider Changed: 0.25"

    def test_slider_changed_ends_print_whole_numbers(self, panel):
        panel.handle_event(SliderChanged(1.0))
        assert panel.output_text == "Slider Changed: 1"
        panel.handle_event(SliderChanged(0.0))
        assert panel.output_text == "Slider Changed: 0"

    def test_slider_changed_step_value(self, panel):
        panel.handle_event(SliderChanged(0.525))
        assert panel.output_text == "Slider Changed: 0.525"

    def test_h_slider_snaps(self, panel):
        """Stored normal is snapped to the nearest int step."""
        panel.handle_event(HSliderInt(0.43))
        assert panel.h_slider_param.value == pytest.approx(0.4)
        assert panel.output_text == "HSliderInt: 4"

    def test_h_slider_stored_value_is_representable(self, panel):
        for normal in (0.01, 0.26, 0.55, 0.99):
            panel.handle_event(HSliderInt(normal))
            stored = panel.h_slider_param.value
            assert panel.int_range.snapped(stored) == stored

    def test_v_slider_db(self, panel):
        panel.handle_event(VSliderDB(0.75))
        assert panel.v_slider_param.value == 0.75
        assert panel.output_text == "VSliderDB: 3.000"

    def test_knob_freq(self, panel):
        panel.handle_event(KnobFreq(0.7))
        assert panel.knob_param.value == 0.7
        assert panel.output_text == "KnobFreq: 2560.00"

    def test_xy_pad_float(self, panel):
        """Both axes update together and map linearly."""
        panel.handle_event(XYPadFloat(0.25, 0.75))
        assert panel.xy_pad_x_param.value == 0.25
        assert panel.xy_pad_y_param.value == 0.75
        assert panel.output_text == "XYPadFloat: x: -0.50, y: 0.50"

    def test_output_overwritten_not_appended(self, panel):
        panel.handle_event(ButtonClicked(1))
        panel.handle_event(ButtonClicked(2))
        assert panel.output_text == "Button Clicked: 2"

    def test_only_target_param_changes(self, panel):
        before = (panel.h_slider_param.value, panel.v_slider_param.value,
                  panel.xy_pad_x_param.value, panel.xy_pad_y_param.value)
        panel.handle_event(KnobFreq(0.1))
        after = (panel.h_slider_param.value, panel.v_slider_param.value,
                 panel.xy_pad_x_param.value, panel.xy_pad_y_param.value)
        assert before == after

    def test_unknown_message_raises(self, panel):
        with pytest.raises(TypeError):
            panel.handle_event("not a message")


class TestParamReset:
    """Tests for double-click reset to default."""

    def test_reset_knob(self, panel):
        panel.handle_event(KnobFreq(0.2))
        panel.handle_event(ParamReset(WidgetId.KNOB))
        assert panel.value(WidgetId.KNOB) == pytest.approx(1000.0)
        assert panel.output_text.startswith("KnobFreq: ")

    def test_reset_h_slider(self, panel):
        panel.handle_event(HSliderInt(0.9))
        panel.handle_event(ParamReset(WidgetId.H_SLIDER))
        assert panel.output_text == "HSliderInt: 5"

    def test_reset_v_slider(self, panel):
        panel.handle_event(VSliderDB(0.1))
        panel.handle_event(ParamReset(WidgetId.V_SLIDER))
        assert panel.output_text == "VSliderDB: 0.000"

    def test_reset_xy_resets_both_axes(self, panel):
        panel.handle_event(XYPadFloat(0.1, 0.9))
        panel.handle_event(ParamReset(WidgetId.XY_PAD))
        assert panel.xy_pad_x_param.value == 0.5
        assert panel.xy_pad_y_param.value == 0.5
        assert panel.output_text == "XYPadFloat: x: 0.00, y: 0.00"


class TestRender:
    """Tests for the render description."""

    def test_returns_panel_view(self, panel):
        view = panel.render()
        assert isinstance(view, PanelView)
        assert view.title == panel.title()
        assert view.output_text == "try anything"

    def test_widget_order(self, panel):
        kinds = [w.kind for w in panel.render().widgets]
        assert kinds == ['slider', 'button', 'h_slider', 'v_slider', 'knob', 'xy_pad']

    def test_reflects_state(self, panel):
        panel.handle_event(XYPadFloat(0.2, 0.3))
        view = panel.render()
        assert view.widget('xy_pad').values == (0.2, 0.3)
        assert view.output_text == panel.output_text

    def test_pure(self, panel):
        """Rendering twice gives equal results and changes nothing."""
        first = panel.render()
        second = panel.render()
        assert first == second
        assert panel.output_text == "try anything"

    def test_tick_marks(self, panel):
        view = panel.render()
        assert view.widget('h_slider').tick_marks == TickMarkGroup.center(Tier.TWO)
        assert view.widget('v_slider').tick_marks == TickMarkGroup.center(Tier.TWO)
        assert view.widget('knob').tick_marks == \
            TickMarkGroup.min_max_and_center(Tier.TWO, Tier.THREE)
        assert view.widget('xy_pad').tick_marks is None

    def test_make_message(self, panel):
        view = panel.render()
        assert view.widget('button').make_message() == ButtonClicked(128)
        assert view.widget('knob').make_message(0.3) == KnobFreq(0.3)
        assert view.widget('xy_pad').make_message(0.1, 0.2) == XYPadFloat(0.1, 0.2)
        assert view.widget('slider').make_message(0.5) == SliderChanged(0.5)

    def test_slider_step(self, panel):
        assert panel.render().widget('slider').step == 0.025

    def test_unknown_widget_kind(self, panel):
        with pytest.raises(KeyError):
            panel.render().widget('fader')

    def test_layout_sizes(self, panel):
        sizes = panel.render().sizes
        assert sizes['panel_max_width'] == 300
        assert sizes['panel_spacing'] == 20
        assert sizes['panel_padding'] == 20
        for kind in ('h_slider', 'v_slider', 'knob', 'xy_pad'):
            assert len(sizes[kind]) == 2

    def test_custom_sizes(self):
        from src.config import SIZES
        custom = dict(SIZES, panel_max_width=420)
        assert ParameterPanel(sizes=custom).render().sizes['panel_max_width'] == 420

    def test_sizes_are_a_copy(self, panel):
        from src.config import SIZES
        panel.render().sizes['panel_spacing'] = 99
        assert SIZES['panel_spacing'] == 20
        assert panel.render().sizes['panel_spacing'] == 20


class TestValueText:
    """Tests for popup value formatting."""

    def test_knob_khz(self, panel):
        assert panel.value_text(WidgetId.KNOB) == "1.00kHz"

    def test_db(self, panel):
        panel.handle_event(VSliderDB(1.0))
        assert panel.value_text(WidgetId.V_SLIDER) == "+12.0dB"

    def test_int(self, panel):
        assert panel.value_text(WidgetId.H_SLIDER) == "5"

    def test_xy(self, panel):
        panel.handle_event(XYPadFloat(0.25, 0.75))
        assert panel.value_text(WidgetId.XY_PAD) == "-0.50, 0.50"


class TestCustomParams:
    """Panel built from a non-default config."""

    def test_custom_int_range(self):
        from src.config import PANEL_PARAMS
        params = dict(PANEL_PARAMS)
        params['h_slider'] = dict(params['h_slider'], min=0, max=4, initial=1, default=2)
        panel = ParameterPanel(params)
        assert panel.value(WidgetId.H_SLIDER) == 1
        panel.handle_event(ParamReset(WidgetId.H_SLIDER))
        assert panel.value(WidgetId.H_SLIDER) == 2
