"""
Main Frame - The single panel window

Builds the widgets from ParameterPanel.render(), turns widget signals into
panel messages, and re-syncs every widget after each message.
"""

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QLabel,
                             QPushButton, QSlider, QShortcut, QSizePolicy)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeySequence

from src.config import PANEL_PARAMS, SLIDER_MIN, SLIDER_MAX
from src.gui.theme import (FONT_FAMILY, FONT_SIZES, accent, button_style,
                           plain_slider_style, panel_style, output_label_style)
from src.gui.log_view import LogView
from src.gui.widgets import ParamSlider, Knob, XYPad
from src.model.messages import ParamReset, WidgetId
from src.model.panel import ParameterPanel
from src.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, panel=None):
        super().__init__()

        self.panel = panel or ParameterPanel()

        self.setWindowTitle(self.panel.title())
        self.setStyleSheet(panel_style())

        self.setup_ui()
        self.setup_shortcuts()
        self.refresh()

    def setup_ui(self):
        """Create the column of controls."""
        view = self.panel.render()
        sizes = view.sizes

        self.setMinimumSize(*sizes['window_min'])
        self.resize(*sizes['window_default'])

        central = QWidget()
        self.setCentralWidget(central)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setAlignment(Qt.AlignCenter)

        content = QWidget()
        content.setMaximumWidth(sizes['panel_max_width'])
        content.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        layout = QVBoxLayout(content)
        pad = sizes['panel_padding']
        layout.setContentsMargins(pad, pad, pad, pad)
        layout.setSpacing(sizes['panel_spacing'])
        layout.setAlignment(Qt.AlignHCenter)
        outer.addWidget(content, alignment=Qt.AlignCenter)

        # Plain slider (0-1 in fixed steps)
        slider_view = view.widget('slider')
        self._slider_steps = int(round((SLIDER_MAX - SLIDER_MIN) / slider_view.step))
        self.plain_slider = QSlider(Qt.Horizontal)
        self.plain_slider.setRange(0, self._slider_steps)
        self.plain_slider.setStyleSheet(plain_slider_style())
        self.plain_slider.valueChanged.connect(self._on_plain_slider_changed)
        layout.addWidget(self.plain_slider)

        # Button
        button_view = view.widget('button')
        self.button = QPushButton(button_view.label)
        self.button.setStyleSheet(button_style())
        self.button.clicked.connect(self._on_button_clicked)
        layout.addWidget(self.button, alignment=Qt.AlignHCenter)

        # Parameter widgets
        self.h_slider = ParamSlider(Qt.Horizontal, accent(PANEL_PARAMS['h_slider']['range']))
        self.h_slider.setFixedHeight(sizes['h_slider'][1])
        self.h_slider.setMinimumWidth(sizes['h_slider'][0])
        self.h_slider.set_tick_marks(view.widget('h_slider').tick_marks)
        self.h_slider.setToolTip(PANEL_PARAMS['h_slider']['tooltip'])
        self.h_slider.normalizedValueChanged.connect(self._on_h_slider_changed)
        self.h_slider.resetRequested.connect(lambda: self._on_reset(WidgetId.H_SLIDER))
        layout.addWidget(self.h_slider)

        self.v_slider = ParamSlider(Qt.Vertical, accent(PANEL_PARAMS['v_slider']['range']))
        self.v_slider.setFixedSize(*sizes['v_slider'])
        self.v_slider.set_tick_marks(view.widget('v_slider').tick_marks)
        self.v_slider.setToolTip(PANEL_PARAMS['v_slider']['tooltip'])
        self.v_slider.normalizedValueChanged.connect(self._on_v_slider_changed)
        self.v_slider.resetRequested.connect(lambda: self._on_reset(WidgetId.V_SLIDER))
        layout.addWidget(self.v_slider, alignment=Qt.AlignHCenter)

        self.knob = Knob(accent(PANEL_PARAMS['knob']['range']))
        self.knob.setFixedSize(*sizes['knob'])
        self.knob.set_tick_marks(view.widget('knob').tick_marks)
        self.knob.setToolTip(PANEL_PARAMS['knob']['tooltip'])
        self.knob.normalizedValueChanged.connect(self._on_knob_changed)
        self.knob.resetRequested.connect(lambda: self._on_reset(WidgetId.KNOB))
        layout.addWidget(self.knob, alignment=Qt.AlignHCenter)

        self.xy_pad = XYPad(accent(PANEL_PARAMS['xy_pad']['range']))
        self.xy_pad.setFixedSize(*sizes['xy_pad'])
        self.xy_pad.setToolTip(PANEL_PARAMS['xy_pad']['tooltip'])
        self.xy_pad.xyChanged.connect(self._on_xy_pad_changed)
        self.xy_pad.resetRequested.connect(lambda: self._on_reset(WidgetId.XY_PAD))
        layout.addWidget(self.xy_pad, alignment=Qt.AlignHCenter)

        # Output text
        self.output_label = QLabel(view.output_text)
        self.output_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        self.output_label.setStyleSheet(output_label_style())
        self.output_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        layout.addWidget(self.output_label)

        # Recent log lines
        self.log_view = LogView()
        self.log_view.setFixedHeight(sizes['log_view_height'])
        self.log_view.connect_logger()
        layout.addWidget(self.log_view)

    def setup_shortcuts(self):
        """Keyboard shortcuts."""
        self.quit_shortcut = QShortcut(QKeySequence("Ctrl+Q"), self)
        self.quit_shortcut.activated.connect(self.close)

    def closeEvent(self, event):
        self.log_view.disconnect_logger()
        super().closeEvent(event)

    # -------------------------------------------------------------------------
    # Message dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, message):
        """Hand one message to the panel, then re-sync the widgets."""
        self.panel.handle_event(message)
        self.refresh()

    def refresh(self):
        """Push panel state into every widget without re-emitting."""
        view = self.panel.render()

        self.plain_slider.blockSignals(True)
        self.plain_slider.setValue(int(round(view.widget('slider').values[0] * self._slider_steps)))
        self.plain_slider.blockSignals(False)

        self.h_slider.set_normal(view.widget('h_slider').values[0])
        self.v_slider.set_normal(view.widget('v_slider').values[0])
        self.knob.set_normal(view.widget('knob').values[0])
        self.xy_pad.set_normals(*view.widget('xy_pad').values)

        self.output_label.setText(view.output_text)

    def _on_plain_slider_changed(self, index):
        value = round(SLIDER_MIN + index * (SLIDER_MAX - SLIDER_MIN) / self._slider_steps, 6)
        self.dispatch(self.panel.render().widget('slider').make_message(value))

    def _on_button_clicked(self):
        self.dispatch(self.panel.render().widget('button').make_message())

    def _on_h_slider_changed(self, normal):
        self.dispatch(self.panel.render().widget('h_slider').make_message(normal))
        self.h_slider.show_drag_value(self.panel.value_text(WidgetId.H_SLIDER))

    def _on_v_slider_changed(self, normal):
        self.dispatch(self.panel.render().widget('v_slider').make_message(normal))
        self.v_slider.show_drag_value(self.panel.value_text(WidgetId.V_SLIDER))

    def _on_knob_changed(self, normal):
        self.dispatch(self.panel.render().widget('knob').make_message(normal))
        self.knob.show_drag_value(self.panel.value_text(WidgetId.KNOB))

    def _on_xy_pad_changed(self, normal_x, normal_y):
        self.dispatch(self.panel.render().widget('xy_pad').make_message(normal_x, normal_y))
        self.xy_pad.show_drag_value(self.panel.value_text(WidgetId.XY_PAD))

    def _on_reset(self, widget_id):
        logger.gui(f"Reset {widget_id.value}")
        self.dispatch(ParamReset(widget_id))
