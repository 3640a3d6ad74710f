"""
Parameter Widgets
Atomic components with no business logic - just behavior

Every widget works in normalized 0-1 values. What a position means is up to
the panel's ranges; widgets only report movement and draw what they're told.
"""

import math

from PyQt5.QtWidgets import QLabel, QApplication, QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal, QPoint, QPointF, QRectF
from PyQt5.QtGui import QFont, QPainter, QColor, QPen

from .theme import COLORS, MONO_FONT, FONT_SIZES, DRAG_SENSITIVITY, TICK_COLORS, TICK_LENGTHS


class ValuePopup(QLabel):
    """
    Floating popup that displays a value near a widget handle.
    Shows during drag, hides on release.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.setStyleSheet(f"""
            QLabel {{
                background-color: {COLORS['background_highlight']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border_light']};
                border-radius: 3px;
                padding: 2px 5px;
            }}
        """)
        self.setAlignment(Qt.AlignCenter)
        self.hide()
        self.setWindowFlags(Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)

    def show_value(self, text, global_pos):
        """Show popup with text at position."""
        self.setText(text)
        self.adjustSize()
        # Position to the right of the handle
        self.move(global_pos.x() + 15, global_pos.y() - self.height() // 2)
        self.show()
        self.raise_()

    def hide_value(self):
        """Hide the popup."""
        self.hide()


def _fine_control():
    return bool(QApplication.keyboardModifiers() & Qt.ShiftModifier)


class _DragPopupMixin:
    """Shared popup handling for the drag widgets."""

    _popup = None
    dragging = False

    def _handle_global_pos(self):
        return self.mapToGlobal(QPoint(self.width(), self.height() // 2))

    def show_drag_value(self, text):
        """Display a value in popup during drag. Called by handler.

        The handler maps the value through its range and passes the text in,
        so the widget never needs to know units.
        """
        if not self.dragging:
            return
        if self._popup is None:
            self._popup = ValuePopup()
        self._popup.show_value(text, self._handle_global_pos())

    def _hide_popup(self):
        if self._popup:
            self._popup.hide_value()


class ParamSlider(_DragPopupMixin, QWidget):
    """
    Horizontal or vertical parameter slider with click+drag anywhere behavior.
    Drag up/right = increase, drag down/left = decrease.
    Hold Shift for fine control. Double-click requests a reset.

    Signals:
        normalizedValueChanged(float): new 0-1 position from the user
        resetRequested(): double-click
    """

    normalizedValueChanged = pyqtSignal(float)
    resetRequested = pyqtSignal()

    GROOVE_WIDTH = 6
    HANDLE_SIZE = 12

    def __init__(self, orientation=Qt.Horizontal, accent_color=None, parent=None):
        super().__init__(parent)
        self.orientation = orientation
        self._value = 0.5
        self._tick_marks = None
        self._accent = accent_color or COLORS['slider_handle']

        self.dragging = False
        self.drag_start_pos = 0
        self.drag_start_value = 0.0

        if orientation == Qt.Horizontal:
            self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        else:
            self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)
        self.setCursor(Qt.PointingHandCursor)

    def value(self):
        """Current normalized value."""
        return self._value

    def set_normal(self, value):
        """Set position programmatically. Does not emit."""
        value = max(0.0, min(1.0, value))
        if value != self._value:
            self._value = value
            self.update()

    def set_tick_marks(self, tick_marks):
        self._tick_marks = tick_marks
        self.update()

    def _track_length(self):
        margin = self.HANDLE_SIZE // 2
        if self.orientation == Qt.Horizontal:
            return max(1, self.width() - 2 * margin)
        return max(1, self.height() - 2 * margin)

    def _value_to_pos(self, value):
        """Pixel offset along the track for a normalized value."""
        margin = self.HANDLE_SIZE // 2
        if self.orientation == Qt.Horizontal:
            return margin + value * self._track_length()
        # Vertical: 0 at bottom
        return margin + (1.0 - value) * self._track_length()

    def _event_axis(self, event):
        pos = event.globalPos()
        # Up is increase for vertical, so flip y
        return pos.x() if self.orientation == Qt.Horizontal else -pos.y()

    def _handle_global_pos(self):
        pos = self._value_to_pos(self._value)
        if self.orientation == Qt.Horizontal:
            local = QPoint(int(pos), 0)
        else:
            local = QPoint(self.width(), int(pos))
        return self.mapToGlobal(local)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        horizontal = self.orientation == Qt.Horizontal
        w, h = self.width(), self.height()
        margin = self.HANDLE_SIZE // 2
        groove = self.GROOVE_WIDTH

        # Groove
        if horizontal:
            groove_rect = QRectF(margin, (h - groove) / 2, self._track_length(), groove)
        else:
            groove_rect = QRectF((w - groove) / 2, margin, groove, self._track_length())
        painter.setPen(QPen(QColor(COLORS['slider_groove_border']), 1))
        painter.setBrush(QColor(COLORS['slider_groove']))
        painter.drawRoundedRect(groove_rect, groove / 2, groove / 2)

        # Tick marks either side of the groove
        if self._tick_marks:
            for mark in self._tick_marks:
                painter.setPen(QPen(QColor(TICK_COLORS[mark.tier]), 1))
                length = TICK_LENGTHS[mark.tier]
                p = self._value_to_pos(mark.position)
                if horizontal:
                    top = groove_rect.top() - 2
                    bottom = groove_rect.bottom() + 2
                    painter.drawLine(QPointF(p, top - length), QPointF(p, top))
                    painter.drawLine(QPointF(p, bottom), QPointF(p, bottom + length))
                else:
                    left = groove_rect.left() - 2
                    right = groove_rect.right() + 2
                    painter.drawLine(QPointF(left - length, p), QPointF(left, p))
                    painter.drawLine(QPointF(right, p), QPointF(right + length, p))

        # Handle
        p = self._value_to_pos(self._value)
        size = self.HANDLE_SIZE
        if horizontal:
            handle = QRectF(p - size / 2, (h - size) / 2, size, size)
        else:
            handle = QRectF((w - size) / 2, p - size / 2, size, size)
        painter.setPen(QPen(QColor(COLORS['slider_handle_border']), 1))
        painter.setBrush(QColor(self._accent))
        painter.drawEllipse(handle)

    def mousePressEvent(self, event):
        """Start drag from current value."""
        if not self.isEnabled():
            return
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self.drag_start_pos = self._event_axis(event)
            self.drag_start_value = self._value

    def mouseMoveEvent(self, event):
        """Drag along the slider axis. Shift = fine control."""
        if not self.isEnabled() or not self.dragging:
            return
        # Length-ratio sensitivity: normal drags the full length for the full
        # range, fine needs three lengths
        if _fine_control():
            travel = self._track_length() * DRAG_SENSITIVITY['slider_fine']
        else:
            travel = self._track_length() * DRAG_SENSITIVITY['slider_normal']

        delta = self._event_axis(event) - self.drag_start_pos
        new_value = self.drag_start_value + delta / travel
        new_value = max(0.0, min(1.0, new_value))

        if new_value != self._value:
            self._value = new_value
            self.update()
            self.normalizedValueChanged.emit(new_value)

    def mouseReleaseEvent(self, event):
        """End drag."""
        if event.button() == Qt.LeftButton:
            self.dragging = False
            self._hide_popup()

    def mouseDoubleClickEvent(self, event):
        """Ask for a reset to default."""
        self.resetRequested.emit()


class Knob(_DragPopupMixin, QWidget):
    """
    Rotary knob. Drag up/down to change value, Shift for fine control.
    Double-click requests a reset.

    Sweep runs from 7 o'clock (0.0) to 5 o'clock (1.0), 270 degrees.
    """

    normalizedValueChanged = pyqtSignal(float)
    resetRequested = pyqtSignal()

    START_ANGLE = 225  # degrees, 7 o'clock
    SWEEP = 270

    def __init__(self, accent_color=None, parent=None):
        super().__init__(parent)
        self._value = 0.5
        self._tick_marks = None
        self._accent = accent_color or COLORS['knob_pointer']
        self.dragging = False
        self._drag_start_y = 0
        self._drag_start_value = 0.0

        self.setCursor(Qt.PointingHandCursor)

    def value(self):
        return self._value

    def set_normal(self, value):
        """Set position programmatically. Does not emit."""
        value = max(0.0, min(1.0, value))
        if value != self._value:
            self._value = value
            self.update()

    def set_tick_marks(self, tick_marks):
        self._tick_marks = tick_marks
        self.update()

    def _angle_for(self, value):
        """Qt angle (degrees, counter-clockwise from 3 o'clock)."""
        return self.START_ANGLE - self.SWEEP * value

    def paintEvent(self, event):
        """Draw body, value arc, pointer and tick marks."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        side = min(self.width(), self.height())
        outer = QRectF((self.width() - side) / 2 + 2, (self.height() - side) / 2 + 2,
                       side - 4, side - 4)
        tick_room = max(TICK_LENGTHS.values()) + 2
        body = outer.adjusted(tick_room, tick_room, -tick_room, -tick_room)
        center = body.center()
        radius = body.width() / 2

        # Tick marks outside the body
        if self._tick_marks:
            for mark in self._tick_marks:
                angle = math.radians(self._angle_for(mark.position))
                length = TICK_LENGTHS[mark.tier]
                r0 = radius + 2
                r1 = r0 + length
                painter.setPen(QPen(QColor(TICK_COLORS[mark.tier]), 1))
                painter.drawLine(
                    QPointF(center.x() + r0 * math.cos(angle), center.y() - r0 * math.sin(angle)),
                    QPointF(center.x() + r1 * math.cos(angle), center.y() - r1 * math.sin(angle)),
                )

        # Body
        painter.setPen(QPen(QColor(COLORS['knob_rim']), 1))
        painter.setBrush(QColor(COLORS['knob_body']))
        painter.drawEllipse(body)

        # Value arc (Qt uses 1/16th degrees)
        painter.setPen(QPen(QColor(self._accent), 2))
        painter.setBrush(Qt.NoBrush)
        arc_rect = body.adjusted(3, 3, -3, -3)
        painter.drawArc(arc_rect, int(self.START_ANGLE * 16),
                        -int(self.SWEEP * self._value * 16))

        # Pointer
        angle = math.radians(self._angle_for(self._value))
        tip = QPointF(center.x() + (radius - 4) * math.cos(angle),
                      center.y() - (radius - 4) * math.sin(angle))
        painter.setPen(QPen(QColor(COLORS['knob_pointer']), 2))
        painter.drawLine(center, tip)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self._drag_start_y = event.globalPos().y()
            self._drag_start_value = self._value

    def mouseMoveEvent(self, event):
        if not self.dragging:
            return
        if _fine_control():
            travel = DRAG_SENSITIVITY['knob_fine']
        else:
            travel = DRAG_SENSITIVITY['knob_normal']

        delta_y = self._drag_start_y - event.globalPos().y()
        new_value = max(0.0, min(1.0, self._drag_start_value + delta_y / travel))

        if new_value != self._value:
            self._value = new_value
            self.update()
            self.normalizedValueChanged.emit(new_value)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.dragging = False
            self._hide_popup()

    def mouseDoubleClickEvent(self, event):
        """Ask for a reset to default."""
        self.resetRequested.emit()


class XYPad(_DragPopupMixin, QWidget):
    """
    Two-axis pad. Click jumps the handle to the cursor, drag follows it.
    Shift makes the drag relative and fine. Double-click requests a reset.

    Y is 0 at the bottom, 1 at the top.

    Signals:
        xyChanged(float, float): new (x, y) normals, always together
        resetRequested(): double-click
    """

    xyChanged = pyqtSignal(float, float)
    resetRequested = pyqtSignal()

    HANDLE_SIZE = 10

    def __init__(self, accent_color=None, parent=None):
        super().__init__(parent)
        self._x = 0.5
        self._y = 0.5
        self._accent = accent_color or COLORS['pad_handle']
        self.dragging = False
        self._drag_start = QPoint()
        self._drag_start_xy = (0.5, 0.5)

        self.setCursor(Qt.CrossCursor)

    def values(self):
        return self._x, self._y

    def set_normals(self, x, y):
        """Set position programmatically. Does not emit."""
        x = max(0.0, min(1.0, x))
        y = max(0.0, min(1.0, y))
        if (x, y) != (self._x, self._y):
            self._x, self._y = x, y
            self.update()

    def _area(self):
        m = self.HANDLE_SIZE / 2
        return QRectF(m, m, max(1.0, self.width() - 2 * m), max(1.0, self.height() - 2 * m))

    def _normals_at(self, pos):
        area = self._area()
        x = (pos.x() - area.left()) / area.width()
        y = 1.0 - (pos.y() - area.top()) / area.height()
        return max(0.0, min(1.0, x)), max(0.0, min(1.0, y))

    def _handle_pos(self):
        area = self._area()
        return QPointF(area.left() + self._x * area.width(),
                       area.top() + (1.0 - self._y) * area.height())

    def _handle_global_pos(self):
        return self.mapToGlobal(self._handle_pos().toPoint())

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        area = self._area()
        painter.setPen(QPen(QColor(COLORS['border_light']), 1))
        painter.setBrush(QColor(COLORS['pad_bg']))
        painter.drawRect(area)

        # Center cross
        painter.setPen(QPen(QColor(COLORS['pad_grid']), 1, Qt.DashLine))
        painter.drawLine(QPointF(area.center().x(), area.top()),
                         QPointF(area.center().x(), area.bottom()))
        painter.drawLine(QPointF(area.left(), area.center().y()),
                         QPointF(area.right(), area.center().y()))

        # Crosshair to handle
        handle = self._handle_pos()
        painter.setPen(QPen(QColor(self._accent), 1))
        painter.drawLine(QPointF(handle.x(), area.top()), QPointF(handle.x(), area.bottom()))
        painter.drawLine(QPointF(area.left(), handle.y()), QPointF(area.right(), handle.y()))

        size = self.HANDLE_SIZE
        painter.setBrush(QColor(self._accent))
        painter.drawEllipse(QRectF(handle.x() - size / 2, handle.y() - size / 2, size, size))

    def _emit(self, x, y):
        if (x, y) != (self._x, self._y):
            self._x, self._y = x, y
            self.update()
            self.xyChanged.emit(x, y)

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        self.dragging = True
        self._drag_start = event.pos()
        self._drag_start_xy = (self._x, self._y)
        if not _fine_control():
            self._emit(*self._normals_at(event.pos()))

    def mouseMoveEvent(self, event):
        if not self.dragging:
            return
        if _fine_control():
            area = self._area()
            travel_x = area.width() * DRAG_SENSITIVITY['slider_fine']
            travel_y = area.height() * DRAG_SENSITIVITY['slider_fine']
            dx = (event.pos().x() - self._drag_start.x()) / travel_x
            dy = (self._drag_start.y() - event.pos().y()) / travel_y
            x = max(0.0, min(1.0, self._drag_start_xy[0] + dx))
            y = max(0.0, min(1.0, self._drag_start_xy[1] + dy))
            self._emit(x, y)
        else:
            self._emit(*self._normals_at(event.pos()))

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.dragging = False
            self._hide_popup()

    def mouseDoubleClickEvent(self, event):
        """Ask for a reset to default."""
        self.resetRequested.emit()
