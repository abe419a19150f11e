"""
Themed Widgets

Notes:
- ThemedButton, ThemedPanel, ThemedTextBox, ThemedComboBox and ThemedProgressBar
  expose corner_radius, border_color and border_width, so the theme engine
  treats them as ThemeableControl and they paint their own rounded shape.
- Each widget knows its role and restyles itself through ``apply_theme``.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPalette, QPen, QPolygonF
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QStyle,
    QStyleOptionComboBox,
    QStylePainter,
    QWidget,
)

from src.ui.theme import ThemeBase, current_theme


class ButtonStyle(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class _ShapeMixin:
    """Shared storage for the ThemeableControl properties."""

    def _init_shape(self, corner_radius: int = 3, border_width: int = 1):
        self._corner_radius = corner_radius
        self._border_color = QColor("#808080")
        self._border_width = border_width

    @property
    def corner_radius(self) -> int:
        return self._corner_radius

    @corner_radius.setter
    def corner_radius(self, value: int):
        value = max(0, int(value))
        if value != self._corner_radius:
            self._corner_radius = value
            self.update()

    @property
    def border_color(self) -> QColor:
        return QColor(self._border_color)

    @border_color.setter
    def border_color(self, value):
        value = QColor(value)
        if value != self._border_color:
            self._border_color = value
            self.update()

    @property
    def border_width(self) -> int:
        return self._border_width

    @border_width.setter
    def border_width(self, value: int):
        value = max(0, int(value))
        if value != self._border_width:
            self._border_width = value
            self.update()

    def _paint_shape(self, painter: QPainter, fill: QColor):
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        if self._border_width > 0:
            painter.setPen(QPen(self._border_color, self._border_width))
        else:
            painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(fill)
        inset = self._border_width / 2.0
        rect = QRectF(self.rect()).adjusted(inset, inset, -inset, -inset)
        painter.drawRoundedRect(rect, self._corner_radius, self._corner_radius)


class ThemedButton(_ShapeMixin, QPushButton):
    """Rounded push button styled by role (primary / secondary / tertiary)."""

    def __init__(self, text: str = "", button_style: ButtonStyle = ButtonStyle.PRIMARY, parent=None):
        super().__init__(text, parent)
        self._init_shape()
        self._button_style = button_style
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(36)

    @property
    def button_style(self) -> ButtonStyle:
        return self._button_style

    @button_style.setter
    def button_style(self, value: ButtonStyle):
        if value != self._button_style:
            self._button_style = value
            self.apply_theme()

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        theme = theme or current_theme()
        if self._button_style is ButtonStyle.PRIMARY:
            theme.apply_primary_button_style(self)
        elif self._button_style is ButtonStyle.SECONDARY:
            theme.apply_secondary_button_style(self)
        else:
            theme.apply_tertiary_button_style(self)

    def paintEvent(self, event):
        palette = self.palette()
        fill = QColor(palette.color(QPalette.ColorRole.Button))
        if not self.isEnabled():
            fill.setAlpha(fill.alpha() // 2)
        elif self.isDown():
            fill = fill.darker(115)
        elif self.underMouse():
            fill = fill.lighter(112)

        painter = QPainter(self)
        self._paint_shape(painter, fill)
        painter.setPen(palette.color(QPalette.ColorRole.ButtonText))
        painter.setFont(self.font())
        painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()


class ThemedPanel(_ShapeMixin, QFrame):
    """Rounded surface for grouping page content."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_shape()

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        (theme or current_theme()).apply_panel_style(self)

    def paintEvent(self, event):
        painter = QPainter(self)
        self._paint_shape(painter, self.palette().color(QPalette.ColorRole.Window))
        painter.end()


class ThemedTextBox(_ShapeMixin, QLineEdit):
    """Line edit with a painted rounded border instead of the native frame."""

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self._init_shape()
        self.setFrame(False)
        self.setTextMargins(6, 2, 6, 2)
        self.setMinimumHeight(30)

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        (theme or current_theme()).apply_text_box_style(self)

    def paintEvent(self, event):
        painter = QPainter(self)
        self._paint_shape(painter, self.palette().color(QPalette.ColorRole.Base))
        painter.end()
        super().paintEvent(event)


class ThemedLabel(QLabel):
    """Header or subheader label; no shape capability."""

    HEADER = "header"
    SUBHEADER = "subheader"

    def __init__(self, text: str = "", role: str = SUBHEADER, parent=None):
        super().__init__(text, parent)
        self.role = role

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        theme = theme or current_theme()
        if self.role == self.HEADER:
            theme.apply_header_label_style(self)
        else:
            theme.apply_subheader_label_style(self)


class StatusLight(QWidget):
    """Round indicator painted in the theme's success or error color."""

    def __init__(self, diameter: int = 30, parent=None):
        super().__init__(parent)
        self._active = False
        self._on_color = QColor("#32cd32")
        self._off_color = QColor("#ff0000")
        self.setFixedSize(diameter, diameter)

    @property
    def active(self) -> bool:
        return self._active

    def set_active(self, active: bool):
        active = bool(active)
        if active != self._active:
            self._active = active
            self.update()

    def current_color(self) -> QColor:
        return QColor(self._on_color if self._active else self._off_color)

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        theme = theme or current_theme()
        self._on_color = theme.color("success")
        self._off_color = theme.color("error")
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(self.current_color())
        painter.setPen(QPen(QColor("#808080"), 1))
        painter.drawEllipse(self.rect().adjusted(1, 1, -1, -1))
        painter.end()


class ThemedComboBox(_ShapeMixin, QComboBox):
    """Drop-down list with a painted rounded border and arrow."""

    ARROW_SIZE = 8

    def __init__(self, items=(), parent=None):
        super().__init__(parent)
        self._init_shape()
        self.setFrame(False)
        self.setMinimumHeight(30)
        self.addItems([str(item) for item in items])

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        (theme or current_theme()).apply_combo_box_style(self)

    def paintEvent(self, event):
        palette = self.palette()
        painter = QStylePainter(self)
        self._paint_shape(painter, palette.color(QPalette.ColorRole.Base))

        opt = QStyleOptionComboBox()
        self.initStyleOption(opt)
        opt.frame = False
        painter.setPen(palette.color(QPalette.ColorRole.Text))
        painter.drawControl(QStyle.ControlElement.CE_ComboBoxLabel, opt)

        # Down arrow, right-aligned
        size = self.ARROW_SIZE
        right = self.width() - 10 - self._border_width
        mid = self.height() / 2.0
        arrow = QPolygonF([
            QPointF(right - size, mid - size / 4.0),
            QPointF(right, mid - size / 4.0),
            QPointF(right - size / 2.0, mid + size / 4.0),
        ])
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(palette.color(QPalette.ColorRole.Text))
        painter.drawPolygon(arrow)
        painter.end()


class ProgressStyle(Enum):
    """Chunk color, named by palette role."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ThemedProgressBar(_ShapeMixin, QProgressBar):
    """Rounded progress bar; percentage text is off by default."""

    def __init__(self, progress_style: ProgressStyle = ProgressStyle.PRIMARY, parent=None):
        super().__init__(parent)
        self._init_shape()
        self._progress_style = progress_style
        self.setRange(0, 100)
        self.setValue(0)
        self.setTextVisible(False)
        self.setMinimumHeight(20)

    @property
    def progress_style(self) -> ProgressStyle:
        return self._progress_style

    @progress_style.setter
    def progress_style(self, value: ProgressStyle):
        if value != self._progress_style:
            self._progress_style = value
            self.apply_theme()

    def progress_color(self) -> QColor:
        return QColor(self.palette().color(QPalette.ColorRole.Highlight))

    def fraction(self) -> float:
        span = self.maximum() - self.minimum()
        if span <= 0:
            return 0.0
        return max(0.0, min(1.0, (self.value() - self.minimum()) / span))

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        (theme or current_theme()).apply_progress_bar_style(self, self._progress_style.value)

    def paintEvent(self, event):
        palette = self.palette()
        painter = QPainter(self)
        self._paint_shape(painter, palette.color(QPalette.ColorRole.Base))

        inset = self._border_width
        track = QRectF(self.rect()).adjusted(inset, inset, -inset, -inset)
        width = track.width() * self.fraction()
        if width > 0:
            chunk = QRectF(track.left(), track.top(), width, track.height())
            radius = max(0, self._corner_radius - inset)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(palette.color(QPalette.ColorRole.Highlight))
            painter.drawRoundedRect(chunk, radius, radius)

        if self.isTextVisible():
            painter.setPen(palette.color(QPalette.ColorRole.Text))
            painter.setFont(self.font())
            painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, f"{round(self.fraction() * 100)}%")
        painter.end()
