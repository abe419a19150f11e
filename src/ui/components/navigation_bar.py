"""
Navigation Bar Component

Notes:
- One checkable button per page, ordered by page order.
- Clicking a button emits page_selected(index); the owner routes it to the
  NavigationController, which is the only place the active page changes.
- Active page indicated by an accent bar painted on the button's left edge.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QButtonGroup, QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from src.ui.controllers.navigation_controller import sort_pages
from src.ui.theme import ThemeBase, current_theme


class NavigationButton(QPushButton):
    """Checkable navigation button with an accent indicator."""

    INDICATOR_WIDTH = 5

    def __init__(self, label: str, index: int, icon=None, parent=None):
        super().__init__(label, parent)
        self.index = index
        self.setCheckable(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(label)
        self.setFixedHeight(40)
        self.setMinimumWidth(90)
        self.setMaximumWidth(135)
        if icon is not None:
            self.setIcon(icon)
            self.setIconSize(QSize(18, 18))
        self._indicator_color = QColor("#00a984")

    def set_indicator_color(self, color: QColor):
        self._indicator_color = QColor(color)
        self.update()

    def paintEvent(self, event):
        """Paint the active indicator bar on the left side"""
        super().paintEvent(event)
        if self.isChecked():
            painter = QPainter(self)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(self._indicator_color)
            painter.drawRect(0, 0, self.INDICATOR_WIDTH, self.height())
            painter.end()


class NavigationBar(QFrame):
    page_selected = Signal(int)

    BAR_HEIGHT = 80

    def __init__(self, logo_text: str = "Fraunhofer", sub_logo_text: str = "IGCV", parent=None):
        super().__init__(parent)
        self.setObjectName("navigation_bar")
        self.setFixedHeight(self.BAR_HEIGHT)
        self._active_index = -1
        self.buttons: List[NavigationButton] = []
        self._theme: Optional[ThemeBase] = None

        self._setup_ui(logo_text, sub_logo_text)
        self.apply_theme(current_theme())

    def _setup_ui(self, logo_text: str, sub_logo_text: str):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 20, 20, 20)
        layout.setSpacing(1)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)

        self._buttons_layout = QHBoxLayout()
        self._buttons_layout.setSpacing(1)
        layout.addLayout(self._buttons_layout)
        layout.addStretch()

        logo_box = QVBoxLayout()
        logo_box.setSpacing(0)
        self.lbl_logo = QLabel(logo_text, self)
        self.lbl_logo.setObjectName("nav_logo")
        self.lbl_sub_logo = QLabel(sub_logo_text, self)
        self.lbl_sub_logo.setObjectName("nav_sub_logo")
        logo_box.addWidget(self.lbl_logo)
        logo_box.addWidget(self.lbl_sub_logo)
        layout.addLayout(logo_box)

    @property
    def active_index(self) -> int:
        return self._active_index

    def set_pages(self, pages: Iterable[Any]):
        """Rebuild one button per page, sorted by page order."""
        for btn in self.buttons:
            self.button_group.removeButton(btn)
            self._buttons_layout.removeWidget(btn)
            btn.deleteLater()
        self.buttons = []

        for i, page in enumerate(sort_pages(pages)):
            btn = NavigationButton(page.navigation_name, i, getattr(page, "icon", None), self)
            btn.clicked.connect(lambda checked=False, n=i: self._on_nav_clicked(n))
            self.button_group.addButton(btn)
            self.buttons.append(btn)
            self._buttons_layout.addWidget(btn)

        if self._theme is not None:
            self._style_buttons(self._theme)
        self.set_active_page(self._active_index)

    def set_active_page(self, index: int):
        self._active_index = index
        if 0 <= index < len(self.buttons):
            self.buttons[index].setChecked(True)

    def _on_nav_clicked(self, index: int):
        self._active_index = index
        self.page_selected.emit(index)

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        """Theme-aware styling for the bar and its buttons."""
        theme = theme or current_theme()
        self._theme = theme
        c = theme.palette
        self.setStyleSheet(
            f"""
            QFrame#navigation_bar {{
                background-color: {c.get("window_surface", "#f0f0f0")};
                border: none;
            }}
            QLabel#nav_logo {{
                color: {c.get("primary", "#009c7d")};
                font-weight: 600;
            }}
            QLabel#nav_sub_logo {{
                color: {c.get("border", "#808080")};
            }}
            """
        )
        self.lbl_logo.setFont(theme.font("button_emphasis"))
        self.lbl_sub_logo.setFont(theme.font("small"))
        self._style_buttons(theme)

    def _style_buttons(self, theme: ThemeBase):
        for btn in self.buttons:
            theme.apply_secondary_button_style(btn)
            btn.set_indicator_color(theme.color("primary"))
