"""
Controls page: one of each themed control, plus a theme switcher.

Switching the theme goes through the shared ThemeManager, so the whole
window restyles, not just this page.
"""
from __future__ import annotations

import logging

from PySide6.QtWidgets import QComboBox, QGridLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from src.ui.components.themed_widgets import (
    ButtonStyle,
    ProgressStyle,
    StatusLight,
    ThemedButton,
    ThemedComboBox,
    ThemedLabel,
    ThemedProgressBar,
    ThemedTextBox,
)
from src.ui.pages.page_base import PageBase
from src.ui.theme import current_theme, get_theme_manager

logger = logging.getLogger(__name__)


class ControlsPage(PageBase):
    def __init__(self, order: int = 5):
        super().__init__("UI Controls", "Demonstration of themed UI controls", "Controls", order=order)
        self.theme_combo = None
        self.buttons = {}
        self.text_box = None
        self.combo_box = None
        self.status_light = None
        self.progress_bars = {}
        self.factory_widgets = {}

    def build_content(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(50, 10, 50, 20)
        theme = current_theme()
        layout.setSpacing(theme.spacing_large)

        # Theme selection
        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel("Theme:", page))
        self.theme_combo = QComboBox(page)
        manager = get_theme_manager()
        self.theme_combo.addItems(manager.available_themes())
        self.theme_combo.setCurrentText(manager.current_theme_name)
        self.theme_combo.currentTextChanged.connect(self._on_theme_selected)
        theme_row.addWidget(self.theme_combo)
        theme_row.addStretch()
        layout.addLayout(theme_row)

        panel = self.create_panel(page)
        grid = QGridLayout(panel)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.setHorizontalSpacing(theme.spacing_medium)
        grid.setVerticalSpacing(theme.spacing_medium)

        grid.addWidget(ThemedLabel("Header", ThemedLabel.HEADER, panel), 0, 0, 1, 3)
        grid.addWidget(ThemedLabel("Buttons", ThemedLabel.SUBHEADER, panel), 1, 0, 1, 3)

        self.buttons = {}
        for col, style in enumerate(ButtonStyle):
            btn = ThemedButton(style.value.capitalize(), style, panel)
            self.buttons[style] = btn
            grid.addWidget(btn, 2, col)

        grid.addWidget(ThemedLabel("Input", ThemedLabel.SUBHEADER, panel), 3, 0, 1, 3)
        self.text_box = ThemedTextBox("", panel)
        self.text_box.setPlaceholderText("Type here")
        grid.addWidget(self.text_box, 4, 0, 1, 2)

        self.combo_box = ThemedComboBox(["Option 1", "Option 2", "Option 3"], panel)
        grid.addWidget(self.combo_box, 4, 2)

        grid.addWidget(ThemedLabel("Status", ThemedLabel.SUBHEADER, panel), 5, 0, 1, 3)
        self.status_light = StatusLight(parent=panel)
        grid.addWidget(self.status_light, 6, 0)
        toggle = ThemedButton("Toggle Status", ButtonStyle.SECONDARY, panel)
        toggle.clicked.connect(lambda: self.status_light.set_active(not self.status_light.active))
        grid.addWidget(toggle, 6, 1)

        layout.addWidget(panel)
        layout.addWidget(self._build_progress_panel(page))
        layout.addWidget(self._build_factory_panel(page))
        layout.addStretch()
        return page

    def _build_progress_panel(self, parent: QWidget) -> QWidget:
        panel = self.create_panel(parent)
        grid = QGridLayout(panel)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.addWidget(ThemedLabel("Progress", ThemedLabel.SUBHEADER, panel), 0, 0, 1, 2)

        self.progress_bars = {}
        for row, style in enumerate(ProgressStyle, start=1):
            bar = ThemedProgressBar(style, panel)
            bar.setValue(15 * row)
            self.progress_bars[style] = bar
            grid.addWidget(QLabel(style.value.capitalize(), panel), row, 0)
            grid.addWidget(bar, row, 1)
        self.progress_bars[ProgressStyle.PRIMARY].setTextVisible(True)

        advance = ThemedButton("Advance", ButtonStyle.SECONDARY, panel)
        advance.clicked.connect(lambda: self.advance_progress())
        grid.addWidget(advance, len(ProgressStyle) + 1, 1)
        return panel

    def _build_factory_panel(self, parent: QWidget) -> QWidget:
        # Widgets built by the theme itself rather than the Themed* classes.
        theme = current_theme()
        panel = theme.create_panel(parent)
        row = QHBoxLayout(panel)
        row.setContentsMargins(16, 16, 16, 16)
        row.setSpacing(theme.spacing_small)
        self.factory_widgets = {
            "subheader": theme.create_subheader_label("Factory", panel),
            "primary": theme.create_primary_button("Primary", panel),
            "secondary": theme.create_secondary_button("Secondary", panel),
            "text_box": theme.create_text_box(panel),
            "combo_box": theme.create_combo_box(["A", "B"], panel),
        }
        for widget in self.factory_widgets.values():
            row.addWidget(widget)
        return panel

    def advance_progress(self, step: int = 10):
        for bar in self.progress_bars.values():
            value = bar.value() + step
            bar.setValue(bar.minimum() if value > bar.maximum() else value)

    def _on_theme_selected(self, name: str):
        if not get_theme_manager().set_theme(name):
            logger.warning("Theme %r could not be applied", name)
