"""
Page base class.

A page is a plain object carrying navigation metadata; its widget is built
lazily by ``build_content`` and, by default, reused across activations.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QColor, QIcon, QPixmap
from PySide6.QtWidgets import QLabel, QPushButton, QWidget

from src.ui.components.themed_widgets import ButtonStyle, ThemedButton, ThemedLabel, ThemedPanel
from src.ui.theme import current_theme

logger = logging.getLogger(__name__)


def make_placeholder_icon(color: str = "#0067ac", size: int = 64) -> QIcon:
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(color))
    return QIcon(pixmap)


class PageBase:
    # False -> a fresh widget per activation; the previous one is deleted later.
    cache_content = True

    def __init__(self, title: str, subtitle: str, navigation_name: str, icon: Optional[QIcon] = None, order: int = 0):
        self._title = str(title or "")
        self._subtitle = str(subtitle or "")
        self._navigation_name = str(navigation_name or "")
        self._icon = icon
        self._order = int(order)
        self._content: Optional[QWidget] = None
        self._active = False

    @property
    def title(self) -> str:
        return self._title

    @property
    def subtitle(self) -> str:
        return self._subtitle

    @property
    def navigation_name(self) -> str:
        return self._navigation_name

    @property
    def icon(self) -> Optional[QIcon]:
        return self._icon

    @property
    def order(self) -> int:
        return self._order

    @property
    def is_active(self) -> bool:
        return self._active

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._navigation_name!r}, order={self._order})"

    # ---- content ----

    def build_content(self) -> QWidget:
        raise NotImplementedError

    def get_content(self) -> QWidget:
        if self._content is not None and self.cache_content:
            return self._content
        previous = self._content
        self._content = self.build_content()
        if previous is not None:
            previous.deleteLater()
        return self._content

    # ---- lifecycle ----

    def on_activated(self) -> None:
        self._active = True
        logger.debug("Page %r activated", self._navigation_name)

    def on_deactivated(self) -> None:
        self._active = False
        logger.debug("Page %r deactivated", self._navigation_name)

    # ---- themed widget helpers for subclasses ----

    def create_panel(self, parent: Optional[QWidget] = None) -> ThemedPanel:
        panel = ThemedPanel(parent)
        panel.apply_theme(current_theme())
        return panel

    def create_section_header(self, text: str, parent: Optional[QWidget] = None) -> QLabel:
        label = ThemedLabel(text, ThemedLabel.SUBHEADER, parent)
        label.apply_theme(current_theme())
        return label

    def create_primary_button(self, text: str, parent: Optional[QWidget] = None) -> QPushButton:
        button = ThemedButton(text, ButtonStyle.PRIMARY, parent)
        button.apply_theme(current_theme())
        return button

    def create_secondary_button(self, text: str, parent: Optional[QWidget] = None) -> QPushButton:
        button = ThemedButton(text, ButtonStyle.SECONDARY, parent)
        button.apply_theme(current_theme())
        return button
