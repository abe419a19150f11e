"""
Page Container

Notes:
- Hosts exactly one page's content below a title/subtitle header.
- Swapping pages detaches the old widget without deleting it; the page
  object decides whether to reuse or rebuild its content.
- Lifecycle hooks are driven by NavigationController, never from here.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QFrame, QVBoxLayout, QWidget

from src.ui.components.themed_widgets import ThemedLabel
from src.ui.theme import ThemeBase, apply_theme_to_container, current_theme

logger = logging.getLogger(__name__)


class PageContainer(QWidget):
    HEADER_MARGIN = 50
    UNDERLINE_SIZE = (70, 3)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("page_container")
        self._page: Any = None
        self._content: Optional[QWidget] = None
        self._theme: Optional[ThemeBase] = None
        self._setup_ui()
        self.apply_theme(current_theme())

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QWidget(self)
        header.setObjectName("page_header")
        header_layout = QVBoxLayout(header)
        header_layout.setContentsMargins(self.HEADER_MARGIN, 20, self.HEADER_MARGIN, 16)
        header_layout.setSpacing(6)

        self.title_label = ThemedLabel("", ThemedLabel.HEADER, header)
        self.title_label.setObjectName("page_title")
        header_layout.addWidget(self.title_label)

        self.subtitle_label = ThemedLabel("", ThemedLabel.SUBHEADER, header)
        self.subtitle_label.setObjectName("page_subtitle")
        header_layout.addWidget(self.subtitle_label)

        self.underline = QFrame(header)
        self.underline.setObjectName("page_underline")
        self.underline.setFixedSize(*self.UNDERLINE_SIZE)
        self.underline.setAutoFillBackground(True)
        header_layout.addWidget(self.underline)

        layout.addWidget(header)

        self.content_area = QWidget(self)
        self.content_area.setObjectName("page_content_area")
        self._content_layout = QVBoxLayout(self.content_area)
        self._content_layout.setContentsMargins(0, 0, 0, 0)
        self._content_layout.setSpacing(0)
        layout.addWidget(self.content_area, 1)

    @property
    def current_page(self) -> Any:
        return self._page

    @property
    def content_widget(self) -> Optional[QWidget]:
        return self._content

    def set_page(self, page: Any) -> None:
        """Host ``page``'s content; ``None`` clears content and header."""
        self._detach_content()
        self._page = page

        if page is None:
            self.title_label.setText("")
            self.subtitle_label.setText("")
            return

        content = page.get_content()
        if content is not None:
            content.setParent(self.content_area)
            self._content_layout.addWidget(content, 1)
            content.show()
            self._content = content
            apply_theme_to_container(content, self._theme)

        self.refresh_header()

    def _detach_content(self) -> None:
        content = self._content
        self._content = None
        if content is None:
            return
        self._content_layout.removeWidget(content)
        content.hide()
        # Ownership goes back to the page object.
        content.setParent(None)

    def refresh_header(self) -> None:
        if self._page is None:
            return
        self.title_label.setText(self._page.title)
        self.subtitle_label.setText(self._page.subtitle)

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        theme = theme or current_theme()
        self._theme = theme
        self.title_label.apply_theme(theme)
        self.subtitle_label.apply_theme(theme)
        # Header text sits on the window gradient.
        for label in (self.title_label, self.subtitle_label):
            palette = label.palette()
            palette.setColor(QPalette.ColorRole.WindowText, theme.color("text_on_dark"))
            label.setPalette(palette)

        palette = self.underline.palette()
        palette.setColor(QPalette.ColorRole.Window, theme.color("primary"))
        self.underline.setPalette(palette)

        if self._content is not None:
            apply_theme_to_container(self._content, theme)
