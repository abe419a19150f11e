from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QLabel, QMessageBox, QVBoxLayout, QWidget

from src.ui.pages.page_base import PageBase


class SamplePage(PageBase):
    """Placeholder page for features that are not implemented yet."""

    def __init__(self, title: str, subtitle: str, navigation_name: str, icon: Optional[QIcon] = None, order: int = 0):
        super().__init__(title, subtitle, navigation_name, icon, order)
        self.demo_button = None

    def build_content(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(50, 10, 50, 20)
        layout.setSpacing(16)

        info = QLabel(f"This is the {self.title} page.\nImplementation coming soon.", page)
        info.setObjectName("sample_info")
        layout.addWidget(info)

        panel = self.create_panel(page)
        panel.setFixedSize(500, 300)
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(20, 20, 20, 20)
        panel_layout.addWidget(self.create_section_header("Under Development", panel))
        panel_layout.addStretch()
        self.demo_button = self.create_primary_button("Demo Button", panel)
        self.demo_button.clicked.connect(lambda: self.show_demo_message(page))
        panel_layout.addWidget(self.demo_button)
        layout.addWidget(panel)
        layout.addStretch()
        return page

    def demo_message(self) -> str:
        return (
            f"This is a demo of the {self.title} page functionality.\n"
            "Actual implementation will be added in a future update."
        )

    def show_demo_message(self, parent: Optional[QWidget] = None) -> None:
        QMessageBox.information(parent, "Demo", self.demo_message())
