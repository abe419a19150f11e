"""
Status Panel

Left-hand system status column: printer model, connection, current task and
system state, plus a connect/disconnect toggle.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QVBoxLayout

from src.ui.components.themed_widgets import ButtonStyle, StatusLight, ThemedButton, ThemedLabel
from src.ui.theme import ThemeBase, current_theme

logger = logging.getLogger(__name__)


class StatusPanel(QFrame):
    PANEL_WIDTH = 220

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("status_panel")
        self.setFixedWidth(self.PANEL_WIDTH)
        self.setAutoFillBackground(True)
        self._printer: Any = None
        self._setup_ui()
        self.apply_theme(current_theme())

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 30, 20, 20)
        layout.setSpacing(12)

        header_row = QHBoxLayout()
        self.lbl_header = ThemedLabel("System Status", ThemedLabel.SUBHEADER, self)
        header_row.addWidget(self.lbl_header, 1)
        self.status_light = StatusLight(parent=self)
        header_row.addWidget(self.status_light)
        layout.addLayout(header_row)

        self.underline = QFrame(self)
        self.underline.setFixedHeight(2)
        self.underline.setAutoFillBackground(True)
        layout.addWidget(self.underline)

        grid = QGridLayout()
        grid.setHorizontalSpacing(8)
        grid.setVerticalSpacing(10)
        self._captions = []
        self.lbl_model = self._add_row(grid, 0, "Printer Model:", "Not Set")
        self.lbl_connection = self._add_row(grid, 1, "Connection:", "Disconnected")
        self.lbl_task = self._add_row(grid, 2, "Current Task:", "None")
        self.lbl_system = self._add_row(grid, 3, "System:", "Idle")
        layout.addLayout(grid)

        layout.addSpacing(20)

        self.btn_connect = ThemedButton("Connect", ButtonStyle.PRIMARY, self)
        self.btn_connect.clicked.connect(self._toggle_connection)
        layout.addWidget(self.btn_connect)

        self.btn_settings = ThemedButton("Settings", ButtonStyle.SECONDARY, self)
        layout.addWidget(self.btn_settings)

        layout.addStretch()

    def _add_row(self, grid: QGridLayout, row: int, caption: str, value: str) -> QLabel:
        caption_label = QLabel(caption, self)
        value_label = QLabel(value, self)
        self._captions.append(caption_label)
        grid.addWidget(caption_label, row, 0)
        grid.addWidget(value_label, row, 1)
        return value_label

    def apply_theme(self, theme: Optional[ThemeBase] = None):
        theme = theme or current_theme()

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, theme.color("secondary"))
        self.setPalette(palette)

        self.lbl_header.apply_theme(theme)
        self.status_light.apply_theme(theme)
        self.btn_connect.apply_theme(theme)
        self.btn_settings.apply_theme(theme)

        underline = self.underline.palette()
        underline.setColor(QPalette.ColorRole.Window, theme.color("primary"))
        self.underline.setPalette(underline)

        text_on_dark = theme.color("text_on_dark")
        body = theme.font("body")
        emphasis = theme.font("button_emphasis")
        for label in [self.lbl_header] + self._captions + [self.lbl_model, self.lbl_connection, self.lbl_task, self.lbl_system]:
            label_palette = label.palette()
            label_palette.setColor(QPalette.ColorRole.WindowText, text_on_dark)
            label.setPalette(label_palette)
        for label in self._captions:
            label.setFont(body)
        for label in (self.lbl_model, self.lbl_connection, self.lbl_task, self.lbl_system):
            label.setFont(emphasis)

    # ---- printer binding ----

    @property
    def printer_controller(self) -> Any:
        return self._printer

    def set_printer_controller(self, controller: Any) -> None:
        if self._printer is not None:
            try:
                self._printer.connection_status_changed.disconnect(self._on_connection_status_changed)
            except (RuntimeError, TypeError):
                pass

        self._printer = controller
        if controller is None:
            self.lbl_model.setText("Not Set")
        else:
            controller.connection_status_changed.connect(self._on_connection_status_changed)
            self.lbl_model.setText(controller.model_name or "Unknown")
        self._update_connection_status()

    def set_current_task(self, task: Optional[str]) -> None:
        self.lbl_task.setText(task or "None")

    def set_system_status(self, status: Optional[str]) -> None:
        self.lbl_system.setText(status or "Unknown")

    def _toggle_connection(self):
        if self._printer is None:
            return
        if self._printer.is_connected:
            self._printer.disconnect()
        else:
            self._printer.connect()

    def _on_connection_status_changed(self, _connected: bool):
        self._update_connection_status()

    def _update_connection_status(self):
        connected = bool(self._printer is not None and self._printer.is_connected)
        self.lbl_connection.setText("Connected" if connected else "Disconnected")
        self.btn_connect.setText("Disconnect" if connected else "Connect")
        self.status_light.set_active(connected)
