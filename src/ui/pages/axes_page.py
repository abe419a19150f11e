"""
Axes page: homing, jogging and absolute moves for the X/Y/Z axes.

Every action goes through the printer controller as a text command:
``Home <axis>``, ``Jog <axis> <speed>`` and ``Move <axis> <position>``.
Commands are only sent while the printer is connected; otherwise the page
shows a notice and nothing is sent.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QSlider, QVBoxLayout, QWidget

from src.ui.components.themed_widgets import ButtonStyle, ThemedButton, ThemedTextBox
from src.ui.pages.page_base import PageBase, make_placeholder_icon

logger = logging.getLogger(__name__)

AXES = ("x", "y", "z")
JOG_SPEED_RANGE = (10, 100)
DEFAULT_JOG_SPEED = 50
NOT_CONNECTED = "Printer not connected"


class AxesPage(PageBase):
    def __init__(self, printer_controller: Any = None):
        super().__init__(
            "Moving",
            "Control printer motion and positioning",
            "Moving",
            make_placeholder_icon(),
            order=1,
        )
        self._printer = printer_controller
        self.jog_speed = DEFAULT_JOG_SPEED
        self.home_buttons: Dict[str, ThemedButton] = {}
        self.jog_buttons: Dict[str, ThemedButton] = {}
        self.position_inputs: Dict[str, ThemedTextBox] = {}
        self.move_buttons: Dict[str, ThemedButton] = {}
        self.speed_slider: Optional[QSlider] = None
        self.lbl_speed: Optional[QLabel] = None
        self.lbl_feedback: Optional[QLabel] = None

    @property
    def printer_controller(self) -> Any:
        return self._printer

    def set_printer_controller(self, controller: Any) -> None:
        self._printer = controller

    # ---- commands ----

    def _send(self, command: str) -> bool:
        if self._printer is None or not self._printer.is_connected:
            logger.warning("Not sending %r: %s", command, NOT_CONNECTED)
            self._show_feedback(NOT_CONNECTED)
            return False
        self._printer.send_command(command)
        self._show_feedback(f"Sent: {command}")
        return True

    def home(self, axis: str) -> bool:
        return self._send(f"Home {axis}")

    def jog(self, axis: str, direction: int = 1) -> bool:
        speed = self.jog_speed if direction >= 0 else -self.jog_speed
        return self._send(f"Jog {axis} {speed}")

    def move(self, axis: str, position: Any) -> bool:
        try:
            value = int(str(position).strip())
        except (TypeError, ValueError):
            self._show_feedback(f"Invalid position for {axis.upper()}: {position!r}")
            return False
        return self._send(f"Move {axis} {value}")

    def set_jog_speed(self, speed: int) -> None:
        low, high = JOG_SPEED_RANGE
        self.jog_speed = max(low, min(high, int(speed)))
        if self.lbl_speed is not None:
            self.lbl_speed.setText(f"Jog Speed: {self.jog_speed} mm/s")

    def _show_feedback(self, text: str) -> None:
        if self.lbl_feedback is not None:
            self.lbl_feedback.setText(text)

    # ---- content ----

    def build_content(self) -> QWidget:
        page = QWidget()
        layout = QHBoxLayout(page)
        layout.setContentsMargins(50, 10, 50, 20)
        layout.setSpacing(20)

        layout.addWidget(self._build_axis_panel(), 3)
        layout.addWidget(self._build_jog_panel(), 2)
        return page

    def _build_axis_panel(self) -> QWidget:
        panel = self.create_panel()
        box = QVBoxLayout(panel)
        box.setContentsMargins(16, 16, 16, 16)
        box.setSpacing(12)
        box.addWidget(self.create_section_header("Axis Control", panel))

        grid = QGridLayout()
        grid.setHorizontalSpacing(10)
        for row, axis in enumerate(AXES):
            grid.addWidget(QLabel(f"{axis.upper()} Axis", panel), row, 0)
            edit = ThemedTextBox("0", panel)
            edit.setPlaceholderText("mm")
            self.position_inputs[axis] = edit
            grid.addWidget(edit, row, 1)
            move_btn = self.create_secondary_button("Move", panel)
            move_btn.clicked.connect(lambda checked=False, a=axis: self.move(a, self.position_inputs[a].text()))
            self.move_buttons[axis] = move_btn
            grid.addWidget(move_btn, row, 2)
        box.addLayout(grid)

        home_row = QHBoxLayout()
        home_all = self.create_primary_button("Home All Axes", panel)
        home_all.clicked.connect(lambda: self.home("all"))
        self.home_buttons["all"] = home_all
        home_row.addWidget(home_all)
        for axis in AXES:
            btn = self.create_secondary_button(f"Home {axis.upper()}", panel)
            btn.clicked.connect(lambda checked=False, a=axis: self.home(a))
            self.home_buttons[axis] = btn
            home_row.addWidget(btn)
        box.addLayout(home_row)

        self.lbl_feedback = QLabel("", panel)
        self.lbl_feedback.setObjectName("axes_feedback")
        box.addWidget(self.lbl_feedback)
        box.addStretch()
        return panel

    def _build_jog_panel(self) -> QWidget:
        panel = self.create_panel()
        box = QVBoxLayout(panel)
        box.setContentsMargins(16, 16, 16, 16)
        box.setSpacing(12)
        box.addWidget(self.create_section_header("Jog Controls", panel))

        # Z on the left column, XY cross in the middle
        pad = QGridLayout()
        pad.setSpacing(8)
        positions = {
            "+z": (0, 0), "+y": (0, 1),
            "-x": (1, 0), "+x": (1, 2),
            "-z": (2, 0), "-y": (2, 1),
        }
        for key, (row, col) in positions.items():
            btn = ThemedButton(key.upper(), ButtonStyle.TERTIARY, panel)
            btn.setFixedSize(60, 60)
            direction = 1 if key[0] == "+" else -1
            btn.clicked.connect(lambda checked=False, a=key[1], d=direction: self.jog(a, d))
            self.jog_buttons[key] = btn
            pad.addWidget(btn, row, col)
        box.addLayout(pad)

        self.lbl_speed = QLabel("", panel)
        box.addWidget(self.lbl_speed)
        self.speed_slider = QSlider(Qt.Orientation.Horizontal, panel)
        self.speed_slider.setRange(*JOG_SPEED_RANGE)
        self.speed_slider.setTickInterval(10)
        self.speed_slider.setTickPosition(QSlider.TickPosition.TicksBothSides)
        self.speed_slider.setValue(self.jog_speed)
        self.speed_slider.valueChanged.connect(self.set_jog_speed)
        box.addWidget(self.speed_slider)
        self.set_jog_speed(self.jog_speed)

        box.addStretch()
        return panel
