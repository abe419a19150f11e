"""
Sample printer controller used by the demo pages and the status panel.

No hardware I/O: connect/disconnect just flip state and commands are logged.
Qt signals live on a separate QObject so ``connect``/``disconnect`` do not
shadow QObject's own methods.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class PrinterSignals(QObject):
    """Signals for SamplePrinterController"""

    connection_status_changed = Signal(bool)
    command_sent = Signal(str)


class SamplePrinterController:
    MODEL_NAME = "Fraunhofer SBP-2000"
    SERIAL_NUMBER = "SBP2000-0001"
    HISTORY_LIMIT = 200

    def __init__(self, model_name: str = MODEL_NAME, serial_number: str = SERIAL_NUMBER):
        self.signals = PrinterSignals()
        self._model_name = model_name
        self._serial_number = serial_number
        self._connected = False
        self._history: Deque[str] = deque(maxlen=self.HISTORY_LIMIT)

    @property
    def connection_status_changed(self):
        return self.signals.connection_status_changed

    @property
    def command_sent(self):
        return self.signals.command_sent

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def _set_connected(self, connected: bool) -> None:
        self._connected = connected
        logger.info("Printer %s %s", self._serial_number, "connected" if connected else "disconnected")
        self.signals.connection_status_changed.emit(connected)

    def connect(self) -> None:
        self._set_connected(True)

    def disconnect(self) -> None:
        self._set_connected(False)

    def send_command(self, command: str) -> None:
        command = str(command or "").strip()
        if not command:
            return
        if not self._connected:
            logger.warning("Sending %r while printer is disconnected", command)
        logger.info("Sending command: %s", command)
        self._history.append(command)
        self.signals.command_sent.emit(command)
