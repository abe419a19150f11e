from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from PySide6.QtGui import QColor, QIcon
from PySide6.QtWidgets import QWidget


@runtime_checkable
class ThemeableControl(Protocol):
    """
    Extended shape styling a widget may opt into.

    Widgets never inherit from this class (Qt metaclasses do not mix with
    Protocol); they simply expose the three properties and the theme engine
    probes for them with ``isinstance``.
    """

    corner_radius: int
    border_color: QColor
    border_width: int


@runtime_checkable
class PageModule(Protocol):
    """
    Convention for navigable pages.

    Metadata is read-only; ``get_content`` may hand back a cached widget or a
    fresh one, the container does not care.
    """

    @property
    def title(self) -> str: ...

    @property
    def subtitle(self) -> str: ...

    @property
    def navigation_name(self) -> str: ...

    @property
    def icon(self) -> Optional[QIcon]: ...

    @property
    def order(self) -> int: ...

    def get_content(self) -> QWidget: ...

    def on_activated(self) -> None: ...

    def on_deactivated(self) -> None: ...


@runtime_checkable
class PrinterController(Protocol):
    @property
    def is_connected(self) -> bool: ...

    @property
    def model_name(self) -> str: ...

    @property
    def serial_number(self) -> str: ...

    # Signal(bool); typed loosely because SignalInstance has no stable stub.
    connection_status_changed: object

    def connect(self) -> None: ...

    def disconnect(self) -> None: ...

    def send_command(self, command: str) -> None: ...
