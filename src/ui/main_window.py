from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from PySide6.QtCore import QEvent, QSettings, Slot
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QVBoxLayout, QWidget

from src.core.app_config import AppConfig
from src.core.printer_controller import SamplePrinterController
from src.ui.components.navigation_bar import NavigationBar
from src.ui.components.page_container import PageContainer
from src.ui.components.status_panel import StatusPanel
from src.ui.controllers.navigation_controller import NavigationController
from src.ui.pages.axes_page import AxesPage
from src.ui.pages.controls_page import ControlsPage
from src.ui.pages.main_menu_page import MainMenuPage
from src.ui.pages.page_base import make_placeholder_icon
from src.ui.pages.sample_page import SamplePage
from src.ui.theme import ThemeBase, current_theme, get_theme_manager

logger = logging.getLogger(__name__)

APP_TITLE = "IGCV GUI Framework"
SETTINGS_ORG = "Fraunhofer IGCV"
SETTINGS_APP = "IGCVGuiFramework"


def build_default_pages(printer_controller: Any, navigate=None) -> List[Any]:
    icon = make_placeholder_icon()
    return [
        MainMenuPage(navigate),
        AxesPage(printer_controller),
        SamplePage("Actuators", "Manipulate actuators and send basic commands", "Actuators", icon, 2),
        SamplePage("Test", "Automation via Python Code", "Test", icon, 3),
        SamplePage("Vision", "Get sensor data and camera controls", "Vision", icon, 4),
        ControlsPage(order=5),
    ]


class GradientSurface(QWidget):
    """Central widget painted with the current theme's gradient."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("gradient_surface")
        self._theme: Optional[ThemeBase] = None

    def set_theme(self, theme: ThemeBase):
        self._theme = theme
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        (self._theme or current_theme()).apply_gradient_background(painter, self.rect())
        painter.end()


class MainWindow(QMainWindow):
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        printer_controller: Any = None,
        pages: Optional[Sequence[Any]] = None,
        settings: Optional[QSettings] = None,
    ):
        super().__init__()
        self.config = config or AppConfig()
        self.printer_controller = printer_controller or SamplePrinterController()
        self.settings = settings or QSettings(SETTINGS_ORG, SETTINGS_APP)

        self.setWindowTitle(APP_TITLE)
        self.resize(*self.config.window_size)

        self.theme_manager = get_theme_manager()
        if not self.theme_manager.set_theme(self.config.theme_name):
            logger.warning("Falling back to theme %r", self.theme_manager.current_theme_name)

        self.init_ui()

        self.navigation = NavigationController(self.page_container, self)
        self.nav_bar.page_selected.connect(self.navigation.select_by_index)
        self.navigation.page_selected.connect(self.nav_bar.set_active_page)
        self.navigation.page_selected.connect(self._on_page_selected)
        self.theme_manager.theme_changed.connect(self._on_theme_changed)

        if pages is None:
            pages = build_default_pages(self.printer_controller, self.navigate_to)
        self.set_pages(pages)

        if self.config.start_page and not self.navigate_to(self.config.start_page):
            logger.warning("Unknown start page: %r", self.config.start_page)

        self.load_settings()

    def init_ui(self):
        self.surface = GradientSurface(self)
        self.setCentralWidget(self.surface)

        root = QVBoxLayout(self.surface)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)

        self.status_panel = StatusPanel(self.surface)
        self.status_panel.set_printer_controller(self.printer_controller)
        body.addWidget(self.status_panel)

        self.page_container = PageContainer(self.surface)
        body.addWidget(self.page_container, 1)
        root.addLayout(body, 1)

        self.nav_bar = NavigationBar(parent=self.surface)
        root.addWidget(self.nav_bar)

        self._apply_chrome_theme(current_theme())
        self._enforce_stacking()

    # ---- navigation ----

    def set_pages(self, pages: Sequence[Any]) -> None:
        # Bar first, so the selection emitted by register() finds its button.
        self.nav_bar.set_pages(pages)
        self.navigation.register(pages)

    def navigate_to(self, navigation_name: str) -> bool:
        return self.navigation.navigate_to(navigation_name)

    @Slot(int)
    def _on_page_selected(self, index: int):
        page = self.navigation.active_page
        self.status_panel.set_current_task(page.title if page is not None else None)
        self._enforce_stacking()

    def _enforce_stacking(self):
        self.page_container.lower()
        self.status_panel.raise_()
        self.nav_bar.raise_()

    def stacking_order(self) -> List[QWidget]:
        """Chrome widgets from bottom to top."""
        chrome = (self.page_container, self.status_panel, self.nav_bar)
        return [w for w in self.surface.children() if any(w is c for c in chrome)]

    # ---- theme ----

    @Slot(str)
    def _on_theme_changed(self, _name: str):
        self._apply_chrome_theme(self.theme_manager.current_theme)

    def _apply_chrome_theme(self, theme: ThemeBase):
        self.surface.set_theme(theme)
        self.status_panel.apply_theme(theme)
        self.page_container.apply_theme(theme)
        self.nav_bar.apply_theme(theme)

    # ---- window events / settings ----

    def event(self, event):
        if event.type() == QEvent.Type.WindowActivate:
            self.page_container.refresh_header()
        return super().event(event)

    def save_settings(self):
        self.settings.setValue("app/geometry", self.saveGeometry())

    def load_settings(self):
        geo = self.settings.value("app/geometry")
        if geo:
            self.restoreGeometry(geo)

    def closeEvent(self, event):
        self.save_settings()
        event.accept()
