from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QLabel, QVBoxLayout, QWidget

from src.ui.components.themed_widgets import ButtonStyle, ThemedButton, ThemedLabel, ThemedPanel
from src.ui.pages.page_base import PageBase

# (tile caption, navigation name of the target page)
DEFAULT_TILES: Tuple[Tuple[str, str], ...] = (
    ("Moving", "Moving"),
    ("Actuating", "Actuators"),
    ("Testing", "Test"),
    ("Sensing", "Vision"),
)


def build_feature_tile(caption: str, target: str, navigate: Optional[Callable[[str], object]]) -> ThemedPanel:
    tile = ThemedPanel()
    tile.setObjectName("feature_tile")
    tile.setMinimumSize(220, 140)
    layout = QVBoxLayout(tile)
    layout.setContentsMargins(16, 16, 16, 16)
    layout.setSpacing(10)

    title = ThemedLabel(caption, ThemedLabel.SUBHEADER, tile)
    title.setAlignment(Qt.AlignmentFlag.AlignCenter)
    layout.addWidget(title)
    layout.addStretch()

    button = ThemedButton(f"Open {target}", ButtonStyle.PRIMARY, tile)
    button.setObjectName(f"tile_{target.lower()}")
    if navigate is not None:
        button.clicked.connect(lambda checked=False, name=target: navigate(name))
    layout.addWidget(button)
    return tile


class MainMenuPage(PageBase):
    """Landing page: a grid of feature tiles that jump to other pages by name."""

    COLUMNS = 2

    def __init__(self, navigate: Optional[Callable[[str], object]] = None, tiles: Sequence[Tuple[str, str]] = DEFAULT_TILES):
        super().__init__("Main Menu", "Choose your next task", "Main Menu", order=0)
        self._navigate = navigate
        self._tiles = tuple(tiles)
        self.tile_buttons = {}

    def set_navigator(self, navigate: Optional[Callable[[str], object]]) -> None:
        # Takes effect the next time content is built.
        self._navigate = navigate

    def build_content(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(50, 10, 50, 20)
        layout.setSpacing(16)

        intro = QLabel("IGCV GUI Framework Demo", page)
        intro.setObjectName("main_menu_intro")
        layout.addWidget(intro)

        grid = QGridLayout()
        grid.setSpacing(20)
        self.tile_buttons = {}
        for i, (caption, target) in enumerate(self._tiles):
            tile = build_feature_tile(caption, target, self._navigate)
            grid.addWidget(tile, i // self.COLUMNS, i % self.COLUMNS)
            self.tile_buttons[target] = tile.findChild(ThemedButton)
        layout.addLayout(grid)
        layout.addStretch()
        return page
