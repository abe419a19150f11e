import os
import sys

# Ensure the repo root is importable so `import src.*` works in all tests.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Widgets are created without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from src.ui.theme import get_theme_manager, release_themes


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture(autouse=True)
def _reset_theme_state():
    yield
    manager = get_theme_manager()
    if manager.current_theme_name != manager.DEFAULT_THEME:
        manager.set_theme(manager.DEFAULT_THEME)
    release_themes()
