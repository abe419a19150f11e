"""
Theme engine.

Notes:
- Every concrete theme is a process-wide singleton, reached through
  ``ThemeClass.instance()`` or ``get_theme(name)``.
- Palettes are hex tokens (``#RRGGBB`` / ``#AARRGGBB``), the same format the
  chrome stylesheets use.
- Styling is advisory: a ``None`` widget is a no-op and nothing here raises
  during normal use.
- Widgets exposing the ``ThemeableControl`` capability paint their own shape,
  so they get corner radius and border values instead of a Qt frame.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Type

from PySide6.QtCore import QObject, QRect, Signal
from PySide6.QtGui import QBrush, QColor, QFont, QFontDatabase, QGuiApplication, QLinearGradient, QPainter, QPalette
from PySide6.QtWidgets import QComboBox, QFrame, QLabel, QLineEdit, QProgressBar, QPushButton, QWidget

from src.ui.contracts import ThemeableControl

logger = logging.getLogger(__name__)


REQUIRED_COLOR_ROLES = (
    "primary",
    "secondary",
    "accent",
    "background",
    "window_surface",
    "text_on_light",
    "text_on_dark",
    "success",
    "warning",
    "error",
    "border",
)

REQUIRED_FONT_ROLES = ("header", "subheader", "body", "button", "button_emphasis", "small")

# Dynamic property naming the styling role of factory-built widgets.
THEME_ROLE_PROPERTY = "theme_role"

FamilyProvider = Callable[[], Iterable[str]]


def _installed_families() -> List[str]:
    # QFontDatabase aborts the process when no QGuiApplication exists yet.
    if QGuiApplication.instance() is None:
        raise RuntimeError("font database unavailable before QGuiApplication")
    return list(QFontDatabase.families())


def resolve_font_family(preferred: str, fallback: str, family_provider: Optional[FamilyProvider] = None) -> str:
    """Return ``preferred`` if installed (case-insensitive), else ``fallback``. Never raises."""
    provider = family_provider or _installed_families
    try:
        wanted = str(preferred or "").casefold()
        for family in provider() or ():
            if str(family).casefold() == wanted:
                return preferred
    except Exception:
        logger.debug("Font family lookup failed, using %r", fallback, exc_info=True)
        return fallback
    logger.debug("Font family %r not installed, using %r", preferred, fallback)
    return fallback


@dataclass(frozen=True)
class FontSpec:
    family: str
    point_size: int
    weight: QFont.Weight = QFont.Weight.Normal

    def to_qfont(self) -> QFont:
        font = QFont(self.family)
        font.setPointSize(int(self.point_size))
        font.setWeight(self.weight)
        return font


@dataclass(frozen=True)
class RoleStyle:
    """Palette/font/border tokens for one widget role. ``background=None`` means transparent."""

    background: Optional[str]
    foreground: str
    font: str
    border_width: Optional[int] = None  # None -> theme default
    border_color: str = "border"


_TRANSPARENT = QColor(0, 0, 0, 0)


class ThemeBase:
    """
    Palette + typography + shape defaults, and one styling operation per role.

    Subclasses provide ``NAME``, ``PALETTE`` and the font family pair, and
    adjust ``ROLE_STYLES`` where their look differs from the defaults below.
    """

    NAME = ""
    VERSION: Tuple[int, int, int, int] = (1, 0, 0, 0)

    PREFERRED_FONT_FAMILY = "Segoe UI"
    FALLBACK_FONT_FAMILY = "Arial"

    PALETTE: Dict[str, str] = {}

    FONT_SIZES: Dict[str, Tuple[int, QFont.Weight]] = {
        "header": (24, QFont.Weight.Bold),
        "subheader": (14, QFont.Weight.Normal),
        "body": (10, QFont.Weight.Normal),
        "button": (10, QFont.Weight.Normal),
        "button_emphasis": (10, QFont.Weight.Bold),
        "small": (8, QFont.Weight.Normal),
    }

    CORNER_RADIUS = 3
    BORDER_WIDTH = 1

    SPACING_SMALL = 4
    SPACING_MEDIUM = 8
    SPACING_LARGE = 16

    GRADIENT_STOPS = ("gradient_start", "gradient_end")

    ROLE_STYLES: Dict[str, RoleStyle] = {
        "primary_button": RoleStyle("primary", "text_on_dark", "button"),
        "secondary_button": RoleStyle("secondary", "text_on_light", "button"),
        "tertiary_button": RoleStyle(None, "accent", "button", border_width=0),
        "header_label": RoleStyle(None, "text_on_light", "header"),
        "subheader_label": RoleStyle(None, "text_on_light", "subheader"),
        "panel": RoleStyle("background", "text_on_light", "body"),
        "text_box": RoleStyle("input", "text_on_light", "body"),
        "combo_box": RoleStyle("input", "text_on_light", "body"),
        # background is the track; the chunk uses the bar's own color role
        "progress_bar": RoleStyle("window_surface", "text_on_light", "small"),
    }

    def __init__(self, family_provider: Optional[FamilyProvider] = None):
        missing = [r for r in REQUIRED_COLOR_ROLES if r not in self.PALETTE]
        if missing:
            raise ValueError(f"Theme {self.NAME!r} is missing palette roles: {missing}")

        self._palette: Mapping[str, str] = MappingProxyType(dict(self.PALETTE))
        self.font_family = resolve_font_family(
            self.PREFERRED_FONT_FAMILY,
            self.FALLBACK_FONT_FAMILY,
            family_provider,
        )
        self._font_specs: Mapping[str, FontSpec] = MappingProxyType(
            {role: FontSpec(self.font_family, size, weight) for role, (size, weight) in self.FONT_SIZES.items()}
        )
        self._fonts: Dict[str, QFont] = {}
        self._released = False
        self._acquire_fonts()

    def _acquire_fonts(self) -> None:
        self._fonts = {role: spec.to_qfont() for role, spec in self._font_specs.items()}
        self._released = False

    @classmethod
    def instance(cls) -> "ThemeBase":
        """
        Lazily create the single registered instance of this theme.

        The instance stays registered for the life of the process, including
        after ``release_themes``. Calling the class directly builds a detached
        theme (used to inject a font family provider) that is never returned by
        the registry.
        """
        inst = _INSTANCES.get(cls)
        if inst is None:
            inst = cls()
            _INSTANCES[cls] = inst
            logger.debug("Theme %r created (font family %r)", inst.name, inst.font_family)
        return inst

    # ---- identity / tokens ----

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def version(self) -> Tuple[int, int, int, int]:
        return tuple(self.VERSION)

    @property
    def palette(self) -> Mapping[str, str]:
        return self._palette

    @property
    def font_specs(self) -> Mapping[str, FontSpec]:
        return self._font_specs

    @property
    def corner_radius(self) -> int:
        return max(0, int(self.CORNER_RADIUS))

    @property
    def border_width(self) -> int:
        return max(0, int(self.BORDER_WIDTH))

    @property
    def spacing_small(self) -> int:
        return self.SPACING_SMALL

    @property
    def spacing_medium(self) -> int:
        return self.SPACING_MEDIUM

    @property
    def spacing_large(self) -> int:
        return self.SPACING_LARGE

    @property
    def released(self) -> bool:
        return self._released

    def color(self, role: str) -> QColor:
        value = self._palette.get(role)
        return QColor(value) if value else QColor()

    def font(self, role: str) -> QFont:
        """Copy of the role font; unknown role -> default QFont. Re-acquires fonts after a release."""
        if role not in self._font_specs:
            return QFont()
        if self._released:
            self._acquire_fonts()
        return QFont(self._fonts[role])

    def gradient_colors(self) -> Tuple[QColor, QColor]:
        start, end = self.GRADIENT_STOPS
        return self.color(start), self.color(end)

    def release(self) -> None:
        """Drop owned font resources; the next ``font`` call acquires them again."""
        self._fonts.clear()
        self._released = True

    # ---- helpers ----

    def _role_color(self, role: Optional[str]) -> QColor:
        if role is None:
            return QColor(_TRANSPARENT)
        return self.color(role)

    def _paint(self, widget: QWidget, style: RoleStyle, bg_role: QPalette.ColorRole, fg_role: QPalette.ColorRole) -> None:
        palette = widget.palette()
        palette.setColor(bg_role, self._role_color(style.background))
        palette.setColor(fg_role, self.color(style.foreground))
        widget.setPalette(palette)
        # Themeable widgets draw their own rounded background.
        fill = style.background is not None and not isinstance(widget, ThemeableControl)
        widget.setAutoFillBackground(fill)
        widget.setFont(self.font(style.font))

    def _apply_shape(self, widget: QWidget, style: RoleStyle, corner_radius: Optional[int], with_border: bool) -> None:
        if not isinstance(widget, ThemeableControl):
            return
        widget.corner_radius = self.corner_radius if corner_radius is None else max(0, int(corner_radius))
        if with_border:
            widget.border_color = self.color(style.border_color)
            widget.border_width = self.border_width if style.border_width is None else style.border_width

    def _style_button(self, button: Optional[QPushButton], role: str, corner_radius: Optional[int]) -> None:
        if button is None:
            return
        style = self.ROLE_STYLES[role]
        button.setFlat(True)
        self._paint(button, style, QPalette.ColorRole.Button, QPalette.ColorRole.ButtonText)
        self._apply_shape(button, style, corner_radius, with_border=True)

    def _style_label(self, label: Optional[QLabel], role: str, corner_radius: Optional[int]) -> None:
        if label is None:
            return
        style = self.ROLE_STYLES[role]
        self._paint(label, style, QPalette.ColorRole.Window, QPalette.ColorRole.WindowText)
        self._apply_shape(label, style, corner_radius, with_border=False)

    # ---- role styling operations ----

    def apply_primary_button_style(self, button: Optional[QPushButton], corner_radius: Optional[int] = None) -> None:
        self._style_button(button, "primary_button", corner_radius)

    def apply_secondary_button_style(self, button: Optional[QPushButton], corner_radius: Optional[int] = None) -> None:
        self._style_button(button, "secondary_button", corner_radius)

    def apply_tertiary_button_style(self, button: Optional[QPushButton], corner_radius: Optional[int] = None) -> None:
        self._style_button(button, "tertiary_button", corner_radius)

    def apply_header_label_style(self, label: Optional[QLabel], corner_radius: Optional[int] = None) -> None:
        self._style_label(label, "header_label", corner_radius)

    def apply_subheader_label_style(self, label: Optional[QLabel], corner_radius: Optional[int] = None) -> None:
        self._style_label(label, "subheader_label", corner_radius)

    def apply_panel_style(self, panel: Optional[QWidget], corner_radius: Optional[int] = None) -> None:
        if panel is None:
            return
        style = self.ROLE_STYLES["panel"]
        self._paint(panel, style, QPalette.ColorRole.Window, QPalette.ColorRole.WindowText)
        if isinstance(panel, QFrame):
            panel.setFrameShape(QFrame.Shape.NoFrame)
        self._apply_shape(panel, style, corner_radius, with_border=True)

    def apply_text_box_style(self, text_box: Optional[QLineEdit], corner_radius: Optional[int] = None) -> None:
        if text_box is None:
            return
        style = self.ROLE_STYLES["text_box"]
        self._paint(text_box, style, QPalette.ColorRole.Base, QPalette.ColorRole.Text)
        text_box.setFrame(not isinstance(text_box, ThemeableControl))
        self._apply_shape(text_box, style, corner_radius, with_border=True)

    def apply_combo_box_style(self, combo_box: Optional[QComboBox], corner_radius: Optional[int] = None) -> None:
        if combo_box is None:
            return
        style = self.ROLE_STYLES["combo_box"]
        self._paint(combo_box, style, QPalette.ColorRole.Base, QPalette.ColorRole.Text)
        palette = combo_box.palette()
        palette.setColor(QPalette.ColorRole.Button, self._role_color(style.background))
        palette.setColor(QPalette.ColorRole.ButtonText, self.color(style.foreground))
        combo_box.setPalette(palette)
        combo_box.setFrame(False)
        self._apply_shape(combo_box, style, corner_radius, with_border=True)

    def apply_progress_bar_style(
        self,
        progress_bar: Optional[QProgressBar],
        color_role: str = "primary",
        corner_radius: Optional[int] = None,
    ) -> None:
        """Track from the role table, chunk in ``color_role`` (unknown role -> primary)."""
        if progress_bar is None:
            return
        style = self.ROLE_STYLES["progress_bar"]
        self._paint(progress_bar, style, QPalette.ColorRole.Base, QPalette.ColorRole.Text)
        chunk = self.color(color_role)
        palette = progress_bar.palette()
        palette.setColor(QPalette.ColorRole.Highlight, chunk if chunk.isValid() else self.color("primary"))
        progress_bar.setPalette(palette)
        self._apply_shape(progress_bar, style, corner_radius, with_border=True)

    def apply_gradient_background(self, painter: Optional[QPainter], rect: QRect) -> None:
        """Fill ``rect`` with the theme's two-stop gradient, top-left to bottom-right."""
        if painter is None:
            return
        start, end = self.gradient_colors()
        gradient = QLinearGradient(rect.topLeft(), rect.bottomRight())
        gradient.setColorAt(0.0, start)
        gradient.setColorAt(1.0, end)
        painter.fillRect(rect, QBrush(gradient))

    # ---- factories ----
    # Plain Qt widgets, tagged with their role so container re-theming keeps it.

    def _tag(self, widget: QWidget, role: str, size: Optional[Tuple[int, int]] = None) -> None:
        widget.setProperty(THEME_ROLE_PROPERTY, role)
        if size is not None:
            widget.setMinimumSize(*size)

    def create_primary_button(self, text: str, parent: Optional[QWidget] = None, size: Optional[Tuple[int, int]] = None) -> QPushButton:
        button = QPushButton(text, parent)
        self._tag(button, "primary_button", size)
        self.apply_primary_button_style(button)
        return button

    def create_secondary_button(self, text: str, parent: Optional[QWidget] = None, size: Optional[Tuple[int, int]] = None) -> QPushButton:
        button = QPushButton(text, parent)
        self._tag(button, "secondary_button", size)
        self.apply_secondary_button_style(button)
        return button

    def create_header_label(self, text: str, parent: Optional[QWidget] = None) -> QLabel:
        label = QLabel(text, parent)
        self._tag(label, "header_label")
        self.apply_header_label_style(label)
        return label

    def create_subheader_label(self, text: str, parent: Optional[QWidget] = None) -> QLabel:
        label = QLabel(text, parent)
        self._tag(label, "subheader_label")
        self.apply_subheader_label_style(label)
        return label

    def create_panel(self, parent: Optional[QWidget] = None, size: Optional[Tuple[int, int]] = None) -> QFrame:
        panel = QFrame(parent)
        self._tag(panel, "panel", size)
        self.apply_panel_style(panel)
        return panel

    def create_text_box(self, parent: Optional[QWidget] = None, size: Optional[Tuple[int, int]] = None) -> QLineEdit:
        text_box = QLineEdit(parent)
        self._tag(text_box, "text_box", size)
        self.apply_text_box_style(text_box)
        return text_box

    def create_combo_box(self, items: Iterable[str] = (), parent: Optional[QWidget] = None, size: Optional[Tuple[int, int]] = None) -> QComboBox:
        combo_box = QComboBox(parent)
        combo_box.addItems([str(item) for item in items])
        self._tag(combo_box, "combo_box", size)
        self.apply_combo_box_style(combo_box)
        return combo_box


# ==================== CONCRETE THEMES ====================

_THEME_CLASSES: Dict[str, Type[ThemeBase]] = {}
_INSTANCES: Dict[Type[ThemeBase], ThemeBase] = {}


def register_theme_class(theme_cls: Type[ThemeBase]) -> Type[ThemeBase]:
    """Make a theme variant reachable by name. Usable as a class decorator."""
    _THEME_CLASSES[theme_cls.NAME] = theme_cls
    return theme_cls


@register_theme_class
class FraunhoferTheme(ThemeBase):
    NAME = "Fraunhofer CI"

    PREFERRED_FONT_FAMILY = "Frutiger LT Com"
    FALLBACK_FONT_FAMILY = "Arial"

    PALETTE = {
        # Corporate colors
        "primary": "#009c7d",  # Fraunhofer green
        "secondary": "#004377",  # Steel blue
        "accent": "#f58220",  # Orange

        # Surfaces
        "background": "#ffffff",
        "window_surface": "#e6edf3",
        "panel": "#005481",
        "input": "#ffffff",

        # Text
        "text_on_light": "#3c3c3c",
        "text_on_dark": "#ffffff",

        # Status
        "success": "#b2d235",  # Lime
        "warning": "#fdb913",  # Gelb
        "error": "#bb0056",  # Rot

        # Borders
        "border": "#a6bbc8",  # Silver grey
        "overlay_border": "#64ffffff",

        # Window gradient
        "gradient_start": "#004377",
        "gradient_end": "#008598",
    }

    CORNER_RADIUS = 3
    BORDER_WIDTH = 1

    ROLE_STYLES = {
        **ThemeBase.ROLE_STYLES,
        "primary_button": RoleStyle("primary", "text_on_dark", "button_emphasis", border_width=0),
        "secondary_button": RoleStyle("window_surface", "text_on_light", "button", border_width=0),
        "tertiary_button": RoleStyle(None, "text_on_dark", "button", border_width=1, border_color="overlay_border"),
        # Headers sit on the dark gradient.
        "header_label": RoleStyle(None, "text_on_dark", "header"),
        "subheader_label": RoleStyle(None, "text_on_dark", "subheader"),
        "panel": RoleStyle("panel", "text_on_dark", "body"),
    }


@register_theme_class
class DarkTheme(ThemeBase):
    NAME = "Dark Theme"

    PREFERRED_FONT_FAMILY = "Segoe UI"
    FALLBACK_FONT_FAMILY = "Microsoft Sans Serif"

    PALETTE = {
        "primary": "#0078d7",
        "secondary": "#555555",
        "accent": "#ffb900",

        "background": "#1e1e1e",
        "window_surface": "#2d2d2d",
        "surface": "#3c3c3c",

        # Light text on dark backgrounds in both roles
        "text_on_light": "#e6e6e6",
        "text_on_dark": "#fafafa",

        "success": "#5cb85c",
        "warning": "#f0ad4e",
        "error": "#d9534f",

        "border": "#646464",

        "gradient_start": "#141414",
        "gradient_end": "#2d2d2d",
    }

    CORNER_RADIUS = 4
    BORDER_WIDTH = 1

    ROLE_STYLES = {
        **ThemeBase.ROLE_STYLES,
        "primary_button": RoleStyle("primary", "text_on_dark", "button_emphasis", border_width=0),
        "secondary_button": RoleStyle("secondary", "text_on_dark", "button", border_width=0),
        "panel": RoleStyle("surface", "text_on_light", "body"),
        "text_box": RoleStyle("window_surface", "text_on_light", "body"),
        "combo_box": RoleStyle("window_surface", "text_on_light", "body"),
    }


def available_theme_names() -> List[str]:
    return list(_THEME_CLASSES.keys())


def get_theme(name: str) -> Optional[ThemeBase]:
    """Singleton of the named theme, constructed on first lookup. Unknown name -> None."""
    theme_cls = _THEME_CLASSES.get(str(name or ""))
    if theme_cls is None:
        logger.warning("Unknown theme: %r (available: %s)", name, available_theme_names())
        return None
    return theme_cls.instance()


def release_themes() -> None:
    """Release fonts of every constructed theme. Instances stay registered, so lookups keep returning them."""
    for theme in list(_INSTANCES.values()):
        try:
            theme.release()
        except Exception:
            logger.exception("Failed to release theme %r", theme.name)


# ==================== CONTAINER WALK ====================

def _apply_role(theme: ThemeBase, widget: QWidget) -> None:
    apply = getattr(widget, "apply_theme", None)
    role = widget.property(THEME_ROLE_PROPERTY)
    tagged = getattr(theme, f"apply_{role}_style", None) if isinstance(role, str) else None
    if callable(apply):
        apply(theme)
    elif callable(tagged):
        tagged(widget)
    elif isinstance(widget, QPushButton):
        theme.apply_secondary_button_style(widget)
    elif isinstance(widget, QLabel):
        # QLabel is a QFrame; must be checked first.
        theme.apply_subheader_label_style(widget)
    elif isinstance(widget, QLineEdit):
        theme.apply_text_box_style(widget)
    elif isinstance(widget, QComboBox):
        theme.apply_combo_box_style(widget)
    elif isinstance(widget, QProgressBar):
        theme.apply_progress_bar_style(widget)
    elif type(widget) is QFrame:
        theme.apply_panel_style(widget)


def apply_theme_to_container(container: Optional[QWidget], theme: Optional[ThemeBase] = None) -> None:
    """Style every descendant of ``container`` according to its widget role."""
    if container is None:
        return
    theme = theme or get_theme_manager().current_theme
    for widget in container.findChildren(QWidget):
        try:
            _apply_role(theme, widget)
        except Exception:
            logger.exception("Failed to theme widget %s", widget.objectName() or type(widget).__name__)


# ==================== MANAGER ====================

class ThemeManager(QObject):
    """
    Tracks the active theme by name.

    Usage:
        manager = get_theme_manager()
        manager.set_theme("Dark Theme")
        manager.current_theme.apply_primary_button_style(button)
    """

    theme_changed = Signal(str)

    DEFAULT_THEME = FraunhoferTheme.NAME

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._current_name = self.DEFAULT_THEME

    @property
    def current_theme_name(self) -> str:
        return self._current_name

    @property
    def current_theme(self) -> ThemeBase:
        theme = get_theme(self._current_name)
        return theme if theme is not None else FraunhoferTheme.instance()

    def available_themes(self) -> List[str]:
        return available_theme_names()

    def set_theme(self, name: str) -> bool:
        if get_theme(name) is None:
            return False
        if name == self._current_name:
            return True
        self._current_name = name
        logger.info("Theme changed: %s", name)
        self.theme_changed.emit(name)
        return True

    def apply_to(self, container: Optional[QWidget]) -> None:
        apply_theme_to_container(container, self.current_theme)


_theme_manager_instance: Optional[ThemeManager] = None


def get_theme_manager() -> ThemeManager:
    """Get the process-wide ThemeManager."""
    global _theme_manager_instance
    if _theme_manager_instance is None:
        _theme_manager_instance = ThemeManager()
    return _theme_manager_instance


def current_theme() -> ThemeBase:
    return get_theme_manager().current_theme


@contextmanager
def theme_session() -> Iterator[ThemeManager]:
    """Scope for the running UI; theme font resources are released on exit."""
    try:
        yield get_theme_manager()
    finally:
        release_themes()
