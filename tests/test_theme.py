import pytest
from PySide6.QtCore import QRect
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPalette
from PySide6.QtWidgets import QComboBox, QFrame, QLabel, QLineEdit, QProgressBar, QPushButton, QVBoxLayout, QWidget

from src.ui.components.themed_widgets import (
    ButtonStyle,
    ProgressStyle,
    ThemedButton,
    ThemedComboBox,
    ThemedPanel,
    ThemedProgressBar,
    ThemedTextBox,
)
from src.ui.contracts import ThemeableControl
from src.ui.theme import (
    REQUIRED_COLOR_ROLES,
    REQUIRED_FONT_ROLES,
    THEME_ROLE_PROPERTY,
    DarkTheme,
    FraunhoferTheme,
    ThemeBase,
    apply_theme_to_container,
    available_theme_names,
    current_theme,
    get_theme,
    get_theme_manager,
    release_themes,
    theme_session,
)

ROLE_OPERATIONS = (
    "apply_primary_button_style",
    "apply_secondary_button_style",
    "apply_tertiary_button_style",
    "apply_header_label_style",
    "apply_subheader_label_style",
    "apply_panel_style",
    "apply_text_box_style",
    "apply_combo_box_style",
    "apply_progress_bar_style",
)


@pytest.fixture(params=[FraunhoferTheme.NAME, DarkTheme.NAME])
def theme(qapp, request):
    return get_theme(request.param)


def test_registry_lists_both_variants():
    assert available_theme_names() == [FraunhoferTheme.NAME, DarkTheme.NAME]


def test_registry_returns_same_instance(qapp):
    assert get_theme("Fraunhofer CI") is get_theme("Fraunhofer CI")
    assert get_theme("Dark Theme") is DarkTheme.instance()
    assert get_theme("Fraunhofer CI") is not get_theme("Dark Theme")


def test_unknown_theme_name_returns_none(caplog):
    with caplog.at_level("WARNING"):
        assert get_theme("Neon") is None
    assert "Unknown theme" in caplog.text


def test_theme_exposes_all_required_roles(theme):
    for role in REQUIRED_COLOR_ROLES:
        assert theme.color(role).isValid(), role
    for role in REQUIRED_FONT_ROLES:
        assert isinstance(theme.font(role), QFont)
        assert theme.font_specs[role].family == theme.font_family
    assert theme.version == (1, 0, 0, 0)


def test_fraunhofer_tokens(qapp):
    t = get_theme("Fraunhofer CI")
    assert t.color("primary") == QColor("#009c7d")
    assert t.color("secondary") == QColor("#004377")
    assert t.color("accent") == QColor("#f58220")
    assert t.corner_radius == 3
    assert t.border_width == 1
    assert t.font_family in ("Frutiger LT Com", "Arial")
    assert t.font_specs["header"].point_size == 24
    assert t.font_specs["header"].weight == QFont.Weight.Bold


def test_dark_tokens(qapp):
    t = get_theme("Dark Theme")
    assert t.color("background") == QColor("#1e1e1e")
    assert t.corner_radius == 4
    assert t.font_family in ("Segoe UI", "Microsoft Sans Serif")


def test_palette_is_read_only(theme):
    with pytest.raises(TypeError):
        theme.palette["primary"] = "#000000"


def test_unknown_color_role_is_invalid(theme):
    assert not theme.color("no_such_role").isValid()


def test_theme_missing_palette_roles_is_rejected():
    class Broken(ThemeBase):
        NAME = "Broken"
        PALETTE = {"primary": "#000000"}

    with pytest.raises(ValueError):
        Broken(family_provider=lambda: [])


@pytest.mark.parametrize("operation", ROLE_OPERATIONS)
def test_role_operations_accept_missing_widget(theme, operation):
    before = (theme.palette, dict(theme.font_specs), theme.corner_radius, theme.released)
    getattr(theme, operation)(None)
    assert (theme.palette, dict(theme.font_specs), theme.corner_radius, theme.released) == before


def test_gradient_without_painter_is_noop(theme):
    theme.apply_gradient_background(None, QRect(0, 0, 10, 10))


@pytest.mark.parametrize(
    "operation, factory",
    [
        ("apply_primary_button_style", lambda: ThemedButton("x", ButtonStyle.PRIMARY)),
        ("apply_secondary_button_style", lambda: ThemedButton("x", ButtonStyle.SECONDARY)),
        ("apply_tertiary_button_style", lambda: ThemedButton("x", ButtonStyle.TERTIARY)),
        ("apply_panel_style", ThemedPanel),
        ("apply_text_box_style", ThemedTextBox),
        ("apply_combo_box_style", ThemedComboBox),
        ("apply_progress_bar_style", ThemedProgressBar),
    ],
)
def test_themeable_widgets_get_theme_corner_radius(theme, operation, factory):
    widget = factory()
    widget.corner_radius = 17
    assert isinstance(widget, ThemeableControl)

    getattr(theme, operation)(widget)

    assert widget.corner_radius == theme.corner_radius


def test_corner_radius_override(theme):
    button = ThemedButton("x")
    theme.apply_primary_button_style(button, corner_radius=9)
    assert button.corner_radius == 9


def test_plain_widgets_are_not_themeable(qapp):
    assert not isinstance(QPushButton("x"), ThemeableControl)
    assert not isinstance(QLabel("x"), ThemeableControl)


def test_primary_button_colors(theme):
    button = QPushButton("Go")
    theme.apply_primary_button_style(button)
    palette = button.palette()
    assert palette.color(QPalette.ColorRole.Button) == theme.color("primary")
    assert palette.color(QPalette.ColorRole.ButtonText) == theme.color("text_on_dark")
    assert button.isFlat()


def test_plain_text_box_keeps_native_frame(theme):
    plain = QLineEdit()
    themed = ThemedTextBox()
    theme.apply_text_box_style(plain)
    theme.apply_text_box_style(themed)
    assert plain.hasFrame()
    assert not themed.hasFrame()
    assert themed.border_color == theme.color("border")


def test_gradient_fills_rect(theme):
    image = QImage(20, 20, QImage.Format.Format_ARGB32)
    image.fill(QColor("#ff00ff"))
    painter = QPainter(image)
    theme.apply_gradient_background(painter, image.rect())
    painter.end()

    start, end = theme.gradient_colors()
    corner = QColor(image.pixel(0, 0))
    assert abs(corner.red() - start.red()) <= 8
    assert abs(corner.green() - start.green()) <= 8
    assert abs(corner.blue() - start.blue()) <= 8
    assert QColor(image.pixel(19, 19)).name() != "#ff00ff"


def test_apply_theme_to_container_styles_by_role(theme):
    root = QWidget()
    layout = QVBoxLayout(root)
    button = QPushButton("b", root)
    label = QLabel("l", root)
    edit = QLineEdit(root)
    combo = QComboBox(root)
    frame = QFrame(root)
    themed = ThemedButton("t", ButtonStyle.PRIMARY, root)
    for w in (button, label, edit, combo, frame, themed):
        layout.addWidget(w)

    apply_theme_to_container(root, theme)

    secondary = theme.ROLE_STYLES["secondary_button"]
    assert button.palette().color(QPalette.ColorRole.Button) == theme.color(secondary.background)
    assert label.font().pointSize() == theme.font_specs["subheader"].point_size
    assert not combo.hasFrame()
    assert frame.frameShape() == QFrame.Shape.NoFrame
    # ThemedButton keeps its own role.
    assert themed.palette().color(QPalette.ColorRole.Button) == theme.color("primary")


def test_apply_theme_to_missing_container_is_noop(theme):
    apply_theme_to_container(None, theme)


def test_manager_switches_and_notifies(qapp):
    manager = get_theme_manager()
    changes = []
    manager.theme_changed.connect(changes.append)
    try:
        assert manager.current_theme_name == "Fraunhofer CI"
        assert manager.set_theme("Dark Theme") is True
        assert manager.current_theme is get_theme("Dark Theme")
        assert current_theme() is get_theme("Dark Theme")
        # Same name: accepted, no signal.
        assert manager.set_theme("Dark Theme") is True
        assert changes == ["Dark Theme"]
    finally:
        manager.theme_changed.disconnect(changes.append)


def test_manager_rejects_unknown_theme(qapp):
    manager = get_theme_manager()
    assert manager.set_theme("Neon") is False
    assert manager.current_theme_name == "Fraunhofer CI"


def test_release_themes_keeps_registered_instance(qapp):
    first = get_theme("Fraunhofer CI")
    first.font("header")

    release_themes()

    assert first.released
    assert get_theme("Fraunhofer CI") is first
    # Fonts come back on the next use, on the same instance.
    assert first.font("header").pointSize() == 24
    assert not first.released


def test_theme_session_releases_on_exit(qapp):
    with theme_session() as manager:
        theme = manager.current_theme
        theme.font("body")
        assert not theme.released
    assert theme.released


def test_font_returns_a_copy(qapp):
    theme = get_theme("Fraunhofer CI")
    font = theme.font("header")
    font.setPointSize(1)
    assert theme.font("header").pointSize() == 24
    assert theme.font("no_such_role") == QFont()


def test_spacing_tokens(theme):
    assert (theme.spacing_small, theme.spacing_medium, theme.spacing_large) == (4, 8, 16)


def test_factories_build_styled_tagged_widgets(theme):
    button = theme.create_primary_button("Go", size=(120, 40))
    secondary = theme.create_secondary_button("Back")
    header = theme.create_header_label("Title")
    subheader = theme.create_subheader_label("Sub")
    panel = theme.create_panel()
    text_box = theme.create_text_box()
    combo = theme.create_combo_box(["A", "B"])

    assert isinstance(button, QPushButton) and button.text() == "Go"
    assert button.minimumWidth() == 120
    assert button.palette().color(QPalette.ColorRole.Button) == theme.color("primary")
    assert secondary.property(THEME_ROLE_PROPERTY) == "secondary_button"
    assert header.font().pointSize() == 24
    assert subheader.font().pointSize() == 14
    assert isinstance(panel, QFrame)
    assert text_box.hasFrame()
    assert [combo.itemText(i) for i in range(combo.count())] == ["A", "B"]


def test_container_walk_keeps_factory_role(qapp):
    fraunhofer = get_theme("Fraunhofer CI")
    dark = get_theme("Dark Theme")
    root = QWidget()
    button = fraunhofer.create_primary_button("Go", root)

    apply_theme_to_container(root, dark)

    assert button.palette().color(QPalette.ColorRole.Button) == dark.color("primary")


def test_progress_bar_style(theme):
    plain = QProgressBar()
    themed = ThemedProgressBar(ProgressStyle.WARNING)
    themed.corner_radius = 11

    theme.apply_progress_bar_style(plain)
    themed.apply_theme(theme)

    assert plain.palette().color(QPalette.ColorRole.Highlight) == theme.color("primary")
    assert themed.progress_color() == theme.color("warning")
    assert themed.corner_radius == theme.corner_radius
    assert themed.border_color == theme.color("border")
    theme.apply_progress_bar_style(None)


def test_themed_combo_box_gets_shape(theme):
    combo = ThemedComboBox(["x"])
    combo.corner_radius = 12
    assert isinstance(combo, ThemeableControl)

    combo.apply_theme(theme)

    assert combo.corner_radius == theme.corner_radius
    assert not combo.hasFrame()
    assert combo.palette().color(QPalette.ColorRole.Base) == theme.color(theme.ROLE_STYLES["combo_box"].background)
