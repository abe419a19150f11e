from PySide6.QtWidgets import QComboBox, QWidget

from src.core.printer_controller import SamplePrinterController
from src.ui.components.themed_widgets import ButtonStyle, ProgressStyle, ThemedComboBox
from src.ui.contracts import PageModule
from src.ui.pages.axes_page import AxesPage, NOT_CONNECTED
from src.ui.pages.controls_page import ControlsPage
from src.ui.pages.main_menu_page import MainMenuPage
from src.ui.pages.page_base import PageBase
from src.ui.pages.sample_page import SamplePage
from src.ui.theme import THEME_ROLE_PROPERTY, get_theme_manager


def _connected_printer():
    printer = SamplePrinterController()
    printer.connect()
    return printer


def test_pages_satisfy_page_contract(qapp):
    for page in (MainMenuPage(), AxesPage(), SamplePage("Test", "sub", "Test", order=3), ControlsPage()):
        assert isinstance(page, PageModule)


def test_page_base_requires_build_content(qapp):
    page = PageBase("t", "s", "n")
    try:
        page.get_content()
    except NotImplementedError:
        pass
    else:
        raise AssertionError("expected NotImplementedError")


def test_page_base_tracks_activation(qapp):
    page = SamplePage("Vision", "sub", "Vision", order=4)
    page.on_activated()
    assert page.is_active
    page.on_deactivated()
    assert not page.is_active


def test_main_menu_tiles_navigate_by_name(qapp):
    visited = []
    page = MainMenuPage(visited.append)
    assert page.order == 0
    page.get_content()

    page.tile_buttons["Vision"].click()
    page.tile_buttons["Moving"].click()

    assert visited == ["Vision", "Moving"]


def test_axes_page_sends_commands_when_connected(qapp):
    printer = _connected_printer()
    page = AxesPage(printer)
    page.get_content()

    page.home_buttons["all"].click()
    page.home_buttons["x"].click()
    page.jog_buttons["+y"].click()
    page.jog_buttons["-z"].click()
    page.position_inputs["x"].setText("120")
    page.move_buttons["x"].click()

    assert printer.history == ["Home all", "Home x", "Jog y 50", "Jog z -50", "Move x 120"]
    assert page.lbl_feedback.text() == "Sent: Move x 120"


def test_axes_page_jog_speed_follows_slider(qapp):
    printer = _connected_printer()
    page = AxesPage(printer)
    page.get_content()

    page.speed_slider.setValue(80)
    page.jog_buttons["+x"].click()

    assert printer.history == ["Jog x 80"]
    assert page.lbl_speed.text() == "Jog Speed: 80 mm/s"


def test_axes_page_blocks_commands_while_disconnected(qapp):
    printer = SamplePrinterController()
    page = AxesPage(printer)
    page.get_content()

    assert page.home("all") is False
    assert printer.history == []
    assert page.lbl_feedback.text() == NOT_CONNECTED


def test_axes_page_rejects_non_numeric_position(qapp):
    printer = _connected_printer()
    page = AxesPage(printer)
    page.get_content()

    assert page.move("y", "abc") is False
    assert printer.history == []


def test_sample_page_content(qapp):
    page = SamplePage("Actuators", "Manipulate actuators", "Actuators", order=2)
    content = page.get_content()
    assert isinstance(content, QWidget)
    assert page.demo_button is not None
    assert "Actuators" in page.demo_message()


def test_controls_page_shows_every_button_role(qapp):
    page = ControlsPage()
    page.get_content()
    assert set(page.buttons) == set(ButtonStyle)
    assert page.buttons[ButtonStyle.TERTIARY].button_style is ButtonStyle.TERTIARY


def test_controls_page_switches_theme(qapp):
    page = ControlsPage()
    content = page.get_content()
    combo = page.theme_combo
    assert isinstance(combo, QComboBox) and combo.parent() is content

    combo.setCurrentText("Dark Theme")

    assert get_theme_manager().current_theme_name == "Dark Theme"


def test_controls_page_shows_themed_progress_and_combo(qapp):
    page = ControlsPage()
    page.get_content()

    assert isinstance(page.combo_box, ThemedComboBox)
    assert set(page.progress_bars) == set(ProgressStyle)
    bar = page.progress_bars[ProgressStyle.PRIMARY]
    assert bar.value() == 15

    page.advance_progress()
    assert bar.value() == 25

    page.advance_progress(100)
    assert bar.value() == bar.minimum()


def test_controls_page_includes_theme_built_widgets(qapp):
    page = ControlsPage()
    page.get_content()
    assert set(page.factory_widgets) == {"subheader", "primary", "secondary", "text_box", "combo_box"}
    assert page.factory_widgets["primary"].property(THEME_ROLE_PROPERTY) == "primary_button"
