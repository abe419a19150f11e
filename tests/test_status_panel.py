from src.core.printer_controller import SamplePrinterController
from src.ui.components.status_panel import StatusPanel
from src.ui.theme import get_theme


def test_defaults_without_printer(qapp):
    panel = StatusPanel()
    assert panel.lbl_model.text() == "Not Set"
    assert panel.lbl_connection.text() == "Disconnected"
    assert panel.lbl_task.text() == "None"
    # No printer: toggling does nothing.
    panel.btn_connect.click()
    assert panel.lbl_connection.text() == "Disconnected"


def test_connect_button_toggles_printer(qapp):
    panel = StatusPanel()
    printer = SamplePrinterController()
    panel.set_printer_controller(printer)
    assert panel.lbl_model.text() == "Fraunhofer SBP-2000"

    panel.btn_connect.click()
    assert printer.is_connected
    assert panel.lbl_connection.text() == "Connected"
    assert panel.btn_connect.text() == "Disconnect"
    assert panel.status_light.active

    panel.btn_connect.click()
    assert not printer.is_connected
    assert panel.lbl_connection.text() == "Disconnected"
    assert not panel.status_light.active


def test_follows_external_connection_changes(qapp):
    panel = StatusPanel()
    printer = SamplePrinterController()
    panel.set_printer_controller(printer)

    printer.connect()

    assert panel.lbl_connection.text() == "Connected"


def test_replaced_printer_is_no_longer_tracked(qapp):
    panel = StatusPanel()
    old, new = SamplePrinterController(), SamplePrinterController(model_name="Other")
    panel.set_printer_controller(old)
    panel.set_printer_controller(new)

    old.connect()

    assert panel.lbl_model.text() == "Other"
    assert panel.lbl_connection.text() == "Disconnected"


def test_task_and_system_status(qapp):
    panel = StatusPanel()
    panel.set_current_task("Moving")
    panel.set_system_status("Busy")
    assert panel.lbl_task.text() == "Moving"
    assert panel.lbl_system.text() == "Busy"
    panel.set_current_task(None)
    panel.set_system_status(None)
    assert panel.lbl_task.text() == "None"
    assert panel.lbl_system.text() == "Unknown"


def test_status_light_uses_theme_colors(qapp):
    panel = StatusPanel()
    theme = get_theme("Dark Theme")
    panel.apply_theme(theme)
    assert panel.status_light.current_color() == theme.color("error")
    panel.status_light.set_active(True)
    assert panel.status_light.current_color() == theme.color("success")
