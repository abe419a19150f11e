import logging

from src.core.printer_controller import SamplePrinterController
from src.ui.contracts import PrinterController


def test_sample_controller_satisfies_contract():
    assert isinstance(SamplePrinterController(), PrinterController)


def test_connect_and_disconnect_emit_status():
    printer = SamplePrinterController()
    events = []
    printer.connection_status_changed.connect(events.append)

    printer.connect()
    printer.disconnect()

    assert events == [True, False]
    assert not printer.is_connected


def test_send_command_records_history_and_emits():
    printer = SamplePrinterController()
    sent = []
    printer.command_sent.connect(sent.append)
    printer.connect()

    printer.send_command("  Home x ")
    printer.send_command("")
    printer.send_command(None)

    assert sent == ["Home x"]
    assert printer.history == ["Home x"]


def test_history_is_bounded():
    printer = SamplePrinterController()
    for i in range(SamplePrinterController.HISTORY_LIMIT + 5):
        printer.send_command(f"Jog x {i}")
    assert len(printer.history) == SamplePrinterController.HISTORY_LIMIT
    assert printer.history[-1] == f"Jog x {SamplePrinterController.HISTORY_LIMIT + 4}"


def test_disconnected_send_logs_warning(caplog):
    printer = SamplePrinterController()
    with caplog.at_level(logging.WARNING):
        printer.send_command("Home all")
    assert "disconnected" in caplog.text
