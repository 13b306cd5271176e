from PySide6.QtWidgets import QApplication

from tsmanip.config import ControllerSettings
from tsmanip.core.controller import TimestampController
from tsmanip.ui.main_window import MainWindow

_app = None


def _ensure_app():
    global _app
    if _app is None:
        _app = QApplication.instance() or QApplication([])


class _Clipboard:
    def __init__(self):
        self.texts = []

    def write_text(self, text):
        self.texts.append(text)


def _window():
    _ensure_app()
    controller = TimestampController(
        settings=ControllerSettings(),
        clock=lambda: 1700000000,
        clipboard=_Clipboard(),
    )
    return MainWindow(controller)


def test_window_renders_initial_snapshot():
    win = _window()
    assert win.input_row.field.text() == "1700000000"
    assert win.unit_button.text() == "s"
    assert win.zone_panel.readout("UTC") == "Tuesday, November 14, 2023 at 10:13:20 PM UTC"
    assert win.zone_panel.readout("CST").endswith("4:13:20 PM CST")


def test_unit_button_and_intervals():
    win = _window()
    win.interval_panel.button(3600).click()
    assert win.input_row.field.text() == "1700003600"
    win.unit_button.click()
    assert win.unit_button.text() == "ms"
    assert win.input_row.field.text() == "1700003600000"
    win.interval_panel.button(-3600).click()
    assert win.controller.state().canonical_seconds == 1700000000


def test_invalid_typing_and_focus_loss():
    win = _window()
    win.input_row.field.textEdited.emit("007")
    assert win.input_row.isInvalid()
    assert win.zone_panel.readout("EST") == "Invalid timestamp"
    win.input_row.field.focusLost.emit()
    assert not win.input_row.isInvalid()
    assert win.input_row.field.text() == "1700000000"


def test_copy_shows_feedback():
    win = _window()
    win.input_row.copy_button.click()
    assert win.controller.state().copy_feedback_active
    assert not win.input_row.copied_label.isHidden()
