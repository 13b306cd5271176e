"""Main application window (UI layer).

The window renders `TimestampController` snapshots and forwards user actions;
it keeps no timestamp state of its own.

Layout:
+--------------------------------------------------+
|      Unix Timestamp Manipulator        [ s | ms ]|
| [        1700000000        ] Copied! [Copy] [Now] |
| CST: ...                                         |
| EST: ...                                         |
| UTC: ...                                         |
| 1 Minute        [− Subtract] [+ Add]             |
| ...                                              |
+--------------------------------------------------+
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from ..config import DISPLAY_ZONES, ControllerSettings
from ..core.controller import TimestampController
from ..core.conversion import TimeUnit
from ..core.state import TimestampState
from .components.input_row import TimestampInputRow
from .components.interval_panel import IntervalPanel
from .components.zone_panel import ZonePanel

_UNIT_STYLES = {
    TimeUnit.SECONDS: "background:#bee3f8;color:#2c5282;border-radius:10px;padding:2px 10px;",
    TimeUnit.MILLISECONDS: "background:#e9d8fd;color:#553c9a;border-radius:10px;padding:2px 10px;",
}


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[TimestampController] = None):
        super().__init__()
        self.setWindowTitle("Unix Timestamp Manipulator")
        self.setGeometry(100, 100, 560, 420)
        self.controller = controller or TimestampController(
            self, settings=ControllerSettings.from_env()
        )
        self._createMenuBar()
        self._createLayout()
        self.controller.stateChanged.connect(self._render)
        self.controller.copyFailed.connect(self._onCopyFailed)
        self._render(self.controller.state())

    def centerOnPreferredScreen(self):
        """Center the window on TSMANIP_SCREEN_INDEX if valid, else the primary screen."""
        screens = QGuiApplication.screens()
        if not screens:
            return
        idx = self.controller.settings.screen_index
        screen = None
        if idx is not None and 0 <= idx < len(screens):
            screen = screens[idx]
        if screen is None:
            screen = QGuiApplication.primaryScreen() or screens[0]
        geo = screen.availableGeometry()
        win_geo = self.frameGeometry()
        win_geo.moveCenter(geo.center())
        self.move(win_geo.topLeft())

    def _createMenuBar(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        exit_action = QAction("Exit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        about_menu = menu_bar.addMenu("About")
        about_action = QAction("About Timestamp Manipulator", self)
        about_action.triggered.connect(self._showAboutDialog)
        about_menu.addAction(about_action)

    def _showAboutDialog(self):
        QMessageBox.about(
            self,
            "About Timestamp Manipulator",
            "Timestamp Manipulator\nView and nudge Unix timestamps across time zones.",
        )

    def _createLayout(self):
        central_widget = QWidget()
        root_layout = QVBoxLayout()
        root_layout.setSpacing(12)

        # Title + unit toggle
        header = QHBoxLayout()
        title = QLabel("Unix Timestamp Manipulator")
        title.setStyleSheet("font-size:18px;font-weight:bold;")
        title.setAlignment(Qt.AlignCenter)  # type: ignore
        self.unit_button = QPushButton()
        self.unit_button.setToolTip("Toggle between seconds and milliseconds")
        header.addStretch(1)
        header.addWidget(title)
        header.addWidget(self.unit_button)
        header.addStretch(1)
        root_layout.addLayout(header)

        self.input_row = TimestampInputRow()
        root_layout.addWidget(self.input_row)

        self.zone_panel = ZonePanel([label for label, _ in DISPLAY_ZONES])
        root_layout.addWidget(self.zone_panel)

        self.interval_panel = IntervalPanel()
        root_layout.addWidget(self.interval_panel)
        root_layout.addStretch(1)

        central_widget.setLayout(root_layout)
        self.setCentralWidget(central_widget)
        self.setStatusBar(QStatusBar())

        # Connections: widgets -> controller
        c = self.controller
        self.unit_button.clicked.connect(c.toggle_unit)
        self.input_row.textEdited.connect(c.edit_input)
        self.input_row.focusLost.connect(c.commit_or_revert)
        self.input_row.copyRequested.connect(c.copy_current_input)
        self.input_row.refreshRequested.connect(c.refresh_to_now)
        self.interval_panel.offsetRequested.connect(c.offset)

    def _render(self, state: TimestampState):
        self.unit_button.setText(state.unit.label)
        self.unit_button.setStyleSheet(_UNIT_STYLES[state.unit])
        self.input_row.render(state)
        self.zone_panel.setReadouts(self.controller.zone_readouts())

    def _onCopyFailed(self, message: str):
        self.statusBar().showMessage(f"Copy failed: {message}", 3000)


def run():  # convenience launcher
    settings = ControllerSettings.from_env()
    logging.basicConfig(
        level=settings.logging_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow(TimestampController(settings=settings))
    window.show()
    window.centerOnPreferredScreen()
    sys.exit(app.exec())


__all__ = ["MainWindow", "run"]
