"""Timestamp input row.

Holds the editable field plus Copy and Refresh buttons. The row never touches
controller state itself; it re-emits user actions as signals and exposes
`render(state)` for the window to push snapshots in.

Signals:
    textEdited(str)      # user typed in the field
    focusLost()          # field lost focus (commit or revert)
    copyRequested()
    refreshRequested()
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget

from ...core.state import TimestampState

_VALID_STYLE = "border:1px solid #bbb;border-radius:6px;padding:6px;"
_INVALID_STYLE = "border:1px solid #e53e3e;border-radius:6px;padding:6px;"


class TimestampLineEdit(QLineEdit):
    """QLineEdit that reports focus loss as a signal."""

    focusLost = Signal()

    def focusOutEvent(self, event):  # noqa: D401 - Qt override
        super().focusOutEvent(event)
        self.focusLost.emit()


class TimestampInputRow(QWidget):
    textEdited = Signal(str)
    focusLost = Signal()
    copyRequested = Signal()
    refreshRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.field = TimestampLineEdit()
        self.field.setAlignment(Qt.AlignCenter)  # type: ignore
        mono = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        mono.setPointSize(20)
        mono.setWeight(QFont.Weight.Normal)
        self.field.setFont(mono)
        self.field.setStyleSheet(_VALID_STYLE)
        self.copy_button = QPushButton("Copy")
        self.copy_button.setToolTip("Copy timestamp")
        self.refresh_button = QPushButton("Now")
        self.refresh_button.setToolTip("Get current timestamp")
        self.copied_label = QLabel("Copied!")
        self.copied_label.setStyleSheet(
            "background:#000;color:#fff;padding:2px 6px;border-radius:4px;"
        )
        self.copied_label.setVisible(False)

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.field, stretch=1)
        layout.addWidget(self.copied_label)
        layout.addWidget(self.copy_button)
        layout.addWidget(self.refresh_button)
        self.setLayout(layout)

        # textEdited fires for user edits only, not for setText() in render()
        self.field.textEdited.connect(self.textEdited.emit)
        self.field.focusLost.connect(self.focusLost.emit)
        self.copy_button.clicked.connect(self.copyRequested.emit)
        self.refresh_button.clicked.connect(self.refreshRequested.emit)

    def render(self, state: TimestampState):
        if self.field.text() != state.raw_input_text:
            cursor = self.field.cursorPosition()
            self.field.setText(state.raw_input_text)
            self.field.setCursorPosition(min(cursor, len(state.raw_input_text)))
        self.field.setStyleSheet(_VALID_STYLE if state.input_is_valid else _INVALID_STYLE)
        self.setCopyFeedback(state.copy_feedback_active)

    def setCopyFeedback(self, active: bool):
        self.copied_label.setVisible(active)

    def isInvalid(self) -> bool:
        return self.field.styleSheet() == _INVALID_STYLE


__all__ = ["TimestampInputRow", "TimestampLineEdit"]
