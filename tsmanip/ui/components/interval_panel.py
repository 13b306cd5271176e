"""Interval panel: Subtract / Add buttons for each fixed interval.

Emits ``offsetRequested(int)`` with a signed number of seconds; the window
forwards it to the controller.
"""

from __future__ import annotations

from typing import Iterable

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QWidget

from ...core.conversion import TIME_INTERVALS


class IntervalPanel(QWidget):
    offsetRequested = Signal(int)

    def __init__(self, intervals: Iterable[tuple[str, int]] = TIME_INTERVALS, parent=None):
        super().__init__(parent)
        layout = QGridLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self._buttons: dict[int, QPushButton] = {}
        for row, (label, seconds) in enumerate(intervals):
            layout.addWidget(QLabel(label), row, 0)
            sub = QPushButton("− Subtract")
            sub.setStyleSheet("background:#fed7d7;color:#c53030;padding:4px 10px;")
            add = QPushButton("+ Add")
            add.setStyleSheet("background:#c6f6d5;color:#276749;padding:4px 10px;")
            # s=seconds binds per row
            sub.clicked.connect(lambda _=False, s=seconds: self.offsetRequested.emit(-s))
            add.clicked.connect(lambda _=False, s=seconds: self.offsetRequested.emit(s))
            layout.addWidget(sub, row, 1)
            layout.addWidget(add, row, 2)
            self._buttons[-seconds] = sub
            self._buttons[seconds] = add
        layout.setColumnStretch(0, 1)
        self.setLayout(layout)

    def button(self, delta_seconds: int) -> QPushButton:
        return self._buttons[delta_seconds]


__all__ = ["IntervalPanel"]
