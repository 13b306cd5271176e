"""Zone readout panel: one "<label>: <date>" row per display zone."""

from __future__ import annotations

from typing import Iterable

from PySide6.QtWidgets import QGridLayout, QLabel, QWidget


class ZonePanel(QWidget):
    def __init__(self, labels: Iterable[str], parent=None):
        super().__init__(parent)
        self.setStyleSheet("background:#f7f7f7;border-radius:6px;")
        layout = QGridLayout()
        layout.setContentsMargins(12, 8, 12, 8)
        self._values: dict[str, QLabel] = {}
        for row, label in enumerate(labels):
            name = QLabel(f"{label}:")
            name.setStyleSheet("font-weight:bold;")
            value = QLabel("")
            value.setStyleSheet("color:#444;")
            layout.addWidget(name, row, 0)
            layout.addWidget(value, row, 1)
            self._values[label] = value
        layout.setColumnStretch(1, 1)
        self.setLayout(layout)

    def setReadouts(self, rows: Iterable[tuple[str, str]]):
        for label, text in rows:
            value = self._values.get(label)
            if value is not None:
                value.setText(text)

    def readout(self, label: str) -> str:
        value = self._values.get(label)
        return value.text() if value is not None else ""


__all__ = ["ZonePanel"]
