"""Default providers for the controller's external collaborators.

Clock:      ``Callable[[], int]``  seconds since epoch, now
Clipboard:  object with ``write_text(text)``; raises on failure
Diagnostics: ``Callable[[str, BaseException], None]``  fire-and-forget sink

Tests swap any of these for simple fakes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from PySide6.QtGui import QGuiApplication

__all__ = [
    "Clock",
    "ClipboardProvider",
    "DiagnosticSink",
    "ClipboardError",
    "QtClipboard",
    "system_clock",
    "log_failure",
]

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
DiagnosticSink = Callable[[str, BaseException], None]


class ClipboardError(RuntimeError):
    """Raised when text could not be placed on the clipboard."""


class ClipboardProvider(Protocol):
    def write_text(self, text: str) -> None: ...


def system_clock() -> int:
    return int(time.time())


class QtClipboard:
    """Clipboard backed by the running QGuiApplication."""

    def write_text(self, text: str) -> None:
        if QGuiApplication.instance() is None:
            raise ClipboardError("no GUI application running")
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("clipboard unavailable")
        clipboard.setText(text)


def log_failure(message: str, error: BaseException) -> None:
    logger.error("%s: %s", message, error)
