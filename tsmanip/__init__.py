"""Top-level application package exports.

Public API surface (keep minimal):
 - MainWindow, run (UI entry point)
 - TimestampController (state owner the UI talks to)
 - TimestampState, TimeUnit (snapshot types)
"""

from .ui.main_window import MainWindow, run  # noqa: F401
from .core.controller import TimestampController  # noqa: F401
from .core.state import TimestampState  # noqa: F401
from .core.conversion import TimeUnit  # noqa: F401

__all__ = ["MainWindow", "run", "TimestampController", "TimestampState", "TimeUnit"]
