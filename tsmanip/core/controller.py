"""Timestamp controller.

Owns the single `TimestampState` snapshot and is the only place it changes.
The presentation layer reads `state()` (or listens to `stateChanged`) and
forwards user actions to the methods below.

Public API:
    initialize()
    refresh_to_now()
    toggle_unit()
    edit_input(text)
    commit_or_revert()
    offset(delta_seconds)
    copy_current_input()
    format_for_zone(zone_id=None) -> str
Signals:
    stateChanged(object)        # new TimestampState after every mutation
    copyFeedbackChanged(bool)   # "Copied!" indicator on/off
    copyFailed(str)             # clipboard write failed (already logged)

No operation raises for well-formed calls: malformed text becomes an invalid
field state, formatting errors become "Invalid timestamp", clipboard errors go
to the diagnostic sink.

Copy feedback:
A single-shot QTimer clears the feedback flag. Copying again while it is
pending restarts the same timer, so only one expiry is ever outstanding.
"""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..config import DISPLAY_ZONES, ControllerSettings
from ..services.providers import (
    ClipboardProvider,
    Clock,
    DiagnosticSink,
    QtClipboard,
    log_failure,
    system_clock,
)
from ..utils.timefmt import INVALID_TIMESTAMP, format_long
from . import state as transitions
from .state import TimestampState

Formatter = Callable[[int, str], str]


class TimestampController(QObject):
    stateChanged = Signal(object)
    copyFeedbackChanged = Signal(bool)
    copyFailed = Signal(str)

    def __init__(
        self,
        parent: Optional[QObject] = None,
        *,
        settings: Optional[ControllerSettings] = None,
        clock: Optional[Clock] = None,
        clipboard: Optional[ClipboardProvider] = None,
        formatter: Optional[Formatter] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ):
        super().__init__(parent)
        self._settings = settings or ControllerSettings()
        self._clock = clock or system_clock
        self._clipboard = clipboard if clipboard is not None else QtClipboard()
        self._formatter = formatter or format_long
        self._diagnostics = diagnostics or log_failure
        self._feedback_timer = QTimer(self)
        self._feedback_timer.setSingleShot(True)
        self._feedback_timer.setInterval(self._settings.copy_feedback_ms)
        self._feedback_timer.timeout.connect(self._clearCopyFeedback)
        self._state = transitions.initial_state(self._clock())

    @property
    def settings(self) -> ControllerSettings:
        return self._settings

    def state(self) -> TimestampState:
        return self._state

    # --- Operations ---
    def initialize(self):
        self._feedback_timer.stop()
        was_active = self._state.copy_feedback_active
        self._commit(transitions.initial_state(self._clock()))
        if was_active:
            self.copyFeedbackChanged.emit(False)

    def refresh_to_now(self):
        self._commit(transitions.refresh_to_now(self._state, self._clock()))

    def toggle_unit(self):
        self._commit(transitions.toggle_unit(self._state))

    def edit_input(self, text: str):
        self._commit(
            transitions.edit_input(
                self._state,
                text,
                threshold=self._settings.ms_threshold,
                unit_strict=self._settings.unit_strict,
            )
        )

    def commit_or_revert(self):
        self._commit(transitions.commit_or_revert(self._state))

    def offset(self, delta_seconds: int):
        self._commit(transitions.apply_offset(self._state, int(delta_seconds)))

    def copy_current_input(self):
        text = self._state.raw_input_text
        try:
            self._clipboard.write_text(text)
        except Exception as e:
            self._diagnostics("Failed to copy", e)
            self.copyFailed.emit(str(e))
            return
        # start() on an active timer restarts it
        self._feedback_timer.start()
        self._setCopyFeedback(True)

    def format_for_zone(self, zone_id: Optional[str] = None) -> str:
        """Long-form date in ``zone_id``, or in settings.default_zone when omitted."""
        zone_id = zone_id or self._settings.default_zone
        if not self._state.input_is_valid:
            return INVALID_TIMESTAMP
        try:
            return self._formatter(self._state.canonical_seconds, zone_id)
        except Exception:
            return INVALID_TIMESTAMP

    def zone_readouts(self) -> list[tuple[str, str]]:
        """(label, formatted date) for each display zone."""
        return [(label, self.format_for_zone(zone)) for label, zone in DISPLAY_ZONES]

    # --- Internal ---
    def _commit(self, new_state: TimestampState):
        if new_state is self._state:
            return
        self._state = new_state
        self.stateChanged.emit(new_state)

    def _setCopyFeedback(self, active: bool):
        before = self._state.copy_feedback_active
        self._commit(transitions.with_copy_feedback(self._state, active))
        if before != active:
            self.copyFeedbackChanged.emit(active)

    def _clearCopyFeedback(self):
        self._setCopyFeedback(False)


__all__ = ["TimestampController", "Formatter"]
