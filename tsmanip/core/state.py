"""Timestamp snapshot and its transitions.

The controller never mutates a snapshot. Every user action maps to one of the
functions below, which take the current ``TimestampState`` and return the next
one. They do not import Qt; the controller owns timers and providers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .conversion import (
    MS_AUTODETECT_THRESHOLD,
    TimeUnit,
    parse_input,
    render,
    to_seconds,
)

__all__ = [
    "TimestampState",
    "initial_state",
    "refresh_to_now",
    "toggle_unit",
    "edit_input",
    "commit_or_revert",
    "apply_offset",
    "with_copy_feedback",
]

VALID = "VALID"
INVALID = "INVALID"


@dataclass(frozen=True)
class TimestampState:
    canonical_seconds: int
    unit: TimeUnit = TimeUnit.SECONDS
    raw_input_text: str = ""
    input_is_valid: bool = True
    copy_feedback_active: bool = False

    def display_text(self) -> str:
        """Canonical text for the stored value under the active unit."""
        return render(self.canonical_seconds, self.unit)

    @property
    def field_state(self) -> str:
        return VALID if self.input_is_valid else INVALID


def _regenerated(state: TimestampState, **changes) -> TimestampState:
    nxt = replace(state, **changes)
    return replace(nxt, raw_input_text=nxt.display_text())


def initial_state(now_seconds: int) -> TimestampState:
    return TimestampState(
        canonical_seconds=now_seconds,
        unit=TimeUnit.SECONDS,
        raw_input_text=str(now_seconds),
        input_is_valid=True,
    )


def refresh_to_now(state: TimestampState, now_seconds: int) -> TimestampState:
    return _regenerated(state, canonical_seconds=now_seconds, input_is_valid=True)


def toggle_unit(state: TimestampState) -> TimestampState:
    # input_is_valid is left as-is; an invalid draft is replaced by the
    # regenerated text but the flag only clears on edit or commit.
    return _regenerated(state, unit=state.unit.toggled())


def edit_input(
    state: TimestampState,
    text: str,
    *,
    threshold: int = MS_AUTODETECT_THRESHOLD,
    unit_strict: bool = False,
) -> TimestampState:
    value = parse_input(text)
    if value is None:
        return replace(state, raw_input_text=text, input_is_valid=False)
    seconds = to_seconds(value, threshold, state.unit if unit_strict else None)
    return replace(
        state, canonical_seconds=seconds, raw_input_text=text, input_is_valid=True
    )


def commit_or_revert(state: TimestampState) -> TimestampState:
    if state.input_is_valid:
        return state
    return _regenerated(state, input_is_valid=True)


def apply_offset(state: TimestampState, delta_seconds: int) -> TimestampState:
    return _regenerated(
        state,
        canonical_seconds=state.canonical_seconds + delta_seconds,
        input_is_valid=True,
    )


def with_copy_feedback(state: TimestampState, active: bool) -> TimestampState:
    if state.copy_feedback_active == active:
        return state
    return replace(state, copy_feedback_active=active)
