"""Input validation and unit conversion for Unix timestamps.

Values are always stored in whole seconds. The millisecond unit only changes
how a value is rendered back into the input field.

Auto-detection:
A typed value larger than ``MS_AUTODETECT_THRESHOLD`` (10**12) cannot be a
plausible seconds count for any date we care about, so it is read as
milliseconds and floor-divided by 1000. Smaller values are taken as seconds
regardless of the selected unit unless a unit is passed to ``to_seconds``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = [
    "TimeUnit",
    "MS_AUTODETECT_THRESHOLD",
    "TIME_INTERVALS",
    "SUPPORTED_DELTAS",
    "parse_input",
    "to_seconds",
    "to_milliseconds",
    "render",
]

MS_AUTODETECT_THRESHOLD = 10**12

# (label, seconds) in menu order
TIME_INTERVALS: tuple[tuple[str, int], ...] = (
    ("1 Minute", 60),
    ("30 Minutes", 1800),
    ("1 Hour", 3600),
    ("1 Day", 86400),
    ("1 Week", 604800),
)

SUPPORTED_DELTAS = frozenset(
    sign * seconds for _, seconds in TIME_INTERVALS for sign in (1, -1)
)


class TimeUnit(Enum):
    SECONDS = "s"
    MILLISECONDS = "ms"

    @property
    def label(self) -> str:
        return self.value

    def toggled(self) -> "TimeUnit":
        if self is TimeUnit.SECONDS:
            return TimeUnit.MILLISECONDS
        return TimeUnit.SECONDS


def parse_input(text: str) -> Optional[int]:
    """Return the non-negative integer typed in ``text`` or None if malformed.

    The text must be the canonical decimal form of the number it parses to:
    ``"007"``, ``" 5"``, ``"+5"``, ``"1_000"`` and ``"1.5"`` are all rejected.
    """
    if not text:
        return None
    try:
        # integers only: "1.5" is rejected so stored seconds stay whole
        value = int(text)
    except ValueError:
        return None
    if str(value) != text or value < 0:
        return None
    return value


def to_seconds(
    value: int,
    threshold: int = MS_AUTODETECT_THRESHOLD,
    unit: Optional[TimeUnit] = None,
) -> int:
    """Convert a typed value to seconds.

    With ``unit`` omitted the magnitude heuristic decides. Passing a unit
    interprets the value strictly in that unit.
    """
    if unit is TimeUnit.MILLISECONDS:
        return value // 1000
    if unit is TimeUnit.SECONDS:
        return value
    if value > threshold:
        return value // 1000
    return value


def to_milliseconds(seconds: int) -> int:
    return seconds * 1000


def render(seconds: int, unit: TimeUnit) -> str:
    if unit is TimeUnit.MILLISECONDS:
        return str(to_milliseconds(seconds))
    return str(seconds)
