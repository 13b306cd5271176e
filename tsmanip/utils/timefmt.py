"""Time formatting utilities.

Provides `format_long` which renders an epoch second count as a full date plus
long time in a named zone, e.g. ``Tuesday, November 14, 2023 at 4:13:20 PM CST``.
Zone data comes from `zoneinfo` (system tz database, or the tzdata package).

Day and month names come from the tables below, not strftime, so the text is
English under any LC_TIME (QApplication calls setlocale on startup).
"""

from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo

__all__ = ["INVALID_TIMESTAMP", "format_long"]

INVALID_TIMESTAMP = "Invalid timestamp"

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_long(epoch_seconds: int, zone_id: str) -> str:
    """Return ``<weekday>, <month> <day>, <year> at <h>:<mm>:<ss> <AM|PM> <abbr>``.

    Raises ZoneInfoNotFoundError / ValueError for an unknown or malformed zone
    and OverflowError / OSError / ValueError when the instant is out of range.
    Callers that need a total function map these to `INVALID_TIMESTAMP`.
    """
    tz = ZoneInfo(zone_id)
    dt = datetime.datetime.fromtimestamp(epoch_seconds, tz=tz)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    abbr = dt.tzname() or zone_id
    return (
        f"{_WEEKDAYS[dt.weekday()]}, {_MONTHS[dt.month - 1]} {dt.day}, {dt.year} at "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem} {abbr}"
    )
