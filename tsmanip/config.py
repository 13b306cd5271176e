"""Runtime settings.

Defaults match the shipped behavior; each can be overridden through an
environment variable read once at startup:

    TSMANIP_DEFAULT_ZONE   zone used by format_for_zone() with no argument
    TSMANIP_FEEDBACK_MS    how long "Copied!" stays visible
    TSMANIP_MS_THRESHOLD   values above this are read as milliseconds
    TSMANIP_UNIT_STRICT    1/true: read typed values in the selected unit
    TSMANIP_SCREEN_INDEX   screen to center the window on
    TSMANIP_LOG_LEVEL      logging level name for the launcher

Malformed values are ignored and the default is kept.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.conversion import MS_AUTODETECT_THRESHOLD

__all__ = ["DISPLAY_ZONES", "DEFAULT_ZONE", "ControllerSettings"]

DEFAULT_ZONE = "America/Chicago"

# (label, zone id) rows shown under the input field
DISPLAY_ZONES: tuple[tuple[str, str], ...] = (
    ("CST", "America/Chicago"),
    ("EST", "America/New_York"),
    ("UTC", "UTC"),
)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass
class ControllerSettings:
    default_zone: str = DEFAULT_ZONE
    copy_feedback_ms: int = 2000
    ms_threshold: int = MS_AUTODETECT_THRESHOLD
    unit_strict: bool = False
    screen_index: Optional[int] = None
    log_level: str = "WARNING"

    def logging_level(self) -> int:
        """Numeric level for ``log_level``; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ControllerSettings":
        env = os.environ if env is None else env
        defaults = cls()
        screen = _env_int(env, "TSMANIP_SCREEN_INDEX", -1)
        level = env.get("TSMANIP_LOG_LEVEL", defaults.log_level).strip().upper()
        return cls(
            default_zone=env.get("TSMANIP_DEFAULT_ZONE") or defaults.default_zone,
            copy_feedback_ms=_env_int(
                env, "TSMANIP_FEEDBACK_MS", defaults.copy_feedback_ms
            ),
            ms_threshold=_env_int(env, "TSMANIP_MS_THRESHOLD", defaults.ms_threshold, 1),
            unit_strict=env.get("TSMANIP_UNIT_STRICT", "").strip().lower() in _TRUTHY,
            screen_index=screen if screen >= 0 else None,
            log_level=level or defaults.log_level,
        )
