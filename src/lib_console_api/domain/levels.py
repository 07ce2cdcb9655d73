"""Record categories emitted by the console dispatch surface.

Purpose
-------
Name every kind of record a console method can hand to a client so sinks can
style, filter, or route them without inspecting the originating call.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` and ``_PYTHON_LEVELS`` constants mapping levels to console
  glyphs and stdlib :mod:`logging` severities.

System Role
-----------
Consumed by the console (to tag records), the default logger pipeline, and
every adapter that renders or forwards records.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Closed set of record categories produced by console methods."""

    DEBUG = "debug"
    ERROR = "error"
    INFO = "info"
    LOG = "log"
    WARN = "warn"
    TRACE = "trace"
    COUNT = "count"
    COUNT_RESET = "countReset"
    ASSERT = "assert"

    @property
    def severity(self) -> str:
        """Return the console method name that produces this level."""

        return self.value

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve enum names (``COUNT_RESET``) and method names (``countReset``)."""
        normalized = name.strip()
        for level in cls:
            if normalized.upper() == level.name or normalized.lower() == level.value.lower():
                return level
        raise ValueError(f"Unknown log level: {name!r}")


_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.ERROR: "✖",
    LogLevel.INFO: "ℹ",
    LogLevel.LOG: "•",
    LogLevel.WARN: "⚠",
    LogLevel.TRACE: "↳",
    LogLevel.COUNT: "#",
    LogLevel.COUNT_RESET: "#",
    LogLevel.ASSERT: "‼",
}
# Console glyphs displayed by the Rich adapter per log level.

_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.LOG: logging.INFO,
    LogLevel.COUNT: logging.INFO,
    LogLevel.COUNT_RESET: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.ASSERT: logging.ERROR,
}


__all__ = ["LogLevel"]
