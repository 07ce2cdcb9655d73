"""Domain values and rules behind the console dispatch surface."""

from __future__ import annotations

from .counters import DEFAULT_LABEL, CounterTable
from .levels import LogLevel
from .messages import ASSERTION_MESSAGE, compose_assertion_data, format_count, format_missing_count
from .trace import ANONYMOUS_FRAME, Trace

__all__ = [
    "ANONYMOUS_FRAME",
    "ASSERTION_MESSAGE",
    "CounterTable",
    "DEFAULT_LABEL",
    "LogLevel",
    "Trace",
    "compose_assertion_data",
    "format_count",
    "format_missing_count",
]
