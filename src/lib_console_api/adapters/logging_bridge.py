"""Client forwarding console records to the stdlib :mod:`logging` tree.

Records are emitted at :meth:`LogLevel.to_python_level` with the debug-output
line format ``(<prefix> <severity>) <text>``, so script output interleaves with
the host's own diagnostics. Only the plain logging levels name their severity;
counts, assertions and traces carry the bare ``(<prefix>)`` tag.
"""

from __future__ import annotations

import logging

from lib_console_api.application.client import BaseConsoleClient
from lib_console_api.application.ports.client import PrinterPayload
from lib_console_api.application.ports.values import ValuePort
from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.trace import Trace

_TAGGED_LEVELS = frozenset({LogLevel.DEBUG, LogLevel.ERROR, LogLevel.INFO, LogLevel.LOG, LogLevel.WARN})


class LoggingConsoleClient(BaseConsoleClient):
    """Write each printed record as one :mod:`logging` message."""

    def __init__(
        self,
        logger: logging.Logger | str = "lib_console_api.script",
        *,
        prefix: str = "js",
        values: ValuePort | None = None,
    ) -> None:
        super().__init__(values=values)
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._prefix = prefix

    @property
    def target(self) -> logging.Logger:
        return self._logger

    def printer(self, level: LogLevel, payload: PrinterPayload) -> None:
        if isinstance(payload, Trace):
            text = "\n".join(payload.render_lines())
        else:
            text = " ".join(self.values.to_string(item) for item in payload)
        tag = f"{self._prefix} {level.severity}" if level in _TAGGED_LEVELS else self._prefix
        self._logger.log(level.to_python_level(), "(%s) %s", tag, text)


__all__ = ["LoggingConsoleClient"]
