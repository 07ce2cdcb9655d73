"""Default Logger/Formatter pipeline shared by console clients.

Purpose
-------
Implement the normalisation every client runs before a record reaches its
printer: skip empty calls, pass single values straight through, and only
invoke the formatter when the first value looks like a format string.

Contents
--------
* :class:`BaseConsoleClient` – abstract client; subclasses supply ``printer``.

System Role
-----------
Application-layer policy reused by every bundled adapter. Hosts that need a
real specifier grammar override :meth:`BaseConsoleClient.formatter` without
touching the logger or printer contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lib_console_api.application.ports.client import ConsoleClient, PrinterPayload
from lib_console_api.application.ports.values import ValuePort
from lib_console_api.application.values import PythonValues
from lib_console_api.domain.levels import LogLevel


class BaseConsoleClient(ConsoleClient, ABC):
    """Client implementing ``logger`` and an identity ``formatter``.

    Parameters
    ----------
    values:
        Coercion used to inspect the first argument for ``%``; defaults to
        :class:`PythonValues`.
    """

    def __init__(self, *, values: ValuePort | None = None) -> None:
        self._values = values if values is not None else PythonValues()

    @property
    def values(self) -> ValuePort:
        """Return the value coercion shared with the printer."""

        return self._values

    def logger(self, level: LogLevel, args: list[Any]) -> Any:
        """Route ``args`` to :meth:`printer`, formatting when needed.

        A single argument is printed as-is and the printer's result returned.
        With several arguments the formatter only runs when the string form
        of the first one contains ``%``; the result is then ``None``.
        Conversion, formatter, and printer failures propagate.
        """
        if not args:
            return None
        first = args[0]
        if len(args) == 1:
            return self.printer(level, [first])
        if "%" not in self._values.to_string(first):
            self.printer(level, args)
        else:
            self.printer(level, self.formatter(args))
        return None

    def formatter(self, args: list[Any]) -> list[Any]:
        """Return ``args`` unchanged; no specifier grammar is applied."""

        return args

    @abstractmethod
    def printer(self, level: LogLevel, payload: PrinterPayload) -> Any:
        """Render or store a finished record."""

    def clear(self) -> None:
        """Do nothing; clients with a clearable surface override this."""


__all__ = ["BaseConsoleClient"]
