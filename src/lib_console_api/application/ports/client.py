"""Client port describing the sink a console dispatches into.

Purpose
-------
Define the four operations a host must provide for console records to become
visible: ``logger`` (normalisation), ``formatter`` (specifier substitution),
``printer`` (terminal rendering or storage), and ``clear``.

Contents
--------
* :class:`ConsoleClient` – runtime-checkable protocol.
* :data:`PrinterPayload` – flat value list or a :class:`Trace`.

System Role
-----------
Keeps the console independent of any rendering technology; adapters such as
the Rich client implement this protocol, usually by subclassing
:class:`lib_console_api.application.client.BaseConsoleClient`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, Union, runtime_checkable

from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.trace import Trace

PrinterPayload = Union[Sequence[Any], Trace]


@runtime_checkable
class ConsoleClient(Protocol):
    """Receive console records for rendering or storage."""

    def logger(self, level: LogLevel, args: list[Any]) -> Any:
        """Normalise ``args`` and hand them to :meth:`printer`."""

    def formatter(self, args: list[Any]) -> list[Any]:
        """Return ``args`` with format specifiers applied."""

    def printer(self, level: LogLevel, payload: PrinterPayload) -> Any:
        """Render or store a finished record."""

    def clear(self) -> None:
        """Clear the output surface when the environment supports it."""


__all__ = ["ConsoleClient", "PrinterPayload"]
