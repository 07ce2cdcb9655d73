"""Rich-powered console client implementing :class:`ConsoleClient`.

Purpose
-------
Render console records to a terminal with per-level styling so script output
is readable next to the host's own logs.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleClient` - client built by the CLI ``demo`` command and by
  hosts that want terminal output.

System Role
-----------
Primary human-facing sink; honours theme overrides and the colour switches
resolved by :class:`lib_console_api.config.ConsoleSettings`.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console

from lib_console_api.application.client import BaseConsoleClient
from lib_console_api.application.ports.client import PrinterPayload
from lib_console_api.application.ports.values import ValuePort
from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.trace import Trace


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.LOG: "",
    LogLevel.INFO: "cyan",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.ASSERT: "bold red",
    LogLevel.TRACE: "magenta",
    LogLevel.COUNT: "green",
    LogLevel.COUNT_RESET: "dim green",
}

#: Default Rich styles keyed by :class:`LogLevel`.


class RichConsoleClient(BaseConsoleClient):
    """Render console records using Rich formatting with theme overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
        values: ValuePort | None = None,
    ) -> None:
        """Configure the client with colour and style overrides."""
        super().__init__(values=values)
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        if styles:
            merged = dict(_STYLE_MAP)
            for key, value in styles.items():
                level = LogLevel.from_name(key) if isinstance(key, str) else key
                merged[level] = value
            self._style_map = merged
        else:
            self._style_map = dict(_STYLE_MAP)

    @property
    def styles(self) -> dict[LogLevel, str]:
        return dict(self._style_map)

    def printer(self, level: LogLevel, payload: PrinterPayload) -> None:
        """Print ``payload`` on one line, or a trace on several.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> client = RichConsoleClient(console=console)
        >>> client.printer(LogLevel.WARN, ["disk", 93, "%"])
        >>> output = console.export_text()
        >>> 'WARN' in output and 'disk 93 %' in output
        True
        """
        style = "" if self._no_color else self._style_map.get(level, "")
        for line in self._format_lines(level, payload):
            self._console.print(line, style=style, highlight=False, markup=False)

    def clear(self) -> None:
        """Clear the terminal screen."""

        self._console.clear()

    def _format_lines(self, level: LogLevel, payload: PrinterPayload) -> list[str]:
        prefix = f"{level.icon} {level.severity.upper():>10}"
        if isinstance(payload, Trace):
            heading, *frames = payload.render_lines()
            return [f"{prefix} {heading}", *(f"{' ' * len(prefix)} {frame}" for frame in frames)]
        text = " ".join(self.values.to_string(item) for item in payload)
        return [f"{prefix} {text}"]


__all__ = ["RichConsoleClient"]
