"""Built-in Rich palettes keyed by theme name and level name.

Themes are consumed by :class:`lib_console_api.config.ConsoleSettings` and the
``demo`` CLI command, letting documentation and the console adapter share one
source of colour options.
"""

from __future__ import annotations

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "DEBUG": "dim",
        "LOG": "default",
        "INFO": "cyan",
        "WARN": "yellow",
        "ERROR": "red",
        "ASSERT": "bold red",
        "TRACE": "magenta",
        "COUNT": "green",
        "COUNT_RESET": "dim green",
    },
    "dark": {
        "DEBUG": "grey42",
        "LOG": "grey85",
        "INFO": "bright_white",
        "WARN": "bold gold3",
        "ERROR": "bold red3",
        "ASSERT": "bold white on red3",
        "TRACE": "orchid",
        "COUNT": "spring_green3",
        "COUNT_RESET": "grey50",
    },
    "neon": {
        "DEBUG": "#00ffd5",
        "LOG": "#e0e0e0",
        "INFO": "#39ff14",
        "WARN": "#fff700",
        "ERROR": "#ff073a",
        "ASSERT": "bold #ff00ff on black",
        "TRACE": "#bc13fe",
        "COUNT": "#04d9ff",
        "COUNT_RESET": "#7df9ff",
    },
    "pastel": {
        "DEBUG": "aquamarine1",
        "LOG": "grey93",
        "INFO": "light_sky_blue1",
        "WARN": "khaki1",
        "ERROR": "light_salmon1",
        "ASSERT": "bold plum1",
        "TRACE": "thistle1",
        "COUNT": "pale_green1",
        "COUNT_RESET": "honeydew2",
    },
}


__all__ = ["CONSOLE_STYLE_THEMES"]
