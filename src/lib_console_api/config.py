"""Configuration helpers: ``.env`` loading and console settings.

Purpose
-------
Resolve how the bundled clients should look (theme, colours, buffer size)
from keyword arguments and environment variables, optionally seeded from a
nearby ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :func:`should_use_dotenv` / :func:`enable_dotenv`.
* :class:`ConsoleSettings` – frozen settings object with :meth:`from_env`.
* :func:`resolve_styles` – theme plus overrides to a level-name style map.

System Role
-----------
Outer-layer configuration consumed by the CLI and by hosts wiring a
:class:`~lib_console_api.adapters.console.RichConsoleClient`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.palettes import CONSOLE_STYLE_THEMES

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "CONSOLE_USE_DOTENV"
DEFAULT_THEME = "classic"
DEFAULT_BUFFER_SIZE = 1000

_TRUTHY = {"1", "true", "yes", "on"}
_DOTENV_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    """
    if explicit is not None:
        return explicit
    return _is_truthy(env_value)


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Subsequent calls return the first result without reloading.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    if search_from is not None:
        candidate = _find_upwards(search_from)
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("no .env file found")
        return None
    load_dotenv(candidate, override=False)
    _DOTENV_PATH = candidate.resolve()
    logger.debug("loaded environment from %s", _DOTENV_PATH)
    return _DOTENV_PATH


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


def _is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def parse_console_styles(raw: str | None) -> dict[str, str]:
    """Convert ``LEVEL=style`` comma-separated strings into a dictionary.

    Examples
    --------
    >>> parse_console_styles('INFO=green, ERROR = bold red, junk')
    {'INFO': 'green', 'ERROR': 'bold red'}
    >>> parse_console_styles(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def resolve_styles(theme: str | None = None, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the palette for ``theme`` with ``overrides`` applied.

    Keys are normalised to :class:`LogLevel` member names.

    Examples
    --------
    >>> resolve_styles("classic", {"countReset": "blue"})["COUNT_RESET"]
    'blue'
    """
    key = (theme or DEFAULT_THEME).strip().lower()
    try:
        palette = CONSOLE_STYLE_THEMES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown console theme: {theme!r}") from exc
    styles = dict(palette)
    for name, style in (overrides or {}).items():
        styles[LogLevel.from_name(name).name] = style
    return styles


@dataclass(frozen=True)
class ConsoleSettings:
    """Presentation settings for the bundled console clients.

    Attributes
    ----------
    theme:
        Key into :data:`CONSOLE_STYLE_THEMES`.
    force_color / no_color:
        Colour switches handed to :class:`rich.console.Console`.
    buffer_size:
        Capacity of :class:`~lib_console_api.adapters.memory.MemoryConsoleClient`.
    styles:
        Per-level overrides applied on top of the theme.
    """

    theme: str = DEFAULT_THEME
    force_color: bool = False
    no_color: bool = False
    buffer_size: int = DEFAULT_BUFFER_SIZE
    styles: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        object.__setattr__(self, "theme", self.theme.strip().lower())
        if self.theme not in CONSOLE_STYLE_THEMES:
            raise ValueError(f"Unknown console theme: {self.theme!r}")
        object.__setattr__(self, "styles", dict(self.styles))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "ConsoleSettings":
        """Build settings from ``CONSOLE_*`` variables; keyword ``overrides`` win.

        Examples
        --------
        >>> ConsoleSettings.from_env({"CONSOLE_THEME": "Dark", "NO_COLOR": "1"}).no_color
        True
        """
        env = os.environ if environ is None else environ
        raw_size = env.get("CONSOLE_BUFFER_SIZE")
        try:
            buffer_size = int(raw_size) if raw_size else DEFAULT_BUFFER_SIZE
        except ValueError as exc:
            raise ValueError(f"CONSOLE_BUFFER_SIZE must be an integer, got {raw_size!r}") from exc
        values: dict[str, object] = {
            "theme": env.get("CONSOLE_THEME") or DEFAULT_THEME,
            "force_color": _is_truthy(env.get("CONSOLE_FORCE_COLOR")),
            "no_color": _is_truthy(env.get("CONSOLE_NO_COLOR")) or bool(env.get("NO_COLOR")),
            "buffer_size": buffer_size,
            "styles": parse_console_styles(env.get("CONSOLE_STYLES")),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]

    def resolved_styles(self) -> dict[str, str]:
        """Return the theme palette merged with :attr:`styles`."""

        return resolve_styles(self.theme, self.styles)


__all__ = [
    "ConsoleSettings",
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "parse_console_styles",
    "resolve_styles",
    "should_use_dotenv",
]
