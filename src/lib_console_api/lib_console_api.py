"""Console façade wiring the domain, application, and adapter layers together.

Purpose
-------
Expose a small, ergonomic API for hosts to build a console with sensible
defaults and to run the demonstration session used by the CLI.

Contents
--------
* :func:`create_console` – composition root for :class:`Console`.
* :func:`create_rich_client` / :func:`create_memory_client` – clients built
  from :class:`ConsoleSettings`.
* :func:`run_demo` – scripted session exercising every console method.
* :func:`summary_info` – metadata banner used by the CLI.

System Role
-----------
Outer shell of the package: inner layers never import from here.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console as RichConsole

from .adapters import MemoryConsoleClient, PythonCallStack, RichConsoleClient, ScriptedCallStack
from .application import Console
from .application.ports import CallStackPort, ConsoleClient, ValuePort
from .config import ConsoleSettings

logger = logging.getLogger(__name__)


def create_console(
    client: ConsoleClient | None = None,
    *,
    call_stack: CallStackPort | None = None,
    values: ValuePort | None = None,
) -> Console:
    """Return a :class:`Console` tracing Python frames unless told otherwise.

    The console references ``client`` weakly; keep your own reference.

    Examples
    --------
    >>> client = create_memory_client()
    >>> console = create_console(client)
    >>> console.count()
    >>> client.messages()
    ['default: 1']
    """
    if call_stack is None:
        call_stack = PythonCallStack()
    return Console(client, call_stack=call_stack, values=values)


def create_rich_client(
    settings: ConsoleSettings | None = None,
    *,
    console: RichConsole | None = None,
) -> RichConsoleClient:
    """Build a :class:`RichConsoleClient` from ``settings`` (environment by default)."""

    resolved = settings or ConsoleSettings.from_env()
    logger.debug("building rich console client with theme %s", resolved.theme)
    return RichConsoleClient(
        console=console,
        force_color=resolved.force_color,
        no_color=resolved.no_color,
        styles=dict(resolved.resolved_styles()),
    )


def create_memory_client(settings: ConsoleSettings | None = None) -> MemoryConsoleClient:
    """Build a :class:`MemoryConsoleClient` sized by ``settings.buffer_size``."""

    resolved = settings or ConsoleSettings()
    return MemoryConsoleClient(max_records=resolved.buffer_size)


def run_demo(
    *,
    theme: str | None = None,
    settings: ConsoleSettings | None = None,
    console: RichConsole | None = None,
) -> dict[str, Any]:
    """Drive every console method once through a Rich client.

    Parameters
    ----------
    theme:
        Palette name overriding ``settings.theme``.
    settings:
        Base settings; read from the environment when omitted.
    console:
        Optional Rich console (tests pass a recording console).

    Returns
    -------
    dict[str, Any]
        ``theme``, resolved ``styles`` and the final ``counters`` snapshot.

    Raises
    ------
    ValueError
        When ``theme`` is unknown.
    """
    base = settings or ConsoleSettings.from_env()
    resolved = ConsoleSettings(
        theme=theme or base.theme,
        force_color=base.force_color,
        no_color=base.no_color,
        buffer_size=base.buffer_size,
        styles=base.styles,
    )
    client = create_rich_client(resolved, console=console)
    stack = ScriptedCallStack([""])
    demo = Console(client, call_stack=stack)

    with stack.frame("main"):
        demo.log("Log message")
        demo.debug("Debug message")
        demo.info("Info message with", 2, "values")
        demo.warn("Warning: %s", "formatter hook receives this call")
        demo.error("Error message")
        with stack.frame("handleRequest"):
            demo.count()
            demo.count()
            demo.count("requests")
            demo.count_reset("requests")
            demo.count_reset("missing")
            demo.assert_(True, "never shown")
            demo.assert_(False, "expected", 42)
            demo.assert_(False, {"code": 500})
            demo.trace("inside", "handleRequest")

    return {
        "theme": resolved.theme,
        "styles": resolved.resolved_styles(),
        "counters": demo.counters.snapshot(),
    }


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "create_console",
    "create_memory_client",
    "create_rich_client",
    "run_demo",
    "summary_info",
]
